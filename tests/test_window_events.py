import pytest

from enginecore.events import (
    EventKeyPressed,
    EventKeyReleased,
    EventMaximizeWindow,
    EventMouseButtonPressed,
    EventMouseButtonReleased,
    EventMoveWindow,
    EventWindowResize,
)
from enginecore.keys import KeyCode, MouseButton
from enginecore.window_events import (
    Action,
    WindowState,
    gl_debug_source_name,
    gl_debug_type_name,
    key_event,
    mouse_button_event,
)


def test_debug_source_names():
    assert gl_debug_source_name(0x8246) == "DEBUG SOURCE API"
    assert gl_debug_source_name(0x824A) == "DEBUG SOURCE APPLICATION"
    assert gl_debug_source_name(0) == "DEBUG SOURCE UNKNOWN"


def test_debug_type_names():
    assert gl_debug_type_name(0x824C) == "DEBUG TYPE ERROR"
    assert gl_debug_type_name(0x826A) == "DEBUG TYPE POP GROUP"
    assert gl_debug_type_name(1) == "DEBUG TYPE UNKNOWN"


def test_key_press_repeat_release():
    assert key_event(KeyCode.KEY_A, Action.PRESS) == EventKeyPressed(KeyCode.KEY_A, False)
    assert key_event(KeyCode.KEY_A, Action.REPEAT) == EventKeyPressed(KeyCode.KEY_A, True)
    assert key_event(KeyCode.KEY_A, Action.RELEASE) == EventKeyReleased(KeyCode.KEY_A)


def test_key_event_accepts_raw_ints():
    event = key_event(int(KeyCode.KEY_ESCAPE), int(Action.PRESS))
    assert event.key_code is KeyCode.KEY_ESCAPE


def test_key_event_rejects_unknown_action():
    with pytest.raises(ValueError):
        key_event(KeyCode.KEY_A, 7)


def test_mouse_button_events():
    pressed = mouse_button_event(MouseButton.MOUSE_BUTTON_LEFT, Action.PRESS, 3.5, 4.5)
    released = mouse_button_event(MouseButton.MOUSE_BUTTON_LEFT, Action.RELEASE, 3.5, 4.5)
    assert pressed == EventMouseButtonPressed(MouseButton.MOUSE_BUTTON_LEFT, 3.5, 4.5)
    assert released == EventMouseButtonReleased(MouseButton.MOUSE_BUTTON_LEFT, 3.5, 4.5)


def test_mouse_button_repeat_gives_nothing():
    assert mouse_button_event(MouseButton.MOUSE_BUTTON_RIGHT, Action.REPEAT, 0.0, 0.0) is None


def test_resize_updates_size_and_calls_back():
    seen = []
    state = WindowState(title="main", window_size=(10, 10), event_callback=seen.append)
    event = state.resize(320, 240)
    assert state.window_size == (320, 240)
    assert seen == [EventWindowResize(320, 240)]
    assert event == seen[0]


def test_move_keeps_stored_position():
    seen = []
    state = WindowState(window_position=(1, 2), event_callback=seen.append)
    state.move(50, 60)
    assert seen == [EventMoveWindow(50, 60)]
    assert state.window_position == (1, 2)


def test_maximize_values():
    state = WindowState()
    assert state.maximize(1) == EventMaximizeWindow(True)
    assert state.maximize(0) == EventMaximizeWindow(False)


def test_emit_without_callback_still_returns_event():
    state = WindowState()
    assert state.resize(5, 6) == EventWindowResize(5, 6)
    assert state.window_size == (5, 6)