import pytest

from enginecore.application import Application, RateCounter, StartupSettings
from enginecore.events import (
    EventCharSet,
    EventKeyPressed,
    EventKeyReleased,
    EventMaximizeWindow,
    EventMouseButtonPressed,
    EventMouseButtonReleased,
    EventMoveWindow,
    EventWindowClose,
    EventWindowResize,
)
from enginecore.input import Input
from enginecore.keys import KeyCode, MouseButton


class RecordingApp(Application):
    def __init__(self, input_state=None):
        super().__init__(input_state)
        self.calls = []

    def on_update(self, delta):
        self.calls.append(("update", delta))

    def on_render(self):
        self.calls.append(("render",))

    def on_ui_render(self):
        self.calls.append(("ui",))

    def on_key_update(self, delta):
        self.calls.append(("keys", delta))


def test_startup_round_trip():
    original = StartupSettings((800, 600), (-5, 40), True, False)
    restored = StartupSettings()
    for line in original.to_ini().splitlines():
        name, value = line.split("=", 1)
        restored.parse(name, value)
    assert restored == original


def test_startup_ini_lines_names_and_flags():
    lines = StartupSettings((1, 2), (3, 4), False, True).to_ini().splitlines()
    names = [line.split("=")[0] for line in lines]
    assert names == [
        "window_width",
        "window_height",
        "window_position_x",
        "window_position_y",
        "window_maximized",
        "window_fullscreen",
    ]
    assert lines[4] == "window_maximized=false"
    assert lines[5] == "window_fullscreen=true"


def test_startup_parse_ignores_unknown_and_reads_leading_digits():
    settings = StartupSettings()
    settings.parse("something_else", "7")
    settings.parse("window_width", " 640px")
    assert settings.window_size == (640, 0)
    assert settings.window_position == (0, 0)


def test_startup_parse_bool_only_true_word():
    settings = StartupSettings(maximized=True)
    settings.parse("window_maximized", "yes")
    assert settings.maximized is False


def test_startup_parse_rejects_non_number():
    with pytest.raises(ValueError):
        StartupSettings().parse("window_height", "abc")


def test_rate_counter_updates_after_samples():
    counter = RateCounter(4)
    for _ in range(4):
        assert counter.tick(10.0) == 0
    assert counter.tick(10.0) == 100
    assert counter.rate == 100


def test_rate_counter_keeps_rate_with_no_elapsed_time():
    counter = RateCounter(1)
    counter.tick(0.0)
    assert counter.tick(0.0) == 0


def test_key_events_update_input_and_forward():
    state = Input()
    app = Application(state)
    seen = []
    app.event_dispatcher.add_event_listener(EventKeyPressed, seen.append)
    event = EventKeyPressed(KeyCode.KEY_W, False)
    app.dispatch_system_event(event)
    assert state.is_key_pressed(KeyCode.KEY_W)
    assert seen == [event]
    app.dispatch_system_event(EventKeyReleased(KeyCode.KEY_W))
    assert not state.is_key_pressed(KeyCode.KEY_W)


def test_mouse_buttons_update_input():
    app = Application()
    app.dispatch_system_event(EventMouseButtonPressed(MouseButton.MOUSE_BUTTON_MIDDLE, 1.0, 2.0))
    assert app.input.is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_MIDDLE)
    app.dispatch_system_event(EventMouseButtonReleased(MouseButton.MOUSE_BUTTON_MIDDLE, 1.0, 2.0))
    assert not app.input.is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_MIDDLE)


def test_close_requests_close_and_forwards():
    app = Application()
    seen = []
    app.event_dispatcher.add_event_listener(EventWindowClose, seen.append)
    app.dispatch_system_event(EventWindowClose())
    assert app.close_requested is True
    assert len(seen) == 1


def test_resize_with_zero_side_is_not_forwarded():
    app = Application()
    seen = []
    app.event_dispatcher.add_event_listener(EventWindowResize, seen.append)
    app.dispatch_system_event(EventWindowResize(0, 300))
    app.dispatch_system_event(EventWindowResize(400, 300))
    assert seen == [EventWindowResize(400, 300)]


def test_move_and_maximize_update_settings():
    app = Application()
    app.dispatch_system_event(EventMoveWindow(12, 34))
    app.dispatch_system_event(EventMaximizeWindow(True))
    assert app.settings.window_position == (12, 34)
    assert app.settings.maximized is True


def test_char_event_forwarded():
    app = Application()
    seen = []
    app.event_dispatcher.add_event_listener(EventCharSet, seen.append)
    app.dispatch_system_event(EventCharSet("x"))
    assert seen == [EventCharSet("x")]


def test_set_max_tps():
    app = Application()
    app.set_max_tps(9)
    assert app.max_time_tps == pytest.approx(100.0)


def test_step_accumulates_until_tick_time():
    state = Input()
    app = RecordingApp(state)
    assert app.input is state
    app.set_max_tps(9)
    app.step(60.0)
    assert ("update", 60.0) not in app.calls
    assert app.calls == [("render",), ("ui",), ("keys", 60.0)]
    app.calls.clear()
    app.step(60.0)
    assert app.calls[0] == ("update", 120.0)
    assert app.calls[1:] == [("render",), ("ui",), ("keys", 60.0)]


def test_step_without_limit_updates_every_time():
    state = Input()
    app = RecordingApp(state)
    assert app.input is state
    for _ in range(3):
        app.step(5.0)
    updates = [call for call in app.calls if call[0] == "update"]
    assert updates == [("update", 5.0)] * 3