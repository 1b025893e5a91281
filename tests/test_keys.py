import pytest

from enginecore.keys import KeyCode, MouseButton


def test_letter_codes_match_ascii():
    assert KeyCode(65) is KeyCode.KEY_A
    assert KeyCode(ord("Z")) is KeyCode.KEY_Z


def test_key_aliases():
    assert KeyCode(348) is KeyCode.KEY_LAST
    assert KeyCode(2) is KeyCode.MOUSE_BUTTON_MIDDLE
    assert KeyCode(0) is KeyCode.MOUSE_BUTTON_LEFT


def test_mouse_button_aliases():
    assert MouseButton(7) is MouseButton.MOUSE_BUTTON_LAST
    assert MouseButton(1) is MouseButton.MOUSE_BUTTON_RIGHT
    assert (
        MouseButton(KeyCode.MOUSE_BUTTON_MIDDLE.value)
        is MouseButton.MOUSE_BUTTON_MIDDLE
    )


def test_lookup_by_value():
    assert KeyCode(348) is KeyCode.KEY_MENU
    assert KeyCode(0) is KeyCode.MOUSE_BUTTON_1


def test_lookup_unknown_value_raises():
    with pytest.raises(ValueError):
        KeyCode(1000)


@pytest.mark.parametrize(
    "key", [KeyCode.KEY_SPACE, KeyCode.KEY_A, KeyCode.KEY_9, KeyCode.KEY_WORLD_2]
)
def test_printable_keys(key):
    assert key.is_printable() is True


@pytest.mark.parametrize(
    "key",
    [KeyCode.KEY_UNKNOWN, KeyCode.KEY_ESCAPE, KeyCode.MOUSE_BUTTON_1, KeyCode.KEY_MENU],
)
def test_non_printable_keys(key):
    assert key.is_printable() is False