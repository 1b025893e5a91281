"""Translation of windowing-layer callbacks into engine events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Union

from enginecore.events import (
    BaseEvent,
    EventKeyPressed,
    EventKeyReleased,
    EventMaximizeWindow,
    EventMouseButtonPressed,
    EventMouseButtonReleased,
    EventMoveWindow,
    EventWindowResize,
)
from enginecore.keys import KeyCode, MouseButton

_DEBUG_SOURCES = {
    0x8246: "DEBUG SOURCE API",
    0x8247: "DEBUG SOURCE WINDOW SYSTEM",
    0x8248: "DEBUG SOURCE SHADER COMPILER",
    0x8249: "DEBUG SOURCE THIRD PARTY",
    0x824A: "DEBUG SOURCE APPLICATION",
    0x824B: "DEBUG SOURCE OTHER",
}

_DEBUG_TYPES = {
    0x824C: "DEBUG TYPE ERROR",
    0x824D: "DEBUG TYPE DEPRECATED BEHAVIOR",
    0x824E: "DEBUG TYPE UNDEFINED BEHAVIOR",
    0x824F: "DEBUG TYPE PORTABILITY",
    0x8250: "DEBUG TYPE PERFORMANCE",
    0x8268: "DEBUG TYPE MARKER",
    0x8269: "DEBUG TYPE PUSH GROUP",
    0x826A: "DEBUG TYPE POP GROUP",
    0x8251: "DEBUG TYPE OTHER",
}


def gl_debug_source_name(source: int) -> str:
    """Return the display name of a graphics debug message source."""
    return _DEBUG_SOURCES.get(source, "DEBUG SOURCE UNKNOWN")


def gl_debug_type_name(debug_type: int) -> str:
    """Return the display name of a graphics debug message type."""
    return _DEBUG_TYPES.get(debug_type, "DEBUG TYPE UNKNOWN")


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


def key_event(key: Union[KeyCode, int], action: Union[Action, int]) -> BaseEvent:
    """Return the event for a key callback."""
    code = KeyCode(key)
    kind = Action(action)
    if kind is Action.RELEASE:
        return EventKeyReleased(code)
    return EventKeyPressed(code, kind is Action.REPEAT)


def mouse_button_event(
    button: Union[MouseButton, int],
    action: Union[Action, int],
    x_pos: float,
    y_pos: float,
) -> Optional[BaseEvent]:
    """Return the event for a mouse button callback; None for a repeat."""
    code = MouseButton(button)
    kind = Action(action)
    if kind is Action.PRESS:
        return EventMouseButtonPressed(code, x_pos, y_pos)
    if kind is Action.RELEASE:
        return EventMouseButtonReleased(code, x_pos, y_pos)
    return None


@dataclass
class WindowState:
    """Data a window keeps and the callback its events are sent to."""

    title: str = ""
    window_size: tuple[int, int] = (0, 0)
    window_position: tuple[int, int] = (0, 0)
    maximized: bool = False
    fullscreen: bool = False
    event_callback: Optional[Callable[[BaseEvent], None]] = None

    def _emit(self, event: BaseEvent) -> BaseEvent:
        if self.event_callback is not None:
            self.event_callback(event)
        return event

    def resize(self, width: int, height: int) -> EventWindowResize:
        """Record the new size and send a resize event."""
        self.window_size = (width, height)
        return self._emit(EventWindowResize(width, height))

    def move(self, x_pos: int, y_pos: int) -> EventMoveWindow:
        """Send a move event; the stored position is the restore position and stays."""
        return self._emit(EventMoveWindow(x_pos, y_pos))

    def maximize(self, maximized: Union[bool, int]) -> EventMaximizeWindow:
        """Send a maximize event; a value of 1 (or True) means maximized."""
        return self._emit(EventMaximizeWindow(maximized == 1))