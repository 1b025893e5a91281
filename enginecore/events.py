"""Window and input events and a dispatcher routing them to listeners."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, ClassVar

from enginecore.keys import KeyCode, MouseButton


class EventType(IntEnum):
    """Kinds of events the window reports."""

    WINDOW_RESIZE = 0
    WINDOW_CLOSE = 1
    KEY_PRESSED = 2
    KEY_RELEASED = 3
    MOUSE_BUTTON_PRESSED = 4
    MOUSE_BUTTON_RELEASED = 5
    MOUSE_MOVED = 6
    MOUSE_SCROLLED = 7
    MAXIMIZE_WINDOW = 8
    MOVE_WINDOW = 9
    CHAR_SET = 10


class BaseEvent:
    """Base of all events; every concrete event class sets ``type``."""

    type: ClassVar[EventType]

    def get_type(self) -> EventType:
        return self.type


@dataclass
class EventMouseMoved(BaseEvent):
    x: float
    y: float
    type: ClassVar[EventType] = EventType.MOUSE_MOVED


@dataclass
class EventWindowResize(BaseEvent):
    width: int
    height: int
    type: ClassVar[EventType] = EventType.WINDOW_RESIZE


@dataclass
class EventWindowClose(BaseEvent):
    type: ClassVar[EventType] = EventType.WINDOW_CLOSE


@dataclass
class EventCharSet(BaseEvent):
    key_char: str
    type: ClassVar[EventType] = EventType.CHAR_SET


@dataclass
class EventKeyPressed(BaseEvent):
    key_code: KeyCode
    repeated: bool
    type: ClassVar[EventType] = EventType.KEY_PRESSED


@dataclass
class EventKeyReleased(BaseEvent):
    key_code: KeyCode
    type: ClassVar[EventType] = EventType.KEY_RELEASED


@dataclass
class EventMouseButtonPressed(BaseEvent):
    mouse_button: MouseButton
    x_pos: float
    y_pos: float
    type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED


@dataclass
class EventMouseButtonReleased(BaseEvent):
    mouse_button: MouseButton
    x_pos: float
    y_pos: float
    type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED


@dataclass
class EventMaximizeWindow(BaseEvent):
    is_maximized: bool
    type: ClassVar[EventType] = EventType.MAXIMIZE_WINDOW


@dataclass
class EventMoveWindow(BaseEvent):
    x_pos: int
    y_pos: int
    type: ClassVar[EventType] = EventType.MOVE_WINDOW


@dataclass
class EventMouseScrolled(BaseEvent):
    x_offset: float
    y_offset: float
    type: ClassVar[EventType] = EventType.MOUSE_SCROLLED


class EventDispatcher:
    """Holds at most one listener per event type and calls it on dispatch."""

    def __init__(self) -> None:
        self._callbacks: dict[EventType, Callable[[BaseEvent], None]] = {}

    def add_event_listener(
        self, event_class: type[BaseEvent], callback: Callable[[BaseEvent], None]
    ) -> None:
        """Set the listener for events of ``event_class``, replacing any earlier one."""
        if not (isinstance(event_class, type) and issubclass(event_class, BaseEvent)):
            raise TypeError(f"{event_class!r} is not an event class")
        event_type = getattr(event_class, "type", None)
        if not isinstance(event_type, EventType):
            raise TypeError(f"{event_class.__name__} has no event type")
        self._callbacks[event_type] = callback

    def dispatch(self, event: BaseEvent) -> None:
        """Call the listener registered for the event's type, if there is one."""
        callback = self._callbacks.get(event.get_type())
        if callback is not None:
            callback(event)