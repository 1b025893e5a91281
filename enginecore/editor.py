"""Editor state driven by window events: mouse picking, scrolling and FPS."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Union

from enginecore import logsystem
from enginecore.events import (
    EventDispatcher,
    EventKeyPressed,
    EventKeyReleased,
    EventMaximizeWindow,
    EventMouseButtonPressed,
    EventMouseButtonReleased,
    EventMouseMoved,
    EventMouseScrolled,
    EventMoveWindow,
    EventWindowClose,
    EventWindowResize,
)
from enginecore.geometry import Vec3
from enginecore.input import Input

MouseLocator = Callable[[float, float], Iterable[float]]


def _vec(value: Iterable[float]) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3(*value)


class FpsAverager:
    """Counts frames per second and averages the last ``sample_count`` seconds."""

    def __init__(self, sample_count: int) -> None:
        if sample_count < 1:
            raise ValueError("sample_count must be at least 1")
        self.sample_count = sample_count
        self.fps = 0
        self._samples = [0] * sample_count
        self._sample_index = 0
        self._frames = 0
        self._elapsed = 0.0

    def tick(self, delta: float) -> int:
        """Record one frame that took ``delta`` milliseconds; return the average."""
        self._frames += 1
        self._elapsed += delta
        if self._elapsed >= 1000:
            self._samples[self._sample_index] = self._frames
            self._sample_index += 1
            if self._sample_index >= self.sample_count:
                self.fps = int(sum(self._samples) / self.sample_count)
                self._sample_index = 0
            self._elapsed = 0.0
            self._frames = 0
        return self.fps


def mouse_direction(
    world_position: Iterable[float], camera_position: Iterable[float]
) -> Vec3:
    """Return the unit vector from the camera towards the mouse's world position."""
    return (_vec(world_position) - _vec(camera_position)).normalized()


def place_along(
    origin: Iterable[float], direction: Iterable[float], distance: float
) -> Vec3:
    """Return the point ``distance`` along ``direction`` from ``origin``."""
    return _vec(origin) + _vec(direction) * distance


class EditorState:
    """What the editor tracks from window events."""

    def __init__(self, input_state: Optional[Input] = None, distance: float = 10.0) -> None:
        self.input = input_state if input_state is not None else Input()
        self.distance = distance
        self.mouse_position: tuple[float, float] = (0.0, 0.0)
        self.init_mouse_position: tuple[float, float] = (0.0, 0.0)
        self.world_mouse_position = Vec3()
        self.world_mouse_direction = Vec3()
        self.camera_position = Vec3()
        self.locate_mouse: Optional[MouseLocator] = None
        self.viewport_size: tuple[int, int] = (0, 0)
        self.window_position: tuple[int, int] = (0, 0)
        self.maximized = False
        self.close_requested = False

    def register(self, dispatcher: EventDispatcher) -> None:
        """Install the editor's listeners on ``dispatcher``."""
        listeners = {
            EventWindowResize: self._on_resize,
            EventKeyPressed: self._on_key_pressed,
            EventKeyReleased: self._on_key_released,
            EventMouseMoved: self._on_mouse_moved_event,
            EventMouseScrolled: self.on_scroll,
            EventWindowClose: self._on_close,
            EventMouseButtonPressed: self.on_mouse_button,
            EventMouseButtonReleased: self.on_mouse_button,
            EventMaximizeWindow: self._on_maximize,
            EventMoveWindow: self._on_move,
        }
        for event_class, listener in listeners.items():
            dispatcher.add_event_listener(event_class, listener)

    def on_scroll(self, event: EventMouseScrolled) -> float:
        """Change the placing distance, keeping it above zero; return it."""
        logsystem.info("[EVENT] Scroll: {0}x{1}", event.x_offset, event.y_offset)
        if self.distance + event.y_offset > 0:
            self.distance += event.y_offset
        return self.distance

    def on_mouse_moved(
        self,
        event: EventMouseMoved,
        world_position: Iterable[float],
        camera_position: Iterable[float],
    ) -> Vec3:
        """Record the mouse's screen and world position; return its world direction."""
        self.world_mouse_position = _vec(world_position)
        self.camera_position = _vec(camera_position)
        self.world_mouse_direction = mouse_direction(
            self.world_mouse_position, self.camera_position
        )
        self.mouse_position = (event.x, event.y)
        logsystem.info("[EVENT] Mouse moved to {0}x{1}", event.x, event.y)
        return self.world_mouse_direction

    def on_mouse_button(
        self, event: Union[EventMouseButtonPressed, EventMouseButtonReleased]
    ) -> None:
        """Update the button state and remember where the drag starts."""
        if isinstance(event, EventMouseButtonPressed):
            logsystem.info(
                "[EVENT] Mouse button pressed at ({0}x{1})", event.x_pos, event.y_pos
            )
            self.input.press_mouse_button(event.mouse_button)
        elif isinstance(event, EventMouseButtonReleased):
            logsystem.info(
                "[EVENT] Mouse button released at ({0}x{1})", event.x_pos, event.y_pos
            )
            self.input.release_mouse_button(event.mouse_button)
        else:
            raise TypeError(f"{event!r} is not a mouse button event")
        self.init_mouse_position = (event.x_pos, event.y_pos)

    def _on_mouse_moved_event(self, event: EventMouseMoved) -> None:
        if self.locate_mouse is None:
            self.mouse_position = (event.x, event.y)
            return
        self.on_mouse_moved(
            event, self.locate_mouse(event.x, event.y), self.camera_position
        )

    def _on_resize(self, event: EventWindowResize) -> None:
        logsystem.info("[EVENT] Resize: {0}x{1}", event.width, event.height)
        if event.width != 0 and event.height != 0:
            self.viewport_size = (event.width, event.height)

    def _on_key_pressed(self, event: EventKeyPressed) -> None:
        if event.key_code.is_printable():
            verb = "repeated" if event.repeated else "pressed"
            logsystem.info("[EVENT] Key {0} {1}", verb, event.key_code.name)
        self.input.press_key(event.key_code)

    def _on_key_released(self, event: EventKeyReleased) -> None:
        if event.key_code.is_printable():
            logsystem.info("[EVENT] Key released {0}", event.key_code.name)
        self.input.release_key(event.key_code)

    def _on_close(self, event: EventWindowClose) -> None:
        logsystem.info("[EVENT] Window close")
        self.close_requested = True

    def _on_maximize(self, event: EventMaximizeWindow) -> None:
        logsystem.info("[EVENT] Maximized window: {0}", event.is_maximized)
        self.maximized = event.is_maximized

    def _on_move(self, event: EventMoveWindow) -> None:
        logsystem.info("[EVENT] Move window to: {0}x{1}", event.x_pos, event.y_pos)
        self.window_position = (event.x_pos, event.y_pos)