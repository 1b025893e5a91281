"""Application main-loop logic: startup settings, rate counters and event routing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from enginecore.events import (
    BaseEvent,
    EventCharSet,
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
from enginecore.input import Input

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

TPS_SAMPLE_COUNT = 10
FPS_SAMPLE_COUNT = 50


def _leading_int(value: str) -> int:
    """Parse the integer at the start of ``value``, ignoring anything after it."""
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"invalid integer: {value!r}")
    return int(match.group(1))


@dataclass
class StartupSettings:
    """Window placement kept in the STARTUP region of the settings file."""

    window_size: tuple[int, int] = (0, 0)
    window_position: tuple[int, int] = (0, 0)
    maximized: bool = False
    fullscreen: bool = False

    def parse(self, name: str, value: str) -> None:
        """Apply one ``name=value`` entry; unknown names are ignored."""
        width, height = self.window_size
        x_pos, y_pos = self.window_position
        if name == "window_width":
            self.window_size = (_leading_int(value), height)
        elif name == "window_height":
            self.window_size = (width, _leading_int(value))
        elif name == "window_position_x":
            self.window_position = (_leading_int(value), y_pos)
        elif name == "window_position_y":
            self.window_position = (x_pos, _leading_int(value))
        elif name == "window_maximized":
            self.maximized = value == "true"
        elif name == "window_fullscreen":
            self.fullscreen = value == "true"

    def to_ini(self) -> str:
        """Return the region's entries as ``name=value`` lines."""
        width, height = self.window_size
        x_pos, y_pos = self.window_position
        entries = (
            ("window_width", str(width)),
            ("window_height", str(height)),
            ("window_position_x", str(x_pos)),
            ("window_position_y", str(y_pos)),
            ("window_maximized", "true" if self.maximized else "false"),
            ("window_fullscreen", "true" if self.fullscreen else "false"),
        )
        return "".join(f"{name}={value}\n" for name, value in entries)


class RateCounter:
    """Counts events per second, refreshed once every ``sample_count`` ticks."""

    def __init__(self, sample_count: int) -> None:
        self.sample_count = sample_count
        self.rate = 0
        self._count = 0
        self._elapsed = 0.0

    def tick(self, duration: float) -> int:
        """Record one event that took ``duration`` milliseconds; return the rate."""
        if self._count < self.sample_count:
            self._count += 1
            self._elapsed += duration
        else:
            if self._elapsed > 0:
                self.rate = int(self._count / self._elapsed * 1000.0)
            self._count = 0
            self._elapsed = 0.0
        return self.rate


class Application:
    """One step of the main loop and the routing of window events.

    Subclasses override the ``on_*`` hooks; the defaults keep simple
    statistics of what the loop did. Listeners for the application are
    registered on ``event_dispatcher``; window events go in through
    ``dispatch_system_event``.
    """

    def __init__(self, input_state: Optional[Input] = None) -> None:
        self.input = input_state if input_state is not None else Input()
        self.settings = StartupSettings()
        self.event_dispatcher = EventDispatcher()
        self.close_requested = False
        self.max_time_tps = 0.0
        self.tps_counter = RateCounter(TPS_SAMPLE_COUNT)
        self.fps_counter = RateCounter(FPS_SAMPLE_COUNT)
        self.updates = 0
        self.simulated_time = 0.0
        self.frames_rendered = 0
        self.ui_frames_rendered = 0
        self.last_key_delta = 0.0
        self._sum_time = 0.0
        self._system_dispatcher = EventDispatcher()
        self._init_system_events()

    @property
    def current_tps(self) -> int:
        return self.tps_counter.rate

    @property
    def current_fps(self) -> int:
        return self.fps_counter.rate

    def set_max_tps(self, max_tps: float) -> None:
        """Limit updates to about ``max_tps`` per second."""
        self.max_time_tps = 1000.0 / (max_tps + 1)

    def dispatch_system_event(self, event: BaseEvent) -> None:
        """Handle an event coming from the window."""
        self._system_dispatcher.dispatch(event)

    def step(self, duration: float) -> None:
        """Run one loop iteration after ``duration`` milliseconds have passed."""
        self._sum_time += duration
        if self._sum_time >= self.max_time_tps:
            self.on_update(self._sum_time)
            self.tps_counter.tick(self._sum_time)
            self._sum_time = 0.0
        self.on_render()
        self.on_ui_render()
        self.on_key_update(duration)
        self.fps_counter.tick(duration)

    def on_update(self, delta: float) -> None:
        """Advance the simulation by ``delta`` milliseconds."""
        self.updates += 1
        self.simulated_time += delta

    def on_render(self) -> None:
        """Draw the scene; the default counts rendered frames."""
        self.frames_rendered += 1

    def on_ui_render(self) -> None:
        """Draw the user interface; the default counts UI frames."""
        self.ui_frames_rendered += 1

    def on_key_update(self, delta: float) -> None:
        """React to held keys over ``delta`` milliseconds."""
        self.last_key_delta = delta

    def _forward(self, event: BaseEvent) -> None:
        self.event_dispatcher.dispatch(event)

    def _on_resize(self, event: EventWindowResize) -> None:
        if event.width != 0 and event.height != 0:
            self._forward(event)

    def _on_key_pressed(self, event: EventKeyPressed) -> None:
        self._forward(event)
        self.input.press_key(event.key_code)

    def _on_key_released(self, event: EventKeyReleased) -> None:
        self._forward(event)
        self.input.release_key(event.key_code)

    def _on_close(self, event: EventWindowClose) -> None:
        self._forward(event)
        self.close_requested = True

    def _on_button_pressed(self, event: EventMouseButtonPressed) -> None:
        self._forward(event)
        self.input.press_mouse_button(event.mouse_button)

    def _on_button_released(self, event: EventMouseButtonReleased) -> None:
        self._forward(event)
        self.input.release_mouse_button(event.mouse_button)

    def _on_maximize(self, event: EventMaximizeWindow) -> None:
        self.settings.maximized = event.is_maximized
        self._forward(event)

    def _on_move(self, event: EventMoveWindow) -> None:
        self.settings.window_position = (event.x_pos, event.y_pos)
        self._forward(event)

    def _init_system_events(self) -> None:
        listeners = {
            EventWindowResize: self._on_resize,
            EventKeyPressed: self._on_key_pressed,
            EventCharSet: self._forward,
            EventKeyReleased: self._on_key_released,
            EventMouseMoved: self._forward,
            EventMouseScrolled: self._forward,
            EventWindowClose: self._on_close,
            EventMouseButtonPressed: self._on_button_pressed,
            EventMouseButtonReleased: self._on_button_released,
            EventMaximizeWindow: self._on_maximize,
            EventMoveWindow: self._on_move,
        }
        for event_class, listener in listeners.items():
            self._system_dispatcher.add_event_listener(event_class, listener)