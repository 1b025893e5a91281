"""Countdown timers that call back once when they run out."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Timer:
    """Counts down from a started duration and calls ``callback`` at zero."""

    def __init__(self, callback: Optional[Callable[[], Any]] = None) -> None:
        self.callback = callback
        self.time_left = 0.0
        self.is_running = False

    def start(self, duration: float) -> None:
        """Start (or restart) the countdown."""
        self.time_left = duration
        self.is_running = True

    def _advance(self, delta: float) -> bool:
        """Move the countdown on; return True when it has just run out."""
        if not self.is_running:
            return False
        self.time_left -= delta
        if self.time_left <= 0:
            self.is_running = False
            return True
        return False

    def update(self, delta: float) -> None:
        if self._advance(delta) and self.callback is not None:
            self.callback()


class TemplateTimer(Timer, Generic[T]):
    """A timer whose callback receives a fixed argument."""

    def __init__(
        self, callback_arg: T, callback: Optional[Callable[[T], Any]] = None
    ) -> None:
        super().__init__()
        self.callback_arg = callback_arg
        self.callback = callback

    def update(self, delta: float) -> None:
        if self._advance(delta) and self.callback is not None:
            self.callback(self.callback_arg)