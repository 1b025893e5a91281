"""Editor panels for an object's transform and highlight settings."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional

Triple = tuple[float, float, float]

TransformCallback = Callable[[Triple, "TransformProp"], None]
HighlightCallback = Callable[[Triple, bool, bool], None]


def _triple(values: Iterable[float]) -> Triple:
    x, y, z = values
    return (float(x), float(y), float(z))


class TransformProp(Enum):
    """Which transform property an edit changed."""

    POSITION = "position"
    SCALE = "scale"
    ROTATION = "rotation"


class TransformLayout:
    """Holds the values shown in the transform panel and reports edits."""

    def __init__(self, on_change: Optional[TransformCallback] = None) -> None:
        self.on_change = on_change
        self.position: Triple = (0.0, 0.0, 0.0)
        self.scale: Triple = (1.0, 1.0, 1.0)
        self.rotation: Triple = (0.0, 0.0, 0.0)

    def set_props(
        self,
        position: Iterable[float],
        scale: Iterable[float],
        rotation: Iterable[float],
    ) -> None:
        """Show the given values without reporting a change."""
        self.position = _triple(position)
        self.scale = _triple(scale)
        self.rotation = _triple(rotation)

    def edit(self, prop: TransformProp, values: Iterable[float]) -> Triple:
        """Set one property as the user would and report it; return the new value."""
        kind = TransformProp(prop)
        value = _triple(values)
        setattr(self, kind.value, value)
        self._notify(value, kind)
        return value

    def reset_position(self) -> None:
        self.edit(TransformProp.POSITION, (0.0, 0.0, 0.0))

    def reset_scale(self) -> None:
        self.edit(TransformProp.SCALE, (1.0, 1.0, 1.0))

    def reset_rotation(self) -> None:
        self.edit(TransformProp.ROTATION, (0.0, 0.0, 0.0))

    def _notify(self, value: Triple, prop: TransformProp) -> None:
        if self.on_change is not None:
            self.on_change(value, prop)


class HighlightLayout:
    """Holds the highlight panel's colour, active flag and mode, and reports edits."""

    def __init__(self, on_change: Optional[HighlightCallback] = None) -> None:
        self.on_change = on_change
        self.color: Triple = (0.0, 0.0, 0.0)
        self.is_active = False
        self.mode = False

    def set_color(self, color: Iterable[float]) -> None:
        """Show ``color`` and mark the highlight active, without reporting a change."""
        self.is_active = True
        self.color = _triple(color)

    def edit(self, color: Iterable[float], is_active: bool, mode: bool) -> None:
        """Apply the user's settings and report them."""
        self.color = _triple(color)
        self.is_active = bool(is_active)
        self.mode = bool(mode)
        if self.on_change is not None:
            self.on_change(self.color, self.is_active, self.mode)