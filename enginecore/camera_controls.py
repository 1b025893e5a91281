"""Editor camera movement from held keys and middle-button mouse drags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from enginecore.geometry import Vec3
from enginecore.input import Input
from enginecore.keys import KeyCode

# Checked in order; only the first held key moves the camera.
# Each entry: key, True for rotation (False for movement), axis, sign.
_KEY_BINDINGS = (
    (KeyCode.KEY_W, False, "z", 1.0),
    (KeyCode.KEY_S, False, "z", -1.0),
    (KeyCode.KEY_A, False, "x", -1.0),
    (KeyCode.KEY_D, False, "x", 1.0),
    (KeyCode.KEY_SPACE, False, "y", 1.0),
    (KeyCode.KEY_LEFT_SHIFT, False, "y", -1.0),
    (KeyCode.KEY_UP, True, "x", 1.0),
    (KeyCode.KEY_DOWN, True, "x", -1.0),
    (KeyCode.KEY_LEFT, True, "y", -1.0),
    (KeyCode.KEY_RIGHT, True, "y", 1.0),
    (KeyCode.KEY_Q, True, "z", 1.0),
    (KeyCode.KEY_E, True, "z", -1.0),
)


def _axis_vector(axis: str, amount: float) -> Vec3:
    return Vec3(**{axis: amount})


@dataclass
class CameraControls:
    """Speeds and options for steering the editor camera."""

    velocity: float = 0.01
    rotate_velocity: float = 0.05
    add_ctrl_speed: float = 2.0
    sensitivity: float = 0.1
    inverse_mouse_y: bool = False

    def key_deltas(self, input_state: Input, delta: float) -> tuple[Vec3, Vec3]:
        """Return (movement, rotation) for the keys held over ``delta`` milliseconds.

        Holding left control multiplies the speed by ``add_ctrl_speed``.
        """
        speed = (
            self.add_ctrl_speed
            if input_state.is_key_pressed(KeyCode.KEY_LEFT_CONTROL)
            else 1.0
        )
        for key, rotates, axis, sign in _KEY_BINDINGS:
            if input_state.is_key_pressed(key):
                base = self.rotate_velocity if rotates else self.velocity
                step = _axis_vector(axis, sign * speed * base * delta)
                return (Vec3(), step) if rotates else (step, Vec3())
        return Vec3(), Vec3()

    def mouse_drag(
        self,
        rotation: Iterable[float],
        start: Iterable[float],
        current: Iterable[float],
    ) -> Vec3:
        """Add the turn from dragging the cursor from ``start`` to ``current``."""
        rx, ry, rz = rotation
        start_x, start_y = start
        cur_x, cur_y = current
        turn_y = (start_x - cur_x) * self.sensitivity
        new_y = ry + turn_y if self.inverse_mouse_y else ry - turn_y
        new_x = rx + (start_y - cur_y) * self.sensitivity
        return Vec3(new_x, new_y, rz)