"""Position, scale and rotation of a game object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from enginecore.geometry import Matrix, Vec3, model_matrix


@dataclass
class Transform:
    """Where an object is, how large it is and how it is turned (degrees)."""

    position: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    rotation: Vec3 = field(default_factory=Vec3)

    def add_position(self, delta: Iterable[float]) -> None:
        self.position = self.position + delta

    def add_rotation(self, delta: Iterable[float]) -> None:
        self.rotation = self.rotation + delta

    def set_position_x(self, value: float) -> None:
        self.position = replace(self.position, x=value)

    def set_position_y(self, value: float) -> None:
        self.position = replace(self.position, y=value)

    def set_position_z(self, value: float) -> None:
        self.position = replace(self.position, z=value)

    def model_matrix(self) -> Matrix:
        """Return the model matrix for this transform."""
        return model_matrix(self.position, self.rotation, self.scale)