"""Vectors, model matrices and the shapes drawn by the render components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, Sequence, Union

Matrix = tuple[tuple[float, float, float, float], ...]

# Extra scale applied to the outline drawn in mesh highlight mode.
HIGHLIGHT_SCALE = 1.2

# Quad used by sprites: corners and the two triangles over them.
SPRITE_VERTEX_COORDS = (
    -1.0, -1.0, 0.0,
    -1.0, 1.0, 0.0,
    1.0, 1.0, 0.0,
    1.0, -1.0, 0.0,
)
SPRITE_INDICES = (0, 1, 2, 2, 3, 0)


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Iterable[float]) -> "Vec3":
        ox, oy, oz = other
        return Vec3(self.x + ox, self.y + oy, self.z + oz)

    def __sub__(self, other: Iterable[float]) -> "Vec3":
        ox, oy, oz = other
        return Vec3(self.x - ox, self.y - oy, self.z - oz)

    def __mul__(self, factor: Union[float, Iterable[float]]) -> "Vec3":
        """Scale by a number, or component-wise by another vector."""
        if isinstance(factor, (int, float)):
            return Vec3(self.x * factor, self.y * factor, self.z * factor)
        fx, fy, fz = factor
        return Vec3(self.x * fx, self.y * fy, self.z * fz)

    def __rmul__(self, factor: float) -> "Vec3":
        return self * factor

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vec3":
        """Return the unit vector; raise ValueError for a zero vector."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalize a zero vector")
        return self * (1.0 / size)


def _vec(value: Iterable[float]) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3(*value)


def _from_columns(*columns: Sequence[float]) -> Matrix:
    return tuple(tuple(row) for row in zip(*columns))


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in zip(*b)) for row in a
    )


def model_matrix(
    position: Iterable[float], rotation: Iterable[float], scale: Iterable[float]
) -> Matrix:
    """Build the model matrix as rows: translate * rotX * rotY * rotZ * scale.

    Rotation angles are in degrees.
    """
    px, py, pz = _vec(position)
    sx, sy, sz = _vec(scale)
    rx, ry, rz = (math.radians(angle) for angle in _vec(rotation))

    scale_mat = _from_columns((sx, 0, 0, 0), (0, sy, 0, 0), (0, 0, sz, 0), (0, 0, 0, 1))
    translate_mat = _from_columns(
        (1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (px, py, pz, 1)
    )
    rotate_x = _from_columns(
        (1, 0, 0, 0),
        (0, math.cos(rx), -math.sin(rx), 0),
        (0, math.sin(rx), math.cos(rx), 0),
        (0, 0, 0, 1),
    )
    rotate_y = _from_columns(
        (math.cos(ry), 0, -math.sin(ry), 0),
        (0, 1, 0, 0),
        (math.sin(ry), 0, math.cos(ry), 0),
        (0, 0, 0, 1),
    )
    rotate_z = _from_columns(
        (math.cos(rz), -math.sin(rz), 0, 0),
        (math.sin(rz), math.cos(rz), 0, 0),
        (0, 0, 1, 0),
        (0, 0, 0, 1),
    )
    return reduce(_matmul, (translate_mat, rotate_x, rotate_y, rotate_z, scale_mat))


def transform_point(matrix: Matrix, point: Iterable[float]) -> Vec3:
    """Apply ``matrix`` to ``point`` taken with w = 1."""
    homogeneous = (*_vec(point), 1.0)
    x, y, z = (sum(m * p for m, p in zip(row, homogeneous)) for row in matrix[:3])
    return Vec3(x, y, z)


def highlight_scale(scale: Iterable[float], mode: bool) -> Vec3:
    """Return the scale of a highlight: enlarged in mesh mode, unchanged otherwise."""
    return _vec(scale) * (HIGHLIGHT_SCALE if mode else 1.0)


def highlight_edges(
    position: Iterable[float], scale: Iterable[float]
) -> list[tuple[Vec3, Vec3]]:
    """Return the 12 edges of the box around ``position`` as (start, direction)."""
    pos = _vec(position)
    s = _vec(scale)
    along_x = Vec3(2 * s.x, 0.0, 0.0)
    along_y = Vec3(0.0, 2 * s.y, 0.0)
    along_z = Vec3(0.0, 0.0, 2 * s.z)
    low = pos - s
    high = pos + s
    corner_xz = pos + Vec3(s.x, -s.y, s.z)
    corner_xy = pos + Vec3(s.x, s.y, -s.z)
    corner_yz = pos + Vec3(-s.x, s.y, s.z)
    return [
        (low, along_x),
        (low, along_y),
        (low, along_z),
        (high, -along_x),
        (high, -along_y),
        (high, -along_z),
        (corner_xz, -along_x),
        (corner_xz, -along_z),
        (corner_xy, -along_x),
        (corner_xy, -along_y),
        (corner_yz, -along_z),
        (corner_yz, -along_y),
    ]


def sprite_texture_coords(
    left_bottom: Sequence[float], right_top: Sequence[float]
) -> tuple[float, ...]:
    """Return the UV pairs for the sprite quad's four corners, in vertex order."""
    left, bottom = left_bottom
    right, top = right_top
    return (left, bottom, left, top, right, top, right, bottom)