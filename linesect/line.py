"""Parametric lines and their intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vectors import Vector2, Vector3


def _lift(vector: Vector2 | Vector3) -> Vector3:
    """Copy a vector into 3D, placing a 2D vector in the z = 0 plane."""
    if isinstance(vector, Vector3):
        return Vector3(vector.x, vector.y, vector.z)
    if isinstance(vector, Vector2):
        return Vector3(vector.x, vector.y, 0)
    raise TypeError(f"expected Vector2 or Vector3, got {type(vector).__name__}")


@dataclass
class Line:
    """A line ``point + t * direction`` in 3D space."""

    direction: Vector3 = field(default_factory=Vector3)
    point: Vector3 = field(default_factory=Vector3)

    @classmethod
    def from_slope_intercept(cls, k: float, b: float) -> Line:
        """Build the 2D line ``y = k * x + b``."""
        line = cls()
        line.set_slope_intercept(k, b)
        return line

    @classmethod
    def from_2d(cls, direction: Vector2, point: Vector2) -> Line:
        """Build a line from 2D vectors, lying in the z = 0 plane."""
        line = cls()
        line.set(direction, point)
        return line

    def set(self, direction: Vector2 | Vector3, point: Vector2 | Vector3) -> None:
        """Replace direction and point; 2D vectors are lifted to z = 0."""
        self.direction = _lift(direction)
        self.point = _lift(point)

    def set_slope_intercept(self, k: float, b: float) -> None:
        """Make this the 2D line ``y = k * x + b``."""
        self.direction = Vector3(1, k, 0)
        self.point = Vector3(0, b, 0)

    def intersect(self, other: Line) -> Vector3:
        """Point where this line meets ``other``.

        Parallel lines give a vector of NaNs. For skew lines the result is the
        point on this line that is closest to ``other``.
        """
        v2 = other.direction
        # alpha = ((p2 - p1) x v2) . (v1 x v2) / |v1 x v2|^2
        v3 = (other.point - self.point).cross(v2)
        v4 = self.direction.cross(v2)
        denominator = v4.dot(v4)
        if denominator == 0:
            return Vector3(math.nan, math.nan, math.nan)
        alpha = v3.dot(v4) / denominator
        return self.point + alpha * self.direction

    def is_intersected(self, other: Line) -> bool:
        """False when the two directions are parallel."""
        return self.direction.cross(other.direction) != Vector3()

    def __str__(self) -> str:
        return (
            "Line\n"
            "====\n"
            f"Direction: {self.direction}\n"
            f"    Point: {self.point}"
        )