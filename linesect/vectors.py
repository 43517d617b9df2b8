"""Two- and three-dimensional vectors with the usual arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator

# Degrees per radian are computed with this value of pi.
_PI = 3.141592


@dataclass(slots=True)
class Vector2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    def set(self, x: float, y: float) -> Vector2:
        """Replace both components and return this vector."""
        self.x = x
        self.y = y
        return self

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, other: Vector2) -> float:
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)

    def normalize(self) -> Vector2:
        """Scale to unit length in place; a zero vector raises ZeroDivisionError."""
        inv_length = 1 / math.sqrt(self.x * self.x + self.y * self.y)
        self.x *= inv_length
        self.y *= inv_length
        return self

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def equal(self, other: Vector2, epsilon: float) -> bool:
        """True when every component differs by less than ``epsilon``."""
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, Real):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, scale: float) -> Vector2:
        if not isinstance(scale, Real):
            return NotImplemented
        return Vector2(self.x / scale, self.y / scale)

    def __lt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._axis(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._axis(index), value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    @classmethod
    def _axis(cls, index: int) -> str:
        try:
            return cls._AXES[index]
        except IndexError:
            raise IndexError(f"{cls.__name__} index out of range: {index}") from None


@dataclass(slots=True)
class Vector3:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def set(self, x: float, y: float, z: float) -> Vector3:
        """Replace all components and return this vector."""
        self.x = x
        self.y = y
        self.z = z
        return self

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vector3) -> float:
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def angle(self, other: Vector3) -> float:
        """Angle between the two vectors, in degrees."""
        cosine = self.dot(other) / (self.length() * other.length())
        cosine = max(-1.0, min(1.0, cosine))
        return math.acos(cosine) / _PI * 180

    def normalize(self) -> Vector3:
        """Scale to unit length in place; a zero vector raises ZeroDivisionError."""
        inv_length = 1 / math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        self.x *= inv_length
        self.y *= inv_length
        self.z *= inv_length
        return self

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def equal(self, other: Vector3, epsilon: float) -> bool:
        """True when every component differs by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, scale: float) -> Vector3:
        if not isinstance(scale, Real):
            return NotImplemented
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def __lt__(self, other: Vector3) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self.x, self.y, self.z) < (other.x, other.y, other.z)

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._axis(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._axis(index), value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    @classmethod
    def _axis(cls, index: int) -> str:
        try:
            return cls._AXES[index]
        except IndexError:
            raise IndexError(f"{cls.__name__} index out of range: {index}") from None