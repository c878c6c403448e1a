"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    X: ClassVar[Vector2]
    Y: ClassVar[Vector2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

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

    def __mul__(self, other: Vector2 | Number) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Vector2 | Number) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def dot(self, other: Vector2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def mag2(self) -> float:
        """Return the squared magnitude."""
        return self.dot(self)

    def mag(self) -> float:
        """Return the magnitude."""
        return math.sqrt(self.mag2())

    def normalise(self) -> Vector2:
        """Return this vector scaled to unit length."""
        magnitude = self.mag()
        return Vector2(self.x / magnitude, self.y / magnitude)

    def angle(self) -> float:
        """Return the angle of this vector in radians, measured from the X axis."""
        return math.atan2(self.y, self.x)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.X = Vector2(1.0, 0.0)
Vector2.Y = Vector2(0.0, 1.0)