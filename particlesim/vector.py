"""Two-dimensional vector arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector.

    Multiplying by a number scales the vector. Multiplying by another
    vector gives the dot product.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y