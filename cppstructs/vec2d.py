"""A small two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Vec2d:
    """A pair of coordinates with component-wise arithmetic."""

    x: Any = 0
    y: Any = 0

    def __add__(self, other: object) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> Vec2d:
        """Multiply component-wise by another vector, or scale by a number."""
        if isinstance(other, Vec2d):
            return Vec2d(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2d(self.x * other, self.y * other)
        return NotImplemented

    def __bool__(self) -> bool:
        """True only when neither component is zero."""
        return not (self.x == type(self.x)() or self.y == type(self.y)())

    def within(self, size: Vec2d) -> bool:
        """True if both components lie in ``[0, size)``."""
        return 0 <= self.x < size.x and 0 <= self.y < size.y