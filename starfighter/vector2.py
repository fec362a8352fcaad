"""Two-component vector used for positions, velocities and sizes."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator


class _Constant:
    """Class attribute that hands out a fresh vector on every access."""

    def __init__(self, x: float, y: float) -> None:
        self._x = x
        self._y = y

    def __get__(self, instance: object, owner: type) -> "Vector2":
        return owner(self._x, self._y)


@dataclass
class Vector2:
    """A mutable vector with an x and a y component."""

    x: float = 0.0
    y: float = 0.0

    ZERO = _Constant(0.0, 0.0)
    ONE = _Constant(1.0, 1.0)
    UNIT_X = _Constant(1.0, 0.0)
    UNIT_Y = _Constant(0.0, 1.0)

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def set(self, x: float | "Vector2", y: float | None = None) -> None:
        """Set both components, either from two numbers or from another vector."""
        if y is None:
            if not isinstance(x, Vector2):
                raise TypeError("set() needs two numbers or one Vector2")
            x, y = x.x, x.y
        self.x = float(x)
        self.y = float(y)

    def normalize(self) -> None:
        """Scale the vector to unit length; the zero vector is left unchanged."""
        if not self.is_zero():
            size = self.length()
            self.x /= size
            self.y /= size

    def is_zero(self) -> bool:
        """Return True when both components are zero."""
        return self.x == 0 and self.y == 0

    def dot(self, other: "Vector2") -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Return the two-dimensional cross product with another vector."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(first: "Vector2", second: "Vector2") -> float:
        """Return the distance between two vectors."""
        return math.sqrt(Vector2.distance_squared(first, second))

    @staticmethod
    def distance_squared(first: "Vector2", second: "Vector2") -> float:
        """Return the squared distance between two vectors."""
        return (second.x - first.x) ** 2 + (second.y - first.y) ** 2

    @staticmethod
    def lerp(start: "Vector2", end: "Vector2", value: float) -> "Vector2":
        """Interpolate linearly from start to end; value is clamped to [0, 1]."""
        if value < 0:
            return start.copy()
        if value > 1:
            return end.copy()
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False, rng: _random.Random | None = None) -> "Vector2":
        """Return a vector with components in [-1, 1], optionally of unit length."""
        source = rng if rng is not None else _random
        result = Vector2(source.random() * 2 - 1, source.random() * 2 - 1)
        if normalize:
            result.normalize()
        return result

    def left(self) -> "Vector2":
        """Return the left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> "Vector2":
        """Return the right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> tuple[int, int]:
        """Return the integer point, truncating each component toward zero."""
        return int(self.x), int(self.y)

    def copy(self) -> "Vector2":
        """Return an independent copy of the vector."""
        return Vector2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> "Vector2":
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vector2":
        self.x /= scalar
        self.y /= scalar
        return self

    def __str__(self) -> str:
        return f"{{ {self.x:g}, {self.y:g} }}"