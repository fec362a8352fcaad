"""Axis-aligned rectangular regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from starfighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle given by its upper-left corner and its dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_position(cls, position: Iterable[float], size: Iterable[float]) -> "Region":
        """Build a region from an upper-left point and a (width, height) pair."""
        px, py = position
        width, height = size
        return cls(int(px), int(py), int(width), int(height))

    def set(self, x: int, y: int, width: int, height: int) -> None:
        """Replace all components of the region."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        return self.left, self.top

    @property
    def top_right(self) -> tuple[int, int]:
        return self.right, self.top

    @property
    def bottom_left(self) -> tuple[int, int]:
        return self.left, self.bottom

    @property
    def bottom_right(self) -> tuple[int, int]:
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        """The centre of the region as a vector."""
        return Vector2(*self.top_left) + Vector2(self.width, self.height) / 2

    def translate(self, dx: int | Iterable[int], dy: int | None = None) -> None:
        """Move the region by (dx, dy), or by a single (dx, dy) pair."""
        if dy is None:
            dx, dy = dx
        self.x += dx
        self.y += dy