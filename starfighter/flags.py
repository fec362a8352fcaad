"""Bit flags that classify game objects for collisions and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """What an object is, for deciding which objects collide."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: "CollisionType") -> bool:
        """Return True if this value shares at least one bit with other."""
        return (self & other) > 0


class TriggerType(IntFlag):
    """Which triggers a weapon responds to."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: "TriggerType") -> bool:
        """Return True if this value shares at least one bit with other."""
        return (self & other) > 0