"""Rules that decide which kinds of objects collide and what happens then."""

from __future__ import annotations

from typing import Any, Callable

from starfighter.flags import CollisionType

CollisionCallback = Callable[[Any, Any], None]

_Pair = tuple[CollisionType, CollisionType]


def _ordered(type1: CollisionType, type2: CollisionType) -> _Pair:
    return (type1, type2) if type1 < type2 else (type2, type1)


class CollisionManager:
    """Keeps collision rules between pairs of collision types.

    Objects checked here need a ``collision_type()`` method, a ``position``
    vector and a ``collision_radius``.
    """

    def __init__(self) -> None:
        self._collisions: dict[_Pair, CollisionCallback] = {}
        self._non_collisions: set[_Pair] = set()

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: CollisionCallback
    ) -> None:
        """Call callback when objects of the two types overlap.

        The callback gets the object with the lower type first. The first
        rule registered for a pair wins.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Declare that objects of the two types never collide."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: Any, second: Any) -> None:
        """Run the matching collision rule if the two objects overlap.

        A pair with no rule at all is remembered as a non-colliding pair.
        """
        type1 = first.collision_type()
        type2 = second.collision_type()

        if type1 == type2 or type1 == CollisionType.NONE or type2 == CollisionType.NONE:
            return

        swapped = type1 > type2
        pair = (type2, type1) if swapped else (type1, type2)

        if pair in self._non_collisions:
            return

        callback = self._collisions.get(pair)
        if callback is None:
            self.add_non_collision_type(*pair)
            return

        difference = first.position - second.position
        radii = first.collision_radius + second.collision_radius
        if difference.length_squared() <= radii * radii:
            if swapped:
                callback(second, first)
            else:
                callback(first, second)