import pytest

from starfighter.flags import CollisionType, TriggerType


def test_collision_bits_are_distinct_powers_of_two():
    values = [
        CollisionType.PLAYER,
        CollisionType.ENEMY,
        CollisionType.SHIP,
        CollisionType.PROJECTILE,
    ]
    for value in values:
        assert value & (value - 1) == 0
        assert CollisionType.NONE.contains(value) is False
    for first in values:
        for second in values:
            assert first.contains(second) is (first is second)
    assert CollisionType.PROJECTILE.contains(CollisionType.PROJECTILE) is True
    assert CollisionType.PROJECTILE == 1 << 3


def test_combined_collision_type_contains_its_parts():
    player_ship = CollisionType.PLAYER | CollisionType.SHIP
    assert CollisionType.PLAYER.contains(player_ship) is True
    assert CollisionType.SHIP.contains(player_ship) is True
    assert CollisionType.ENEMY.contains(player_ship) is False
    assert CollisionType.PROJECTILE.contains(player_ship) is False
    assert player_ship.contains(CollisionType.PLAYER)
    assert not player_ship.contains(CollisionType.ENEMY)


def test_none_contains_nothing():
    for member in (CollisionType.PLAYER, CollisionType.ENEMY, CollisionType.SHIP):
        assert not CollisionType.NONE.contains(member)
        assert not member.contains(CollisionType.NONE)


def test_collision_types_order_by_value():
    assert CollisionType.PLAYER < CollisionType.ENEMY
    assert CollisionType.PROJECTILE > CollisionType.SHIP
    enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
    player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
    assert enemy_ship < player_projectile
    assert CollisionType.ENEMY.contains(enemy_ship) is True
    assert CollisionType.ENEMY.contains(player_projectile) is False


def test_collision_bit_operations_round_trip():
    combined = CollisionType.ENEMY | CollisionType.SHIP
    assert combined & CollisionType.SHIP == CollisionType.SHIP
    assert combined ^ CollisionType.SHIP == CollisionType.ENEMY
    assert CollisionType.SHIP.contains(combined ^ CollisionType.SHIP) is False
    value = CollisionType.NONE
    value |= CollisionType.PLAYER
    assert value == CollisionType.PLAYER
    assert CollisionType.PLAYER.contains(value) is True


def test_trigger_all_contains_every_trigger():
    for member in (TriggerType.PRIMARY, TriggerType.SECONDARY, TriggerType.SPECIAL):
        assert TriggerType.ALL.contains(member)
        assert member.contains(TriggerType.ALL)
    assert TriggerType.ALL == 0xFFFF


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (TriggerType.PRIMARY, TriggerType.PRIMARY, True),
        (TriggerType.PRIMARY, TriggerType.SECONDARY, False),
        (TriggerType.PRIMARY | TriggerType.SPECIAL, TriggerType.SPECIAL, True),
        (TriggerType.NONE, TriggerType.PRIMARY, False),
    ],
)
def test_trigger_contains(left, right, expected):
    assert left.contains(right) is expected