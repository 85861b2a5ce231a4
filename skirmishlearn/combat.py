"""Combat arithmetic for a one-on-one skirmish between two units."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

WITHDRAW_DISTANCE = 100.0

Position = tuple[int, int]


class DamageType(Enum):
    """Kind of damage a weapon deals."""

    INDEPENDENT = "Independent"
    EXPLOSIVE = "Explosive"
    CONCUSSIVE = "Concussive"
    NORMAL = "Normal"
    IGNORE_ARMOR = "Ignore_Armor"
    NONE = "None"
    UNKNOWN = "Unknown"


class UnitSize(Enum):
    """Size class of a unit, which scales some kinds of damage."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


_DAMAGE_MULTIPLIERS: dict[tuple[UnitSize, DamageType], float] = {
    (UnitSize.MEDIUM, DamageType.CONCUSSIVE): 0.5,
    (UnitSize.LARGE, DamageType.CONCUSSIVE): 0.25,
    (UnitSize.SMALL, DamageType.EXPLOSIVE): 0.5,
    (UnitSize.MEDIUM, DamageType.EXPLOSIVE): 0.75,
}


def shots_to_death(hp: float, damage: float) -> int:
    """Number of hits of ``damage`` needed to remove ``hp`` hit points."""
    if damage <= 0:
        raise ValueError("damage per shot must be positive")
    return int(math.ceil(hp / damage))


def potential_damage(
    damage_amount: float,
    target_armor: float,
    target_size: UnitSize,
    damage_type: DamageType,
) -> float:
    """Damage one hit deals after armor and the size/damage-type multiplier."""
    multiplier = _DAMAGE_MULTIPLIERS.get((target_size, damage_type), 1.0)
    return (float(damage_amount) - float(target_armor)) * multiplier


def hp_fitness(
    own_hp: float, enemy_hp: float, own_max_hp: float, enemy_max_hp: float
) -> float:
    """Hit-point difference normalised by the larger maximum hit points."""
    scale = own_max_hp if own_max_hp > enemy_max_hp else enemy_max_hp
    if scale <= 0:
        raise ValueError("maximum hit points must be positive")
    return (float(own_hp) - float(enemy_hp)) / float(scale)


def choose_action(outputs: Sequence[float]) -> int:
    """Pick an action index from three network outputs.

    Ties between the first two go to the second; ties with the third go to the third.
    """
    if len(outputs) != 3:
        raise ValueError(f"expected 3 outputs, got {len(outputs)}")
    first, second, third = outputs
    if first > second:
        return 0 if first > third else 2
    return 1 if second > third else 2


def withdraw_target(my_position: Position, enemy_position: Position) -> Position:
    """Point a fixed distance further from the enemy, clamped to non-negative coordinates."""
    mx, my = my_position
    ex, ey = enemy_position
    dx, dy = mx - ex, my - ey
    length = math.hypot(dx, dy) / WITHDRAW_DISTANCE
    if length == 0:
        raise ValueError("units share a position; no direction to withdraw in")
    x = int(mx + dx / length)
    y = int(my + dy / length)
    return max(x, 0), max(y, 0)