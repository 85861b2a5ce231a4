import math

import pytest

from skirmishlearn.combat import (
    DamageType,
    UnitSize,
    choose_action,
    hp_fitness,
    potential_damage,
    shots_to_death,
    withdraw_target,
)


def test_shots_exact_division():
    assert shots_to_death(40.0, 8.0) == 5


def test_shots_round_up():
    assert shots_to_death(41.0, 8.0) == shots_to_death(48.0, 8.0)
    assert shots_to_death(41.0, 8.0) == shots_to_death(40.0, 8.0) + 1


def test_shots_rejects_non_positive_damage():
    with pytest.raises(ValueError):
        shots_to_death(40.0, 0.0)
    with pytest.raises(ValueError):
        shots_to_death(40.0, -2.0)


def test_normal_damage_is_attack_minus_armor():
    assert potential_damage(6, 1, UnitSize.SMALL, DamageType.NORMAL) == 5.0


@pytest.mark.parametrize(
    "size, kind, multiplier",
    [
        (UnitSize.MEDIUM, DamageType.CONCUSSIVE, 0.5),
        (UnitSize.LARGE, DamageType.CONCUSSIVE, 0.25),
        (UnitSize.SMALL, DamageType.EXPLOSIVE, 0.5),
        (UnitSize.MEDIUM, DamageType.EXPLOSIVE, 0.75),
        (UnitSize.SMALL, DamageType.CONCUSSIVE, 1.0),
        (UnitSize.LARGE, DamageType.EXPLOSIVE, 1.0),
    ],
)
def test_damage_multipliers(size, kind, multiplier):
    base = potential_damage(20, 4, size, DamageType.NORMAL)
    assert potential_damage(20, 4, size, kind) == pytest.approx(base * multiplier)


def test_fitness_equal_hp_is_zero():
    assert hp_fitness(30, 30, 40, 80) == 0.0


def test_fitness_is_antisymmetric():
    assert hp_fitness(10, 35, 40, 80) == -hp_fitness(35, 10, 40, 80)


def test_fitness_uses_larger_maximum():
    assert hp_fitness(80, 0, 80, 40) == 1.0
    assert hp_fitness(0, 80, 40, 80) == -1.0


def test_fitness_rejects_zero_maximum():
    with pytest.raises(ValueError):
        hp_fitness(0, 0, 0, 0)


@pytest.mark.parametrize(
    "outputs",
    [(0.9, 0.1, 0.2), (0.1, 0.9, 0.2), (0.1, 0.2, 0.9), (0.3, 0.2, 0.1)],
)
def test_choose_action_picks_largest_distinct(outputs):
    assert choose_action(outputs) == list(outputs).index(max(outputs))


def test_choose_action_ties():
    assert choose_action((0.5, 0.5, 0.1)) == 1
    assert choose_action((0.5, 0.1, 0.5)) == 2


def test_choose_action_needs_three_outputs():
    with pytest.raises(ValueError):
        choose_action((0.1, 0.2))


def test_withdraw_moves_away_by_fixed_distance():
    me, enemy = (500, 400), (450, 380)
    target = withdraw_target(me, enemy)
    moved = math.dist(me, target)
    assert moved == pytest.approx(100, abs=2)
    assert math.dist(target, enemy) > math.dist(me, enemy)


def test_withdraw_along_axis():
    assert withdraw_target((300, 200), (250, 200)) == (400, 200)


def test_withdraw_clamps_at_zero():
    x, y = withdraw_target((10, 50), (200, 50))
    assert x == 0
    assert y == 50


def test_withdraw_same_position_raises():
    with pytest.raises(ValueError):
        withdraw_target((5, 5), (5, 5))