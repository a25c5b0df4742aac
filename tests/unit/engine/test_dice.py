"""Tests for the dice roller."""

from __future__ import annotations

import random

import pytest

from tribute_sim.core.exceptions import DiceRollError
from tribute_sim.engine.dice import DiceExpression, DiceRoller


class TestDiceRoller:
    """Tests for the DiceRoller class."""

    def test_roll_expression(self, dice_roller: DiceRoller) -> None:
        result = dice_roller.roll("2d6+1")

        assert isinstance(result, DiceExpression)
        assert 3 <= result.total <= 13
        assert result.expression == "2d6+1"

    def test_empty_expression(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(DiceRollError):
            dice_roller.roll("  ")

    def test_invalid_expression(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(DiceRollError) as exc_info:
            dice_roller.roll("1d")

        assert exc_info.value.details["expression"] == "1d"

    def test_d20_range(self, dice_roller: DiceRoller) -> None:
        rolls = {dice_roller.roll_d20() for _ in range(500)}
        assert rolls == set(range(1, 21))

    def test_roll_between_inclusive(self, dice_roller: DiceRoller) -> None:
        rolls = {dice_roller.roll_between(-1, 1) for _ in range(200)}
        assert rolls == {-1, 0, 1}

    def test_roll_between_empty_range(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(DiceRollError):
            dice_roller.roll_between(3, 2)

    def test_choice(self, dice_roller: DiceRoller) -> None:
        assert dice_roller.choice(["only"]) == "only"
        with pytest.raises(DiceRollError):
            dice_roller.choice([])

    def test_damage_minimum(self, dice_roller: DiceRoller) -> None:
        assert dice_roller.roll_damage("1d4-10") == 1

    def test_seed_is_reproducible(self) -> None:
        first = DiceRoller(seed=7)
        first_rolls = [first.roll_d20() for _ in range(20)]
        second = DiceRoller(seed=7)
        second_rolls = [second.roll_d20() for _ in range(20)]

        assert first_rolls == second_rolls
        assert first.seed == 7

    def test_injected_rng(self) -> None:
        roller = DiceRoller(rng=random.Random(3))
        expected = random.Random(3)

        assert roller.roll_between(1, 100) == expected.randint(1, 100)

    def test_injected_rng_controls_damage(self) -> None:
        first = DiceRoller(rng=random.Random(5))
        second = DiceRoller(rng=random.Random(5))

        assert [first.roll("1d20").total for _ in range(10)] == [
            second.roll("1d20").total for _ in range(10)
        ]

    def test_damage_ignores_global_random(self) -> None:
        first = DiceRoller(seed=5)
        first_damage = [first.roll_damage("1d20") for _ in range(10)]

        second = DiceRoller(seed=5)
        random.random()
        second_damage = [second.roll_damage("1d20") for _ in range(10)]

        assert first_damage == second_damage
