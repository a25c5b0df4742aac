"""Dice rolling for hit, escape, damage and random selection.

Every piece of randomness in a simulated day flows through a single
DiceRoller instance, so tests can seed it or replace it with a scripted
subclass to force hits, misses, escapes and target picks.

Every roll draws from one private ``random.Random``. The d20 library rolls
from the process-wide ``random`` module, so each expression roll first
reseeds it from the private source; stray use of ``random`` elsewhere
cannot shift the damage stream.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

import d20

from tribute_sim.core.constants import D20_SIDES, MIN_DAMAGE
from tribute_sim.core.exceptions import DiceRollError
from tribute_sim.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DiceExpression:
    """Result of rolling a dice expression.

    Attributes:
        expression: The original dice expression string.
        total: The total result of the roll.
        detail: d20's rendering of the individual dice.
    """

    expression: str
    total: int
    detail: str


class DiceRoller:
    """Injectable random source for the simulation.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> 1 <= roller.roll_d20() <= 20
        True
    """

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
            rng: Optional pre-built random source; takes precedence over seed.
        """
        self._seed = seed
        self._rng = rng or random.Random(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll(self, expression: str) -> DiceExpression:
        """Roll dice according to the given expression.

        Args:
            expression: Dice expression (e.g., '1d6', '2d4+1').

        Returns:
            DiceExpression containing the roll result.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        random.seed(self._rng.getrandbits(64))
        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        logger.debug("Dice rolled", expression=expression, total=result.total)
        return DiceExpression(expression=expression, total=result.total, detail=str(result))

    def roll_d20(self) -> int:
        """Roll a single d20."""
        return self._rng.randint(1, D20_SIDES)

    def roll_between(self, low: int, high: int) -> int:
        """Roll an integer uniformly in ``[low, high]``.

        Raises:
            DiceRollError: If ``low`` is greater than ``high``.
        """
        if low > high:
            raise DiceRollError(
                "Empty roll range",
                details={"low": low, "high": high},
            )
        return self._rng.randint(low, high)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one item uniformly.

        Raises:
            DiceRollError: If ``items`` is empty.
        """
        if not items:
            raise DiceRollError("Cannot choose from an empty sequence")
        return items[self._rng.randrange(len(items))]

    def roll_damage(self, expression: str) -> int:
        """Roll damage, never returning less than the minimum damage."""
        return max(MIN_DAMAGE, self.roll(expression).total)


__all__ = [
    "DiceExpression",
    "DiceRoller",
]
