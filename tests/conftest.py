"""Pytest configuration and shared fixtures.

Provides settings isolation, seeded and scripted dice rollers, and
tribute fixtures used across the test suite.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import pytest

from tribute_sim.engine.dice import DiceRoller
from tribute_sim.models.actors import Tribute
from tribute_sim.models.enums import ActorAction


if TYPE_CHECKING:
    from collections.abc import Generator

    from tribute_sim.engine.simulation import SimulationSnapshot

T = TypeVar("T")


# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedRoller(DiceRoller):
    """DiceRoller that replays queued results.

    When a queue runs dry it falls back to the seeded parent roller,
    except for ``choice`` which then always takes the first item.
    """

    def __init__(
        self,
        *,
        d20: Iterable[int] = (),
        between: Iterable[int] = (),
        damage: Iterable[int] = (),
        choices: Iterable[int] = (),
    ) -> None:
        super().__init__(seed=0)
        self.d20_rolls = list(d20)
        self.between_rolls = list(between)
        self.damage_rolls = list(damage)
        self.choice_indexes = list(choices)

    def roll_d20(self) -> int:
        if self.d20_rolls:
            return self.d20_rolls.pop(0)
        return super().roll_d20()

    def roll_between(self, low: int, high: int) -> int:
        if self.between_rolls:
            return self.between_rolls.pop(0)
        return super().roll_between(low, high)

    def roll_damage(self, expression: str) -> int:
        if self.damage_rolls:
            return self.damage_rolls.pop(0)
        return super().roll_damage(expression)

    def choice(self, items: Sequence[T]) -> T:
        index = self.choice_indexes.pop(0) if self.choice_indexes else 0
        return items[index]


class ScriptedTribute(Tribute):
    """Tribute whose decision is fixed by the test."""

    forced: Any = ActorAction.MOVING

    def decide(self, snapshot: SimulationSnapshot, roller: DiceRoller) -> Any:
        if self.is_dead:
            return ActorAction.DEAD
        return self.forced


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from tribute_sim.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up environment overrides for settings tests.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "TRIBUTE_SIM_DEBUG": "true",
        "TRIBUTE_SIM_LOG_LEVEL": "DEBUG",
        "TRIBUTE_SIM_SEED": "99",
        "TRIBUTE_SIM_GRID_WIDTH": "9",
        "TRIBUTE_SIM_TRIBUTE_HEALTH": "20",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def scripted_roller() -> type[ScriptedRoller]:
    """Expose the ScriptedRoller class so tests can build queues."""
    return ScriptedRoller


@pytest.fixture
def scripted_tribute() -> type[ScriptedTribute]:
    """Expose the ScriptedTribute class so tests can force decisions."""
    return ScriptedTribute


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def katniss() -> Tribute:
    return Tribute(name="Katniss", strength=3, dexterity=4, armor_class=12, health=12)


@pytest.fixture
def cato() -> Tribute:
    return Tribute(name="Cato", strength=5, dexterity=1, armor_class=14, health=15)


@pytest.fixture
def rue() -> Tribute:
    return Tribute(name="Rue", strength=0, dexterity=6, armor_class=11, health=8)
