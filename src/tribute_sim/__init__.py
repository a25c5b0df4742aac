"""Tribute Simulator - turn-based elimination contest on a bounded grid.

Tributes are placed at the centre of the arena. Each simulated day every
living tribute (or party of tributes) decides to attack, move, join or
leave a party, and the engine resolves the consequences into a daily
log of narrative messages and cannon announcements.

Example:
    >>> from tribute_sim import (
    ...     DailyLog, DiceRoller, SimulationService, SimulationState, create_tribute,
    ... )
    >>>
    >>> state = SimulationState([create_tribute("Rue"), create_tribute("Thresh")])
    >>> log = DailyLog()
    >>> service = SimulationService(state, log, roller=DiceRoller(seed=12))
    >>> while not state.is_over:
    ...     service.simulate_day()

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic models for coordinates, tributes and the daily log.
    engine: Dice, simulation state, resolvers and the day orchestrator.
"""

from __future__ import annotations

# Core
from tribute_sim.core.config import Settings, get_settings
from tribute_sim.core.exceptions import TributeSimError
from tribute_sim.core.logging import configure_logging, get_logger

# Models
from tribute_sim.models import (
    ActorAction,
    Combatant,
    Coord,
    DailyLog,
    MessageCenter,
    Tribute,
    Weapon,
    create_tribute,
)

# Engine
from tribute_sim.engine import (
    DiceRoller,
    SimulationService,
    SimulationSnapshot,
    SimulationState,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "TributeSimError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "ActorAction",
    "Combatant",
    "Coord",
    "DailyLog",
    "MessageCenter",
    "Tribute",
    "Weapon",
    "create_tribute",
    # Engine
    "DiceRoller",
    "SimulationService",
    "SimulationSnapshot",
    "SimulationState",
]
