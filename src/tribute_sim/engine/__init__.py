"""Simulation engine for the tribute simulator.

Submodules:
    dice: Injectable random source (d20 library for damage dice)
    simulation: Roster, grid and day counter; area and party queries
    combat: One attack exchange between two parties
    movement: Party movement clamped to the grid
    party: Join and leave requests
    service: Day orchestration

Example:
    >>> from tribute_sim.engine import DiceRoller, SimulationService, SimulationState
    >>> from tribute_sim.models import DailyLog, create_tribute
    >>>
    >>> state = SimulationState([create_tribute("Rue"), create_tribute("Thresh")])
    >>> log = DailyLog()
    >>> SimulationService(state, log, roller=DiceRoller(seed=3)).simulate_day()
    >>> print("\n".join(log.messages))
"""

from __future__ import annotations

# =============================================================================
# Dice Rolling
# =============================================================================
from tribute_sim.engine.dice import DiceExpression, DiceRoller

# =============================================================================
# Simulation State
# =============================================================================
from tribute_sim.engine.simulation import (
    ActorPredicate,
    SimulationSnapshot,
    SimulationState,
)

# =============================================================================
# Resolvers
# =============================================================================
from tribute_sim.engine.combat import CombatRequest, CombatResponse, CombatService
from tribute_sim.engine.movement import MovementRequest, MovementResponse, MovementService
from tribute_sim.engine.party import PartyRequest, PartyResponse, PartyService

# =============================================================================
# Orchestration
# =============================================================================
from tribute_sim.engine.service import SimulationService


__all__ = [
    # Dice Rolling
    "DiceExpression",
    "DiceRoller",
    # Simulation State
    "ActorPredicate",
    "SimulationSnapshot",
    "SimulationState",
    # Resolvers
    "CombatRequest",
    "CombatResponse",
    "CombatService",
    "MovementRequest",
    "MovementResponse",
    "MovementService",
    "PartyRequest",
    "PartyResponse",
    "PartyService",
    # Orchestration
    "SimulationService",
]
