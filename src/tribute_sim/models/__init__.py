"""Pydantic models for the tribute simulator.

Exports the grid coordinate, the tribute/weapon models and their
capability protocol, action enums, and the daily log.
"""

from __future__ import annotations

from tribute_sim.models.actors import (
    Combatant,
    Tribute,
    Weapon,
    concatenate_names,
    create_tribute,
)
from tribute_sim.models.enums import ACTIVE_ACTIONS, ActorAction, PartyRequestType
from tribute_sim.models.grid import Coord, grid_center
from tribute_sim.models.messages import DailyLog, DeathAnnouncement, MessageCenter


__all__ = [
    # Grid
    "Coord",
    "grid_center",
    # Actors
    "Combatant",
    "Tribute",
    "Weapon",
    "create_tribute",
    "concatenate_names",
    # Enums
    "ActorAction",
    "ACTIVE_ACTIONS",
    "PartyRequestType",
    # Log
    "MessageCenter",
    "DeathAnnouncement",
    "DailyLog",
]
