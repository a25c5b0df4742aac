"""Enumeration types for the tribute simulator."""

from __future__ import annotations

from enum import StrEnum


class ActorAction(StrEnum):
    """What an actor decided to do with its turn."""

    ATTACKING = "attacking"
    """Attack a tribute in the surrounding area."""

    MOVING = "moving"
    """Move the actor's party to a new cell."""

    JOIN_PARTY = "join_party"
    """Band together with a nearby tribute."""

    LEAVE_PARTY = "leave_party"
    """Leave the current party."""

    DEAD = "dead"
    """Terminal state; dead actors never act again."""


ACTIVE_ACTIONS: tuple[ActorAction, ...] = (
    ActorAction.ATTACKING,
    ActorAction.MOVING,
    ActorAction.JOIN_PARTY,
    ActorAction.LEAVE_PARTY,
)
"""Actions a living actor can choose from."""


class PartyRequestType(StrEnum):
    """Kinds of party membership change."""

    JOIN = "join"
    LEAVE = "leave"


__all__ = [
    "ActorAction",
    "ACTIVE_ACTIONS",
    "PartyRequestType",
]
