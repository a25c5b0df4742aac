"""Party resolution: joining and leaving groups of tributes.

A party is never stored on its own. It is the set of living actors that
share a party id, and the id only changes through this service.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from tribute_sim.core.logging import get_logger
from tribute_sim.models.actors import concatenate_names
from tribute_sim.models.enums import PartyRequestType


if TYPE_CHECKING:
    from tribute_sim.engine.simulation import SimulationState
    from tribute_sim.models.actors import Combatant

logger = get_logger(__name__)


@dataclass(frozen=True)
class PartyRequest:
    """A membership change requested by ``actor``.

    Attributes:
        request_type: Join or leave.
        actor: The requesting actor.
        actor_party: The requester's current party (requester first).
        other_party: The target's party for joins (target first).
    """

    request_type: PartyRequestType
    actor: Combatant
    actor_party: list[Combatant]
    other_party: list[Combatant] | None = None


@dataclass(frozen=True)
class PartyResponse:
    message: str
    success: bool
    party_id: UUID | None = None


class PartyService:
    """Apply join and leave requests to the simulation state."""

    def __init__(self, state: SimulationState) -> None:
        self._state = state

    def handle(self, request: PartyRequest) -> PartyResponse:
        if request.request_type == PartyRequestType.JOIN:
            return self._join(request)
        return self._leave(request)

    def _join(self, request: PartyRequest) -> PartyResponse:
        actor = request.actor
        if not request.other_party:
            return PartyResponse(
                message=f"{actor.name} searched for a tribute to band with but couldn't find anyone",
                success=False,
            )

        target = request.other_party[0]
        if target is actor or target.actor_id == actor.actor_id:
            return PartyResponse(
                message=f"{actor.name} cannot form a party with themselves",
                success=False,
            )
        if target.is_dead:
            return PartyResponse(
                message=f"{actor.name} tried to band with {target.name}, but found only a body",
                success=False,
            )
        if actor.is_in_party and actor.party_id == target.party_id:
            return PartyResponse(
                message=f"{actor.name} and {target.name} are already in the same party",
                success=False,
            )

        party_id = target.party_id or actor.party_id or uuid4()
        members = [*request.actor_party, *request.other_party]
        self._state.assign_party(members, party_id)

        logger.info(
            "Party formed",
            party_id=str(party_id),
            members=[member.name for member in members],
        )
        return PartyResponse(
            message=(
                f"{concatenate_names(request.actor_party)} banded together with "
                f"{concatenate_names(request.other_party)}"
            ),
            success=True,
            party_id=party_id,
        )

    def _leave(self, request: PartyRequest) -> PartyResponse:
        actor = request.actor
        if not actor.is_in_party:
            return PartyResponse(
                message=f"{actor.name} thought about leaving their party, but wasn't in one",
                success=False,
            )

        party_id = actor.party_id
        self._state.assign_party([actor], None)
        logger.info("Party left", party_id=str(party_id), actor=actor.name)
        return PartyResponse(
            message=f"{actor.name} left their party",
            success=True,
            party_id=party_id,
        )


__all__ = [
    "PartyRequest",
    "PartyResponse",
    "PartyService",
]
