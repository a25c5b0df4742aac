"""Movement resolution: a party moves as one unit, clamped to the grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tribute_sim.core.exceptions import MovementError
from tribute_sim.core.logging import get_logger


if TYPE_CHECKING:
    from tribute_sim.engine.dice import DiceRoller
    from tribute_sim.engine.simulation import SimulationSnapshot, SimulationState
    from tribute_sim.models.actors import Combatant
    from tribute_sim.models.grid import Coord

logger = get_logger(__name__)


@dataclass(frozen=True)
class MovementRequest:
    party: list[Combatant]
    snapshot: SimulationSnapshot


@dataclass(frozen=True)
class MovementResponse:
    past_location: Coord
    new_location: Coord


class MovementService:
    """Move parties on behalf of the simulation state."""

    def __init__(self, state: SimulationState, roller: DiceRoller) -> None:
        self._state = state
        self._roller = roller

    def move(self, request: MovementRequest) -> MovementResponse:
        """Move the whole party to a clamped destination.

        The first member proposes the move; everyone ends up on the same cell.

        Raises:
            MovementError: If the party is empty.
        """
        if not request.party:
            raise MovementError("Cannot move an empty party")

        leader = request.party[0]
        past = leader.location
        wish = leader.simulate_move(self._roller)
        new = wish.clamp(request.snapshot.width, request.snapshot.height)

        self._state.relocate(request.party, new)
        logger.debug(
            "Party moved",
            leader=leader.name,
            members=len(request.party),
            wish=str(wish),
            past=str(past),
            new=str(new),
        )
        return MovementResponse(past_location=past, new_location=new)


__all__ = [
    "MovementRequest",
    "MovementResponse",
    "MovementService",
]
