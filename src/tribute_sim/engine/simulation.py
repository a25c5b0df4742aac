"""Simulation state: the roster, the grid and the day counter.

SimulationState is the single owner of every actor. Other engine
components read through its query methods and request roster-wide
mutations (relocation, party assignment) through its commands.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from tribute_sim.core import constants
from tribute_sim.core.config import get_settings
from tribute_sim.core.exceptions import (
    ActorNotFoundError,
    InvalidGameStateError,
    MovementError,
    ValidationError,
)
from tribute_sim.core.logging import get_logger
from tribute_sim.models.grid import Coord, grid_center


if TYPE_CHECKING:
    from tribute_sim.engine.dice import DiceRoller
    from tribute_sim.models.actors import Combatant

logger = get_logger(__name__)

ActorPredicate = Callable[["Combatant"], bool]


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view of the simulation handed to decision logic.

    The actors are deep copies; mutating them has no effect on the
    simulation.
    """

    day: int
    width: int
    height: int
    neighborhood_radius: int
    actors: tuple[Combatant, ...]

    @property
    def alive_actors(self) -> tuple[Combatant, ...]:
        return tuple(actor for actor in self.actors if not actor.is_dead)


class SimulationState:
    """Owns the actor roster, grid dimensions and current day.

    Example:
        >>> state = SimulationState([create_tribute("Rue")], width=8, height=8)
        >>> state.alive_actors()[0].location
        Coord(x=4, y=4)
    """

    def __init__(
        self,
        actors: Iterable[Combatant] = (),
        *,
        width: int | None = None,
        height: int | None = None,
        neighborhood_radius: int | None = None,
        day: int = constants.FIRST_DAY,
    ) -> None:
        """Initialize the state and place every actor at the grid centre.

        Args:
            actors: Initial roster, in turn order.
            width: Largest valid x coordinate (defaults to settings).
            height: Largest valid y coordinate (defaults to settings).
            neighborhood_radius: Chebyshev radius for area searches.
            day: Starting day counter.

        Raises:
            ValidationError: On negative dimensions or duplicate actor ids.
        """
        grid = get_settings().grid
        self._width = grid.width if width is None else width
        self._height = grid.height if height is None else height
        self._radius = grid.neighborhood_radius if neighborhood_radius is None else neighborhood_radius
        self._day = day
        self._actors: list[Combatant] = []
        self._index: dict[UUID, Combatant] = {}

        self._validate_dimension("width", self._width)
        self._validate_dimension("height", self._height)
        self._validate_dimension("neighborhood_radius", self._radius)
        if day < constants.FIRST_DAY:
            raise ValidationError("Day counter starts at 1", field_name="day", invalid_value=day)

        for actor in actors:
            self.add_actor(actor)

        logger.info(
            "SimulationState initialized",
            actors=len(self._actors),
            width=self._width,
            height=self._height,
            radius=self._radius,
        )

    @staticmethod
    def _validate_dimension(name: str, value: int) -> None:
        if value < 0:
            raise ValidationError(f"{name} cannot be negative", field_name=name, invalid_value=value)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def day(self) -> int:
        return self._day

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def neighborhood_radius(self) -> int:
        return self._radius

    @property
    def actors(self) -> tuple[Combatant, ...]:
        """Full roster including the dead, in turn order."""
        return tuple(self._actors)

    @property
    def victor(self) -> Combatant | None:
        """The sole survivor, if exactly one actor is alive."""
        alive = self.alive_actors()
        return alive[0] if len(alive) == 1 else None

    @property
    def is_over(self) -> bool:
        return len(self.alive_actors()) <= 1

    # =========================================================================
    # Roster Commands
    # =========================================================================

    def add_actor(self, actor: Combatant) -> None:
        """Add an actor and place it at the grid centre.

        Raises:
            ValidationError: If an actor with the same id is already present.
        """
        if actor.actor_id in self._index:
            raise ValidationError(
                "Duplicate actor id",
                field_name="actor_id",
                invalid_value=str(actor.actor_id),
            )
        actor.set_location(grid_center(self._width, self._height))
        self._actors.append(actor)
        self._index[actor.actor_id] = actor

    def set_width(self, width: int) -> None:
        self._resize(width=width)

    def set_height(self, height: int) -> None:
        self._resize(height=height)

    def _resize(self, *, width: int | None = None, height: int | None = None) -> None:
        if self._actors:
            raise InvalidGameStateError(
                "Grid dimensions are fixed once actors have been placed",
                current_state="populated",
                expected_states=["empty"],
            )
        if width is not None:
            self._validate_dimension("width", width)
            self._width = width
        if height is not None:
            self._validate_dimension("height", height)
            self._height = height

    def increase_day(self) -> int:
        self._day += 1
        return self._day

    def relocate(self, actors: Iterable[Combatant], location: Coord) -> None:
        """Move every given actor to ``location``.

        Raises:
            MovementError: If ``location`` is outside the grid.
        """
        if not location.in_bounds(self._width, self._height):
            raise MovementError(
                "Location outside the grid",
                details={"location": str(location), "width": self._width, "height": self._height},
            )
        for actor in actors:
            actor.set_location(location)

    def assign_party(self, actors: Iterable[Combatant], party_id: UUID | None) -> None:
        """Set (or clear, with ``None``) the party id of every given actor."""
        for actor in actors:
            if party_id is None:
                actor.leave_party()
            else:
                actor.join_party(party_id)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_actor(self, actor_id: UUID) -> Combatant:
        """Look up an actor, alive or dead.

        Raises:
            ActorNotFoundError: If the id is not in the roster.
        """
        try:
            return self._index[actor_id]
        except KeyError:
            raise ActorNotFoundError("Actor not in roster", actor_id=str(actor_id)) from None

    def alive_actors(
        self,
        predicate: ActorPredicate | None = None,
        exclude: Combatant | None = None,
    ) -> list[Combatant]:
        """Living actors in roster order, optionally filtered."""
        return [
            actor
            for actor in self._actors
            if not actor.is_dead
            and actor is not exclude
            and (predicate is None or predicate(actor))
        ]

    def actors_in_area(
        self,
        origin: Coord,
        exclude: Combatant | None = None,
        predicate: ActorPredicate | None = None,
    ) -> list[Combatant]:
        """Living actors within the neighborhood radius of ``origin``."""
        return self.alive_actors(
            lambda actor: actor.location.within(origin, self._radius)
            and (predicate is None or predicate(actor)),
            exclude,
        )

    def random_actor_in_area(
        self,
        origin: Coord,
        roller: DiceRoller,
        exclude: Combatant | None = None,
        predicate: ActorPredicate | None = None,
    ) -> Combatant | None:
        """Pick a random living actor around ``origin``, or None."""
        candidates = self.actors_in_area(origin, exclude, predicate)
        if not candidates:
            return None
        return roller.choice(candidates)

    def random_neighbor(self, actor: Combatant, roller: DiceRoller) -> Combatant | None:
        """Pick a random living actor near ``actor`` that is not one of its allies."""
        if actor.is_in_party:
            party_id = actor.party_id
            return self.random_actor_in_area(
                actor.location,
                roller,
                exclude=actor,
                predicate=lambda other: other.party_id != party_id,
            )
        return self.random_actor_in_area(actor.location, roller, exclude=actor)

    def party(self, actor: Combatant) -> list[Combatant]:
        """The actor followed by its living fellow party members."""
        if not actor.is_in_party:
            return [actor]
        party_id = actor.party_id
        members = self.alive_actors(lambda other: other.party_id == party_id, exclude=actor)
        return [actor, *members]

    def snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            day=self._day,
            width=self._width,
            height=self._height,
            neighborhood_radius=self._radius,
            actors=tuple(copy.deepcopy(self._actors)),
        )


__all__ = [
    "ActorPredicate",
    "SimulationSnapshot",
    "SimulationState",
]
