"""Day orchestration for the tribute simulator.

SimulationService drives one full day: it resets the log, walks the
living actors in roster order, lets every party act at most once, and
dispatches each decision to combat, movement or party resolution. The
narrative goes to the message center; diagnostics go to structlog.

Example:
    >>> state = SimulationState([create_tribute("Rue"), create_tribute("Thresh")])
    >>> log = DailyLog()
    >>> service = SimulationService(state, log, roller=DiceRoller(seed=1))
    >>> service.simulate_day()
    >>> log.messages[0]
    'Day 1'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from uuid import UUID

from tribute_sim.core.config import get_settings
from tribute_sim.core.exceptions import InvalidGameStateError
from tribute_sim.core.logging import bind_context, clear_context, get_logger
from tribute_sim.engine.combat import CombatRequest, CombatResponse, CombatService
from tribute_sim.engine.dice import DiceRoller
from tribute_sim.engine.movement import MovementRequest, MovementService
from tribute_sim.engine.party import PartyRequest, PartyService
from tribute_sim.models.actors import concatenate_names
from tribute_sim.models.enums import ActorAction, PartyRequestType


if TYPE_CHECKING:
    from tribute_sim.engine.simulation import SimulationSnapshot, SimulationState
    from tribute_sim.models.actors import Combatant
    from tribute_sim.models.messages import MessageCenter

logger = get_logger(__name__)


class SimulationService:
    """Run simulated days against a SimulationState.

    Attributes:
        state: The simulation being driven.
        message_center: Sink for the day's narrative.
    """

    def __init__(
        self,
        state: SimulationState,
        message_center: MessageCenter,
        *,
        roller: DiceRoller | None = None,
        unarmed_damage: str | None = None,
    ) -> None:
        """Initialize the service and its resolvers.

        Args:
            state: The simulation state to drive.
            message_center: Where narrative messages are written.
            roller: Random source; if omitted, a roller seeded from the
                ``seed`` setting (unseeded when that is unset).
            unarmed_damage: Damage dice for tributes without a weapon.
        """
        self.state = state
        self.message_center = message_center
        self._roller = roller or DiceRoller(seed=get_settings().seed)
        self._combat = CombatService(self._roller, unarmed_damage=unarmed_damage)
        self._movement = MovementService(state, self._roller)
        self._parties = PartyService(state)
        self._handlers: dict[ActorAction, Callable[[Combatant, SimulationSnapshot], None]] = {
            ActorAction.ATTACKING: self._combat_request,
            ActorAction.MOVING: self._movement_request,
            ActorAction.JOIN_PARTY: self._join_request,
            ActorAction.LEAVE_PARTY: self._leave_request,
        }

    @property
    def roller(self) -> DiceRoller:
        return self._roller

    def simulate_day(self) -> None:
        """Resolve one full day and advance the day counter."""
        day = self.state.day
        bind_context(day=day)
        try:
            self.message_center.clear_messages()
            self.message_center.clear_death_announcements()
            self.message_center.add_message(f"Day {day}")

            parties_acted: set[UUID] = set()
            for actor in self.state.alive_actors():
                if actor.is_dead:
                    # killed earlier today
                    continue
                if actor.is_in_party:
                    if actor.party_id in parties_acted:
                        continue
                    parties_acted.add(actor.party_id)
                self._act(actor)

            self.state.increase_day()
            logger.info(
                "Day simulated",
                alive=len(self.state.alive_actors()),
                parties=len(parties_acted),
            )
        finally:
            clear_context()

    def _act(self, actor: Combatant) -> None:
        snapshot = self.state.snapshot()
        action = actor.decide(snapshot, self._roller)
        if not isinstance(action, ActorAction):
            raise InvalidGameStateError(
                f"Decision for {actor.name} is not an actor action",
                current_state=repr(action),
                expected_states=[member.value for member in ActorAction],
            )

        handler = self._handlers.get(action)
        if handler is None:
            logger.warning("Unhandled action", actor=actor.name, action=str(action))
            self.message_center.add_message(
                f"There is no way for the simulation to handle state ({action}) for {actor.name}"
            )
            return
        handler(actor, snapshot)

    # =========================================================================
    # Combat
    # =========================================================================

    def _combat_request(self, actor: Combatant, snapshot: SimulationSnapshot) -> None:
        other = self.state.random_neighbor(actor, self._roller)
        if other is None:
            self.message_center.add_message(
                f"{actor.name} searched for a tribute to attack, but couldn't find any"
            )
            return

        fighters = self.state.party(actor)
        defenders = self.state.party(other)
        response = self._combat.resolve(CombatRequest(fighters=fighters, defenders=defenders))
        self._describe_combat(response, fighters, defenders)

    def _describe_combat(
        self,
        response: CombatResponse,
        fighters: list[Combatant],
        defenders: list[Combatant],
    ) -> None:
        fighter_names = concatenate_names(fighters)
        defender_names = concatenate_names(defenders)

        if response.defenders_died:
            dead = [defender for defender in defenders if defender.is_dead]
            self.message_center.add_message(
                f"{fighter_names} attacked {defender_names} and killed {concatenate_names(dead)}"
            )
            for actor in dead:
                self.message_center.add_death_announcement(actor)
                logger.info("Tribute killed", actor=actor.name, killers=fighter_names)
        elif response.escaped:
            self.message_center.add_message(
                f"{fighter_names} attacked {defender_names}. {defender_names} barely escaped"
            )
        elif response.hit:
            self.message_center.add_message(
                f"{fighter_names} attacked {defender_names} and wounded {defenders[0].name}"
            )
        else:
            self.message_center.add_message(
                f"{fighter_names} attacked {defender_names} but missed"
            )

    # =========================================================================
    # Movement
    # =========================================================================

    def _movement_request(self, actor: Combatant, snapshot: SimulationSnapshot) -> None:
        party = self.state.party(actor)
        response = self._movement.move(MovementRequest(party=party, snapshot=snapshot))
        self.message_center.add_message(
            f"{concatenate_names(party)} moved from {response.past_location} to {response.new_location}"
        )

    # =========================================================================
    # Parties
    # =========================================================================

    def _join_request(self, actor: Combatant, snapshot: SimulationSnapshot) -> None:
        other = self.state.random_neighbor(actor, self._roller)
        if other is None:
            self.message_center.add_message(
                f"{actor.name} searched for a tribute to band with but couldn't find anyone"
            )
            return

        request = PartyRequest(
            request_type=PartyRequestType.JOIN,
            actor=actor,
            actor_party=self.state.party(actor),
            other_party=self.state.party(other),
        )
        self.message_center.add_message(self._parties.handle(request).message)

    def _leave_request(self, actor: Combatant, snapshot: SimulationSnapshot) -> None:
        request = PartyRequest(
            request_type=PartyRequestType.LEAVE,
            actor=actor,
            actor_party=self.state.party(actor),
        )
        self.message_center.add_message(self._parties.handle(request).message)


__all__ = ["SimulationService"]
