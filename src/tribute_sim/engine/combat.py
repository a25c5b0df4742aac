"""Combat resolution between two parties.

One exchange per request: the first fighter attacks the first defender.
A miss gives the defender a chance to escape; a hit rolls damage and
applies it to the defender in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from tribute_sim.core.config import get_settings
from tribute_sim.core.exceptions import CombatError
from tribute_sim.core.logging import get_logger


if TYPE_CHECKING:
    from tribute_sim.engine.dice import DiceRoller
    from tribute_sim.models.actors import Combatant

logger = get_logger(__name__)


@dataclass(frozen=True)
class CombatRequest:
    """Both sides of a fight; the first entry of each is its representative."""

    fighters: list[Combatant]
    defenders: list[Combatant]


@dataclass
class CombatResponse:
    """Outcome of one exchange.

    Attributes:
        defenders_died: Whether any defender is dead after the exchange.
        escaped: Whether the defenders got away after a miss.
        casualties: Ids of defenders killed by this exchange.
        hit: Whether the attack landed.
        damage: Damage dealt, zero on a miss.
    """

    defenders_died: bool = False
    escaped: bool = False
    casualties: list[UUID] = field(default_factory=list)
    hit: bool = False
    damage: int = 0


class CombatService:
    """Resolve attack exchanges with an injected dice roller."""

    def __init__(self, roller: DiceRoller, *, unarmed_damage: str | None = None) -> None:
        self._roller = roller
        self._unarmed_damage = unarmed_damage or get_settings().tributes.unarmed_damage

    def _validate(self, request: CombatRequest) -> None:
        if not request.fighters or not request.defenders:
            raise CombatError(
                "Combat needs at least one fighter and one defender",
                details={
                    "fighters": len(request.fighters),
                    "defenders": len(request.defenders),
                },
            )
        for actor in (*request.fighters, *request.defenders):
            if actor.is_dead:
                raise CombatError("Dead actors cannot fight", combatant_id=str(actor.actor_id))
        fighter_ids = {actor.actor_id for actor in request.fighters}
        overlap = fighter_ids & {actor.actor_id for actor in request.defenders}
        if overlap:
            raise CombatError(
                "An actor cannot fight on both sides",
                combatant_id=str(next(iter(overlap))),
            )

    def resolve(self, request: CombatRequest) -> CombatResponse:
        """Resolve one attack of the fighters against the defenders.

        Raises:
            CombatError: On empty sides, dead participants or self-attacks.
        """
        self._validate(request)
        fighter = request.fighters[0]
        defender = request.defenders[0]
        response = CombatResponse()

        if not fighter.simulate_hit(defender, self._roller):
            response.escaped = defender.simulate_escape(fighter, self._roller)
            logger.debug(
                "Attack missed",
                fighter=fighter.name,
                defender=defender.name,
                escaped=response.escaped,
            )
            return response

        response.hit = True
        response.damage = self._roller.roll_damage(
            fighter.damage_expression(self._unarmed_damage)
        )
        defender.take_damage(response.damage)
        if defender.is_dead:
            response.casualties.append(defender.actor_id)
        response.defenders_died = any(actor.is_dead for actor in request.defenders)

        logger.debug(
            "Attack hit",
            fighter=fighter.name,
            defender=defender.name,
            damage=response.damage,
            remaining_health=defender.health,
        )
        return response


__all__ = [
    "CombatRequest",
    "CombatResponse",
    "CombatService",
]
