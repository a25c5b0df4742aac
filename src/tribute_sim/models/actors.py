"""Actor models for the tribute simulator.

A tribute is a mutable pydantic model owned by the simulation state. It
carries its identity, position, combat stats, optional weapon and party
affiliation, and exposes the capability methods the engine calls during
a day: deciding an action, proposing a move, rolling to hit, rolling to
escape, and taking damage.

The engine only depends on the Combatant protocol, so a different AI
policy can be plugged in as any type that conforms to it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tribute_sim.core.config import get_settings
from tribute_sim.core.exceptions import ValidationError
from tribute_sim.models.enums import ACTIVE_ACTIONS, ActorAction
from tribute_sim.models.grid import Coord


if TYPE_CHECKING:
    from tribute_sim.engine.dice import DiceRoller
    from tribute_sim.engine.simulation import SimulationSnapshot


# =============================================================================
# Capability Interface
# =============================================================================


@runtime_checkable
class Combatant(Protocol):
    """Capability interface every actor variant must satisfy."""

    actor_id: UUID
    name: str
    location: Coord
    speed: int
    armor_class: int
    strength: int
    dexterity: int
    health: int
    party_id: UUID | None

    @property
    def is_dead(self) -> bool: ...

    @property
    def is_in_party(self) -> bool: ...

    def decide(self, snapshot: SimulationSnapshot, roller: DiceRoller) -> ActorAction: ...

    def simulate_move(self, roller: DiceRoller) -> Coord: ...

    def simulate_hit(self, defender: Combatant, roller: DiceRoller) -> bool: ...

    def simulate_escape(self, attacker: Combatant, roller: DiceRoller) -> bool: ...

    def damage_expression(self, default: str) -> str: ...

    def take_damage(self, amount: int) -> None: ...

    def set_location(self, location: Coord) -> None: ...

    def join_party(self, party_id: UUID) -> None: ...

    def leave_party(self) -> None: ...


# =============================================================================
# Models
# =============================================================================


class Weapon(BaseModel):
    """A weapon owned by exactly one tribute.

    Attributes:
        name: Display name.
        damage: d20 dice expression rolled on a hit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, max_length=100)
    damage: str = Field(min_length=1, description="Damage dice, e.g. '1d6'")


class Tribute(BaseModel):
    """A participant in the contest.

    Health may go negative; ``health <= 0`` is the only definition of
    death. Dead tributes stay in the roster for reporting.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # computed fields appear in dumps
    )

    actor_id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=100)
    location: Coord = Field(default_factory=Coord)
    speed: int = Field(default=1, ge=0, description="Movement radius per axis")
    armor_class: int = Field(default=10, ge=1)
    strength: int = Field(default=0, description="Attack bonus")
    dexterity: int = Field(default=0, description="Escape bonus")
    health: int = Field(default=12)
    weapon: Weapon | None = None
    party_id: UUID | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_in_party(self) -> bool:
        return self.party_id is not None

    # -------------------------------------------------------------------------
    # Decisions
    # -------------------------------------------------------------------------

    def decide(self, snapshot: SimulationSnapshot, roller: DiceRoller) -> ActorAction:
        """Choose the next action.

        The default policy is a uniform pick over the active actions. It
        reads nothing from the snapshot and mutates nothing.
        """
        if self.is_dead:
            return ActorAction.DEAD
        return roller.choice(ACTIVE_ACTIONS)

    def simulate_move(self, roller: DiceRoller) -> Coord:
        """Propose an unclamped destination within ``speed`` on each axis."""
        offset = Coord(
            x=roller.roll_between(-self.speed, self.speed),
            y=roller.roll_between(-self.speed, self.speed),
        )
        return self.location + offset

    def simulate_hit(self, defender: Combatant, roller: DiceRoller) -> bool:
        return roller.roll_d20() + self.strength >= defender.armor_class

    def simulate_escape(self, attacker: Combatant, roller: DiceRoller) -> bool:
        own_roll = roller.roll_d20() + self.dexterity
        attacker_roll = roller.roll_d20() + attacker.dexterity
        return own_roll >= attacker_roll

    def damage_expression(self, default: str) -> str:
        return self.weapon.damage if self.weapon else default

    # -------------------------------------------------------------------------
    # Mutations (called by the simulation state only)
    # -------------------------------------------------------------------------

    def take_damage(self, amount: int) -> None:
        """Subtract ``amount`` from health.

        Raises:
            ValidationError: If ``amount`` is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Damage cannot be negative",
                field_name="amount",
                invalid_value=amount,
            )
        self.health -= amount

    def set_location(self, location: Coord) -> None:
        self.location = location

    def give_weapon(self, weapon: Weapon | None) -> None:
        self.weapon = weapon

    def join_party(self, party_id: UUID) -> None:
        self.party_id = party_id

    def leave_party(self) -> None:
        self.party_id = None

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Factory Functions
# =============================================================================


def create_tribute(
    name: str,
    *,
    weapon: Weapon | None = None,
    **stats: Any,
) -> Tribute:
    """Create a tribute, filling missing stats from configured defaults.

    Args:
        name: Display name.
        weapon: Optional weapon the tribute starts with.
        **stats: Overrides for speed, armor_class, strength, dexterity, health.

    Raises:
        ValidationError: If an unknown stat name is passed.
    """
    defaults = get_settings().tributes
    base = {
        "speed": defaults.speed,
        "armor_class": defaults.armor_class,
        "strength": defaults.strength,
        "dexterity": defaults.dexterity,
        "health": defaults.health,
    }
    unknown = set(stats) - set(base)
    if unknown:
        raise ValidationError(
            "Unknown tribute stats",
            field_name="stats",
            invalid_value=sorted(unknown),
        )
    base.update(stats)
    return Tribute(name=name, weapon=weapon, **base)


def concatenate_names(actors: Iterable[Combatant]) -> str:
    """Render names as "A", "A and B" or "A, B and C"."""
    names = [actor.name for actor in actors]
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


__all__ = [
    "Combatant",
    "Weapon",
    "Tribute",
    "create_tribute",
    "concatenate_names",
]
