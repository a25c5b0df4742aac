"""The daily log: narrative messages and cannon announcements.

The engine writes to anything that satisfies MessageCenter. DailyLog is
the in-memory implementation; it is append-only within a day, cleared
at the start of the next, and serializes to JSON so a day can be
stored and reconstructed with the same ordered messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


if TYPE_CHECKING:
    from tribute_sim.models.actors import Combatant


@runtime_checkable
class MessageCenter(Protocol):
    """Sink for the narrative of a simulated day."""

    def add_message(self, text: str) -> None: ...

    def add_death_announcement(self, actor: Combatant) -> None: ...

    def clear_messages(self) -> None: ...

    def clear_death_announcements(self) -> None: ...


class DeathAnnouncement(BaseModel):
    """A cannon shot for a fallen tribute."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    actor_id: UUID
    name: str

    def __str__(self) -> str:
        return f"A cannon sounds for {self.name}"


class DailyLog(BaseModel):
    """In-memory message center for one simulated day."""

    model_config = ConfigDict(extra="forbid")

    messages: list[str] = Field(default_factory=list)
    death_announcements: list[DeathAnnouncement] = Field(default_factory=list)

    def add_message(self, text: str) -> None:
        self.messages.append(text)

    def add_death_announcement(self, actor: Combatant) -> None:
        self.death_announcements.append(
            DeathAnnouncement(actor_id=actor.actor_id, name=actor.name)
        )

    def clear_messages(self) -> None:
        self.messages.clear()

    def clear_death_announcements(self) -> None:
        self.death_announcements.clear()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str | bytes) -> DailyLog:
        return cls.model_validate_json(payload)


__all__ = [
    "MessageCenter",
    "DeathAnnouncement",
    "DailyLog",
]
