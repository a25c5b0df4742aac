"""Exception hierarchy for the tribute simulator.

Every error derives from TributeSimError. Narrative outcomes such as
"no target in range" or "left a party without being in one" are not
exceptions; they are written to the daily log. What is raised here
signals bad input or a broken engine contract.

Context passed as keyword arguments lands in ``details`` and is
rendered after the message:

    >>> str(CombatError("Dead actors cannot fight", combatant_id="c1"))
    "Dead actors cannot fight [combatant_id='c1']"
"""

from __future__ import annotations

from typing import Any


class TributeSimError(Exception):
    """Base exception for all tribute simulator errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context; keyword context with a ``None`` value is dropped.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        self.message = message
        self.details = dict(details or {})
        self.details.update({key: value for key, value in context.items() if value is not None})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{rendered}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation
# =============================================================================


class ConfigurationError(TributeSimError):
    """Settings could not be loaded or hold an unusable value."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details, config_key=config_key)


class ValidationError(TributeSimError):
    """A caller passed a value the simulator cannot accept.

    Raised for negative damage, duplicate actor ids, unknown tribute
    stats and out-of-range grid dimensions.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=details,
            field_name=field_name,
            invalid_value=invalid_value,
        )


# =============================================================================
# Engine
# =============================================================================


class GameEngineError(TributeSimError):
    """Base exception for simulation engine errors."""


class InvalidGameStateError(GameEngineError):
    """The simulation reached a state its contracts forbid.

    Typical causes are a decision outside the ActorAction domain, or
    resizing the grid after tributes have been placed.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=details,
            current_state=current_state,
            expected_states=expected_states or None,
        )


class CombatError(GameEngineError):
    """A combat request was malformed.

    Empty sides, dead participants and self-attacks are rejected before
    any dice are rolled.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant_id: str | None = None,
        day: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details, combatant_id=combatant_id, day=day)


class MovementError(GameEngineError):
    """A party could not be moved (empty party or off-grid destination)."""


class DiceRollError(GameEngineError):
    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details, expression=expression)


class ActorNotFoundError(GameEngineError):
    """An actor id is not part of the roster."""

    def __init__(
        self,
        message: str,
        *,
        actor_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details, actor_id=actor_id)


__all__ = [
    "TributeSimError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "MovementError",
    "DiceRollError",
    "ActorNotFoundError",
]
