"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from tribute_sim.core.exceptions import (
    ActorNotFoundError,
    CombatError,
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    MovementError,
    TributeSimError,
    ValidationError,
)


class TestTributeSimError:
    """Tests for the base TributeSimError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = TributeSimError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = TributeSimError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(TributeSimError("Test", details={"x": 1}))
        assert "TributeSimError" in repr_str
        assert "x" in repr_str


class TestEngineExceptions:
    """Tests for engine-related exceptions."""

    def test_combat_error_context(self) -> None:
        exc = CombatError("Self attack", combatant_id="abc", day=3)
        assert exc.details == {"combatant_id": "abc", "day": 3}

    def test_combat_error_day_zero_is_kept(self) -> None:
        exc = CombatError("Bad", day=0)
        assert exc.details["day"] == 0

    def test_invalid_state_context(self) -> None:
        exc = InvalidGameStateError(
            "Unknown action",
            current_state="'fly'",
            expected_states=["attacking", "moving"],
        )
        assert exc.details["current_state"] == "'fly'"
        assert exc.details["expected_states"] == ["attacking", "moving"]

    def test_dice_roll_error_expression(self) -> None:
        exc = DiceRollError("Bad dice", expression="1d")
        assert exc.details["expression"] == "1d"

    def test_actor_not_found_context(self) -> None:
        exc = ActorNotFoundError("Missing", actor_id="123")
        assert exc.details["actor_id"] == "123"

    @pytest.mark.parametrize(
        "exc_class",
        [InvalidGameStateError, CombatError, MovementError, DiceRollError, ActorNotFoundError],
    )
    def test_engine_errors_share_base(self, exc_class: type[GameEngineError]) -> None:
        assert issubclass(exc_class, GameEngineError)
        assert issubclass(exc_class, TributeSimError)


class TestConfigurationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_key(self) -> None:
        exc = ConfigurationError("Bad setting", config_key="grid.width")
        assert exc.details["config_key"] == "grid.width"

    def test_validation_error_fields(self) -> None:
        exc = ValidationError("Bad value", field_name="health", invalid_value=-1)
        assert exc.details == {"field_name": "health", "invalid_value": -1}

    def test_catch_all_at_boundary(self) -> None:
        with pytest.raises(TributeSimError):
            raise ValidationError("boom")
