"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        TributeSimError: Base exception for all simulator errors.
        ConfigurationError, ValidationError, GameEngineError and the
        engine-specific subclasses.

    Configuration:
        Settings: Main settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, get_logger, bind_context, clear_context.
"""

from __future__ import annotations

from tribute_sim.core.config import (
    GridSettings,
    Settings,
    TributeDefaults,
    clear_settings_cache,
    get_settings,
)
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
from tribute_sim.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "TributeSimError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "MovementError",
    "DiceRollError",
    "ActorNotFoundError",
    # Configuration
    "Settings",
    "GridSettings",
    "TributeDefaults",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
