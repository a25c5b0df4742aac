"""Configuration management for the tribute simulator.

Settings are loaded with pydantic-settings from environment variables
and an optional .env file.

Example:
    >>> from tribute_sim.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.grid.width
    5

Environment Variables:
    TRIBUTE_SIM_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TRIBUTE_SIM_SEED: Seed for the dice roller
    TRIBUTE_SIM_GRID_WIDTH / TRIBUTE_SIM_GRID_HEIGHT: Grid dimensions
    TRIBUTE_SIM_GRID_NEIGHBORHOOD_RADIUS: Radius used by area searches
    TRIBUTE_SIM_TRIBUTE_HEALTH (and siblings): Default tribute stats
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tribute_sim.core import constants
from tribute_sim.core.exceptions import ConfigurationError


class GridSettings(BaseSettings):
    """Configuration for the arena grid.

    Attributes:
        width: Largest valid x coordinate.
        height: Largest valid y coordinate.
        neighborhood_radius: Chebyshev radius for "nearby" searches.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRIBUTE_SIM_GRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: int = Field(
        default=constants.DEFAULT_GRID_WIDTH,
        ge=0,
        description="Largest valid x coordinate",
    )
    height: int = Field(
        default=constants.DEFAULT_GRID_HEIGHT,
        ge=0,
        description="Largest valid y coordinate",
    )
    neighborhood_radius: int = Field(
        default=constants.DEFAULT_NEIGHBORHOOD_RADIUS,
        ge=0,
        description="Chebyshev radius used for area searches",
    )


class TributeDefaults(BaseSettings):
    """Default statistics for newly created tributes."""

    model_config = SettingsConfigDict(
        env_prefix="TRIBUTE_SIM_TRIBUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    speed: int = Field(default=constants.DEFAULT_SPEED, ge=0)
    armor_class: int = Field(default=constants.DEFAULT_ARMOR_CLASS, ge=1)
    strength: int = Field(default=constants.DEFAULT_STRENGTH)
    dexterity: int = Field(default=constants.DEFAULT_DEXTERITY)
    health: int = Field(default=constants.DEFAULT_HEALTH, ge=1)
    unarmed_damage: str = Field(
        default=constants.DEFAULT_UNARMED_DAMAGE,
        description="Damage dice for tributes without a weapon",
    )

    @field_validator("unarmed_damage", mode="after")
    @classmethod
    def validate_unarmed_damage(cls, value: str) -> str:
        """Reject blank damage expressions.

        Raises:
            ConfigurationError: If the expression is empty.
        """
        if not value.strip():
            raise ConfigurationError(
                "unarmed_damage must be a dice expression",
                config_key="unarmed_damage",
            )
        return value.strip()


class Settings(BaseSettings):
    """Main settings aggregating all configuration domains.

    Attributes:
        debug: Force DEBUG logging regardless of ``log_level``.
        log_level: Application logging level.
        json_logs: Render logs as JSON instead of console output.
        seed: Optional seed for reproducible simulations.
        grid: Arena grid settings.
        tributes: Default tribute stats.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRIBUTE_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON logs")
    seed: int | None = Field(default=None, description="Dice roller seed")

    grid: GridSettings = Field(default_factory=GridSettings)
    tributes: TributeDefaults = Field(default_factory=TributeDefaults)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load simulator settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GridSettings",
    "TributeDefaults",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
