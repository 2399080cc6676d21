"""Configuration management for the steelkilt rules engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files and runtime overrides.

Example:
    >>> from steelkilt.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.combat.exhaustion_per_round
    1

Environment Variables:
    STEELKILT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    STEELKILT_JSON_LOGS: Emit JSON log lines instead of console output
    STEELKILT_DICE_SEED: Seed for the default dice roller
    STEELKILT_DICE_LOG_ROLLS: Keep a log of recent die faces
    STEELKILT_DICE_HISTORY_SIZE: How many recent faces the log keeps
    STEELKILT_COMBAT_EXHAUSTION_PER_ROUND: Exhaustion added each melee round
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from steelkilt.core.exceptions import ConfigurationError


class DiceSettings(BaseSettings):
    """Configuration for the default dice source.

    Attributes:
        seed: Optional seed for reproducible simulations.
        log_rolls: Keep every rolled face on the roller.
        history_size: How many recent faces a logging roller keeps.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEELKILT_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the default dice roller",
    )
    log_rolls: bool = Field(
        default=False,
        description="Record every rolled face",
    )
    history_size: int = Field(
        default=1000,
        ge=1,
        description="Most recent faces kept when logging rolls",
    )


class CombatSettings(BaseSettings):
    """Configuration for melee arena behavior.

    Attributes:
        exhaustion_per_round: Exhaustion points every combatant accrues
            at the start of each round.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEELKILT_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    exhaustion_per_round: int = Field(
        default=1,
        ge=0,
        le=10,
        description="Exhaustion points added per melee round",
    )


class Settings(BaseSettings):
    """Main engine settings aggregating all configuration domains.

    Attributes:
        log_level: Minimum level ``configure_logging`` emits.
        json_logs: Have ``configure_logging`` render JSON lines.
        dice: Dice source settings.
        combat: Melee arena settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEELKILT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    dice: DiceSettings = Field(default_factory=DiceSettings)
    combat: CombatSettings = Field(default_factory=CombatSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the engine settings singleton.

    Returns:
        The engine Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DiceSettings",
    "CombatSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
