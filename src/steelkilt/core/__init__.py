"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        SteelkiltError: Base exception for all engine errors.
        RulesError: Base for every rule refusal.
        (plus the combat, maneuver, skill, magic and ranged subclasses)

    Configuration:
        Settings: Main engine settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up engine logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from steelkilt.core.config import (
    CombatSettings,
    DiceSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from steelkilt.core.exceptions import (
    CombatError,
    ConfigurationError,
    DiceRollError,
    InsufficientLoreError,
    InsufficientPointsError,
    LoreNotKnownError,
    MagicError,
    ManeuverError,
    ManeuverNotPreparedError,
    NoAmmunitionError,
    OutOfRangeError,
    PrerequisitesNotMetError,
    RangedCombatError,
    RulesError,
    SkillError,
    SkillNotFoundError,
    SpellNotKnownError,
    SteelkiltError,
    ValidationError,
    WeaponNotReadyError,
)
from steelkilt.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "SteelkiltError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
    "CombatError",
    "DiceRollError",
    "ManeuverError",
    "ManeuverNotPreparedError",
    "SkillError",
    "SkillNotFoundError",
    "InsufficientPointsError",
    "PrerequisitesNotMetError",
    "MagicError",
    "LoreNotKnownError",
    "InsufficientLoreError",
    "SpellNotKnownError",
    "RangedCombatError",
    "WeaponNotReadyError",
    "NoAmmunitionError",
    "OutOfRangeError",
    # Configuration
    "Settings",
    "DiceSettings",
    "CombatSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
