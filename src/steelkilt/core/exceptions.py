"""Custom exception hierarchy for the steelkilt rules engine.

Every rule refusal in the engine is raised as a subclass of
SteelkiltError, so front ends can catch a single base class at the
boundary while still discriminating on the concrete failure. Operations
raise before touching any state: a failed call never leaves a partial
effect behind.

Example:
    >>> from steelkilt.core.exceptions import InsufficientPointsError
    >>> raise InsufficientPointsError("Cannot raise Longsword", needed=3, available=2)
"""

from __future__ import annotations

from typing import Any


class SteelkiltError(Exception):
    """Base exception for all steelkilt errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(SteelkiltError):
    """Raised when engine configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(SteelkiltError):
    """Raised when caller-supplied data violates a rule constraint.

    This covers inputs that pydantic cannot reject on its own, such as
    granting a negative number of skill points.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Rules Domain Exceptions
# =============================================================================


class RulesError(SteelkiltError):
    """Base exception for every refusal raised by the rules engine.

    None of these are fatal: callers surface them to the player (or the
    AI policy) and retry with corrected input.
    """


class CombatError(RulesError):
    """Raised when a melee exchange cannot be carried out.

    Typical causes are an attacker in a stance that forbids attacking,
    an incapacitated attacker, or an arena index that names the same
    combatant on both sides.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant: str | None = None,
        round_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize combat error with combat context.

        Args:
            message: Human-readable error description.
            combatant: Name of the combatant involved.
            round_number: Current combat round when the error occurred.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if combatant:
            combined_details["combatant"] = combatant
        if round_number is not None:
            combined_details["round_number"] = round_number
        super().__init__(message, details=combined_details)


class DiceRollError(RulesError):
    """Raised when a dice source cannot produce a valid face."""

    def __init__(
        self,
        message: str,
        *,
        face: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with the offending face.

        Args:
            message: Human-readable error description.
            face: The die face that caused the error, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if face is not None:
            combined_details["face"] = face
        super().__init__(message, details=combined_details)


# -----------------------------------------------------------------------------
# Maneuvers
# -----------------------------------------------------------------------------


class ManeuverError(RulesError):
    """Base exception for stance and maneuver selection errors."""


class ManeuverNotPreparedError(ManeuverError):
    """Raised when a maneuver requiring preparation is chosen unprepared.

    An aimed attack may only be selected after the combatant announced
    aiming in an earlier action.
    """

    def __init__(
        self,
        message: str = "Maneuver requires preparation",
        *,
        maneuver: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if maneuver:
            combined_details["maneuver"] = maneuver
        super().__init__(message, details=combined_details)


# -----------------------------------------------------------------------------
# Skills
# -----------------------------------------------------------------------------


class SkillError(RulesError):
    """Base exception for skill progression errors."""


class SkillNotFoundError(SkillError):
    """Raised when a skill is not part of the skill set."""

    def __init__(self, skill_name: str, *, details: dict[str, Any] | None = None) -> None:
        self.skill_name = skill_name
        combined_details = details or {}
        combined_details["skill_name"] = skill_name
        super().__init__(f"Skill not found: {skill_name}", details=combined_details)


class InsufficientPointsError(SkillError):
    """Raised when a skill raise costs more points than are available."""

    def __init__(
        self,
        message: str | None = None,
        *,
        needed: int,
        available: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the point shortfall.

        Args:
            message: Optional override for the default message.
            needed: Points the raise would cost.
            available: Points left in the budget.
            details: Optional dictionary containing additional error context.
        """
        self.needed = needed
        self.available = available
        combined_details = details or {}
        combined_details["needed"] = needed
        combined_details["available"] = available
        super().__init__(
            message or f"Insufficient points: need {needed}, have {available}",
            details=combined_details,
        )


class PrerequisitesNotMetError(SkillError):
    """Raised when a skill's prerequisites are below their minimum level."""

    def __init__(
        self,
        skill_name: str,
        *,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.skill_name = skill_name
        self.missing = missing or []
        combined_details = details or {}
        combined_details["skill_name"] = skill_name
        if self.missing:
            combined_details["missing"] = self.missing
        super().__init__("Prerequisites not met", details=combined_details)


# -----------------------------------------------------------------------------
# Magic
# -----------------------------------------------------------------------------


class MagicError(RulesError):
    """Base exception for spell learning and casting errors."""


class LoreNotKnownError(MagicError):
    """Raised when a spell's branch lore is not known by the caster."""

    def __init__(self, branch: str, *, details: dict[str, Any] | None = None) -> None:
        self.branch = branch
        combined_details = details or {}
        combined_details["branch"] = str(branch)
        super().__init__(f"Lore not known: {branch}", details=combined_details)


class InsufficientLoreError(MagicError):
    """Raised when a spell is learned above the caster's lore level."""

    def __init__(
        self,
        *,
        required: int,
        available: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.required = required
        self.available = available
        combined_details = details or {}
        combined_details["required"] = required
        combined_details["available"] = available
        super().__init__(
            f"Insufficient lore: need {required}, have {available}",
            details=combined_details,
        )


class SpellNotKnownError(MagicError):
    """Raised when casting a spell that has not been learned."""

    def __init__(self, spell_name: str, *, details: dict[str, Any] | None = None) -> None:
        self.spell_name = spell_name
        combined_details = details or {}
        combined_details["spell_name"] = spell_name
        super().__init__(f"Spell not known: {spell_name}", details=combined_details)


# -----------------------------------------------------------------------------
# Ranged combat
# -----------------------------------------------------------------------------


class RangedCombatError(RulesError):
    """Base exception for ranged attack errors."""


class WeaponNotReadyError(RangedCombatError):
    """Raised when firing a ranged weapon that has not been prepared."""

    def __init__(self, message: str = "Weapon not ready", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoAmmunitionError(RangedCombatError):
    """Raised when firing with no shots remaining."""

    def __init__(self, message: str = "No ammunition", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OutOfRangeError(RangedCombatError):
    """Raised when the target lies beyond the weapon's maximum range."""

    def __init__(
        self,
        message: str = "Target out of range",
        *,
        distance: int | None = None,
        max_range: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if distance is not None:
            combined_details["distance"] = distance
        if max_range is not None:
            combined_details["max_range"] = max_range
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "SteelkiltError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Rules exceptions
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
]
