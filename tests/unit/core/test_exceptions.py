"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestSteelkiltError:
    """Tests for the base SteelkiltError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = SteelkiltError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = SteelkiltError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(SteelkiltError("Test", details={"x": 1}))
        assert "SteelkiltError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_with_key(self) -> None:
        exc = ConfigurationError("Bad value", config_key="combat.exhaustion_per_round")
        assert exc.details["config_key"] == "combat.exhaustion_per_round"

    def test_validation_error_with_field(self) -> None:
        exc = ValidationError("Negative", field_name="points", invalid_value=-3)
        assert exc.details == {"field_name": "points", "invalid_value": -3}


class TestCombatExceptions:
    """Tests for combat and dice exceptions."""

    def test_combat_error_context(self) -> None:
        """Test CombatError with combatant and round."""
        exc = CombatError("Cannot attack", combatant="Brigand", round_number=3)
        assert exc.details["combatant"] == "Brigand"
        assert exc.details["round_number"] == 3

    def test_dice_roll_error_face(self) -> None:
        exc = DiceRollError("Bad face", face=11)
        assert exc.details["face"] == 11

    def test_maneuver_not_prepared_defaults(self) -> None:
        """Test the default message of an unprepared maneuver."""
        exc = ManeuverNotPreparedError(maneuver="aimed_attack")
        assert exc.message == "Maneuver requires preparation"
        assert exc.details["maneuver"] == "aimed_attack"

    @pytest.mark.parametrize(
        ("exc", "parent"),
        [
            (CombatError("x"), RulesError),
            (DiceRollError("x"), RulesError),
            (ManeuverNotPreparedError(), ManeuverError),
            (WeaponNotReadyError(), RangedCombatError),
            (NoAmmunitionError(), RangedCombatError),
            (OutOfRangeError(), RangedCombatError),
        ],
    )
    def test_inheritance(self, exc: SteelkiltError, parent: type[Exception]) -> None:
        """Test exception inheritance chain."""
        assert isinstance(exc, parent)
        assert isinstance(exc, RulesError)
        assert isinstance(exc, SteelkiltError)


class TestSkillExceptions:
    """Tests for skill progression exceptions."""

    def test_skill_not_found(self) -> None:
        exc = SkillNotFoundError("Longsword")
        assert exc.skill_name == "Longsword"
        assert "Longsword" in str(exc)
        assert isinstance(exc, SkillError)

    def test_insufficient_points_carries_amounts(self) -> None:
        """Test that the shortfall is exposed as attributes and details."""
        exc = InsufficientPointsError(needed=3, available=2)
        assert exc.needed == 3
        assert exc.available == 2
        assert exc.details == {"needed": 3, "available": 2}
        assert "need 3, have 2" in str(exc)

    def test_prerequisites_not_met(self) -> None:
        exc = PrerequisitesNotMetError("Riposte", missing=["Fencing"])
        assert exc.missing == ["Fencing"]
        assert exc.details["skill_name"] == "Riposte"


class TestMagicExceptions:
    """Tests for magic exceptions."""

    def test_lore_not_known(self) -> None:
        exc = LoreNotKnownError("necromancy")
        assert exc.branch == "necromancy"
        assert isinstance(exc, MagicError)

    def test_insufficient_lore(self) -> None:
        exc = InsufficientLoreError(required=5, available=3)
        assert (exc.required, exc.available) == (5, 3)

    def test_spell_not_known(self) -> None:
        exc = SpellNotKnownError("Fireball")
        assert exc.spell_name == "Fireball"
        assert "Fireball" in str(exc)


class TestRangedExceptions:
    """Tests for ranged combat exceptions."""

    def test_out_of_range_details(self) -> None:
        exc = OutOfRangeError(distance=150, max_range=100)
        assert exc.message == "Target out of range"
        assert exc.details == {"distance": 150, "max_range": 100}

    def test_default_messages(self) -> None:
        assert str(WeaponNotReadyError()) == "Weapon not ready"
        assert str(NoAmmunitionError()) == "No ammunition"
