"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the steelkilt test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest

from steelkilt.core.config import clear_settings_cache
from steelkilt.engine.dice import DiceRoller, ScriptedDice, reset_default_roller
from steelkilt.models import Armor, Attributes, Character, Weapon


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset cached settings and the shared roller around each test."""
    for key in (
        "STEELKILT_LOG_LEVEL",
        "STEELKILT_JSON_LOGS",
        "STEELKILT_DICE_SEED",
        "STEELKILT_DICE_LOG_ROLLS",
        "STEELKILT_DICE_HISTORY_SIZE",
        "STEELKILT_COMBAT_EXHAUSTION_PER_ROUND",
    ):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    reset_default_roller()
    yield
    clear_settings_cache()
    reset_default_roller()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "STEELKILT_LOG_LEVEL": "DEBUG",
        "STEELKILT_DICE_SEED": "1234",
        "STEELKILT_COMBAT_EXHAUSTION_PER_ROUND": "2",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Dice Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def scripted() -> Callable[..., ScriptedDice]:
    """Factory for dice that replay the given faces in order.

    Example:
        >>> def test_something(scripted):
        ...     dice = scripted(7, 4)
    """

    def _make(*faces: int | Iterable[int]) -> ScriptedDice:
        flat: list[int] = []
        for face in faces:
            if isinstance(face, int):
                flat.append(face)
            else:
                flat.extend(face)
        return ScriptedDice(flat)

    return _make


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def knight() -> Character:
    """Strong swordsman in leather: STR 8 (+1 damage), skill 8, long sword."""
    return Character(
        name="Sir Roland",
        attributes=Attributes(strength=8, dexterity=6, constitution=7),
        weapon_skill=8,
        dodge_skill=5,
        weapon=Weapon.long_sword(),
        armor=Armor.leather(),
    )


@pytest.fixture
def brigand() -> Character:
    """Leather-clad brigand with CON 7 and dodge 5."""
    return Character(
        name="Brigand",
        attributes=Attributes(strength=6, dexterity=7, constitution=7),
        weapon_skill=6,
        dodge_skill=5,
        weapon=Weapon.long_sword(),
        armor=Armor.leather(),
    )


@pytest.fixture
def peasant() -> Character:
    """Unarmored, unskilled character with default attributes."""
    return Character(name="Peasant", weapon=Weapon.dagger())
