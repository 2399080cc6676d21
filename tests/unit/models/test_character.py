"""Tests for the character record."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from steelkilt.engine.dice import ScriptedDice
from steelkilt.models import (
    Armor,
    Attributes,
    Character,
    MagicBranch,
    MagicUser,
    RangedWeapon,
    Spell,
    Weapon,
    WoundLevel,
)


class TestCharacter:
    """Tests for derived values and rolls."""

    def test_defaults(self) -> None:
        character = Character(name="Nobody")
        assert character.weapon.name == "Long Sword"
        assert character.armor.protection == 0
        assert character.magic is None
        assert character.is_alive()
        assert character.can_act()

    @pytest.mark.parametrize("skill,expected", [(-2, 0), (4, 4), (14, 10)])
    def test_combat_skills_clamped(self, skill: int, expected: int) -> None:
        character = Character(name="Clamp", weapon_skill=skill, dodge_skill=skill, ranged_skill=skill)
        assert character.weapon_skill == expected
        assert character.dodge_skill == expected
        assert character.ranged_skill == expected

    @pytest.mark.parametrize(
        "strength,bonus",
        [(1, -1), (2, -1), (3, 0), (6, 0), (7, 1), (8, 1), (9, 2), (10, 2)],
    )
    def test_strength_bonus(self, strength: int, bonus: int) -> None:
        character = Character(name="Brute", attributes=Attributes(strength=strength))
        assert character.strength_bonus() == bonus

    def test_rolls_include_penalties(self) -> None:
        """Armor and wound penalties apply to attack, parry and dodge."""
        character = Character(
            name="Weary",
            weapon_skill=6,
            dodge_skill=4,
            armor=Armor.chain_mail(),
        )
        character.wounds.add_wound(WoundLevel.LIGHT)
        dice = ScriptedDice([5, 5, 5])

        assert character.attack_roll(dice) == 6 + 5 - 1 - 1
        assert character.parry_roll(dice) == 6 + 5 - 1 - 1
        assert character.dodge_roll(dice) == 4 + 5 - 1 - 1

    def test_incapacitated_cannot_act(self) -> None:
        character = Character(name="Fallen")
        character.wounds.add_wound(WoundLevel.CRITICAL)
        assert character.is_alive()
        assert not character.can_act()


class TestSnapshot:
    """Tests for snapshot round-tripping."""

    def test_round_trip(self, knight: Character) -> None:
        knight.wounds.add_wound(WoundLevel.SEVERE)
        knight.ranged_weapon = RangedWeapon.crossbow()
        knight.ranged_skill = 5
        magic = MagicUser(empathy=6)
        magic.add_lore(MagicBranch.DIVINATION, 3)
        magic.learn_spell(Spell(name="Glimpse", branch=MagicBranch.DIVINATION), 2)
        knight.magic = magic

        snapshot = knight.to_snapshot()
        restored = Character.from_snapshot(json.loads(json.dumps(snapshot)))

        assert restored == knight
        assert restored.to_snapshot() == snapshot

    def test_snapshot_is_plain_data(self, knight: Character) -> None:
        snapshot = knight.to_snapshot()

        assert snapshot["name"] == "Sir Roland"
        assert snapshot["attributes"]["strength"] == 8
        assert snapshot["weapon"]["name"] == "Long Sword"
        assert snapshot["armor"]["protection"] == 2
        assert snapshot["wounds"] == {"light": 0, "severe": 0, "critical": 0}
        assert "magic" not in snapshot

    def test_loads_minimal_snapshot(self) -> None:
        character = Character.from_snapshot(
            {
                "name": "Loaded",
                "attributes": {"strength": 9, "constitution": 4},
                "weapon": {"name": "Dagger", "impact": 1},
                "armor": {"name": "Leather Armor", "armor_type": 2},
            }
        )
        assert character.strength_bonus() == 2
        assert character.weapon == Weapon.dagger()
        assert character.armor.protection == 2

    @pytest.mark.parametrize(
        "wounds",
        [
            {"light": 4},
            {"light": 7, "severe": 5, "critical": 0},
            {"severe": 3},
            {"critical": -1},
        ],
    )
    def test_rejects_wounds_past_their_stack(self, wounds: dict[str, int]) -> None:
        """Stored counters must already be cascaded."""
        with pytest.raises(ValidationError):
            Character.from_snapshot({"name": "Overflowed", "wounds": wounds})

    def test_accepts_full_stacks(self) -> None:
        character = Character.from_snapshot(
            {"name": "Battered", "wounds": {"light": 3, "severe": 2, "critical": 1}}
        )

        character.wounds.add_wound(WoundLevel.LIGHT)

        assert character.wounds.critical == 2
        assert not character.is_alive()
