"""Characters.

A Character is the snapshot record exchanged with persistence front
ends: attributes, combat skills, equipment, wounds and optional magic
and ranged gear. ``to_snapshot``/``from_snapshot`` round-trip every
field through plain JSON-compatible data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from steelkilt.core.constants import MAX_COMBAT_SKILL, MIN_COMBAT_SKILL
from steelkilt.models.attributes import Attributes, clamp
from steelkilt.models.base import Component
from steelkilt.models.equipment import Armor, RangedWeapon, Weapon
from steelkilt.models.magic import MagicUser
from steelkilt.models.wounds import Wounds


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource


class Character(Component):
    """A combatant in the Draft RPG system."""

    name: str = Field(..., min_length=1)
    attributes: Attributes = Field(default_factory=Attributes)
    weapon_skill: int = Field(default=0)
    dodge_skill: int = Field(default=0)
    weapon: Weapon = Field(default_factory=Weapon.long_sword)
    armor: Armor = Field(default_factory=Armor.none)
    wounds: Wounds = Field(default_factory=Wounds)
    magic: MagicUser | None = Field(default=None)
    ranged_weapon: RangedWeapon | None = Field(default=None)
    ranged_skill: int = Field(default=0)

    @field_validator("weapon_skill", "dodge_skill", "ranged_skill", mode="before")
    @classmethod
    def clamp_skill(cls, v: Any) -> int:
        return clamp(int(v), MIN_COMBAT_SKILL, MAX_COMBAT_SKILL)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def strength_bonus(self) -> int:
        """Damage bonus from strength: +1 at STR 7, +2 at STR 9, -1 at STR 2 or less."""
        strength = self.attributes.strength
        if strength >= 9:
            return 2
        if strength >= 7:
            return 1
        if strength <= 2:
            return -1
        return 0

    def roll_penalty(self) -> int:
        """Armor and wound penalties applied to all of this character's rolls."""
        return self.armor.movement_penalty + self.wounds.movement_penalty()

    # -------------------------------------------------------------------------
    # Rolls
    # -------------------------------------------------------------------------

    def attack_roll(self, dice: DiceSource) -> int:
        return self.weapon_skill + dice.d10() + self.roll_penalty()

    def parry_roll(self, dice: DiceSource) -> int:
        return self.weapon_skill + dice.d10() + self.roll_penalty()

    def dodge_roll(self, dice: DiceSource) -> int:
        return self.dodge_skill + dice.d10() + self.roll_penalty()

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def is_alive(self) -> bool:
        return not self.wounds.is_dead()

    def can_act(self) -> bool:
        """Alive and not incapacitated."""
        return self.is_alive() and not self.wounds.is_incapacitated()

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> dict[str, Any]:
        """Dump every field as JSON-compatible data."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Character:
        """Rebuild a character from ``to_snapshot`` output."""
        return cls.model_validate(data)


__all__ = ["Character"]
