"""Weapons and armor.

Melee weapon damage is derived from the impact class; armor protection
is derived from the armor type. Ranged weapons carry their own damage
and range bands and know how accuracy falls off with distance.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field, model_validator

from steelkilt.core.constants import OUT_OF_RANGE_PENALTY
from steelkilt.models.base import ValueObject
from steelkilt.models.enums import ArmorType, RangedWeaponKind, WeaponImpact


# =============================================================================
# Melee Weapons
# =============================================================================


class Weapon(ValueObject):
    """A melee weapon."""

    name: str = Field(..., min_length=1)
    impact: WeaponImpact = Field(default=WeaponImpact.MEDIUM)

    @computed_field(description="Flat damage: impact x 2, +1 for a pointed or sharp edge")
    @property
    def damage(self) -> int:
        return int(self.impact) * 2 + 1

    @classmethod
    def dagger(cls) -> Weapon:
        return cls(name="Dagger", impact=WeaponImpact.SMALL)

    @classmethod
    def long_sword(cls) -> Weapon:
        return cls(name="Long Sword", impact=WeaponImpact.MEDIUM)

    @classmethod
    def two_handed_sword(cls) -> Weapon:
        return cls(name="Two-Handed Sword", impact=WeaponImpact.LARGE)


# =============================================================================
# Armor
# =============================================================================


class Armor(ValueObject):
    """Body armor.

    Protection is subtracted from incoming damage; the movement penalty
    (zero or negative) applies to every attack, parry and dodge roll of
    the wearer.
    """

    name: str = Field(..., min_length=1)
    armor_type: ArmorType = Field(default=ArmorType.HEAVY_CLOTH)
    protection: int = Field(default=0, ge=0)
    movement_penalty: int = Field(default=0, le=0)

    @model_validator(mode="before")
    @classmethod
    def default_protection(cls, data: Any) -> Any:
        """Protection defaults to the armor type's value when not given."""
        if isinstance(data, dict) and "protection" not in data:
            armor_type = ArmorType(data.get("armor_type", ArmorType.HEAVY_CLOTH))
            data = {**data, "protection": int(armor_type)}
        return data

    @classmethod
    def none(cls) -> Armor:
        return cls(name="None", armor_type=ArmorType.HEAVY_CLOTH, protection=0, movement_penalty=0)

    @classmethod
    def leather(cls) -> Armor:
        return cls(name="Leather Armor", armor_type=ArmorType.LEATHER, movement_penalty=0)

    @classmethod
    def chain_mail(cls) -> Armor:
        return cls(name="Chain Mail", armor_type=ArmorType.CHAIN, movement_penalty=-1)

    @classmethod
    def plate(cls) -> Armor:
        return cls(name="Plate Armor", armor_type=ArmorType.PLATE, movement_penalty=-1)


# =============================================================================
# Ranged Weapons
# =============================================================================


class RangedWeapon(ValueObject):
    """A bow, crossbow, thrown weapon or firearm.

    Attributes:
        damage: Flat damage added on a hit.
        point_blank_range: Distance (meters) with no accuracy penalty.
        max_range: Farthest distance (meters) the weapon can reach.
        preparation_time: Segments needed to ready the weapon.
        rate_of_fire: Shots available per preparation.
    """

    name: str = Field(..., min_length=1)
    kind: RangedWeaponKind
    damage: int = Field(..., ge=0)
    point_blank_range: int = Field(..., ge=0)
    max_range: int = Field(..., ge=0)
    preparation_time: int = Field(default=1, ge=0)
    rate_of_fire: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def validate_ranges(self) -> RangedWeapon:
        if self.point_blank_range > self.max_range:
            raise ValueError("point_blank_range cannot exceed max_range")
        return self

    def distance_modifier(self, distance: int) -> int:
        """Accuracy modifier for shooting at the given distance.

        Zero up to point blank range, then one point lost per full range
        increment beyond it. Targets past maximum range get the
        out-of-range sentinel.
        """
        if distance <= self.point_blank_range:
            return 0
        if distance <= self.max_range:
            beyond = distance - self.point_blank_range
            return -(beyond // self.kind.range_increment)
        return OUT_OF_RANGE_PENALTY

    def in_range(self, distance: int) -> bool:
        return distance <= self.max_range

    @classmethod
    def short_bow(cls) -> RangedWeapon:
        return cls(
            name="Short Bow",
            kind=RangedWeaponKind.BOW,
            damage=4,
            point_blank_range=20,
            max_range=100,
            preparation_time=3,
            rate_of_fire=1,
        )

    @classmethod
    def long_bow(cls) -> RangedWeapon:
        return cls(
            name="Long Bow",
            kind=RangedWeaponKind.BOW,
            damage=6,
            point_blank_range=30,
            max_range=120,
            preparation_time=3,
            rate_of_fire=1,
        )

    @classmethod
    def crossbow(cls) -> RangedWeapon:
        return cls(
            name="Crossbow",
            kind=RangedWeaponKind.CROSSBOW,
            damage=6,
            point_blank_range=30,
            max_range=100,
            preparation_time=6,
            rate_of_fire=1,
        )

    @classmethod
    def pistol(cls) -> RangedWeapon:
        return cls(
            name="Pistol",
            kind=RangedWeaponKind.FIREARM,
            damage=6,
            point_blank_range=20,
            max_range=80,
            preparation_time=1,
            rate_of_fire=3,
        )

    @classmethod
    def rifle(cls) -> RangedWeapon:
        return cls(
            name="Rifle",
            kind=RangedWeaponKind.FIREARM,
            damage=8,
            point_blank_range=40,
            max_range=200,
            preparation_time=2,
            rate_of_fire=2,
        )

    @classmethod
    def javelin(cls) -> RangedWeapon:
        return cls(
            name="Javelin",
            kind=RangedWeaponKind.THROWN,
            damage=4,
            point_blank_range=15,
            max_range=40,
            preparation_time=1,
            rate_of_fire=1,
        )


__all__ = ["Weapon", "Armor", "RangedWeapon"]
