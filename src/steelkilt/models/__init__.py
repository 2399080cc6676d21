"""Pydantic V2 models for the steelkilt rules engine.

Submodules:
    enums: Closed rule tables (wound levels, maneuvers, locations, ...)
    attributes: The nine character attributes and stamina
    equipment: Melee weapons, armor and ranged weapons
    wounds: Escalating wound counters
    exhaustion: Fatigue points and levels
    maneuvers: Combat stance and the aim-then-strike preparation
    hit_location: Hit location tables and per-location damage
    skills: Skill cost curve and skill sets
    magic: Lore, spells, casting and magical exhaustion
    character: The character snapshot record

Example:
    >>> from steelkilt.models import Attributes, Character, Weapon, Armor
    >>> hero = Character(
    ...     name="Aldric",
    ...     attributes=Attributes(strength=8, constitution=7),
    ...     weapon_skill=7,
    ...     dodge_skill=5,
    ...     weapon=Weapon.long_sword(),
    ...     armor=Armor.leather(),
    ... )
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from steelkilt.models.enums import (
    ArmorType,
    AttackDirection,
    CombatManeuver,
    Cover,
    DefenseAction,
    ExhaustionLevel,
    HitLocation,
    LoreDifficulty,
    MagicBranch,
    RangedWeaponKind,
    SkillDifficulty,
    SpellDifficulty,
    SpellDurationKind,
    SpellRangeKind,
    TargetSize,
    WeaponImpact,
    WoundLevel,
)

# =============================================================================
# Records & Components
# =============================================================================
from steelkilt.models.attributes import Attributes
from steelkilt.models.equipment import Armor, RangedWeapon, Weapon
from steelkilt.models.wounds import Wounds
from steelkilt.models.exhaustion import Exhaustion, exhaustion_level_for
from steelkilt.models.maneuvers import CombatStance
from steelkilt.models.hit_location import (
    LocationalDamage,
    determine_hit_location,
    location_for_face,
)
from steelkilt.models.skills import Skill, SkillPrerequisite, SkillSet
from steelkilt.models.magic import (
    CastingResult,
    LearnedSpell,
    MagicLore,
    MagicUser,
    Spell,
    SpellDuration,
    SpellRange,
)
from steelkilt.models.character import Character


__all__ = [
    # Enums
    "ArmorType",
    "AttackDirection",
    "CombatManeuver",
    "Cover",
    "DefenseAction",
    "ExhaustionLevel",
    "HitLocation",
    "LoreDifficulty",
    "MagicBranch",
    "RangedWeaponKind",
    "SkillDifficulty",
    "SpellDifficulty",
    "SpellDurationKind",
    "SpellRangeKind",
    "TargetSize",
    "WeaponImpact",
    "WoundLevel",
    # Records & components
    "Attributes",
    "Weapon",
    "Armor",
    "RangedWeapon",
    "Wounds",
    "Exhaustion",
    "exhaustion_level_for",
    "CombatStance",
    "LocationalDamage",
    "determine_hit_location",
    "location_for_face",
    "Skill",
    "SkillPrerequisite",
    "SkillSet",
    "Spell",
    "SpellRange",
    "SpellDuration",
    "MagicLore",
    "LearnedSpell",
    "CastingResult",
    "MagicUser",
    "Character",
]
