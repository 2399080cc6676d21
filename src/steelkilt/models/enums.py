"""Enumeration types for the steelkilt rules engine.

Every rule table of the Draft RPG combat system is a closed set of
variants, so each one is an enum whose per-variant numbers are looked up
from a fixed mapping. A variant without its table entry raises KeyError
on first lookup rather than silently defaulting.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


# =============================================================================
# Wounds & Defense
# =============================================================================


class WoundLevel(StrEnum):
    """Severity classification of a single injury."""

    LIGHT = "light"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def next_level(self) -> WoundLevel | None:
        """The severity a stack of this level overflows into."""
        return _NEXT_WOUND_LEVEL[self]


_NEXT_WOUND_LEVEL: dict[WoundLevel, WoundLevel | None] = {
    WoundLevel.LIGHT: WoundLevel.SEVERE,
    WoundLevel.SEVERE: WoundLevel.CRITICAL,
    WoundLevel.CRITICAL: None,
}


class DefenseAction(StrEnum):
    """How a defender answers a melee attack."""

    PARRY = "parry"
    """Block with the weapon; uses weapon skill."""

    DODGE = "dodge"
    """Step out of the way; uses dodge skill."""


class ExhaustionLevel(StrEnum):
    """Fatigue bands derived from points against a threshold."""

    NONE = "none"
    LIGHT = "light"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def penalty(self) -> int:
        """Roll penalty imposed at this level."""
        return _EXHAUSTION_PENALTIES[self]

    @property
    def status(self) -> str:
        """Descriptive status shown to players."""
        return _EXHAUSTION_STATUS[self]


_EXHAUSTION_PENALTIES: dict[ExhaustionLevel, int] = {
    ExhaustionLevel.NONE: 0,
    ExhaustionLevel.LIGHT: -1,
    ExhaustionLevel.SEVERE: -2,
    ExhaustionLevel.CRITICAL: -4,
}

_EXHAUSTION_STATUS: dict[ExhaustionLevel, str] = {
    ExhaustionLevel.NONE: "Fresh",
    ExhaustionLevel.LIGHT: "Tired",
    ExhaustionLevel.SEVERE: "Exhausted",
    ExhaustionLevel.CRITICAL: "Completely Drained",
}


# =============================================================================
# Maneuvers
# =============================================================================


class CombatManeuver(StrEnum):
    """Tactical postures a combatant can adopt for a round."""

    NORMAL = "normal"
    """Plain attack with no special effects."""

    DEFENSIVE_POSITION = "defensive_position"
    """+2 to parry/dodge, cannot attack."""

    CHARGE = "charge"
    """+1 attack, +1 damage, -2 defense; requires movement."""

    ALL_OUT_ATTACK = "all_out_attack"
    """+2 attack, -4 defense."""

    AIMED_ATTACK = "aimed_attack"
    """-2 attack, +2 damage; requires aiming beforehand."""

    @property
    def attack_modifier(self) -> int:
        return _MANEUVER_MODIFIERS[self][0]

    @property
    def defense_modifier(self) -> int:
        return _MANEUVER_MODIFIERS[self][1]

    @property
    def damage_modifier(self) -> int:
        return _MANEUVER_MODIFIERS[self][2]

    @property
    def can_attack(self) -> bool:
        return self is not CombatManeuver.DEFENSIVE_POSITION

    @property
    def requires_preparation(self) -> bool:
        return self is CombatManeuver.AIMED_ATTACK

    @property
    def label(self) -> str:
        return _MANEUVER_LABELS[self]


# (attack, defense, damage)
_MANEUVER_MODIFIERS: dict[CombatManeuver, tuple[int, int, int]] = {
    CombatManeuver.NORMAL: (0, 0, 0),
    CombatManeuver.DEFENSIVE_POSITION: (0, 2, 0),
    CombatManeuver.CHARGE: (1, -2, 1),
    CombatManeuver.ALL_OUT_ATTACK: (2, -4, 0),
    CombatManeuver.AIMED_ATTACK: (-2, 0, 2),
}

_MANEUVER_LABELS: dict[CombatManeuver, str] = {
    CombatManeuver.NORMAL: "Normal",
    CombatManeuver.DEFENSIVE_POSITION: "Defensive Position",
    CombatManeuver.CHARGE: "Charge",
    CombatManeuver.ALL_OUT_ATTACK: "All-Out Attack",
    CombatManeuver.AIMED_ATTACK: "Aimed Attack",
}


# =============================================================================
# Hit Locations
# =============================================================================


class HitLocation(StrEnum):
    """Body regions an attack can strike."""

    HEAD = "head"
    TORSO = "torso"
    LEFT_ARM = "left_arm"
    RIGHT_ARM = "right_arm"
    LEFT_LEG = "left_leg"
    RIGHT_LEG = "right_leg"

    @property
    def damage_multiplier(self) -> float:
        return _LOCATION_MULTIPLIERS[self]

    @property
    def causes_weapon_drop(self) -> bool:
        """Whether disabling this location makes the combatant drop a weapon."""
        return self in (HitLocation.LEFT_ARM, HitLocation.RIGHT_ARM)

    @property
    def can_sever(self) -> bool:
        return self not in (HitLocation.HEAD, HitLocation.TORSO)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


_LOCATION_MULTIPLIERS: dict[HitLocation, float] = {
    HitLocation.HEAD: 1.5,
    HitLocation.TORSO: 1.0,
    HitLocation.LEFT_ARM: 0.75,
    HitLocation.RIGHT_ARM: 0.75,
    HitLocation.LEFT_LEG: 0.75,
    HitLocation.RIGHT_LEG: 0.75,
}


class AttackDirection(StrEnum):
    """Where an attack comes from, relative to the defender."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# =============================================================================
# Skills & Magic
# =============================================================================


class SkillDifficulty(StrEnum):
    """How hard a skill is to learn."""

    EASY = "easy"
    """1 point up to the attribute score, normal progression after."""

    NORMAL = "normal"
    HARD = "hard"
    VERY_HARD = "very_hard"

    @property
    def cost_multiplier(self) -> int:
        return _SKILL_COST_MULTIPLIERS[self]


_SKILL_COST_MULTIPLIERS: dict[SkillDifficulty, int] = {
    SkillDifficulty.EASY: 1,
    SkillDifficulty.NORMAL: 1,
    SkillDifficulty.HARD: 2,
    SkillDifficulty.VERY_HARD: 3,
}


class LoreDifficulty(StrEnum):
    """How hard a magic branch's lore is to learn."""

    NORMAL = "normal"
    HARD = "hard"
    VERY_HARD = "very_hard"

    @property
    def cost_multiplier(self) -> int:
        return _LORE_COST_MULTIPLIERS[self]


_LORE_COST_MULTIPLIERS: dict[LoreDifficulty, int] = {
    LoreDifficulty.NORMAL: 1,
    LoreDifficulty.HARD: 2,
    LoreDifficulty.VERY_HARD: 3,
}


class MagicBranch(StrEnum):
    """The nine branches of magic."""

    ALCHEMY = "alchemy"
    """Constitution and alteration of matter."""

    ANIMATION = "animation"
    """Healing wounds, modifying physical abilities."""

    CONJURATION = "conjuration"
    """Summoning creatures."""

    DIVINATION = "divination"
    """Foreseeing events, gathering information."""

    ELEMENTALISM = "elementalism"
    """Controlling fire, water, air and earth."""

    MENTALISM = "mentalism"
    """Penetrating and controlling minds."""

    NECROMANCY = "necromancy"
    """Animating and controlling the dead."""

    THAUMATURGY = "thaumaturgy"
    """Controlling matter macroscopically."""

    TRANSPORTATION = "transportation"
    """Transport through space and time."""

    @property
    def lore_difficulty(self) -> LoreDifficulty:
        return _BRANCH_LORE_DIFFICULTY[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_BRANCH_LORE_DIFFICULTY: dict[MagicBranch, LoreDifficulty] = {
    MagicBranch.ALCHEMY: LoreDifficulty.HARD,
    MagicBranch.ANIMATION: LoreDifficulty.HARD,
    MagicBranch.CONJURATION: LoreDifficulty.VERY_HARD,
    MagicBranch.DIVINATION: LoreDifficulty.NORMAL,
    MagicBranch.ELEMENTALISM: LoreDifficulty.VERY_HARD,
    MagicBranch.MENTALISM: LoreDifficulty.HARD,
    MagicBranch.NECROMANCY: LoreDifficulty.VERY_HARD,
    MagicBranch.THAUMATURGY: LoreDifficulty.HARD,
    MagicBranch.TRANSPORTATION: LoreDifficulty.VERY_HARD,
}


class SpellDifficulty(StrEnum):
    """Casting difficulty of a spell."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def base_target(self) -> int:
        """Target number a casting total must reach."""
        return _SPELL_TARGETS[self][0]

    @property
    def base_exhaustion(self) -> int:
        """Exhaustion points a successful casting costs."""
        return _SPELL_TARGETS[self][1]


# (target number, exhaustion points)
_SPELL_TARGETS: dict[SpellDifficulty, tuple[int, int]] = {
    SpellDifficulty.EASY: (8, 1),
    SpellDifficulty.NORMAL: (10, 2),
    SpellDifficulty.HARD: (12, 3),
}


class SpellRangeKind(StrEnum):
    PERSONAL = "personal"
    TOUCH = "touch"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    UNLIMITED = "unlimited"


class SpellDurationKind(StrEnum):
    INSTANT = "instant"
    ROUNDS = "rounds"
    MINUTES = "minutes"
    HOURS = "hours"
    PERMANENT = "permanent"


# =============================================================================
# Equipment
# =============================================================================


class WeaponImpact(IntEnum):
    """Impact class of a melee weapon."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    HUGE = 4


class ArmorType(IntEnum):
    """Armor types; the value is the protection they grant."""

    HEAVY_CLOTH = 1
    LEATHER = 2
    CHAIN = 3
    PLATE = 4
    FULL_PLATE = 5


class RangedWeaponKind(StrEnum):
    """Families of ranged weapons, which lose accuracy at different rates."""

    BOW = "bow"
    CROSSBOW = "crossbow"
    THROWN = "thrown"
    FIREARM = "firearm"

    @property
    def range_increment(self) -> int:
        """Distance beyond point blank that costs one point of accuracy."""
        if self in (RangedWeaponKind.BOW, RangedWeaponKind.THROWN):
            return 10
        return 20


class TargetSize(StrEnum):
    """Size of a ranged target."""

    TINY = "tiny"
    """Rat, small bird."""

    SMALL = "small"
    """Cat, small dog."""

    MEDIUM = "medium"
    """Human."""

    LARGE = "large"
    """Horse, car."""

    HUGE = "huge"
    """Dragon, tank."""

    GIGANTIC = "gigantic"
    """Whale, building."""

    @property
    def modifier(self) -> int:
        return _TARGET_SIZE_MODIFIERS[self]


_TARGET_SIZE_MODIFIERS: dict[TargetSize, int] = {
    TargetSize.TINY: -4,
    TargetSize.SMALL: -2,
    TargetSize.MEDIUM: 0,
    TargetSize.LARGE: 2,
    TargetSize.HUGE: 4,
    TargetSize.GIGANTIC: 6,
}


class Cover(StrEnum):
    """Cover protecting a ranged target."""

    NONE = "none"
    PARTIAL = "partial"
    """Half the body exposed."""

    THREE_QUARTERS = "three_quarters"
    """A quarter of the body exposed."""

    FULL = "full"
    """Only small parts visible."""

    @property
    def modifier(self) -> int:
        return _COVER_MODIFIERS[self]


_COVER_MODIFIERS: dict[Cover, int] = {
    Cover.NONE: 0,
    Cover.PARTIAL: -2,
    Cover.THREE_QUARTERS: -4,
    Cover.FULL: -8,
}


__all__ = [
    "WoundLevel",
    "DefenseAction",
    "ExhaustionLevel",
    "CombatManeuver",
    "HitLocation",
    "AttackDirection",
    "SkillDifficulty",
    "LoreDifficulty",
    "MagicBranch",
    "SpellDifficulty",
    "SpellRangeKind",
    "SpellDurationKind",
    "WeaponImpact",
    "ArmorType",
    "RangedWeaponKind",
    "TargetSize",
    "Cover",
]
