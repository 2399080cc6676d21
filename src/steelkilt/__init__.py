"""Steelkilt - rules engine for the Draft RPG.

A library of combat and character-development rules: melee and ranged
combat resolved with a single d10, escalating wounds, exhaustion,
maneuvers, hit locations, skill progression and magic.

All randomness comes from an injected dice source, so a fight can be
replayed exactly.

Example:
    >>> from steelkilt import Armor, Attributes, Character, DefenseAction, DiceRoller, Weapon, combat_round
    >>>
    >>> aldric = Character(
    ...     name="Aldric",
    ...     attributes=Attributes(strength=8, constitution=7),
    ...     weapon_skill=7,
    ...     dodge_skill=5,
    ...     weapon=Weapon.long_sword(),
    ...     armor=Armor.leather(),
    ... )
    >>> brenna = Character(name="Brenna", weapon_skill=6, dodge_skill=7)
    >>> result = combat_round(aldric, brenna, DefenseAction.PARRY, DiceRoller(seed=7))
    >>> result.hit in (True, False)
    True

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 records and trackers (attributes, wounds, skills, magic, ...).
    engine: Dice, melee exchanges, the melee arena, ranged attacks and casting.
"""

from __future__ import annotations

# Core
from steelkilt.core.config import Settings, get_settings
from steelkilt.core.exceptions import SteelkiltError
from steelkilt.core.logging import configure_logging, get_logger

# Models
from steelkilt.models import (
    Armor,
    AttackDirection,
    Attributes,
    Character,
    CombatManeuver,
    CombatStance,
    Cover,
    DefenseAction,
    Exhaustion,
    ExhaustionLevel,
    HitLocation,
    LocationalDamage,
    MagicBranch,
    MagicLore,
    MagicUser,
    RangedWeapon,
    Skill,
    SkillDifficulty,
    SkillSet,
    Spell,
    SpellDifficulty,
    TargetSize,
    Weapon,
    WeaponImpact,
    WoundLevel,
    Wounds,
    determine_hit_location,
)

# Engine
from steelkilt.engine import (
    CombatResult,
    Combatant,
    DiceRoller,
    DiceSource,
    ExchangeModifiers,
    Melee,
    RangedAttackState,
    ScriptedDice,
    calculate_ranged_modifiers,
    cast_spell,
    combat_round,
    ranged_attack,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "SteelkiltError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Armor",
    "AttackDirection",
    "Attributes",
    "Character",
    "CombatManeuver",
    "CombatStance",
    "Cover",
    "DefenseAction",
    "Exhaustion",
    "ExhaustionLevel",
    "HitLocation",
    "LocationalDamage",
    "MagicBranch",
    "MagicLore",
    "MagicUser",
    "RangedWeapon",
    "Skill",
    "SkillDifficulty",
    "SkillSet",
    "Spell",
    "SpellDifficulty",
    "TargetSize",
    "Weapon",
    "WeaponImpact",
    "WoundLevel",
    "Wounds",
    "determine_hit_location",
    # Engine
    "CombatResult",
    "Combatant",
    "DiceRoller",
    "DiceSource",
    "ExchangeModifiers",
    "Melee",
    "RangedAttackState",
    "ScriptedDice",
    "calculate_ranged_modifiers",
    "cast_spell",
    "combat_round",
    "ranged_attack",
]
