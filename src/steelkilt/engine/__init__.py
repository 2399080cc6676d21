"""Rule resolution: dice, melee, ranged combat and casting.

Submodules:
    dice: Injectable d10 sources
    combat: One melee exchange and wound grading
    melee: Arena holding combatants with stance, exhaustion and locations
    ranged: Ranged attack state and shot resolution
    casting: Casting a learned spell with a die roll
"""

from __future__ import annotations

from steelkilt.engine.dice import (
    DiceRoller,
    DiceSource,
    ScriptedDice,
    d10,
    get_default_roller,
    reset_default_roller,
)
from steelkilt.engine.combat import (
    CombatResult,
    ExchangeModifiers,
    apply_damage,
    classify_wound,
    combat_round,
)
from steelkilt.engine.melee import Combatant, ExchangeReport, Melee
from steelkilt.engine.ranged import (
    RangedAttackResult,
    RangedAttackState,
    calculate_ranged_modifiers,
    ranged_attack,
)
from steelkilt.engine.casting import cast_spell


__all__ = [
    # Dice
    "DiceSource",
    "DiceRoller",
    "ScriptedDice",
    "d10",
    "get_default_roller",
    "reset_default_roller",
    # Melee
    "CombatResult",
    "ExchangeModifiers",
    "apply_damage",
    "classify_wound",
    "combat_round",
    "Combatant",
    "ExchangeReport",
    "Melee",
    # Ranged
    "RangedAttackState",
    "RangedAttackResult",
    "calculate_ranged_modifiers",
    "ranged_attack",
    # Magic
    "cast_spell",
]
