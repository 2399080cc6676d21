"""Melee combat resolution.

One call to ``combat_round`` resolves one attack exchange:

1. The attacker rolls weapon skill + d10 + own armor and wound penalties.
2. The defender rolls the same way with weapon skill (parry) or dodge
   skill (dodge) and their own penalties.
3. The attack hits only if it beats the defense; ties go to the defender.
4. Damage is the margin + attacker strength bonus + weapon damage -
   defender armor protection, never below zero.
5. Damage above 1 wounds the defender, graded against constitution:
   over 2 x CON is a killing critical, over CON critical, over CON / 2
   severe, otherwise light. Damage of 0 or 1 is absorbed.

The only side effect is the wound added to the defender.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from steelkilt.core.constants import MIN_DAMAGE_FOR_WOUND
from steelkilt.core.logging import get_logger
from steelkilt.models.enums import DefenseAction, HitLocation, WoundLevel


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource
    from steelkilt.models.character import Character


logger = get_logger(__name__)


class ExchangeModifiers(BaseModel):
    """Situational adjustments to one exchange.

    The defaults leave the exchange exactly as the base rules describe.
    Stances, exhaustion and hit locations are folded in through here by
    the melee arena.
    """

    model_config = ConfigDict(frozen=True)

    attack: int = 0
    defense: int = 0
    damage: int = 0
    damage_multiplier: float = Field(default=1.0, ge=0)


class CombatResult(BaseModel):
    """Outcome of one attack exchange."""

    model_config = ConfigDict(frozen=True)

    attacker: str
    defender: str
    attack_roll: int
    defense_roll: int
    hit: bool
    damage: int = 0
    wound_level: WoundLevel | None = None
    defender_died: bool = False
    hit_location: HitLocation | None = None

    @property
    def margin(self) -> int:
        return self.attack_roll - self.defense_roll


def classify_wound(damage: int, constitution: int) -> tuple[WoundLevel | None, bool]:
    """Grade damage against the defender's constitution.

    Returns:
        The wound level (None when the damage is absorbed) and whether the
        blow alone is fatal.
    """
    if damage < MIN_DAMAGE_FOR_WOUND:
        return None, False
    if damage > constitution * 2:
        return WoundLevel.CRITICAL, True
    if damage > constitution:
        return WoundLevel.CRITICAL, False
    if damage > constitution // 2:
        return WoundLevel.SEVERE, False
    return WoundLevel.LIGHT, False


def apply_damage(defender: Character, damage: int) -> tuple[WoundLevel | None, bool]:
    """Wound the defender according to the damage dealt.

    Returns:
        The wound level inflicted (None when absorbed) and whether the
        defender died, either from the blow itself or from stacked wounds.
    """
    level, fatal = classify_wound(damage, defender.attributes.constitution)
    if level is None:
        return None, False

    defender.wounds.add_wound(level)
    if defender.wounds.is_dead():
        fatal = True
    return level, fatal


def defense_roll_for(defender: Character, action: DefenseAction, dice: DiceSource) -> int:
    if DefenseAction(action) is DefenseAction.PARRY:
        return defender.parry_roll(dice)
    return defender.dodge_roll(dice)


def combat_round(
    attacker: Character,
    defender: Character,
    defender_action: DefenseAction,
    dice: DiceSource,
    modifiers: ExchangeModifiers | None = None,
    *,
    hit_location: HitLocation | None = None,
) -> CombatResult:
    """Resolve one attack of ``attacker`` against ``defender``.

    Args:
        attacker: The attacking character; never mutated.
        defender: The defending character; receives any wound.
        defender_action: Parry or dodge.
        dice: Source of the two d10 rolls.
        modifiers: Optional situational modifiers.
        hit_location: Location already determined for this blow, echoed
            in the result.

    Returns:
        CombatResult with both rolls, damage and any wound inflicted.
    """
    mods = modifiers or ExchangeModifiers()

    attack_roll = attacker.attack_roll(dice) + mods.attack
    defense_roll = defense_roll_for(defender, defender_action, dice) + mods.defense
    hit = attack_roll > defense_roll

    damage = 0
    wound_level: WoundLevel | None = None
    defender_died = False

    if hit:
        raw = (
            (attack_roll - defense_roll)
            + attacker.strength_bonus()
            + attacker.weapon.damage
            - defender.armor.protection
        )
        damage = max(0, raw)
        if mods.damage_multiplier != 1.0 or mods.damage:
            damage = max(0, int(damage * mods.damage_multiplier) + mods.damage)
        wound_level, defender_died = apply_damage(defender, damage)

    result = CombatResult(
        attacker=attacker.name,
        defender=defender.name,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        hit=hit,
        damage=damage,
        wound_level=wound_level,
        defender_died=defender_died,
        hit_location=hit_location if hit else None,
    )
    logger.info(
        "Exchange resolved",
        attacker=attacker.name,
        defender=defender.name,
        defense=DefenseAction(defender_action).value,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        hit=hit,
        damage=damage,
        wound=wound_level.value if wound_level else None,
        defender_died=defender_died,
    )
    return result


__all__ = [
    "ExchangeModifiers",
    "CombatResult",
    "classify_wound",
    "apply_damage",
    "defense_roll_for",
    "combat_round",
]
