"""Ranged combat.

Ranged weapons must be readied before use and carry a limited number of
shots per preparation. A shooter may aim for a round to gain +1. The
defender can only dodge; parrying a missile is not an option.

Every check (readiness, ammunition, range) happens before anything is
mutated, so a refused shot leaves the attack state and the target as
they were.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from steelkilt.core.constants import MAX_AIMING_BONUS
from steelkilt.core.exceptions import NoAmmunitionError, OutOfRangeError, WeaponNotReadyError
from steelkilt.core.logging import get_logger
from steelkilt.engine.combat import apply_damage
from steelkilt.models.base import Component
from steelkilt.models.enums import Cover, TargetSize, WoundLevel


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource
    from steelkilt.models.character import Character
    from steelkilt.models.equipment import RangedWeapon


logger = get_logger(__name__)


class RangedAttackState(Component):
    """Readiness, aiming and remaining shots of one shooter."""

    weapon_ready: bool = Field(default=False)
    aiming: bool = Field(default=False)
    aiming_rounds: int = Field(default=0, ge=0)
    shots_remaining: int = Field(default=0, ge=0)

    def prepare_weapon(self, weapon: RangedWeapon) -> None:
        self.weapon_ready = True
        self.shots_remaining = weapon.rate_of_fire

    def reload(self, weapon: RangedWeapon) -> None:
        self.prepare_weapon(weapon)

    def start_aiming(self) -> None:
        self.aiming = True
        self.aiming_rounds = 0

    def continue_aiming(self) -> None:
        if self.aiming:
            self.aiming_rounds += 1

    def aiming_bonus(self) -> int:
        if self.aiming and self.aiming_rounds >= 1:
            return MAX_AIMING_BONUS
        return 0

    def check_can_fire(self) -> None:
        """Raise if the weapon cannot fire right now."""
        if not self.weapon_ready:
            raise WeaponNotReadyError()
        if self.shots_remaining <= 0:
            raise NoAmmunitionError()

    def fire(self) -> None:
        """Spend one shot. Aiming is lost with the shot.

        Raises:
            WeaponNotReadyError: If the weapon has not been prepared.
            NoAmmunitionError: If no shots remain.
        """
        self.check_can_fire()
        self.shots_remaining -= 1
        self.aiming = False
        self.aiming_rounds = 0


def calculate_ranged_modifiers(
    distance: int,
    target_size: TargetSize,
    cover: Cover,
    weapon: RangedWeapon,
    state: RangedAttackState,
) -> int:
    """Sum of distance, target size, cover and aiming modifiers."""
    return (
        weapon.distance_modifier(distance)
        + TargetSize(target_size).modifier
        + Cover(cover).modifier
        + state.aiming_bonus()
    )


class RangedAttackResult(BaseModel):
    """Outcome of one shot."""

    model_config = ConfigDict(frozen=True)

    attacker: str
    defender: str
    weapon: str
    distance: int
    modifiers: int
    attack_roll: int
    defense_roll: int
    hit: bool
    damage: int = 0
    wound_level: WoundLevel | None = None
    defender_died: bool = False


def ranged_attack(
    attacker: Character,
    defender: Character,
    weapon: RangedWeapon,
    state: RangedAttackState,
    distance: int,
    dice: DiceSource,
    target_size: TargetSize = TargetSize.MEDIUM,
    cover: Cover = Cover.NONE,
) -> RangedAttackResult:
    """Shoot at a defender.

    The attack is ranged skill + d10 + situational modifiers + the
    attacker's armor and wound penalties. The defender dodges. Damage on
    a hit is the margin + weapon damage - armor protection, graded into a
    wound exactly as in melee.

    Raises:
        WeaponNotReadyError: If the weapon has not been prepared.
        NoAmmunitionError: If no shots remain.
        OutOfRangeError: If the target is beyond maximum range.
    """
    state.check_can_fire()
    if not weapon.in_range(distance):
        logger.warning(
            "Shot refused",
            shooter=attacker.name,
            reason="out_of_range",
            distance=distance,
            max_range=weapon.max_range,
        )
        raise OutOfRangeError(distance=distance, max_range=weapon.max_range)

    modifiers = calculate_ranged_modifiers(distance, target_size, cover, weapon, state)
    state.fire()

    attack_roll = attacker.ranged_skill + dice.d10() + modifiers + attacker.roll_penalty()
    defense_roll = defender.dodge_roll(dice)
    hit = attack_roll > defense_roll

    damage = 0
    wound_level: WoundLevel | None = None
    defender_died = False
    if hit:
        damage = max(0, (attack_roll - defense_roll) + weapon.damage - defender.armor.protection)
        wound_level, defender_died = apply_damage(defender, damage)

    logger.info(
        "Shot resolved",
        shooter=attacker.name,
        target=defender.name,
        weapon=weapon.name,
        distance=distance,
        modifiers=modifiers,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        hit=hit,
        damage=damage,
        wound=wound_level.value if wound_level else None,
    )
    return RangedAttackResult(
        attacker=attacker.name,
        defender=defender.name,
        weapon=weapon.name,
        distance=distance,
        modifiers=modifiers,
        attack_roll=attack_roll,
        defense_roll=defense_roll,
        hit=hit,
        damage=damage,
        wound_level=wound_level,
        defender_died=defender_died,
    )


__all__ = [
    "RangedAttackState",
    "RangedAttackResult",
    "calculate_ranged_modifiers",
    "ranged_attack",
]
