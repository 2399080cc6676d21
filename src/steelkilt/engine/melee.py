"""Melee arena.

The arena owns every combatant of a fight and addresses them by index,
so an exchange can mutate the defender while reading the attacker. Each
combatant carries the state that lives only for the duration of a
fight: stance, exhaustion and per-location damage.

Dice order of one exchange: hit location (only when a direction is
given), then the attack roll, then the defense roll.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from steelkilt.core.config import get_settings
from steelkilt.core.exceptions import CombatError
from steelkilt.core.logging import get_logger
from steelkilt.engine.combat import CombatResult, ExchangeModifiers, combat_round
from steelkilt.models.base import Component
from steelkilt.models.character import Character
from steelkilt.models.enums import AttackDirection, DefenseAction, HitLocation, WoundLevel
from steelkilt.models.exhaustion import Exhaustion
from steelkilt.models.hit_location import LocationalDamage, determine_hit_location
from steelkilt.models.maneuvers import CombatStance


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource


logger = get_logger(__name__)


# =============================================================================
# Combatant
# =============================================================================


class Combatant(Component):
    """A character together with its per-fight state."""

    character: Character
    stance: CombatStance = Field(default_factory=CombatStance)
    exhaustion: Exhaustion
    locations: dict[HitLocation, LocationalDamage] = Field(default_factory=dict)

    @classmethod
    def from_character(cls, character: Character) -> Combatant:
        """Enter a fight fresh, with stamina as the exhaustion threshold."""
        return cls(
            character=character,
            exhaustion=Exhaustion.for_stamina(character.attributes.stamina),
        )

    @property
    def name(self) -> str:
        return self.character.name

    def location(self, location: HitLocation) -> LocationalDamage:
        """Damage record for a location, created on first use."""
        location = HitLocation(location)
        if location not in self.locations:
            self.locations[location] = LocationalDamage(location=location)
        return self.locations[location]

    def add_location_wound(self, location: HitLocation, level: WoundLevel) -> bool:
        """Record a wound on a location and return whether this wound disabled it."""
        damage = self.location(location)
        was_disabled = damage.disabled
        damage.add_wound(level)
        return damage.disabled and not was_disabled

    def total_attack_modifier(self) -> int:
        return self.stance.total_attack_modifier() + self.exhaustion.penalty()

    def total_defense_modifier(self) -> int:
        return self.stance.total_defense_modifier() + self.exhaustion.penalty()

    def stance_damage_modifier(self) -> int:
        return self.stance.total_damage_modifier()

    def can_attack(self) -> bool:
        return self.stance.current_maneuver.can_attack

    def is_alive(self) -> bool:
        return self.character.is_alive()

    def can_act(self) -> bool:
        return self.character.can_act()

    def add_exhaustion(self, points: int) -> None:
        self.exhaustion.add_points(points)

    def end_round(self) -> None:
        self.stance.end_round()


class ExchangeReport(BaseModel):
    """Result of an arena exchange, with location effects when aimed at one.

    ``location_disabled`` and ``weapon_dropped`` are set only by the wound
    that disables the location, not by later wounds to it.
    """

    model_config = ConfigDict(frozen=True)

    result: CombatResult
    hit_location: HitLocation | None = None
    location_disabled: bool = False
    weapon_dropped: bool = False


# =============================================================================
# Arena
# =============================================================================


class Melee(Component):
    """A fight between indexed combatants.

    Example:
        >>> melee = Melee.between(hero, villain)
        >>> report = melee.exchange(0, 1, DefenseAction.PARRY, dice)
        >>> melee.next_round()
    """

    combatants: list[Combatant] = Field(default_factory=list)
    round: int = Field(default=1, ge=1)

    @classmethod
    def between(cls, *characters: Character) -> Melee:
        return cls(combatants=[Combatant.from_character(c) for c in characters])

    def add(self, character: Character) -> int:
        """Add a character to the fight and return its index."""
        self.combatants.append(Combatant.from_character(character))
        return len(self.combatants) - 1

    def __getitem__(self, index: int) -> Combatant:
        return self.combatants[index]

    def _combatant(self, index: int) -> Combatant:
        if not 0 <= index < len(self.combatants):
            raise CombatError(
                f"No combatant at index {index}",
                round_number=self.round,
                details={"index": index},
            )
        return self.combatants[index]

    def exchange(
        self,
        attacker_idx: int,
        defender_idx: int,
        action: DefenseAction,
        dice: DiceSource,
        direction: AttackDirection | None = None,
    ) -> ExchangeReport:
        """Let one combatant attack another.

        Stances and exhaustion feed into the rolls. When a direction is
        given, a hit location is rolled first; its damage multiplier
        scales the blow and any wound is also recorded on that location.

        Raises:
            CombatError: If both indices name the same combatant, or the
                attacker cannot act or is in a stance that forbids attacking.
        """
        if attacker_idx == defender_idx:
            raise CombatError(
                "A combatant cannot attack itself",
                round_number=self.round,
                details={"index": attacker_idx},
            )
        attacker = self._combatant(attacker_idx)
        defender = self._combatant(defender_idx)

        if not attacker.can_act():
            logger.warning("Attack refused", combatant=attacker.name, reason="cannot_act")
            raise CombatError(
                "Attacker cannot act",
                combatant=attacker.name,
                round_number=self.round,
            )
        if not attacker.can_attack():
            logger.warning(
                "Attack refused",
                combatant=attacker.name,
                reason="stance",
                maneuver=attacker.stance.current_maneuver.value,
            )
            raise CombatError(
                f"Stance {attacker.stance.current_maneuver.label} does not allow attacking",
                combatant=attacker.name,
                round_number=self.round,
            )

        location: HitLocation | None = None
        multiplier = 1.0
        if direction is not None:
            location = determine_hit_location(direction, dice)
            multiplier = location.damage_multiplier

        modifiers = ExchangeModifiers(
            attack=attacker.total_attack_modifier(),
            defense=defender.total_defense_modifier(),
            damage=attacker.stance_damage_modifier(),
            damage_multiplier=multiplier,
        )
        result = combat_round(
            attacker.character,
            defender.character,
            action,
            dice,
            modifiers,
            hit_location=location,
        )

        disabled = False
        dropped = False
        if location is not None and result.wound_level is not None:
            disabled = defender.add_location_wound(location, result.wound_level)
            dropped = disabled and defender.location(location).causes_weapon_drop()
            if disabled:
                logger.info(
                    "Location disabled",
                    combatant=defender.name,
                    location=location.value,
                    weapon_dropped=dropped,
                )

        return ExchangeReport(
            result=result,
            hit_location=result.hit_location,
            location_disabled=disabled,
            weapon_dropped=dropped,
        )

    def next_round(self, exhaustion_per_round: int | None = None) -> int:
        """Advance the round counter and tire every combatant.

        Args:
            exhaustion_per_round: Points added to each combatant; defaults
                to the combat settings.

        Returns:
            The new round number.
        """
        if exhaustion_per_round is None:
            exhaustion_per_round = get_settings().combat.exhaustion_per_round
        self.round += 1
        for combatant in self.combatants:
            combatant.add_exhaustion(exhaustion_per_round)
        logger.debug("Round started", round=self.round, exhaustion_added=exhaustion_per_round)
        return self.round

    def end_round(self) -> None:
        for combatant in self.combatants:
            combatant.end_round()

    def combat_continues(self) -> bool:
        return all(combatant.can_act() for combatant in self.combatants)


__all__ = ["Combatant", "ExchangeReport", "Melee"]
