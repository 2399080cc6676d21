"""Hit location tracking.

A successful blow lands on one of six body regions. Which one depends on
the direction of the attack and one d10 roll. Each struck region keeps
its own wound tally, independent of the combatant's global wounds:

- Light wounds only add to the tally.
- Severe wounds disable an arm (the weapon is dropped) but not a leg,
  the head or the torso.
- Critical wounds disable any location; a second critical on a limb
  severs it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from steelkilt.core.constants import CRITICALS_TO_SEVER, DISABLED_PENALTY, SEVERED_PENALTY
from steelkilt.core.logging import get_logger
from steelkilt.models.base import Component
from steelkilt.models.enums import AttackDirection, HitLocation, WoundLevel


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource


logger = get_logger(__name__)


def _table(*bands: tuple[range, HitLocation]) -> dict[int, HitLocation]:
    table = {face: location for faces, location in bands for face in faces}
    if sorted(table) != list(range(1, 11)):
        raise ValueError("Hit location table must cover every face of a d10")
    return table


_FRONT_BACK = _table(
    (range(1, 3), HitLocation.LEFT_LEG),
    (range(3, 5), HitLocation.RIGHT_LEG),
    (range(5, 7), HitLocation.TORSO),
    (range(7, 8), HitLocation.LEFT_ARM),
    (range(8, 9), HitLocation.RIGHT_ARM),
    (range(9, 11), HitLocation.HEAD),
)

_SIDE = _table(
    (range(1, 3), HitLocation.LEFT_LEG),
    (range(3, 5), HitLocation.TORSO),
    (range(5, 8), HitLocation.LEFT_ARM),
    (range(8, 9), HitLocation.RIGHT_ARM),
    (range(9, 11), HitLocation.HEAD),
)

_ABOVE = _table(
    (range(1, 2), HitLocation.LEFT_LEG),
    (range(2, 3), HitLocation.RIGHT_LEG),
    (range(3, 4), HitLocation.TORSO),
    (range(4, 6), HitLocation.LEFT_ARM),
    (range(6, 8), HitLocation.RIGHT_ARM),
    (range(8, 11), HitLocation.HEAD),
)

_BELOW = _table(
    (range(1, 3), HitLocation.LEFT_LEG),
    (range(3, 5), HitLocation.RIGHT_LEG),
    (range(5, 8), HitLocation.TORSO),
    (range(8, 9), HitLocation.LEFT_ARM),
    (range(9, 10), HitLocation.RIGHT_ARM),
    (range(10, 11), HitLocation.HEAD),
)

LOCATION_TABLES: dict[AttackDirection, dict[int, HitLocation]] = {
    AttackDirection.FRONT: _FRONT_BACK,
    AttackDirection.BACK: _FRONT_BACK,
    AttackDirection.LEFT: _SIDE,
    AttackDirection.RIGHT: _SIDE,
    AttackDirection.ABOVE: _ABOVE,
    AttackDirection.BELOW: _BELOW,
}


def location_for_face(direction: AttackDirection, face: int) -> HitLocation:
    """Look up the location a die face selects for an attack direction."""
    return LOCATION_TABLES[AttackDirection(direction)][face]


def determine_hit_location(direction: AttackDirection, dice: DiceSource) -> HitLocation:
    """Roll a d10 and pick the struck location for the attack direction."""
    face = dice.d10()
    location = location_for_face(direction, face)
    logger.debug("Hit location determined", direction=str(direction), face=face, location=location.value)
    return location


class LocationalDamage(Component):
    """Wounds accumulated on one body location."""

    location: HitLocation
    light_wounds: int = Field(default=0, ge=0)
    severe_wounds: int = Field(default=0, ge=0)
    critical_wounds: int = Field(default=0, ge=0)
    disabled: bool = Field(default=False)
    severed: bool = Field(default=False)

    def add_wound(self, severity: WoundLevel) -> None:
        severity = WoundLevel(severity)
        if severity is WoundLevel.LIGHT:
            self.light_wounds += 1
        elif severity is WoundLevel.SEVERE:
            self.severe_wounds += 1
            if self.location.causes_weapon_drop:
                self.disabled = True
        else:
            self.critical_wounds += 1
            self.disabled = True
            if self.location.can_sever and self.critical_wounds >= CRITICALS_TO_SEVER:
                self.severed = True

    def is_functional(self) -> bool:
        return not self.disabled and not self.severed

    def causes_weapon_drop(self) -> bool:
        """Whether a disabling hit here makes the combatant drop a weapon."""
        return self.location.causes_weapon_drop

    def penalty(self) -> int:
        if self.severed:
            return SEVERED_PENALTY
        if self.disabled:
            return DISABLED_PENALTY
        return -(self.light_wounds + self.severe_wounds * 2)


__all__ = [
    "LOCATION_TABLES",
    "LocationalDamage",
    "determine_hit_location",
    "location_for_face",
]
