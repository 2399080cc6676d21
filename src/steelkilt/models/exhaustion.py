"""Exhaustion from combat and physical exertion.

Exhaustion points accumulate against a threshold fixed when the tracker
is created (the character's stamina for physical fatigue, empathy for
magical fatigue). The ratio of points to threshold determines the level:

    points > threshold      -> Light    (-1)
    points >= 2 x threshold -> Severe   (-2, willpower check needed)
    points >= 3 x threshold -> Critical (-4, no exhaustive actions)
"""

from __future__ import annotations

from pydantic import Field

from steelkilt.models.base import Component
from steelkilt.models.enums import ExhaustionLevel


def exhaustion_level_for(points: int, threshold: int) -> ExhaustionLevel:
    """Classify accumulated points against a threshold."""
    if points >= threshold * 3:
        return ExhaustionLevel.CRITICAL
    if points >= threshold * 2:
        return ExhaustionLevel.SEVERE
    if points > threshold:
        return ExhaustionLevel.LIGHT
    return ExhaustionLevel.NONE


class Exhaustion(Component):
    """Physical fatigue tracker of one combatant."""

    points: int = Field(default=0, ge=0)
    threshold: int = Field(..., ge=0, description="Stamina at creation")

    @classmethod
    def for_stamina(cls, stamina: int) -> Exhaustion:
        return cls(threshold=stamina)

    def add_points(self, points: int) -> None:
        self.points += points

    def rest(self, rounds: int) -> None:
        """Recover one point per two full rounds of rest."""
        recovery = rounds // 2
        self.points = max(0, self.points - recovery)

    @property
    def level(self) -> ExhaustionLevel:
        return exhaustion_level_for(self.points, self.threshold)

    def penalty(self) -> int:
        return self.level.penalty

    def needs_willpower_check(self) -> bool:
        """Whether the character must pass a willpower check to keep going."""
        return self.points >= self.threshold * 2

    def can_perform_exhaustive_actions(self) -> bool:
        """Sprinting, jumping and similar actions need some reserve left."""
        return self.level is not ExhaustionLevel.CRITICAL

    def status(self) -> str:
        return self.level.status


__all__ = ["Exhaustion", "exhaustion_level_for"]
