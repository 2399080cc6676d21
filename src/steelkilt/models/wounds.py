"""Wound tracking.

Wounds accumulate in three counters. Light and severe wounds stack: the
fourth light wound becomes a severe wound and the third severe wound
becomes a critical one. One critical wound incapacitates, a second one
kills.
"""

from __future__ import annotations

from pydantic import Field

from steelkilt.core.constants import LIGHT_WOUNDS_PER_SEVERE, SEVERE_WOUNDS_PER_CRITICAL
from steelkilt.models.base import Component
from steelkilt.models.enums import WoundLevel


_OVERFLOW_AT: dict[WoundLevel, int | None] = {
    WoundLevel.LIGHT: LIGHT_WOUNDS_PER_SEVERE,
    WoundLevel.SEVERE: SEVERE_WOUNDS_PER_CRITICAL,
    WoundLevel.CRITICAL: None,
}


class Wounds(Component):
    """Wound counters of one combatant.

    At rest ``light`` is at most 3 and ``severe`` at most 2; ``critical``
    is uncapped.
    """

    light: int = Field(default=0, ge=0, le=LIGHT_WOUNDS_PER_SEVERE - 1)
    severe: int = Field(default=0, ge=0, le=SEVERE_WOUNDS_PER_CRITICAL - 1)
    critical: int = Field(default=0, ge=0)

    def add_wound(self, level: WoundLevel) -> None:
        """Add a wound, converting overflowing stacks into the next severity."""
        current: WoundLevel | None = WoundLevel(level)
        # Each tier can overflow at most once per wound.
        for _ in range(len(WoundLevel)):
            if current is None:
                return
            count = getattr(self, current.value) + 1
            limit = _OVERFLOW_AT[current]
            if limit is None or count < limit:
                setattr(self, current.value, count)
                return
            setattr(self, current.value, 0)
            current = current.next_level

    def is_dead(self) -> bool:
        return self.critical > 1

    def is_incapacitated(self) -> bool:
        return self.critical >= 1

    def movement_penalty(self) -> int:
        """Penalty applied to every movement-based roll."""
        return -(self.light + self.severe * 2 + self.critical * 4)


__all__ = ["Wounds"]
