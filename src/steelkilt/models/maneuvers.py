"""Combat stance and maneuver selection.

A combatant picks one maneuver per round. The aimed attack is a two-step
maneuver: the combatant must first announce aiming, and selecting the
aimed attack consumes that preparation. Aiming survives the end of a
round; only the per-round charge flag is reset.
"""

from __future__ import annotations

from pydantic import Field

from steelkilt.core.exceptions import ManeuverNotPreparedError
from steelkilt.core.logging import get_logger
from steelkilt.models.base import Component
from steelkilt.models.enums import CombatManeuver


logger = get_logger(__name__)


class CombatStance(Component):
    """Current maneuver and preparation flags of one combatant."""

    current_maneuver: CombatManeuver = Field(default=CombatManeuver.NORMAL)
    aiming: bool = Field(default=False)
    charged_this_round: bool = Field(default=False)

    def set_maneuver(self, maneuver: CombatManeuver) -> None:
        """Select the maneuver for the next action.

        Raises:
            ManeuverNotPreparedError: If an aimed attack is chosen without
                having aimed first. The stance is left unchanged.
        """
        maneuver = CombatManeuver(maneuver)
        if maneuver.requires_preparation and not self.aiming:
            logger.warning("Maneuver refused", maneuver=maneuver.value, reason="not_prepared")
            raise ManeuverNotPreparedError(maneuver=maneuver.value)

        self.current_maneuver = maneuver
        if maneuver is CombatManeuver.AIMED_ATTACK:
            self.aiming = False

    def start_aiming(self) -> None:
        self.aiming = True

    def record_charge(self) -> None:
        self.charged_this_round = True

    def end_round(self) -> None:
        """Reset per-round flags. Aiming persists until it is used."""
        self.charged_this_round = False

    def total_attack_modifier(self) -> int:
        return self.current_maneuver.attack_modifier

    def total_defense_modifier(self) -> int:
        return self.current_maneuver.defense_modifier

    def total_damage_modifier(self) -> int:
        return self.current_maneuver.damage_modifier


__all__ = ["CombatStance"]
