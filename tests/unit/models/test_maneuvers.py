"""Tests for combat stances and maneuvers."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from steelkilt.core.exceptions import ManeuverNotPreparedError
from steelkilt.models import CombatManeuver, CombatStance


class TestCombatManeuver:
    """Tests for the maneuver table."""

    @pytest.mark.parametrize(
        "maneuver,attack,defense,damage",
        [
            (CombatManeuver.NORMAL, 0, 0, 0),
            (CombatManeuver.DEFENSIVE_POSITION, 0, 2, 0),
            (CombatManeuver.CHARGE, 1, -2, 1),
            (CombatManeuver.ALL_OUT_ATTACK, 2, -4, 0),
            (CombatManeuver.AIMED_ATTACK, -2, 0, 2),
        ],
    )
    def test_modifiers(
        self, maneuver: CombatManeuver, attack: int, defense: int, damage: int
    ) -> None:
        assert maneuver.attack_modifier == attack
        assert maneuver.defense_modifier == defense
        assert maneuver.damage_modifier == damage

    def test_only_defensive_position_cannot_attack(self) -> None:
        assert [m for m in CombatManeuver if not m.can_attack] == [
            CombatManeuver.DEFENSIVE_POSITION
        ]

    def test_only_aimed_attack_needs_preparation(self) -> None:
        assert [m for m in CombatManeuver if m.requires_preparation] == [
            CombatManeuver.AIMED_ATTACK
        ]


class TestCombatStance:
    """Tests for stance selection and aim preparation."""

    def test_default_is_normal(self) -> None:
        stance = CombatStance()
        assert stance.current_maneuver is CombatManeuver.NORMAL
        assert not stance.aiming

    def test_select_unprepared_maneuver(self) -> None:
        stance = CombatStance()
        stance.set_maneuver(CombatManeuver.ALL_OUT_ATTACK)
        assert stance.total_attack_modifier() == 2
        assert stance.total_defense_modifier() == -4

    def test_aimed_attack_without_aiming_is_refused(self) -> None:
        """Refusal leaves the stance untouched and logs a warning."""
        stance = CombatStance(current_maneuver=CombatManeuver.CHARGE)

        with capture_logs() as logs, pytest.raises(ManeuverNotPreparedError):
            stance.set_maneuver(CombatManeuver.AIMED_ATTACK)

        assert stance.current_maneuver is CombatManeuver.CHARGE
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["maneuver"] == "aimed_attack"

    def test_aiming_is_consumed_once(self) -> None:
        """Aiming enables exactly one aimed attack."""
        stance = CombatStance()
        stance.start_aiming()

        stance.set_maneuver(CombatManeuver.AIMED_ATTACK)
        assert stance.current_maneuver is CombatManeuver.AIMED_ATTACK
        assert not stance.aiming
        assert stance.total_damage_modifier() == 2

        with pytest.raises(ManeuverNotPreparedError):
            stance.set_maneuver(CombatManeuver.AIMED_ATTACK)

    def test_end_round_keeps_aiming(self) -> None:
        """Only the charge flag resets at the end of a round."""
        stance = CombatStance()
        stance.start_aiming()
        stance.record_charge()

        stance.end_round()

        assert stance.aiming
        assert not stance.charged_this_round
