"""Tests for hit locations and locational damage."""

from __future__ import annotations

import pytest

from steelkilt.engine.dice import ScriptedDice
from steelkilt.models import (
    AttackDirection,
    HitLocation,
    LocationalDamage,
    WoundLevel,
    determine_hit_location,
    location_for_face,
)


LL, RL, T = HitLocation.LEFT_LEG, HitLocation.RIGHT_LEG, HitLocation.TORSO
LA, RA, H = HitLocation.LEFT_ARM, HitLocation.RIGHT_ARM, HitLocation.HEAD


class TestLocationTables:
    """Tests for the per-direction d10 tables."""

    @pytest.mark.parametrize(
        "direction,expected",
        [
            (AttackDirection.FRONT, [LL, LL, RL, RL, T, T, LA, RA, H, H]),
            (AttackDirection.BACK, [LL, LL, RL, RL, T, T, LA, RA, H, H]),
            (AttackDirection.LEFT, [LL, LL, T, T, LA, LA, LA, RA, H, H]),
            (AttackDirection.RIGHT, [LL, LL, T, T, LA, LA, LA, RA, H, H]),
            (AttackDirection.ABOVE, [LL, RL, T, LA, LA, RA, RA, H, H, H]),
            (AttackDirection.BELOW, [LL, LL, RL, RL, T, T, T, LA, RA, H]),
        ],
    )
    def test_every_face(self, direction: AttackDirection, expected: list[HitLocation]) -> None:
        assert [location_for_face(direction, face) for face in range(1, 11)] == expected

    def test_determine_rolls_one_die(self) -> None:
        dice = ScriptedDice([9, 1])
        assert determine_hit_location(AttackDirection.FRONT, dice) is HitLocation.HEAD
        assert dice.remaining == 1


class TestHitLocation:
    """Tests for per-location properties."""

    def test_damage_multipliers(self) -> None:
        assert HitLocation.HEAD.damage_multiplier == 1.5
        assert HitLocation.TORSO.damage_multiplier == 1.0
        assert HitLocation.LEFT_LEG.damage_multiplier == 0.75

    def test_only_arms_drop_weapons(self) -> None:
        assert {loc for loc in HitLocation if loc.causes_weapon_drop} == {LA, RA}

    def test_head_and_torso_cannot_be_severed(self) -> None:
        assert {loc for loc in HitLocation if not loc.can_sever} == {H, T}


class TestLocationalDamage:
    """Tests for wounds tracked on one location."""

    def test_arm_disabled_by_severe(self) -> None:
        """Light then severe on an arm disables it and drops the weapon."""
        arm = LocationalDamage(location=HitLocation.LEFT_ARM)

        arm.add_wound(WoundLevel.LIGHT)
        assert arm.is_functional()
        assert arm.penalty() == -1

        arm.add_wound(WoundLevel.SEVERE)
        assert arm.disabled
        assert arm.penalty() == -4
        assert arm.causes_weapon_drop()

    def test_leg_survives_severe(self) -> None:
        leg = LocationalDamage(location=HitLocation.RIGHT_LEG)
        leg.add_wound(WoundLevel.SEVERE)
        assert leg.is_functional()
        assert leg.penalty() == -2

    def test_critical_disables_torso_without_severing(self) -> None:
        torso = LocationalDamage(location=HitLocation.TORSO)
        torso.add_wound(WoundLevel.CRITICAL)
        torso.add_wound(WoundLevel.CRITICAL)
        assert torso.disabled
        assert not torso.severed
        assert torso.penalty() == -4

    def test_second_critical_severs_limb(self) -> None:
        leg = LocationalDamage(location=HitLocation.LEFT_LEG)
        leg.add_wound(WoundLevel.CRITICAL)
        assert not leg.severed

        leg.add_wound(WoundLevel.CRITICAL)
        assert leg.severed
        assert leg.penalty() == -999
        assert not leg.is_functional()
