"""Spell casting with dice."""

from __future__ import annotations

from typing import TYPE_CHECKING

from steelkilt.core.exceptions import MagicError
from steelkilt.models.character import Character


if TYPE_CHECKING:
    from steelkilt.engine.dice import DiceSource
    from steelkilt.models.magic import CastingResult, MagicUser


def cast_spell(caster: Character | MagicUser, spell_name: str, dice: DiceSource) -> CastingResult:
    """Roll a d10 and cast a known spell.

    Args:
        caster: A magic user, or a character carrying one.
        spell_name: Name of a learned spell.
        dice: Source of the casting roll.

    Raises:
        MagicError: If a character without magic tries to cast.
        SpellNotKnownError: If the spell has not been learned.
    """
    if isinstance(caster, Character):
        if caster.magic is None:
            raise MagicError(
                f"{caster.name} has no magical training",
                details={"spell": spell_name},
            )
        caster = caster.magic

    return caster.cast_spell(spell_name, dice.d10())


__all__ = ["cast_spell"]
