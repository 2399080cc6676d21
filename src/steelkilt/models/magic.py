"""Magic: lore, spells and casting.

A caster studies the lore of one or more branches of magic. Lore gates
which spells can be learned: a spell's initial skill level may not
exceed the lore level of its branch. Casting adds the spell skill, the
caster's empathy and a d10 roll and compares the total to a target set
by the spell's difficulty. The margin is the casting quality.

Successful castings tire the caster. Magical exhaustion is its own
economy, separate from combat fatigue, but it uses the same bands with
empathy in place of stamina.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from steelkilt.core.exceptions import (
    InsufficientLoreError,
    LoreNotKnownError,
    SpellNotKnownError,
)
from steelkilt.core.logging import get_logger
from steelkilt.models.base import Component, ValueObject
from steelkilt.models.enums import (
    ExhaustionLevel,
    MagicBranch,
    SpellDifficulty,
    SpellDurationKind,
    SpellRangeKind,
)
from steelkilt.models.exhaustion import exhaustion_level_for
from steelkilt.models.skills import progression_cost


logger = get_logger(__name__)


# =============================================================================
# Spell value objects
# =============================================================================


class SpellRange(ValueObject):
    """How far a spell reaches. Distance bands carry meters."""

    kind: SpellRangeKind
    meters: int | None = Field(default=None, ge=0)

    @classmethod
    def personal(cls) -> SpellRange:
        return cls(kind=SpellRangeKind.PERSONAL)

    @classmethod
    def touch(cls) -> SpellRange:
        return cls(kind=SpellRangeKind.TOUCH)

    @classmethod
    def short(cls, meters: int) -> SpellRange:
        return cls(kind=SpellRangeKind.SHORT, meters=meters)

    @classmethod
    def medium(cls, meters: int) -> SpellRange:
        return cls(kind=SpellRangeKind.MEDIUM, meters=meters)

    @classmethod
    def long(cls, meters: int) -> SpellRange:
        return cls(kind=SpellRangeKind.LONG, meters=meters)

    @classmethod
    def unlimited(cls) -> SpellRange:
        return cls(kind=SpellRangeKind.UNLIMITED)


class SpellDuration(ValueObject):
    """How long a spell lasts. Timed durations carry an amount."""

    kind: SpellDurationKind
    amount: int | None = Field(default=None, ge=0)

    @classmethod
    def instant(cls) -> SpellDuration:
        return cls(kind=SpellDurationKind.INSTANT)

    @classmethod
    def rounds(cls, amount: int) -> SpellDuration:
        return cls(kind=SpellDurationKind.ROUNDS, amount=amount)

    @classmethod
    def minutes(cls, amount: int) -> SpellDuration:
        return cls(kind=SpellDurationKind.MINUTES, amount=amount)

    @classmethod
    def hours(cls, amount: int) -> SpellDuration:
        return cls(kind=SpellDurationKind.HOURS, amount=amount)

    @classmethod
    def permanent(cls) -> SpellDuration:
        return cls(kind=SpellDurationKind.PERMANENT)


class Spell(ValueObject):
    """A spell within a branch of magic.

    Attributes:
        preparation_time: Minutes of preparation.
        casting_time: Segments to cast.
    """

    name: str = Field(..., min_length=1)
    branch: MagicBranch
    difficulty: SpellDifficulty = Field(default=SpellDifficulty.NORMAL)
    preparation_time: int = Field(default=0, ge=0)
    casting_time: int = Field(default=1, ge=0)
    range: SpellRange = Field(default_factory=SpellRange.personal)
    duration: SpellDuration = Field(default_factory=SpellDuration.instant)


# =============================================================================
# Lore & learned spells
# =============================================================================


class MagicLore(Component):
    """Knowledge of one branch of magic."""

    branch: MagicBranch
    level: int = Field(default=0, ge=0)
    empathy_attribute: int = Field(..., ge=1)

    def calculate_upgrade_cost(self, from_level: int, to_level: int) -> int:
        """Points needed to raise the lore, scaled by the branch difficulty."""
        if to_level <= from_level:
            return 0
        return progression_cost(
            from_level,
            to_level,
            self.empathy_attribute,
            self.branch.lore_difficulty.cost_multiplier,
        )

    def can_learn_spell(self, spell_level: int) -> bool:
        return spell_level <= self.level


class LearnedSpell(BaseModel):
    """A spell together with the caster's skill in it."""

    model_config = ConfigDict(validate_assignment=True)

    spell: Spell
    skill_level: int = Field(default=0, ge=0)


class CastingResult(BaseModel):
    """Outcome of one casting attempt.

    ``quality`` is the margin over the target: never negative on a
    success, always negative on a failure.
    """

    model_config = ConfigDict(frozen=True)

    spell_name: str
    success: bool
    quality: int
    total: int
    target: int
    exhaustion_gained: int = 0


# =============================================================================
# Magic user
# =============================================================================


class MagicUser(Component):
    """A character's lores, spells and magical exhaustion."""

    lores: dict[MagicBranch, MagicLore] = Field(default_factory=dict)
    spells: dict[str, LearnedSpell] = Field(default_factory=dict)
    empathy: int = Field(..., ge=1)
    exhaustion_points: int = Field(default=0, ge=0)

    def add_lore(self, branch: MagicBranch, level: int) -> MagicLore:
        lore = MagicLore(branch=branch, level=level, empathy_attribute=self.empathy)
        self.lores[lore.branch] = lore
        return lore

    def learn_spell(self, spell: Spell, initial_level: int) -> LearnedSpell:
        """Learn a spell at the given skill level.

        Raises:
            LoreNotKnownError: If the caster has no lore in the spell's branch.
            InsufficientLoreError: If the initial level exceeds the lore level.
        """
        lore = self.lores.get(spell.branch)
        if lore is None:
            raise LoreNotKnownError(spell.branch)

        if not lore.can_learn_spell(initial_level):
            raise InsufficientLoreError(required=initial_level, available=lore.level)

        learned = LearnedSpell(spell=spell, skill_level=initial_level)
        self.spells[spell.name] = learned
        logger.info("Spell learned", spell=spell.name, branch=spell.branch.value, level=initial_level)
        return learned

    def cast_spell(self, spell_name: str, roll: int) -> CastingResult:
        """Cast a known spell with an already rolled d10.

        Raises:
            SpellNotKnownError: If the spell has not been learned.
        """
        learned = self.spells.get(spell_name)
        if learned is None:
            raise SpellNotKnownError(spell_name)

        total = learned.skill_level + self.empathy + roll
        target = learned.spell.difficulty.base_target
        success = total >= target
        quality = total - target

        exhaustion = 0
        if success:
            exhaustion = self.calculate_exhaustion(learned.spell, quality)
            self.exhaustion_points += exhaustion

        logger.info(
            "Spell cast",
            spell=spell_name,
            total=total,
            target=target,
            success=success,
            quality=quality,
            exhaustion=exhaustion,
        )
        return CastingResult(
            spell_name=spell_name,
            success=success,
            quality=quality,
            total=total,
            target=target,
            exhaustion_gained=exhaustion,
        )

    def calculate_exhaustion(self, spell: Spell, quality: int) -> int:
        """Exhaustion a casting costs.

        Casting beyond one's capabilities (negative quality) doubles the
        cost. Exhaustion is only charged on a success, where quality is
        never negative, so the doubled cost is never charged in play.
        """
        base_exhaustion = spell.difficulty.base_exhaustion
        if quality < 0:
            return base_exhaustion * 2
        return base_exhaustion

    def recover_exhaustion(self, hours: int) -> None:
        """Recover one point of magical exhaustion per hour of rest."""
        self.exhaustion_points = max(0, self.exhaustion_points - hours)

    @property
    def exhaustion_level(self) -> ExhaustionLevel:
        return exhaustion_level_for(self.exhaustion_points, self.empathy)

    def exhaustion_penalty(self) -> int:
        return self.exhaustion_level.penalty


__all__ = [
    "SpellRange",
    "SpellDuration",
    "Spell",
    "MagicLore",
    "LearnedSpell",
    "CastingResult",
    "MagicUser",
]
