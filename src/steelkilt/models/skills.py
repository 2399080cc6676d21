"""Skill development and progression.

Raising a skill costs points from a budget. Levels up to the skill's
associated attribute cost 1 point each; every level beyond costs the
difference between the level and the attribute. The sum is multiplied by
the skill's difficulty (Hard x2, Very Hard x3). Easy skills are special:
learning one from scratch up to the attribute score costs a single point.

Example:
    >>> skills = SkillSet(available_points=10)
    >>> skills.add_skill(Skill(name="Longsword", associated_attribute=7))
    >>> skills.raise_skill("Longsword")
    1
    >>> skills.available_points
    9
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from steelkilt.core.exceptions import (
    InsufficientPointsError,
    PrerequisitesNotMetError,
    SkillNotFoundError,
    ValidationError,
)
from steelkilt.core.logging import get_logger
from steelkilt.models.base import Component
from steelkilt.models.enums import SkillDifficulty


logger = get_logger(__name__)


def progression_cost(
    from_level: int,
    to_level: int,
    attribute: int,
    multiplier: int,
) -> int:
    """Points needed to go from one level to another on the standard curve.

    Shared by skills (keyed on their associated attribute) and magic lore
    (keyed on empathy).
    """
    total_cost = 0
    for level in range(from_level + 1, to_level + 1):
        base_cost = 1 if level <= attribute else level - attribute
        total_cost += base_cost * multiplier
    return total_cost


class SkillPrerequisite(BaseModel):
    """Another skill that must reach a minimum level first."""

    model_config = ConfigDict(frozen=True)

    skill_name: str
    minimum_level: int = Field(default=1, ge=0)


class Skill(Component):
    """A skill with its current level and associated attribute."""

    name: str = Field(..., min_length=1)
    level: int = Field(default=0, ge=0)
    associated_attribute: int = Field(..., ge=1)
    difficulty: SkillDifficulty = Field(default=SkillDifficulty.NORMAL)
    prerequisites: list[SkillPrerequisite] = Field(default_factory=list)

    def with_prerequisite(self, skill_name: str, minimum_level: int) -> Skill:
        """Add a prerequisite and return the skill for chaining."""
        self.prerequisites = [
            *self.prerequisites,
            SkillPrerequisite(skill_name=skill_name, minimum_level=minimum_level),
        ]
        return self

    def calculate_upgrade_cost(self, from_level: int, to_level: int) -> int:
        """Points needed to raise the skill from one level to another."""
        if to_level <= from_level:
            return 0

        if (
            self.difficulty is SkillDifficulty.EASY
            and from_level == 0
            and to_level <= self.associated_attribute
        ):
            # Native acquisition: one point buys the skill up to the attribute.
            return 1

        return progression_cost(
            from_level,
            to_level,
            self.associated_attribute,
            self.difficulty.cost_multiplier,
        )


class SkillSet(Component):
    """A character's skills and the points available to raise them."""

    skills: dict[str, Skill] = Field(default_factory=dict)
    available_points: int = Field(default=0, ge=0)

    def add_skill(self, skill: Skill) -> None:
        self.skills[skill.name] = skill

    def get_skill(self, name: str) -> Skill | None:
        return self.skills.get(name)

    def get_skill_level(self, name: str) -> int:
        """Level of a skill, 0 when the character does not have it."""
        skill = self.skills.get(name)
        return skill.level if skill else 0

    def missing_prerequisites(self, skill: Skill) -> list[str]:
        return [
            prereq.skill_name
            for prereq in skill.prerequisites
            if self.get_skill_level(prereq.skill_name) < prereq.minimum_level
        ]

    def check_prerequisites(self, skill: Skill) -> bool:
        return not self.missing_prerequisites(skill)

    def raise_skill(self, skill_name: str) -> int:
        """Raise a skill by exactly one level.

        Args:
            skill_name: Name of the skill to raise.

        Returns:
            The number of points spent.

        Raises:
            SkillNotFoundError: If the skill is not in the set.
            PrerequisitesNotMetError: If a prerequisite is below its minimum.
            InsufficientPointsError: If the raise costs more than is available.
        """
        skill = self.skills.get(skill_name)
        if skill is None:
            raise SkillNotFoundError(skill_name)

        missing = self.missing_prerequisites(skill)
        if missing:
            raise PrerequisitesNotMetError(skill_name, missing=missing)

        cost = skill.calculate_upgrade_cost(skill.level, skill.level + 1)
        if self.available_points < cost:
            raise InsufficientPointsError(needed=cost, available=self.available_points)

        self.available_points -= cost
        skill.level += 1
        logger.info(
            "Skill raised",
            skill=skill_name,
            level=skill.level,
            cost=cost,
            points_left=self.available_points,
        )
        return cost

    def grant_points(self, points: int) -> None:
        """Add points to the budget, e.g. from character advancement."""
        if points < 0:
            raise ValidationError(
                "Cannot grant a negative number of points",
                field_name="points",
                invalid_value=points,
            )
        self.available_points += points


__all__ = ["Skill", "SkillPrerequisite", "SkillSet", "progression_cost"]
