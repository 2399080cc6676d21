"""Character attributes.

Draft RPG characters have nine attributes on a 1-10 scale, grouped into
physical, mental and interactive triples. Values outside the scale are
clamped rather than rejected so that generated characters always load.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field, field_validator

from steelkilt.core.constants import MAX_ATTRIBUTE, MIN_ATTRIBUTE
from steelkilt.models.base import ValueObject


def clamp(value: int, low: int, high: int) -> int:
    """Clamp an integer into the inclusive range [low, high]."""
    return max(low, min(high, value))


class Attributes(ValueObject):
    """The nine attributes of a character. Immutable after construction."""

    # Physical
    strength: int = Field(default=5, description="STR")
    dexterity: int = Field(default=5, description="DEX")
    constitution: int = Field(default=5, description="CON")
    # Mental
    reason: int = Field(default=5, description="REA")
    intuition: int = Field(default=5, description="INT")
    willpower: int = Field(default=5, description="WIL")
    # Interactive
    charisma: int = Field(default=5, description="CHA")
    perception: int = Field(default=5, description="PER")
    empathy: int = Field(default=5, description="EMP")

    @field_validator(
        "strength",
        "dexterity",
        "constitution",
        "reason",
        "intuition",
        "willpower",
        "charisma",
        "perception",
        "empathy",
        mode="before",
    )
    @classmethod
    def clamp_score(cls, v: Any) -> int:
        return clamp(int(v), MIN_ATTRIBUTE, MAX_ATTRIBUTE)

    @classmethod
    def from_scores(
        cls,
        strength: int,
        dexterity: int,
        constitution: int,
        reason: int,
        intuition: int,
        willpower: int,
        charisma: int,
        perception: int,
        empathy: int,
    ) -> Attributes:
        """Build attributes from the nine scores in sheet order."""
        return cls(
            strength=strength,
            dexterity=dexterity,
            constitution=constitution,
            reason=reason,
            intuition=intuition,
            willpower=willpower,
            charisma=charisma,
            perception=perception,
            empathy=empathy,
        )

    @computed_field(description="Combined attribute (STR + CON) / 2, halves round up")
    @property
    def stamina(self) -> int:
        return (self.strength + self.constitution + 1) // 2


__all__ = ["Attributes", "clamp"]
