"""Base classes for steelkilt models.

State that the engine mutates during play (wounds, exhaustion, stances,
skill sets) derives from Component. Immutable records attached to a
combatant (attributes, equipment, spells) derive from ValueObject.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """Mutable state owned by a single combatant.

    Components are only changed through their own methods, which validate
    before mutating so that a refused operation leaves no trace.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",  # Ignore computed fields when deserializing
    )


class ValueObject(BaseModel):
    """Immutable record, compared by value."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
