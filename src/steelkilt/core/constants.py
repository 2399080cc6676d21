"""Rule constants for the Draft RPG combat system.

This module gathers the fixed numbers of the rule set that more than one
module depends on.
"""

from __future__ import annotations

# =============================================================================
# Attributes & Skills
# =============================================================================

MIN_ATTRIBUTE = 1
"""Lowest value an attribute can hold."""

MAX_ATTRIBUTE = 10
"""Highest value an attribute can hold."""

MIN_COMBAT_SKILL = 0
"""Lowest weapon/dodge/ranged skill on a character sheet."""

MAX_COMBAT_SKILL = 10
"""Highest weapon/dodge/ranged skill on a character sheet."""

# =============================================================================
# Dice
# =============================================================================

DIE_FACES = 10
"""All rolls in the rule set use a single ten-sided die."""

# =============================================================================
# Wounds
# =============================================================================

LIGHT_WOUNDS_PER_SEVERE = 4
"""The fourth light wound converts into a severe wound."""

SEVERE_WOUNDS_PER_CRITICAL = 3
"""The third severe wound converts into a critical wound."""

MIN_DAMAGE_FOR_WOUND = 2
"""Damage of 1 or less is absorbed without a wound."""

# =============================================================================
# Hit Locations
# =============================================================================

SEVERED_PENALTY = -999
"""Penalty for using a severed limb (the limb is unusable)."""

DISABLED_PENALTY = -4
"""Penalty for using a disabled location."""

CRITICALS_TO_SEVER = 2
"""Critical wounds on one limb needed to sever it."""

# =============================================================================
# Ranged Combat
# =============================================================================

OUT_OF_RANGE_PENALTY = -999
"""Distance modifier reported for targets beyond maximum range."""

MAX_AIMING_BONUS = 1
"""Aiming a ranged weapon never grants more than +1."""
