"""Simulation-wide constants.

Default tribute statistics and grid dimensions used when no
configuration overrides them.
"""

from __future__ import annotations

# =============================================================================
# Dice
# =============================================================================

D20_SIDES = 20
"""Faces on the die used for hit and escape checks."""

MIN_DAMAGE = 1
"""A successful hit always deals at least this much damage."""

DEFAULT_UNARMED_DAMAGE = "1d4"
"""Damage expression for tributes without a weapon."""

# =============================================================================
# Grid
# =============================================================================

DEFAULT_GRID_WIDTH = 5
DEFAULT_GRID_HEIGHT = 5

DEFAULT_NEIGHBORHOOD_RADIUS = 1
"""Chebyshev radius that counts as "surrounding" an actor."""

FIRST_DAY = 1

# =============================================================================
# Tribute Defaults
# =============================================================================

DEFAULT_SPEED = 1
DEFAULT_ARMOR_CLASS = 10
DEFAULT_STRENGTH = 0
DEFAULT_DEXTERITY = 0
DEFAULT_HEALTH = 12
