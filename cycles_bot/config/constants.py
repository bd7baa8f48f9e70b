"""Centralized constants for the decision engine and the local arena.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

FLOOD_FILL_BUDGET = 20
"""Maximum number of cells a single flood fill may count."""

TIGHT_SPOT_THRESHOLD = 5
"""Reachable-space value below which the aggressive strategy escapes."""

SAFETY_PENALTY = 10
"""Score deducted per blocked neighbor of a candidate cell."""

TRAPPING_REWARD = 5
"""Score added per blocked neighbor of the predicted opponent cell."""

GRID_WIDTH = 100
"""Default arena width in cells (game server default)."""

GRID_HEIGHT = 80
"""Default arena height in cells (game server default)."""

MAX_CLIENTS = 60
"""Maximum number of seats in one arena."""

FLUSH_THRESHOLD = 1_024
"""Flush tick-log rows to Parquet once this in-memory row count is reached."""
