"""Configuration layer: constants and typed config dataclasses."""

from cycles_bot.config.constants import (
    FLOOD_FILL_BUDGET,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_CLIENTS,
    SAFETY_PENALTY,
    TIGHT_SPOT_THRESHOLD,
    TRAPPING_REWARD,
)
from cycles_bot.config.types import (
    ArenaConfig,
    DecisionMode,
    RefreshStatus,
    RunResult,
    RunStatus,
    RuntimeConfig,
    ScoringConfig,
    StrategyName,
    TickStatus,
)

__all__ = [
    "ArenaConfig",
    "DecisionMode",
    "FLOOD_FILL_BUDGET",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MAX_CLIENTS",
    "RefreshStatus",
    "RunResult",
    "RunStatus",
    "RuntimeConfig",
    "SAFETY_PENALTY",
    "ScoringConfig",
    "StrategyName",
    "TIGHT_SPOT_THRESHOLD",
    "TRAPPING_REWARD",
    "TickStatus",
]
