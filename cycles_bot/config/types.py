"""Configuration dataclasses, status enums and run result container.

All frozen dataclasses that parameterise scoring, the decision loop and the
local arena live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cycles_bot.config.constants import (
    FLOOD_FILL_BUDGET,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_CLIENTS,
    SAFETY_PENALTY,
    TIGHT_SPOT_THRESHOLD,
    TRAPPING_REWARD,
)

__all__ = [
    "ArenaConfig",
    "DecisionMode",
    "RefreshStatus",
    "RunResult",
    "RunStatus",
    "RuntimeConfig",
    "ScoringConfig",
    "StrategyName",
    "TickStatus",
]

# ---------------------------------------------------------------------------
# Status enums
# ---------------------------------------------------------------------------


class StrategyName(str, Enum):
    """Registered strategy labels accepted by the CLI and config files."""

    AGGRESSIVE = "aggressive"
    ZIGZAG = "zigzag"


class DecisionMode(str, Enum):
    """How a strategy arrived at its direction; persisted in the tick log."""

    AGGRESSIVE = "aggressive"
    ESCAPE = "escape"
    FALLBACK = "fallback"
    ZIGZAG = "zigzag"


class RefreshStatus(str, Enum):
    """Outcome of pulling one snapshot and locating the bot in it."""

    OK = "ok"
    RECOVERABLE = "recoverable"
    FATAL = "fatal"


class TickStatus(str, Enum):
    """Outcome of one decision-loop tick."""

    MOVED = "moved"
    NO_OPPONENTS = "no_opponents"
    FATAL = "fatal"


class RunStatus(str, Enum):
    """Reason the decision loop stopped."""

    NO_OPPONENTS = "no_opponents"
    TRANSPORT_CLOSED = "transport_closed"
    TICK_LIMIT = "tick_limit"
    FATAL = "fatal"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one bot run."""

    bot_name: str
    status: RunStatus
    ticks: int
    detail: str | None = None

    @property
    def exit_code(self) -> int:
        """Process exit status the caller should use for this result."""
        return 1 if self.status is RunStatus.FATAL else 0


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and thresholds for the aggressive strategy."""

    flood_fill_budget: int = FLOOD_FILL_BUDGET
    tight_spot_threshold: int = TIGHT_SPOT_THRESHOLD
    safety_penalty: int = SAFETY_PENALTY
    trapping_reward: int = TRAPPING_REWARD

    def __post_init__(self) -> None:
        if self.flood_fill_budget < 1:
            raise ValueError("flood_fill_budget must be >= 1")
        if self.tight_spot_threshold < 0:
            raise ValueError("tight_spot_threshold must be >= 0")
        if self.tight_spot_threshold > self.flood_fill_budget:
            raise ValueError("tight_spot_threshold must be <= flood_fill_budget")
        if self.safety_penalty < 0:
            raise ValueError("safety_penalty must be >= 0")
        if self.trapping_reward < 0:
            raise ValueError("trapping_reward must be >= 0")


@dataclass(frozen=True)
class RuntimeConfig:
    """Decision-loop knobs."""

    max_ticks: int | None = None
    tolerate_missing_self: bool = False

    def __post_init__(self) -> None:
        if self.max_ticks is not None and self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")


@dataclass(frozen=True)
class ArenaConfig:
    """Local arena dimensions and limits."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    max_clients: int = MAX_CLIENTS
    max_frames: int | None = None
    seed: int = 0

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.max_clients < 1:
            raise ValueError("max_clients must be >= 1")
        if self.max_clients > self.grid_width * self.grid_height:
            raise ValueError("max_clients cannot exceed grid cells")
        if self.max_frames is not None and self.max_frames < 1:
            raise ValueError("max_frames must be >= 1")
