"""Move strategies and the registry used by the CLI."""

from __future__ import annotations

from cycles_bot.config.types import ScoringConfig, StrategyName
from cycles_bot.strategy.aggressive import AggressiveTargetStrategy
from cycles_bot.strategy.base import Decision, Strategy
from cycles_bot.strategy.predictor import predict_opponent_move
from cycles_bot.strategy.scoring import (
    MoveScore,
    decide_best_move,
    first_open_direction,
    rank_moves,
    score_candidates,
)
from cycles_bot.strategy.zigzag import ZigzagStrategy


def build_strategy(name: StrategyName | str, scoring: ScoringConfig | None = None) -> Strategy:
    """Instantiate a registered strategy by name."""
    try:
        strategy_name = StrategyName(name)
    except ValueError as exc:
        valid = ", ".join(s.value for s in StrategyName)
        raise ValueError(f"strategy must be one of {valid}") from exc
    if strategy_name is StrategyName.AGGRESSIVE:
        return AggressiveTargetStrategy(scoring or ScoringConfig())
    return ZigzagStrategy()


__all__ = [
    "AggressiveTargetStrategy",
    "Decision",
    "MoveScore",
    "Strategy",
    "ZigzagStrategy",
    "build_strategy",
    "decide_best_move",
    "first_open_direction",
    "predict_opponent_move",
    "rank_moves",
    "score_candidates",
]
