"""Multi-factor move scoring for the aggressive strategy.

Each open candidate cell gets four integer sub-scores:

- safety: ``-safety_penalty`` per blocked neighbor of the candidate
- proximity: negative Manhattan distance from the candidate to the target
- trapping: ``+trapping_reward`` per blocked neighbor of the predicted opponent
  cell. This term depends only on the opponent, so it is the same for every
  candidate in a tick and never changes the ranking.
- space: bounded flood-fill size from the candidate
"""

from __future__ import annotations

from dataclasses import dataclass

from cycles_bot.config.types import ScoringConfig
from cycles_bot.domain.grid import SCAN_ORDER, Direction, Position
from cycles_bot.domain.state import GameState
from cycles_bot.metrics.spatial import (
    available_space,
    blocked_neighbor_count,
    manhattan_distance,
)

DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class MoveScore:
    """Per-candidate score breakdown."""

    direction: Direction
    safety: int
    proximity: int
    trapping: int
    space: int

    @property
    def total(self) -> int:
        return self.safety + self.proximity + self.trapping + self.space


def first_open_direction(state: GameState, origin: Position) -> Direction:
    """First direction in scan order leading to an open cell.

    Falls back to NORTH when every neighbor is blocked, even though that move
    is not legal.
    """
    for direction in SCAN_ORDER:
        if state.is_open(origin.step(direction)):
            return direction
    return Direction.NORTH


def score_candidates(
    state: GameState,
    origin: Position,
    target: Position,
    predicted_opponent: Position,
    weights: ScoringConfig = DEFAULT_SCORING,
) -> list[MoveScore]:
    """Score every open candidate move from *origin*, in scan order."""
    trapping = weights.trapping_reward * blocked_neighbor_count(state, predicted_opponent)
    scores: list[MoveScore] = []
    for direction in SCAN_ORDER:
        candidate = origin.step(direction)
        if not state.is_open(candidate):
            continue
        scores.append(
            MoveScore(
                direction=direction,
                safety=-weights.safety_penalty * blocked_neighbor_count(state, candidate),
                proximity=-manhattan_distance(candidate, target),
                trapping=trapping,
                space=available_space(state, candidate, weights.flood_fill_budget),
            )
        )
    return scores


def rank_moves(scores: list[MoveScore]) -> list[MoveScore]:
    """Sort by total descending; ``sorted`` is stable so ties keep scan order."""
    return sorted(scores, key=lambda score: score.total, reverse=True)


def decide_best_move(
    state: GameState,
    origin: Position,
    target: Position,
    predicted_opponent: Position,
    weights: ScoringConfig = DEFAULT_SCORING,
) -> Direction:
    """Top-ranked candidate direction, or the fallback scan when none is open."""
    ranked = rank_moves(score_candidates(state, origin, target, predicted_opponent, weights))
    if ranked:
        return ranked[0].direction
    return first_open_direction(state, origin)
