"""Aggressive targeting strategy: chase the nearest opponent, escape when boxed in."""

from __future__ import annotations

import logging

from cycles_bot.config.types import DecisionMode, ScoringConfig
from cycles_bot.domain.state import GameState, OutOfGridError, Player
from cycles_bot.metrics.spatial import available_space, nearest_opponent
from cycles_bot.strategy.base import Decision, Strategy
from cycles_bot.strategy.predictor import predict_opponent_move
from cycles_bot.strategy.scoring import (
    DEFAULT_SCORING,
    first_open_direction,
    rank_moves,
    score_candidates,
)

logger = logging.getLogger(__name__)


class AggressiveTargetStrategy(Strategy):
    """Target the nearest opponent using safety, proximity, trapping and space.

    Stateless across ticks. When the bot's own reachable space drops below
    ``tight_spot_threshold`` it switches to escape mode and takes the first
    open direction instead of scoring.
    """

    name = "aggressive"

    def __init__(self, scoring: ScoringConfig = DEFAULT_SCORING) -> None:
        self.scoring = scoring

    def own_space(self, state: GameState, me: Player) -> int:
        """Reachable space around the bot; an off-grid head counts as zero."""
        try:
            return available_space(state, me.position, self.scoring.flood_fill_budget)
        except OutOfGridError:
            logger.warning("%s: head %s is off the grid, assuming no open space", me.name, me.position)
            return 0

    def is_in_tight_spot(self, state: GameState, me: Player) -> bool:
        return self.own_space(state, me) < self.scoring.tight_spot_threshold

    def plan(self, state: GameState, me: Player) -> Decision:
        opponent = nearest_opponent(state, me)
        if opponent is None:
            return Decision(
                direction=first_open_direction(state, me.position),
                mode=DecisionMode.FALLBACK,
            )

        if self.is_in_tight_spot(state, me):
            logger.warning("%s: Activating escape mode!", me.name)
            return Decision(
                direction=first_open_direction(state, me.position),
                mode=DecisionMode.ESCAPE,
                target=opponent.position,
            )

        predicted = predict_opponent_move(state, opponent)
        ranked = rank_moves(
            score_candidates(state, me.position, opponent.position, predicted, self.scoring)
        )
        if not ranked:
            logger.warning("%s: no scorable move, using fallback direction", me.name)
            return Decision(
                direction=first_open_direction(state, me.position),
                mode=DecisionMode.FALLBACK,
                target=opponent.position,
                predicted_opponent=predicted,
            )

        best = ranked[0]
        return Decision(
            direction=best.direction,
            mode=DecisionMode.AGGRESSIVE,
            target=opponent.position,
            predicted_opponent=predicted,
            score=best.total,
        )
