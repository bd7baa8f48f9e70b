"""One-step opponent lookahead."""

from __future__ import annotations

from cycles_bot.domain.grid import SCAN_ORDER, Position
from cycles_bot.domain.state import GameState, Player


def predict_opponent_move(state: GameState, opponent: Player) -> Position:
    """Return the first open neighbor of *opponent* in scan order.

    Feasibility only: the opponent's own incentives are not modelled. A fully
    boxed-in opponent is assumed to stay where it is.
    """
    for direction in SCAN_ORDER:
        candidate = opponent.position.step(direction)
        if state.is_open(candidate):
            return candidate
    return opponent.position
