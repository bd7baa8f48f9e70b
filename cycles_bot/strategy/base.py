"""Shared strategy contract: one ``Decision`` per tick."""

from __future__ import annotations

from dataclasses import dataclass

from cycles_bot.config.types import DecisionMode
from cycles_bot.domain.grid import Direction, Position
from cycles_bot.domain.state import GameState, Player


@dataclass(frozen=True)
class Decision:
    """Direction chosen for one tick plus the context that produced it."""

    direction: Direction
    mode: DecisionMode
    target: Position | None = None
    predicted_opponent: Position | None = None
    score: int | None = None


class Strategy:
    """Base class for move strategies driven by the decision loop."""

    name = "base"

    def plan(self, state: GameState, me: Player) -> Decision:
        raise NotImplementedError

    def choose_move(self, state: GameState, me: Player) -> Direction:
        """Return only the direction of :meth:`plan`."""
        return self.plan(state, me).direction
