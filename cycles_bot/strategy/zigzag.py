"""Zigzag sweep strategy: alternate vertical runs while drifting sideways."""

from __future__ import annotations

from cycles_bot.config.types import DecisionMode
from cycles_bot.domain.grid import Direction
from cycles_bot.domain.state import GameState, Player
from cycles_bot.strategy.base import Decision, Strategy


class ZigzagStrategy(Strategy):
    """Run vertically until blocked, then step along ``primary`` and reverse.

    Holds a single bias flag across ticks. No opponent awareness and no
    flood fill.
    """

    name = "zigzag"

    def __init__(self, primary: Direction = Direction.EAST, moving_down: bool = True) -> None:
        if primary not in (Direction.EAST, Direction.WEST):
            raise ValueError("primary must be a horizontal direction")
        self.primary = primary
        self.moving_down = moving_down

    @property
    def vertical(self) -> Direction:
        return Direction.SOUTH if self.moving_down else Direction.NORTH

    def plan(self, state: GameState, me: Player) -> Decision:
        vertical = self.vertical
        if state.is_open(me.position.step(vertical)):
            return Decision(direction=vertical, mode=DecisionMode.ZIGZAG)

        # Blocked vertically: reverse the sweep whether or not the side step works.
        self.moving_down = not self.moving_down
        if state.is_open(me.position.step(self.primary)):
            return Decision(direction=self.primary, mode=DecisionMode.ZIGZAG)
        return Decision(direction=self.primary, mode=DecisionMode.FALLBACK)
