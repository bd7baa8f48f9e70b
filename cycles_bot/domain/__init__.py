"""Domain layer: grid geometry and immutable world snapshots."""

from cycles_bot.domain.grid import SCAN_ORDER, Direction, Position
from cycles_bot.domain.state import GameState, OutOfGridError, Player

__all__ = [
    "Direction",
    "GameState",
    "OutOfGridError",
    "Player",
    "Position",
    "SCAN_ORDER",
]
