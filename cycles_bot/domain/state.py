"""Immutable per-tick world snapshot and player records.

A ``GameState`` is replaced wholesale every tick; nothing in it is patched
incrementally. Occupancy is stored as a read-only ``(height, width)`` boolean
array where ``True`` marks a trail, a wall or a player head.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from cycles_bot.domain.grid import Position


class OutOfGridError(ValueError):
    """Raised when an occupancy query targets a cell outside the grid."""


@dataclass(frozen=True)
class Player:
    """One player as seen in a snapshot."""

    player_id: int
    name: str
    position: Position


@dataclass(frozen=True, eq=False)
class GameState:
    """Snapshot of grid occupancy and all players at one frame."""

    grid_width: int
    grid_height: int
    occupancy: np.ndarray
    players: tuple[Player, ...]
    frame: int = 0

    @classmethod
    def from_cells(
        cls,
        grid_width: int,
        grid_height: int,
        occupied: Iterable[Position],
        players: Iterable[Player],
        frame: int = 0,
    ) -> GameState:
        """Build a snapshot from occupied cells; player heads are always occupied."""
        if grid_width < 1 or grid_height < 1:
            raise ValueError("grid dimensions must be >= 1")
        grid = np.zeros((grid_height, grid_width), dtype=bool)
        for pos in occupied:
            if not (0 <= pos.x < grid_width and 0 <= pos.y < grid_height):
                raise ValueError(f"occupied cell outside grid: {pos}")
            grid[pos.y, pos.x] = True
        player_tuple = tuple(players)
        for player in player_tuple:
            pos = player.position
            if not (0 <= pos.x < grid_width and 0 <= pos.y < grid_height):
                raise ValueError(f"player {player.name!r} outside grid: {pos}")
            grid[pos.y, pos.x] = True
        grid.setflags(write=False)
        return cls(
            grid_width=grid_width,
            grid_height=grid_height,
            occupancy=grid,
            players=player_tuple,
            frame=frame,
        )

    def is_inside_grid(self, pos: Position) -> bool:
        return 0 <= pos.x < self.grid_width and 0 <= pos.y < self.grid_height

    def is_cell_empty(self, pos: Position) -> bool:
        """True iff *pos* is unoccupied. Guard with ``is_inside_grid`` first."""
        if not self.is_inside_grid(pos):
            raise OutOfGridError(f"cell outside {self.grid_width}x{self.grid_height} grid: {pos}")
        return not bool(self.occupancy[pos.y, pos.x])

    def is_open(self, pos: Position) -> bool:
        """In-grid and empty: the only cells a player may legally enter."""
        return self.is_inside_grid(pos) and self.is_cell_empty(pos)

    def find_player(self, name: str) -> Player | None:
        """Return the first player whose display name matches *name*."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    def opponents_of(self, player: Player) -> tuple[Player, ...]:
        """All other players in snapshot order, compared by id."""
        return tuple(p for p in self.players if p.player_id != player.player_id)
