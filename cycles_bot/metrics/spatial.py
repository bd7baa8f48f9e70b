"""Spatial metrics: Manhattan distance, bounded flood fill, neighbor blockage."""

from __future__ import annotations

from collections import deque

from cycles_bot.config.constants import FLOOD_FILL_BUDGET
from cycles_bot.domain.grid import Position
from cycles_bot.domain.state import GameState, OutOfGridError, Player


def manhattan_distance(a: Position, b: Position) -> int:
    """Sum of absolute coordinate differences between *a* and *b*."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def available_space(state: GameState, origin: Position, budget: int = FLOOD_FILL_BUDGET) -> int:
    """Count cells reachable from *origin* by breadth-first flood fill.

    The origin always counts, even when occupied (it is usually the bot's own
    head), and only in-grid empty cells are expanded. Exploration stops once
    *budget* cells have been counted, so the result lies in ``[1, budget]``
    and measures local openness rather than the full reachable area.
    """
    if budget < 1:
        raise ValueError("budget must be >= 1")
    if not state.is_inside_grid(origin):
        raise OutOfGridError(f"flood fill origin outside grid: {origin}")

    space = 0
    frontier: deque[Position] = deque([origin])
    visited: set[Position] = {origin}
    while frontier and space < budget:
        current = frontier.popleft()
        space += 1
        for neighbor in current.neighbors():
            if neighbor in visited or not state.is_open(neighbor):
                continue
            visited.add(neighbor)
            frontier.append(neighbor)
    return space


def blocked_neighbor_count(state: GameState, pos: Position) -> int:
    """Number of the four neighbors of *pos* that are walls or occupied."""
    return sum(1 for neighbor in pos.neighbors() if not state.is_open(neighbor))


def nearest_opponent(state: GameState, me: Player) -> Player | None:
    """Closest other player by Manhattan distance; first scanned wins ties."""
    nearest: Player | None = None
    best = 0
    for player in state.opponents_of(me):
        distance = manhattan_distance(me.position, player.position)
        if nearest is None or distance < best:
            nearest = player
            best = distance
    return nearest
