"""Metric functions over world snapshots."""

from cycles_bot.metrics.spatial import (
    available_space,
    blocked_neighbor_count,
    manhattan_distance,
    nearest_opponent,
)

__all__ = [
    "available_space",
    "blocked_neighbor_count",
    "manhattan_distance",
    "nearest_opponent",
]
