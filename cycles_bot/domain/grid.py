"""Grid geometry primitives: positions, compass directions and scan order.

Coordinates follow the game server convention: ``x`` grows eastward and
``y`` grows southward, so NORTH moves to ``y - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """The four compass moves a player may submit."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def vector(self) -> tuple[int, int]:
        """Unit displacement ``(dx, dy)`` for this direction."""
        return _VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def perpendicular(self) -> tuple[Direction, Direction]:
        """The two directions orthogonal to this one, in scan order."""
        return tuple(d for d in SCAN_ORDER if d is not self and d is not self.opposite)  # type: ignore[return-value]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

SCAN_ORDER: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)
"""Fixed order used by every neighbor scan; also the tie-break order."""


@dataclass(frozen=True)
class Position:
    """Immutable integer cell coordinate."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighboring position one cell towards *direction*."""
        dx, dy = direction.vector
        return Position(self.x + dx, self.y + dy)

    def neighbors(self) -> tuple[Position, ...]:
        """Four neighbors in ``SCAN_ORDER`` (may lie outside the grid)."""
        return tuple(self.step(direction) for direction in SCAN_ORDER)
