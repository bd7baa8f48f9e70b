"""Tests for cycles_bot.domain grid geometry and snapshots."""

from __future__ import annotations

import pytest

from cycles_bot.domain.grid import SCAN_ORDER, Direction, Position
from cycles_bot.domain.state import GameState, OutOfGridError, Player


def _state(width: int = 5, height: int = 5, occupied=(), players=()) -> GameState:
    return GameState.from_cells(width, height, occupied, players)


class TestDirection:
    def test_scan_order_is_north_east_south_west(self) -> None:
        assert SCAN_ORDER == (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

    def test_vectors_follow_y_down_convention(self) -> None:
        assert Direction.NORTH.vector == (0, -1)
        assert Direction.EAST.vector == (1, 0)
        assert Direction.SOUTH.vector == (0, 1)
        assert Direction.WEST.vector == (-1, 0)

    def test_each_direction_has_one_opposite(self) -> None:
        for direction in SCAN_ORDER:
            assert direction.opposite.opposite is direction
            dx, dy = direction.vector
            assert direction.opposite.vector == (-dx, -dy)

    def test_perpendicular_pair(self) -> None:
        assert Direction.NORTH.perpendicular == (Direction.EAST, Direction.WEST)
        assert Direction.EAST.perpendicular == (Direction.NORTH, Direction.SOUTH)
        for direction in SCAN_ORDER:
            for other in direction.perpendicular:
                ax, ay = direction.vector
                bx, by = other.vector
                assert ax * bx + ay * by == 0


class TestPosition:
    def test_step_applies_vector(self) -> None:
        assert Position(2, 2).step(Direction.NORTH) == Position(2, 1)
        assert Position(2, 2).step(Direction.WEST) == Position(1, 2)

    def test_neighbors_in_scan_order(self) -> None:
        assert Position(1, 1).neighbors() == (
            Position(1, 0),
            Position(2, 1),
            Position(1, 2),
            Position(0, 1),
        )

    def test_value_semantics(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2


class TestGameState:
    def test_player_heads_are_occupied(self) -> None:
        state = _state(players=[Player(0, "bot", Position(2, 2))])
        assert not state.is_cell_empty(Position(2, 2))
        assert state.is_cell_empty(Position(2, 1))

    def test_is_inside_grid_bounds(self) -> None:
        state = _state(width=4, height=3)
        assert state.is_inside_grid(Position(0, 0))
        assert state.is_inside_grid(Position(3, 2))
        assert not state.is_inside_grid(Position(4, 0))
        assert not state.is_inside_grid(Position(0, 3))
        assert not state.is_inside_grid(Position(-1, 0))

    def test_cell_query_outside_grid_raises(self) -> None:
        state = _state()
        with pytest.raises(OutOfGridError):
            state.is_cell_empty(Position(5, 0))

    def test_is_open_combines_guards(self) -> None:
        state = _state(occupied=[Position(1, 1)])
        assert state.is_open(Position(0, 0))
        assert not state.is_open(Position(1, 1))
        assert not state.is_open(Position(-1, 0))

    def test_occupancy_is_read_only(self) -> None:
        state = _state()
        with pytest.raises(ValueError):
            state.occupancy[0, 0] = True

    def test_find_player_by_name(self) -> None:
        me = Player(7, "bot", Position(0, 0))
        state = _state(players=[Player(1, "other", Position(4, 4)), me])
        assert state.find_player("bot") == me
        assert state.find_player("ghost") is None

    def test_opponents_excluded_by_id(self) -> None:
        me = Player(1, "bot", Position(0, 0))
        twin = Player(2, "bot", Position(4, 4))
        state = _state(players=[me, twin])
        assert state.opponents_of(me) == (twin,)

    def test_rejects_player_outside_grid(self) -> None:
        with pytest.raises(ValueError):
            _state(players=[Player(0, "bot", Position(5, 5))])

    def test_rejects_empty_grid(self) -> None:
        with pytest.raises(ValueError):
            _state(width=0)
