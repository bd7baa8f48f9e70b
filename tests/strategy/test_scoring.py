"""Tests for cycles_bot.strategy.scoring."""

from __future__ import annotations

from collections.abc import Iterable

from cycles_bot.config.types import ScoringConfig
from cycles_bot.domain.grid import SCAN_ORDER, Direction, Position
from cycles_bot.domain.state import GameState, Player
from cycles_bot.strategy.scoring import (
    MoveScore,
    decide_best_move,
    first_open_direction,
    rank_moves,
    score_candidates,
)

OPPONENT = Position(2, 0)
PREDICTED = Position(3, 0)


def _duel(
    bot: Position, width: int = 5, height: int = 5, walls: Iterable[Position] = ()
) -> GameState:
    return GameState.from_cells(
        width,
        height,
        walls,
        [Player(0, "bot", bot), Player(1, "opp", OPPONENT)],
    )


class TestScoreCandidates:
    def test_breakdown_for_center_bot(self) -> None:
        state = _duel(Position(2, 2))
        scores = {s.direction: s for s in score_candidates(state, Position(2, 2), OPPONENT, PREDICTED)}
        assert list(scores) == list(SCAN_ORDER)
        north = scores[Direction.NORTH]
        # Opponent head above and own head below: two blocked neighbors.
        assert (north.safety, north.proximity, north.space) == (-20, -1, 20)
        east = scores[Direction.EAST]
        assert (east.safety, east.proximity, east.space) == (-10, -3, 20)

    def test_trapping_is_identical_across_candidates(self) -> None:
        state = _duel(Position(2, 2))
        scores = score_candidates(state, Position(2, 2), OPPONENT, PREDICTED)
        # (3, 0): north is off-grid and west is the opponent head.
        assert {s.trapping for s in scores} == {10}

    def test_blocked_candidates_are_dropped(self) -> None:
        state = _duel(Position(0, 4), walls=[Position(1, 4)])
        scores = score_candidates(state, Position(0, 4), OPPONENT, PREDICTED)
        assert [s.direction for s in scores] == [Direction.NORTH]

    def test_weights_are_applied(self) -> None:
        state = _duel(Position(2, 2))
        weights = ScoringConfig(safety_penalty=1, trapping_reward=0, flood_fill_budget=5)
        north = score_candidates(state, Position(2, 2), OPPONENT, PREDICTED, weights)[0]
        assert (north.safety, north.trapping, north.space) == (-2, 0, 5)

    def test_total_sums_components(self) -> None:
        score = MoveScore(Direction.EAST, safety=-10, proximity=-3, trapping=10, space=20)
        assert score.total == 17


class TestDecideBestMove:
    def test_safety_outweighs_proximity_next_to_heads(self) -> None:
        # NORTH is closest but sits between both heads; EAST/SOUTH/WEST tie
        # at 17 and scan order picks EAST.
        state = _duel(Position(2, 2))
        assert decide_best_move(state, Position(2, 2), OPPONENT, PREDICTED) == Direction.EAST

    def test_proximity_wins_when_safety_is_equal(self) -> None:
        state = _duel(Position(2, 3))
        assert decide_best_move(state, Position(2, 3), OPPONENT, PREDICTED) == Direction.NORTH

    def test_never_moves_into_blocked_cell(self) -> None:
        walls = [Position(1, 1), Position(2, 1), Position(3, 2), Position(1, 3)]
        state = _duel(Position(2, 2), walls=walls)
        direction = decide_best_move(state, Position(2, 2), OPPONENT, PREDICTED)
        assert state.is_open(Position(2, 2).step(direction))

    def test_enclosed_bot_falls_back_without_crashing(self) -> None:
        walls = [Position(2, 1), Position(3, 2), Position(2, 3), Position(1, 2)]
        state = _duel(Position(2, 2), walls=walls)
        assert score_candidates(state, Position(2, 2), OPPONENT, PREDICTED) == []
        direction = decide_best_move(state, Position(2, 2), OPPONENT, PREDICTED)
        assert direction == first_open_direction(state, Position(2, 2)) == Direction.NORTH

    def test_deterministic(self) -> None:
        state = _duel(Position(1, 3), walls=[Position(0, 2), Position(3, 3)])
        results = {decide_best_move(state, Position(1, 3), OPPONENT, PREDICTED) for _ in range(5)}
        assert len(results) == 1


class TestRankingAndFallback:
    def test_rank_is_stable_for_ties(self) -> None:
        scores = [
            MoveScore(Direction.NORTH, -10, 0, 0, 0),
            MoveScore(Direction.EAST, 0, 0, 0, 0),
            MoveScore(Direction.SOUTH, 0, 0, 0, 0),
        ]
        ranked = rank_moves(scores)
        assert [s.direction for s in ranked] == [Direction.EAST, Direction.SOUTH, Direction.NORTH]

    def test_first_open_direction_scans_in_order(self) -> None:
        state = GameState.from_cells(3, 3, [Position(1, 0)], [])
        assert first_open_direction(state, Position(1, 1)) == Direction.EAST

    def test_first_open_direction_defaults_north(self) -> None:
        state = GameState.from_cells(1, 1, [], [])
        assert first_open_direction(state, Position(0, 0)) == Direction.NORTH
