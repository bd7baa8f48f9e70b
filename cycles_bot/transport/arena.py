"""In-process light-cycle arena implementing the transport contract.

The arena owns the authoritative trail set and player seats. A seat is either
*scripted* (driven by a ``Strategy`` inside the arena) or *remote* (driven by a
bot through an ``ArenaTransport``). A frame resolves once every live remote
seat has submitted a move:

1. scripted seats choose their moves from the same snapshot;
2. every live player advances one cell;
3. a move into a wall or an occupied cell eliminates the mover, and players
   entering the same cell are all eliminated;
4. survivors' new cells are added to the trail set. Trails are permanent,
   including those of eliminated players.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from random import Random

from cycles_bot.config.types import ArenaConfig
from cycles_bot.domain.grid import Direction, Position
from cycles_bot.domain.state import GameState, Player
from cycles_bot.strategy.base import Strategy

logger = logging.getLogger(__name__)


@dataclass
class _Seat:
    player_id: int
    name: str
    position: Position
    strategy: Strategy | None
    alive: bool = True
    connected: bool = False
    heading: Direction = Direction.NORTH
    pending: Direction | None = None

    @property
    def is_remote(self) -> bool:
        return self.strategy is None

    def as_player(self) -> Player:
        return Player(player_id=self.player_id, name=self.name, position=self.position)


class LocalArena:
    """Fixed-size arena that advances one frame per round of remote moves."""

    def __init__(self, config: ArenaConfig | None = None) -> None:
        self.config = config or ArenaConfig()
        self.frame = 0
        self.eliminated: list[str] = []
        self._rng = Random(self.config.seed)
        self._trails: set[Position] = set()
        self._seats: dict[str, _Seat] = {}

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def add_walls(self, cells: Iterable[Position]) -> None:
        """Mark *cells* as permanently occupied before or during a match."""
        for cell in cells:
            if not self._inside(cell):
                raise ValueError(f"wall outside grid: {cell}")
            self._trails.add(cell)

    def add_player(
        self,
        name: str,
        position: Position | None = None,
        strategy: Strategy | None = None,
    ) -> Player:
        """Seat a player at *position* or at a seeded random empty cell."""
        if name in self._seats:
            raise ValueError(f"player name already seated: {name!r}")
        if len(self._seats) >= self.config.max_clients:
            raise ValueError("arena is full")
        if position is None:
            position = self._random_empty_cell()
        elif not self._inside(position):
            raise ValueError(f"spawn outside grid: {position}")
        elif position in self._trails:
            raise ValueError(f"spawn cell already occupied: {position}")
        seat = _Seat(
            player_id=len(self._seats),
            name=name,
            position=position,
            strategy=strategy,
        )
        self._seats[name] = seat
        self._trails.add(position)
        return seat.as_player()

    def _inside(self, pos: Position) -> bool:
        return 0 <= pos.x < self.config.grid_width and 0 <= pos.y < self.config.grid_height

    def _random_empty_cell(self) -> Position:
        empty = [
            Position(x, y)
            for y in range(self.config.grid_height)
            for x in range(self.config.grid_width)
            if Position(x, y) not in self._trails
        ]
        if not empty:
            raise ValueError("no empty cell left to spawn a player")
        return self._rng.choice(empty)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> GameState:
        """Current world as seen by every player: all trails and live players."""
        return GameState.from_cells(
            self.config.grid_width,
            self.config.grid_height,
            self._trails,
            [seat.as_player() for seat in self._seats.values() if seat.alive],
            frame=self.frame,
        )

    def alive_players(self) -> list[str]:
        return [seat.name for seat in self._seats.values() if seat.alive]

    def is_alive(self, name: str) -> bool:
        seat = self._seats.get(name)
        return seat is not None and seat.alive

    def frames_exhausted(self) -> bool:
        return self.config.max_frames is not None and self.frame >= self.config.max_frames

    def is_running(self) -> bool:
        """A match runs while at least two players live and frames remain."""
        return len(self.alive_players()) >= 2 and not self.frames_exhausted()

    # ------------------------------------------------------------------
    # Frame resolution
    # ------------------------------------------------------------------

    def connect(self, name: str) -> bool:
        """Attach a remote client to its seat; returns whether it succeeded."""
        seat = self._seats.get(name)
        if seat is None or not seat.is_remote or seat.connected:
            logger.warning("arena rejected connection for %r", name)
            return False
        seat.connected = True
        return True

    def transport_for(self, name: str) -> ArenaTransport:
        """Return an unconnected transport that can only claim the remote seat *name*."""
        seat = self._seats.get(name)
        if seat is None or not seat.is_remote:
            raise ValueError(f"no remote seat named {name!r}")
        return ArenaTransport(self, seat=name)

    def submit(self, name: str, direction: Direction) -> None:
        """Record a remote seat's move; resolves the frame once all are in."""
        seat = self._seats.get(name)
        if seat is None or not seat.is_remote:
            raise ValueError(f"no remote seat named {name!r}")
        if not seat.alive:
            logger.debug("dropping move from eliminated player %r", name)
            return
        seat.pending = direction
        waiting = [
            s for s in self._seats.values() if s.alive and s.is_remote and s.pending is None
        ]
        if not waiting:
            self.advance()

    def advance(self) -> None:
        """Resolve one frame for every live player."""
        if self.frames_exhausted():
            return
        state = self.snapshot()
        live = [seat for seat in self._seats.values() if seat.alive]
        for seat in live:
            if seat.strategy is not None:
                seat.heading = seat.strategy.choose_move(state, seat.as_player())
            else:
                # A silent remote seat keeps its previous heading.
                seat.heading = seat.pending or seat.heading
            seat.pending = None

        targets = {seat.name: seat.position.step(seat.heading) for seat in live}
        claims = Counter(targets.values())
        for seat in live:
            target = targets[seat.name]
            if not self._inside(target) or target in self._trails or claims[target] > 1:
                seat.alive = False
                self.eliminated.append(seat.name)
                logger.info("frame %d: %s crashed moving %s", self.frame, seat.name, seat.heading.value)
                continue
            seat.position = target
        for seat in live:
            if seat.alive:
                self._trails.add(seat.position)
        self.frame += 1

    def play(self) -> int:
        """Advance scripted-only matches until they end; returns frames played."""
        if any(seat.is_remote and seat.alive for seat in self._seats.values()):
            raise ValueError("play() requires every live seat to be scripted")
        start = self.frame
        while self.is_running():
            self.advance()
        return self.frame - start


class ArenaTransport:
    """``Transport`` bound to one remote seat of a :class:`LocalArena`.

    With *seat* set, ``connect`` refuses any other name.
    """

    def __init__(self, arena: LocalArena, seat: str | None = None) -> None:
        self.arena = arena
        self.seat = seat
        self.name: str | None = None

    def connect(self, name: str) -> None:
        if self.seat is not None and name != self.seat:
            logger.warning("transport for seat %r refused connection as %r", self.seat, name)
            return
        if self.arena.connect(name):
            self.name = name

    def is_active(self) -> bool:
        return (
            self.name is not None
            and self.arena.is_alive(self.name)
            and not self.arena.frames_exhausted()
        )

    def receive_game_state(self) -> GameState:
        return self.arena.snapshot()

    def send_move(self, direction: Direction) -> None:
        if self.name is None:
            raise RuntimeError("send_move called before a successful connect")
        self.arena.submit(self.name, direction)
