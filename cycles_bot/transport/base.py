"""Transport contract between the decision loop and a game server."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cycles_bot.domain.grid import Direction
from cycles_bot.domain.state import GameState


class ConnectionFailedError(RuntimeError):
    """Raised when a bot cannot establish its session at startup."""


@runtime_checkable
class Transport(Protocol):
    """Blocking request/response channel: one snapshot in, one move out."""

    def connect(self, name: str) -> None: ...

    def is_active(self) -> bool: ...

    def receive_game_state(self) -> GameState: ...

    def send_move(self, direction: Direction) -> None: ...
