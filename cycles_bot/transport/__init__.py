"""Transport layer: the server contract and an in-process arena."""

from cycles_bot.transport.arena import ArenaTransport, LocalArena
from cycles_bot.transport.base import ConnectionFailedError, Transport

__all__ = [
    "ArenaTransport",
    "ConnectionFailedError",
    "LocalArena",
    "Transport",
]
