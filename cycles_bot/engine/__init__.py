"""Decision loop orchestration."""

from cycles_bot.engine.loop import DecisionLoop, StateRefresh, TickOutcome

__all__ = [
    "DecisionLoop",
    "StateRefresh",
    "TickOutcome",
]
