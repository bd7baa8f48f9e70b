"""Per-tick decision loop: refresh state, detect terminal conditions, move.

The loop never exits the process. Every stop condition is reported as a
``RunResult`` so the caller decides what exit status to use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cycles_bot.config.types import (
    RefreshStatus,
    RunResult,
    RunStatus,
    RuntimeConfig,
    TickStatus,
)
from cycles_bot.domain.state import GameState, Player
from cycles_bot.io.tick_log import TickLogWriter
from cycles_bot.strategy.base import Decision, Strategy
from cycles_bot.transport.base import ConnectionFailedError, Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateRefresh:
    """Outcome of receiving one snapshot and locating the bot in it."""

    status: RefreshStatus
    state: GameState | None = None
    me: Player | None = None
    detail: str | None = None


@dataclass(frozen=True)
class TickOutcome:
    """Outcome of one tick; ``decision`` is set only when a move was sent."""

    status: TickStatus
    decision: Decision | None = None
    detail: str | None = None


class DecisionLoop:
    """Drive one named bot against a transport until a stop condition."""

    def __init__(
        self,
        name: str,
        transport: Transport,
        strategy: Strategy,
        config: RuntimeConfig | None = None,
        tick_log: TickLogWriter | None = None,
    ) -> None:
        self.name = name
        self.transport = transport
        self.strategy = strategy
        self.config = config or RuntimeConfig()
        self.tick_log = tick_log
        self.ticks = 0
        self._last_me: Player | None = None

        transport.connect(name)
        if not transport.is_active():
            logger.critical("%s: Connection failed", name)
            raise ConnectionFailedError(f"{name}: connection failed")

    def refresh_state(self) -> StateRefresh:
        """Receive the next snapshot and find this bot's player by name."""
        state = self.transport.receive_game_state()
        me = state.find_player(self.name)
        if me is not None:
            self._last_me = me
            return StateRefresh(status=RefreshStatus.OK, state=state, me=me)

        detail = f"{self.name}: player not found in frame {state.frame}"
        if self.config.tolerate_missing_self and self._last_me is not None:
            logger.warning("%s, reusing last known position %s", detail, self._last_me.position)
            return StateRefresh(
                status=RefreshStatus.RECOVERABLE,
                state=state,
                me=self._last_me,
                detail=detail,
            )
        logger.critical(detail)
        return StateRefresh(status=RefreshStatus.FATAL, state=state, detail=detail)

    def step(self) -> TickOutcome:
        """Run one tick: at most one move is sent to the transport."""
        refresh = self.refresh_state()
        if refresh.status is RefreshStatus.FATAL:
            return TickOutcome(status=TickStatus.FATAL, detail=refresh.detail)
        state, me = refresh.state, refresh.me
        if state is None or me is None:
            raise RuntimeError(
                f"{self.name}: {refresh.status.value} refresh without a located player"
            )

        if not state.opponents_of(me):
            logger.info("%s: No targets remaining, stopping.", self.name)
            return TickOutcome(status=TickStatus.NO_OPPONENTS)

        decision = self.strategy.plan(state, me)
        self.transport.send_move(decision.direction)
        if self.tick_log is not None:
            self.tick_log.record(self.ticks, state.frame, me, decision)
        self.ticks += 1
        logger.debug(
            "%s: frame %d at (%d, %d) -> %s [%s]",
            self.name,
            state.frame,
            me.position.x,
            me.position.y,
            decision.direction.value,
            decision.mode.value,
        )
        return TickOutcome(status=TickStatus.MOVED, decision=decision)

    def run(self) -> RunResult:
        """Loop until the transport closes, no opponents remain, or a fatal tick."""
        while self.transport.is_active():
            if self.config.max_ticks is not None and self.ticks >= self.config.max_ticks:
                logger.info("%s: tick limit %d reached", self.name, self.config.max_ticks)
                return self._result(RunStatus.TICK_LIMIT)
            outcome = self.step()
            if outcome.status is TickStatus.NO_OPPONENTS:
                return self._result(RunStatus.NO_OPPONENTS)
            if outcome.status is TickStatus.FATAL:
                return self._result(RunStatus.FATAL, outcome.detail)
        logger.info("%s: transport inactive after %d ticks", self.name, self.ticks)
        return self._result(RunStatus.TRANSPORT_CLOSED)

    def _result(self, status: RunStatus, detail: str | None = None) -> RunResult:
        return RunResult(bot_name=self.name, status=status, ticks=self.ticks, detail=detail)
