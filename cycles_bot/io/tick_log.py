"""Buffered Parquet writer for per-tick decisions."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from cycles_bot.config.constants import FLUSH_THRESHOLD
from cycles_bot.domain.state import Player
from cycles_bot.io.schemas import TICK_LOG_SCHEMA, TICK_LOG_SCHEMA_VERSION
from cycles_bot.strategy.base import Decision


class TickLogWriter:
    """Accumulate tick rows column-wise and stream them to one Parquet file.

    Rows are flushed every ``flush_threshold`` ticks and on :meth:`close`.
    The file is created lazily, so a run that never moves leaves no file.
    """

    def __init__(self, path: Path, bot_name: str, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.bot_name = bot_name
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[int | str | None]] = {
            field.name: [] for field in TICK_LOG_SCHEMA
        }

    def record(self, tick: int, frame: int, me: Player, decision: Decision) -> None:
        target = decision.target
        predicted = decision.predicted_opponent
        row: dict[str, int | str | None] = {
            "schema_version": TICK_LOG_SCHEMA_VERSION,
            "bot_name": self.bot_name,
            "tick": tick,
            "frame": frame,
            "x": me.position.x,
            "y": me.position.y,
            "direction": decision.direction.value,
            "mode": decision.mode.value,
            "target_x": target.x if target is not None else None,
            "target_y": target.y if target is not None else None,
            "predicted_x": predicted.x if predicted is not None else None,
            "predicted_y": predicted.y if predicted is not None else None,
            "score": decision.score,
        }
        for key, value in row.items():
            self._columns[key].append(value)
        if len(self._columns["tick"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        """Write buffered rows to Parquet and clear in-memory buffers."""
        pending = len(self._columns["tick"])
        if not pending:
            return
        table = pa.Table.from_pydict(self._columns, schema=TICK_LOG_SCHEMA)
        if self._writer is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = pq.ParquetWriter(self.path, TICK_LOG_SCHEMA)
        self._writer.write_table(table)
        self.rows_written += pending
        for values in self._columns.values():
            values.clear()

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    def __enter__(self) -> TickLogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def read_tick_log(path: Path) -> list[dict[str, object]]:
    """Load a tick log as a list of row dicts ordered by tick."""
    table = pq.read_table(path)
    missing = {field.name for field in TICK_LOG_SCHEMA} - set(table.column_names)
    if missing:
        raise ValueError(f"tick log missing required columns: {sorted(missing)}")
    rows = table.to_pylist()
    return sorted(rows, key=lambda row: int(row["tick"]))  # type: ignore[call-overload]
