"""Persistence layer: tick-log schema, output paths and Parquet writer."""

from cycles_bot.io.paths import logs_dir, tick_log_path
from cycles_bot.io.schemas import TICK_LOG_SCHEMA, TICK_LOG_SCHEMA_VERSION
from cycles_bot.io.tick_log import TickLogWriter, read_tick_log

__all__ = [
    "TICK_LOG_SCHEMA",
    "TICK_LOG_SCHEMA_VERSION",
    "TickLogWriter",
    "logs_dir",
    "read_tick_log",
    "tick_log_path",
]
