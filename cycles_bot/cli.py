"""CLI entrypoint: run one bot against scripted opponents in a local arena.

This module owns CLI argument parsing, logging setup and exit-status mapping.
All decision logic lives in the extracted modules:

- ``cycles_bot.config``      – constants and configuration dataclasses
- ``cycles_bot.strategy``    – aggressive and zigzag strategies
- ``cycles_bot.engine.loop`` – the per-tick ``DecisionLoop``
- ``cycles_bot.transport``   – ``LocalArena`` and its seat transport
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from cycles_bot.config.constants import GRID_HEIGHT, GRID_WIDTH, MAX_CLIENTS
from cycles_bot.config.types import ArenaConfig, RuntimeConfig, ScoringConfig, StrategyName
from cycles_bot.engine.loop import DecisionLoop
from cycles_bot.io.paths import tick_log_path
from cycles_bot.io.tick_log import TickLogWriter
from cycles_bot.strategy import build_strategy
from cycles_bot.transport.arena import LocalArena
from cycles_bot.transport.base import ConnectionFailedError
from cycles_bot.viz.render import render_snapshot
from cycles_bot.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})

T = TypeVar("T")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_grid_size(raw_grid_size: str) -> tuple[int, int]:
    """Parse a grid size formatted as `WxH`."""
    tokens = raw_grid_size.strip().lower().split("x")
    if len(tokens) != 2:
        raise ValueError("grid-size must use WxH format")
    try:
        width = int(tokens[0])
        height = int(tokens[1])
    except ValueError as exc:
        raise ValueError("grid-size must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise ValueError("grid-size must be >= 1x1")
    return width, height


def _as_str(raw: object, key: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (str, Path, int, float)):
        raise ValueError(f"{key} must be a string, got {raw!r}")
    return str(raw)


def _as_bool(raw: object, key: str) -> bool:
    """Accept JSON booleans and the usual on/off words."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")


def _as_int(raw: object, key: str) -> int:
    """Accept ints, integral floats and numeric strings; never booleans."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
    if isinstance(raw, float) and value != raw:
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    return value


def _as_strategy(raw: object, key: str) -> StrategyName:
    try:
        return StrategyName(_as_str(raw, key))
    except ValueError as exc:
        valid = ", ".join(s.value for s in StrategyName)
        raise ValueError(f"{key} must be one of {valid}") from exc


def _as_grid_size(raw: object, key: str) -> tuple[int, int]:
    return _parse_grid_size(_as_str(raw, key))


def _as_log_level(raw: object, key: str) -> str:
    level = _as_str(raw, key).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{key} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


class _Settings:
    """Option lookup with CLI > config file > default precedence.

    Config keys are the argparse destinations, e.g. ``grid_size`` for
    ``--grid-size``.
    """

    def __init__(self, args: argparse.Namespace, file_cfg: dict[str, object]) -> None:
        self.args = args
        self.file_cfg = file_cfg

    def _raw(self, key: str, default: object) -> object:
        cli_val = getattr(self.args, key, None)
        if cli_val is not None:
            return cli_val
        return self.file_cfg.get(key, default)

    def get(self, key: str, coerce: Callable[[object, str], T], default: object) -> T:
        return coerce(self._raw(key, default), key)

    def get_optional(self, key: str, coerce: Callable[[object, str], T]) -> T | None:
        raw = self._raw(key, None)
        return None if raw is None else coerce(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a light-cycle bot in a local arena")
    parser.add_argument("name", help="Bot display name")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in StrategyName],
        default=None,
    )
    parser.add_argument(
        "--opponent-strategy",
        type=str,
        choices=[s.value for s in StrategyName],
        default=None,
    )
    parser.add_argument("--opponents", type=int, default=None)
    parser.add_argument("--grid-size", type=str, default=None, help="Arena size as WxH")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument(
        "--tolerate-missing-self", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--out-dir", type=Path, default=None, help="Write a Parquet tick log here")
    parser.add_argument("--render", type=Path, default=None, help="Save the final board as PNG")
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    parser.add_argument("--log-level", type=str, choices=list(LOG_LEVELS), default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Run one match and return the process exit status.

    Supports ``--config path/to/config.json``; CLI arguments override
    config-file values, which override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    settings = _Settings(args, file_cfg)
    try:
        strategy_name = settings.get("strategy", _as_strategy, StrategyName.AGGRESSIVE.value)
        opponent_strategy = settings.get(
            "opponent_strategy", _as_strategy, StrategyName.ZIGZAG.value
        )
        n_opponents = settings.get("opponents", _as_int, 1)
        grid_width, grid_height = settings.get(
            "grid_size", _as_grid_size, f"{GRID_WIDTH}x{GRID_HEIGHT}"
        )
        seed = settings.get("seed", _as_int, 0)
        max_ticks = settings.get_optional("max_ticks", _as_int)
        tolerate_missing_self = settings.get("tolerate_missing_self", _as_bool, False)
        out_dir_raw = settings.get_optional("out_dir", _as_str)
        render_raw = settings.get_optional("render", _as_str)
        theme = get_theme(settings.get("theme", _as_str, "default"))
        log_level = settings.get("log_level", _as_log_level, "INFO")

        if n_opponents < 0:
            raise ValueError("opponents must be >= 0")
        arena_config = ArenaConfig(
            grid_width=grid_width,
            grid_height=grid_height,
            max_clients=min(MAX_CLIENTS, grid_width * grid_height),
            seed=seed,
        )
        runtime_config = RuntimeConfig(
            max_ticks=max_ticks, tolerate_missing_self=tolerate_missing_self
        )
        arena = LocalArena(arena_config)
        arena.add_player(args.name)
        for i in range(n_opponents):
            arena.add_player(f"opponent{i + 1}", strategy=build_strategy(opponent_strategy))
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    transport = arena.transport_for(args.name)
    strategy = build_strategy(strategy_name, ScoringConfig())
    tick_log = (
        TickLogWriter(tick_log_path(Path(out_dir_raw)), args.name)
        if out_dir_raw is not None
        else None
    )
    try:
        loop = DecisionLoop(
            args.name, transport, strategy, config=runtime_config, tick_log=tick_log
        )
    except ConnectionFailedError:
        return EXIT_FAILURE

    if tick_log is not None:
        with tick_log:
            result = loop.run()
    else:
        result = loop.run()

    if render_raw is not None:
        rendered = render_snapshot(
            arena.snapshot(), Path(render_raw), me_name=args.name, theme=theme
        )
        logger.info("final board written to %s", rendered)

    summary = {
        "bot": result.bot_name,
        "strategy": strategy_name.value,
        "status": result.status.value,
        "ticks": result.ticks,
        "frames": arena.frame,
        "alive": arena.alive_players(),
        "eliminated": arena.eliminated,
        "exit_code": result.exit_code,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
