"""Tests for the cycles_bot CLI entrypoint."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from cycles_bot.cli import _parse_grid_size, main  # noqa: E402
from cycles_bot.io.paths import tick_log_path  # noqa: E402
from cycles_bot.io.tick_log import read_tick_log  # noqa: E402
from cycles_bot.transport.base import ConnectionFailedError  # noqa: E402


def _summary(capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    return json.loads(capsys.readouterr().out)


def test_parse_grid_size() -> None:
    assert _parse_grid_size("12x8") == (12, 8)
    assert _parse_grid_size(" 3X4 ") == (3, 4)
    for raw in ("12", "ax3", "0x5"):
        with pytest.raises(ValueError):
            _parse_grid_size(raw)


def test_match_writes_tick_log(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "bot",
            "--grid-size",
            "10x10",
            "--seed",
            "3",
            "--max-ticks",
            "5",
            "--out-dir",
            str(tmp_path),
        ]
    )
    summary = _summary(capsys)
    assert code == 0
    assert summary["bot"] == "bot"
    assert summary["status"] in {"no_opponents", "transport_closed", "tick_limit"}
    assert 1 <= int(summary["ticks"]) <= 5  # type: ignore[call-overload]
    rows = read_tick_log(tick_log_path(tmp_path))
    assert len(rows) == summary["ticks"]


def test_no_opponents_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["bot", "--grid-size", "5x5", "--opponents", "0"])
    summary = _summary(capsys)
    assert code == 0
    assert summary["status"] == "no_opponents"
    assert summary["ticks"] == 0


def test_config_file_values_and_cli_override(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"strategy": "zigzag", "grid_size": "8x8", "max_ticks": 2, "opponents": 2})
    )
    code = main(["bot", "--config", str(config_path), "--strategy", "aggressive"])
    summary = _summary(capsys)
    assert code == 0
    assert summary["strategy"] == "aggressive"
    assert int(summary["ticks"]) <= 2  # type: ignore[call-overload]


def test_render_option_writes_png(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "final.png"
    code = main(["bot", "--grid-size", "6x6", "--max-ticks", "3", "--render", str(output)])
    capsys.readouterr()
    assert code == 0
    assert output.exists()


def test_invalid_grid_size_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["bot", "--grid-size", "wide"])
    assert excinfo.value.code == 2


def test_missing_config_file_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["bot", "--config", str(tmp_path / "nope.json")])
    assert excinfo.value.code == 2


def test_connection_failure_returns_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def _refuse(*args: object, **kwargs: object) -> None:
        raise ConnectionFailedError("refused")

    monkeypatch.setattr("cycles_bot.cli.DecisionLoop", _refuse)
    assert main(["bot", "--grid-size", "5x5"]) == 1


def test_unknown_log_level_in_config_is_usage_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    # Without root handlers basicConfig would act on the level.
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"log_level": "verbose", "opponents": 0}))
    with pytest.raises(SystemExit) as excinfo:
        main(["bot", "--config", str(config_path), "--grid-size", "5x5"])
    assert excinfo.value.code == 2


def test_log_level_in_config_is_case_insensitive(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"log_level": "warning", "opponents": 0}))
    assert main(["bot", "--config", str(config_path), "--grid-size", "5x5"]) == 0
    assert _summary(capsys)["status"] == "no_opponents"


@pytest.mark.parametrize(
    "payload",
    [{"seed": 1.5}, {"opponents": True}, {"tolerate_missing_self": "maybe"}, {"theme": "neon"}],
)
def test_bad_config_values_are_usage_errors(tmp_path: Path, payload: dict[str, object]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(payload))
    with pytest.raises(SystemExit) as excinfo:
        main(["bot", "--config", str(config_path), "--grid-size", "5x5"])
    assert excinfo.value.code == 2
