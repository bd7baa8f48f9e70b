"""Matplotlib-based rendering of board snapshots and tick-log traces."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from cycles_bot.domain.state import GameState
from cycles_bot.io.tick_log import read_tick_log
from cycles_bot.viz.theme import DEFAULT_THEME, Theme

EMPTY_CELL = 0
TRAIL_CELL = 1
OPPONENT_HEAD = 2
OWN_HEAD = 3

_CELL_LABELS = ("Empty", "Trail", "Opponent", "Self")


def build_grid_array(state: GameState, me_name: str | None = None) -> np.ndarray:
    """Return (H, W) int array: 0 empty, 1 trail, 2 opponent head, 3 own head."""
    grid = np.where(state.occupancy, TRAIL_CELL, EMPTY_CELL).astype(int)
    for player in state.players:
        value = OWN_HEAD if player.name == me_name else OPPONENT_HEAD
        grid[player.position.y, player.position.x] = value
    return grid


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 4-color colormap matching the ``build_grid_array`` codes."""
    cmap = ListedColormap(list(theme.cell_colors))
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5, 3.5], cmap.N)
    return cmap, norm


def _draw_cell_grid(ax: plt.Axes, grid: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    cmap, norm = _cell_cmap(theme)
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    # Skip per-cell lines on large boards; they would cover the cells.
    if max(h, w) <= 40:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_snapshot(
    state: GameState,
    output_path: Path,
    me_name: str | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Render one snapshot to an image file and return its path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 6 * state.grid_height / max(state.grid_width, 1)))
    try:
        _draw_cell_grid(ax, build_grid_array(state, me_name), theme)
        ax.set_title(title or f"Frame {state.frame}")
        handles = [
            Patch(facecolor=color, edgecolor="gray", label=label)
            for color, label in zip(theme.cell_colors, _CELL_LABELS, strict=True)
        ]
        ax.legend(handles=handles, loc="upper right", fontsize="small")
        fig.savefig(output_path, dpi=100, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path


def render_tick_trace(
    tick_log_path: Path,
    output_path: Path,
    grid_width: int,
    grid_height: int,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot the bot's path from a tick log, one marker per tick coloured by mode."""
    rows = read_tick_log(Path(tick_log_path))
    if not rows:
        raise ValueError(f"tick log is empty: {tick_log_path}")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    xs = [int(row["x"]) for row in rows]  # type: ignore[call-overload]
    ys = [int(row["y"]) for row in rows]  # type: ignore[call-overload]
    fig, ax = plt.subplots(figsize=(6, 6 * grid_height / max(grid_width, 1)))
    try:
        ax.plot(xs, ys, color=theme.path_color, linewidth=1.0, alpha=0.6)
        modes = sorted({str(row["mode"]) for row in rows})
        for mode in modes:
            points = [(x, y) for x, y, row in zip(xs, ys, rows, strict=True) if row["mode"] == mode]
            ax.scatter(
                [p[0] for p in points],
                [p[1] for p in points],
                s=12,
                color=theme.mode_colors.get(mode, "black"),
                label=mode,
            )
        ax.set_xlim(-0.5, grid_width - 0.5)
        ax.set_ylim(grid_height - 0.5, -0.5)
        ax.set_aspect("equal")
        ax.set_title(f"{rows[0]['bot_name']}: {len(rows)} ticks")
        ax.legend(loc="upper right", fontsize="small")
        fig.savefig(output_path, dpi=100, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
