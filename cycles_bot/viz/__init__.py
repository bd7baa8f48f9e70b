"""Visualization layer: themes and matplotlib renderers."""

from cycles_bot.viz.render import build_grid_array, render_snapshot, render_tick_trace
from cycles_bot.viz.theme import DARK_THEME, DEFAULT_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_grid_array",
    "get_theme",
    "render_snapshot",
    "render_tick_trace",
]
