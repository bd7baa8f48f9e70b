"""Visualization theme presets for board renderers.

Themes are frozen dataclasses that group all styling constants together so
renderers accept a ``Theme`` instance instead of module-level constants.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Board cells: empty, trail, opponent head, own head
    cell_colors: tuple[str, str, str, str] = ("#F0F0F0", "#607D8B", "#FF5722", "#2196F3")
    grid_line_color: str = "#CCCCCC"

    # Per-mode display in tick traces
    mode_colors: dict[str, str] = field(default_factory=dict)
    path_color: str = "#2196F3"


_DEFAULT_MODE_COLORS: dict[str, str] = {
    "aggressive": "tab:red",
    "escape": "tab:orange",
    "fallback": "tab:gray",
    "zigzag": "tab:blue",
}

DEFAULT_THEME = Theme(mode_colors=_DEFAULT_MODE_COLORS)

DARK_THEME = Theme(
    cell_colors=("#1A1A1A", "#455A64", "#FF7043", "#42A5F5"),
    grid_line_color="#333333",
    mode_colors=_DEFAULT_MODE_COLORS,
    path_color="#42A5F5",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
