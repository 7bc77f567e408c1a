"""Visualization theme presets for mission renderers.

Themes are frozen dataclasses that group all styling constants together so
renderers take a ``Theme`` instead of hard-coded colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    empty_cell_color: str = "#F0F0F0"
    scent_cell_color: str = "#FFCC80"
    grid_line_color: str = "#CCCCCC"
    start_color: str = "#9E9E9E"
    active_color: str = "#2196F3"
    lost_color: str = "#E53935"
    path_line_style: str = ":"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    empty_cell_color="#FFFFFF",
    scent_cell_color="#D9D9D9",
    grid_line_color="#E0E0E0",
    start_color="#7F7F7F",
    active_color="#1F77B4",
    lost_color="#D62728",
    path_line_style="--",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
