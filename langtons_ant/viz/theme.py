"""Visualization theme presets for step-log renderers.

Themes are frozen dataclasses grouping the styling constants so palettes
can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    light_cell_color: str = "#F5F5F5"
    dark_cell_color: str = "#1A1A1A"
    ant_color: str = "#FF5722"
    grid_line_color: str = "#333333"
    figure_face_color: str = "#1A1A1A"
    title_color: str = "white"
    draw_grid_lines: bool = False


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    light_cell_color="#FFFFFF",
    dark_cell_color="#000000",
    ant_color="#d62728",
    grid_line_color="#E0E0E0",
    figure_face_color="#FFFFFF",
    title_color="black",
    draw_grid_lines=True,
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
