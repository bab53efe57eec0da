"""Visualization layer: themes, step-log renderers, and CLI."""

from langtons_ant.viz.cli import main
from langtons_ant.viz.render import (
    ant_position_at,
    build_color_grid,
    load_run,
    render_filmstrip,
    render_snapshot,
)
from langtons_ant.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "ant_position_at",
    "build_color_grid",
    "get_theme",
    "load_run",
    "main",
    "render_filmstrip",
    "render_snapshot",
]
