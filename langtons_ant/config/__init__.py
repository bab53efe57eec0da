"""Configuration layer: constants and typed config dataclasses."""

from langtons_ant.config.constants import (
    BLANK_MARKER,
    DEFAULT_DELAY_MS,
    FILLED_MARKER,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_STEPS,
    PATH_MARKER,
    QUIT_KEY,
)
from langtons_ant.config.types import HeadlessConfig, RunResult, TerminalConfig

__all__ = [
    "BLANK_MARKER",
    "DEFAULT_DELAY_MS",
    "FILLED_MARKER",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "HeadlessConfig",
    "MAX_STEPS",
    "PATH_MARKER",
    "QUIT_KEY",
    "RunResult",
    "TerminalConfig",
]
