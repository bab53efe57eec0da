"""Configuration dataclasses for the terminal and headless drivers."""

from __future__ import annotations

from dataclasses import dataclass

from langtons_ant.config.constants import DEFAULT_DELAY_MS, GRID_HEIGHT, GRID_WIDTH, MAX_STEPS
from langtons_ant.domain.heading import Heading

__all__ = [
    "HeadlessConfig",
    "RunResult",
    "TerminalConfig",
]


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one headless run."""

    run_id: str
    left_grid: bool
    steps: int
    light_cells: int


@dataclass(frozen=True)
class TerminalConfig:
    """Knobs of the real-time terminal driver."""

    delay_ms: int = DEFAULT_DELAY_MS
    show_path: bool = False
    show_counter: bool = True
    start_heading: Heading = Heading.RIGHT

    def __post_init__(self) -> None:
        if self.delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")


@dataclass(frozen=True)
class HeadlessConfig:
    """Grid and stopping parameters for a headless run."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    start_x: int | None = None
    start_y: int | None = None
    start_heading: Heading = Heading.RIGHT
    show_path: bool = False
    max_steps: int = MAX_STEPS

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1x1")
        if self.max_steps < 1:
            raise ValueError("max_steps must be >= 1")
        if (self.start_x is None) != (self.start_y is None):
            raise ValueError("start_x and start_y must be given together")
        if self.start_x is not None and not 0 <= self.start_x < self.grid_width:
            raise ValueError("start_x must be within the grid")
        if self.start_y is not None and not 0 <= self.start_y < self.grid_height:
            raise ValueError("start_y must be within the grid")

    @property
    def start_position(self) -> tuple[int, int]:
        """Explicit start, or the grid centre."""
        if self.start_x is None or self.start_y is None:
            return (self.grid_width // 2, self.grid_height // 2)
        return (self.start_x, self.start_y)
