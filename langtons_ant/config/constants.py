"""Centralized constants for the terminal and headless drivers.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_DELAY_MS = 20
"""Default delay between terminal steps in milliseconds."""

GRID_WIDTH = 80
"""Default headless grid width in cells."""

GRID_HEIGHT = 24
"""Default headless grid height in cells."""

MAX_STEPS = 20_000
"""Default step cap for headless runs."""

BLANK_MARKER = " "
"""Character drawn for a LIGHT->DARK transition when the path is hidden."""

PATH_MARKER = "░"
"""Light shade drawn for a LIGHT->DARK transition when the path is shown."""

FILLED_MARKER = "█"
"""Full block drawn for every DARK->LIGHT transition."""

QUIT_KEY = "q"
"""Key that stops the terminal driver."""

FLUSH_THRESHOLD = 8_192
"""Flush step log rows to Parquet once this in-memory row count is reached."""
