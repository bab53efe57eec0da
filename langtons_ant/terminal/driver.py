"""Real-time curses driver.

The loop is a cooperative poll: draw the counter, check for the quit key
without blocking, step the automaton, draw the painted cell, sleep. The
grid is sized to the terminal with the ant starting in its centre; cell
``(x, y)`` is drawn at row ``y``, column ``x``.
"""

from __future__ import annotations

import curses
import locale
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from langtons_ant.config.constants import BLANK_MARKER, FILLED_MARKER, PATH_MARKER, QUIT_KEY
from langtons_ant.config.types import TerminalConfig
from langtons_ant.domain.automaton import Automaton, CellMark, LeftGrid

logger = logging.getLogger(__name__)

MARK_CHARACTERS: dict[CellMark, str] = {
    CellMark.BLANK: BLANK_MARKER,
    CellMark.PATH: PATH_MARKER,
    CellMark.FILLED: FILLED_MARKER,
}

BACKGROUND_PAIR = 1


@dataclass(frozen=True)
class SessionResult:
    """How a terminal session ended."""

    steps: int
    left_grid: bool
    quit_requested: bool


class TerminalDriver:
    """Steps an automaton sized to *window* and paints each transition."""

    def __init__(
        self,
        window: Any,
        config: TerminalConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        rows, columns = window.getmaxyx()
        self._window = window
        self._config = config
        self._sleep = sleep
        self._rows = rows
        self._columns = columns
        self.automaton = Automaton(
            width=columns,
            height=rows,
            start_heading=config.start_heading,
            show_path=config.show_path,
        )

    def _put(self, row: int, col: int, text: str) -> None:
        try:
            self._window.addstr(row, col, text)
        except curses.error:
            # curses fails after writing the last cell because the cursor
            # cannot advance; the character is still drawn.
            if (row, col + len(text) - 1) != (self._rows - 1, self._columns - 1):
                raise

    def _quit_requested(self) -> bool:
        return self._window.getch() == ord(QUIT_KEY)

    def run(self) -> SessionResult:
        delay_s = self._config.delay_ms / 1000
        while True:
            if self._config.show_counter:
                self._put(0, 0, str(self.automaton.steps_taken + 1))
            if self._quit_requested():
                logger.debug("Quit after %d steps", self.automaton.steps_taken)
                return SessionResult(self.automaton.steps_taken, False, True)

            outcome = self.automaton.step()
            if isinstance(outcome, LeftGrid):
                return SessionResult(self.automaton.steps_taken, True, False)

            self._put(outcome.y, outcome.x, MARK_CHARACTERS[outcome.mark])
            self._window.refresh()
            if delay_s > 0:
                self._sleep(delay_s)


def _prepare_screen(stdscr: Any) -> None:
    """Hide the cursor, make input non-blocking, paint the background."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    stdscr.nodelay(True)
    if curses.has_colors():
        curses.init_pair(BACKGROUND_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
        stdscr.bkgd(" ", curses.color_pair(BACKGROUND_PAIR))
    stdscr.clear()


def _session(stdscr: Any, config: TerminalConfig) -> SessionResult:
    _prepare_screen(stdscr)
    return TerminalDriver(stdscr, config).run()


def run_terminal(config: TerminalConfig) -> SessionResult:
    """Acquire the terminal, run until quit or the ant leaves, restore it."""
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(_session, config)
