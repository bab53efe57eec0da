"""Terminal layer: curses driver and its CLI."""

from langtons_ant.terminal.cli import main
from langtons_ant.terminal.driver import (
    MARK_CHARACTERS,
    SessionResult,
    TerminalDriver,
    run_terminal,
)

__all__ = [
    "MARK_CHARACTERS",
    "SessionResult",
    "TerminalDriver",
    "main",
    "run_terminal",
]
