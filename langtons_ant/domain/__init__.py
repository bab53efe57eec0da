"""Domain layer: colors, headings, grid, and the automaton."""

from langtons_ant.domain.automaton import (
    Agent,
    Automaton,
    AutomatonFinishedError,
    CellMark,
    Continued,
    LeftGrid,
    StepOutcome,
)
from langtons_ant.domain.grid import Grid, OutOfBoundsError
from langtons_ant.domain.heading import Color, Heading, parse_heading
from langtons_ant.domain.snapshot import AntState

__all__ = [
    "Agent",
    "AntState",
    "Automaton",
    "AutomatonFinishedError",
    "CellMark",
    "Color",
    "Continued",
    "Grid",
    "Heading",
    "LeftGrid",
    "OutOfBoundsError",
    "StepOutcome",
    "parse_heading",
]
