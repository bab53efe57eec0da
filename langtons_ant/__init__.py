"""Langton's Ant on a bounded grid, with terminal and headless drivers."""

from langtons_ant.domain import Automaton, Color, Continued, Heading, LeftGrid

__all__ = [
    "Automaton",
    "Color",
    "Continued",
    "Heading",
    "LeftGrid",
]

__version__ = "0.1.0"
