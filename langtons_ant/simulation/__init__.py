"""Headless simulation: run an ant to completion and persist its step log."""

from langtons_ant.simulation.engine import build_automaton, deterministic_run_id, run_headless
from langtons_ant.simulation.persistence import empty_step_columns, flush_step_columns

__all__ = [
    "build_automaton",
    "deterministic_run_id",
    "empty_step_columns",
    "flush_step_columns",
    "run_headless",
]
