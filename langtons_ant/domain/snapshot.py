"""Typed snapshot of the ant at one point in a run."""

from __future__ import annotations

from dataclasses import dataclass

from langtons_ant.domain.heading import Heading


@dataclass(frozen=True)
class AntState:
    """Immutable view of the ant after ``step`` completed steps."""

    step: int
    x: int
    y: int
    heading: Heading
    finished: bool = False
