"""Langton's Ant on a bounded grid.

One step moves the ant first and then applies the rule to the cell it lands
on: a LIGHT cell turns DARK and the ant turns left, a DARK cell turns LIGHT
and the ant turns right. Moving off the grid ends the run; the grid never
wraps and the position is never clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from langtons_ant.domain.grid import Grid
from langtons_ant.domain.heading import Color, Heading
from langtons_ant.domain.snapshot import AntState


class AutomatonFinishedError(RuntimeError):
    """Raised when ``step`` is called after the ant has left the grid."""


class CellMark(Enum):
    """Rendering hint for the cell painted by a step."""

    BLANK = "blank"
    PATH = "path"
    FILLED = "filled"


@dataclass
class Agent:
    """The ant: a grid position and a heading."""

    x: int
    y: int
    heading: Heading


@dataclass(frozen=True)
class Continued:
    """The ant moved to ``(x, y)`` and left ``color`` behind in that cell."""

    x: int
    y: int
    color: Color
    mark: CellMark

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LeftGrid:
    """The next move would leave the grid; nothing was mutated."""

    x: int
    y: int
    heading: Heading


StepOutcome = Continued | LeftGrid


class Automaton:
    """Owns the grid and the ant, and advances them one tick at a time."""

    def __init__(
        self,
        width: int,
        height: int,
        start_position: tuple[int, int] | None = None,
        start_heading: Heading = Heading.RIGHT,
        show_path: bool = False,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1x1")
        if start_position is None:
            start_position = (width // 2, height // 2)
        x, y = start_position
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"start position ({x}, {y}) is outside the {width}x{height} grid")
        self._grid = Grid(width, height)
        self._agent = Agent(x=x, y=y, heading=start_heading)
        self._show_path = show_path
        self._steps_taken = 0
        self._finished = False

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def show_path(self) -> bool:
        return self._show_path

    @property
    def steps_taken(self) -> int:
        """Number of steps that returned ``Continued``."""
        return self._steps_taken

    @property
    def finished(self) -> bool:
        """True once ``step`` has returned ``LeftGrid``."""
        return self._finished

    def agent_position(self) -> tuple[int, int]:
        return (self._agent.x, self._agent.y)

    def agent_heading(self) -> Heading:
        return self._agent.heading

    def cell_at(self, x: int, y: int) -> Color:
        return self._grid.get(x, y)

    def count(self, color: Color) -> int:
        return self._grid.count(color)

    def snapshot(self) -> AntState:
        return AntState(
            step=self._steps_taken,
            x=self._agent.x,
            y=self._agent.y,
            heading=self._agent.heading,
            finished=self._finished,
        )

    def step(self) -> StepOutcome:
        """Advance one tick.

        Raises :exc:`AutomatonFinishedError` if a previous step already
        returned ``LeftGrid``.
        """
        if self._finished:
            raise AutomatonFinishedError(
                f"ant left the grid after {self._steps_taken} steps; stop stepping"
            )
        agent = self._agent
        dx, dy = agent.heading.offset()
        nx, ny = agent.x + dx, agent.y + dy
        if not self._grid.contains(nx, ny):
            self._finished = True
            return LeftGrid(x=agent.x, y=agent.y, heading=agent.heading)

        agent.x, agent.y = nx, ny
        current = self._grid.get(nx, ny)
        if current is Color.LIGHT:
            mark = CellMark.PATH if self._show_path else CellMark.BLANK
            agent.heading = agent.heading.rotate_left()
        else:
            mark = CellMark.FILLED
            agent.heading = agent.heading.rotate_right()
        painted = current.toggle()
        self._grid.set(nx, ny, painted)
        self._steps_taken += 1
        return Continued(x=nx, y=ny, color=painted, mark=mark)

    def __repr__(self) -> str:
        return (
            f"Automaton(width={self.width}, height={self.height}, "
            f"position={self.agent_position()}, heading={self._agent.heading.name}, "
            f"steps_taken={self._steps_taken})"
        )
