"""Fixed-size two-color cell grid.

Cells are stored in a flat buffer read like a book: left to right along a
row, then the next row. Index of ``(x, y)`` is ``y * width + x``.
"""

from __future__ import annotations

from langtons_ant.domain.heading import Color


class OutOfBoundsError(IndexError):
    """Raised when a coordinate outside the grid is read or written."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Grid:
    """Rectangular grid of cell colors, all DARK at construction."""

    __slots__ = ("_width", "_height", "_cells")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1x1")
        self._width = width
        self._height = height
        self._cells: list[Color] = [Color.DARK] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return y * self._width + x

    def get(self, x: int, y: int) -> Color:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, color: Color) -> None:
        self._cells[self._index(x, y)] = color

    def count(self, color: Color) -> int:
        """Number of cells currently holding *color*."""
        return self._cells.count(color)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
