"""Cell colors and agent headings.

Both are closed enumerations with pure value-to-value transitions. The
offset convention is ``(dx, dy)`` in grid coordinates; only the pairing
between a heading and its offset matters, not any compass mapping.
"""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Binary cell state."""

    LIGHT = "light"
    DARK = "dark"

    def toggle(self) -> Color:
        return Color.DARK if self is Color.LIGHT else Color.LIGHT


class Heading(Enum):
    """Cardinal direction of travel."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def rotate_left(self) -> Heading:
        """Quarter turn counter-clockwise: UP -> LEFT -> DOWN -> RIGHT -> UP."""
        return _ROTATE_LEFT[self]

    def rotate_right(self) -> Heading:
        """Quarter turn clockwise: UP -> RIGHT -> DOWN -> LEFT -> UP."""
        return _ROTATE_RIGHT[self]

    def offset(self) -> tuple[int, int]:
        """Unit displacement ``(dx, dy)`` for one move in this heading."""
        return _OFFSETS[self]


_ROTATE_LEFT: dict[Heading, Heading] = {
    Heading.UP: Heading.LEFT,
    Heading.LEFT: Heading.DOWN,
    Heading.DOWN: Heading.RIGHT,
    Heading.RIGHT: Heading.UP,
}

_ROTATE_RIGHT: dict[Heading, Heading] = {after: before for before, after in _ROTATE_LEFT.items()}

_OFFSETS: dict[Heading, tuple[int, int]] = {
    Heading.UP: (0, 1),
    Heading.DOWN: (0, -1),
    Heading.LEFT: (1, 0),
    Heading.RIGHT: (-1, 0),
}


def parse_heading(raw: str) -> Heading:
    """Parse a heading name (case-insensitive) into a Heading."""
    try:
        return Heading(raw.strip().lower())
    except ValueError as exc:
        valid = ", ".join(h.value for h in Heading)
        raise ValueError(f"heading must be one of {valid}") from exc
