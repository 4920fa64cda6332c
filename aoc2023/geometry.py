"""
Geometry Module - Integer grid coordinates, directions and polygon helpers.

Coordinates are (x, y) pairs with y growing downwards, matching the way
puzzle grids are read line by line.
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Sequence, Tuple

from .errors import MalformedInputError


class Coord(NamedTuple):
    """
    Integer grid position.

    Attributes:
        x: Column index
        y: Row index (grows downwards)
    """
    x: int
    y: int

    def __add__(self, other: "Coord") -> "Coord":  # type: ignore[override]
        return Coord(self.x + other[0], self.y + other[1])

    def scaled(self, factor: int) -> "Coord":
        """Multiply both components by factor."""
        return Coord(self.x * factor, self.y * factor)

    def neighbors4(self) -> Iterator["Coord"]:
        """The four orthogonal neighbours, in Direction order."""
        for direction in Direction:
            yield self + direction.delta


class Direction(Enum):
    """
    One of the four orthogonal unit moves.

    Values are (dx, dy) with y growing downwards, so UP is (0, -1).
    """
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> Coord:
        return Coord(*self.value)

    def turn_left(self) -> "Direction":
        """Rotate 90 degrees counter-clockwise (as seen on screen)."""
        dx, dy = self.value
        return Direction((dy, -dx))

    def turn_right(self) -> "Direction":
        """Rotate 90 degrees clockwise (as seen on screen)."""
        dx, dy = self.value
        return Direction((-dy, dx))

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_letter(cls, letter: str) -> "Direction":
        """
        Parse a one-letter direction (U, D, L, R).

        Raises:
            MalformedInputError: If letter is not a known direction
        """
        try:
            return _LETTERS[letter]
        except KeyError:
            raise MalformedInputError(f"Invalid direction letter: {letter!r}") from None


_LETTERS: Dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


def grid_lines(raw_text: str) -> List[str]:
    """
    Split puzzle text into grid rows.

    Leading and trailing blank lines are dropped; every remaining row must
    have the same width.

    Raises:
        MalformedInputError: If the grid is empty or ragged
    """
    lines = [line.strip() for line in raw_text.strip().splitlines()]
    if not lines or not lines[0]:
        raise MalformedInputError("Empty grid")
    width = len(lines[0])
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInputError(
                f"Row {y} has width {len(line)}, expected {width}"
            )
    return lines


def iter_cells(lines: Sequence[str]) -> Iterator[Tuple[Coord, str]]:
    """Yield (coord, char) for every cell of a text grid."""
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            yield Coord(x, y), char


def shoelace_double_area(vertices: Iterable[Coord]) -> int:
    """
    Twice the absolute area of the closed polygon through vertices.

    The polygon is closed implicitly (last vertex connects to the first).
    Uses sum of (y_i + y_{i+1}) * (x_i - x_{i+1}).
    """
    points = list(vertices)
    if len(points) < 3:
        return 0
    total = 0
    for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
        total += (y1 + y2) * (x1 - x2)
    return abs(total)


def interior_points(double_area: int, boundary: int) -> int:
    """
    Interior lattice points of a lattice polygon (Pick's theorem).

    A = I + B/2 - 1, so I = (2A - B) / 2 + 1. For a lattice polygon 2A - B
    is always even.

    Args:
        double_area: Twice the polygon area
        boundary: Number of lattice points on the boundary
    """
    return (double_area - boundary) // 2 + 1
