"""
Day 10: Pipe Maze - Walking the loop through S and counting enclosed tiles.

Each pipe shape is a transition table mapping the direction of travel when
entering the tile to the direction when leaving it. Walking from S and
following the tables traces the loop as an ordered polygon; the shoelace
formula gives its area and Pick's theorem the number of enclosed tiles.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from ...errors import MalformedInputError
from ...geometry import (
    Coord, Direction, grid_lines, interior_points, iter_cells, shoelace_double_area,
)
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

Transitions = Dict[Direction, Direction]

L, R, U, D = Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN

PIPES: Dict[str, Transitions] = {
    "-": {R: R, L: L},
    "|": {U: U, D: D},
    "J": {R: U, D: L},
    "7": {R: D, U: L},
    "L": {L: U, D: R},
    "F": {U: R, L: D},
}

_SHAPES: Dict[FrozenSet[Tuple[Direction, Direction]], str] = {
    frozenset(table.items()): char for char, table in PIPES.items()
}

# Order in which the walk tries to leave S
START_DIRECTIONS = (L, R, U, D)


@dataclass(frozen=True)
class PipeMaze:
    """
    Parsed pipe field.

    Attributes:
        start: Position of S
        transitions: Pipe tiles by position (S itself is not included)
        width: Columns in the field
        height: Rows in the field
    """
    start: Coord
    transitions: Dict[Coord, Transitions]
    width: int
    height: int

    def step(self, pos: Coord, direction: Direction) -> Tuple[Coord, Direction]:
        """
        Enter the neighbour of pos in direction.

        Returns:
            (next position, direction when leaving it)

        Raises:
            MalformedInputError: If that tile does not accept the entry
        """
        target = pos + direction.delta
        table = self.transitions.get(target)
        if table is None or direction not in table:
            raise MalformedInputError(
                f"Pipe at {tuple(target)} does not accept entry moving {direction.name}"
            )
        return target, table[direction]

    def accepts(self, pos: Coord, direction: Direction) -> bool:
        table = self.transitions.get(pos + direction.delta)
        return table is not None and direction in table


def parse_maze(raw_text: str) -> PipeMaze:
    """
    Parse the pipe field.

    Raises:
        MalformedInputError: On unknown characters or a missing/duplicate S
    """
    lines = grid_lines(raw_text)
    start = None
    transitions: Dict[Coord, Transitions] = {}
    for pos, char in iter_cells(lines):
        if char == ".":
            continue
        if char == "S":
            if start is not None:
                raise MalformedInputError(f"Second start at {tuple(pos)}")
            start = pos
        elif char in PIPES:
            transitions[pos] = PIPES[char]
        else:
            raise MalformedInputError(f"Invalid character: {char!r}")
    if start is None:
        raise MalformedInputError("No start tile S")
    return PipeMaze(start=start, transitions=transitions,
                    width=len(lines[0]), height=len(lines))


def render_maze(maze: PipeMaze) -> str:
    """Text form of a maze; parse_maze(render_maze(m)) reproduces m."""
    rows = []
    for y in range(maze.height):
        row = []
        for x in range(maze.width):
            pos = Coord(x, y)
            if pos == maze.start:
                row.append("S")
            elif pos in maze.transitions:
                row.append(_SHAPES[frozenset(maze.transitions[pos].items())])
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows) + "\n"


def walk_loop(maze: PipeMaze) -> List[Coord]:
    """
    Ordered cells of the loop through S, starting with S.

    Raises:
        MalformedInputError: If no pipe connects to S or the walk breaks off
    """
    for direction in START_DIRECTIONS:
        if maze.accepts(maze.start, direction):
            break
    else:
        raise MalformedInputError(f"No pipe connects to start {tuple(maze.start)}")

    loop = [maze.start]
    pos = maze.start
    while True:
        pos, direction = maze.step(pos, direction)
        loop.append(pos)
        if pos + direction.delta == maze.start:
            break
    logger.debug(f"Loop of {len(loop)} tiles from {tuple(maze.start)}")
    return loop


def enclosed_tiles(loop: List[Coord]) -> int:
    """Lattice points strictly inside the loop polygon."""
    return interior_points(shoelace_double_area(loop), len(loop))


@register_puzzle
class PipeMazePuzzle(Puzzle):
    day = 10
    title = "Pipe Maze"

    def parse_input(self, raw_text: str) -> PipeMaze:
        return parse_maze(raw_text)

    def part1(self, maze: PipeMaze) -> int:
        return len(walk_loop(maze)) // 2

    def part2(self, maze: PipeMaze) -> int:
        return enclosed_tiles(walk_loop(maze))
