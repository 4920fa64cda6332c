"""
Day 16: The Floor Will Be Lava - Tracing light beams through mirrors.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Set, Tuple

from ...errors import MalformedInputError
from ...geometry import Coord, Direction, grid_lines
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

# Outgoing directions for each tile and incoming direction of travel
DEFLECTIONS: Dict[str, Dict[Direction, Tuple[Direction, ...]]] = {
    ".": {d: (d,) for d in Direction},
    "/": {
        Direction.RIGHT: (Direction.UP,),
        Direction.UP: (Direction.RIGHT,),
        Direction.LEFT: (Direction.DOWN,),
        Direction.DOWN: (Direction.LEFT,),
    },
    "\\": {
        Direction.RIGHT: (Direction.DOWN,),
        Direction.DOWN: (Direction.RIGHT,),
        Direction.LEFT: (Direction.UP,),
        Direction.UP: (Direction.LEFT,),
    },
    "|": {
        Direction.UP: (Direction.UP,),
        Direction.DOWN: (Direction.DOWN,),
        Direction.LEFT: (Direction.UP, Direction.DOWN),
        Direction.RIGHT: (Direction.UP, Direction.DOWN),
    },
    "-": {
        Direction.LEFT: (Direction.LEFT,),
        Direction.RIGHT: (Direction.RIGHT,),
        Direction.UP: (Direction.LEFT, Direction.RIGHT),
        Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    },
}


@dataclass(frozen=True)
class Contraption:
    """
    Tile layout.

    Attributes:
        rows: Grid rows of '.', '/', '\\', '|' and '-'
    """
    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def contains(self, pos: Coord) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile(self, pos: Coord) -> str:
        return self.rows[pos.y][pos.x]

    def energized(self, entry: Coord, heading: Direction) -> int:
        """
        Count tiles crossed by a beam entering entry while moving heading.

        Each (tile, direction) pair is followed once, so loops terminate.
        """
        seen: Set[Tuple[Coord, Direction]] = set()
        pending = [(entry, heading)]
        while pending:
            pos, direction = pending.pop()
            if not self.contains(pos) or (pos, direction) in seen:
                continue
            seen.add((pos, direction))
            for out in DEFLECTIONS[self.tile(pos)][direction]:
                pending.append((pos + out.delta, out))
        return len({pos for pos, _ in seen})

    def edge_entries(self) -> Iterator[Tuple[Coord, Direction]]:
        """Every edge tile with the inward heading(s)."""
        for x in range(self.width):
            yield Coord(x, 0), Direction.DOWN
            yield Coord(x, self.height - 1), Direction.UP
        for y in range(self.height):
            yield Coord(0, y), Direction.RIGHT
            yield Coord(self.width - 1, y), Direction.LEFT


def parse_contraption(raw_text: str) -> Contraption:
    """
    Raises:
        MalformedInputError: On unknown tiles
    """
    lines = grid_lines(raw_text)
    for y, line in enumerate(lines):
        unknown = set(line) - set(DEFLECTIONS)
        if unknown:
            raise MalformedInputError(f"Unknown tiles {sorted(unknown)} in row {y}")
    return Contraption(rows=tuple(lines))


@register_puzzle
class FloorWillBeLava(Puzzle):
    day = 16
    title = "The Floor Will Be Lava"

    def parse_input(self, raw_text: str) -> Contraption:
        return parse_contraption(raw_text)

    def part1(self, contraption: Contraption) -> int:
        return contraption.energized(Coord(0, 0), Direction.RIGHT)

    def part2(self, contraption: Contraption) -> int:
        counts: List[int] = [
            contraption.energized(pos, heading)
            for pos, heading in contraption.edge_entries()
        ]
        logger.debug(f"Tried {len(counts)} edge entries")
        return max(counts)
