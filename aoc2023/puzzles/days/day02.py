"""
Day 2: Cube Conundrum - Which games fit in a bag of coloured cubes.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

COLORS = ("red", "green", "blue")

_GAME_RE = re.compile(r"^Game (\d+): (.+)$")
_CUBES_RE = re.compile(r"^(\d+) (red|green|blue)$")


@dataclass(frozen=True)
class Game:
    """
    One game record.

    Attributes:
        id: Game number
        draws: Each handful as a mapping colour -> count
    """
    id: int
    draws: Tuple[Dict[str, int], ...]

    def fits(self, bag: Dict[str, int]) -> bool:
        """True if no handful shows more cubes of a colour than bag holds."""
        return all(
            count <= bag.get(color, 0)
            for draw in self.draws
            for color, count in draw.items()
        )

    def minimal_bag(self) -> Dict[str, int]:
        """Fewest cubes of each colour that make the game possible."""
        return {
            color: max((draw.get(color, 0) for draw in self.draws), default=0)
            for color in COLORS
        }


def parse_game(line: str) -> Game:
    """
    Parse "Game 1: 3 blue, 4 red; 1 red, 2 green".

    Raises:
        MalformedInputError: On any deviation from that format
    """
    match = _GAME_RE.match(line)
    if match is None:
        raise MalformedInputError(f"Invalid game line: {line!r}")
    draws = []
    for handful in match.group(2).split("; "):
        draw: Dict[str, int] = {}
        for cubes in handful.split(", "):
            cube_match = _CUBES_RE.match(cubes)
            if cube_match is None:
                raise MalformedInputError(f"Invalid cube count: {cubes!r}")
            draw[cube_match.group(2)] = int(cube_match.group(1))
        draws.append(draw)
    return Game(id=int(match.group(1)), draws=tuple(draws))


@register_puzzle
class CubeConundrum(Puzzle):
    day = 2
    title = "Cube Conundrum"

    def __init__(self, bag: Optional[Dict[str, int]] = None):
        """
        Args:
            bag: Cube counts for part 1 (default 12 red, 13 green, 14 blue)
        """
        self.bag = bag or {"red": 12, "green": 13, "blue": 14}

    def parse_input(self, raw_text: str) -> List[Game]:
        return [parse_game(line.strip()) for line in raw_text.splitlines() if line.strip()]

    def part1(self, games: List[Game]) -> int:
        return sum(game.id for game in games if game.fits(self.bag))

    def part2(self, games: List[Game]) -> int:
        return sum(math.prod(game.minimal_bag().values()) for game in games)
