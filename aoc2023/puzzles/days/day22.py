"""
Day 22: Sand Slabs - Settling falling bricks and chain reactions.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Set, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

BRICK_PATTERN = re.compile(r"^(\d+),(\d+),(\d+)~(\d+),(\d+),(\d+)$")


@dataclass(frozen=True)
class Brick:
    """
    Axis-aligned brick given by two corner cubes (inclusive).

    Attributes:
        low: (x, y, z) corner with the smallest coordinates
        high: (x, y, z) corner with the largest coordinates
    """
    low: Tuple[int, int, int]
    high: Tuple[int, int, int]

    @property
    def bottom(self) -> int:
        return self.low[2]

    @property
    def height(self) -> int:
        return self.high[2] - self.low[2] + 1

    def footprint(self) -> Iterator[Tuple[int, int]]:
        for x in range(self.low[0], self.high[0] + 1):
            for y in range(self.low[1], self.high[1] + 1):
                yield x, y


@dataclass
class SettledStack:
    """
    Support relations after every brick has fallen.

    Bricks are indexed in settling order, so a brick's supporters always
    have smaller indices.

    Attributes:
        supports: Bricks resting directly on each brick
        supported_by: Bricks each brick rests directly on
    """
    supports: List[Set[int]]
    supported_by: List[Set[int]]

    def is_removable(self, index: int) -> bool:
        """True if every brick resting on this one has another support."""
        return all(len(self.supported_by[above]) > 1 for above in self.supports[index])

    def chain_reaction(self, index: int) -> int:
        """Number of other bricks that fall when this one is removed."""
        fallen = {index}
        for other in range(index + 1, len(self.supported_by)):
            below = self.supported_by[other]
            if below and below <= fallen:
                fallen.add(other)
        return len(fallen) - 1


def parse_bricks(raw_text: str) -> List[Brick]:
    """
    Parse lines like "1,0,1~1,2,1".

    Raises:
        MalformedInputError: If a line is invalid or a brick is below ground
    """
    bricks = []
    for line in raw_text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = BRICK_PATTERN.match(line)
        if not match:
            raise MalformedInputError(f"Invalid brick: {line!r}")
        values = [int(v) for v in match.groups()]
        first, second = tuple(values[:3]), tuple(values[3:])
        low = tuple(min(a, b) for a, b in zip(first, second))
        high = tuple(max(a, b) for a, b in zip(first, second))
        if low[2] < 1:
            raise MalformedInputError(f"Brick below the ground: {line!r}")
        bricks.append(Brick(low=low, high=high))
    return bricks


def settle(bricks: List[Brick]) -> SettledStack:
    """Drop bricks lowest first onto a height map of (x, y) -> (top z, brick)."""
    ordered = sorted(bricks, key=lambda b: b.bottom)
    tops: Dict[Tuple[int, int], Tuple[int, int]] = {}
    supports: List[Set[int]] = [set() for _ in ordered]
    supported_by: List[Set[int]] = [set() for _ in ordered]

    for index, brick in enumerate(ordered):
        footprint = list(brick.footprint())
        rest = max((tops[cell][0] for cell in footprint if cell in tops), default=0)
        for cell in footprint:
            if cell in tops and tops[cell][0] == rest:
                below = tops[cell][1]
                supported_by[index].add(below)
                supports[below].add(index)
        top = rest + brick.height
        for cell in footprint:
            tops[cell] = (top, index)

    logger.debug(f"Settled {len(ordered)} bricks")
    return SettledStack(supports=supports, supported_by=supported_by)


@register_puzzle
class SandSlabs(Puzzle):
    day = 22
    title = "Sand Slabs"

    def parse_input(self, raw_text: str) -> SettledStack:
        return settle(parse_bricks(raw_text))

    def part1(self, stack: SettledStack) -> int:
        return sum(1 for i in range(len(stack.supports)) if stack.is_removable(i))

    def part2(self, stack: SettledStack) -> int:
        return sum(stack.chain_reaction(i) for i in range(len(stack.supports)))
