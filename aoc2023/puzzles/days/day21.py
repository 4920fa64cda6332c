"""
Day 21: Step Counter - Garden plots reachable in an exact number of steps.

A plot is reachable in exactly N steps iff its shortest distance d is at
most N and has the same parity as N (the elf can step back and forth).

On the infinitely tiled map the count for N = r + k * size grows
quadratically in k once the frontier has left the first tile on maps
like the real input, so three brute-force samples determine it for any k.
The fit is checked against further samples before it is trusted.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, FrozenSet, Sequence

from ...errors import MalformedInputError
from ...geometry import Coord, grid_lines, iter_cells
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

ROCK = "#"
PLOT = "."
START = "S"

# Extra tile widths sampled to confirm the quadratic fit before extrapolating
FIT_CHECKS = 2


@dataclass(frozen=True)
class Garden:
    """
    Attributes:
        start: Starting plot
        rocks: Rock positions within one tile
        width: Tile width
        height: Tile height
    """
    start: Coord
    rocks: FrozenSet[Coord]
    width: int
    height: int

    def is_plot(self, pos: Coord, infinite: bool = False) -> bool:
        if infinite:
            pos = Coord(pos.x % self.width, pos.y % self.height)
        elif not (0 <= pos.x < self.width and 0 <= pos.y < self.height):
            return False
        return pos not in self.rocks

    def distances(self, limit: int, infinite: bool = False) -> Dict[Coord, int]:
        """Shortest step counts to every plot within limit steps (BFS)."""
        distances = {self.start: 0}
        queue: Deque[Coord] = deque([self.start])
        while queue:
            pos = queue.popleft()
            step = distances[pos] + 1
            if step > limit:
                continue
            for neighbor in pos.neighbors4():
                if neighbor not in distances and self.is_plot(neighbor, infinite):
                    distances[neighbor] = step
                    queue.append(neighbor)
        return distances

    def reachable(self, steps: int, infinite: bool = False) -> int:
        """Plots where a walk of exactly `steps` steps can end."""
        parity = steps % 2
        return sum(1 for d in self.distances(steps, infinite).values() if d % 2 == parity)


def parse_garden(raw_text: str) -> Garden:
    """
    Raises:
        MalformedInputError: On unknown characters or not exactly one start
    """
    lines = grid_lines(raw_text)
    rocks = set()
    starts = []
    for pos, char in iter_cells(lines):
        if char == ROCK:
            rocks.add(pos)
        elif char == START:
            starts.append(pos)
        elif char != PLOT:
            raise MalformedInputError(f"Unknown tile {char!r} at {tuple(pos)}")
    if len(starts) != 1:
        raise MalformedInputError(f"Expected one start tile, found {len(starts)}")
    return Garden(start=starts[0], rocks=frozenset(rocks), width=len(lines[0]), height=len(lines))


def extrapolate_quadratic(samples: Sequence[int], k: int) -> int:
    """
    Value at index k of the quadratic through samples[0..2] at 0, 1, 2.

    Uses Newton's forward differences, exact in integers.
    """
    f0, f1, f2 = samples
    first = f1 - f0
    second = f2 - 2 * f1 + f0
    return f0 + k * first + k * (k - 1) // 2 * second


def reachable_on_tiled_map(garden: Garden, steps: int) -> int:
    """
    Plots reachable in exactly `steps` steps on the infinitely repeated map.

    Counts directly for small targets. Beyond, fits a quadratic through
    the counts at r, r + size and r + 2 * size and checks it against the
    next FIT_CHECKS samples; if the map does not grow quadratically the
    count falls back to the direct walk.

    Raises:
        MalformedInputError: If extrapolation is needed on a non-square tile
    """
    size = garden.width
    remainder, k = steps % size, steps // size
    if k <= FIT_CHECKS + 2:
        return garden.reachable(steps, infinite=True)
    if garden.width != garden.height:
        raise MalformedInputError(
            f"Tiled extrapolation needs a square map, got {garden.width}x{garden.height}"
        )
    samples = [
        garden.reachable(remainder + i * size, infinite=True)
        for i in range(3 + FIT_CHECKS)
    ]
    logger.debug(f"Tiled samples at {remainder} + i*{size}: {samples}")

    for i in range(3, 3 + FIT_CHECKS):
        if extrapolate_quadratic(samples[:3], i) != samples[i]:
            logger.warning(
                f"Plot counts are not quadratic in tile widths (sample {i}: "
                f"{samples[i]}, fit {extrapolate_quadratic(samples[:3], i)}), "
                f"counting {steps} steps directly"
            )
            return garden.reachable(steps, infinite=True)
    return extrapolate_quadratic(samples[:3], k)


@register_puzzle
class StepCounter(Puzzle):
    day = 21
    title = "Step Counter"

    def __init__(self, steps: int = 64, target_steps: int = 26501365):
        """
        Args:
            steps: Step count for part 1 (bounded map)
            target_steps: Step count for part 2 (tiled map)
        """
        self.steps = steps
        self.target_steps = target_steps

    def parse_input(self, raw_text: str) -> Garden:
        return parse_garden(raw_text)

    def part1(self, garden: Garden) -> int:
        return garden.reachable(self.steps)

    def part2(self, garden: Garden) -> int:
        return reachable_on_tiled_map(garden, self.target_steps)
