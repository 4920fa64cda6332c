"""
Day 14: Parabolic Reflector Dish - Tilting round rocks and spin cycles.

The platform is a numpy character array. Every tilt is a tilt towards
north on a rotated view, so only one rolling routine is needed.
"""

import logging
from typing import Dict, List

import numpy as np

from ...errors import MalformedInputError
from ...geometry import grid_lines
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

ROUND = "O"
CUBE = "#"
EMPTY = "."


def parse_platform(raw_text: str) -> np.ndarray:
    """
    Raises:
        MalformedInputError: On characters other than O, # and .
    """
    chars = np.array([list(line) for line in grid_lines(raw_text)])
    if not np.isin(chars, [ROUND, CUBE, EMPTY]).all():
        raise MalformedInputError("Platform may only contain 'O', '#' and '.'")
    return chars


def tilt_north(platform: np.ndarray) -> np.ndarray:
    """Return a copy with every round rock rolled as far north as it goes."""
    tilted = platform.copy()
    height, width = tilted.shape
    for x in range(width):
        free = 0
        for y in range(height):
            cell = tilted[y, x]
            if cell == CUBE:
                free = y + 1
            elif cell == ROUND:
                tilted[y, x] = EMPTY
                tilted[free, x] = ROUND
                free += 1
    return tilted


def spin_cycle(platform: np.ndarray) -> np.ndarray:
    """Tilt north, west, south, then east."""
    for _ in range(4):
        # Clockwise rotation brings the next direction to the top
        platform = np.rot90(tilt_north(platform), -1)
    return np.ascontiguousarray(platform)


def north_load(platform: np.ndarray) -> int:
    """Each round rock weighs its distance from the south edge (1-based)."""
    height = platform.shape[0]
    per_row = (platform == ROUND).sum(axis=1)
    return int((per_row * np.arange(height, 0, -1)).sum())


def load_after_cycles(platform: np.ndarray, cycles: int) -> int:
    """
    North load after a number of spin cycles.

    States are remembered by content; once one repeats, the answer is read
    from the recorded loads of the cycle.
    """
    seen: Dict[bytes, int] = {}
    loads: List[int] = []
    for done in range(cycles):
        key = platform.tobytes()
        if key in seen:
            start = seen[key]
            period = done - start
            logger.debug(f"Spin cycle repeats after {start} cycles with period {period}")
            return loads[start + (cycles - start) % period]
        seen[key] = done
        loads.append(north_load(platform))
        platform = spin_cycle(platform)
    return north_load(platform)


@register_puzzle
class ParabolicReflectorDish(Puzzle):
    day = 14
    title = "Parabolic Reflector Dish"

    def __init__(self, spin_cycles: int = 1_000_000_000):
        """
        Args:
            spin_cycles: Number of spin cycles in part 2
        """
        self.spin_cycles = spin_cycles

    def parse_input(self, raw_text: str) -> np.ndarray:
        return parse_platform(raw_text)

    def part1(self, platform: np.ndarray) -> int:
        return north_load(tilt_north(platform))

    def part2(self, platform: np.ndarray) -> int:
        return load_after_cycles(platform, self.spin_cycles)
