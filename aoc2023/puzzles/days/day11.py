"""
Day 11: Cosmic Expansion - Galaxy distances after empty rows and columns grow.
"""

import numpy as np

from ...errors import MalformedInputError
from ...geometry import grid_lines
from ..base import Puzzle
from ..factory import register_puzzle


def parse_image(raw_text: str) -> np.ndarray:
    """
    Boolean image, True where a galaxy (#) is.

    Raises:
        MalformedInputError: On characters other than . and #
    """
    lines = grid_lines(raw_text)
    chars = np.array([list(line) for line in lines])
    if not np.isin(chars, [".", "#"]).all():
        raise MalformedInputError("Image may only contain '.' and '#'")
    return chars == "#"


def expanded_positions(image: np.ndarray, expansion: int) -> np.ndarray:
    """
    Galaxy (x, y) positions after every empty row and column is replaced
    by `expansion` copies of itself.

    Returns:
        int64 array of shape (n, 2), galaxies in reading order
    """
    row_shift = np.cumsum(~image.any(axis=1), dtype=np.int64) * (expansion - 1)
    col_shift = np.cumsum(~image.any(axis=0), dtype=np.int64) * (expansion - 1)
    ys, xs = np.nonzero(image)
    return np.column_stack((xs + col_shift[xs], ys + row_shift[ys])).astype(np.int64)


def sum_pairwise_distances(positions: np.ndarray) -> int:
    """
    Sum of Manhattan distances over all unordered pairs.

    Per axis, the i-th smallest of n coordinates appears with a plus sign
    in i pairs and a minus sign in n - 1 - i pairs.
    """
    total = 0
    n = len(positions)
    weights = 2 * np.arange(n, dtype=np.int64) - n + 1
    for axis in range(positions.shape[1] if n else 0):
        total += int((np.sort(positions[:, axis]) * weights).sum())
    return total


@register_puzzle
class CosmicExpansion(Puzzle):
    day = 11
    title = "Cosmic Expansion"

    def __init__(self, expansion: int = 1_000_000):
        """
        Args:
            expansion: Growth factor of empty rows/columns in part 2
        """
        self.expansion = expansion

    def parse_input(self, raw_text: str) -> np.ndarray:
        return parse_image(raw_text)

    def part1(self, image: np.ndarray) -> int:
        return sum_pairwise_distances(expanded_positions(image, 2))

    def part2(self, image: np.ndarray) -> int:
        return sum_pairwise_distances(expanded_positions(image, self.expansion))
