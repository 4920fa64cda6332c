"""
Day 13: Point of Incidence - Finding mirror lines in rock patterns.
"""

import logging
import re
from typing import List, Optional

import numpy as np

from ...errors import MalformedInputError
from ...geometry import grid_lines
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)


def parse_patterns(raw_text: str) -> List[np.ndarray]:
    """
    Parse blank-line separated patterns into 0/1 matrices (1 = rock).

    Raises:
        MalformedInputError: On characters other than . and #
    """
    patterns = []
    for block in re.split(r"\n\s*\n", raw_text.strip()):
        lines = grid_lines(block)
        chars = np.array([list(line) for line in lines])
        if not np.isin(chars, [".", "#"]).all():
            raise MalformedInputError(f"Invalid pattern:\n{block}")
        patterns.append((chars == "#").astype(np.int8))
    return patterns


def reflection_row(pattern: np.ndarray, smudges: int = 0) -> Optional[int]:
    """
    Find a horizontal mirror line.

    The rows above the line, reflected, are compared to the rows below it
    as far as both sides reach.

    Args:
        pattern: 0/1 matrix
        smudges: Exact number of mismatching cells the reflection must have

    Returns:
        Number of rows above the line, or None if there is no such line
    """
    height = pattern.shape[0]
    for row in range(1, height):
        above = pattern[:row][::-1]
        below = pattern[row:]
        span = min(len(above), len(below))
        if int((above[:span] != below[:span]).sum()) == smudges:
            return row
    return None


def summarize(pattern: np.ndarray, smudges: int = 0) -> int:
    """
    Score a pattern: 100 x rows above a horizontal line, otherwise the
    columns left of a vertical line.

    Raises:
        MalformedInputError: If the pattern has no mirror line
    """
    row = reflection_row(pattern, smudges)
    if row is not None:
        return 100 * row
    column = reflection_row(pattern.T, smudges)
    if column is not None:
        return column
    raise MalformedInputError(
        f"No mirror line with {smudges} smudge(s) in {pattern.shape[0]}x{pattern.shape[1]} pattern"
    )


@register_puzzle
class PointOfIncidence(Puzzle):
    day = 13
    title = "Point of Incidence"

    def parse_input(self, raw_text: str) -> List[np.ndarray]:
        patterns = parse_patterns(raw_text)
        logger.debug(f"Parsed {len(patterns)} patterns")
        return patterns

    def part1(self, patterns: List[np.ndarray]) -> int:
        return sum(summarize(p) for p in patterns)

    def part2(self, patterns: List[np.ndarray]) -> int:
        return sum(summarize(p, smudges=1) for p in patterns)
