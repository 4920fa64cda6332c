"""
Day 6: Wait For It - Counting winning button-hold times.
"""

import math
from typing import List, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

Race = Tuple[int, int]


def winning_holds(time: int, record: int) -> int:
    """
    Number of integer hold times h with h * (time - h) > record.

    Solves h^2 - time*h + record < 0 with exact integer square roots.
    """
    delta = time * time - 4 * record
    if delta <= 0:
        return 0
    root = math.isqrt(delta)
    # Smallest h strictly above the lower root (time - sqrt(delta)) / 2
    low = (time - root) // 2
    while low * (time - low) <= record:
        low += 1
        # Past the midpoint every hold time loses, the record is the best possible
        if 2 * low > time:
            return 0
    high = time - low
    return max(0, high - low + 1)


def _read_line(line: str, label: str) -> List[str]:
    head, _, rest = line.partition(":")
    if head.strip() != label or not rest.split():
        raise MalformedInputError(f"Expected {label} line, got: {line!r}")
    return rest.split()


def _lines(raw_text: str) -> Tuple[List[str], List[str]]:
    lines = [line for line in raw_text.strip().splitlines() if line.strip()]
    if len(lines) != 2:
        raise MalformedInputError(f"Expected 2 lines, got {len(lines)}")
    return _read_line(lines[0], "Time"), _read_line(lines[1], "Distance")


def parse_races(raw_text: str) -> List[Race]:
    """Columns of (time, record distance)."""
    times, distances = _lines(raw_text)
    if len(times) != len(distances):
        raise MalformedInputError("Time and Distance columns differ in length")
    try:
        return [(int(t), int(d)) for t, d in zip(times, distances)]
    except ValueError:
        raise MalformedInputError("Non-numeric race value") from None


def parse_single_race(raw_text: str) -> List[Race]:
    """One race, with the spaces between digits ignored."""
    times, distances = _lines(raw_text)
    try:
        return [(int("".join(times)), int("".join(distances)))]
    except ValueError:
        raise MalformedInputError("Non-numeric race value") from None


@register_puzzle
class WaitForIt(Puzzle):
    day = 6
    title = "Wait For It"

    def parse_input(self, raw_text: str) -> List[Race]:
        return parse_races(raw_text)

    def parse_input_part2(self, raw_text: str) -> List[Race]:
        return parse_single_race(raw_text)

    def part1(self, races: List[Race]) -> int:
        return math.prod(winning_holds(t, d) for t, d in races)

    def part2(self, races: List[Race]) -> int:
        return self.part1(races)
