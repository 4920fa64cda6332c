"""
Day 9: Mirage Maintenance - Extrapolating sequences by repeated differences.
"""

from typing import List

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle


def differences(values: List[int]) -> List[int]:
    return [b - a for a, b in zip(values, values[1:])]


def extrapolate(values: List[int]) -> int:
    """Next value: sum of the last element of every difference row."""
    total = 0
    row = values
    while any(row):
        total += row[-1]
        row = differences(row)
    return total


def extrapolate_backwards(values: List[int]) -> int:
    """Previous value, found by extrapolating the reversed sequence."""
    return extrapolate(values[::-1])


def parse_histories(raw_text: str) -> List[List[int]]:
    histories = []
    for line in raw_text.splitlines():
        if not line.strip():
            continue
        try:
            histories.append([int(n) for n in line.split()])
        except ValueError:
            raise MalformedInputError(f"Invalid history line: {line!r}") from None
    return histories


@register_puzzle
class MirageMaintenance(Puzzle):
    day = 9
    title = "Mirage Maintenance"

    def parse_input(self, raw_text: str) -> List[List[int]]:
        return parse_histories(raw_text)

    def part1(self, histories: List[List[int]]) -> int:
        return sum(extrapolate(h) for h in histories)

    def part2(self, histories: List[List[int]]) -> int:
        return sum(extrapolate_backwards(h) for h in histories)
