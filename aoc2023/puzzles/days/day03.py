"""
Day 3: Gear Ratios - Numbers adjacent to symbols in an engine schematic.
"""

import math
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ...geometry import Coord
from ..base import Puzzle
from ..factory import register_puzzle

Symbols = Dict[Coord, str]

_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class PartNumber:
    """
    A number printed on the schematic.

    Attributes:
        left: Position of the first digit
        text: The digits as printed
    """
    left: Coord
    text: str

    @property
    def value(self) -> int:
        return int(self.text)

    def surroundings(self) -> Set[Coord]:
        """Cells touching the number, diagonals included."""
        x0, y = self.left
        x1 = x0 + len(self.text) - 1
        cells = set()
        for x in range(x0 - 1, x1 + 2):
            cells.add(Coord(x, y - 1))
            cells.add(Coord(x, y + 1))
        cells.add(Coord(x0 - 1, y))
        cells.add(Coord(x1 + 1, y))
        return cells

    def is_part_number(self, symbols: Symbols) -> bool:
        return any(c in symbols for c in self.surroundings())


def parse_schematic(raw_text: str) -> Tuple[Symbols, List[PartNumber]]:
    """
    Split the schematic into symbols and numbers.

    Returns:
        (symbols, numbers): symbol characters by position, numbers in
        reading order
    """
    symbols: Symbols = {}
    numbers: List[PartNumber] = []
    lines = [line.strip() for line in raw_text.strip().splitlines()]
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if not char.isdigit() and char != ".":
                symbols[Coord(x, y)] = char
        for match in _NUMBER_RE.finditer(line):
            numbers.append(PartNumber(Coord(match.start(), y), match.group()))
    return symbols, numbers


@register_puzzle
class GearRatios(Puzzle):
    day = 3
    title = "Gear Ratios"

    def parse_input(self, raw_text: str) -> Tuple[Symbols, List[PartNumber]]:
        return parse_schematic(raw_text)

    def part1(self, schematic: Tuple[Symbols, List[PartNumber]]) -> int:
        symbols, numbers = schematic
        return sum(n.value for n in numbers if n.is_part_number(symbols))

    def part2(self, schematic: Tuple[Symbols, List[PartNumber]]) -> int:
        symbols, numbers = schematic
        stars = {pos for pos, char in symbols.items() if char == "*"}
        adjacent: Dict[Coord, List[int]] = defaultdict(list)
        for number in numbers:
            for pos in number.surroundings() & stars:
                adjacent[pos].append(number.value)
        return sum(math.prod(values) for values in adjacent.values() if len(values) == 2)
