"""
Day 18: Lavaduct Lagoon - Lagoon volume from dig instructions.

The trench is a rectilinear lattice polygon. Its area comes from the
shoelace formula; Pick's theorem turns that into interior cells, and the
trench cells themselves are the boundary points.
"""

import re
from dataclasses import dataclass
from typing import List

from ...errors import MalformedInputError
from ...geometry import Coord, Direction, interior_points, shoelace_double_area
from ..base import Puzzle
from ..factory import register_puzzle

INSTRUCTION_PATTERN = re.compile(r"^([UDLR]) (\d+) \(#([0-9a-f]{5})([0-3])\)$")

# Last hex digit of the colour code
HEX_DIRECTIONS = (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP)


@dataclass(frozen=True)
class DigInstruction:
    direction: Direction
    distance: int


@dataclass(frozen=True)
class DigPlan:
    """
    Both readings of the dig plan.

    Attributes:
        plain: Instructions from the direction letter and distance
        decoded: Instructions decoded from the colour codes
    """
    plain: List[DigInstruction]
    decoded: List[DigInstruction]


def parse_dig_plan(raw_text: str) -> DigPlan:
    """
    Parse lines like "R 6 (#70c710)".

    Raises:
        MalformedInputError: If a line does not match
    """
    plain, decoded = [], []
    for line in raw_text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = INSTRUCTION_PATTERN.match(line)
        if not match:
            raise MalformedInputError(f"Invalid dig instruction: {line!r}")
        letter, distance, hex_distance, hex_direction = match.groups()
        plain.append(DigInstruction(Direction.from_letter(letter), int(distance)))
        decoded.append(DigInstruction(HEX_DIRECTIONS[int(hex_direction)], int(hex_distance, 16)))
    return DigPlan(plain=plain, decoded=decoded)


def lagoon_volume(instructions: List[DigInstruction]) -> int:
    """
    Cells inside or on the trench.

    With B trench cells and twice-area 2A, interior I = (2A - B)/2 + 1, so
    the total I + B = (2A + B)/2 + 1.
    """
    pos = Coord(0, 0)
    vertices = [pos]
    boundary = 0
    for instruction in instructions:
        pos = pos + instruction.direction.delta.scaled(instruction.distance)
        vertices.append(pos)
        boundary += instruction.distance
    if pos != Coord(0, 0):
        raise MalformedInputError(f"Trench does not close, ends at {tuple(pos)}")
    return interior_points(shoelace_double_area(vertices[:-1]), boundary) + boundary


@register_puzzle
class LavaductLagoon(Puzzle):
    day = 18
    title = "Lavaduct Lagoon"

    def parse_input(self, raw_text: str) -> DigPlan:
        return parse_dig_plan(raw_text)

    def part1(self, plan: DigPlan) -> int:
        return lagoon_volume(plan.plain)

    def part2(self, plan: DigPlan) -> int:
        return lagoon_volume(plan.decoded)
