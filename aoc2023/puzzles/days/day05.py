"""
Day 5: If You Give A Seed A Fertilizer - Seeds through a chain of range maps.

Part 2 reads the seed list as (start, length) pairs and maps whole ranges
stage by stage instead of individual seeds.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from ...errors import MalformedInputError
from ...intervals import Interval, MappingPipeline, MappingStage, RangeMapping, union_length
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^([a-z]+)-to-([a-z]+) map:$")


@dataclass(frozen=True)
class Almanac:
    """
    Parsed almanac.

    Attributes:
        seeds: Numbers from the "seeds:" line
        pipeline: Conversion stages, seed first
    """
    seeds: Tuple[int, ...]
    pipeline: MappingPipeline

    def seed_ranges(self) -> List[Interval]:
        """Seeds read as (start, length) pairs."""
        if len(self.seeds) % 2:
            raise MalformedInputError("Odd number of seed values for range pairs")
        return [
            Interval.from_length(start, length)
            for start, length in zip(self.seeds[::2], self.seeds[1::2])
        ]


def _parse_numbers(line: str) -> List[int]:
    try:
        return [int(n) for n in line.split()]
    except ValueError:
        raise MalformedInputError(f"Expected numbers, got: {line!r}") from None


def parse_mapping(line: str) -> RangeMapping:
    """
    Parse "dest source length" into a source range and an offset.

    Raises:
        MalformedInputError: If the line does not hold three numbers
    """
    numbers = _parse_numbers(line)
    if len(numbers) != 3:
        raise MalformedInputError(f"Mapping needs 3 numbers: {line!r}")
    dest, source, length = numbers
    return RangeMapping(Interval.from_length(source, length), dest - source)


def parse_stage(block: str) -> MappingStage:
    """Parse one "x-to-y map:" block."""
    lines = [line.strip() for line in block.strip().splitlines()]
    match = _HEADER_RE.match(lines[0])
    if match is None:
        raise MalformedInputError(f"Invalid map header: {lines[0]!r}")
    mappings = tuple(parse_mapping(line) for line in lines[1:] if line)
    if not mappings:
        raise MalformedInputError(f"Map {lines[0]!r} has no entries")
    return MappingStage(match.group(1), match.group(2), mappings)


def parse_almanac(raw_text: str) -> Almanac:
    """
    Parse the seed line followed by blank-line separated map blocks.

    Raises:
        MalformedInputError: If the seed line or a block is malformed
    """
    blocks = re.split(r"\n\s*\n", raw_text.strip())
    head = blocks[0].strip()
    if not head.startswith("seeds:"):
        raise MalformedInputError(f"Expected seeds line, got: {head!r}")
    seeds = tuple(_parse_numbers(head[len("seeds:"):]))
    stages = tuple(parse_stage(block) for block in blocks[1:])
    return Almanac(seeds=seeds, pipeline=MappingPipeline(stages))


@register_puzzle
class SeedFertilizer(Puzzle):
    day = 5
    title = "If You Give A Seed A Fertilizer"

    def parse_input(self, raw_text: str) -> Almanac:
        return parse_almanac(raw_text)

    def part1(self, almanac: Almanac) -> int:
        return min(almanac.pipeline.map_values(almanac.seeds))

    def part2(self, almanac: Almanac) -> int:
        locations = almanac.pipeline.map_intervals(almanac.seed_ranges())
        logger.debug(
            f"{len(locations)} location ranges covering {union_length(locations)} values "
            f"after {len(almanac.pipeline.stages)} stages"
        )
        if not locations:
            raise MalformedInputError("No seed ranges to map")
        return min(interval.start for interval in locations)
