"""
Intervals Module - Half-open integer ranges and offset remapping.

A MappingStage rewrites integer ranges: every mapping shifts the part of an
input range that overlaps its source range by a fixed offset, and the parts
that match no mapping pass through unchanged. Stages chain into a
MappingPipeline.

Usage:
    stage = MappingStage("seed", "soil", (
        RangeMapping(Interval(98, 100), -48),
        RangeMapping(Interval(50, 98), 2),
    ))
    stage.map_intervals([Interval(79, 93)])  # [Interval(81, 95)]
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True, order=True)
class Interval:
    """
    Half-open integer range [start, end).

    Attributes:
        start: First value in the range
        end: One past the last value
    """
    start: int
    end: int

    @classmethod
    def from_length(cls, start: int, length: int) -> "Interval":
        return cls(start, start + length)

    @property
    def length(self) -> int:
        return max(0, self.end - self.start)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def intersect(self, other: "Interval") -> Optional["Interval"]:
        """Overlap with other, or None if they are disjoint."""
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end <= start:
            return None
        return Interval(start, end)

    def difference(self, other: "Interval") -> List["Interval"]:
        """
        Parts of this interval outside other.

        Returns:
            Zero, one or two non-empty intervals, in ascending order
        """
        if self.intersect(other) is None:
            return [self]
        pieces = []
        if self.start < other.start:
            pieces.append(Interval(self.start, other.start))
        if other.end < self.end:
            pieces.append(Interval(other.end, self.end))
        return pieces

    def split_at(self, value: int) -> Tuple[Optional["Interval"], Optional["Interval"]]:
        """
        Split into the values below value and the values at or above it.

        Either side is None when empty.
        """
        below = Interval(self.start, min(self.end, value))
        above = Interval(max(self.start, value), self.end)
        return (
            None if below.is_empty else below,
            None if above.is_empty else above,
        )

    def shifted(self, offset: int) -> "Interval":
        return Interval(self.start + offset, self.end + offset)


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Union of intervals as a sorted list of disjoint, non-touching ranges."""
    merged: List[Interval] = []
    for interval in sorted(i for i in intervals if not i.is_empty):
        if merged and interval.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Interval(last.start, max(last.end, interval.end))
        else:
            merged.append(interval)
    return merged


def union_length(intervals: Iterable[Interval]) -> int:
    """Number of distinct integers covered by intervals."""
    return sum(i.length for i in merge_intervals(intervals))


@dataclass(frozen=True)
class RangeMapping:
    """
    Shift every value of source by offset.

    Attributes:
        source: Values this mapping applies to
        offset: Amount added to each mapped value
    """
    source: Interval
    offset: int

    def apply(self, interval: Interval) -> Tuple[Optional[Interval], List[Interval]]:
        """
        Map the overlapping part of interval.

        Returns:
            (mapped, leftovers): the shifted overlap (None if disjoint) and
            the zero, one or two unmapped pieces
        """
        overlap = interval.intersect(self.source)
        if overlap is None:
            return None, [interval]
        return overlap.shifted(self.offset), interval.difference(self.source)


@dataclass(frozen=True)
class MappingStage:
    """
    One conversion table, e.g. seed-to-soil.

    Attributes:
        source_name: Category of input values
        dest_name: Category of output values
        mappings: Mappings in priority order
    """
    source_name: str
    dest_name: str
    mappings: Tuple[RangeMapping, ...]

    def map_value(self, value: int) -> int:
        """Map one value with the first mapping whose source contains it."""
        for mapping in self.mappings:
            if mapping.source.contains(value):
                return value + mapping.offset
        return value

    def map_intervals(self, intervals: Iterable[Interval]) -> List[Interval]:
        """
        Map ranges through this stage.

        Each mapping in turn claims the pieces of the still-unmapped ranges
        that overlap its source. Whatever is left after the last mapping
        passes through unchanged.
        """
        mapped: List[Interval] = []
        pending = [i for i in intervals if not i.is_empty]
        for mapping in self.mappings:
            remaining: List[Interval] = []
            for interval in pending:
                shifted, leftovers = mapping.apply(interval)
                if shifted is not None:
                    mapped.append(shifted)
                remaining.extend(leftovers)
            pending = remaining
        return mapped + pending


@dataclass(frozen=True)
class MappingPipeline:
    """
    Sequence of stages applied one after another.

    Attributes:
        stages: Stages in application order
    """
    stages: Tuple[MappingStage, ...]

    def map_value(self, value: int) -> int:
        for stage in self.stages:
            value = stage.map_value(value)
        return value

    def map_values(self, values: Iterable[int]) -> List[int]:
        return [self.map_value(v) for v in values]

    def map_intervals(self, intervals: Sequence[Interval]) -> List[Interval]:
        current = list(intervals)
        for stage in self.stages:
            current = stage.map_intervals(current)
        return current
