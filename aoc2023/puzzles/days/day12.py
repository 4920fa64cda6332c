"""
Day 12: Hot Springs - Counting arrangements of damaged springs.

A record is a pattern over '.' (operational), '#' (damaged) and '?'
(unknown) plus the lengths of the contiguous damaged groups. The counter
places the first group at every admissible offset and recurses on what
follows, caching results by (remaining pattern, remaining groups).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

OPERATIONAL = "."
DAMAGED = "#"
UNKNOWN = "?"


@dataclass(frozen=True)
class SpringRecord:
    """
    One line of the condition records.

    Attributes:
        pattern: Spring states, e.g. "???.###"
        groups: Damaged group sizes, e.g. (1, 1, 3)
    """
    pattern: str
    groups: Tuple[int, ...]

    def unfold(self, times: int = 5) -> "SpringRecord":
        """Repeat the pattern (joined by '?') and the groups `times` times."""
        return SpringRecord(
            pattern=UNKNOWN.join([self.pattern] * times),
            groups=self.groups * times,
        )


class ArrangementCounter:
    """
    Memoised arrangement counter.

    The cache belongs to the instance; reuse one counter across records to
    share common suffixes, or create a new one to start empty.
    """

    def __init__(self):
        self._cache: Dict[Tuple[str, Tuple[int, ...]], int] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def count(self, pattern: str, groups: Tuple[int, ...]) -> int:
        """
        Ways to resolve every '?' so the damaged runs equal groups, in order.
        """
        pattern = pattern.lstrip(OPERATIONAL)
        key = (pattern, groups)
        if key in self._cache:
            return self._cache[key]

        if not groups:
            result = 0 if DAMAGED in pattern else 1
        else:
            size, rest = groups[0], groups[1:]
            result = 0
            for start in range(len(pattern) - size + 1):
                # The group may not skip over a damaged spring
                if DAMAGED in pattern[:start]:
                    break
                end = start + size
                if OPERATIONAL in pattern[start:end]:
                    continue
                if end < len(pattern) and pattern[end] == DAMAGED:
                    continue
                result += self.count(pattern[end + 1:], rest)

        self._cache[key] = result
        return result

    def count_record(self, record: SpringRecord) -> int:
        return self.count(record.pattern, record.groups)


def parse_record(line: str) -> SpringRecord:
    """
    Parse "???.### 1,1,3".

    Raises:
        MalformedInputError: If the pattern or groups are invalid
    """
    parts = line.split()
    if len(parts) != 2 or set(parts[0]) - {OPERATIONAL, DAMAGED, UNKNOWN}:
        raise MalformedInputError(f"Invalid record: {line!r}")
    try:
        groups = tuple(int(g) for g in parts[1].split(","))
    except ValueError:
        raise MalformedInputError(f"Invalid group sizes: {line!r}") from None
    if any(g <= 0 for g in groups):
        raise MalformedInputError(f"Group sizes must be positive: {line!r}")
    return SpringRecord(pattern=parts[0], groups=groups)


@register_puzzle
class HotSprings(Puzzle):
    day = 12
    title = "Hot Springs"

    def __init__(self, unfold_times: int = 5):
        """
        Args:
            unfold_times: Copies of each record in part 2
        """
        self.unfold_times = unfold_times

    def parse_input(self, raw_text: str) -> List[SpringRecord]:
        return [parse_record(line.strip()) for line in raw_text.splitlines() if line.strip()]

    def part1(self, records: List[SpringRecord]) -> int:
        counter = ArrangementCounter()
        return sum(counter.count_record(r) for r in records)

    def part2(self, records: List[SpringRecord]) -> int:
        counter = ArrangementCounter()
        total = sum(counter.count_record(r.unfold(self.unfold_times)) for r in records)
        logger.debug(f"Arrangement cache holds {counter.cache_size} entries")
        return total
