"""
Base Puzzle Module - Abstract base class for daily puzzles.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..errors import PartNotAvailableError


class Puzzle(ABC):
    """
    Abstract base class for all daily puzzles.

    Subclasses implement parse_input() and part1(), usually part2(), and
    define day and title class attributes. Parsing and solving are pure:
    a Puzzle instance only carries its constructor options.

    Attributes:
        day: Day of the month (1-25), used as registry key
        title: Puzzle title
        parts: Parts this puzzle provides
    """
    day: int = 0
    title: str = "Base puzzle"
    parts: Tuple[int, ...] = (1, 2)

    @abstractmethod
    def parse_input(self, raw_text: str) -> Any:
        """
        Convert puzzle text into the day's structured form.

        Args:
            raw_text: Puzzle input as given

        Returns:
            Parsed representation consumed by part1()/part2()

        Raises:
            MalformedInputError: If the text does not match the grammar
        """
        pass

    def parse_input_part2(self, raw_text: str) -> Any:
        """
        Parse for part 2.

        Defaults to parse_input(); overridden by days whose second part
        reads the same text differently.
        """
        return self.parse_input(raw_text)

    @abstractmethod
    def part1(self, parsed: Any) -> int:
        """Answer to part 1."""
        pass

    def part2(self, parsed: Any) -> int:
        """Answer to part 2."""
        raise PartNotAvailableError(f"Day {self.day} does not provide part 2")

    def solve(self, part: int, raw_text: str) -> int:
        """
        Parse raw_text and solve one part.

        Args:
            part: 1 or 2
            raw_text: Puzzle input

        Raises:
            ValueError: If part is not 1 or 2
            PartNotAvailableError: If this puzzle does not provide the part
        """
        if part not in (1, 2):
            raise ValueError(f"Unknown part: {part}. Available: 1, 2")
        if part not in self.parts:
            raise PartNotAvailableError(f"Day {self.day} does not provide part {part}")
        if part == 1:
            return self.part1(self.parse_input(raw_text))
        return self.part2(self.parse_input_part2(raw_text))
