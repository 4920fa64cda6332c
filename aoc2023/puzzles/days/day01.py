"""
Day 1: Trebuchet?! - Calibration values from the first and last digit.
"""

from typing import List

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

DIGIT_WORDS = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)


def calibration_value(line: str, spelled: bool = False) -> int:
    """
    Two-digit number formed by the first and last digit of line.

    Args:
        line: One line of the calibration document
        spelled: Also accept digits spelled out as words ("eight")

    Raises:
        MalformedInputError: If the line contains no digit
    """
    digits = []
    for i, char in enumerate(line):
        if char.isdigit():
            digits.append(int(char))
        elif spelled:
            # Words may overlap ("eightwo"), so match at every offset
            for value, word in enumerate(DIGIT_WORDS, start=1):
                if line.startswith(word, i):
                    digits.append(value)
                    break
    if not digits:
        raise MalformedInputError(f"No digit in line: {line!r}")
    return digits[0] * 10 + digits[-1]


@register_puzzle
class Trebuchet(Puzzle):
    day = 1
    title = "Trebuchet?!"

    def parse_input(self, raw_text: str) -> List[int]:
        return [calibration_value(line.strip()) for line in raw_text.splitlines() if line.strip()]

    def parse_input_part2(self, raw_text: str) -> List[int]:
        return [
            calibration_value(line.strip(), spelled=True)
            for line in raw_text.splitlines() if line.strip()
        ]

    def part1(self, values: List[int]) -> int:
        return sum(values)

    def part2(self, values: List[int]) -> int:
        return sum(values)
