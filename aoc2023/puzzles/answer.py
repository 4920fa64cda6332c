"""
Answer Module - Result of running one puzzle part.
"""

from dataclasses import dataclass, field


@dataclass
class AnswerMetrics:
    """
    Statistics about one solve.

    Attributes:
        computation_time_ms: Parse plus solve time in milliseconds
        puzzle_title: Title of the puzzle that produced the answer
    """
    computation_time_ms: float = 0.0
    puzzle_title: str = ""


@dataclass
class Answer:
    """
    Result of a puzzle run.

    Attributes:
        day: Puzzle day
        part: Puzzle part (1 or 2)
        value: The numeric answer
        metrics: Timing statistics
    """
    day: int
    part: int
    value: int
    metrics: AnswerMetrics = field(default_factory=AnswerMetrics)

    def __str__(self) -> str:
        return f"Day {self.day} part {self.part}: {self.value}"
