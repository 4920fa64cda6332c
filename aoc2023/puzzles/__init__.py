"""
Puzzles Package - Registry of daily Advent of Code 2023 puzzles.

Every day is a Puzzle subclass registered by day number. Parsing and
solving are pure functions of the input text and the constructor options.

Public API:
    - Puzzle: Abstract base for daily puzzles
    - Answer: Result of a solve
    - AnswerMetrics: Timing statistics
    - create_puzzle(): Factory function
    - get_puzzle_days(): List registered days
    - get_puzzle_info(): Get puzzle metadata

Usage:
    from aoc2023.puzzles import create_puzzle

    puzzle = create_puzzle(17)
    print(puzzle.solve(2, raw_text))

    # Constructor options tune a day, e.g. the galaxy expansion factor
    puzzle = create_puzzle(11, expansion=10)
"""

# Core data structures
from .answer import Answer, AnswerMetrics

# Puzzle framework
from .base import Puzzle
from .factory import (
    create_puzzle,
    get_puzzle_days,
    get_puzzle_info,
    register_puzzle,
)

# Import days to register them
from . import days

__all__ = [
    # Data structures
    "Answer",
    "AnswerMetrics",
    # Puzzle framework
    "Puzzle",
    "create_puzzle",
    "get_puzzle_days",
    "get_puzzle_info",
    "register_puzzle",
]
