"""
Advent of Code 2023 puzzle solutions.

Entry point for a harness: aoc2023.runner.run_puzzle(day, part, raw_text).
"""

__version__ = "0.1.0"
