"""
Puzzle Factory Module - Registry and factory for puzzle instantiation.
"""

from typing import Any, Dict, List, Type

from .base import Puzzle


# Global registry of puzzles, keyed by day
_PUZZLES: Dict[int, Type[Puzzle]] = {}


def register_puzzle(cls: Type[Puzzle]) -> Type[Puzzle]:
    """
    Decorator to register a puzzle class.

    Usage:
        @register_puzzle
        class Trebuchet(Puzzle):
            day = 1
            ...

    Args:
        cls: Puzzle class to register

    Returns:
        The same class (for decorator chaining)
    """
    _PUZZLES[cls.day] = cls
    return cls


def create_puzzle(day: int, **kwargs: Any) -> Puzzle:
    """
    Create a puzzle instance by day.

    Args:
        day: Day number (1-25)
        **kwargs: Options passed to the puzzle constructor

    Returns:
        Puzzle instance

    Raises:
        ValueError: If no puzzle is registered for day
    """
    if day not in _PUZZLES:
        available = ", ".join(str(d) for d in sorted(_PUZZLES))
        raise ValueError(f"Unknown puzzle day: {day}. Available: {available}")
    return _PUZZLES[day](**kwargs)


def get_puzzle_days() -> List[int]:
    """
    Get registered days in ascending order.

    Returns:
        List of day numbers
    """
    return sorted(_PUZZLES)


def get_puzzle_info() -> List[Dict[str, Any]]:
    """
    Get day, title and parts for all registered puzzles.

    Returns:
        List of dicts with 'day', 'title' and 'parts' keys
    """
    return [
        {"day": day, "title": _PUZZLES[day].title, "parts": _PUZZLES[day].parts}
        for day in sorted(_PUZZLES)
    ]
