"""
Runner Module - Single entry point for solving a puzzle part.

A harness supplies the day, the part and the puzzle input text; the
runner builds the puzzle with any configured options, times the solve
and returns an Answer.

Usage:
    from aoc2023.runner import configure_logging, run_puzzle

    configure_logging("DEBUG")
    answer = run_puzzle(17, 2, raw_text)
    print(answer, f"({answer.metrics.computation_time_ms:.1f} ms)")
"""

import logging
import time
from typing import Any, Dict, Optional, Union

from .puzzles import Answer, AnswerMetrics, create_puzzle
from .settings import load_settings, puzzle_options

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO,
                      log_file: Optional[str] = None) -> None:
    """
    Configure root logging for a run.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
        log_file: Optional file that receives the same records as the console
    """
    handlers = [logging.StreamHandler()]  # Console output
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def run_puzzle(day: int, part: int, raw_text: str,
               settings: Optional[Dict[str, Any]] = None) -> Answer:
    """
    Solve one part of one day.

    Args:
        day: Puzzle day
        part: 1 or 2
        raw_text: Puzzle input
        settings: Settings dictionary; loaded from config.json if omitted

    Returns:
        Answer with the value and timing

    Raises:
        ValueError: If the day or part is unknown
        PartNotAvailableError: If the day does not provide the part
        MalformedInputError: If the input does not parse
        NoRouteError: If a search finds no route
    """
    if settings is None:
        settings = load_settings()

    options = puzzle_options(settings, day)
    puzzle = create_puzzle(day, **options)
    logger.info(f"Solving day {day} part {part}: {puzzle.title}"
                + (f" with {options}" if options else ""))

    start_time = time.perf_counter()
    value = puzzle.solve(part, raw_text)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    logger.info(f"Day {day} part {part} = {value} ({elapsed_ms:.1f}ms)")
    return Answer(
        day=day,
        part=part,
        value=value,
        metrics=AnswerMetrics(computation_time_ms=elapsed_ms, puzzle_title=puzzle.title),
    )
