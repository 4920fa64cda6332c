"""
Tests for the puzzle registry, the runner and settings persistence.
"""

import json
import logging
import textwrap

import pytest

from aoc2023.errors import (
    MalformedInputError,
    NoRouteError,
    PartNotAvailableError,
    PuzzleError,
)
from aoc2023.puzzles import (
    Answer,
    Puzzle,
    create_puzzle,
    get_puzzle_days,
    get_puzzle_info,
)
from aoc2023.runner import configure_logging, run_puzzle
from aoc2023.settings import (
    DEFAULT_SETTINGS,
    load_settings,
    puzzle_options,
    save_settings,
)

GALAXIES = textwrap.dedent("""\
    ...#......
    .......#..
    #.........
    ..........
    ......#...
    .#........
    .........#
    ..........
    .......#..
    #...#.....
""")

NO_SETTINGS = {"puzzle_options": {}}


# =============================================================================
# Registry
# =============================================================================

def test_all_days_registered():
    assert get_puzzle_days() == list(range(1, 23))


def test_puzzle_info():
    info = {entry["day"]: entry for entry in get_puzzle_info()}
    assert info[17]["title"] == "Clumsy Crucible"
    assert info[17]["parts"] == (1, 2)
    assert info[20]["parts"] == (1,)


def test_create_puzzle():
    puzzle = create_puzzle(11, expansion=10)
    assert isinstance(puzzle, Puzzle)
    assert puzzle.day == 11
    assert puzzle.expansion == 10


def test_unknown_day():
    with pytest.raises(ValueError, match="Unknown puzzle day: 99"):
        create_puzzle(99)


def test_unknown_part():
    with pytest.raises(ValueError):
        create_puzzle(1).solve(3, "1abc2\n")


def test_part_not_available():
    with pytest.raises(PartNotAvailableError):
        create_puzzle(20).solve(2, "broadcaster -> a\n%a -> b\n")


def test_error_hierarchy():
    """Test that library errors are catchable by their builtin bases."""
    assert issubclass(MalformedInputError, ValueError)
    assert issubclass(NoRouteError, LookupError)
    assert issubclass(PartNotAvailableError, NotImplementedError)
    for error in (MalformedInputError, NoRouteError, PartNotAvailableError):
        assert issubclass(error, PuzzleError)


# =============================================================================
# Runner
# =============================================================================

def test_run_puzzle():
    answer = run_puzzle(11, 1, GALAXIES, settings=NO_SETTINGS)
    assert isinstance(answer, Answer)
    assert answer.value == 374
    assert answer.metrics.puzzle_title == "Cosmic Expansion"
    assert answer.metrics.computation_time_ms >= 0
    assert str(answer) == "Day 11 part 1: 374"


def test_run_puzzle_with_options():
    """Test that configured options reach the puzzle constructor."""
    settings = {"puzzle_options": {"11": {"expansion": 10}}}
    assert run_puzzle(11, 2, GALAXIES, settings=settings).value == 1030


def test_run_puzzle_malformed_input():
    with pytest.raises(MalformedInputError):
        run_puzzle(1, 1, "no digits here\n", settings=NO_SETTINGS)


def test_run_puzzle_logs(caplog):
    with caplog.at_level(logging.INFO, logger="aoc2023.runner"):
        run_puzzle(11, 1, GALAXIES, settings=NO_SETTINGS)
    assert "Day 11 part 1 = 374" in caplog.text


def test_configure_logging(tmp_path):
    log_file = tmp_path / "run.log"
    configure_logging("debug", str(log_file))
    try:
        logging.getLogger("aoc2023.test").debug("hello from the runner")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from the runner" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        configure_logging(logging.WARNING)


# =============================================================================
# Settings
# =============================================================================

def test_settings_defaults_when_missing(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS


def test_settings_round_trip(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"log_level": "DEBUG", "puzzle_options": {"21": {"steps": 6}}}, path)
    settings = load_settings(path)
    assert settings["log_level"] == "DEBUG"
    # Missing keys come from the defaults
    assert settings["log_file"] is None
    assert puzzle_options(settings, 21) == {"steps": 6}
    assert puzzle_options(settings, 5) == {}


def test_settings_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_defaults_not_shared(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    settings["puzzle_options"]["11"] = {"expansion": 2}
    assert DEFAULT_SETTINGS["puzzle_options"] == {}
