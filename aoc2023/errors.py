"""
Errors Module - Exception hierarchy shared by all puzzles.

Malformed input is fatal: parsers raise MalformedInputError and nothing in
the library catches it. The only expected failure is a search that exhausts
its frontier, which raises NoRouteError.
"""


class PuzzleError(Exception):
    """Base class for every error raised by aoc2023."""


class MalformedInputError(PuzzleError, ValueError):
    """Puzzle input does not match the expected grammar or structure."""


class NoRouteError(PuzzleError, LookupError):
    """A search exhausted its frontier without reaching the target."""


class PartNotAvailableError(PuzzleError, NotImplementedError):
    """The requested part is not provided by a puzzle."""
