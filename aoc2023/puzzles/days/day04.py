"""
Day 4: Scratchcards - Winning numbers and cascading card copies.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

_CARD_RE = re.compile(r"^Card\s+(\d+):([\d\s]+)\|([\d\s]+)$")


@dataclass(frozen=True)
class Card:
    """
    One scratchcard.

    Attributes:
        id: Card number
        winning: Winning numbers
        numbers: Numbers you have
    """
    id: int
    winning: FrozenSet[int]
    numbers: FrozenSet[int]

    @property
    def matches(self) -> int:
        return len(self.winning & self.numbers)

    @property
    def points(self) -> int:
        """1 point for the first match, doubled for each further one."""
        return 2 ** (self.matches - 1) if self.matches else 0


def parse_card(line: str) -> Card:
    """
    Parse "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53".

    Raises:
        MalformedInputError: If the line is not a card
    """
    match = _CARD_RE.match(line)
    if match is None:
        raise MalformedInputError(f"Invalid card line: {line!r}")
    return Card(
        id=int(match.group(1)),
        winning=frozenset(int(n) for n in match.group(2).split()),
        numbers=frozenset(int(n) for n in match.group(3).split()),
    )


@register_puzzle
class Scratchcards(Puzzle):
    day = 4
    title = "Scratchcards"

    def parse_input(self, raw_text: str) -> List[Card]:
        return [parse_card(line.strip()) for line in raw_text.splitlines() if line.strip()]

    def part1(self, cards: List[Card]) -> int:
        return sum(card.points for card in cards)

    def part2(self, cards: List[Card]) -> int:
        """Each win copies the next cards; count all cards in the end."""
        copies = [1] * len(cards)
        for i, card in enumerate(cards):
            for j in range(i + 1, min(i + 1 + card.matches, len(cards))):
                copies[j] += copies[i]
        return sum(copies)
