"""
Day 7: Camel Cards - Ranking poker-like hands.

Part 2 turns J into a joker: it counts as whatever card makes the hand
strongest but is the weakest card when breaking ties.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

CARD_ORDER = "23456789TJQKA"
JOKER_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_SHAPES = {
    (1, 1, 1, 1, 1): HandType.HIGH_CARD,
    (2, 1, 1, 1): HandType.ONE_PAIR,
    (2, 2, 1): HandType.TWO_PAIR,
    (3, 1, 1): HandType.THREE_OF_A_KIND,
    (3, 2): HandType.FULL_HOUSE,
    (4, 1): HandType.FOUR_OF_A_KIND,
    (5,): HandType.FIVE_OF_A_KIND,
}


def hand_type(cards: str, jokers: bool = False) -> HandType:
    """
    Classify a five-card hand.

    Args:
        cards: Five card labels, e.g. "KTJJT"
        jokers: Treat J as a wildcard joining the largest group
    """
    counts = Counter(cards)
    wild = counts.pop("J", 0) if jokers else 0
    shape = sorted(counts.values(), reverse=True) or [0]
    shape[0] += wild
    return _SHAPES[tuple(shape)]


@dataclass(frozen=True)
class Hand:
    """
    A hand and its bid.

    Attributes:
        cards: Five card labels
        bid: Amount won, multiplied by the hand's rank
    """
    cards: str
    bid: int

    def strength(self, jokers: bool = False) -> Tuple[int, ...]:
        """Sort key: hand type first, then card values left to right."""
        order = JOKER_ORDER if jokers else CARD_ORDER
        return (hand_type(self.cards, jokers), *(order.index(c) for c in self.cards))


def parse_hand(line: str) -> Hand:
    """
    Parse "32T3K 765".

    Raises:
        MalformedInputError: If cards or bid are invalid
    """
    parts = line.split()
    if len(parts) != 2 or len(parts[0]) != 5 or not parts[1].isdigit():
        raise MalformedInputError(f"Invalid hand line: {line!r}")
    cards = parts[0]
    invalid = set(cards) - set(CARD_ORDER)
    if invalid:
        raise MalformedInputError(f"Invalid card(s) {sorted(invalid)} in {line!r}")
    return Hand(cards=cards, bid=int(parts[1]))


def total_winnings(hands: List[Hand], jokers: bool = False) -> int:
    ranked = sorted(hands, key=lambda h: h.strength(jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


@register_puzzle
class CamelCards(Puzzle):
    day = 7
    title = "Camel Cards"

    def parse_input(self, raw_text: str) -> List[Hand]:
        return [parse_hand(line.strip()) for line in raw_text.splitlines() if line.strip()]

    def part1(self, hands: List[Hand]) -> int:
        return total_winnings(hands)

    def part2(self, hands: List[Hand]) -> int:
        return total_winnings(hands, jokers=True)
