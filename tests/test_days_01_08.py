"""
Sample-input tests for days 1 to 8.
"""

import textwrap

import pytest

from aoc2023.errors import MalformedInputError
from aoc2023.puzzles import create_puzzle
from aoc2023.puzzles.days.day01 import calibration_value
from aoc2023.puzzles.days.day02 import parse_game
from aoc2023.puzzles.days.day03 import parse_schematic
from aoc2023.puzzles.days.day04 import parse_card
from aoc2023.puzzles.days.day05 import parse_almanac
from aoc2023.puzzles.days.day06 import winning_holds
from aoc2023.puzzles.days.day07 import HandType, hand_type


def dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


# =============================================================================
# Day 1: Trebuchet?!
# =============================================================================

CALIBRATION = dedent("""
    1abc2
    pqr3stu8vwx
    a1b2c3d4e5f
    treb7uchet
""")

SPELLED_CALIBRATION = dedent("""
    two1nine
    eightwothree
    abcone2threexyz
    xtwone3four
    4nineeightseven2
    zoneight234
    7pqrstsixteen
""")


def test_day01_samples():
    puzzle = create_puzzle(1)
    assert puzzle.solve(1, CALIBRATION) == 142
    assert puzzle.solve(2, SPELLED_CALIBRATION) == 281


def test_day01_overlapping_words():
    assert calibration_value("eightwo", spelled=True) == 82
    assert calibration_value("treb7uchet") == 77
    with pytest.raises(MalformedInputError):
        calibration_value("eightwo")


# =============================================================================
# Day 2: Cube Conundrum
# =============================================================================

GAMES = dedent("""
    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
    Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
    Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
    Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
    Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
""")


def test_day02_samples():
    puzzle = create_puzzle(2)
    assert puzzle.solve(1, GAMES) == 8
    assert puzzle.solve(2, GAMES) == 2286


def test_day02_game():
    game = parse_game("Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green")
    assert game.id == 3
    assert game.minimal_bag() == {"red": 20, "green": 13, "blue": 6}
    assert not game.fits({"red": 12, "green": 13, "blue": 14})
    with pytest.raises(MalformedInputError):
        parse_game("Game 3: 8 purple")


# =============================================================================
# Day 3: Gear Ratios
# =============================================================================

SCHEMATIC = dedent("""
    467..114..
    ...*......
    ..35..633.
    ......#...
    617*......
    .....+.58.
    ..592.....
    ......755.
    ...$.*....
    .664.598..
""")


def test_day03_samples():
    puzzle = create_puzzle(3)
    assert puzzle.solve(1, SCHEMATIC) == 4361
    assert puzzle.solve(2, SCHEMATIC) == 467835


def test_day03_parse():
    symbols, numbers = parse_schematic(SCHEMATIC)
    assert len(numbers) == 10
    assert numbers[0].value == 467
    assert sorted(symbols.values()).count("*") == 3
    # 114 and 58 touch no symbol
    assert {n.value for n in numbers if not n.is_part_number(symbols)} == {114, 58}


# =============================================================================
# Day 4: Scratchcards
# =============================================================================

CARDS = dedent("""
    Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
    Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
    Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
    Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
    Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
    Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
""")


def test_day04_samples():
    puzzle = create_puzzle(4)
    assert puzzle.solve(1, CARDS) == 13
    assert puzzle.solve(2, CARDS) == 30


def test_day04_card():
    card = parse_card("Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53")
    assert card.matches == 4
    assert card.points == 8
    with pytest.raises(MalformedInputError):
        parse_card("Card one: 1 | 2")


# =============================================================================
# Day 5: If You Give A Seed A Fertilizer
# =============================================================================

ALMANAC = dedent("""
    seeds: 79 14 55 13

    seed-to-soil map:
    50 98 2
    52 50 48

    soil-to-fertilizer map:
    0 15 37
    37 52 2
    39 0 15

    fertilizer-to-water map:
    49 53 8
    0 11 42
    42 0 7
    57 7 4

    water-to-light map:
    88 18 7
    18 25 70

    light-to-temperature map:
    45 77 23
    81 45 19
    68 64 13

    temperature-to-humidity map:
    0 69 1
    1 0 69

    humidity-to-location map:
    60 56 37
    56 93 4
""")


def test_day05_samples():
    puzzle = create_puzzle(5)
    assert puzzle.solve(1, ALMANAC) == 35
    assert puzzle.solve(2, ALMANAC) == 46


def test_day05_pipeline():
    almanac = parse_almanac(ALMANAC)
    assert len(almanac.pipeline.stages) == 7
    assert almanac.pipeline.stages[0].source_name == "seed"
    assert almanac.pipeline.stages[-1].dest_name == "location"
    assert almanac.pipeline.map_values(almanac.seeds) == [82, 43, 86, 35]
    ranges = almanac.seed_ranges()
    locations = almanac.pipeline.map_intervals(ranges)
    assert sum(i.length for i in locations) == sum(i.length for i in ranges)


# =============================================================================
# Day 6: Wait For It
# =============================================================================

RACES = dedent("""
    Time:      7  15   30
    Distance:  9  40  200
""")


def test_day06_samples():
    puzzle = create_puzzle(6)
    assert puzzle.solve(1, RACES) == 288
    assert puzzle.solve(2, RACES) == 71503


def test_day06_winning_holds():
    assert winning_holds(7, 9) == 4
    assert winning_holds(15, 40) == 8
    assert winning_holds(30, 200) == 9
    assert winning_holds(4, 4) == 0


def test_day06_record_is_best_possible():
    """Test races whose record equals the longest possible distance."""
    assert winning_holds(5, 6) == 0
    assert winning_holds(7, 12) == 0
    assert winning_holds(4, 3) == 1


# =============================================================================
# Day 7: Camel Cards
# =============================================================================

HANDS = dedent("""
    32T3K 765
    T55J5 684
    KK677 28
    KTJJT 220
    QQQJA 483
""")


def test_day07_samples():
    puzzle = create_puzzle(7)
    assert puzzle.solve(1, HANDS) == 6440
    assert puzzle.solve(2, HANDS) == 5905


def test_day07_hand_types():
    assert hand_type("32T3K") == HandType.ONE_PAIR
    assert hand_type("KTJJT") == HandType.TWO_PAIR
    assert hand_type("KTJJT", jokers=True) == HandType.FOUR_OF_A_KIND
    assert hand_type("JJJJJ", jokers=True) == HandType.FIVE_OF_A_KIND


# =============================================================================
# Day 8: Haunted Wasteland
# =============================================================================

NETWORK = dedent("""
    RL

    AAA = (BBB, CCC)
    BBB = (DDD, EEE)
    CCC = (ZZZ, GGG)
    DDD = (DDD, DDD)
    EEE = (EEE, EEE)
    GGG = (GGG, GGG)
    ZZZ = (ZZZ, ZZZ)
""")

REPEATING_NETWORK = dedent("""
    LLR

    AAA = (BBB, BBB)
    BBB = (AAA, ZZZ)
    ZZZ = (ZZZ, ZZZ)
""")

GHOST_NETWORK = dedent("""
    LR

    11A = (11B, XXX)
    11B = (XXX, 11Z)
    11Z = (11B, XXX)
    22A = (22B, XXX)
    22B = (22C, 22C)
    22C = (22Z, 22Z)
    22Z = (22B, 22B)
    XXX = (XXX, XXX)
""")


def test_day08_samples():
    puzzle = create_puzzle(8)
    assert puzzle.solve(1, NETWORK) == 2
    assert puzzle.solve(1, REPEATING_NETWORK) == 6
    assert puzzle.solve(2, GHOST_NETWORK) == 6


def test_day08_malformed():
    with pytest.raises(MalformedInputError):
        create_puzzle(8).solve(1, "LXR\n\nAAA = (ZZZ, ZZZ)\n")
