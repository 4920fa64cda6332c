"""
Sample-input tests for days 9 to 15.
"""

import textwrap

import numpy as np
import pytest

from aoc2023.errors import MalformedInputError
from aoc2023.geometry import Coord
from aoc2023.puzzles import create_puzzle
from aoc2023.puzzles.days.day09 import extrapolate, extrapolate_backwards
from aoc2023.puzzles.days.day10 import parse_maze, render_maze, walk_loop
from aoc2023.puzzles.days.day11 import expanded_positions, parse_image, sum_pairwise_distances
from aoc2023.puzzles.days.day12 import ArrangementCounter, parse_record
from aoc2023.puzzles.days.day13 import parse_patterns, reflection_row, summarize
from aoc2023.puzzles.days.day14 import parse_platform, spin_cycle, tilt_north, north_load
from aoc2023.puzzles.days.day15 import arrange_lenses, hash_string, parse_step


def dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


# =============================================================================
# Day 9: Mirage Maintenance
# =============================================================================

HISTORIES = dedent("""
    0 3 6 9 12 15
    1 3 6 10 15 21
    10 13 16 21 30 45
""")


def test_day09_samples():
    puzzle = create_puzzle(9)
    assert puzzle.solve(1, HISTORIES) == 114
    assert puzzle.solve(2, HISTORIES) == 2


def test_day09_extrapolation():
    assert extrapolate([10, 13, 16, 21, 30, 45]) == 68
    assert extrapolate_backwards([10, 13, 16, 21, 30, 45]) == 5
    assert extrapolate([-1, -3, -5]) == -7


# =============================================================================
# Day 10: Pipe Maze
# =============================================================================

SQUARE_LOOP = dedent("""
    -L|F7
    7S-7|
    L|7||
    -L-J|
    L|-JF
""")

COMPLEX_LOOP = dedent("""
    7-F7-
    .FJ|7
    SJLL7
    |F--J
    LJ.LJ
""")

ENCLOSED = dedent("""
    ...........
    .S-------7.
    .|F-----7|.
    .||.....||.
    .||.....||.
    .|L-7.F-J|.
    .|..|.|..|.
    .L--J.L--J.
    ...........
""")

SQUEEZED = dedent("""
    ..........
    .S------7.
    .|F----7|.
    .||....||.
    .||....||.
    .|L-7F-J|.
    .|..||..|.
    .L--JL--J.
    ..........
""")

LARGER = dedent("""
    .F----7F7F7F7F-7....
    .|F--7||||||||FJ....
    .||.FJ||||||||L7....
    FJL7L7LJLJ||LJ.L-7..
    L--J.L7...LJS7F-7L7.
    ....F-J..F7FJ|L7L7L7
    ....L7.F7||L7|.L7L7|
    .....|FJLJ|FJ|F7|.LJ
    ....FJL-7.||.||||...
    ....L---J.LJ.LJLJ...
""")


def test_day10_farthest_point():
    puzzle = create_puzzle(10)
    assert puzzle.solve(1, SQUARE_LOOP) == 4
    assert puzzle.solve(1, COMPLEX_LOOP) == 8


def test_day10_enclosed_tiles():
    puzzle = create_puzzle(10)
    assert puzzle.solve(2, ENCLOSED) == 4
    assert puzzle.solve(2, SQUEEZED) == 4
    assert puzzle.solve(2, LARGER) == 8


def test_day10_loop_order():
    loop = walk_loop(parse_maze(SQUARE_LOOP))
    assert loop[0] == Coord(1, 1)
    assert loop[1] == Coord(2, 1)
    assert len(loop) == 8
    assert len(set(loop)) == len(loop)


def test_day10_render_round_trip():
    """Test that rendering and re-parsing keeps the transition table."""
    for text in (SQUARE_LOOP, COMPLEX_LOOP, LARGER):
        maze = parse_maze(text)
        again = parse_maze(render_maze(maze))
        assert again == maze


def test_day10_broken_loop():
    with pytest.raises(MalformedInputError):
        walk_loop(parse_maze("S-7\n..|\n..L\n"))
    with pytest.raises(MalformedInputError):
        parse_maze(".S.\n.X.\n")


# =============================================================================
# Day 11: Cosmic Expansion
# =============================================================================

GALAXIES = dedent("""
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


def test_day11_samples():
    assert create_puzzle(11).solve(1, GALAXIES) == 374
    assert create_puzzle(11, expansion=10).solve(2, GALAXIES) == 1030
    assert create_puzzle(11, expansion=100).solve(2, GALAXIES) == 8410


def test_day11_expansion():
    image = parse_image(GALAXIES)
    assert image.sum() == 9
    positions = expanded_positions(image, 2)
    # First galaxy sits after one empty column
    assert tuple(positions[0]) == (4, 0)
    assert sum_pairwise_distances(np.array([[1, 6], [5, 11]])) == 9


# =============================================================================
# Day 12: Hot Springs
# =============================================================================

RECORDS = dedent("""
    ???.### 1,1,3
    .??..??...?##. 1,1,3
    ?#?#?#?#?#?#?#? 1,3,1,6
    ????.#...#... 4,1,1
    ????.######..#####. 1,6,5
    ?###???????? 3,2,1
""")


def test_day12_samples():
    puzzle = create_puzzle(12)
    assert puzzle.solve(1, RECORDS) == 21
    assert puzzle.solve(2, RECORDS) == 525152


@pytest.mark.parametrize("line, folded, unfolded", [
    ("???.### 1,1,3", 1, 1),
    (".??..??...?##. 1,1,3", 4, 16384),
    ("????.#...#... 4,1,1", 1, 16),
    ("?###???????? 3,2,1", 10, 506250),
])
def test_day12_rows(line, folded, unfolded):
    record = parse_record(line)
    assert ArrangementCounter().count_record(record) == folded
    assert ArrangementCounter().count_record(record.unfold()) == unfolded


def test_day12_counter_cache():
    counter = ArrangementCounter()
    assert counter.count("#.#", (1, 1)) == 1
    assert counter.count("###", (1, 1)) == 0
    assert counter.count("", ()) == 1
    assert counter.cache_size > 0


def test_day12_malformed():
    with pytest.raises(MalformedInputError):
        parse_record("??x 1")
    with pytest.raises(MalformedInputError):
        parse_record("??? 1,a")


# =============================================================================
# Day 13: Point of Incidence
# =============================================================================

PATTERNS = dedent("""
    #.##..##.
    ..#.##.#.
    ##......#
    ##......#
    ..#.##.#.
    ..##..##.
    #.#.##.#.

    #...##..#
    #....#..#
    ..##..###
    #####.##.
    #####.##.
    ..##..###
    #....#..#
""")


def test_day13_samples():
    puzzle = create_puzzle(13)
    assert puzzle.solve(1, PATTERNS) == 405
    assert puzzle.solve(2, PATTERNS) == 400


def test_day13_reflections():
    first, second = parse_patterns(PATTERNS)
    assert reflection_row(first) is None
    assert reflection_row(first.T) == 5
    assert reflection_row(second) == 4
    assert reflection_row(first, smudges=1) == 3
    assert reflection_row(second, smudges=1) == 1


def test_day13_no_mirror():
    (pattern,) = parse_patterns("#.\n.#\n##\n")
    with pytest.raises(MalformedInputError):
        summarize(pattern)


# =============================================================================
# Day 14: Parabolic Reflector Dish
# =============================================================================

PLATFORM = dedent("""
    O....#....
    O.OO#....#
    .....##...
    OO.#O....O
    .O.....O#.
    O.#..O.#.#
    ..O..#O..O
    .......O..
    #....###..
    #OO..#....
""")

AFTER_ONE_CYCLE = dedent("""
    .....#....
    ....#...O#
    ...OO##...
    .OO#......
    .....OOO#.
    .O#...O#.#
    ....O#....
    ......OOOO
    #...O###..
    #..OO#....
""")


def test_day14_samples():
    puzzle = create_puzzle(14)
    assert puzzle.solve(1, PLATFORM) == 136
    assert puzzle.solve(2, PLATFORM) == 64


def test_day14_spin_cycle():
    platform = parse_platform(PLATFORM)
    assert np.array_equal(spin_cycle(platform), parse_platform(AFTER_ONE_CYCLE))
    # Tilting twice changes nothing more
    once = tilt_north(platform)
    assert np.array_equal(tilt_north(once), once)
    assert north_load(once) == 136


def test_day14_few_cycles():
    puzzle = create_puzzle(14, spin_cycles=1)
    assert puzzle.solve(2, PLATFORM) == north_load(parse_platform(AFTER_ONE_CYCLE))


# =============================================================================
# Day 15: Lens Library
# =============================================================================

STEPS = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7\n"


def test_day15_samples():
    puzzle = create_puzzle(15)
    assert puzzle.solve(1, STEPS) == 1320
    assert puzzle.solve(2, STEPS) == 145


def test_day15_hash():
    assert hash_string("HASH") == 52
    assert hash_string("rn") == 0
    assert hash_string("qp") == 1


def test_day15_boxes():
    steps = [parse_step(s) for s in STEPS.strip().split(",")]
    boxes = arrange_lenses(steps)
    assert list(boxes[0].items()) == [("rn", 1), ("cm", 2)]
    assert list(boxes[3].items()) == [("ot", 7), ("ab", 5), ("pc", 6)]
    with pytest.raises(MalformedInputError):
        parse_step("ab=0")
