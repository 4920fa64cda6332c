"""
Day 17: Clumsy Crucible - Minimum heat loss under movement constraints.

Ordinary crucibles turn after at most three blocks; ultra crucibles move
at least four and at most ten blocks in a straight line.
"""

from ...geometry import Coord
from ...pathfinding import ConstrainedMovePathfinder, CostGrid, MoveRule
from ..base import Puzzle
from ..factory import register_puzzle

CRUCIBLE = MoveRule(min_run=1, max_run=3)
ULTRA_CRUCIBLE = MoveRule(min_run=4, max_run=10)


def minimum_heat_loss(grid: CostGrid, rule: MoveRule) -> int:
    """Least heat lost from the top-left block to the bottom-right one."""
    finder = ConstrainedMovePathfinder(grid, rule)
    return finder.minimum_cost(Coord(0, 0), grid.bottom_right)


@register_puzzle
class ClumsyCrucible(Puzzle):
    day = 17
    title = "Clumsy Crucible"

    def parse_input(self, raw_text: str) -> CostGrid:
        return CostGrid.from_text(raw_text)

    def part1(self, grid: CostGrid) -> int:
        return minimum_heat_loss(grid, CRUCIBLE)

    def part2(self, grid: CostGrid) -> int:
        return minimum_heat_loss(grid, ULTRA_CRUCIBLE)
