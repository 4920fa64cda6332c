"""
Pathfinding Module - Minimum-cost search with movement-history constraints.

Finds the cheapest route across an integer cost grid when the legal next
moves depend on how the route got to its current cell ("turn after at most
N steps", "move at least M steps before turning").

The search runs Dijkstra over an augmented state space: a node is
(position, last direction, run length) rather than a bare position, since
the cost of finishing from a cell depends on the moves that led there.

Usage:
    grid = CostGrid.from_text(raw_text)
    finder = ConstrainedMovePathfinder(grid, MoveRule(min_run=4, max_run=10))
    cost = finder.minimum_cost(Coord(0, 0), grid.bottom_right)
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple, Union

from .errors import MalformedInputError, NoRouteError
from .geometry import Coord, Direction, grid_lines

logger = logging.getLogger(__name__)

Target = Union[Coord, Callable[[Coord], bool]]


@dataclass(frozen=True)
class MoveRule:
    """
    Movement constraint for the crucible search.

    After choosing a new direction the route commits to min_run steps in it
    (a single multi-step move), then may continue one step at a time until
    max_run consecutive steps. Reversing is never allowed.

    Attributes:
        min_run: Steps required before the route may turn or stop
        max_run: Maximum consecutive steps in one direction
    """
    min_run: int = 1
    max_run: int = 3

    def __post_init__(self):
        if self.min_run < 1 or self.max_run < self.min_run:
            raise ValueError(
                f"Invalid move rule: min_run={self.min_run}, max_run={self.max_run}"
            )


@dataclass(frozen=True)
class CostGrid:
    """
    Immutable grid of per-cell traversal costs.

    Attributes:
        rows: Tuple of rows, each a tuple of non-negative costs
    """
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_text(cls, raw_text: str) -> "CostGrid":
        """
        Parse a grid of single-digit costs.

        Raises:
            MalformedInputError: If a cell is not a digit
        """
        rows = []
        for y, line in enumerate(grid_lines(raw_text)):
            if not line.isdigit():
                raise MalformedInputError(f"Non-digit cost in row {y}: {line!r}")
            rows.append(tuple(int(c) for c in line))
        return cls(rows=tuple(rows))

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def bottom_right(self) -> Coord:
        return Coord(self.width - 1, self.height - 1)

    def contains(self, pos: Coord) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cost(self, pos: Coord) -> int:
        return self.rows[pos.y][pos.x]


class SearchState(NamedTuple):
    """
    Search node: where the route is and how it got there.

    All three fields take part in equality and hashing.

    Attributes:
        position: Current cell
        direction: Direction of the last move (None before the first move)
        run: Consecutive moves made in that direction
    """
    position: Coord
    direction: Optional[Direction]
    run: int


@dataclass
class SearchResult:
    """
    Outcome of a successful search.

    Attributes:
        cost: Minimum accumulated cost
        end_state: State that reached the target
        states_explored: Number of states popped from the frontier
    """
    cost: int
    end_state: SearchState
    states_explored: int


class ConstrainedMovePathfinder:
    """
    Dijkstra search over (position, direction, run) states.

    Successors are generated lazily from the move rule:
        - continue straight one step while run < max_run
        - turn left or right, committing to min_run steps at once
    From the initial state (no direction) every direction is a turn.
    Moves that leave the grid, even partially, are discarded.
    """

    def __init__(self, grid: CostGrid, rule: MoveRule = MoveRule()):
        """
        Args:
            grid: Cost of entering each cell
            rule: Movement constraint
        """
        self.grid = grid
        self.rule = rule

    def _move(self, state: SearchState, direction: Direction,
              steps: int, run: int) -> Optional[Tuple[SearchState, int]]:
        """Walk steps cells in direction; None if any cell is off-grid."""
        pos = state.position
        cost = 0
        for _ in range(steps):
            pos = pos + direction.delta
            if not self.grid.contains(pos):
                return None
            cost += self.grid.cost(pos)
        return SearchState(pos, direction, run), cost

    def successors(self, state: SearchState) -> List[Tuple[SearchState, int]]:
        """
        Legal next states with their incremental cost.

        Args:
            state: Current search state

        Returns:
            List of (next_state, cost) pairs
        """
        min_run = self.rule.min_run
        candidates = []

        if state.direction is None:
            for direction in Direction:
                candidates.append(self._move(state, direction, min_run, min_run))
        else:
            if state.run < self.rule.max_run:
                candidates.append(
                    self._move(state, state.direction, 1, state.run + 1)
                )
            for direction in (state.direction.turn_left(), state.direction.turn_right()):
                candidates.append(self._move(state, direction, min_run, min_run))

        return [c for c in candidates if c is not None]

    def _is_goal(self, state: SearchState, target: Target) -> bool:
        if callable(target):
            reached = target(state.position)
        else:
            reached = state.position == target
        if not reached:
            return False
        return state.direction is None or state.run >= self.rule.min_run

    def search(self, start: Coord, target: Target) -> SearchResult:
        """
        Run the search from start until a goal state is popped.

        Args:
            start: Starting cell (its own cost is not paid)
            target: Goal cell, or predicate over cells

        Returns:
            SearchResult with the minimum cost

        Raises:
            NoRouteError: If the frontier is exhausted
        """
        initial = SearchState(start, None, 0)
        best: Dict[SearchState, int] = {initial: 0}
        tie = itertools.count()
        frontier: List[Tuple[int, int, SearchState]] = [(0, next(tie), initial)]
        explored = 0

        while frontier:
            cost, _, state = heapq.heappop(frontier)
            if cost > best.get(state, cost):
                continue
            explored += 1

            if self._is_goal(state, target):
                logger.debug(
                    f"Route found: cost={cost}, explored={explored}, "
                    f"rule={self.rule}"
                )
                return SearchResult(cost=cost, end_state=state, states_explored=explored)

            for next_state, step_cost in self.successors(state):
                new_cost = cost + step_cost
                if new_cost < best.get(next_state, new_cost + 1):
                    best[next_state] = new_cost
                    heapq.heappush(frontier, (new_cost, next(tie), next_state))

        raise NoRouteError(
            f"No route from {tuple(start)} under {self.rule} "
            f"({explored} states explored)"
        )

    def minimum_cost(self, start: Coord, target: Target) -> int:
        """Minimum total cost from start to target."""
        return self.search(start, target).cost
