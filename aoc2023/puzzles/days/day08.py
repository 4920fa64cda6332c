"""
Day 8: Haunted Wasteland - Following left/right instructions through a network.
"""

import itertools
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

_NODE_RE = re.compile(r"^(\w{3}) = \((\w{3}), (\w{3})\)$")


@dataclass(frozen=True)
class Network:
    """
    Instructions and node table.

    Attributes:
        instructions: Sequence of "L"/"R", repeated forever
        nodes: Node name -> (left, right)
    """
    instructions: str
    nodes: Dict[str, Tuple[str, str]]

    def steps(self, start: str, is_end: Callable[[str], bool]) -> int:
        """
        Steps from start until is_end(node) holds.

        Raises:
            MalformedInputError: If the walk reaches an unknown node
        """
        node = start
        for count, instruction in enumerate(itertools.cycle(self.instructions)):
            if is_end(node):
                return count
            try:
                left, right = self.nodes[node]
            except KeyError:
                raise MalformedInputError(f"Unknown node: {node}") from None
            node = left if instruction == "L" else right
        raise AssertionError("unreachable")


def parse_network(raw_text: str) -> Network:
    lines = [line.strip() for line in raw_text.strip().splitlines() if line.strip()]
    instructions = lines[0] if lines else ""
    if not instructions or set(instructions) - {"L", "R"}:
        raise MalformedInputError(f"Invalid instructions: {instructions!r}")
    nodes = {}
    for line in lines[1:]:
        match = _NODE_RE.match(line)
        if match is None:
            raise MalformedInputError(f"Invalid node line: {line!r}")
        nodes[match.group(1)] = (match.group(2), match.group(3))
    return Network(instructions=instructions, nodes=nodes)


@register_puzzle
class HauntedWasteland(Puzzle):
    day = 8
    title = "Haunted Wasteland"

    def parse_input(self, raw_text: str) -> Network:
        return parse_network(raw_text)

    def part1(self, network: Network) -> int:
        return network.steps("AAA", lambda node: node == "ZZZ")

    def part2(self, network: Network) -> int:
        """
        All ghosts walk at once from every node ending in A.

        Each ghost's path loops with period equal to its first exit, so the
        answer is the LCM of those counts.
        """
        starts = [node for node in network.nodes if node.endswith("A")]
        exits = [network.steps(node, lambda n: n.endswith("Z")) for node in starts]
        return math.lcm(*exits)
