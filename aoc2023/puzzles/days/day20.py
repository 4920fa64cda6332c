"""
Day 20: Pulse Propagation - Simulating flip-flops and conjunctions.

Only the literal simulation is provided. The second part of the puzzle
depends on the particular shape of the real input network and has no
general solution here.
"""

import logging
import re
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Tuple

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

BROADCASTER = "broadcaster"
BUTTON = "button"
FLIP_FLOP = "%"
CONJUNCTION = "&"

MODULE_PATTERN = re.compile(r"^([%&]?)([a-z]+) -> ([a-z]+(?:, [a-z]+)*)$")

# (source, destination, is_high)
Pulse = Tuple[str, str, bool]


@dataclass(frozen=True)
class ModuleSpec:
    """
    Static description of one module.

    Attributes:
        name: Module name
        kind: "%", "&" or "" for the broadcaster
        outputs: Destination names, in send order
    """
    name: str
    kind: str
    outputs: Tuple[str, ...]


def parse_modules(raw_text: str) -> Dict[str, ModuleSpec]:
    """
    Parse lines like "%a -> b, c".

    Raises:
        MalformedInputError: On an invalid line, a duplicate module, or a
            missing broadcaster
    """
    modules: Dict[str, ModuleSpec] = {}
    for line in raw_text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = MODULE_PATTERN.match(line)
        if not match:
            raise MalformedInputError(f"Invalid module: {line!r}")
        kind, name, outputs = match.groups()
        if bool(kind) == (name == BROADCASTER):
            raise MalformedInputError(f"Invalid module type: {line!r}")
        if name in modules:
            raise MalformedInputError(f"Duplicate module: {name}")
        modules[name] = ModuleSpec(name=name, kind=kind, outputs=tuple(outputs.split(", ")))
    if BROADCASTER not in modules:
        raise MalformedInputError("Missing broadcaster module")
    return modules


class PulseSimulator:
    """
    Mutable module states for one run of button presses.

    Flip-flops start off; conjunctions start remembering a low pulse from
    each of their inputs. Pulses are processed in the order they are sent.
    """

    def __init__(self, modules: Dict[str, ModuleSpec]):
        self.modules = modules
        self.flip_flops: Dict[str, bool] = {
            name: False for name, spec in modules.items() if spec.kind == FLIP_FLOP
        }
        self.memories: Dict[str, Dict[str, bool]] = {
            name: {} for name, spec in modules.items() if spec.kind == CONJUNCTION
        }
        for spec in modules.values():
            for output in spec.outputs:
                if output in self.memories:
                    self.memories[output][spec.name] = False
        self.presses = 0

    def _receive(self, pulse: Pulse) -> List[Pulse]:
        source, name, high = pulse
        spec = self.modules.get(name)
        if spec is None:
            # Untyped sink such as "output"
            return []

        if spec.kind == FLIP_FLOP:
            if high:
                return []
            self.flip_flops[name] = not self.flip_flops[name]
            send = self.flip_flops[name]
        elif spec.kind == CONJUNCTION:
            memory = self.memories[name]
            memory[source] = high
            send = not all(memory.values())
        else:
            send = high
        return [(name, output, send) for output in spec.outputs]

    def press(self) -> Tuple[int, int]:
        """
        Push the button once and run until no pulses remain.

        Returns:
            (low, high) pulse counts, including the button's own pulse
        """
        self.presses += 1
        low = high = 0
        queue: Deque[Pulse] = deque([(BUTTON, BROADCASTER, False)])
        while queue:
            pulse = queue.popleft()
            if pulse[2]:
                high += 1
            else:
                low += 1
            queue.extend(self._receive(pulse))
        return low, high


def pulse_product(modules: Dict[str, ModuleSpec], presses: int = 1000) -> int:
    """Total low pulses times total high pulses over a number of presses."""
    simulator = PulseSimulator(modules)
    low_total = high_total = 0
    for _ in range(presses):
        low, high = simulator.press()
        low_total += low
        high_total += high
    logger.debug(f"{presses} presses: {low_total} low, {high_total} high pulses")
    return low_total * high_total


@register_puzzle
class PulsePropagation(Puzzle):
    day = 20
    title = "Pulse Propagation"
    parts = (1,)

    def __init__(self, presses: int = 1000):
        self.presses = presses

    def parse_input(self, raw_text: str) -> Dict[str, ModuleSpec]:
        return parse_modules(raw_text)

    def part1(self, modules: Dict[str, ModuleSpec]) -> int:
        return pulse_product(modules, self.presses)
