"""
Day 15: Lens Library - The HASH algorithm and the HASHMAP procedure.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...errors import MalformedInputError
from ..base import Puzzle
from ..factory import register_puzzle

BOX_COUNT = 256

STEP_PATTERN = re.compile(r"^([a-z]+)(-|=([1-9]))$")


def hash_string(text: str) -> int:
    """Holiday ASCII String Helper: ((acc + code) * 17) % 256 per char."""
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % 256
    return value


@dataclass(frozen=True)
class Step:
    """
    One initialization step, "rn=1" or "cm-".

    Attributes:
        text: Step as written
        label: Lens label
        focal_length: Lens to insert, None for removal
    """
    text: str
    label: str
    focal_length: Optional[int]

    @property
    def box(self) -> int:
        return hash_string(self.label)


def parse_steps(raw_text: str) -> List[str]:
    """Comma-separated steps; newlines are ignored."""
    text = raw_text.replace("\n", "").strip()
    if not text:
        raise MalformedInputError("Empty initialization sequence")
    return text.split(",")


def parse_step(text: str) -> Step:
    """
    Raises:
        MalformedInputError: If text is not "<label>-" or "<label>=<digit>"
    """
    match = STEP_PATTERN.match(text)
    if not match:
        raise MalformedInputError(f"Invalid step: {text!r}")
    focal = match.group(3)
    return Step(text=text, label=match.group(1), focal_length=int(focal) if focal else None)


def arrange_lenses(steps: List[Step]) -> List[Dict[str, int]]:
    """
    Run the HASHMAP procedure.

    Returns:
        One dict per box mapping label to focal length, in slot order
    """
    boxes: List[Dict[str, int]] = [{} for _ in range(BOX_COUNT)]
    for step in steps:
        box = boxes[step.box]
        if step.focal_length is None:
            box.pop(step.label, None)
        else:
            # Replacing keeps the lens in its slot
            box[step.label] = step.focal_length
    return boxes


def focusing_power(boxes: List[Dict[str, int]]) -> int:
    return sum(
        (box_number + 1) * slot * focal
        for box_number, box in enumerate(boxes)
        for slot, focal in enumerate(box.values(), start=1)
    )


@register_puzzle
class LensLibrary(Puzzle):
    day = 15
    title = "Lens Library"

    def parse_input(self, raw_text: str) -> List[str]:
        return parse_steps(raw_text)

    def parse_input_part2(self, raw_text: str) -> List[Step]:
        return [parse_step(s) for s in parse_steps(raw_text)]

    def part1(self, steps: List[str]) -> int:
        return sum(hash_string(s) for s in steps)

    def part2(self, steps: List[Step]) -> int:
        return focusing_power(arrange_lenses(steps))
