"""
Day 19: Aplenty - Sorting machine parts through workflows.

Part 2 pushes whole rating ranges through the workflows instead of single
parts: each rule splits the incoming box of ranges into the piece it
sends on and the piece that falls through to the next rule.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ...errors import MalformedInputError
from ...intervals import Interval
from ..base import Puzzle
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

CATEGORIES = ("x", "m", "a", "s")
START_WORKFLOW = "in"
ACCEPTED = "A"
REJECTED = "R"
RATING_RANGE = Interval(1, 4001)

WORKFLOW_PATTERN = re.compile(r"^([a-z]+)\{(.*)\}$")
RULE_PATTERN = re.compile(r"^([xmas])([<>])(\d+):([a-z]+|A|R)$")
TARGET_PATTERN = re.compile(r"^([a-z]+|A|R)$")
PART_PATTERN = re.compile(r"^\{x=(\d+),m=(\d+),a=(\d+),s=(\d+)\}$")

Part = Dict[str, int]
RatingBox = Dict[str, Interval]


@dataclass(frozen=True)
class Rule:
    """
    Conditional jump, e.g. "a<2006:qkq".

    Attributes:
        category: Rating the condition looks at
        operator: "<" or ">"
        value: Threshold
        target: Workflow name, "A" or "R"
    """
    category: str
    operator: str
    value: int
    target: str

    def matches(self, part: Part) -> bool:
        rating = part[self.category]
        return rating < self.value if self.operator == "<" else rating > self.value

    def split(self, interval: Interval) -> Tuple[Optional[Interval], Optional[Interval]]:
        """
        Split a rating range by this rule.

        Returns:
            (matching, not_matching), either None when empty
        """
        if self.operator == "<":
            return interval.split_at(self.value)
        below, above = interval.split_at(self.value + 1)
        return above, below


@dataclass(frozen=True)
class Workflow:
    name: str
    rules: Tuple[Rule, ...]
    fallback: str

    def route(self, part: Part) -> str:
        for rule in self.rules:
            if rule.matches(part):
                return rule.target
        return self.fallback


@dataclass(frozen=True)
class System:
    workflows: Dict[str, Workflow]
    parts: List[Part]

    def is_accepted(self, part: Part) -> bool:
        name = START_WORKFLOW
        while name not in (ACCEPTED, REJECTED):
            name = self.workflows[name].route(part)
        return name == ACCEPTED

    def count_accepted(self, name: str, box: RatingBox) -> int:
        """Number of rating combinations inside box accepted from workflow name."""
        if name == REJECTED:
            return 0
        if name == ACCEPTED:
            total = 1
            for interval in box.values():
                total *= interval.length
            return total

        workflow = self.workflows[name]
        count = 0
        for rule in workflow.rules:
            matching, rest = rule.split(box[rule.category])
            if matching is not None:
                count += self.count_accepted(rule.target, {**box, rule.category: matching})
            if rest is None:
                return count
            box = {**box, rule.category: rest}
        return count + self.count_accepted(workflow.fallback, box)


def parse_workflow(line: str) -> Workflow:
    """
    Parse "px{a<2006:qkq,m>2090:A,rfg}".

    Raises:
        MalformedInputError: If the line or one of its rules is invalid
    """
    match = WORKFLOW_PATTERN.match(line)
    if not match:
        raise MalformedInputError(f"Invalid workflow: {line!r}")
    name, body = match.groups()
    *rule_texts, fallback = body.split(",")
    if not TARGET_PATTERN.match(fallback):
        raise MalformedInputError(f"Invalid fallback in workflow {name}: {fallback!r}")

    rules = []
    for text in rule_texts:
        rule_match = RULE_PATTERN.match(text)
        if not rule_match:
            raise MalformedInputError(f"Invalid rule in workflow {name}: {text!r}")
        category, operator, value, target = rule_match.groups()
        rules.append(Rule(category, operator, int(value), target))
    return Workflow(name=name, rules=tuple(rules), fallback=fallback)


def parse_part(line: str) -> Part:
    match = PART_PATTERN.match(line)
    if not match:
        raise MalformedInputError(f"Invalid part: {line!r}")
    return dict(zip(CATEGORIES, (int(v) for v in match.groups())))


def parse_system(raw_text: str) -> System:
    """
    Parse workflows and parts, separated by a blank line.

    Raises:
        MalformedInputError: If a section is missing, a line is invalid, or
            a rule jumps to an undefined workflow
    """
    sections = re.split(r"\n\s*\n", raw_text.strip())
    if len(sections) != 2:
        raise MalformedInputError("Expected workflows and parts separated by a blank line")
    workflow_text, part_text = sections

    workflows = {}
    for line in workflow_text.splitlines():
        workflow = parse_workflow(line.strip())
        workflows[workflow.name] = workflow
    if START_WORKFLOW not in workflows:
        raise MalformedInputError(f"Missing workflow {START_WORKFLOW!r}")
    for workflow in workflows.values():
        for target in [r.target for r in workflow.rules] + [workflow.fallback]:
            if target not in (ACCEPTED, REJECTED) and target not in workflows:
                raise MalformedInputError(f"Workflow {workflow.name} jumps to unknown {target!r}")

    parts = [parse_part(line.strip()) for line in part_text.splitlines() if line.strip()]
    return System(workflows=workflows, parts=parts)


@register_puzzle
class Aplenty(Puzzle):
    day = 19
    title = "Aplenty"

    def parse_input(self, raw_text: str) -> System:
        system = parse_system(raw_text)
        logger.debug(f"Parsed {len(system.workflows)} workflows and {len(system.parts)} parts")
        return system

    def part1(self, system: System) -> int:
        return sum(
            sum(part.values()) for part in system.parts if system.is_accepted(part)
        )

    def part2(self, system: System) -> int:
        box = {category: RATING_RANGE for category in CATEGORIES}
        return system.count_accepted(START_WORKFLOW, box)
