"""
Days Package - One module per daily puzzle.

Import this module to register all puzzles.
"""

from .day01 import Trebuchet
from .day02 import CubeConundrum
from .day03 import GearRatios
from .day04 import Scratchcards
from .day05 import SeedFertilizer
from .day06 import WaitForIt
from .day07 import CamelCards
from .day08 import HauntedWasteland
from .day09 import MirageMaintenance
from .day10 import PipeMazePuzzle
from .day11 import CosmicExpansion
from .day12 import HotSprings
from .day13 import PointOfIncidence
from .day14 import ParabolicReflectorDish
from .day15 import LensLibrary
from .day16 import FloorWillBeLava
from .day17 import ClumsyCrucible
from .day18 import LavaductLagoon
from .day19 import Aplenty
from .day20 import PulsePropagation
from .day21 import StepCounter
from .day22 import SandSlabs

__all__ = [
    "Trebuchet",
    "CubeConundrum",
    "GearRatios",
    "Scratchcards",
    "SeedFertilizer",
    "WaitForIt",
    "CamelCards",
    "HauntedWasteland",
    "MirageMaintenance",
    "PipeMazePuzzle",
    "CosmicExpansion",
    "HotSprings",
    "PointOfIncidence",
    "ParabolicReflectorDish",
    "LensLibrary",
    "FloorWillBeLava",
    "ClumsyCrucible",
    "LavaductLagoon",
    "Aplenty",
    "PulsePropagation",
    "StepCounter",
    "SandSlabs",
]
