"""Sparse Conway's Game of Life on an unbounded integer plane.

:class:`World` stores touched cells and judges them with a :class:`Rule`;
:class:`SpaceTime` steps a world forward one generation at a time.
"""

from .coordinate import NEIGHBOR_OFFSETS, Coordinate
from .rules import CONWAY, Rule
from .space_time import SpaceTime
from .types import CellState
from .world import World

__all__ = [
    "CONWAY",
    "CellState",
    "Coordinate",
    "NEIGHBOR_OFFSETS",
    "Rule",
    "SpaceTime",
    "World",
]
