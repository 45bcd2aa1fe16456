"""Coordinate value type and Moore-neighborhood helpers.

The plane is unbounded: any pair of integers is a valid coordinate, including
negative ones. Coordinates are frozen dataclasses so they compare and hash by
value and can key a persistent map.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Coordinate:
    """Integer point on the plane.

    Attributes:
        x: Column, growing to the right.
        y: Row, growing upwards.
    """

    x: int
    y: int


NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = (
    Coordinate(0, 1),  # top
    Coordinate(1, 1),  # top-right
    Coordinate(1, 0),  # right
    Coordinate(1, -1),  # bottom-right
    Coordinate(0, -1),  # bottom
    Coordinate(-1, -1),  # bottom-left
    Coordinate(-1, 0),  # left
    Coordinate(-1, 1),  # top-left
)


def add(a: Coordinate, b: Coordinate) -> Coordinate:
    """Return the component-wise sum ``a + b``."""
    return Coordinate(a.x + b.x, a.y + b.y)


def neighbors(coordinates: Coordinate) -> Tuple[Coordinate, ...]:
    """Return the eight Moore neighbors of ``coordinates``.

    The order follows ``NEIGHBOR_OFFSETS``: clockwise starting from the cell
    directly above.
    """
    return tuple(add(coordinates, offset) for offset in NEIGHBOR_OFFSETS)
