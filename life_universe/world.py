"""Sparse plane of cells.

A :class:`World` stores only the coordinates it has touched, as a persistent
map from :class:`~life_universe.coordinate.Coordinate` to ``bool``:

* absent: the coordinate is *untouched* and counts as dead,
* ``True``: the cell is alive,
* ``False``: the cell was evaluated and is dead.

While a generation is being built the map holds dead entries as well, which
is how the stepper avoids evaluating a coordinate twice. :meth:`World.cleanup`
drops them, leaving the canonical form where only live cells remain.

Mutating methods rebind :attr:`World.plane` to a new ``PMap``; any ``plane``
reference taken earlier is an unchanging snapshot.
"""

import logging
from typing import Any, Iterable, Optional, Tuple

from pyrsistent import PMap, PSet, pmap, pset

from life_universe import coordinate
from life_universe.coordinate import Coordinate
from life_universe.rules import CONWAY, Rule
from life_universe.types import CellState

log = logging.getLogger(__name__)


class World:
    """Unbounded sparse grid with the rule used to judge it.

    Attributes:
        plane (PMap[Coordinate, bool]): Touched coordinates and their liveness.
        rule (Rule): Survival rule applied by :meth:`survives`.
    """

    def __init__(
        self, cell_coordinates: Iterable[Coordinate] = (), rule: Rule = CONWAY
    ) -> None:
        self.plane: PMap[Coordinate, bool] = pmap()
        self.rule = rule
        for coordinates in cell_coordinates:
            self.set(True, coordinates)

    def get(self, coordinates: Coordinate) -> Optional[bool]:
        """Return the stored liveness, or ``None`` if untouched."""
        return self.plane.get(coordinates)

    def set(self, alive: bool, coordinates: Coordinate) -> None:
        """Store ``alive`` at ``coordinates``, overwriting any previous entry."""
        self.plane = self.plane.set(coordinates, alive)

    def untouched(self, coordinates: Coordinate) -> bool:
        return self.get(coordinates) is None

    def alive(self, coordinates: Coordinate) -> bool:
        return bool(self.get(coordinates))

    def dead(self, coordinates: Coordinate) -> bool:
        return not self.alive(coordinates)

    def state(self, coordinates: Coordinate) -> CellState:
        """Return the tri-state view of ``coordinates``."""
        value = self.get(coordinates)
        if value is None:
            return CellState.UNTOUCHED
        return CellState.ALIVE if value else CellState.DEAD

    def survives(self, coordinates: Coordinate) -> bool:
        """Return whether the cell is alive next generation.

        Judged from the stored state of the cell and its eight neighbors; the
        world itself is not modified. Untouched cells are dead.
        """
        return self.rule.next_state(
            self.alive(coordinates), self.living_neighbors(coordinates)
        )

    def living_neighbors(self, coordinates: Coordinate) -> int:
        """Count live cells among the eight neighbors (0 to 8)."""
        return sum(1 for n in World.neighbors(coordinates) if self.alive(n))

    def cleanup(self) -> None:
        """Drop every dead entry, keeping live entries unchanged."""
        before = len(self.plane)
        self.plane = pmap(
            {coordinates: value for coordinates, value in self.plane.items() if value}
        )
        log.debug("Dropped %d dead entries", before - len(self.plane))

    def living_cells(self) -> PSet[Coordinate]:
        """Return the set of live coordinates."""
        return pset(coordinates for coordinates, value in self.plane.items() if value)

    @property
    def population(self) -> int:
        """Number of live cells."""
        return sum(1 for value in self.plane.values() if value)

    def __len__(self) -> int:
        return len(self.plane)

    def __contains__(self, coordinates: object) -> bool:
        return coordinates in self.plane

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self.plane == other.plane and self.rule == other.rule

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"World(population={self.population}, rule={self.rule.notation!r})"

    @staticmethod
    def neighbors(coordinates: Coordinate) -> Tuple[Coordinate, ...]:
        """See :func:`life_universe.coordinate.neighbors`."""
        return coordinate.neighbors(coordinates)

    @staticmethod
    def add(a: Coordinate, b: Coordinate) -> Coordinate:
        """See :func:`life_universe.coordinate.add`."""
        return coordinate.add(a, b)
