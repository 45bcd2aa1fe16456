"""Generation stepper.

:class:`SpaceTime` owns two worlds: the *present*, which is only ever read,
and the *future*, which is only ever written. One :meth:`SpaceTime.tic`
fills the future from the present, promotes it and starts a fresh, empty
future.

Only touched coordinates and their neighbors are evaluated. A cell can only
change state if it or one of its neighbors is alive, so this covers every
possible change while keeping the work proportional to the active region.
Each coordinate is written to the future at most once per generation: the
first evaluation wins and later visits of the same coordinate are skipped.
"""

import logging

from life_universe.coordinate import Coordinate
from life_universe.world import World

log = logging.getLogger(__name__)


class SpaceTime:
    """Drives a :class:`World` forward one generation at a time.

    Attributes:
        present_world (World): Current generation, read-only during a tic.
        future_world (World): Generation under construction.
        generation (int): Number of completed tics (0-based).
    """

    def __init__(self, starting_world: World) -> None:
        self.present_world = starting_world
        self.future_world = World(rule=starting_world.rule)
        self.generation = 0

    def tic(self) -> None:
        """Advance by one generation."""
        self.update_the_future()
        self.present_world = self.future_world
        self.future_world = World(rule=self.present_world.rule)
        self.generation += 1
        log.debug(
            "Generation %d: population %d",
            self.generation,
            self.present_world.population,
        )

    def run(self, generations: int) -> World:
        """Tic ``generations`` times and return the resulting present world.

        Raises:
            ValueError: If ``generations`` is negative.
        """
        if generations < 0:
            raise ValueError("Number of generations must be non-negative")
        for _ in range(generations):
            self.tic()
        return self.present_world

    def update_the_future(self) -> None:
        """Evaluate every touched coordinate and its neighbors into the future.

        Dead entries are dropped from the future once all coordinates have
        been visited.
        """
        for coordinates in self.present_world.plane:
            self.update_cell(coordinates)
        self.future_world.cleanup()

    def update_cell(self, coordinates: Coordinate) -> None:
        """Write the fate of ``coordinates`` and its neighbors, once each."""
        self._update_if_untouched(coordinates)
        for n_coordinates in World.neighbors(coordinates):
            self._update_if_untouched(n_coordinates)

    def _update_if_untouched(self, coordinates: Coordinate) -> None:
        if self.future_world.untouched(coordinates):
            self.future_world.set(
                self.present_world.survives(coordinates), coordinates
            )
