import logging

import pytest

from life_universe.coordinate import Coordinate, add
from life_universe.space_time import SpaceTime
from tests.test_utils import (
    BLINKER_HORIZONTAL,
    BLINKER_VERTICAL,
    BLOCK,
    GLIDER,
    coords,
    make_world,
)


def test_block_is_still_life() -> None:
    space_time = SpaceTime(make_world(BLOCK))
    for _ in range(5):
        space_time.tic()
        assert space_time.present_world.living_cells() == coords(BLOCK)


def test_blinker_oscillates() -> None:
    space_time = SpaceTime(make_world(BLINKER_HORIZONTAL))
    space_time.tic()
    assert space_time.present_world.living_cells() == coords(BLINKER_VERTICAL)
    space_time.tic()
    assert space_time.present_world.living_cells() == coords(BLINKER_HORIZONTAL)


@pytest.mark.parametrize("periods", [1, 3])
def test_glider_travels_diagonally(periods: int) -> None:
    space_time = SpaceTime(make_world(GLIDER))
    space_time.run(4 * periods)
    shift = Coordinate(periods, -periods)
    expected = {add(c, shift) for c in coords(GLIDER)}
    assert set(space_time.present_world.living_cells()) == expected
    assert space_time.present_world.population == 5


def test_lone_cell_dies_and_world_empties() -> None:
    space_time = SpaceTime(make_world([(3, 3)]))
    space_time.tic()
    assert len(space_time.present_world) == 0
    space_time.tic()
    assert len(space_time.present_world) == 0


def test_tic_logs_generation(caplog: pytest.LogCaptureFixture) -> None:
    space_time = SpaceTime(make_world(BLINKER_HORIZONTAL))
    with caplog.at_level(logging.DEBUG, logger="life_universe"):
        space_time.tic()
    assert "Generation 1: population 3" in caplog.text
