# tests/test_freespace.py
import pytest

from delvegen.grid import Grid
from delvegen.mapgen.freespace import (
    NoFreeSpaceError, find_free, find_free_adjacent, find_glyph, find_nearest_cell_with_glyph,
)
from delvegen.point import WorldPoint
from delvegen.rng import RandomGenerator
from delvegen.tiles import Glyph

def test_fully_blocked_grid_raises():
    grid = Grid(WorldPoint(10, 10), Glyph.ROCK)
    with pytest.raises(NoFreeSpaceError):
        find_free(grid, RandomGenerator(1))

def test_occupied_floor_counts_as_blocked():
    grid = Grid(WorldPoint(6, 6), Glyph.REGULAR_FLOOR)
    for row in grid.cells:
        for c in row:
            c.mob = object()
    with pytest.raises(NoFreeSpaceError):
        find_free(grid, RandomGenerator(1))

def test_finds_the_only_free_cell_from_any_start():
    grid = Grid(WorldPoint(10, 8), Glyph.ROCK)
    grid.cell(WorldPoint(7, 3)).env = Glyph.REGULAR_FLOOR
    for seed in range(25):
        assert find_free(grid, RandomGenerator(seed)) == WorldPoint(7, 3)

def test_border_cells_are_not_searched():
    grid = Grid(WorldPoint(8, 8), Glyph.ROCK)
    grid.cell(WorldPoint(0, 4)).env = Glyph.REGULAR_FLOOR
    with pytest.raises(NoFreeSpaceError):
        find_free(grid, RandomGenerator(1))
    with pytest.raises(NoFreeSpaceError):
        find_free(Grid(WorldPoint(2, 2), Glyph.REGULAR_FLOOR), RandomGenerator(1))

def test_custom_predicate():
    grid = Grid(WorldPoint(9, 9), Glyph.REGULAR_FLOOR)
    grid.cell(WorldPoint(4, 6)).env = Glyph.LAVA
    assert find_glyph(grid, RandomGenerator(3), Glyph.LAVA) == WorldPoint(4, 6)

def test_free_adjacent_and_nearest():
    grid = Grid(WorldPoint(9, 9), Glyph.ROCK)
    grid.cell(WorldPoint(6, 4)).env = Glyph.REGULAR_FLOOR
    assert find_free_adjacent(WorldPoint(4, 4), grid, 1) is None
    assert find_free_adjacent(WorldPoint(4, 4), grid, 2) == WorldPoint(6, 4)
    assert find_nearest_cell_with_glyph(WorldPoint(0, 0), grid, Glyph.REGULAR_FLOOR) == WorldPoint(6, 4)
    assert find_nearest_cell_with_glyph(WorldPoint(0, 0), grid, Glyph.LAVA) is None
    assert find_nearest_cell_with_glyph(WorldPoint(-1, 0), grid, Glyph.ROCK) is None
