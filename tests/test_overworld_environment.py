# tests/test_overworld_environment.py
from delvegen.environment import EnvEffect, add_static_cell_effects
from delvegen.grid import Grid
from delvegen.mapgen import overworld
from delvegen.point import WorldPoint
from delvegen.rng import RandomGenerator
from delvegen.tiles import Glyph

def test_overworld_rim_is_rock():
    grid = overworld.generate(WorldPoint(64, 32), RandomGenerator(1), 0)
    for p in grid.iter_points():
        if p.x in (0, 63) or p.y in (0, 31):
            assert grid.glyph_at(p) == Glyph.ROCK

def test_overworld_is_deterministic_and_has_water():
    a = overworld.generate(WorldPoint(64, 32), RandomGenerator(6), 0)
    b = overworld.generate(WorldPoint(64, 32), RandomGenerator(6), 0)
    assert a.as_matrix() == b.as_matrix()
    assert any(v == Glyph.DEEP_WATER for row in a.as_matrix() for v in row)

def test_overworld_point_of_interest_skipped_when_crowded():
    # 2x2 has no interior for the free-space search; generation still succeeds
    grid = overworld.generate(WorldPoint(2, 2), RandomGenerator(1), 0)
    assert grid.dimensions == WorldPoint(2, 2)

def poison_grid():
    grid = Grid(WorldPoint(5, 5), Glyph.REGULAR_FLOOR)
    grid.cell(WorldPoint(2, 2)).env = Glyph.POISON_MUSHROOM
    grid.cell(WorldPoint(4, 4)).env = Glyph.ARCANE_SIGIL
    return grid

def test_poison_spreads_to_neighbours():
    grid = add_static_cell_effects(poison_grid())
    for n in WorldPoint(2, 2).neighbors(1):
        assert EnvEffect.POISON in grid.cell(n).effects
    assert not grid.cell(WorldPoint(2, 2)).effects
    assert not grid.cell(WorldPoint(0, 0)).effects
    assert grid.cell(WorldPoint(4, 4)).light_radius == 3
    assert grid.cell(WorldPoint(0, 0)).light_radius == 0

def test_effects_are_recomputed_not_accumulated():
    grid = add_static_cell_effects(poison_grid())
    first = [[set(c.effects) for c in row] for row in grid.cells]
    add_static_cell_effects(grid)
    assert [[c.effects for c in row] for row in grid.cells] == first
    grid.cell(WorldPoint(2, 2)).env = Glyph.REGULAR_FLOOR
    add_static_cell_effects(grid)
    assert all(not c.effects for row in grid.cells for c in row)
