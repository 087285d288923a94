# tests/test_generator.py
import dataclasses

import pytest

from delvegen.config import DEFAULTS
from delvegen.mapgen.generator import (
    GENERATORS, GeneratorKind, default_dimensions, generate_grid, kind_for_level, make_level, make_map,
)
from delvegen.point import WorldPoint
from delvegen.rng import RandomGenerator
from delvegen.tiles import Glyph

def test_level_dispatch():
    assert kind_for_level(0) is GeneratorKind.OVERWORLD
    assert kind_for_level(1) is GeneratorKind.ROOMS
    assert kind_for_level(2) is GeneratorKind.CAVE
    assert kind_for_level(3) is GeneratorKind.MAZE
    assert kind_for_level(4) is GeneratorKind.ROOMS
    assert kind_for_level(57) is GeneratorKind.ROOMS
    assert set(GENERATORS) == set(GeneratorKind)

def test_default_dimensions():
    assert default_dimensions(GeneratorKind.ROOMS) == WorldPoint(96, 48)
    assert default_dimensions(GeneratorKind.CAVE) == WorldPoint(64, 32)

def test_stairs_are_placed_on_dungeon_levels():
    for level in (1, 2, 3, 7):
        grid = make_level(RandomGenerator(level * 31), level)
        assert grid.level == level
        assert grid.glyph_at(grid.down_stair_pos) == Glyph.STAIRS_DOWN
        assert grid.glyph_at(grid.up_stair_pos) == Glyph.STAIRS_UP
        assert grid.up_stair_pos != grid.down_stair_pos

def test_overworld_has_only_a_down_stair():
    grid = make_level(RandomGenerator(1), 0)
    assert grid.up_stair_pos is None
    assert grid.glyph_at(grid.down_stair_pos) == Glyph.STAIRS_DOWN
    assert sum(v == Glyph.STAIRS_DOWN for row in grid.as_matrix() for v in row) == 1

def test_generate_grid_is_deterministic():
    for level in range(4):
        assert generate_grid(7, level).as_matrix() == generate_grid(7, level).as_matrix()
    assert generate_grid(7, 1).as_matrix() != generate_grid(8, 1).as_matrix()

def test_overworld_is_never_dark():
    assert not any(make_map(RandomGenerator(s), 0, WorldPoint(16, 12)).is_dark for s in range(60))
    assert any(make_map(RandomGenerator(s), 5, WorldPoint(16, 12)).is_dark for s in range(200))

def test_every_kind_stays_in_bounds_on_odd_sizes():
    sizes = [WorldPoint(1, 1), WorldPoint(2, 7), WorldPoint(5, 5), WorldPoint(7, 3), WorldPoint(12, 9), WorldPoint(33, 17)]
    for kind in GeneratorKind:
        for dim in sizes:
            grid = make_map(RandomGenerator(3), 1, dim, kind=kind)
            assert grid.dimensions == dim

def test_bad_dimensions_are_clamped():
    grid = make_map(RandomGenerator(1), 1, WorldPoint(0, -5))
    assert grid.dimensions == WorldPoint(1, 1)

def test_settings_are_immutable_and_replaceable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULTS.room_iterations = 3
    quick = dataclasses.replace(DEFAULTS, cave_max_iterations=0)
    grid = make_map(RandomGenerator(1), 2, settings=quick)
    assert all(v == Glyph.ROCK for row in grid.as_matrix() for v in row)
