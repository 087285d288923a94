# src/delvegen/mapgen/overworld.py
# Level 0: open ground scattered with rock, a rock rim, lakes and pools on top.

import logging

from ..config import DEFAULTS, GenerationSettings
from ..environment import add_static_cell_effects
from ..grid import Grid, normalize_dimensions
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry
from .catalog import OVERWORLD_LEVEL_TILES, TileCatalog, pick_floor_glyph, pick_wall_glyph
from .freespace import NoFreeSpaceError, find_free
from .shapes import grow_irregular_shape
from .terrain import add_mossy_floor

logger = logging.getLogger(__name__)

POINT_OF_INTEREST = Glyph.MAGNETITE


def seed_ground(grid: Grid, rand: RandomGenerator, tiles: TileCatalog, wall_one_in: int) -> None:
    dim = grid.dimensions
    for y in range(dim.y):
        for x in range(dim.x):
            cell = grid.cells[y][x]
            if rand.is_one_in(wall_one_in):
                cell.env = pick_wall_glyph(rand, tiles)
            else:
                cell.env = pick_floor_glyph(rand, tiles)
            if x == 0 or y == 0 or x == dim.x - 1 or y == dim.y - 1:
                cell.env = Glyph.ROCK


def stamp_blob(grid: Grid, rand: RandomGenerator, size: int, iterations: int, glyph: Glyph) -> int:
    area = grow_irregular_shape(grid.dimensions, rand, size, iterations)
    for p in area:
        grid.cell(p).env = glyph
    return len(area)


def generate(
    dim: WorldPoint,
    rand: RandomGenerator,
    level: int,
    settings: GenerationSettings = DEFAULTS,
    tiles: TileCatalog = OVERWORLD_LEVEL_TILES,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
) -> Grid:
    dim = normalize_dimensions(dim)
    grid = Grid(dim, Glyph.WALL, level)
    seed_ground(grid, rand, tiles, settings.overworld_wall_one_in)

    it = settings.overworld_feature_iterations
    stamp_blob(grid, rand, settings.lake_size, it, Glyph.DEEP_WATER)
    stamp_blob(grid, rand, settings.pond_size, it, Glyph.SHALLOW_WATER)
    stamp_blob(grid, rand, settings.lava_pool_size, it, Glyph.LAVA)
    stamp_blob(grid, rand, settings.mist_size, it, Glyph.MIST)

    try:
        p = find_free(grid, rand)
        grid.cell(p).env = POINT_OF_INTEREST
    except NoFreeSpaceError as e:
        logger.warning("Skipping overworld point of interest: %s", e)

    add_mossy_floor(grid, rand, settings)
    add_static_cell_effects(grid, registry)
    return grid
