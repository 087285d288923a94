# src/delvegen/mapgen/placement.py
# Egress points. Runs after a generator has produced the map.

from ..grid import Grid
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry
from .freespace import find_free

# Overworld down-stair sits just east of the map centre when that cell is open.
OVERWORLD_STAIR_OFFSET = WorldPoint(3, 0)


def place_stair(grid: Grid, rand: RandomGenerator, stair: Glyph) -> WorldPoint:
    """Put `stair` on a free regular-floor cell. NoFreeSpaceError propagates."""
    p = find_free(grid, rand)
    grid.cell(p).env = stair
    grid.add_stair_info(stair, p)
    return p


def place_overworld_stairs(grid: Grid, rand: RandomGenerator, registry: GlyphRegistry = DEFAULT_GLYPHS) -> WorldPoint:
    center = WorldPoint(grid.dimensions.x // 2, grid.dimensions.y // 2)
    p = center + OVERWORLD_STAIR_OFFSET
    if grid.is_legal_point(p) and not registry.is_blocking(grid.cell(p).env):
        grid.cell(p).env = Glyph.STAIRS_DOWN
        grid.add_stair_info(Glyph.STAIRS_DOWN, p)
        return p
    return place_stair(grid, rand, Glyph.STAIRS_DOWN)


def apply_all_placements(grid: Grid, rand: RandomGenerator, registry: GlyphRegistry = DEFAULT_GLYPHS) -> None:
    """
    Order matters for determinism:
      level 0: down stair only (centre+offset, else free space)
      others:  down stair, then up stair
    """
    if grid.level == 0:
        place_overworld_stairs(grid, rand, registry)
        return
    place_stair(grid, rand, Glyph.STAIRS_DOWN)
    place_stair(grid, rand, Glyph.STAIRS_UP)
