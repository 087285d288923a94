# src/delvegen/mapgen/rooms.py
# Standard levels: overlapping rectangular rooms with a floor rim, a wall ring
# just inside it, and a few doors punched through that ring.

import logging
from typing import List, Tuple

from ..config import DEFAULTS, GenerationSettings
from ..environment import add_static_cell_effects
from ..grid import Grid, normalize_dimensions
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry
from .catalog import DEFAULT_LEVEL_TILES, TileCatalog, pick_floor_glyph, pick_wall_glyph
from .terrain import add_mossy_floor

logger = logging.getLogger(__name__)

# A room needs a rim, a wall ring, and something in between.
MIN_MAP_SIDE = 4


def pick_room(dim: WorldPoint, rand: RandomGenerator, settings: GenerationSettings) -> Tuple[WorldPoint, WorldPoint]:
    """
    Return (upper_left, size). The room spans upper_left .. upper_left+size
    inclusive; sides are clamped so that span always fits in the map.
    """
    h = rand.random_integer_closed_range(*settings.room_short_side)
    w = rand.random_integer_closed_range(*settings.room_long_side)
    if rand.is_one_in(2):
        w, h = h, w
    w = min(w, dim.x - 2)
    h = min(h, dim.y - 2)
    ux = rand.random_integer(1, dim.x - w - 1)
    uy = rand.random_integer(1, dim.y - h - 1)
    return WorldPoint(ux, uy), WorldPoint(w, h)


def draw_room(
    grid: Grid,
    rand: RandomGenerator,
    upper_left: WorldPoint,
    size: WorldPoint,
    solid: bool,
    tiles: TileCatalog = DEFAULT_LEVEL_TILES,
) -> List[WorldPoint]:
    """
    Carve one room. The outer rim gets floor glyphs, the ring inside it gets
    wall glyphs, and the core is wall (solid) or floor. Returns the wall-ring
    cells, which are the door candidates.
    """
    center = pick_wall_glyph(rand, tiles) if solid else pick_floor_glyph(rand, tiles)
    x2, y2 = size.x - 1, size.y - 1
    ring: List[WorldPoint] = []
    for y in range(size.y + 1):
        for x in range(size.x + 1):
            p = WorldPoint(upper_left.x + x, upper_left.y + y)
            is_edge = x == 0 or y == 0 or x == size.x or y == size.y
            is_ring = not is_edge and (x == 1 or y == 1 or x == x2 or y == y2)
            if is_edge:
                glyph = pick_floor_glyph(rand, tiles)
            elif is_ring:
                glyph = pick_wall_glyph(rand, tiles)
                ring.append(p)
            else:
                glyph = center
            grid.cell(p).env = glyph
    return ring


def place_doors(grid: Grid, rand: RandomGenerator, ring: List[WorldPoint], settings: GenerationSettings) -> None:
    # Positions are drawn with replacement; a repeat just re-closes the same door.
    if not ring:
        return
    for _ in range(rand.random_integer_closed_range(*settings.room_doors)):
        grid.cell(ring[rand.random_integer(len(ring))]).env = Glyph.DOOR_CLOSED


def generate(
    dim: WorldPoint,
    rand: RandomGenerator,
    level: int,
    settings: GenerationSettings = DEFAULTS,
    tiles: TileCatalog = DEFAULT_LEVEL_TILES,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
) -> Grid:
    dim = normalize_dimensions(dim)
    grid = Grid(dim, Glyph.ROCK, level)

    if dim.x < MIN_MAP_SIDE or dim.y < MIN_MAP_SIDE:
        logger.warning("Map %dx%d too small for rooms; leaving it solid", dim.x, dim.y)
    else:
        for _ in range(settings.room_iterations):
            upper_left, size = pick_room(dim, rand, settings)
            solid = rand.is_one_in(settings.room_solid_one_in)
            ring = draw_room(grid, rand, upper_left, size, solid, tiles)
            if not solid:
                place_doors(grid, rand, ring, settings)
        logger.debug("Carved %d rooms on level %d", settings.room_iterations, level)

    add_mossy_floor(grid, rand, settings)
    add_static_cell_effects(grid, registry)
    return grid
