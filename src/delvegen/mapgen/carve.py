# src/delvegen/mapgen/carve.py
# Drunkard's-walk carve. The walker lives inside a 2-cell margin so that the
# wall reinforcement around it never touches the outer rim.

import logging
from typing import Set, Tuple

from ..grid import Grid
from ..point import CARDINALS, WorldPoint
from ..rng import RandomGenerator
from .catalog import TileCatalog, pick_floor_glyph, pick_wall_glyph

logger = logging.getLogger(__name__)

WALK_MARGIN = 2
MIN_WALK_SIZE = 2 * WALK_MARGIN + 1


def in_walk_bounds(dim: WorldPoint, x: int, y: int) -> bool:
    return WALK_MARGIN <= x < dim.x - WALK_MARGIN and WALK_MARGIN <= y < dim.y - WALK_MARGIN


def random_step(rand: RandomGenerator) -> Tuple[int, int]:
    return CARDINALS[rand.random_integer(len(CARDINALS))]


def drunkards_walk(
    grid: Grid,
    rand: RandomGenerator,
    tiles: TileCatalog,
    wall_probability: float = 0.5,
    max_iterations: int = 10000,
) -> Set[WorldPoint]:
    """
    Walk from the centre for up to max_iterations steps, writing a floor
    glyph at every cell visited. A step that would leave the walk bounds
    sends the walker back to the centre (this is what grows several
    connected lobes). After each step the 8 neighbours are each given
    `wall_probability` to become a wall glyph; cells already holding a floor
    glyph are left alone, so carved floor never reverts.

    Returns the set of cells the walker marked as floor.
    """
    dim = grid.dimensions
    carved: Set[WorldPoint] = set()
    if dim.x < MIN_WALK_SIZE or dim.y < MIN_WALK_SIZE:
        logger.warning("Map %dx%d too small for a drunkard's walk", dim.x, dim.y)
        return carved

    floors = tiles.floor_glyphs
    cx, cy = dim.x // 2, dim.y // 2
    x, y = cx, cy

    for _ in range(max_iterations):
        grid.cells[y][x].env = pick_floor_glyph(rand, tiles)
        carved.add(WorldPoint(x, y))

        dx, dy = random_step(rand)
        nx, ny = x + dx, y + dy
        if not in_walk_bounds(dim, nx, ny):
            x, y = cx, cy
            continue
        x, y = nx, ny

        for n in WorldPoint(x, y).neighbors(1):
            if rand.next() < wall_probability:
                cell = grid.cells[n.y][n.x]
                if cell.env not in floors:
                    cell.env = pick_wall_glyph(rand, tiles)

    logger.debug("Drunkard's walk carved %d cells in %d steps", len(carved), max_iterations)
    return carved
