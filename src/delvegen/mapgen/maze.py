# src/delvegen/mapgen/maze.py
# Maze levels: recursive backtracker on the odd lattice, run with an explicit
# stack so large maps cannot exhaust the interpreter's recursion limit.

import logging
from typing import Iterator, List, Tuple

from ..config import DEFAULTS, GenerationSettings
from ..environment import add_static_cell_effects
from ..grid import Grid, normalize_dimensions
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry
from .catalog import MAZE_LEVEL_TILES, TileCatalog, pick_floor_glyph, pick_wall_glyph

logger = logging.getLogger(__name__)


def _in_carve_bounds(dim: WorldPoint, p: WorldPoint) -> bool:
    return 0 < p.x < dim.x - 1 and 0 < p.y < dim.y - 1


def _candidates(rand: RandomGenerator, p: WorldPoint) -> List[WorldPoint]:
    return list(rand.shuffle([p.offset(2, 0), p.offset(-2, 0), p.offset(0, 2), p.offset(0, -2)]))


def carve_maze(
    grid: Grid,
    rand: RandomGenerator,
    start: WorldPoint,
    tiles: TileCatalog = MAZE_LEVEL_TILES,
    door_one_in: int = 25,
) -> int:
    """
    Depth-first carve from start. Entering a cell floors it and shuffles its
    four two-step candidates; each candidate that is in bounds and still a
    wall gets its midpoint carved (floor, or a closed door 1 time in
    door_one_in) and is entered next. Returns the number of lattice cells
    carved.
    """
    dim = grid.dimensions
    walls = tiles.wall_glyphs

    grid.cell(start).env = Glyph.REGULAR_FLOOR
    stack: List[Tuple[WorldPoint, Iterator[WorldPoint]]] = [(start, iter(_candidates(rand, start)))]
    carved = 1
    while stack:
        here, pending = stack[-1]
        nxt = next(pending, None)
        if nxt is None:
            stack.pop()
            continue
        if not _in_carve_bounds(dim, nxt) or grid.cell(nxt).env not in walls:
            continue
        mid = WorldPoint((here.x + nxt.x) // 2, (here.y + nxt.y) // 2)
        grid.cell(mid).env = pick_floor_glyph(rand, tiles)
        if rand.is_one_in(door_one_in):
            grid.cell(mid).env = Glyph.DOOR_CLOSED
        grid.cell(nxt).env = Glyph.REGULAR_FLOOR
        stack.append((nxt, iter(_candidates(rand, nxt))))
        carved += 1
    return carved


def odd_start(dim: WorldPoint, rand: RandomGenerator) -> WorldPoint:
    return WorldPoint(
        1 + 2 * rand.random_integer((dim.x - 1) // 2),
        1 + 2 * rand.random_integer((dim.y - 1) // 2),
    )


def generate(
    dim: WorldPoint,
    rand: RandomGenerator,
    level: int,
    settings: GenerationSettings = DEFAULTS,
    tiles: TileCatalog = MAZE_LEVEL_TILES,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
) -> Grid:
    dim = normalize_dimensions(dim)
    grid = Grid(dim, tiles.default_wall, level)
    for row in grid.cells:
        for cell in row:
            cell.env = pick_wall_glyph(rand, tiles)

    if dim.x < 3 or dim.y < 3:
        logger.warning("Map %dx%d too small for a maze; leaving it solid", dim.x, dim.y)
    else:
        start = odd_start(dim, rand)
        n = carve_maze(grid, rand, start, tiles, settings.maze_door_one_in)
        logger.debug("Maze carved %d lattice cells from (%d, %d)", n, start.x, start.y)

    add_static_cell_effects(grid, registry)
    return grid
