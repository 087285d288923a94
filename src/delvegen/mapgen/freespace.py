# src/delvegen/mapgen/freespace.py
# Locating cells for stairs, points of interest, and spawns.

from collections import deque
from typing import Callable, Optional, Set

from ..grid import Grid
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import Glyph

GlyphPredicate = Callable[[Glyph], bool]


class NoFreeSpaceError(RuntimeError):
    """A full scan found no cell matching the request."""


def is_regular_floor(glyph: Glyph) -> bool:
    return glyph == Glyph.REGULAR_FLOOR


def find_free(
    grid: Grid,
    rand: RandomGenerator,
    accept: GlyphPredicate = is_regular_floor,
    margin: int = 1,
) -> WorldPoint:
    """
    Random start inside the `margin`-wide border, then a row-major scan that
    wraps at the right edge and the bottom row. The first cell whose glyph
    passes `accept` and that holds no mob wins.

    Raises NoFreeSpaceError after every interior cell has been visited once.
    """
    dim = grid.dimensions
    x0, x1 = margin, dim.x - 1 - margin
    y0, y1 = margin, dim.y - 1 - margin
    if x1 < x0 or y1 < y0:
        raise NoFreeSpaceError(f"no interior cells in {dim.x}x{dim.y} with margin {margin}")

    x = rand.random_integer_closed_range(x0, x1)
    y = rand.random_integer_closed_range(y0, y1)
    width = x1 - x0 + 1
    total = width * (y1 - y0 + 1)
    for _ in range(total):
        cell = grid.cells[y][x]
        if accept(cell.env) and not cell.is_occupied():
            return WorldPoint(x, y)
        x += 1
        if x > x1:
            x = x0
            y += 1
            if y > y1:
                y = y0
    raise NoFreeSpaceError(f"no free space found in {dim.x}x{dim.y}")


def find_glyph(grid: Grid, rand: RandomGenerator, glyph: Glyph) -> WorldPoint:
    return find_free(grid, rand, lambda g: g == glyph)


def find_free_adjacent(point: WorldPoint, grid: Grid, max_radius: int) -> Optional[WorldPoint]:
    """Nearest-ring search around point for empty regular floor; None if nothing within max_radius."""
    for radius in range(1, max_radius + 1):
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx == 0 and dy == 0:
                    continue
                p = point.offset(dx, dy)
                if not grid.is_legal_point(p):
                    continue
                cell = grid.cell(p)
                if cell.env == Glyph.REGULAR_FLOOR and cell.corpse is None and not cell.is_occupied():
                    return p
    return None


def find_nearest_cell_with_glyph(start: WorldPoint, grid: Grid, target: Glyph) -> Optional[WorldPoint]:
    """Breadth-first search over 8-neighbours; None when start is illegal or nothing matches."""
    if not grid.is_legal_point(start):
        return None
    queue = deque([start])
    seen: Set[WorldPoint] = {start}
    while queue:
        p = queue.popleft()
        if grid.cell(p).env == target:
            return p
        for n in p.neighbors(1):
            if n not in seen and grid.is_legal_point(n):
                seen.add(n)
                queue.append(n)
    return None
