# src/delvegen/mapgen/shapes.py
# Cellular-automaton blob growth for lakes, chasms, moss patches.

import logging
from typing import Set

from ..point import WorldPoint
from ..rng import RandomGenerator

logger = logging.getLogger(__name__)


def grow_irregular_shape(
    dim: WorldPoint,
    rand: RandomGenerator,
    max_size: int,
    iterations: int,
    margin: int = 1,
) -> Set[WorldPoint]:
    """
    Grow a blob from one random seed point.

    Each iteration every member offers each of its 8 neighbours a 1-in-3
    chance to join; joins are collected into a copy and swapped in at the end
    so the result does not depend on set order. Growth stops after
    `iterations` rounds or once the size reaches `max_size`. The size check
    runs between rounds, so the final round may overshoot max_size (soft cap).

    Points stay `margin` cells away from every edge. Grids too small for the
    margin fall back to margin 0.
    """
    if dim.x <= 0 or dim.y <= 0:
        logger.warning("Cannot grow a shape in %dx%d", dim.x, dim.y)
        return set()
    if dim.x <= 2 * margin or dim.y <= 2 * margin:
        margin = 0
    lo_x, hi_x = margin, dim.x - margin
    lo_y, hi_y = margin, dim.y - margin

    start = WorldPoint(rand.random_integer(lo_x, hi_x), rand.random_integer(lo_y, hi_y))
    shape = {start}

    i = 0
    while i < iterations and len(shape) < max_size:
        grown = set(shape)
        # sorted: draw order must not depend on set iteration order
        for p in sorted(shape, key=WorldPoint.as_tuple):
            for n in p.neighbors(1):
                if rand.is_one_in(3) and lo_x <= n.x < hi_x and lo_y <= n.y < hi_y:
                    grown.add(n)
        shape = grown
        i += 1
    return shape
