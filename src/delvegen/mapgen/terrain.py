# src/delvegen/mapgen/terrain.py
# Blob-based terrain layers shared by the generators.

import logging
from dataclasses import dataclass
from typing import Collection, Iterable, Optional, Sequence, Set

from ..config import DEFAULTS, GenerationSettings
from ..grid import Grid
from ..point import WorldPoint
from ..rng import EmptyWeightsError, RandomGenerator
from ..tiles import Glyph
from .shapes import grow_irregular_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedFeature:
    glyph: Glyph
    weight: int
    min_size: int
    max_size: int
    iterations: int


CAVE_FEATURES = (
    WeightedFeature(Glyph.DEEP_WATER, 30, 5, 15, 10),
    WeightedFeature(Glyph.SHALLOW_WATER, 40, 5, 20, 10),
    WeightedFeature(Glyph.LAVA, 20, 3, 10, 8),
    WeightedFeature(Glyph.MIST, 10, 10, 30, 12),
)


def _stamp(grid: Grid, points: Iterable[WorldPoint], glyph: Glyph) -> int:
    n = 0
    for p in points:
        if grid.is_legal_point(p):
            grid.cell(p).env = glyph
            n += 1
    return n


def clear_map(grid: Grid, glyph: Glyph = Glyph.ROCK) -> Grid:
    for row in grid.cells:
        for cell in row:
            cell.env = glyph
    return grid


def select_weighted_feature(features: Sequence[WeightedFeature], rand: RandomGenerator) -> Optional[WeightedFeature]:
    try:
        return rand.weighted_pick((f, f.weight) for f in features)
    except EmptyWeightsError:
        logger.warning("No feature has a positive weight; skipping")
        return None


def generate_single_feature(
    feature: WeightedFeature,
    grid: Grid,
    rand: RandomGenerator,
) -> Grid:
    size = rand.random_integer_closed_range(feature.min_size, feature.max_size)
    area = grow_irregular_shape(grid.dimensions, rand, size, feature.iterations)
    _stamp(grid, area, feature.glyph)
    return grid


def generate_random_features(
    count: int,
    grid: Grid,
    rand: RandomGenerator,
    features: Sequence[WeightedFeature],
) -> Grid:
    """Stamp `count` features, each picked by weight and sized within its range."""
    for _ in range(count):
        feature = select_weighted_feature(features, rand)
        if feature is None:
            break
        generate_single_feature(feature, grid, rand)
    return grid


def apply_terrain_modifier(
    grid: Grid,
    rand: RandomGenerator,
    attempts: int,
    min_patch: int,
    max_patch: int,
    iterations: int,
    targets: Collection[Glyph],
    result: Glyph,
) -> Grid:
    """Turn `targets` glyphs into `result` inside `attempts` random patches."""
    if not targets:
        return grid
    for _ in range(attempts):
        size = rand.random_integer_closed_range(min_patch, max_patch)
        for p in grow_irregular_shape(grid.dimensions, rand, size, iterations):
            if grid.is_legal_point(p) and grid.cell(p).env in targets:
                grid.cell(p).env = result
    return grid


def add_mossy_floor(grid: Grid, rand: RandomGenerator, settings: GenerationSettings = DEFAULTS) -> Grid:
    attempts = rand.random_integer_closed_range(*settings.mossy_attempts)
    lo, hi = settings.mossy_patch_size
    return apply_terrain_modifier(
        grid, rand, attempts, lo, hi, settings.mossy_iterations,
        (Glyph.REGULAR_FLOOR,), Glyph.MOSSY_FLOOR,
    )


def add_chasm(
    grid: Grid,
    rand: RandomGenerator,
    size: int,
    iterations: int,
) -> Set[WorldPoint]:
    """
    Carve one chasm: blob cells get CHASM_CENTER, their 8-neighbours that are
    not already a centre get CHASM_EDGE. Returns the centre cells written.
    """
    area = grow_irregular_shape(grid.dimensions, rand, size, iterations)
    centers = {p for p in area if grid.is_legal_point(p)}
    _stamp(grid, centers, Glyph.CHASM_CENTER)
    for p in sorted(centers, key=WorldPoint.as_tuple):
        for n in p.neighbors(1):
            if not grid.is_legal_point(n):
                continue
            cell = grid.cell(n)
            if cell.env != Glyph.CHASM_CENTER:
                cell.env = Glyph.CHASM_EDGE
    return centers


def add_chasms(
    grid: Grid,
    rand: RandomGenerator,
    settings: GenerationSettings = DEFAULTS,
) -> int:
    count = rand.random_integer_closed_range(*settings.cave_chasms)
    for _ in range(count):
        add_chasm(grid, rand, settings.chasm_size, settings.chasm_iterations)
    logger.debug("Carved %d chasms", count)
    return count
