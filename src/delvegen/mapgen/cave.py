# src/delvegen/mapgen/cave.py
# Cave levels: drunkard's-walk caverns dressed with water, lava, mist and chasms.
# Terrain layers are skipped when the walk opened nothing, so solid rock stays
# solid.

import logging
from typing import Optional, Sequence

from ..config import DEFAULTS, GenerationSettings
from ..environment import add_static_cell_effects
from ..grid import Grid, normalize_dimensions
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry
from .carve import drunkards_walk
from .catalog import CAVE_LEVEL_TILES, TileCatalog
from .terrain import CAVE_FEATURES, WeightedFeature, add_chasms, add_mossy_floor, clear_map, generate_random_features

logger = logging.getLogger(__name__)


def generate(
    dim: WorldPoint,
    rand: RandomGenerator,
    level: int,
    settings: GenerationSettings = DEFAULTS,
    tiles: TileCatalog = CAVE_LEVEL_TILES,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
    features: Sequence[WeightedFeature] = CAVE_FEATURES,
    max_iterations: Optional[int] = None,
) -> Grid:
    dim = normalize_dimensions(dim)
    grid = Grid(dim, Glyph.ROCK, level)
    clear_map(grid, Glyph.ROCK)

    steps = settings.cave_max_iterations if max_iterations is None else max_iterations
    cavern = drunkards_walk(grid, rand, tiles, settings.cave_wall_probability, steps)

    if cavern:
        generate_random_features(settings.cave_feature_count, grid, rand, features)
        add_chasms(grid, rand, settings)
    else:
        logger.debug("Nothing carved on level %d; skipping terrain layers", level)

    add_mossy_floor(grid, rand, settings)
    add_static_cell_effects(grid, registry)
    return grid
