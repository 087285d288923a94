# src/delvegen/mapgen/generator.py
# Level dispatch: level index -> generator kind -> generator function.

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from ..config import DEFAULTS, GenerationSettings
from ..grid import Grid
from ..point import WorldPoint
from ..rng import RandomGenerator
from ..tiles import DEFAULT_GLYPHS, GlyphRegistry
from . import cave, maze, overworld, rooms
from .placement import apply_all_placements

logger = logging.getLogger(__name__)

GenerateFn = Callable[..., Grid]


class GeneratorKind(Enum):
    OVERWORLD = "overworld"
    ROOMS = "rooms"
    CAVE = "cave"
    MAZE = "maze"


GENERATORS: Dict[GeneratorKind, GenerateFn] = {
    GeneratorKind.OVERWORLD: overworld.generate,
    GeneratorKind.ROOMS: rooms.generate,
    GeneratorKind.CAVE: cave.generate,
    GeneratorKind.MAZE: maze.generate,
}

_LEVEL_KINDS = {
    0: GeneratorKind.OVERWORLD,
    1: GeneratorKind.ROOMS,
    2: GeneratorKind.CAVE,
    3: GeneratorKind.MAZE,
}


def kind_for_level(level: int) -> GeneratorKind:
    return _LEVEL_KINDS.get(level, GeneratorKind.ROOMS)


def default_dimensions(kind: GeneratorKind, settings: GenerationSettings = DEFAULTS) -> WorldPoint:
    w, h = {
        GeneratorKind.OVERWORLD: settings.overworld_dimensions,
        GeneratorKind.ROOMS: settings.room_dimensions,
        GeneratorKind.CAVE: settings.cave_dimensions,
        GeneratorKind.MAZE: settings.maze_dimensions,
    }[kind]
    return WorldPoint(w, h)


def make_map(
    rand: RandomGenerator,
    level: int,
    dimensions: Optional[WorldPoint] = None,
    settings: GenerationSettings = DEFAULTS,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
    kind: Optional[GeneratorKind] = None,
) -> Grid:
    kind = kind or kind_for_level(level)
    dim = dimensions or default_dimensions(kind, settings)
    logger.debug("Generating level %d as %s (%dx%d)", level, kind.value, dim.x, dim.y)
    grid = GENERATORS[kind](dim, rand, level, settings=settings, registry=registry)
    if level != 0 and rand.is_one_in(settings.dark_level_one_in):
        grid.is_dark = True
    return grid


def make_level(
    rand: RandomGenerator,
    level: int,
    dimensions: Optional[WorldPoint] = None,
    settings: GenerationSettings = DEFAULTS,
    registry: GlyphRegistry = DEFAULT_GLYPHS,
    kind: Optional[GeneratorKind] = None,
) -> Grid:
    """make_map plus stairs. NoFreeSpaceError from stair placement propagates."""
    grid = make_map(rand, level, dimensions, settings, registry, kind)
    apply_all_placements(grid, rand, registry)
    return grid


def generate_grid(
    seed: int,
    level: int,
    dimensions: Optional[WorldPoint] = None,
    settings: GenerationSettings = DEFAULTS,
) -> Grid:
    # Each call owns a fresh generator, so levels can be built in parallel.
    rand = RandomGenerator(seed)
    return make_level(rand, level, dimensions, settings)
