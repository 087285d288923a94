# src/delvegen/mapgen/catalog.py
# Per-theme weighted tile lists and the rock selector that draws from them.

import logging
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from ..rng import EmptyWeightsError, RandomGenerator
from ..tiles import Glyph

logger = logging.getLogger(__name__)

Rock = Tuple[Glyph, float]   # (glyph, relative weight)


@dataclass(frozen=True)
class TileCatalog:
    name: str
    floor: Tuple[Rock, ...]
    wall: Tuple[Rock, ...]
    # Returned when a list cannot be drawn from (empty or all-zero weights).
    default_floor: Glyph = Glyph.REGULAR_FLOOR
    default_wall: Glyph = Glyph.ROCK

    def __post_init__(self):
        for glyph, weight in self.floor + self.wall:
            if weight < 0:
                raise ValueError(f"{self.name}: negative weight {weight} for {glyph.name}")

    @property
    def floor_glyphs(self) -> FrozenSet[Glyph]:
        return frozenset(g for g, _ in self.floor) | {self.default_floor}

    @property
    def wall_glyphs(self) -> FrozenSet[Glyph]:
        return frozenset(g for g, _ in self.wall) | {self.default_wall}


def _pick(rand: RandomGenerator, rocks: Tuple[Rock, ...], default: Glyph, label: str) -> Glyph:
    try:
        return rand.weighted_pick(rocks)
    except EmptyWeightsError:
        logger.warning("%s list has no positive weight; using %s", label, default.name)
        return default


def pick_floor_glyph(rand: RandomGenerator, tiles: TileCatalog) -> Glyph:
    return _pick(rand, tiles.floor, tiles.default_floor, f"{tiles.name} floor")


def pick_wall_glyph(rand: RandomGenerator, tiles: TileCatalog) -> Glyph:
    return _pick(rand, tiles.wall, tiles.default_wall, f"{tiles.name} wall")


# Weights aim for a rough base of 1000 for common things.

DEFAULT_LEVEL_TILES = TileCatalog(
    name="default",
    floor=(
        (Glyph.REGULAR_FLOOR, 940),
        (Glyph.SPIKY_CRYSTAL, 10),
        (Glyph.LAVA, 10),
        (Glyph.GLOWING_MUSHROOM, 10),
        (Glyph.POISON_MUSHROOM, 10),
        (Glyph.CONFUSION_MUSHROOM, 10),
        (Glyph.HIDDEN_TRAP, 10),
        (Glyph.ARCANE_SIGIL, 1),
    ),
    wall=(
        (Glyph.WALL, 840),
        (Glyph.ROCK, 100),
        (Glyph.OBSIDIAN, 50),
        (Glyph.MAGNETITE, 5),
    ),
)

CAVE_LEVEL_TILES = TileCatalog(
    name="cave",
    floor=(
        (Glyph.REGULAR_FLOOR, 950),
        (Glyph.SPIKY_CRYSTAL, 10),
        (Glyph.GLOWING_MUSHROOM, 10),
        (Glyph.POISON_MUSHROOM, 10),
        (Glyph.CONFUSION_MUSHROOM, 10),
        (Glyph.ARCANE_SIGIL, 1),
    ),
    wall=(
        (Glyph.WALL, 500),
        (Glyph.ROCK, 500),
    ),
)

MAZE_LEVEL_TILES = TileCatalog(
    name="maze",
    floor=(
        (Glyph.REGULAR_FLOOR, 1000),
        (Glyph.ARCANE_SIGIL, 1),
    ),
    wall=((Glyph.OBSIDIAN, 1000),),
    default_wall=Glyph.OBSIDIAN,
)

OVERWORLD_LEVEL_TILES = TileCatalog(
    name="overworld",
    floor=(
        (Glyph.REGULAR_FLOOR, 95),
        (Glyph.SPIKY_CRYSTAL, 1),
        (Glyph.GLOWING_MUSHROOM, 1),
        (Glyph.POISON_MUSHROOM, 1),
        (Glyph.CONFUSION_MUSHROOM, 1),
        (Glyph.HIDDEN_TRAP, 1),
    ),
    wall=(
        (Glyph.WALL, 84),
        (Glyph.ROCK, 10.5),
        (Glyph.OBSIDIAN, 5),
        (Glyph.MAGNETITE, 0.5),
    ),
)
