# tests/test_catalog.py
import logging
from collections import Counter

import pytest

from delvegen.mapgen.catalog import (
    CAVE_LEVEL_TILES, DEFAULT_LEVEL_TILES, MAZE_LEVEL_TILES, OVERWORLD_LEVEL_TILES,
    TileCatalog, pick_floor_glyph, pick_wall_glyph,
)
from delvegen.rng import RandomGenerator
from delvegen.tiles import DEFAULT_GLYPHS, Glyph

def test_picks_come_from_the_catalog():
    r = RandomGenerator(1)
    for tiles in (DEFAULT_LEVEL_TILES, CAVE_LEVEL_TILES, MAZE_LEVEL_TILES, OVERWORLD_LEVEL_TILES):
        for _ in range(300):
            assert pick_floor_glyph(r, tiles) in tiles.floor_glyphs
            assert pick_wall_glyph(r, tiles) in tiles.wall_glyphs

def test_every_catalog_glyph_is_registered():
    for tiles in (DEFAULT_LEVEL_TILES, CAVE_LEVEL_TILES, MAZE_LEVEL_TILES, OVERWORLD_LEVEL_TILES):
        for g in tiles.floor_glyphs | tiles.wall_glyphs:
            assert g in DEFAULT_GLYPHS

def test_frequencies_track_weights():
    tiles = TileCatalog("test", floor=((Glyph.REGULAR_FLOOR, 50), (Glyph.MOSSY_FLOOR, 30), (Glyph.RUNE, 20)), wall=())
    r = RandomGenerator(99)
    n = 20000
    counts = Counter(pick_floor_glyph(r, tiles) for _ in range(n))
    for glyph, share in ((Glyph.REGULAR_FLOOR, 0.5), (Glyph.MOSSY_FLOOR, 0.3), (Glyph.RUNE, 0.2)):
        assert abs(counts[glyph] / n - share) < 0.02

def test_zero_weight_falls_back_and_logs(caplog):
    broken = TileCatalog("broken", floor=((Glyph.LAVA, 0),), wall=())
    r = RandomGenerator(4)
    with caplog.at_level(logging.WARNING):
        assert pick_floor_glyph(r, broken) == Glyph.REGULAR_FLOOR
        assert pick_wall_glyph(r, broken) == Glyph.ROCK
    assert "broken floor" in caplog.text
    assert "broken wall" in caplog.text
    assert r.current_seed() == 4

def test_negative_weight_is_rejected():
    with pytest.raises(ValueError):
        TileCatalog("bad", floor=((Glyph.REGULAR_FLOOR, -1),), wall=())
