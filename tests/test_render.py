# tests/test_render.py
from delvegen.render.tileset import glyph_color
from delvegen.tiles import DEFAULT_GLYPHS, Glyph

def test_every_glyph_has_an_opaque_colour():
    for g in Glyph:
        r, gr, b, a = glyph_color(g)
        assert a == 255
        assert all(0 <= c <= 255 for c in (r, gr, b))

def test_colour_bands():
    assert glyph_color(Glyph.ROCK) == glyph_color(Glyph.OBSIDIAN)
    assert glyph_color(Glyph.STAIRS_UP) == glyph_color(Glyph.STAIRS_DOWN)
    assert glyph_color(Glyph.LAVA) != glyph_color(Glyph.DEEP_WATER)
    assert glyph_color(Glyph.UNKNOWN) != glyph_color(Glyph.ROCK)

def test_registry_chars_are_single_characters():
    for g in Glyph:
        assert len(DEFAULT_GLYPHS.info(g).char) == 1
    assert DEFAULT_GLYPHS.is_blocking(Glyph.DOOR_CLOSED)
    assert not DEFAULT_GLYPHS.is_blocking(Glyph.DOOR_OPEN)
