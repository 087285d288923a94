# src/delvegen/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry

RGBA = Tuple[int, int, int, int]


def glyph_color(glyph: Glyph) -> RGBA:
    # Banded like the glyph IDs: solids < 10, ground 10..29, liquids 30..39, ...
    if glyph >= Glyph.STAIRS_UP: return (255, 220,   0, 255)   # stairs
    if glyph >= Glyph.DOOR_CLOSED: return (160, 100,  40, 255)  # doors
    if glyph >= Glyph.CHASM_EDGE: return ( 30,  20,  40, 255)   # chasm
    if glyph == Glyph.LAVA: return (220,  60,   0, 255)
    if glyph >= Glyph.LAVA: return ( 40,  90, 200, 255)         # water, mist
    if glyph >= Glyph.REGULAR_FLOOR: return (200, 200, 180, 255)
    if glyph == Glyph.UNKNOWN: return (255,   0, 255, 255)
    return ( 80,  80,  80, 255)                                 # rock, walls


class Tileset:
    """
    Cached glyph surfaces for the viewer: a flat colour square with the
    glyph's ASCII char on top. Needs pygame.font initialised.
    """
    def __init__(self, tile_size: int, registry: GlyphRegistry = DEFAULT_GLYPHS, font=None):
        self.tile_size = tile_size
        self.registry = registry
        self.font = font or pygame.font.SysFont(None, max(10, tile_size))

    @lru_cache(maxsize=256)
    def get(self, glyph: Glyph) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(glyph_color(glyph))
        txt = self.font.render(self.registry.info(glyph).char, True, (0, 0, 0))
        r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
        img.blit(txt, r)
        return img
