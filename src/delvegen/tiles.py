# src/delvegen/tiles.py
# Canonical glyph IDs and their static properties.

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping


class Glyph(IntEnum):
    UNKNOWN = 0
    ROCK = 1
    WALL = 2
    OBSIDIAN = 3
    MAGNETITE = 4
    REGULAR_FLOOR = 10
    MOSSY_FLOOR = 11
    SPIKY_CRYSTAL = 12
    GLOWING_MUSHROOM = 13
    POISON_MUSHROOM = 14
    CONFUSION_MUSHROOM = 15
    HIDDEN_TRAP = 16
    ARCANE_SIGIL = 17
    RUNE = 18
    LAVA = 30
    DEEP_WATER = 31
    SHALLOW_WATER = 32
    MIST = 33
    CHASM_EDGE = 40
    CHASM_CENTER = 41
    DOOR_CLOSED = 50
    DOOR_OPEN = 51
    STAIRS_UP = 60
    STAIRS_DOWN = 61


@dataclass(frozen=True)
class GlyphInfo:
    glyph: Glyph
    name: str
    char: str
    is_blocking_movement: bool = False
    is_opaque: bool = False
    is_diggable: bool = False
    is_causing_burn: bool = False
    is_causing_slow: bool = False
    is_causing_bleed: bool = False
    is_magnetic: bool = False
    is_causing_poison: bool = False
    is_causing_confusion: bool = False
    glow_radius: int = 0


class GlyphRegistry:
    """
    Read-only lookup from Glyph to GlyphInfo. Built once and handed to whatever
    needs it; tests can construct their own instead of patching a global.
    """

    def __init__(self, infos: Iterable[GlyphInfo]):
        table: Dict[Glyph, GlyphInfo] = {}
        for info in infos:
            if info.glyph in table:
                raise ValueError(f"duplicate glyph info for {info.glyph.name}")
            table[info.glyph] = info
        self._table: Mapping[Glyph, GlyphInfo] = MappingProxyType(table)
        self._unknown = table.get(Glyph.UNKNOWN, GlyphInfo(Glyph.UNKNOWN, "Unknown", "?"))

    def info(self, glyph: Glyph) -> GlyphInfo:
        return self._table.get(glyph, self._unknown)

    def __contains__(self, glyph: Glyph) -> bool:
        return glyph in self._table

    def __len__(self) -> int:
        return len(self._table)

    def is_blocking(self, glyph: Glyph) -> bool:
        return self.info(glyph).is_blocking_movement


def _solid(glyph: Glyph, name: str, char: str, **kw) -> GlyphInfo:
    return GlyphInfo(glyph, name, char, is_blocking_movement=True, is_opaque=True,
                     is_diggable=True, **kw)


def build_default_registry() -> GlyphRegistry:
    return GlyphRegistry([
        GlyphInfo(Glyph.UNKNOWN, "Unknown", "?"),
        _solid(Glyph.ROCK, "Rock", "#"),
        _solid(Glyph.WALL, "Wall", "#"),
        _solid(Glyph.OBSIDIAN, "Obsidian", "%"),
        _solid(Glyph.MAGNETITE, "Magnetite", "&", is_magnetic=True, glow_radius=1),
        GlyphInfo(Glyph.REGULAR_FLOOR, "Floor", "."),
        GlyphInfo(Glyph.MOSSY_FLOOR, "Mossy Floor", ","),
        GlyphInfo(Glyph.SPIKY_CRYSTAL, "Spiky Crystal", "^", is_causing_bleed=True),
        GlyphInfo(Glyph.GLOWING_MUSHROOM, "Glowing Mushroom", "\"", glow_radius=2),
        GlyphInfo(Glyph.POISON_MUSHROOM, "Poison Mushroom", "\"", is_causing_poison=True),
        GlyphInfo(Glyph.CONFUSION_MUSHROOM, "Confusion Mushroom", "\"", is_causing_confusion=True),
        GlyphInfo(Glyph.HIDDEN_TRAP, "Hidden Trap", "."),
        GlyphInfo(Glyph.ARCANE_SIGIL, "Arcane Sigil", "*", glow_radius=3),
        GlyphInfo(Glyph.RUNE, "Rune", "*", glow_radius=1),
        GlyphInfo(Glyph.LAVA, "Lava", "~", is_causing_burn=True, glow_radius=2),
        GlyphInfo(Glyph.DEEP_WATER, "Deep Water", "~", is_causing_slow=True),
        GlyphInfo(Glyph.SHALLOW_WATER, "Shallow Water", "=", is_causing_slow=True),
        GlyphInfo(Glyph.MIST, "Mist", ":", is_opaque=True),
        GlyphInfo(Glyph.CHASM_EDGE, "Chasm Edge", ";"),
        GlyphInfo(Glyph.CHASM_CENTER, "Chasm", " ", is_blocking_movement=True),
        GlyphInfo(Glyph.DOOR_CLOSED, "Closed Door", "+", is_blocking_movement=True, is_opaque=True),
        GlyphInfo(Glyph.DOOR_OPEN, "Open Door", "'"),
        GlyphInfo(Glyph.STAIRS_UP, "Stairs Up", "<"),
        GlyphInfo(Glyph.STAIRS_DOWN, "Stairs Down", ">"),
    ])


DEFAULT_GLYPHS = build_default_registry()

DOORS = frozenset({Glyph.DOOR_CLOSED, Glyph.DOOR_OPEN})
