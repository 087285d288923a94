# src/delvegen/environment.py
# Static per-cell annotations derived from the final glyph layout.

from enum import Enum

from .grid import Grid
from .tiles import DEFAULT_GLYPHS, GlyphRegistry

AREA_OF_EFFECT_RADIUS = 1


class EnvEffect(Enum):
    POISON = "poison"
    CONFUSION = "confusion"
    HEAL = "heal"
    BLIND = "blind"
    ATTACK_UP = "attack_up"


def add_static_cell_effects(grid: Grid, registry: GlyphRegistry = DEFAULT_GLYPHS) -> Grid:
    """
    Recompute light radius and area effects for every cell.

    Safe to run more than once: derived annotations are cleared first, then
    glowing glyphs set their own light radius and poison/confusion sources
    spread their effect to every in-bounds neighbour within
    AREA_OF_EFFECT_RADIUS.
    """
    for p in grid.iter_points():
        cell = grid.cell(p)
        cell.effects.clear()
        cell.light_radius = registry.info(cell.env).glow_radius

    for p in grid.iter_points():
        info = registry.info(grid.cell(p).env)
        effect = None
        if info.is_causing_poison:
            effect = EnvEffect.POISON
        elif info.is_causing_confusion:
            effect = EnvEffect.CONFUSION
        if effect is None:
            continue
        for n in p.neighbors(AREA_OF_EFFECT_RADIUS):
            if grid.is_legal_point(n):
                grid.cell(n).effects.add(effect)
    return grid
