# src/delvegen/grid.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Set

from .point import WorldPoint
from .tiles import DEFAULT_GLYPHS, Glyph, GlyphRegistry

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    env: Glyph
    # Derived by environment.add_static_cell_effects; never set by hand.
    effects: Set[Any] = field(default_factory=set)
    light_radius: int = 0
    # Gameplay slots. Generation only reads mob (free-space search).
    mob: Optional[Any] = None
    obj: Optional[Any] = None
    corpse: Optional[Any] = None

    def is_occupied(self) -> bool:
        return self.mob is not None


def normalize_dimensions(dim: WorldPoint) -> WorldPoint:
    """Clamp non-positive dimensions to 1 and log it; generators call this first."""
    if dim.x >= 1 and dim.y >= 1:
        return dim
    fixed = WorldPoint(max(1, dim.x), max(1, dim.y))
    logger.warning("Invalid map dimensions %dx%d; using %dx%d", dim.x, dim.y, fixed.x, fixed.y)
    return fixed


class Grid:
    """
    Fixed-size map of cells, indexed by WorldPoint. cells[y][x].
    Dimensions never change after construction.
    """

    def __init__(self, dimensions: WorldPoint, fill: Glyph, level: int = 0):
        if dimensions.x <= 0 or dimensions.y <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {dimensions.x}x{dimensions.y}")
        self._dim = dimensions
        self.fill = fill
        self.level = level
        self.is_dark = False
        self.up_stair_pos: Optional[WorldPoint] = None
        self.down_stair_pos: Optional[WorldPoint] = None
        self.cells: List[List[Cell]] = [
            [Cell(fill) for _ in range(dimensions.x)] for _ in range(dimensions.y)
        ]

    @property
    def dimensions(self) -> WorldPoint:
        return self._dim

    def is_legal_point(self, p: WorldPoint) -> bool:
        return 0 <= p.x < self._dim.x and 0 <= p.y < self._dim.y

    def cell(self, p: WorldPoint) -> Cell:
        if not self.is_legal_point(p):
            raise IndexError(f"Point out of bounds: ({p.x}, {p.y}) for grid {self._dim.x}x{self._dim.y}")
        return self.cells[p.y][p.x]

    def glyph_at(self, p: WorldPoint) -> Glyph:
        return self.cell(p).env

    def iter_points(self) -> Iterator[WorldPoint]:
        for y in range(self._dim.y):
            for x in range(self._dim.x):
                yield WorldPoint(x, y)

    def add_stair_info(self, glyph: Glyph, pos: WorldPoint) -> None:
        if glyph == Glyph.STAIRS_UP:
            self.up_stair_pos = pos
        elif glyph == Glyph.STAIRS_DOWN:
            self.down_stair_pos = pos

    def as_matrix(self) -> List[List[int]]:
        return [[int(c.env) for c in row] for row in self.cells]

    def to_lines(self, registry: GlyphRegistry = DEFAULT_GLYPHS) -> List[str]:
        return ["".join(registry.info(c.env).char for c in row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Grid(width={self._dim.x}, height={self._dim.y}, level={self.level})"
