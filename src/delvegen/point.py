# src/delvegen/point.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

CARDINALS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class WorldPoint:
    """Integer grid coordinate. Frozen, so it is safe as a set/dict key."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "WorldPoint") -> "WorldPoint":
        return WorldPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "WorldPoint") -> "WorldPoint":
        return WorldPoint(self.x - other.x, self.y - other.y)

    def offset(self, dx: int, dy: int) -> "WorldPoint":
        return WorldPoint(self.x + dx, self.y + dy)

    def squared_distance_to(self, other: "WorldPoint") -> int:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "WorldPoint") -> float:
        return math.sqrt(self.squared_distance_to(other))

    def neighbors(self, radius: int = 1) -> List["WorldPoint"]:
        """All points in the (2r+1)^2 square around self, excluding self."""
        out = []
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx == 0 and dy == 0:
                    continue
                out.append(WorldPoint(self.x + dx, self.y + dy))
        return out

    def cardinal_neighbors(self) -> List["WorldPoint"]:
        return [WorldPoint(self.x + dx, self.y + dy) for dx, dy in CARDINALS]

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
