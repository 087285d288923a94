# src/delvegen/rng.py
# Seeded sequence generator. Every draw goes through next(), so two generators
# built from the same seed and asked the same questions agree forever.

from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Optional, Tuple, TypeVar

from .point import WorldPoint

T = TypeVar("T")

A = 9301
C = 49297
M = 233280

# adjust_level keeps walking with p=1/4; cap the walk so a freak streak ends.
MAX_LEVEL_WALK = 64


class EmptyWeightsError(ValueError):
    """Raised by weighted_pick when no entry carries a positive weight."""


def lcg_next(state: int) -> int:
    return (state * A + C) % M


@dataclass
class RandomGenerator:
    seed: int

    def current_seed(self) -> int:
        return self.seed

    def set_seed(self, new_seed: int) -> None:
        self.seed = new_seed

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        self.seed = lcg_next(self.seed)
        return self.seed / M

    def random_integer(self, lower: int, higher: Optional[int] = None) -> int:
        """
        Integer in [lower, higher). With a single argument the range is
        [0, lower). Reversed bounds are swapped; an empty range yields lower.
        """
        if higher is None:
            lower, higher = 0, lower
        if lower > higher:
            lower, higher = higher, lower
        span = higher - lower
        return int(self.next() * span) + lower

    def random_integer_closed_range(self, lower: int, higher: int) -> int:
        return self.random_integer(lower, higher + 1)

    def is_one_in(self, n: int) -> bool:
        if n <= 0:
            raise ValueError(f"is_one_in needs a positive n, got {n}")
        return self.random_integer(n) == 0

    def determine_success(self, rate: int) -> bool:
        """Percentage roll: True with probability rate/100."""
        return self.random_integer(100) < rate

    def adjust_level(self, level: int) -> int:
        """
        With p=1/3 nudge level by one step (down with p=1/3, else up), then
        keep stepping the same way with p=1/4 per step. The walk is capped at
        MAX_LEVEL_WALK steps; results below 1 clamp to 0.
        """
        if not self.is_one_in(3):
            return level
        delta = -1 if self.is_one_in(3) else 1
        level += delta
        for _ in range(MAX_LEVEL_WALK):
            if not self.is_one_in(4):
                break
            level += delta
        if level < 1:
            level = 0
        return level

    def weighted_pick(self, entries: Iterable[Tuple[T, float]]) -> T:
        """
        Pick one item in proportion to its weight. Negative weights count as
        zero. Raises EmptyWeightsError (without drawing) when nothing is
        pickable.
        """
        items: List[Tuple[T, float]] = [(item, max(0, w)) for item, w in entries]
        total = sum(w for _, w in items)
        if total <= 0:
            raise EmptyWeightsError("weighted_pick needs at least one positive weight")
        u = self.next() * total
        acc = 0
        for item, w in items:
            acc += w
            if u < acc:
                return item
        # float rounding can leave u == total; land on the last weighted entry
        return next(item for item, w in reversed(items) if w > 0)

    def shuffle(self, seq: MutableSequence[T]) -> MutableSequence[T]:
        """In-place Fisher–Yates shuffle; returns seq for chaining."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.random_integer_closed_range(0, i)
            seq[i], seq[j] = seq[j], seq[i]
        return seq

    def random_direction(self, p: WorldPoint = WorldPoint()) -> WorldPoint:
        return WorldPoint(
            p.x + self.random_integer_closed_range(-1, 1),
            p.y + self.random_integer_closed_range(-1, 1),
        )

    def random_direction_forced_movement(self) -> WorldPoint:
        # one axis is always +/-1, so the result is never (0, 0)
        a = self.random_integer_closed_range(-1, 1)
        b = 1 if self.is_one_in(2) else -1
        horizontal = self.is_one_in(2)
        return WorldPoint(a, b) if horizontal else WorldPoint(b, a)
