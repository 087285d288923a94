# tests/test_rng.py
import pytest

from delvegen.point import WorldPoint
from delvegen.rng import M, MAX_LEVEL_WALK, EmptyWeightsError, RandomGenerator, lcg_next

def test_first_draws_for_seed_1():
    r = RandomGenerator(1)
    assert r.next() == 58598 / M
    assert r.next() == 127215 / M
    assert lcg_next(1) == 58598

def test_same_seed_same_sequence():
    a, b = RandomGenerator(42), RandomGenerator(42)
    assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]

def test_random_integer_bounds_and_swap():
    r = RandomGenerator(3)
    for _ in range(2000):
        assert 5 <= r.random_integer(10, 5) < 10
        assert 0 <= r.random_integer(7) < 7
    assert r.random_integer(4, 4) == 4

def test_closed_range_hits_both_ends():
    r = RandomGenerator(9)
    seen = {r.random_integer_closed_range(-1, 1) for _ in range(500)}
    assert seen == {-1, 0, 1}

def test_is_one_in_rejects_non_positive():
    r = RandomGenerator(1)
    with pytest.raises(ValueError):
        r.is_one_in(0)
    with pytest.raises(ValueError):
        r.is_one_in(-2)
    assert r.is_one_in(1) is True

def test_determine_success_extremes():
    r = RandomGenerator(11)
    assert not any(r.determine_success(0) for _ in range(200))
    assert all(r.determine_success(100) for _ in range(200))

def test_adjust_level_is_bounded():
    changed = 0
    for seed in range(300):
        out = RandomGenerator(seed).adjust_level(5)
        assert 0 <= out
        assert abs(out - 5) <= MAX_LEVEL_WALK + 1
        changed += out != 5
    assert 0 < changed < 300
    # levels that walk below 1 clamp to 0
    assert all(RandomGenerator(s).adjust_level(0) >= 0 for s in range(300))

def test_weighted_pick_converges():
    r = RandomGenerator(2024)
    n = 10000
    hits = sum(r.weighted_pick([("a", 1), ("b", 3)]) == "a" for _ in range(n))
    assert abs(hits / n - 0.25) < 0.02

def test_weighted_pick_degenerate_raises_without_drawing():
    r = RandomGenerator(5)
    with pytest.raises(EmptyWeightsError):
        r.weighted_pick([])
    with pytest.raises(EmptyWeightsError):
        r.weighted_pick([("x", 0), ("y", -3)])
    assert r.current_seed() == 5

def test_weighted_pick_skips_zero_weights():
    r = RandomGenerator(8)
    assert {r.weighted_pick([("x", 0), ("y", 2), ("z", 0)]) for _ in range(200)} == {"y"}

def test_shuffle_is_permutation():
    r = RandomGenerator(77)
    xs = list(range(20))
    assert sorted(r.shuffle(xs)) == list(range(20))

def test_forced_movement_never_stands_still():
    r = RandomGenerator(13)
    for _ in range(500):
        d = r.random_direction_forced_movement()
        assert d != WorldPoint(0, 0)
        assert max(abs(d.x), abs(d.y)) == 1

def test_random_direction_stays_adjacent():
    r = RandomGenerator(1)
    p = WorldPoint(10, 10)
    for _ in range(100):
        assert p.squared_distance_to(r.random_direction(p)) <= 2
