import pytest

from linegame_config import MIN_NUMBER, MAX_NUMBER, MIN_LINE_LENGTH, MAX_LINE_LENGTH
from linegame_rng import TileRandom


def test_same_seed_same_sequence():
    a, b = TileRandom(42), TileRandom(42)
    assert [a.value() for _ in range(50)] == [b.value() for _ in range(50)]


def test_values_cover_inclusive_range():
    rng = TileRandom(7)
    seen = {rng.value() for _ in range(500)}
    assert seen == set(range(MIN_NUMBER, MAX_NUMBER + 1))


def test_target_sum_bounds():
    rng = TileRandom(99)
    lo, hi = MIN_LINE_LENGTH * MIN_NUMBER, MAX_LINE_LENGTH * MAX_NUMBER
    targets = [rng.target_sum() for _ in range(2000)]
    assert min(targets) == lo
    assert max(targets) == hi


def test_randint_single_value():
    assert TileRandom(3).randint(5, 5) == 5


def test_randint_rejects_empty_range():
    with pytest.raises(ValueError):
        TileRandom(3).randint(4, 1)


def test_unseeded_state_is_32_bit():
    assert 0 <= TileRandom().state <= 0xFFFFFFFF
