import pytest

from mobagen.rng import range_float, range_int


def test_range_int_equal_bounds_returns_start():
    assert range_int(7, 7) == 7


def test_range_float_equal_bounds_returns_start():
    assert range_float(2.5, 2.5) == 2.5


def test_range_int_stays_within_inclusive_bounds():
    values = {range_int(0, 5) for _ in range(2000)}
    assert values <= set(range(0, 6))
    # inclusive on both ends: every value should show up in 2000 draws
    assert values == set(range(0, 6))


def test_range_int_handles_negative_bounds():
    values = [range_int(-3, 3) for _ in range(500)]
    assert all(-3 <= v <= 3 for v in values)


def test_range_float_stays_within_bounds():
    values = [range_float(-1.0, 1.0) for _ in range(1000)]
    assert all(-1.0 <= v <= 1.0 for v in values)


def test_range_int_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        range_int(5, 1)


def test_range_float_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        range_float(1.0, 0.0)