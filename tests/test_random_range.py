import pytest

from enginemath.random_range import Random, random_range


def test_seeded_generators_repeat():
    a = Random(42)
    b = Random(42)
    assert [a.range(0, 100) for _ in range(20)] == [b.range(0, 100) for _ in range(20)]


def test_integer_range_is_inclusive():
    rng = Random(7)
    values = {rng.range(1, 2) for _ in range(200)}
    assert values == {1, 2}


def test_integer_range_returns_ints_within_bounds():
    rng = Random(3)
    values = [rng.range(-5, 5) for _ in range(50)]
    assert set(values) <= set(range(-5, 6))
    assert {type(v) for v in values} == {int}


def test_float_range_is_half_open():
    rng = Random(11)
    values = [rng.range(-1.5, 2.5) for _ in range(500)]
    assert all(-1.5 <= v < 2.5 for v in values)


def test_equal_bounds():
    rng = Random(1)
    assert rng.range(4, 4) == 4
    assert rng.range(2.5, 2.5) == 2.5


def test_reversed_bounds_raise():
    with pytest.raises(ValueError):
        Random(0).range(5, 1)
    with pytest.raises(ValueError):
        Random(0).range(5.0, 1.0)


def test_module_function_within_bounds():
    values = [random_range(10, 20) for _ in range(100)]
    assert all(10 <= v <= 20 for v in values)
    floats = [random_range(0.0, 1.0) for _ in range(100)]
    assert all(0.0 <= v < 1.0 for v in floats)