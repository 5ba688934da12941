import pytest

from uds.random import Random

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def test_same_seed_gives_same_sequence():
    first = Random(42)
    second = Random(42)
    assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]


def test_draw_becomes_new_seed():
    rng = Random(7)
    drawn = rng.next()
    assert rng.seed == drawn
    assert Random(drawn).next() == rng.next()


def test_negative_seed_matches_positive():
    assert Random(-12345).next() == Random(12345).next()


def test_int_min_seed_matches_int_max():
    assert Random(INT_MIN).next() == Random(INT_MAX).next()


def test_seed_wraps_to_32_bits():
    assert Random(2**32 + 5).seed == 5


def test_seed_setter_wraps():
    rng = Random(1)
    rng.seed = 2**32 + 9
    assert rng.seed == 9
    assert rng.next() == Random(9).next()


def test_next_in_range():
    rng = Random(2024)
    values = [rng.next() for _ in range(300)]
    assert all(0 <= v < INT_MAX for v in values)
    assert len(set(values)) > 250


def test_next_double_in_unit_interval():
    rng = Random(99)
    values = [rng.next_double() for _ in range(300)]
    assert all(0.0 <= v <= 1.0 for v in values)


@pytest.mark.parametrize("low,high", [(0, 10), (-50, 50), (100, 101), (-5, -1)])
def test_next_range_bounds(low, high):
    rng = Random(3)
    values = [rng.next_range(low, high) for _ in range(300)]
    assert all(low <= v < high for v in values)


def test_next_range_equal_bounds():
    rng = Random(11)
    assert rng.next_range(17, 17) == 17


def test_next_range_inverted_bounds_gives_min():
    rng = Random(11)
    assert all(rng.next_range(30, 10) == 30 for _ in range(20))


def test_next_range_wide_span():
    rng = Random(5)
    values = [rng.next_range(INT_MIN, INT_MAX) for _ in range(200)]
    assert all(INT_MIN <= v <= INT_MAX for v in values)
    assert any(v < 0 for v in values) and any(v > 0 for v in values)