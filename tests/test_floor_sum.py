import pytest

from cpkit.floor_sum import floor_sum


def _brute(n, m, a, b):
    return sum((a * i + b) // m for i in range(n))


@pytest.mark.parametrize(
    "n, m, a, b",
    [
        (4, 10, 6, 3),
        (6, 5, 4, 3),
        (1, 1, 0, 0),
        (31, 7, 5, 12),
        (100, 13, 27, 4),
        (50, 97, 3, 0),
        (12, 3, 0, 7),
    ],
)
def test_matches_direct_sum(n, m, a, b):
    assert floor_sum(n, m, a, b) == _brute(n, m, a, b)


def test_exhaustive_small_grid():
    for n in range(0, 9):
        for m in range(1, 8):
            for a in range(0, 12):
                for b in range(0, 12):
                    assert floor_sum(n, m, a, b) == _brute(n, m, a, b)


def test_negative_coefficients():
    for a in range(-10, 1):
        for b in range(-10, 3):
            assert floor_sum(15, 4, a, b) == _brute(15, 4, a, b)


def test_large_range():
    assert floor_sum(100000, 997, 123457, 891) == _brute(100000, 997, 123457, 891)


def test_zero_terms():
    assert floor_sum(0, 5, 3, 2) == 0


def test_invalid_modulus():
    with pytest.raises(ValueError):
        floor_sum(3, 0, 1, 1)


def test_negative_n():
    with pytest.raises(ValueError):
        floor_sum(-1, 3, 1, 1)