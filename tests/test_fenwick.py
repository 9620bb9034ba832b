import random

import pytest

from cpkit.fenwick import RangeFenwick


def test_matches_plain_list():
    rng = random.Random(1)
    n = 40
    tree = RangeFenwick(n)
    plain = [0] * n
    for _ in range(300):
        l = rng.randrange(n)
        r = rng.randrange(l, n)
        if rng.random() < 0.5:
            x = rng.randint(-50, 50)
            tree.add(l, r, x)
            for p in range(l, r + 1):
                plain[p] += x
        else:
            assert tree.range_sum(l, r) == sum(plain[l:r + 1])
            assert tree.prefix_sum(r) == sum(plain[:r + 1])


def test_negative_prefix_is_zero():
    tree = RangeFenwick(5)
    tree.add(0, 4, 7)
    assert tree.prefix_sum(-1) == 0
    assert tree.range_sum(0, 0) == 7


def test_whole_range_add():
    tree = RangeFenwick(10)
    tree.add(0, 9, 3)
    assert tree.range_sum(0, 9) == 30
    assert tree.range_sum(4, 6) == 9


@pytest.mark.parametrize("l, r", [(-1, 2), (3, 2), (0, 5)])
def test_bad_ranges(l, r):
    tree = RangeFenwick(5)
    with pytest.raises(IndexError):
        tree.add(l, r, 1)
    with pytest.raises(IndexError):
        tree.range_sum(l, r)