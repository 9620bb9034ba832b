import bisect
import random

import pytest

from cpkit.treap import ImplicitTreap, Treap


def test_treap_against_sorted_list():
    rng = random.Random(7)
    treap = Treap()
    plain: list[int] = []
    for _ in range(400):
        x = rng.randint(-30, 30)
        if rng.random() < 0.6:
            treap.insert(x)
            bisect.insort(plain, x)
        else:
            removed = treap.erase(x)
            assert removed == (x in plain)
            if removed:
                plain.remove(x)
        assert len(treap) == len(plain)
        q = rng.randint(-35, 35)
        assert (q in treap) == (q in plain)
        assert treap.count_less(q) == bisect.bisect_left(plain, q)
        assert treap.sum_less(q) == sum(v for v in plain if v < q)
    assert [treap.kth(k) for k in range(1, len(plain) + 1)] == plain


def test_duplicates_are_kept():
    treap = Treap()
    for _ in range(3):
        treap.insert(5)
    assert len(treap) == 3
    assert treap.erase(5)
    assert len(treap) == 2
    assert 5 in treap


def test_kth_out_of_range():
    treap = Treap()
    treap.insert(1)
    with pytest.raises(IndexError):
        treap.kth(2)
    with pytest.raises(IndexError):
        treap.kth(0)


def test_erase_missing():
    treap = Treap()
    treap.insert(3)
    assert not treap.erase(4)
    assert len(treap) == 1


def test_implicit_against_list():
    rng = random.Random(3)
    values = [rng.randint(-100, 100) for _ in range(50)]
    seq = ImplicitTreap(values)
    plain = list(values)
    assert list(seq) == plain
    for _ in range(300):
        op = rng.random()
        if op < 0.2:
            i = rng.randint(0, len(plain))
            v = rng.randint(-100, 100)
            seq.insert(i, v)
            plain.insert(i, v)
        else:
            l = rng.randrange(len(plain))
            r = rng.randrange(l, len(plain))
            if op < 0.6:
                seq.reverse(l, r)
                plain[l:r + 1] = plain[l:r + 1][::-1]
            else:
                assert seq.range_sum(l, r) == sum(plain[l:r + 1])
    assert list(seq) == plain
    assert len(seq) == len(plain)


def test_implicit_bad_indices():
    seq = ImplicitTreap([1, 2, 3])
    with pytest.raises(IndexError):
        seq.insert(5, 0)
    with pytest.raises(IndexError):
        seq.reverse(2, 1)
    with pytest.raises(IndexError):
        seq.range_sum(0, 3)