import itertools
import random

import pytest

from cpkit.convolution import (
    MOD,
    BitwiseOp,
    balanced_tickets,
    bitwise_convolution,
    fft_multiply,
    fwht,
    multiply_mod,
    ntt_multiply,
    poly_pow,
    subset_convolution,
)


def naive(a, b, mod=None):
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            out[i + j] += x * y
    if mod is not None:
        out = [v % mod for v in out]
    return out


def rand_list(rng, n, lo, hi):
    return [rng.randint(lo, hi) for _ in range(n)]


@pytest.mark.parametrize("n,m", [(1, 1), (3, 5), (8, 8), (17, 30)])
def test_fft_multiply_matches_naive(n, m):
    rng = random.Random(n * 100 + m)
    a = rand_list(rng, n, -1000, 1000)
    b = rand_list(rng, m, -1000, 1000)
    assert fft_multiply(a, b) == naive(a, b)


def test_fft_multiply_empty_raises():
    with pytest.raises(ValueError):
        fft_multiply([], [1])


@pytest.mark.parametrize("n,m", [(1, 1), (4, 7), (33, 20)])
def test_ntt_multiply_matches_naive(n, m):
    rng = random.Random(n + m)
    a = rand_list(rng, n, 0, MOD - 1)
    b = rand_list(rng, m, 0, MOD - 1)
    assert ntt_multiply(a, b) == naive(a, b, MOD)


def test_multiply_mod_handles_negatives_and_other_mod():
    rng = random.Random(7)
    mod = 10**9 + 7
    a = rand_list(rng, 25, -(10**12), 10**12)
    b = rand_list(rng, 13, -(10**12), 10**12)
    assert multiply_mod(a, b, mod) == naive(a, b, mod)


def test_multiply_mod_agrees_with_ntt():
    rng = random.Random(3)
    a = rand_list(rng, 40, 0, MOD - 1)
    b = rand_list(rng, 9, 0, MOD - 1)
    assert multiply_mod(a, b) == ntt_multiply(a, b)


def test_poly_pow_matches_repeated_product():
    a = [3, 0, 5, 1]
    expected = [1]
    for _ in range(5):
        expected = naive(expected, a, 1000003)
    assert poly_pow(a, 5, 1000003) == expected
    assert poly_pow(a, 0, 1000003) == [1]


def test_poly_pow_negative_exponent_raises():
    with pytest.raises(ValueError):
        poly_pow([1, 1], -1)


def test_balanced_tickets_example():
    assert balanced_tickets(4, [1, 8]) == 6


@pytest.mark.parametrize("n,digits", [(2, [0, 4]), (4, [1, 2, 3]), (6, [0, 9])])
def test_balanced_tickets_brute(n, digits):
    half = n // 2
    count = sum(
        1
        for t in itertools.product(digits, repeat=n)
        if sum(t[:half]) == sum(t[half:])
    )
    assert balanced_tickets(n, digits) == count % MOD


def test_balanced_tickets_bad_digit():
    with pytest.raises(ValueError):
        balanced_tickets(2, [10])


@pytest.mark.parametrize("op", list(BitwiseOp))
@pytest.mark.parametrize("mod", [MOD, None])
def test_fwht_round_trip(op, mod):
    rng = random.Random(int(op))
    a = rand_list(rng, 16, 0, 100)
    assert fwht(fwht(a, False, op, mod), True, op, mod) == a


def test_fwht_requires_power_of_two():
    with pytest.raises(ValueError):
        fwht([1, 2, 3])


@pytest.mark.parametrize(
    "op,combine",
    [
        (BitwiseOp.AND, lambda i, j: i & j),
        (BitwiseOp.OR, lambda i, j: i | j),
        (BitwiseOp.XOR, lambda i, j: i ^ j),
    ],
)
@pytest.mark.parametrize("mod", [MOD, None])
def test_bitwise_convolution_brute(op, combine, mod):
    rng = random.Random(11)
    a = rand_list(rng, 8, 0, 50)
    b = rand_list(rng, 8, 0, 50)
    expected = [0] * 8
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            expected[combine(i, j)] += x * y
    if mod is not None:
        expected = [v % mod for v in expected]
    assert bitwise_convolution(a, b, op, mod) == expected


def test_bitwise_convolution_length_mismatch():
    with pytest.raises(ValueError):
        bitwise_convolution([1, 2], [1, 2, 3, 4], BitwiseOp.OR)


@pytest.mark.parametrize("mod", [MOD, None])
def test_subset_convolution_brute(mod):
    rng = random.Random(5)
    n = 16
    a = rand_list(rng, n, 0, 30)
    b = rand_list(rng, n, 0, 30)
    expected = []
    for m in range(n):
        total = 0
        s = m
        while True:
            total += a[s] * b[m ^ s]
            if s == 0:
                break
            s = (s - 1) & m
        expected.append(total if mod is None else total % mod)
    assert subset_convolution(a, b, mod) == expected