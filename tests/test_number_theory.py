import math
from fractions import Fraction

import pytest

from cpkit.number_theory import (
    ceil_blocks,
    ceil_div,
    coprime_pairs,
    crt,
    crt_system,
    discrete_log,
    divisor_count,
    egcd,
    floor_div,
    gcd_sum_table,
    inverse_phi,
    is_prime,
    is_probable_prime,
    lcm_sum,
    lcm_sum_table,
    linear_sieve,
    mod_inverse,
    modular_inverses,
    pair_gcd_sum,
    pair_gcd_sum_table,
    pair_lcm_sum_table,
    phi_table,
    pollard_rho,
    prime_factorize,
    primitive_root,
)


def trial_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def brute_phi(n):
    return sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_floor_and_ceil_div():
    for n in range(-30, 31):
        for k in range(1, 8):
            assert floor_div(n, k) == math.floor(Fraction(n, k))
            assert ceil_div(n, k) == math.ceil(Fraction(n, k))


def test_modular_inverses():
    mod = 10**9 + 7
    inv = modular_inverses(200, mod)
    assert all(i * inv[i] % mod == 1 for i in range(1, 200))


def test_ceil_blocks_cover_and_agree():
    n = 37
    blocks = list(ceil_blocks(n))
    assert blocks[0][0] == 1
    assert blocks[-1][1] == n - 1
    for (i, j, v), nxt in zip(blocks, blocks[1:] + [(n, n, 1)]):
        assert nxt[0] == j + 1
        assert all(ceil_div(n, x) == v for x in range(i, j + 1))


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (9, 0), (12, 18)])
def test_egcd(a, b):
    g, x, y = egcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_mod_inverse():
    for a in range(1, 30):
        assert a * mod_inverse(a, 31) % 31 == 1
    with pytest.raises(ValueError):
        mod_inverse(4, 6)


def test_linear_sieve():
    lpf, primes = linear_sieve(200)
    assert primes == [p for p in range(200) if trial_prime(p)]
    for i in range(2, 200):
        assert lpf[i] == min(d for d in range(2, i + 1) if i % d == 0)


def test_phi_table():
    phi = phi_table(150)
    assert all(phi[n] == brute_phi(n) for n in range(1, 150))


def test_primality_matches_trial_division():
    for n in range(-3, 2000):
        assert is_prime(n) == trial_prime(n)
        assert is_probable_prime(n) == trial_prime(n)


def test_primality_large():
    assert is_prime(998244353) is True
    assert is_prime(561) is False
    assert is_prime(1000000007 * 998244353) is False
    assert is_probable_prime(1000000009) is True


def test_pollard_rho():
    for n in [15, 91, 1000000007 * 998244353, 3 * 3 * 3]:
        d = pollard_rho(n)
        assert 1 < d < n and n % d == 0
    with pytest.raises(ValueError):
        pollard_rho(1000000007)


@pytest.mark.parametrize("n", [1, 2, 12, 97, 360, 1000000007 * 998244353, 2**20 * 3**5])
def test_prime_factorize(n):
    factors = prime_factorize(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(p) for p in factors)


def test_divisor_count_matches_brute():
    for n in range(1, 600):
        assert divisor_count(n) == sum(1 for d in range(1, n + 1) if n % d == 0)
    with pytest.raises(ValueError):
        divisor_count(0)


def test_inverse_phi_matches_brute():
    limit = 2 * 60 * 60 + 1
    phi = phi_table(limit)
    for target in range(1, 61):
        smallest = next((n for n in range(1, limit) if phi[n] == target), 0)
        assert inverse_phi(target) == smallest


def test_gcd_sum_table():
    g = gcd_sum_table(80)
    for j in range(1, 80):
        assert g[j] == sum(math.gcd(k, j) for k in range(1, j + 1))


def test_pair_gcd_sum_table():
    t = pair_gcd_sum_table(40)
    for i in range(1, 40):
        assert t[i] == sum(math.gcd(a, b) for b in range(1, i + 1) for a in range(1, b))


def test_lcm_sum_and_table():
    table = lcm_sum_table(60)
    for n in range(1, 60):
        expected = sum(math.lcm(k, n) for k in range(1, n + 1))
        assert lcm_sum(n) == expected
        assert table[n] == expected


def test_pair_lcm_sum_table():
    t = pair_lcm_sum_table(40)
    for i in range(1, 40):
        assert t[i] == sum(math.lcm(a, b) for b in range(1, i + 1) for a in range(1, b))


def test_coprime_pairs_and_pair_gcd_sum():
    values = [6, 10, 15, 7, 1, 4, 9, 12, 35, 1]
    pairs = [(x, y) for i, x in enumerate(values) for y in values[i + 1:]]
    assert coprime_pairs(values) == sum(1 for x, y in pairs if math.gcd(x, y) == 1)
    assert pair_gcd_sum(values) == sum(math.gcd(x, y) for x, y in pairs)
    assert coprime_pairs([]) == pair_gcd_sum([]) == 0
    with pytest.raises(ValueError):
        coprime_pairs([0, 3])


def test_crt():
    for m1, m2 in [(4, 6), (5, 7), (9, 12)]:
        lcm = math.lcm(m1, m2)
        for r1 in range(m1):
            for r2 in range(m2):
                if (r2 - r1) % math.gcd(m1, m2):
                    with pytest.raises(ValueError):
                        crt(r1, m1, r2, m2)
                else:
                    x = crt(r1, m1, r2, m2)
                    assert 0 <= x < lcm
                    assert x % m1 == r1 and x % m2 == r2


def test_crt_system():
    residues, moduli = [2, 3, 2], [3, 5, 7]
    x = crt_system(residues, moduli)
    assert 0 <= x < 105
    assert all(x % m == r for r, m in zip(residues, moduli))
    with pytest.raises(ValueError):
        crt_system([1, 2], [4, 6])


def test_discrete_log_matches_brute():
    for m in range(2, 40):
        for a in range(1, m):
            for b in range(m):
                expected = next((x for x in range(2 * m) if pow(a, x, m) == b), None)
                assert discrete_log(a, b, m) == expected, (a, b, m)


def test_primitive_root():
    for p in [q for q in range(3, 100) if trial_prime(q)]:
        g = primitive_root(p)
        assert len({pow(g, e, p) for e in range(p - 1)}) == p - 1
        for h in range(2, g):
            assert len({pow(h, e, p) for e in range(p - 1)}) < p - 1