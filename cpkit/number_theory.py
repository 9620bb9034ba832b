"""Number-theory routines: sieves, primality, factorisation, CRT, logs, sums."""

from __future__ import annotations

import math
import random
from typing import Iterator, Sequence


def floor_div(n: int, k: int) -> int:
    """Floor of ``n / k`` for positive ``k``."""
    return n // k


def ceil_div(n: int, k: int) -> int:
    """Ceiling of ``n / k`` for positive ``k``."""
    return -(-n // k)


def modular_inverses(n: int, mod: int) -> list[int]:
    """Inverses of ``1..n-1`` modulo the prime ``mod``; index 0 holds 0."""
    inv = [0] * n
    if n > 1:
        inv[1] = 1
    for i in range(2, n):
        inv[i] = -(mod // i) * inv[mod % i] % mod
    return inv


def ceil_blocks(n: int) -> Iterator[tuple[int, int, int]]:
    """Yield ``(i, j, v)``: ``ceil(n / x) == v`` for every ``x`` in ``i..j``, for ``x < n``."""
    i = 1
    while i < n:
        value = (n + i - 1) // i
        nxt = (n + value - 2) // (value - 1)
        yield i, nxt - 1, value
        i = nxt


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m``; ValueError if they are not coprime."""
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError("no inverse: arguments are not coprime")
    return x % m


def linear_sieve(n: int) -> tuple[list[int], list[int]]:
    """Least prime factor of every number below ``n`` and the primes below ``n``."""
    lpf = [0] * max(n, 0)
    primes: list[int] = []
    for i in range(2, n):
        if not lpf[i]:
            lpf[i] = i
            primes.append(i)
        for p in primes:
            if p > lpf[i] or i * p >= n:
                break
            lpf[i * p] = p
    return lpf, primes


def phi_table(n: int) -> list[int]:
    """Euler's totient of every number below ``n``."""
    phi = list(range(max(n, 0)))
    _, primes = linear_sieve(n)
    for p in primes:
        for k in range(p, n, p):
            phi[k] -= phi[k] // p
    return phi


def _mobius_table(n: int) -> list[int]:
    lpf, _ = linear_sieve(n)
    mu = [0] * n
    if n > 1:
        mu[1] = 1
    for i in range(2, n):
        p = lpf[i]
        rest = i // p
        mu[i] = 0 if rest % p == 0 else -mu[rest]
    return mu


def is_probable_prime(n: int, rounds: int = 10) -> bool:
    """Randomised Miller-Rabin test."""
    if n in (2, 3):
        return True
    if n <= 1 or n % 2 == 0:
        return False
    odd = n - 1
    while not odd & 1:
        odd >>= 1
    for _ in range(rounds):
        a = random.randrange(2, n)
        s = odd
        if pow(a, s, n) == 1:
            continue
        composite = True
        while s != n - 1:
            if pow(a, s, n) == n - 1:
                composite = False
                break
            s <<= 1
        if composite:
            return False
    return True


def _check_composite(n: int, a: int, d: int, s: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(1, s):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin; exact for every ``n`` below 3.1e23."""
    if n < 2:
        return False
    r = 0
    d = n - 1
    while d & 1 == 0:
        d >>= 1
        r += 1
    for a in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37):
        if n == a:
            return True
        if _check_composite(n, a, d, r):
            return False
    return True


def pollard_rho(n: int) -> int:
    """A non-trivial factor of the composite ``n`` (1 for ``n == 1``)."""
    if n == 1:
        return 1
    if n % 2 == 0:
        return 2
    if is_prime(n):
        raise ValueError("n is prime")
    while True:
        x = random.randrange(2, n)
        y = x
        c = random.randrange(1, n)
        g = 1
        while g == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            g = math.gcd(abs(x - y), n)
        if g != n:
            return g


def prime_factorize(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in increasing order."""
    if n <= 1:
        return []
    if is_prime(n):
        return [n]
    d = pollard_rho(n)
    return sorted(prime_factorize(d) + prime_factorize(n // d))


def divisor_count(n: int) -> int:
    """Number of divisors of ``n`` using trial division up to the cube root."""
    if n < 1:
        raise ValueError("n must be positive")
    result = 1
    i = 2
    while i * i * i <= n:
        e = 0
        while n % i == 0:
            e += 1
            n //= i
        result *= e + 1
        i += 1
    root = math.isqrt(n)
    if is_prime(n):
        result *= 2
    elif n == root * root and is_prime(root):
        result *= 3
    elif n != 1:
        result *= 4
    return result


def inverse_phi(phi: int) -> int:
    """Smallest ``n`` with ``totient(n) == phi``, or 0 if there is none."""
    if phi < 1:
        raise ValueError("phi must be positive")
    if phi % 2:
        return 1 if phi == 1 else 0
    candidates: set[int] = set()
    for i in range(1, math.isqrt(phi) + 1):
        if phi % i == 0:
            if is_prime(i + 1):
                candidates.add(i + 1)
            if i * i != phi and is_prime(phi // i + 1):
                candidates.add(phi // i + 1)
    primes = sorted(candidates)

    def search(rest: int, n: int, pc: int) -> int | None:
        if rest == 1:
            return n
        if pc < 0:
            return None
        best = search(rest, n, pc - 1)
        p = primes[pc]
        if rest % (p - 1) == 0:
            rest //= p - 1
            n = n // (p - 1) * p
            while rest % p == 0:
                rest //= p
            found = search(rest, n, pc - 1)
            if found is not None and (best is None or found < best):
                best = found
        return best

    answer = search(phi, phi, len(primes) - 1)
    return 0 if answer is None else answer


def gcd_sum_table(n: int) -> list[int]:
    """``g[j] = sum(gcd(k, j) for k in 1..j)`` for every ``j`` below ``n``."""
    phi = phi_table(n)
    g = [0] * max(n, 0)
    for i in range(1, n):
        for j in range(i, n, i):
            g[j] += i * phi[j // i]
    return g


def pair_gcd_sum_table(n: int) -> list[int]:
    """``t[i] = sum(gcd(a, b) for 1 <= a < b <= i)`` for every ``i`` below ``n``."""
    phi = phi_table(n)
    sums = [0] * max(n, 0)
    for i in range(1, n):
        for j in range(i, n, i):
            sums[j] += phi[i] * (j // i)
    prefix = [0] * max(n, 0)
    for i in range(1, n):
        prefix[i] = prefix[i - 1] + sums[i] - i
    return prefix


def _phi(n: int) -> int:
    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def lcm_sum(n: int) -> int:
    """``sum(lcm(k, n) for k in 1..n)``."""
    total = 0
    d = 1
    while d * d <= n:
        if n % d == 0:
            total += d * _phi(d)
            if n // d != d:
                total += n // d * _phi(n // d)
        d += 1
    return (total + 1) * n // 2


def _divisor_phi_sums(n: int) -> list[int]:
    phi = phi_table(n)
    sums = [0] * max(n, 0)
    for i in range(1, n):
        for j in range(i, n, i):
            sums[j] += i * phi[i]
    return sums


def lcm_sum_table(n: int) -> list[int]:
    """``l[i] = sum(lcm(k, i) for k in 1..i)`` for every ``i`` below ``n``."""
    sums = _divisor_phi_sums(n)
    return [0] + [(sums[i] + 1) * i // 2 for i in range(1, n)] if n > 0 else []


def pair_lcm_sum_table(n: int) -> list[int]:
    """``t[i] = sum(lcm(a, b) for 1 <= a < b <= i)`` for every ``i`` below ``n``."""
    sums = _divisor_phi_sums(n)
    prefix = [0] * max(n, 0)
    for i in range(1, n):
        prefix[i] = prefix[i - 1] + (sums[i] + 1) // 2 * i - i
    return prefix


def _multiple_counts(values: Sequence[int]) -> list[int]:
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    limit = max(values) + 1
    freq = [0] * limit
    for v in values:
        freq[v] += 1
    return [0] + [sum(freq[d::d]) for d in range(1, limit)]


def coprime_pairs(values: Sequence[int]) -> int:
    """Number of index pairs ``i < j`` with ``gcd(values[i], values[j]) == 1``."""
    if not values:
        return 0
    cnt = _multiple_counts(values)
    mu = _mobius_table(len(cnt))
    return sum(mu[d] * c * (c - 1) // 2 for d, c in enumerate(cnt) if d)


def pair_gcd_sum(values: Sequence[int]) -> int:
    """``sum(gcd(values[i], values[j]) for i < j)``."""
    if not values:
        return 0
    cnt = _multiple_counts(values)
    limit = len(cnt)
    left = list(range(limit))
    total = 0
    for i in range(1, limit):
        total += left[i] * cnt[i] * (cnt[i] - 1) // 2
        for j in range(2 * i, limit, i):
            left[j] -= left[i]
    return total


def crt(r1: int, m1: int, r2: int, m2: int) -> int:
    """Smallest ``x >= 0`` with ``x = r1 (mod m1)`` and ``x = r2 (mod m2)``.

    Raises ValueError when the congruences are inconsistent.
    """
    g, p, _ = egcd(m1, m2)
    if (r2 - r1) % g:
        raise ValueError("no solution")
    lcm = m1 // g * m2
    x = r1 + m1 * ((r2 - r1) // g * p % (m2 // g))
    return x % lcm


def crt_system(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Smallest non-negative solution of a system of congruences."""
    if len(residues) != len(moduli) or not residues:
        raise ValueError("need equally many residues and moduli, at least one")
    x = residues[0] % moduli[0]
    modulus = moduli[0]
    for r, m in zip(residues[1:], moduli[1:]):
        x = crt(x, modulus, r, m)
        modulus = modulus // math.gcd(modulus, m) * m
    return x


def discrete_log(a: int, b: int, m: int) -> int | None:
    """Smallest ``x`` with ``a**x = b (mod m)`` by baby-step giant-step, or None."""
    a %= m
    b %= m
    if a == 0:
        return 1 if b == 0 else None
    k = 1
    add = 0
    while (g := math.gcd(a, m)) > 1:
        if b == k:
            return add
        if b % g:
            return None
        b //= g
        m //= g
        k = k * a // g % m
        add += 1
    n = math.isqrt(m) + 1
    seen: dict[int, int] = {}
    cur = b
    for q in range(n + 1):
        seen[cur] = q
        cur = cur * a % m
    step = pow(a, n, m)
    cur = k
    for p in range(1, n + 1):
        cur = cur * step % m
        if cur in seen:
            return n * p - seen[cur] + add
    return None


def primitive_root(p: int) -> int | None:
    """Smallest generator of the multiplicative group modulo prime ``p`` (None if none above 1)."""
    n = p - 1
    factors = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        factors.append(n)
    order = p - 1
    for g in range(2, p):
        if all(pow(g, order // f, p) != 1 for f in factors):
            return g
    return None