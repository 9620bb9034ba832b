"""Lagrange interpolation from values at consecutive integer points."""

from __future__ import annotations

from typing import Sequence

MOD = 1_000_000_007


def interpolate(y: Sequence[int], k: int, mod: int = MOD) -> int:
    """Value at ``k`` of the degree ``len(y)-1`` polynomial with ``P(i) == y[i]``, modulo the prime ``mod``."""
    if not y:
        raise ValueError("need at least one value")
    n = len(y) - 1
    if n >= mod:
        raise ValueError("too many points for this modulus")
    k %= mod
    if k <= n:
        return y[k] % mod
    weight = 1
    for x in range(1, n + 1):
        weight = weight * (k - x) % mod * pow(-x % mod, -1, mod) % mod
    total = weight * y[0] % mod
    for x in range(1, n + 1):
        weight = weight * pow(k - x, -1, mod) % mod * (k - x + 1) % mod
        weight = weight * ((x - 1 - n) % mod) % mod * pow(x, -1, mod) % mod
        total = (total + weight * y[x]) % mod
    return total