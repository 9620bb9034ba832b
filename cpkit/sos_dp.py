"""Sum over subsets / supersets and the counting problems built on them."""

from __future__ import annotations

from typing import Sequence

MOD = 1_000_000_007


def _check_size(f: Sequence[int], bits: int) -> None:
    if bits < 0 or len(f) != 1 << bits:
        raise ValueError("length must be 2 ** bits")


def subset_sums(f: Sequence[int], bits: int) -> list[int]:
    """``g[mask] = sum(f[s] for s submask of mask)``."""
    _check_size(f, bits)
    g = list(f)
    for i in range(bits):
        bit = 1 << i
        for mask in range(1 << bits):
            if mask & bit:
                g[mask] += g[mask ^ bit]
    return g


def superset_sums(f: Sequence[int], bits: int) -> list[int]:
    """``g[mask] = sum(f[s] for s supermask of mask)``."""
    _check_size(f, bits)
    g = list(f)
    for i in range(bits):
        bit = 1 << i
        for mask in range(1 << bits):
            if not mask & bit:
                g[mask] += g[mask | bit]
    return g


def _counts(values: Sequence[int], bits: int) -> list[int]:
    if bits < 0:
        raise ValueError("bits must be non-negative")
    counts = [0] * (1 << bits)
    for v in values:
        if not 0 <= v < 1 << bits:
            raise ValueError(f"value {v} does not fit in {bits} bits")
        counts[v] += 1
    return counts


def zero_and_pairs(values: Sequence[int], bits: int) -> int:
    """Ordered index pairs ``(i, j)``, ``i == j`` allowed, with ``values[i] & values[j] == 0``."""
    f = subset_sums(_counts(values, bits), bits)
    full = (1 << bits) - 1
    return sum(f[v ^ full] for v in values)


def zero_and_subsequences(values: Sequence[int], bits: int, mod: int = MOD) -> int:
    """Non-empty subsequences whose bitwise AND is zero, modulo ``mod``."""
    f = superset_sums(_counts(values, bits), bits)
    total = 0
    for mask, count in enumerate(f):
        term = pow(2, count, mod)
        total += -term if mask.bit_count() & 1 else term
    return total % mod


def or_subsequences(values: Sequence[int], bits: int, target: int, mod: int = MOD) -> int:
    """Non-empty subsequences whose bitwise OR equals ``target``, modulo ``mod``."""
    counts = _counts(values, bits)
    if not 0 <= target < 1 << bits:
        raise ValueError(f"target does not fit in {bits} bits")
    if target == 0:
        return (pow(2, counts[0], mod) - 1) % mod
    f = subset_sums(counts, bits)
    total = 0
    for mask, count in enumerate(f):
        if mask & target != mask:
            continue
        term = pow(2, count, mod)
        total += -term if (mask ^ target).bit_count() & 1 else term
    return total % mod