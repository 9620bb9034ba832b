"""Bit tricks: next mask with the same popcount, submask walks and Gray codes."""

from __future__ import annotations

from typing import Iterator


def next_combination(mask: int) -> int:
    """Smallest mask above ``mask`` with the same number of set bits."""
    if mask <= 0:
        raise ValueError("mask must be positive")
    lsb = mask & -mask
    ripple = mask + lsb
    return ((ripple ^ mask) // (lsb << 2)) | ripple


def submasks(mask: int) -> Iterator[int]:
    """Yield the non-zero submasks of ``mask`` in decreasing order."""
    if mask < 0:
        raise ValueError("mask must be non-negative")
    s = mask
    while s > 0:
        yield s
        s = (s - 1) & mask


def gray_code(n: int) -> int:
    """The ``n``-th reflected binary Gray code."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n ^ (n >> 1)


def gray_to_binary(g: int) -> int:
    """Index ``n`` whose Gray code is ``g``."""
    if g < 0:
        raise ValueError("code must be non-negative")
    d = 0
    while g:
        d ^= g
        g >>= 1
    return d