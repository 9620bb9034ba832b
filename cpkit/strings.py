"""Prefix function, Z-function and Manacher's palindrome radii."""

from __future__ import annotations

from typing import Sequence


def prefix_function(s: Sequence) -> list[int]:
    """``pi[i]``: length of the longest proper border of ``s[:i+1]``."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def prefix_occurrences(pi: Sequence[int]) -> list[int]:
    """Occurrences of each prefix length ``0..n`` in the string ``pi`` came from."""
    n = len(pi)
    occ = [0] * (n + 1)
    for value in pi:
        occ[value] += 1
    for length in range(n, 0, -1):
        occ[pi[length - 1]] += occ[length]
        occ[length] += 1
    return occ


def z_function(s: Sequence) -> list[int]:
    """``z[i]``: longest common prefix of ``s`` and ``s[i:]``; ``z[0] == len(s)``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    l, r = 1, 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(z[i - l], r - i + 1)
        while i + z[i] < n and s[i + z[i]] == s[z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    return z


def manacher(s: Sequence) -> tuple[list[int], list[int]]:
    """Palindrome radii ``(even, odd)``.

    ``s[i-even[i]:i+even[i]]`` and ``s[i-odd[i]:i+odd[i]+1]`` are the longest
    palindromes centred between ``i-1, i`` and at ``i`` respectively.
    """
    n = len(s)
    result = []
    for odd in (0, 1):
        even_shift = 1 - odd
        p = [0] * n
        l = r = 0
        for i in range(n):
            t = r - i + even_shift
            if i < r:
                p[i] = min(t, p[l + t])
            lo, hi = i - p[i], i + p[i] - even_shift
            while lo >= 1 and hi + 1 < n and s[lo - 1] == s[hi + 1]:
                p[i] += 1
                lo -= 1
                hi += 1
            if hi > r:
                l, r = lo, hi
        result.append(p)
    return result[0], result[1]