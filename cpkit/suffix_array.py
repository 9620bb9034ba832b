"""Suffix array by prefix doubling and the LCP array by Kasai's method."""

from __future__ import annotations

from typing import Sequence


def suffix_array(s: Sequence) -> tuple[list[int], list[int]]:
    """Return ``(sa, lcp)``.

    ``sa`` lists suffix starts in sorted order; ``lcp[i]`` is the common prefix
    length of suffixes ``sa[i-1]`` and ``sa[i]`` with ``lcp[0] == 0``.
    Works for strings and for sequences of comparable values.
    """
    n = len(s)
    if n == 0:
        return [], []
    values = [ord(c) for c in s] if isinstance(s, str) else list(s)
    order = sorted(set(values))
    index = {v: i for i, v in enumerate(order)}
    rank = [index[v] for v in values]
    sa = list(range(n))
    k = 1
    while True:
        def key(i: int, k: int = k) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        sa.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[sa[-1]] == n - 1:
            break
        k *= 2
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = sa[rank[i] - 1]
        while i + h < n and j + h < n and values[i + h] == values[j + h]:
            h += 1
        lcp[rank[i]] = h
        if h:
            h -= 1
    return sa, lcp