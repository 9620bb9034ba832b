"""Fenwick tree supporting range addition and range sums."""

from __future__ import annotations


class RangeFenwick:
    """Array of ``n`` zeros with range addition and range sum queries."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._coef = [0] * (n + 1)
        self._corr = [0] * (n + 1)

    @staticmethod
    def _update(tree: list[int], i: int, x: int) -> None:
        i += 1
        while i < len(tree):
            tree[i] += x
            i += i & -i

    @staticmethod
    def _query(tree: list[int], i: int) -> int:
        i += 1
        total = 0
        while i > 0:
            total += tree[i]
            i -= i & -i
        return total

    def add(self, l: int, r: int, x: int) -> None:
        """Add ``x`` to every position in ``l..r`` inclusive."""
        if not 0 <= l <= r < self.n:
            raise IndexError((l, r))
        self._update(self._coef, l, x)
        self._update(self._corr, l, x * l)
        if r + 1 < self.n:
            self._update(self._coef, r + 1, -x)
            self._update(self._corr, r + 1, -x * (r + 1))

    def prefix_sum(self, i: int) -> int:
        """Sum of positions ``0..i`` inclusive; 0 for negative ``i``."""
        if i < 0:
            return 0
        if i >= self.n:
            raise IndexError(i)
        return self._query(self._coef, i) * (i + 1) - self._query(self._corr, i)

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l..r`` inclusive."""
        if not 0 <= l <= r < self.n:
            raise IndexError((l, r))
        return self.prefix_sum(r) - self.prefix_sum(l - 1)