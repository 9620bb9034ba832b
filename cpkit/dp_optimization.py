"""Convex hull trick variants, Li Chao tree, divide-and-conquer and Knuth DP."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import Sequence

from sortedcontainers import SortedList


class MonotoneCHT:
    """Lower envelope of lines added in non-increasing slope order; queries a minimum."""

    def __init__(self) -> None:
        self._m: list[int] = []
        self._c: list[int] = []

    def insert(self, m: int, c: int) -> None:
        """Add the line ``y = m*x + c``; ``m`` must not exceed the previous slope."""
        ms, cs = self._m, self._c
        if ms:
            if m > ms[-1]:
                raise ValueError("slopes must be non-increasing")
            if m == ms[-1]:
                if c >= cs[-1]:
                    return
                ms.pop()
                cs.pop()
        while len(ms) >= 2 and (c - cs[-2]) * (ms[-2] - ms[-1]) <= (cs[-1] - cs[-2]) * (ms[-2] - m):
            ms.pop()
            cs.pop()
        ms.append(m)
        cs.append(c)

    def query(self, x: int) -> int:
        """Minimum of ``m*x + c`` over the stored lines."""
        if not self._m:
            raise ValueError("no lines")
        lo, hi = 0, len(self._m) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if self._m[mid] * x + self._c[mid] > self._m[mid + 1] * x + self._c[mid + 1]:
                lo = mid + 1
            else:
                hi = mid
        return self._m[lo] * x + self._c[lo]


class DynamicCHT:
    """Upper envelope of lines added in any order; ``eval`` gives the maximum.

    For minima add ``(-m, -b)`` and negate the result.
    """

    def __init__(self) -> None:
        self._lines = SortedList()

    def _bad(self, i: int) -> bool:
        lines = self._lines
        ym, yb = lines[i]
        has_next = i + 1 < len(lines)
        if i == 0:
            if not has_next:
                return False
            zm, zb = lines[i + 1]
            return ym == zm and yb <= zb
        xm, xb = lines[i - 1]
        if not has_next:
            return ym == xm and yb <= xb
        zm, zb = lines[i + 1]
        return (xb - yb) * (zm - ym) >= (yb - zb) * (ym - xm)

    def add(self, m: int, b: int) -> None:
        """Add the line ``y = m*x + b``."""
        lines = self._lines
        lines.add((m, b))
        i = lines.bisect_right((m, b)) - 1
        if self._bad(i):
            del lines[i]
            return
        while i + 1 < len(lines) and self._bad(i + 1):
            del lines[i + 1]
        while i > 0 and self._bad(i - 1):
            del lines[i - 1]
            i -= 1

    def eval(self, x: int) -> int:
        """Maximum of ``m*x + b`` over the stored lines."""
        lines = self._lines
        if not lines:
            raise ValueError("no lines")

        def value(i: int) -> int:
            m, b = lines[i]
            return m * x + b

        lo, hi = 0, len(lines) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if value(mid) < value(mid + 1):
                lo = mid + 1
            else:
                hi = mid
        return value(lo)


class LiChaoTree:
    """Li Chao tree over integer points ``lo..hi-1`` answering minimum line values."""

    def __init__(self, lo: int, hi: int) -> None:
        if hi <= lo:
            raise ValueError("empty domain")
        self.lo = lo
        self.hi = hi
        self._tree: dict[int, tuple[int, int]] = {}

    def insert(self, m: int, b: int) -> None:
        """Add the line ``y = m*x + b``."""
        line = (m, b)
        i, lo, hi = 1, self.lo, self.hi
        while True:
            cur = self._tree.get(i)
            if cur is None:
                self._tree[i] = line
                return
            mid = (lo + hi) // 2
            left = line[0] * lo + line[1] < cur[0] * lo + cur[1]
            better_mid = line[0] * mid + line[1] < cur[0] * mid + cur[1]
            if better_mid:
                self._tree[i], line = line, cur
            if hi - lo == 1:
                return
            if left != better_mid:
                i, hi = 2 * i, mid
            else:
                i, lo = 2 * i + 1, mid

    def query(self, x: int) -> float:
        """Minimum line value at ``x``; infinity if no line was added."""
        if not self.lo <= x < self.hi:
            raise IndexError(x)
        best: float = math.inf
        i, lo, hi = 1, self.lo, self.hi
        while True:
            cur = self._tree.get(i)
            if cur is None:
                return best
            best = min(best, cur[0] * x + cur[1])
            if hi - lo == 1:
                return best
            mid = (lo + hi) // 2
            if x < mid:
                i, hi = 2 * i, mid
            else:
                i, lo = 2 * i + 1, mid


def partition_min_squares(values: Sequence[int], k: int) -> int:
    """Split non-negative ``values`` into ``k`` non-empty runs minimising the sum of squared run sums."""
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError("k must lie in 1..len(values)")
    pref = [0, *accumulate(values)]
    prev: list[float] = [0] + [math.inf] * n
    for j in range(1, k + 1):
        cur: list[float] = [math.inf] * (n + 1)
        stack = [(j, n, j - 1, n - 1)]
        while stack:
            l, r, kl, kr = stack.pop()
            if l > r:
                continue
            mid = (l + r) // 2
            best: tuple[float, int] = (math.inf, kl)
            for t in range(kl, min(mid - 1, kr) + 1):
                cand = (prev[t] + (pref[mid] - pref[t]) ** 2, t)
                if cand < best:
                    best = cand
            cur[mid] = best[0]
            stack.append((l, mid - 1, kl, best[1]))
            stack.append((mid + 1, r, best[1], kr))
        prev = cur
    return int(prev[n])


def knuth_merge_cost(values: Sequence[int]) -> int:
    """Least cost to merge adjacent runs into one; each merge costs the merged sum."""
    n = len(values)
    if n == 0:
        raise ValueError("values must be non-empty")
    pref = [0, *accumulate(values)]
    dp = [[0] * n for _ in range(n)]
    opt = [[0] * n for _ in range(n)]
    for i in range(n):
        opt[i][i] = i
    for i in range(n - 2, -1, -1):
        for j in range(i + 1, n):
            total = pref[j + 1] - pref[i]
            best = math.inf
            arg = opt[i][j - 1]
            for k in range(opt[i][j - 1], min(j - 1, opt[i + 1][j]) + 1):
                cand = dp[i][k] + dp[k + 1][j] + total
                if best >= cand:
                    best = cand
                    arg = k
            dp[i][j] = best
            opt[i][j] = arg
    return dp[0][n - 1]