"""Persistent segment tree over point additions and a persistent binary trie."""

from __future__ import annotations


class _SegNode:
    __slots__ = ("sum", "left", "right")

    def __init__(self, total: int, left: _SegNode | None, right: _SegNode | None) -> None:
        self.sum = total
        self.left = left
        self.right = right


def _sum(u: _SegNode | None) -> int:
    return u.sum if u else 0


def _left(u: _SegNode | None) -> _SegNode | None:
    return u.left if u else None


def _right(u: _SegNode | None) -> _SegNode | None:
    return u.right if u else None


class PersistentSegmentTree:
    """Sums over positions ``0..size-1``; every update creates a new version.

    Version 0 is all zeros.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._roots: list[_SegNode | None] = [None]

    def _root(self, version: int) -> _SegNode | None:
        if not 0 <= version < len(self._roots):
            raise IndexError(version)
        return self._roots[version]

    def add(self, version: int, i: int, x: int) -> int:
        """Add ``x`` at position ``i`` of ``version``; return the new version number."""
        root = self._root(version)
        if not 0 <= i < self.size:
            raise IndexError(i)
        self._roots.append(self._add(root, i, x, 0, self.size - 1))
        return len(self._roots) - 1

    def _add(self, u: _SegNode | None, i: int, x: int, s: int, e: int) -> _SegNode:
        if s == e:
            return _SegNode(_sum(u) + x, None, None)
        m = (s + e) // 2
        left, right = _left(u), _right(u)
        if i <= m:
            left = self._add(left, i, x, s, m)
        else:
            right = self._add(right, i, x, m + 1, e)
        return _SegNode(_sum(left) + _sum(right), left, right)

    def range_sum(self, version: int, l: int, r: int) -> int:
        """Sum of positions ``l..r`` in ``version``; positions outside are ignored."""
        root = self._root(version)
        l, r = max(l, 0), min(r, self.size - 1)
        if l > r:
            return 0
        return self._range_sum(root, l, r, 0, self.size - 1)

    def _range_sum(self, u: _SegNode | None, l: int, r: int, s: int, e: int) -> int:
        if u is None or s > r or e < l:
            return 0
        if l <= s and e <= r:
            return u.sum
        m = (s + e) // 2
        return self._range_sum(u.left, l, r, s, m) + self._range_sum(u.right, l, r, m + 1, e)

    def kth(self, left_version: int, right_version: int, k: int) -> int:
        """Position of the ``k``-th unit (from 1) in ``right_version`` minus ``left_version``.

        With counts of values as positions this is the ``k``-th smallest value added
        between the two versions.
        """
        ul = self._root(left_version)
        ur = self._root(right_version)
        if not 1 <= k <= _sum(ur) - _sum(ul):
            raise ValueError("k out of range")
        s, e = 0, self.size - 1
        while s != e:
            m = (s + e) // 2
            in_left = _sum(_left(ur)) - _sum(_left(ul))
            if in_left >= k:
                ul, ur, e = _left(ul), _left(ur), m
            else:
                k -= in_left
                ul, ur, s = _right(ul), _right(ur), m + 1
        return s


class PersistentXorTrie:
    """Binary trie of ``bits``-bit numbers; every insertion creates a new version.

    Version 0 is empty.
    """

    def __init__(self, bits: int = 30) -> None:
        if bits < 1:
            raise ValueError("bits must be positive")
        self.bits = bits
        self._roots: list[list | None] = [None]

    def _root(self, version: int) -> list | None:
        if not 0 <= version < len(self._roots):
            raise IndexError(version)
        return self._roots[version]

    def _check(self, x: int) -> None:
        if not 0 <= x < 1 << self.bits:
            raise ValueError(f"value must fit in {self.bits} bits")

    def add(self, version: int, x: int) -> int:
        """Insert ``x`` into ``version``; return the new version number."""
        prev = self._root(version)
        self._check(x)
        new_root: list = [None, None]
        cur = new_root
        for idx in reversed(range(self.bits)):
            f = (x >> idx) & 1
            if prev is not None:
                cur[1 - f] = prev[1 - f]
            nxt: list = [None, None]
            cur[f] = nxt
            cur = nxt
            prev = prev[f] if prev is not None else None
        self._roots.append(new_root)
        return len(self._roots) - 1

    def max_xor(self, version: int, x: int) -> int:
        """Largest ``x ^ y`` over values ``y`` in ``version``; 0 when it is empty."""
        u = self._root(version)
        self._check(x)
        if u is None:
            return 0
        result = 0
        for idx in reversed(range(self.bits)):
            f = (x >> idx) & 1
            if u[1 - f] is not None:
                result |= 1 << idx
                u = u[1 - f]
            else:
                u = u[f]
        return result