"""Randomised treaps: an ordered multiset with sums and an implicit-key sequence."""

from __future__ import annotations

import random
from typing import Iterable, Iterator


class _Node:
    __slots__ = ("val", "prior", "size", "sum", "left", "right", "rev")

    def __init__(self, val: int) -> None:
        self.val = val
        self.prior = random.random()
        self.size = 1
        self.sum = val
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.rev = False


def _size(t: _Node | None) -> int:
    return t.size if t else 0


def _sum(t: _Node | None) -> int:
    return t.sum if t else 0


def _pull(t: _Node) -> None:
    t.size = 1 + _size(t.left) + _size(t.right)
    t.sum = t.val + _sum(t.left) + _sum(t.right)


def _push(t: _Node | None) -> None:
    if t and t.rev:
        t.left, t.right = t.right, t.left
        t.rev = False
        if t.left:
            t.left.rev = not t.left.rev
        if t.right:
            t.right.rev = not t.right.rev


def _merge(l: _Node | None, r: _Node | None) -> _Node | None:
    _push(l)
    _push(r)
    if not l or not r:
        return l or r
    if l.prior > r.prior:
        l.right = _merge(l.right, r)
        _pull(l)
        return l
    r.left = _merge(l, r.left)
    _pull(r)
    return r


def _split_value(t: _Node | None, val: int) -> tuple[_Node | None, _Node | None]:
    """Left part holds values below ``val``."""
    if t is None:
        return None, None
    if val > t.val:
        a, b = _split_value(t.right, val)
        t.right = a
        _pull(t)
        return t, b
    a, b = _split_value(t.left, val)
    t.left = b
    _pull(t)
    return a, t


def _split_count(t: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Left part holds the first ``k`` elements."""
    if t is None:
        return None, None
    _push(t)
    if _size(t.left) < k:
        a, b = _split_count(t.right, k - _size(t.left) - 1)
        t.right = a
        _pull(t)
        return t, b
    a, b = _split_count(t.left, k)
    t.left = b
    _pull(t)
    return a, t


def _erase(t: _Node | None, val: int) -> tuple[_Node | None, bool]:
    if t is None:
        return None, False
    if t.val == val:
        return _merge(t.left, t.right), True
    if val < t.val:
        t.left, done = _erase(t.left, val)
    else:
        t.right, done = _erase(t.right, val)
    _pull(t)
    return t, done


class Treap:
    """Ordered multiset of numbers with order statistics and prefix sums."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, val: int) -> None:
        """Add one copy of ``val``."""
        left, right = _split_value(self._root, val)
        self._root = _merge(_merge(left, _Node(val)), right)

    def erase(self, val: int) -> bool:
        """Remove one copy of ``val``; return whether one was present."""
        self._root, done = _erase(self._root, val)
        return done

    def __contains__(self, x: object) -> bool:
        t = self._root
        while t:
            if t.val == x:
                return True
            t = t.right if t.val < x else t.left
        return False

    def __len__(self) -> int:
        return _size(self._root)

    def kth(self, k: int) -> int:
        """The ``k``-th smallest value, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(k)
        t = self._root
        while True:
            left = _size(t.left)
            if left == k - 1:
                return t.val
            if left < k - 1:
                k -= left + 1
                t = t.right
            else:
                t = t.left

    def count_less(self, x: int) -> int:
        """Number of stored values below ``x``."""
        count = 0
        t = self._root
        while t:
            if x <= t.val:
                t = t.left
            else:
                count += _size(t.left) + 1
                t = t.right
        return count

    def sum_less(self, x: int) -> int:
        """Sum of stored values below ``x``."""
        total = 0
        t = self._root
        while t:
            if x <= t.val:
                t = t.left
            else:
                total += t.val + _sum(t.left)
                t = t.right
        return total


class ImplicitTreap:
    """Sequence supporting positional insertion, range reversal and range sums."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for v in values:
            self._root = _merge(self._root, _Node(v))

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        t = self._root
        while stack or t:
            while t:
                _push(t)
                stack.append(t)
                t = t.left
            t = stack.pop()
            yield t.val
            t = t.right

    def insert(self, i: int, val: int) -> None:
        """Insert ``val`` so that it ends up at position ``i``."""
        if not 0 <= i <= len(self):
            raise IndexError(i)
        left, right = _split_count(self._root, i)
        self._root = _merge(_merge(left, _Node(val)), right)

    def _cut(self, l: int, r: int) -> tuple[_Node | None, _Node, _Node | None]:
        if not 0 <= l <= r < len(self):
            raise IndexError((l, r))
        rest, right = _split_count(self._root, r + 1)
        left, mid = _split_count(rest, l)
        return left, mid, right

    def reverse(self, l: int, r: int) -> None:
        """Reverse positions ``l..r`` inclusive."""
        left, mid, right = self._cut(l, r)
        mid.rev = not mid.rev
        self._root = _merge(_merge(left, mid), right)

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l..r`` inclusive."""
        left, mid, right = self._cut(l, r)
        total = mid.sum
        self._root = _merge(_merge(left, mid), right)
        return total