"""Monotone maps answering maximum over suffix or prefix of keys."""

from __future__ import annotations

from sortedcontainers import SortedDict


class MaxSuffixMap:
    """Pairs ``(a, b)``; answers the largest ``b`` among pairs with ``a >= x``.

    Only non-dominated pairs are kept: keys increase while values decrease.
    """

    def __init__(self) -> None:
        self._map = SortedDict()

    def insert(self, a: int, b: int) -> None:
        d = self._map
        i = d.bisect_left(a)
        if i < len(d) and d.peekitem(i)[1] >= b:
            return
        d[a] = b
        i = d.index(a)
        while i > 0 and d.peekitem(i - 1)[1] <= b:
            del d[d.peekitem(i - 1)[0]]
            i -= 1

    def query(self, x: int) -> int:
        """Largest ``b`` with ``a >= x``, or 0 if there is none."""
        i = self._map.bisect_left(x)
        return self._map.peekitem(i)[1] if i < len(self._map) else 0


class MaxPrefixMap:
    """Pairs ``(a, b)``; answers the largest ``b`` among pairs with ``a <= x``.

    Only non-dominated pairs are kept: keys and values both increase.
    """

    def __init__(self) -> None:
        self._map = SortedDict()

    def insert(self, a: int, b: int) -> None:
        d = self._map
        i = d.bisect_right(a)
        if i > 0 and d.peekitem(i - 1)[1] >= b:
            return
        d[a] = b
        i = d.index(a)
        while i + 1 < len(d) and d.peekitem(i + 1)[1] <= b:
            del d[d.peekitem(i + 1)[0]]

    def query(self, x: int) -> int:
        """Largest ``b`` with ``a <= x``, or 0 if there is none."""
        i = self._map.bisect_right(x)
        return self._map.peekitem(i - 1)[1] if i > 0 else 0