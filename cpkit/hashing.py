"""Polynomial string hashes: suffix-based, range with reverse, and updatable."""

from __future__ import annotations

from dataclasses import dataclass

_DOUBLE_MODS = (1000000007, 1000000009)
_DOUBLE_BASES = (137, 281)

_RANGE_MOD = 10**9 + 7
_RANGE_P = (97, 1000003)

_SEG_MODS = (2078526727, 2117566807)
_SEG_BASES = (1572872831, 1971536491)


def _powers(base: int, mod: int, count: int) -> list[int]:
    out = [1] * (count + 1)
    for i in range(1, count + 1):
        out[i] = out[i - 1] * base % mod
    return out


class DoubleHash:
    """Hashes of substrings via suffix hashes under two moduli."""

    def __init__(self, text: str) -> None:
        n = len(text)
        self._h = []
        self._pw = []
        for base, mod in zip(_DOUBLE_BASES, _DOUBLE_MODS):
            h = [0] * (n + 1)
            for i in range(n - 1, -1, -1):
                h[i] = (h[i + 1] * base + ord(text[i])) % mod
            self._h.append(h)
            self._pw.append(_powers(base, mod, n))

    def get(self, i: int, j: int) -> tuple[int, int]:
        """Hash pair of ``text[i..j]`` inclusive."""
        if i > j:
            raise ValueError("i must not exceed j")
        return tuple(
            (h[i] - h[j + 1] * pw[j - i + 1]) % mod
            for h, pw, mod in zip(self._h, self._pw, _DOUBLE_MODS)
        )


class RangeHash:
    """Prefix hashes of a lowercase string, optionally also read backwards."""

    def __init__(self, text: str, with_reverse: bool = False) -> None:
        n = len(text)
        codes = [ord(c) - ord("a") + 1 for c in text]
        self._pwr = [_powers(p, _RANGE_MOD, n + 1) for p in _RANGE_P]
        self._inv = [_powers(pow(p, _RANGE_MOD - 2, _RANGE_MOD), _RANGE_MOD, n + 1) for p in _RANGE_P]
        self._h = []
        self._rev: list[list[int]] | None = [] if with_reverse else None
        for it in range(2):
            h = [0] * (n + 1)
            for i, c in enumerate(codes):
                h[i + 1] = (h[i] + self._pwr[it][i + 1] * c) % _RANGE_MOD
            self._h.append(h)
            if self._rev is not None:
                r = [0] * (n + 1)
                for i, c in enumerate(codes):
                    r[i + 1] = (r[i] + self._inv[it][i + 1] * c) % _RANGE_MOD
                self._rev.append(r)

    def get(self, l: int, r: int) -> int:
        """Combined hash of ``text[l..r]``."""
        one, two = (
            (h[r + 1] - h[l]) * inv[l + 1] % _RANGE_MOD for h, inv in zip(self._h, self._inv)
        )
        return one << 31 | two

    def get_reverse(self, l: int, r: int) -> int:
        """Combined hash of ``text[l..r]`` reversed."""
        if self._rev is None:
            raise ValueError("built without reverse hashes")
        one, two = (
            (h[r + 1] - h[l]) * pw[r + 1] % _RANGE_MOD for h, pw in zip(self._rev, self._pwr)
        )
        return one << 31 | two


@dataclass(frozen=True)
class _Node:
    size: int
    h0: int
    h1: int


def _merge(a: _Node, b: _Node, pw: list[list[int]]) -> _Node:
    return _Node(
        a.size + b.size,
        (a.h0 * pw[0][b.size] + b.h0) % _SEG_MODS[0],
        (a.h1 * pw[1][b.size] + b.h1) % _SEG_MODS[1],
    )


class SegmentHash:
    """Segment tree of hashes of a digit string with point assignment.

    Each character ``c`` is valued ``ord(c) - ord('0') + 1``.
    """

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("text must be non-empty")
        self.n = len(text)
        self._pw = [_powers(b, m, self.n) for b, m in zip(_SEG_BASES, _SEG_MODS)]
        self._tree: dict[int, _Node] = {}
        values = [ord(c) - ord("0") + 1 for c in text]
        self._build(1, 0, self.n - 1, values)

    def _build(self, node: int, s: int, e: int, values: list[int]) -> None:
        if s == e:
            self._tree[node] = _Node(1, values[s], values[s])
            return
        m = (s + e) // 2
        self._build(2 * node, s, m, values)
        self._build(2 * node + 1, m + 1, e, values)
        self._tree[node] = _merge(self._tree[2 * node], self._tree[2 * node + 1], self._pw)

    def update(self, i: int, value: int) -> None:
        """Set position ``i`` to the raw value ``value``."""
        if not 0 <= i < self.n:
            raise IndexError(i)
        path = []
        node, s, e = 1, 0, self.n - 1
        while s != e:
            path.append(node)
            m = (s + e) // 2
            if i <= m:
                node, e = 2 * node, m
            else:
                node, s = 2 * node + 1, m + 1
        self._tree[node] = _Node(1, value, value)
        for node in reversed(path):
            self._tree[node] = _merge(self._tree[2 * node], self._tree[2 * node + 1], self._pw)

    def query(self, i: int, j: int) -> tuple[int, int]:
        """Hash pair of positions ``i..j`` inclusive."""
        if not 0 <= i <= j < self.n:
            raise IndexError((i, j))
        node = self._query(1, 0, self.n - 1, i, j)
        return node.h0, node.h1

    def _query(self, node: int, s: int, e: int, i: int, j: int) -> _Node:
        if i <= s and e <= j:
            return self._tree[node]
        m = (s + e) // 2
        if m < i:
            return self._query(2 * node + 1, m + 1, e, i, j)
        if m >= j:
            return self._query(2 * node, s, m, i, j)
        return _merge(
            self._query(2 * node, s, m, i, j), self._query(2 * node + 1, m + 1, e, i, j), self._pw
        )