"""Offline dynamic connectivity with a rollback union-find."""

from __future__ import annotations

from typing import Iterable


class RollbackDSU:
    """Union-find by rank without path compression, so unions can be undone."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n
        self.components = n
        self._ops: list[tuple[int, int, int, int]] = []

    def find(self, u: int) -> int:
        while self.parent[u] != u:
            u = self.parent[u]
        return u

    def unite(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        self.components -= 1
        if self.rank[u] > self.rank[v]:
            u, v = v, u
        self._ops.append((u, self.rank[u], v, self.rank[v]))
        self.parent[u] = v
        if self.rank[u] == self.rank[v]:
            self.rank[v] += 1
        return True

    def rollback(self) -> None:
        """Undo the most recent successful union; no-op if there is none."""
        if not self._ops:
            return
        u, ru, v, rv = self._ops.pop()
        self.parent[u], self.rank[u] = u, ru
        self.parent[v], self.rank[v] = v, rv
        self.components += 1


def offline_components(
    n: int, num_times: int, edges: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Component counts at times ``0..num_times-1``.

    Each edge is ``(u, v, l, r)``: present during times ``l..r`` inclusive.
    """
    if num_times <= 0:
        return []
    tree: dict[int, list[tuple[int, int]]] = {}

    def add(l: int, r: int, edge: tuple[int, int], node: int, s: int, e: int) -> None:
        if r < s or e < l:
            return
        if l <= s and e <= r:
            tree.setdefault(node, []).append(edge)
            return
        m = (s + e) // 2
        add(l, r, edge, 2 * node, s, m)
        add(l, r, edge, 2 * node + 1, m + 1, e)

    for u, v, l, r in edges:
        add(l, r, (u, v), 1, 0, num_times - 1)

    dsu = RollbackDSU(n)
    answer = [0] * num_times

    def go(node: int, s: int, e: int) -> None:
        merged = sum(dsu.unite(u, v) for u, v in tree.get(node, ()))
        if s == e:
            answer[s] = dsu.components
        else:
            m = (s + e) // 2
            go(2 * node, s, m)
            go(2 * node + 1, m + 1, e)
        for _ in range(merged):
            dsu.rollback()

    go(1, 0, num_times - 1)
    return answer