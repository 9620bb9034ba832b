"""Incremental bridge counting under edge insertions."""

from __future__ import annotations


class OnlineBridges:
    """Tracks 2-edge-connected components and the bridge count as edges arrive."""

    def __init__(self, n: int) -> None:
        self.par = [-1] * n
        self.dsu_2ecc = list(range(n))
        self.dsu_cc = list(range(n))
        self.dsu_cc_size = [1] * n
        self.last_visit = [0] * n
        self.lca_iteration = 0
        self.bridges = 0

    def find_2ecc(self, v: int) -> int:
        """Representative of the 2-edge-connected component of ``v`` (-1 stays -1)."""
        if v == -1:
            return -1
        root = v
        while self.dsu_2ecc[root] != root:
            root = self.dsu_2ecc[root]
        while self.dsu_2ecc[v] != root:
            self.dsu_2ecc[v], v = root, self.dsu_2ecc[v]
        return root

    def find_cc(self, v: int) -> int:
        """Representative of the connected component of ``v``."""
        v = self.find_2ecc(v)
        path = []
        while self.dsu_cc[v] != v:
            path.append(v)
            v = self.find_2ecc(self.dsu_cc[v])
        for x in path:
            self.dsu_cc[x] = v
        return v

    def _make_root(self, v: int) -> None:
        v = self.find_2ecc(v)
        root = v
        child = -1
        while v != -1:
            p = self.find_2ecc(self.par[v])
            self.par[v] = child
            self.dsu_cc[v] = root
            child = v
            v = p
        self.dsu_cc_size[root] = self.dsu_cc_size[child]

    def _merge_path(self, a: int, b: int) -> None:
        self.lca_iteration += 1
        it = self.lca_iteration
        path_a: list[int] = []
        path_b: list[int] = []
        lca = -1
        while lca == -1:
            if a != -1:
                a = self.find_2ecc(a)
                path_a.append(a)
                if self.last_visit[a] == it:
                    lca = a
                    break
                self.last_visit[a] = it
                a = self.par[a]
            if b != -1:
                b = self.find_2ecc(b)
                path_b.append(b)
                if self.last_visit[b] == it:
                    lca = b
                    break
                self.last_visit[b] = it
                b = self.par[b]
        for path in (path_a, path_b):
            for v in path:
                self.dsu_2ecc[v] = lca
                if v == lca:
                    break
                self.bridges -= 1

    def add_edge(self, a: int, b: int) -> None:
        """Insert the edge ``a``-``b`` and update the bridge count."""
        a = self.find_2ecc(a)
        b = self.find_2ecc(b)
        if a == b:
            return
        ca = self.find_cc(a)
        cb = self.find_cc(b)
        if ca != cb:
            self.bridges += 1
            if self.dsu_cc_size[ca] > self.dsu_cc_size[cb]:
                a, b = b, a
                ca, cb = cb, ca
            self._make_root(a)
            self.par[a] = self.dsu_cc[a] = b
            self.dsu_cc_size[cb] += self.dsu_cc_size[a]
        else:
            self._merge_path(a, b)