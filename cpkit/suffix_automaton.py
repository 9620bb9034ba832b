"""Suffix automaton with occurrence counts."""

from __future__ import annotations

from collections import deque


class SuffixAutomaton:
    """Suffix automaton of a text; ``occ[u]`` counts end positions of state ``u``."""

    def __init__(self, text: str = "") -> None:
        self.length = [0]
        self.link = [-1]
        self.to: list[dict[str, int]] = [{}]
        self._base_cnt = [0]
        self._base_dp = [0]
        self.occ: list[int] = [0]
        self.dp: list[int] = [0]
        self.last = 0
        self._stale = False
        for i, c in enumerate(text):
            self.add(c, i)
        self.build()

    def _new_state(self, length: int, cnt: int, dp: int) -> int:
        self.length.append(length)
        self.link.append(-1)
        self.to.append({})
        self._base_cnt.append(cnt)
        self._base_dp.append(dp)
        return len(self.length) - 1

    def add(self, c: str, i: int) -> None:
        """Append character ``c`` found at text position ``i``."""
        cur = self._new_state(self.length[self.last] + 1, 1, i)
        u = self.last
        while u != -1 and c not in self.to[u]:
            self.to[u][c] = cur
            u = self.link[u]
        if u == -1:
            self.link[cur] = 0
        else:
            v = self.to[u][c]
            if self.length[u] + 1 == self.length[v]:
                self.link[cur] = v
            else:
                w = self._new_state(self.length[u] + 1, 0, 0)
                self.link[w] = self.link[v]
                self.to[w] = dict(self.to[v])
                while u != -1 and self.to[u].get(c) == v:
                    self.to[u][c] = w
                    u = self.link[u]
                self.link[cur] = self.link[v] = w
        self.last = cur
        self._stale = True

    def build(self) -> None:
        """Propagate occurrence counts up the suffix-link tree."""
        size = len(self.length)
        occ = list(self._base_cnt)
        dp = list(self._base_dp)
        deg = [0] * size
        for u in range(1, size):
            deg[self.link[u]] += 1
        queue = deque(u for u in range(size) if not deg[u])
        while queue:
            u = queue.popleft()
            for v in self.to[u].values():
                dp[u] = max(dp[u], dp[v])
            p = self.link[u]
            if p == -1:
                continue
            occ[p] += occ[u]
            deg[p] -= 1
            if not deg[p]:
                queue.append(p)
        self.occ, self.dp = occ, dp
        self._stale = False

    def count(self, s: str, k: int) -> int:
        """Sum over the length-``k`` windows of ``s`` of their occurrences in the text."""
        if self._stale:
            self.build()
        total = 0
        u, matched = 0, 0
        for c in s:
            while u != -1 and c not in self.to[u]:
                u = self.link[u]
                if u != -1:
                    matched = self.length[u]
            if u == -1:
                break
            u = self.to[u][c]
            matched += 1
            while u and self.length[self.link[u]] >= k:
                u = self.link[u]
                matched = self.length[u]
            if k <= self.length[u] and k <= matched:
                total += self.occ[u]
        return total