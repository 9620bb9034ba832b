"""Aho-Corasick automaton for matching many patterns at once."""

from __future__ import annotations

from collections import deque
from typing import Sequence


class AhoCorasick:
    """Automaton over a fixed list of non-empty patterns."""

    def __init__(self, patterns: Sequence[str]) -> None:
        self.patterns = list(patterns)
        self._to: list[dict[str, int]] = [{}]
        cnt = [0]
        self._node: list[int] = []
        for p in self.patterns:
            if not p:
                raise ValueError("patterns must be non-empty")
            u = 0
            for c in p:
                if c not in self._to[u]:
                    self._to[u][c] = len(self._to)
                    self._to.append({})
                    cnt.append(0)
                u = self._to[u][c]
            cnt[u] += 1
            self._node.append(u)
        size = len(self._to)
        self._link = [0] * size
        self._ends_here = list(cnt)
        self._children: list[list[int]] = [[] for _ in range(size)]
        self._order: list[int] = []
        queue = deque([0])
        while queue:
            u = queue.popleft()
            self._order.append(u)
            for c, v in self._to[u].items():
                queue.append(v)
                if u:
                    cur = self._link[u]
                    while cur and c not in self._to[cur]:
                        cur = self._link[cur]
                    self._link[v] = self._to[cur].get(c, 0)
                self._children[self._link[v]].append(v)
                self._ends_here[v] += self._ends_here[self._link[v]]

    def _states(self, text: str) -> list[int]:
        states = []
        u = 0
        for c in text:
            while u and c not in self._to[u]:
                u = self._link[u]
            u = self._to[u].get(c, 0)
            states.append(u)
        return states

    def count(self, text: str) -> list[int]:
        """Number of occurrences of each pattern in ``text``."""
        hits = [0] * len(self._to)
        for u in self._states(text):
            hits[u] += 1
        for u in reversed(self._order):
            if u:
                hits[self._link[u]] += hits[u]
        return [hits[u] for u in self._node]

    def positions(self, text: str) -> list[list[int]]:
        """Sorted end positions in ``text`` of each pattern's occurrences."""
        at: list[list[int]] = [[] for _ in self._to]
        for i, u in enumerate(self._states(text)):
            at[u].append(i)
        result = []
        for node in self._node:
            found: list[int] = []
            stack = [node]
            while stack:
                u = stack.pop()
                found.extend(at[u])
                stack.extend(self._children[u])
            result.append(sorted(found))
        return result

    def ends(self, text: str) -> list[int]:
        """Number of patterns ending at each position of ``text``."""
        return [self._ends_here[u] for u in self._states(text)]