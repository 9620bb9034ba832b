"""Maximum flow (Dinic) and min-cost flow (successive shortest paths)."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable


class _Residual:
    """Residual graph with paired arcs: arc ``e`` and ``e ^ 1`` are reverses."""

    def __init__(self, n: int) -> None:
        self.out: list[list[int]] = [[] for _ in range(n)]
        self.to: list[int] = []
        self.cap: list[float] = []
        self.cost: list[float] = []

    def add(self, u: int, v: int, cap: float, cost: float = 0) -> None:
        for a, b, c, w in ((u, v, cap, cost), (v, u, 0, -cost)):
            self.out[a].append(len(self.to))
            self.to.append(b)
            self.cap.append(c)
            self.cost.append(w)


def max_flow(n: int, edges: Iterable[tuple[int, int, float]], source: int, sink: int) -> float:
    """Value of a maximum flow over directed ``(u, v, capacity)`` edges."""
    g = _Residual(n)
    for u, v, c in edges:
        g.add(u, v, c)
    total = 0
    while True:
        level = [-1] * n
        level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for e in g.out[u]:
                v = g.to[e]
                if level[v] == -1 and g.cap[e] > 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        if level[sink] == -1:
            return total
        ptr = [0] * n

        def push(u: int, limit: float) -> float:
            if u == sink:
                return limit
            arcs = g.out[u]
            while ptr[u] < len(arcs):
                e = arcs[ptr[u]]
                v = g.to[e]
                if g.cap[e] > 0 and level[v] == level[u] + 1:
                    pushed = push(v, min(limit, g.cap[e]))
                    if pushed > 0:
                        g.cap[e] -= pushed
                        g.cap[e ^ 1] += pushed
                        return pushed
                ptr[u] += 1
            return 0

        while True:
            pushed = push(source, math.inf)
            if not pushed:
                break
            total += pushed


class MinCostFlow:
    """Min-cost flow using Bellman-Ford queue (SPFA) augmenting paths."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._g = _Residual(n)

    def add_edge(self, u: int, v: int, cap: float, cost: float) -> None:
        self._g.add(u, v, cap, cost)

    def _shortest(self, source: int, sink: int) -> tuple[float, float, list[int]]:
        g = self._g
        dist = [math.inf] * self.n
        via = [-1] * self.n
        bottleneck = [math.inf] * self.n
        in_queue = [False] * self.n
        dist[source] = 0
        queue = deque([source])
        in_queue[source] = True
        while queue:
            u = queue.popleft()
            in_queue[u] = False
            for e in g.out[u]:
                v = g.to[e]
                if g.cap[e] > 0 and dist[u] + g.cost[e] < dist[v]:
                    dist[v] = dist[u] + g.cost[e]
                    via[v] = e
                    bottleneck[v] = min(bottleneck[u], g.cap[e])
                    if not in_queue[v]:
                        in_queue[v] = True
                        queue.append(v)
        amount = 0 if bottleneck[sink] == math.inf else bottleneck[sink]
        return amount, dist[sink], via

    def solve(self, source: int, sink: int, max_flow: float = math.inf) -> tuple[float, float]:
        """Send up to ``max_flow`` units; return ``(flow, total cost)``."""
        g = self._g
        flow = 0
        cost = 0
        while True:
            amount, dist, via = self._shortest(source, sink)
            amount = min(amount, max_flow - flow)
            if not amount:
                return flow, cost
            flow += amount
            cost += amount * dist
            v = sink
            while v != source:
                e = via[v]
                g.cap[e] -= amount
                g.cap[e ^ 1] += amount
                v = g.to[e ^ 1]