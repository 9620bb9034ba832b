"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Sequence


def dijkstra(adj: Sequence[Sequence[tuple[int, float]]], source: int) -> list[float]:
    """Distances from ``source``; ``adj[u]`` holds ``(v, cost)`` pairs, costs >= 0."""
    dist = [math.inf] * len(adj)
    dist[source] = 0
    done = [False] * len(adj)
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, c in adj[u]:
            if dist[v] > d + c:
                dist[v] = d + c
                heapq.heappush(heap, (dist[v], v))
    return dist


def bellman_ford(n: int, edges: Iterable[tuple[int, int, float]], source: int) -> list[float]:
    """Distances from ``source`` over directed ``(u, v, cost)`` edges.

    Raises ValueError when a negative cycle is reachable.
    """
    edge_list = list(edges)
    dist = [math.inf] * n
    dist[source] = 0
    for _ in range(n + 1):
        changed = False
        for u, v, cost in edge_list:
            if dist[u] < math.inf and dist[u] + cost < dist[v]:
                dist[v] = dist[u] + cost
                changed = True
        if not changed:
            return dist
    raise ValueError("negative cycle reachable from source")


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs distances from a matrix of direct costs (use math.inf for none)."""
    d = [list(row) for row in dist]
    for k, row_k in enumerate(d):
        for row in d:
            via = row[k]
            row[:] = [min(x, via + y) for x, y in zip(row, row_k)]
    return d