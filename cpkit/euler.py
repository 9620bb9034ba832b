"""Eulerian cycles in directed and undirected graphs (Hierholzer)."""

from __future__ import annotations

from typing import Sequence


def directed_euler_cycle(adj: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Walk every arc reachable from ``start``; the input is not modified."""
    remaining = [list(targets) for targets in adj]
    stack = [start]
    cycle: list[int] = []
    while stack:
        u = stack[-1]
        if remaining[u]:
            stack.append(remaining[u].pop())
        else:
            cycle.append(stack.pop())
    cycle.reverse()
    return cycle


def undirected_euler_cycle(
    n: int, edges: Sequence[tuple[int, int]], start: int = 0
) -> list[int]:
    """Walk every edge reachable from ``start`` exactly once."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for e, (u, v) in enumerate(edges):
        adj[u].append((v, e))
        adj[v].append((u, e))
    used = [False] * len(edges)
    stack = [start]
    cycle: list[int] = []
    while stack:
        u = stack[-1]
        while adj[u] and used[adj[u][-1][1]]:
            adj[u].pop()
        if adj[u]:
            v, e = adj[u].pop()
            used[e] = True
            stack.append(v)
        else:
            cycle.append(stack.pop())
    return cycle


def euler_circuit(n: int, edges: Sequence[tuple[int, int]]) -> list[int]:
    """Eulerian circuit from vertex 0; raises ValueError if none exists."""
    degree = [0] * n
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
    if any(d % 2 for d in degree):
        raise ValueError("a vertex has odd degree")
    cycle = undirected_euler_cycle(n, edges, 0)
    if len(cycle) != len(edges) + 1:
        raise ValueError("edges are not connected to vertex 0")
    return cycle