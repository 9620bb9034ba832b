"""Strongly connected components (Kosaraju)."""

from __future__ import annotations

from typing import Sequence


def _finish_order(adj: Sequence[Sequence[int]]) -> list[int]:
    n = len(adj)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            u, it = stack[-1]
            for v in it:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def strongly_connected_components(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the components of a directed graph in topological order.

    ``adj[u]`` lists the heads of the arcs leaving ``u``. The first component
    returned has no arcs coming in from later components.
    """
    n = len(adj)
    rev: list[list[int]] = [[] for _ in range(n)]
    for u, targets in enumerate(adj):
        for v in targets:
            rev[v].append(u)
    visited = [False] * n
    sccs: list[list[int]] = []
    for root in reversed(_finish_order(adj)):
        if visited[root]:
            continue
        component = [root]
        visited[root] = True
        stack = [iter(rev[root])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    component.append(v)
                    stack.append(iter(rev[v]))
                    break
            else:
                stack.pop()
        sccs.append(component)
    return sccs


def component_numbers(adj: Sequence[Sequence[int]]) -> list[int]:
    """Map every vertex to the index of its component in topological order."""
    numbers = [0] * len(adj)
    for index, component in enumerate(strongly_connected_components(adj)):
        for u in component:
            numbers[u] = index
    return numbers