"""Centroid decomposition of a tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class CentroidTree:
    """``parent[c]`` is the centroid above ``c`` (-1 at the top); ``depth`` its level."""

    parent: list[int]
    depth: list[int]


def centroid_decomposition(adj: Sequence[Sequence[int]], root: int = 0) -> CentroidTree:
    """Decompose the tree given by adjacency lists ``adj``."""
    n = len(adj)
    is_cen = [False] * n
    size = [0] * n
    parent = [-1] * n
    depth = [0] * n

    def subtree_sizes(u: int, p: int) -> None:
        order = []
        stack = [(u, p)]
        while stack:
            x, px = stack.pop()
            order.append((x, px))
            stack.extend((y, x) for y in adj[x] if y != px and not is_cen[y])
        for x, px in reversed(order):
            size[x] = 1 + sum(size[y] for y in adj[x] if y != px and not is_cen[y])

    def find_centroid(u: int, p: int, total: int) -> int:
        while True:
            for v in adj[u]:
                if v != p and not is_cen[v] and 2 * size[v] > total:
                    u, p = v, u
                    break
            else:
                return u

    tasks = [(root, -1, 0)]
    while tasks:
        u, p, d = tasks.pop()
        subtree_sizes(u, p)
        c = find_centroid(u, p, size[u])
        is_cen[c] = True
        parent[c] = p
        depth[c] = d
        tasks.extend((v, c, d + 1) for v in adj[c] if not is_cen[v])
    return CentroidTree(parent, depth)