"""Bridges, articulation points and biconnected structure of undirected graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def two_edge_components(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Label each vertex with its 2-edge-connected component; parallel edges count."""
    adj = _adjacency(n, edges)
    tin = [-1] * n
    low = [-1] * n
    t = 0
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = t
        t += 1
        stack = [[root, -1, iter(adj[root]), False]]
        while stack:
            frame = stack[-1]
            u, p, it = frame[0], frame[1], frame[2]
            for v in it:
                if v == p and not frame[3]:
                    frame[3] = True
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = t
                    t += 1
                    stack.append([v, u, iter(adj[v]), False])
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[u])

    cmp = [-1] * n
    size = 0
    for root in range(n):
        if cmp[root] != -1:
            continue
        cmp[root] = size
        size += 1
        stack2 = [(root, iter(adj[root]))]
        while stack2:
            u, it = stack2[-1]
            for v in it:
                if cmp[v] == -1:
                    if tin[u] >= low[v]:
                        cmp[v] = cmp[u]
                    else:
                        cmp[v] = size
                        size += 1
                    stack2.append((v, iter(adj[v])))
                    break
            else:
                stack2.pop()
    return cmp


def edge_components(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Label vertices by bridge-separated components (Tarjan, stack based)."""
    adj = _adjacency(n, edges)
    tin = [0] * n
    lo = [0] * n
    comp = [0] * n
    vstack: list[int] = []
    t = 0
    cno = 0
    for root in range(n):
        if tin[root]:
            continue
        t += 1
        tin[root] = lo[root] = t
        vstack.append(root)
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            v, p, it = stack[-1]
            for u in it:
                if u == p:
                    continue
                if not tin[u]:
                    t += 1
                    tin[u] = lo[u] = t
                    vstack.append(u)
                    stack.append((u, v, iter(adj[u])))
                    break
                lo[v] = min(lo[v], tin[u])
            else:
                stack.pop()
                if tin[v] == lo[v]:
                    while vstack:
                        top = vstack.pop()
                        comp[top] = cno
                        if top == v:
                            break
                    cno += 1
                if stack:
                    parent = stack[-1][0]
                    lo[parent] = min(lo[parent], lo[v])
    return comp


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the cut vertices of the graph in increasing order."""
    adj = _adjacency(n, edges)
    tin = [-1] * n
    low = [0] * n
    is_ap = [False] * n
    t = 0
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = t
        t += 1
        children = [0] * 0
        stack = [[root, -1, iter(adj[root]), 0, False]]
        while stack:
            frame = stack[-1]
            u, p, it = frame[0], frame[1], frame[2]
            for v in it:
                if v == p:
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    frame[3] += 1
                    tin[v] = low[v] = t
                    t += 1
                    stack.append([v, u, iter(adj[v]), 0, False])
                    break
            else:
                stack.pop()
                if (p != -1 or frame[3] > 1) and frame[4]:
                    is_ap[u] = True
                if stack:
                    parent = stack[-1]
                    if tin[parent[0]] <= low[u]:
                        parent[4] = True
                    low[parent[0]] = min(low[parent[0]], low[u])
        del children
    return [u for u in range(n) if is_ap[u]]


@dataclass
class BiconnectedComponents:
    """Vertex-biconnected components with the edges that form each one."""

    components: list[list[int]]
    edge_groups: list[list[int]]
    is_articulation: list[bool]


def biconnected_components(n: int, edges: Iterable[tuple[int, int]]) -> BiconnectedComponents:
    """Split the edges into biconnected components; edges are referred to by index."""
    edge_list = list(edges)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for e, (u, v) in enumerate(edge_list):
        adj[u].append((v, e))
        adj[v].append((u, e))
    tin = [-1] * n
    lo = [0] * n
    is_ap = [False] * n
    estack: list[int] = []
    groups: list[list[int]] = []
    t = 0

    def pop_until(e: int) -> None:
        group = []
        while True:
            group.append(estack.pop())
            if group[-1] == e:
                break
        groups.append(group)

    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = lo[root] = t
        t += 1
        # frame: vertex, parent, iterator, child count, entering edge
        stack = [[root, -1, iter(adj[root]), 0, -1]]
        while stack:
            frame = stack[-1]
            u, p, it = frame[0], frame[1], frame[2]
            for v, e in it:
                if v == p:
                    continue
                if tin[v] != -1:
                    if tin[u] > tin[v]:
                        lo[u] = min(lo[u], tin[v])
                        estack.append(e)
                else:
                    frame[3] += 1
                    estack.append(e)
                    tin[v] = lo[v] = t
                    t += 1
                    stack.append([v, u, iter(adj[v]), 0, e])
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1]
                    pu = parent[0]
                    if (parent[1] != -1 or parent[3] > 1) and tin[pu] <= lo[u]:
                        is_ap[pu] = True
                        pop_until(frame[4])
                    lo[pu] = min(lo[pu], lo[u])
        if estack:
            groups.append(estack[::-1])
            estack.clear()

    components = []
    for group in groups:
        vertices = set()
        for e in group:
            vertices.update(edge_list[e])
        components.append(sorted(vertices))
    return BiconnectedComponents(components, groups, is_ap)


@dataclass
class BlockCutTree:
    """Blocks are tree nodes ``0..len(blocks)-1``; articulation points follow."""

    blocks: list[list[int]]
    is_articulation: list[bool]
    node_of: list[int]
    adj: list[list[int]]


def block_cut_tree(n: int, edges: Iterable[tuple[int, int]]) -> BlockCutTree:
    """Build the block-cut tree; ``node_of[u]`` is the tree node holding vertex ``u``."""
    adj = _adjacency(n, edges)
    tin = [-1] * n
    lo = [0] * n
    is_ap = [False] * n
    vstack: list[int] = []
    blocks: list[list[int]] = []
    t = 0
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = lo[root] = t
        t += 1
        vstack.append(root)
        stack = [[root, -1, iter(adj[root]), 0]]
        while stack:
            frame = stack[-1]
            u, p, it = frame[0], frame[1], frame[2]
            for v in it:
                if v == p:
                    continue
                if tin[v] != -1:
                    lo[u] = min(lo[u], tin[v])
                else:
                    frame[3] += 1
                    tin[v] = lo[v] = t
                    t += 1
                    vstack.append(v)
                    stack.append([v, u, iter(adj[v]), 0])
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1]
                    pu = parent[0]
                    if (parent[1] != -1 or parent[3] > 1) and tin[pu] <= lo[u]:
                        is_ap[pu] = True
                        block = [pu]
                        while block[-1] != u:
                            block.append(vstack.pop())
                        blocks.append(block)
                    lo[pu] = min(lo[pu], lo[u])
        if vstack:
            blocks.append(vstack[::-1])
            vstack.clear()

    node_of = [0] * n
    next_node = len(blocks)
    for u in range(n):
        if is_ap[u]:
            node_of[u] = next_node
            next_node += 1
    tree: list[list[int]] = [[] for _ in range(next_node)]
    for i, block in enumerate(blocks):
        for u in block:
            if is_ap[u]:
                tree[i].append(node_of[u])
                tree[node_of[u]].append(i)
            else:
                node_of[u] = i
    return BlockCutTree(blocks, is_ap, node_of, tree)