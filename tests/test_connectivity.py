from cpkit.connectivity import (
    articulation_points,
    biconnected_components,
    block_cut_tree,
    edge_components,
    two_edge_components,
)

N = 5
EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 2)]


def test_articulation_points():
    assert articulation_points(N, EDGES) == [1, 2]


def test_articulation_none_in_cycle():
    assert articulation_points(3, [(0, 1), (1, 2), (2, 0)]) == []


def test_two_edge_components():
    c = two_edge_components(N, EDGES)
    assert c[2] == c[3] == c[4]
    assert len({c[0], c[1], c[2]}) == 3


def test_two_edge_parallel_edges():
    c = two_edge_components(2, [(0, 1), (0, 1)])
    assert c[0] == c[1]


def test_edge_components():
    c = edge_components(N, EDGES)
    assert c[2] == c[3] == c[4]
    assert len({c[0], c[1], c[2]}) == 3


def test_biconnected_components():
    res = biconnected_components(N, EDGES)
    assert sorted(res.components) == [[0, 1], [1, 2], [2, 3, 4]]
    assert sorted(e for g in res.edge_groups for e in g) == list(range(len(EDGES)))
    assert [u for u in range(N) if res.is_articulation[u]] == [1, 2]


def test_block_cut_tree_is_tree():
    bct = block_cut_tree(N, EDGES)
    assert sorted(sorted(b) for b in bct.blocks) == [[0, 1], [1, 2], [2, 3, 4]]
    nodes = len(bct.adj)
    assert nodes == len(bct.blocks) + sum(bct.is_articulation)
    assert sum(len(a) for a in bct.adj) // 2 == nodes - 1
    assert bct.node_of[3] == bct.node_of[4]