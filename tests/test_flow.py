import itertools
import random

from cpkit.flow import MinCostFlow, max_flow


def _min_cut(n, edges, s, t):
    best = None
    others = [v for v in range(n) if v not in (s, t)]
    for r in range(len(others) + 1):
        for chosen in itertools.combinations(others, r):
            side = set(chosen) | {s}
            cut = sum(c for u, v, c in edges if u in side and v not in side)
            best = cut if best is None else min(best, cut)
    return best


def test_max_flow_equals_min_cut():
    rng = random.Random(3)
    for _ in range(30):
        n = rng.randint(2, 6)
        edges = [
            (rng.randrange(n), rng.randrange(n), rng.randint(1, 9))
            for _ in range(rng.randint(0, 12))
        ]
        assert max_flow(n, edges, 0, n - 1) == _min_cut(n, edges, 0, n - 1)


def test_max_flow_disconnected():
    assert max_flow(3, [(0, 1, 5)], 0, 2) == 0


def test_min_cost_prefers_cheap_path():
    mcf = MinCostFlow(4)
    mcf.add_edge(0, 1, 1, 1)
    mcf.add_edge(1, 3, 1, 1)
    mcf.add_edge(0, 2, 1, 5)
    mcf.add_edge(2, 3, 1, 5)
    assert mcf.solve(0, 3, 1) == (1, 2)


def test_min_cost_full_flow():
    mcf = MinCostFlow(4)
    mcf.add_edge(0, 1, 1, 1)
    mcf.add_edge(1, 3, 1, 1)
    mcf.add_edge(0, 2, 1, 5)
    mcf.add_edge(2, 3, 1, 5)
    flow, cost = mcf.solve(0, 3)
    assert flow == max_flow(4, [(0, 1, 1), (1, 3, 1), (0, 2, 1), (2, 3, 1)], 0, 3)
    assert cost == 1 + 1 + 5 + 5