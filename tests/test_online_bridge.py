from cpkit.online_bridge import OnlineBridges


def test_bridges_then_cycle():
    g = OnlineBridges(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    assert g.bridges == 2
    g.add_edge(2, 0)
    assert g.bridges == 0
    assert g.find_2ecc(0) == g.find_2ecc(1) == g.find_2ecc(2)
    g.add_edge(2, 3)
    assert g.bridges == 1
    assert g.find_2ecc(3) != g.find_2ecc(2)
    assert g.find_cc(3) == g.find_cc(0)


def test_separate_components():
    g = OnlineBridges(4)
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    assert g.find_cc(0) != g.find_cc(2)
    g.add_edge(1, 2)
    assert g.bridges == 3
    g.add_edge(0, 3)
    assert g.bridges == 0