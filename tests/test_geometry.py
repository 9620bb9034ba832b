import math
import random
from itertools import combinations

import pytest

from cpkit.geometry import angular_sort, closest_pair_distance, convex_hull, cross


def test_cross_orientation():
    assert cross((0, 0), (1, 0), (0, 1)) > 0
    assert cross((0, 0), (0, 1), (1, 0)) < 0
    assert cross((0, 0), (1, 1), (3, 3)) == 0


def test_closest_pair_matches_brute_force():
    rng = random.Random(7)
    for _ in range(5):
        pts = [(rng.randint(-500, 500), rng.randint(-500, 500)) for _ in range(120)]
        brute = min((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 for a, b in combinations(pts, 2))
        assert closest_pair_distance(pts) == brute


def test_closest_pair_two_points():
    assert closest_pair_distance([(1, 2), (4, 6)]) == 3 * 3 + 4 * 4


def test_closest_pair_duplicates():
    assert closest_pair_distance([(5, 5), (1, 9), (5, 5)]) == 0


def test_closest_pair_needs_two_points():
    with pytest.raises(ValueError):
        closest_pair_distance([(0, 0)])


def _angle_key(p):
    return (math.atan2(p[1], p[0]) - math.pi) % (2 * math.pi)


def test_angular_sort_monotone():
    rng = random.Random(3)
    pts = set()
    while len(pts) < 80:
        p = (rng.randint(-20, 20), rng.randint(-20, 20))
        if p != (0, 0):
            pts.add(p)
    pts = list(pts)
    result = angular_sort(pts)
    assert sorted(result) == sorted(pts)
    keys = [_angle_key(p) for p in result]
    assert all(a <= b + 1e-12 for a, b in zip(keys, keys[1:]))


def test_angular_sort_axes():
    assert angular_sort([(0, 1), (1, 0), (0, -1), (-1, 0)]) == [(-1, 0), (0, -1), (1, 0), (0, 1)]


def test_convex_hull_square_with_interior():
    pts = [(1, 1), (2, 2), (0, 0), (0, 2), (2, 0)]
    hull = convex_hull(pts)
    assert sorted(hull) == [(0, 0), (0, 2), (2, 0), (2, 2)]
    assert hull[0] == (0, 0)
    for i in range(len(hull)):
        assert cross(hull[i], hull[(i + 1) % len(hull)], hull[(i + 2) % len(hull)]) > 0


def test_convex_hull_keeps_collinear_boundary():
    hull = convex_hull([(0, 0), (2, 0), (2, 2), (0, 2), (1, 0)])
    assert (1, 0) in hull
    assert len(hull) == 5


def test_convex_hull_empty():
    assert convex_hull([]) == []