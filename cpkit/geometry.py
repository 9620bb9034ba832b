"""Plane geometry on integer points: cross product, closest pair, angular sort, hull."""

from __future__ import annotations

import heapq
import math
from functools import cmp_to_key
from itertools import islice
from typing import Iterable, Sequence

Point = tuple[int, int]


def cross(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> int:
    """Cross product of ``b - a`` and ``c - a``; positive for a left turn."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])


def _closest(pts: list[Point]) -> tuple[float, list[Point]]:
    """``pts`` is ordered by ``(y, x)``; returns the best distance and ``pts`` ordered by ``(x, y)``."""
    if len(pts) < 2:
        return math.inf, list(pts)
    m = len(pts) // 2
    my = pts[m - 1][1]
    dl, left = _closest(pts[:m])
    dr, right = _closest(pts[m:])
    d = min(dl, dr)
    merged = list(heapq.merge(left, right))
    for i, (xi, yi) in enumerate(merged):
        if (yi - my) ** 2 >= d:
            continue
        for xj, yj in islice(merged, i + 1, None):
            dx = xi - xj
            if dx * dx >= d:
                break
            d = min(d, dx * dx + (yi - yj) ** 2)
    return d, merged


def closest_pair_distance(points: Iterable[Sequence[int]]) -> int:
    """Smallest squared distance between two of the points."""
    pts = sorted(((p[0], p[1]) for p in points), key=lambda p: (p[1], p[0]))
    if len(pts) < 2:
        raise ValueError("need at least two points")
    d, _ = _closest(pts)
    return int(d)


def _upper(p: Sequence[int]) -> bool:
    return p[1] > 0 or (p[1] == 0 and p[0] >= 0)


def _angular_cmp(a: Sequence[int], b: Sequence[int]) -> int:
    ua, ub = _upper(a), _upper(b)
    if ua != ub:
        return -1 if ub else 1
    c = a[0] * b[1] - a[1] * b[0]
    return -1 if c > 0 else (1 if c < 0 else 0)


def angular_sort(points: Iterable[Sequence[int]]) -> list[Point]:
    """Points sorted counter-clockwise around the origin.

    The lower half-plane (including the negative x-axis) comes first, starting at
    the negative x-axis, followed by the upper half-plane from the positive x-axis.
    """
    return sorted(((p[0], p[1]) for p in points), key=cmp_to_key(_angular_cmp))


def convex_hull(points: Iterable[Sequence[int]]) -> list[Point]:
    """Counter-clockwise hull from the leftmost-lowest point; collinear boundary points are kept."""
    p = sorted((q[0], q[1]) for q in points)
    if not p:
        return []
    hull: list[Point] = []
    for q in p:
        while len(hull) >= 2 and cross(hull[-2], hull[-1], q) < 0:
            hull.pop()
        hull.append(q)
    lower = len(hull)
    for q in reversed(p[:-1]):
        while len(hull) >= lower + 1 and cross(hull[-2], hull[-1], q) < 0:
            hull.pop()
        hull.append(q)
    return hull[:-1]