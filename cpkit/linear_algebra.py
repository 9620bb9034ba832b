"""Determinant by Gaussian elimination and (modular) matrix powers."""

from __future__ import annotations

from typing import Sequence

EPS = 1e-9

Matrix = list[list[int]]


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant of a square matrix with partial pivoting; 0 below ``EPS``."""
    a = [[float(v) for v in row] for row in matrix]
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    det = 1.0
    for i in range(n):
        k = max(range(i, n), key=lambda r: abs(a[r][i]))
        if abs(a[k][i]) < EPS:
            return 0.0
        if k != i:
            a[i], a[k] = a[k], a[i]
            det = -det
        pivot = a[i][i]
        det *= pivot
        for j in range(i + 1, n):
            factor = a[j][i] / pivot
            if abs(factor) > EPS:
                a[j][i + 1:] = [x - factor * y for x, y in zip(a[j][i + 1:], a[i][i + 1:])]
    return det


def identity(n: int) -> Matrix:
    """The ``n`` by ``n`` identity matrix."""
    return [[int(i == j) for j in range(n)] for i in range(n)]


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int | None = None) -> Matrix:
    """Product ``a @ b``, reduced modulo ``mod`` when it is given."""
    if not a or not b:
        raise ValueError("matrices must be non-empty")
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions differ")
    columns = list(zip(*b))
    result = []
    for row in a:
        out = [sum(x * y for x, y in zip(row, col)) for col in columns]
        if mod is not None:
            out = [v % mod for v in out]
        result.append(out)
    return result


def mat_pow(a: Sequence[Sequence[int]], p: int, mod: int | None = None) -> Matrix:
    """Square matrix ``a`` raised to the non-negative power ``p``."""
    n = len(a)
    if n == 0 or any(len(row) != n for row in a):
        raise ValueError("matrix must be square and non-empty")
    if p < 0:
        raise ValueError("exponent must be non-negative")
    result = identity(n)
    if mod is not None:
        result = [[v % mod for v in row] for row in result]
    base = [list(row) for row in a]
    while p:
        if p & 1:
            result = mat_mul(base, result, mod)
        p >>= 1
        if p:
            base = mat_mul(base, base, mod)
    return result