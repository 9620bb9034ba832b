"""2-SAT solver built on strongly connected components."""

from __future__ import annotations

from typing import Iterable

from .scc import component_numbers


def _literal(x: int) -> int:
    return 2 * x - 2 if x > 0 else 2 * -x - 1


def two_sat(n: int, clauses: Iterable[tuple[int, int]]) -> str | None:
    """Solve a CNF of two-literal clauses over variables ``1..n``.

    A literal ``x`` is variable ``x``, ``-x`` its negation. Returns a string with
    ``'+'`` (true) or ``'-'`` (false) per variable, or ``None`` if unsatisfiable.
    """
    adj: list[list[int]] = [[] for _ in range(2 * n)]
    for a, b in clauses:
        a, b = _literal(a), _literal(b)
        adj[a ^ 1].append(b)
        adj[b ^ 1].append(a)
    num = component_numbers(adj)
    assignment = []
    for u in range(n):
        if num[2 * u] == num[2 * u + 1]:
            return None
        assignment.append("-" if num[2 * u] < num[2 * u + 1] else "+")
    return "".join(assignment)