"""Two-dimensional sparse table for rectangle maximum queries."""

from __future__ import annotations

from typing import Sequence


class SparseTable2D:
    """Static grid answering the maximum over any rectangle in constant time."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        if not grid or not grid[0]:
            raise ValueError("grid must be non-empty")
        self.rows = len(grid)
        self.cols = len(grid[0])
        if any(len(row) != self.cols for row in grid):
            raise ValueError("grid must be rectangular")
        la = self.rows.bit_length()
        lb = self.cols.bit_length()
        table: list[list[list[list[int]]]] = [[[] for _ in range(lb)] for _ in range(la)]
        table[0][0] = [list(row) for row in grid]
        for a in range(la):
            for b in range(lb):
                if a == 0 and b == 0:
                    continue
                if a == 0:
                    half = 1 << (b - 1)
                    width = self.cols - (1 << b) + 1
                    table[a][b] = [
                        [max(row[j], row[j + half]) for j in range(width)] for row in table[0][b - 1]
                    ]
                else:
                    half = 1 << (a - 1)
                    src = table[a - 1][b]
                    table[a][b] = [
                        [max(x, y) for x, y in zip(src[i], src[i + half])]
                        for i in range(self.rows - (1 << a) + 1)
                    ]
        self._table = table

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Maximum over rows ``x1..x2`` and columns ``y1..y2`` inclusive."""
        if not (0 <= x1 <= x2 < self.rows and 0 <= y1 <= y2 < self.cols):
            raise IndexError((x1, y1, x2, y2))
        a = (x2 - x1 + 1).bit_length() - 1
        b = (y2 - y1 + 1).bit_length() - 1
        t = self._table[a][b]
        xs = x2 + 1 - (1 << a)
        ys = y2 + 1 - (1 << b)
        return max(t[x1][y1], t[xs][y1], t[x1][ys], t[xs][ys])