"""Sum of floors of an arithmetic progression divided by a constant."""

from __future__ import annotations


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """``sum((a*i + b) // m for i in range(n))`` in logarithmic time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if m <= 0:
        raise ValueError("m must be positive")
    ans = 0
    while True:
        if a >= m or a < 0:
            ans += n * (n - 1) // 2 * (a // m)
            a %= m
        if b >= m or b < 0:
            ans += n * (b // m)
            b %= m
        y_max = (a * n + b) // m
        if y_max == 0:
            return ans
        x_max = y_max * m - b
        ans += (n - (x_max + a - 1) // a) * y_max
        n, m, a, b = y_max, a, m, (a - x_max % a) % a