"""Polynomial and bitwise convolutions: FFT, NTT, arbitrary modulus, FWHT, subset."""

from __future__ import annotations

import cmath
import enum
import math
from typing import Sequence

MOD = 998244353
_NTT_ROOT = 15311432
_NTT_ORDER = 1 << 23


class BitwiseOp(enum.IntEnum):
    """Index combination used by :func:`bitwise_convolution`."""

    AND = 0
    OR = 1
    XOR = 2


def _bit_reverse(a: list) -> None:
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]


def _transform_size(need: int) -> int:
    return 1 << (need - 1).bit_length()


def _check_power_of_two(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError("length must be a power of two")


def _fft(a: list[complex], invert: bool) -> None:
    _bit_reverse(a)
    n = len(a)
    length = 2
    while length <= n:
        half = length // 2
        angle = 2 * math.pi / length * (-1 if invert else 1)
        roots = [cmath.rect(1.0, angle * i) for i in range(half)]
        for start in range(0, n, length):
            for i, w in enumerate(roots, start):
                even = a[i]
                odd = a[i + half] * w
                a[i] = even + odd
                a[i + half] = even - odd
        length <<= 1
    if invert:
        a[:] = [z / n for z in a]


def fft_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two integer polynomials through a floating-point FFT."""
    if not a or not b:
        raise ValueError("polynomials must be non-empty")
    need = len(a) + len(b) - 1
    size = _transform_size(need)
    x = [complex(v) for v in a] + [0j] * (size - len(a))
    y = [complex(v) for v in b] + [0j] * (size - len(b))
    _fft(x, False)
    _fft(y, False)
    z = [p * q for p, q in zip(x, y)]
    _fft(z, True)
    return [int(round(v.real)) for v in z[:need]]


def _ntt(a: list[int], invert: bool) -> None:
    _bit_reverse(a)
    n = len(a)
    root = pow(_NTT_ROOT, MOD - 2, MOD) if invert else _NTT_ROOT
    length = 2
    while length <= n:
        half = length // 2
        wlen = pow(root, _NTT_ORDER // length, MOD)
        for start in range(0, n, length):
            w = 1
            for i in range(start, start + half):
                even = a[i]
                odd = a[i + half] * w % MOD
                a[i] = (even + odd) % MOD
                a[i + half] = (even - odd) % MOD
                w = w * wlen % MOD
        length <<= 1
    if invert:
        n_inv = pow(n, MOD - 2, MOD)
        a[:] = [v * n_inv % MOD for v in a]


def ntt_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials modulo 998244353 by number-theoretic transform."""
    if not a or not b:
        raise ValueError("polynomials must be non-empty")
    need = len(a) + len(b) - 1
    size = _transform_size(need)
    if size > _NTT_ORDER:
        raise ValueError("result too long for this transform")
    x = [v % MOD for v in a] + [0] * (size - len(a))
    y = [v % MOD for v in b] + [0] * (size - len(b))
    _ntt(x, False)
    _ntt(y, False)
    z = [p * q % MOD for p, q in zip(x, y)]
    _ntt(z, True)
    return z[:need]


def multiply_mod(a: Sequence[int], b: Sequence[int], mod: int = MOD) -> list[int]:
    """Product of two polynomials modulo any positive ``mod`` (exact, no rounding)."""
    if not a or not b:
        raise ValueError("polynomials must be non-empty")
    if mod < 1:
        raise ValueError("mod must be positive")
    xs = [v % mod for v in a]
    ys = [v % mod for v in b]
    need = len(xs) + len(ys) - 1
    bits = 2 * (mod - 1).bit_length() + min(len(xs), len(ys)).bit_length() + 1
    width = (bits + 7) // 8

    def pack(values: list[int]) -> int:
        return int.from_bytes(b"".join(v.to_bytes(width, "little") for v in values), "little")

    raw = (pack(xs) * pack(ys)).to_bytes(width * need, "little")
    return [
        int.from_bytes(raw[k * width:(k + 1) * width], "little") % mod for k in range(need)
    ]


def poly_pow(a: Sequence[int], p: int, mod: int = MOD) -> list[int]:
    """``a`` raised to the power ``p`` modulo ``mod``, without truncation."""
    if p < 0:
        raise ValueError("exponent must be non-negative")
    result = [1 % mod]
    base = list(a)
    while p:
        if p & 1:
            result = multiply_mod(result, base, mod)
        p >>= 1
        if p:
            base = multiply_mod(base, base, mod)
    return result


def balanced_tickets(n: int, digits: Sequence[int]) -> int:
    """Tickets of even length ``n`` over ``digits`` whose halves have equal digit sums."""
    counts = [0] * 10
    for d in digits:
        if not 0 <= d <= 9:
            raise ValueError("digits must lie in 0..9")
        counts[d] = 1
    half = poly_pow(counts, n // 2)
    return sum(x * x for x in half) % MOD


def fwht(
    a: Sequence[int], inverse: bool = False, op: BitwiseOp = BitwiseOp.XOR, mod: int | None = MOD
) -> list[int]:
    """Fast Walsh-Hadamard style transform for AND, OR or XOR.

    The length must be a power of two. With ``mod=None`` the arithmetic is exact;
    the inverse XOR transform includes the division by the length.
    """
    op = BitwiseOp(op)
    size = len(a)
    _check_power_of_two(size)

    def norm(x: int) -> int:
        return x % mod if mod is not None else x

    vals = [norm(v) for v in a]
    length = 1
    while 2 * length <= size:
        for start in range(0, size, 2 * length):
            for j in range(start, start + length):
                x, y = vals[j], vals[j + length]
                if op is BitwiseOp.AND:
                    if inverse:
                        vals[j], vals[j + length] = norm(y - x), x
                    else:
                        vals[j], vals[j + length] = y, norm(x + y)
                elif op is BitwiseOp.OR:
                    vals[j + length] = norm(y - x) if inverse else norm(x + y)
                else:
                    vals[j], vals[j + length] = norm(x + y), norm(x - y)
        length <<= 1
    if inverse and op is BitwiseOp.XOR:
        if mod is not None:
            size_inv = pow(size, -1, mod)
            vals = [v * size_inv % mod for v in vals]
        else:
            vals = [v // size for v in vals]
    return vals


def bitwise_convolution(
    a: Sequence[int], b: Sequence[int], op: BitwiseOp, mod: int | None = MOD
) -> list[int]:
    """``c[i op j] += a[i] * b[j]`` over equal power-of-two lengths."""
    if len(a) != len(b):
        raise ValueError("sequences must have equal length")
    fa = fwht(a, False, op, mod)
    fb = fwht(b, False, op, mod)
    product = [x * y for x, y in zip(fa, fb)]
    if mod is not None:
        product = [v % mod for v in product]
    return fwht(product, True, op, mod)


def subset_convolution(a: Sequence[int], b: Sequence[int], mod: int | None = MOD) -> list[int]:
    """``c[m] = sum(a[s] * b[m ^ s])`` over submasks ``s`` of ``m``."""
    n = len(a)
    if len(b) != n:
        raise ValueError("sequences must have equal length")
    _check_power_of_two(n)
    lg = n.bit_length() - 1
    popcount = [bin(i).count("1") for i in range(n)]

    def ranked(values: Sequence[int]) -> list[list[int]]:
        layers = [[0] * n for _ in range(lg + 1)]
        for i, v in enumerate(values):
            layers[popcount[i]][i] = v
        return [fwht(layer, False, BitwiseOp.OR, mod) for layer in layers]

    fa = ranked(a)
    fb = ranked(b)
    result_layers = []
    for k in range(lg + 1):
        layer = [0] * n
        for j in range(k + 1):
            for i, (x, y) in enumerate(zip(fa[j], fb[k - j])):
                layer[i] += x * y
        if mod is not None:
            layer = [v % mod for v in layer]
        result_layers.append(fwht(layer, True, BitwiseOp.OR, mod))
    return [result_layers[popcount[i]][i] for i in range(n)]