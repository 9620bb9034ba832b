"""Linear basis of bit vectors over GF(2)."""

from __future__ import annotations


class XorBasis:
    """Basis of ``bits``-bit masks under XOR; ``rank`` is its dimension."""

    def __init__(self, bits: int = 64) -> None:
        if bits < 1:
            raise ValueError("bits must be positive")
        self.bits = bits
        self.basis = [0] * bits
        self.rank = 0

    def insert(self, mask: int) -> bool:
        """Add ``mask``; return whether it enlarged the span."""
        if not 0 <= mask < 1 << self.bits:
            raise ValueError(f"mask must fit in {self.bits} bits")
        for i in reversed(range(self.bits)):
            if not mask >> i & 1:
                continue
            if not self.basis[i]:
                self.basis[i] = mask
                self.rank += 1
                return True
            mask ^= self.basis[i]
        return False