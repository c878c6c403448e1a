"""The 48-bit linear congruential generator shared by drand48 and Java's Random."""

from __future__ import annotations

import time

_BITS = 48
_MASK = (1 << _BITS) - 1
_MULTIPLIER = 0x5DEECE66D
_INCREMENT = 0xB
_INT32_LIMIT = 1 << 31


class Drand48:
    """A 48-bit LCG with Java-compatible helpers for bounded and float output."""

    MIN = 0
    MAX = 0xFFFFFFFF

    def __init__(self, seed: int | None = None) -> None:
        self.state = 0
        self.seed(time.time_ns() if seed is None else seed)

    def seed(self, seed: int) -> None:
        """Reseed the generator the same way Java's Random does."""
        self.state = (seed ^ _MULTIPLIER) & _MASK

    def _update(self) -> int:
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _MASK
        return self.state

    def next_bits(self, bits: int) -> int:
        """Advance and return the top ``bits`` bits of the new state."""
        if not 0 <= bits <= _BITS:
            raise ValueError(f"bits must be between 0 and {_BITS}, got {bits}")
        return self._update() >> (_BITS - bits)

    def next(self) -> int:
        """Return an unsigned 32-bit value."""
        return self.next_bits(32)

    def next_int(self) -> int:
        """Return a signed 32-bit value."""
        value = self.next_bits(32)
        return value - (1 << 32) if value >= _INT32_LIMIT else value

    def next_bound(self, bound: int) -> int:
        """Return a value uniformly distributed in ``[0, bound)``."""
        if bound <= 0:
            raise ValueError("Bounded next called with empty bound")
        mask = bound - 1
        while True:
            bits = self.next_bits(31)
            result = bits % bound
            # Reject samples from the incomplete final bucket (32-bit overflow check).
            if bits - result + mask < _INT32_LIMIT:
                return result

    def next_range(self, start: int, stop: int) -> int:
        """Return a value uniformly distributed in ``[start, stop)``."""
        if start >= stop:
            raise ValueError("Ranged next called with empty range")
        return start + self.next_bound(stop - start)

    def next_float(self) -> float:
        """Return a float in ``[0, 1)`` with 24 bits of precision."""
        return self.next_bits(24) / (1 << 24)