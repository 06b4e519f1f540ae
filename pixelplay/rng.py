"""Permuted congruential generator and seed helpers."""

from __future__ import annotations

import os
import struct

_MULTIPLIER = 6_364_136_223_846_793_005
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


class Pcg32:
    """PCG-XSH-RR generator with 64-bit state and 32-bit output.

    ``state`` is the initial seed and ``inc`` selects the stream.
    """

    __slots__ = ("state", "inc")

    def __init__(self, state: int, inc: int) -> None:
        self.inc = ((inc << 1) | 1) & _MASK64
        self.state = 0
        self._step()
        self.state = (self.state + state) & _MASK64
        self._step()

    def _step(self) -> None:
        self.state = (self.state * _MULTIPLIER + self.inc) & _MASK64

    def next_u32(self) -> int:
        """Return the next 32-bit output and advance the generator."""
        old = self.state
        self._step()
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32


def f32_half_open_right(value: int) -> float:
    """Map a 32-bit integer onto a single-precision float in ``[0, 1)``."""
    return ((value & _MASK32) >> 8) / float(1 << 24)


def generate_seed() -> tuple[int, int]:
    """Draw a pair of 64-bit seed values from the operating system."""
    return struct.unpack("=QQ", os.urandom(16))