"""
fastmath.rand
-------------
Random-number helpers layered over an injected random source.

The Randomizer never inspects the source's state; it only calls the
RandomSource contract (next_int, next_float, next_boolean) and shapes the
output into ranges, signs and triangular distributions.

Integer ranges are inclusive on both ends, float ranges are half-open:
    random_int(5)          -> [0, 5]
    random_int(2, 7)       -> [2, 7]
    random_float(5.0)      -> [0.0, 5.0)
    random_float(2.0, 7.0) -> [2.0, 7.0)

Threading: neither bundled source locks. Share a Randomizer across threads
only if its source is safe for that; otherwise give each thread its own.
"""

from __future__ import annotations

import math
import random as _random
from typing import Optional

import numpy as np

from .core.types import RandomSource

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


class PyRandomSource:
    """RandomSource over the standard library's Mersenne Twister."""

    def __init__(self, rng: Optional[_random.Random] = None, *, seed: Optional[int] = None):
        self.rng = rng if rng is not None else _random.Random(seed)

    def next_int(self, bound: Optional[int] = None) -> int:
        if bound is None:
            bits = self.rng.getrandbits(32)
            return bits - (1 << 32) if bits > INT_MAX else bits
        return self.rng.randrange(bound)

    def next_float(self) -> float:
        return self.rng.random()

    def next_boolean(self) -> bool:
        return self.rng.getrandbits(1) == 1


class NumpyRandomSource:
    """RandomSource over a numpy Generator (PCG64 unless one is passed in)."""

    def __init__(self, generator: Optional[np.random.Generator] = None, *, seed: Optional[int] = None):
        self.generator = generator if generator is not None else np.random.default_rng(seed)

    def next_int(self, bound: Optional[int] = None) -> int:
        if bound is None:
            return int(self.generator.integers(INT_MIN, INT_MAX, endpoint=True))
        return int(self.generator.integers(bound))

    def next_float(self) -> float:
        return float(self.generator.random())

    def next_boolean(self) -> bool:
        return bool(self.generator.integers(2))


class Randomizer:
    def __init__(self, source: Optional[RandomSource] = None):
        self.source: RandomSource = source if source is not None else PyRandomSource()

    # ---------------------------------------------------------
    # Integers (inclusive)
    # ---------------------------------------------------------
    def random_int(self, start: int, end: Optional[int] = None) -> int:
        """random_int(range) -> [0, range]; random_int(start, end) -> [start, end]."""
        if end is None:
            return self.source.next_int(start + 1)
        return start + self.source.next_int(end - start + 1)

    def random_sign(self) -> int:
        """-1 or 1, taken from the sign bit of a raw 32-bit draw."""
        return 1 | (self.source.next_int() >> 31)

    # ---------------------------------------------------------
    # Floats (half-open)
    # ---------------------------------------------------------
    def random(self) -> float:
        return self.source.next_float()

    def random_float(self, start: float, end: Optional[float] = None) -> float:
        """random_float(range) -> [0, range); random_float(start, end) -> [start, end)."""
        if end is None:
            return self.source.next_float() * start
        return start + self.source.next_float() * (end - start)

    def random_boolean(self, chance: Optional[float] = None) -> bool:
        """Fair coin, or True with probability `chance` when given."""
        if chance is None:
            return self.source.next_boolean()
        return self.source.next_float() < chance

    # ---------------------------------------------------------
    # Triangular distribution
    # ---------------------------------------------------------
    def random_triangular(
        self,
        low: Optional[float] = None,
        high: Optional[float] = None,
        mode: Optional[float] = None,
    ) -> float:
        """
        random_triangular()                -> (-1, 1), peaked at 0
        random_triangular(spread)          -> (-spread, spread), peaked at 0
        random_triangular(low, high)       -> [low, high], peaked at the midpoint
        random_triangular(low, high, mode) -> [low, high], peaked at mode

        The first two forms subtract two uniform draws; the others invert the
        triangular CDF. A zero-width range returns low.
        """
        if high is None:
            if mode is not None:
                raise TypeError("random_triangular() takes mode only together with low and high")
            spread = 1.0 if low is None else low
            return (self.source.next_float() - self.source.next_float()) * spread
        if low is None:
            raise TypeError("random_triangular() needs low when high is given")
        if mode is None:
            mode = (low + high) * 0.5

        d = high - low
        if d == 0:
            return low
        u = self.source.next_float()
        if u <= (mode - low) / d:
            return low + math.sqrt(u * d * (mode - low))
        return high - math.sqrt((1.0 - u) * d * (high - mode))
