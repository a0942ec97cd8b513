"""
fastmath.tables.sincos
----------------------
One sine table serving sin and cos in radians and degrees.

The full turn is cut into 2**bits buckets. Each entry holds sin sampled at the
midpoint of its bucket, except the four axis entries (0, 90, 180, 270 degrees),
which hold the exact values 0, 1, 0, -1. A lookup scales the angle to bucket
units, floors it and masks it with (count - 1), so any finite angle, negative
or beyond one turn, wraps onto the table. Cosine reads the same table a
quarter turn ahead.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from functools import cached_property

import numpy as np

from ..core.constants import DEG_FULL, HALF_PI, PI2, SIN_BITS, SIN_BITS_RANGE
from ..core.errors import TableConfigError

logger = logging.getLogger(__name__)

_AXIS_DEGREES = (0, 90, 180, 270)
_AXIS_VALUES = (0.0, 1.0, 0.0, -1.0)


def build_sin_table(bits: int) -> np.ndarray:
    """Midpoint-sampled sine over one turn, axis entries exact, read-only float32."""
    count = 1 << bits
    mask = count - 1
    i = np.arange(count, dtype=np.float64)
    table = np.sin((i + 0.5) / count * PI2).astype(np.float32)

    deg_to_index = count / DEG_FULL
    for deg, exact in zip(_AXIS_DEGREES, _AXIS_VALUES):
        table[int(deg * deg_to_index) & mask] = exact

    table.flags.writeable = False
    return table


@dataclass(frozen=True)
class SinCosTable:
    """
    Lookup-table sine/cosine.

    Angles must be finite. The absolute error is bounded by roughly one bucket
    width, PI2 / 2**bits (about 3.8e-4 for the default 14 bits).
    """
    bits: int = SIN_BITS
    table: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lo, hi = SIN_BITS_RANGE
        if not (lo <= self.bits <= hi):
            raise TableConfigError(f"sin table bits must be in [{lo}, {hi}], got {self.bits}")
        t0 = time.perf_counter()
        object.__setattr__(self, "table", build_sin_table(self.bits))
        logger.debug(
            "built sin table: bits=%d entries=%d (%.1f ms)",
            self.bits, self.count, (time.perf_counter() - t0) * 1e3,
        )

    @cached_property
    def count(self) -> int:
        return 1 << self.bits

    @cached_property
    def mask(self) -> int:
        return self.count - 1

    @cached_property
    def rad_to_index(self) -> float:
        return self.count / PI2

    @cached_property
    def deg_to_index(self) -> float:
        return self.count / DEG_FULL

    @property
    def nbytes(self) -> int:
        return int(self.table.nbytes)

    # ---------------------------------------------------------
    # Scalar lookups
    # ---------------------------------------------------------
    def index_of(self, radians: float) -> int:
        """Table slot for an angle in radians."""
        return math.floor(radians * self.rad_to_index) & self.mask

    def index_of_deg(self, degrees: float) -> int:
        """Table slot for an angle in degrees."""
        return math.floor(degrees * self.deg_to_index) & self.mask

    def sin(self, radians: float) -> float:
        return float(self.table[self.index_of(radians)])

    def cos(self, radians: float) -> float:
        return float(self.table[self.index_of(radians + HALF_PI)])

    def sin_deg(self, degrees: float) -> float:
        return float(self.table[self.index_of_deg(degrees)])

    def cos_deg(self, degrees: float) -> float:
        return float(self.table[self.index_of_deg(degrees + 90.0)])

    # ---------------------------------------------------------
    # Array lookups
    # ---------------------------------------------------------
    def _indices(self, angles, scale: float, offset: float) -> np.ndarray:
        a = np.asarray(angles, dtype=np.float64)
        # Non-finite angles land on an arbitrary slot instead of raising.
        with np.errstate(invalid="ignore", over="ignore"):
            return np.floor((a + offset) * scale).astype(np.int64) & self.mask

    def sin_array(self, radians) -> np.ndarray:
        """Element-wise sin of an array of radians (float32 result)."""
        return self.table[self._indices(radians, self.rad_to_index, 0.0)]

    def cos_array(self, radians) -> np.ndarray:
        return self.table[self._indices(radians, self.rad_to_index, HALF_PI)]

    def sin_deg_array(self, degrees) -> np.ndarray:
        return self.table[self._indices(degrees, self.deg_to_index, 0.0)]

    def cos_deg_array(self, degrees) -> np.ndarray:
        return self.table[self._indices(degrees, self.deg_to_index, 90.0)]
