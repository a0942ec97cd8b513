"""
fastmath.tables.atan2
---------------------
Lookup-table arctangent over the first-quadrant unit square.

The table is a DIM x DIM grid, DIM = 2**bits, where cell (i, j) at
j * DIM + i holds atan2(j / DIM, i / DIM). A query is folded into the first
quadrant by the signs of x and y, both magnitudes are scaled so the larger one
maps onto DIM - 1, and the folded result is unfolded as (value + add) * mul.
Scaling by the larger coordinate lets one grid serve vectors of any length.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from functools import cached_property
from typing import Tuple

import numpy as np

from ..core.constants import ATAN2_BITS, ATAN2_BITS_RANGE, ATAN2_DEGENERATE, PI
from ..core.errors import TableConfigError

logger = logging.getLogger(__name__)


def atan2_dims(bits: int) -> Tuple[int, int]:
    """(count, dim) for a table of 2**(2*bits) cells."""
    count = 1 << (bits << 1)
    return count, int(math.sqrt(count))


def build_atan2_table(bits: int) -> np.ndarray:
    _, dim = atan2_dims(bits)
    steps = np.arange(dim, dtype=np.float64) / dim
    y0, x0 = np.meshgrid(steps, steps, indexing="ij")
    table = np.arctan2(y0, x0).astype(np.float32).ravel()
    table.flags.writeable = False
    return table


@dataclass(frozen=True)
class Atan2Table:
    """
    Lookup-table atan2 returning angles in (-PI, PI].

    The absolute error is bounded by about one grid step, 1 / (DIM - 1)
    radians. Zero and subnormal vectors, and vectors with an infinite or NaN
    coordinate, skip the table and use math.atan2.
    Signed zeros are treated as positive.
    """
    bits: int = ATAN2_BITS
    table: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lo, hi = ATAN2_BITS_RANGE
        if not (lo <= self.bits <= hi):
            raise TableConfigError(f"atan2 table bits must be in [{lo}, {hi}], got {self.bits}")
        t0 = time.perf_counter()
        object.__setattr__(self, "table", build_atan2_table(self.bits))
        logger.debug(
            "built atan2 table: bits=%d dim=%d entries=%d (%.1f ms)",
            self.bits, self.dim, self.count, (time.perf_counter() - t0) * 1e3,
        )

    @cached_property
    def count(self) -> int:
        return atan2_dims(self.bits)[0]

    @cached_property
    def dim(self) -> int:
        return atan2_dims(self.bits)[1]

    @cached_property
    def inv_dim_minus_1(self) -> float:
        return 1.0 / (self.dim - 1)

    @property
    def nbytes(self) -> int:
        return int(self.table.nbytes)

    def atan2(self, y: float, x: float) -> float:
        if x < 0.0:
            mul = 1.0 if y < 0.0 else -1.0
            add = -PI
        else:
            mul = -1.0 if y < 0.0 else 1.0
            add = 0.0
        x = abs(x)
        y = abs(y)

        m = y if x < y else x
        if m < ATAN2_DEGENERATE or not math.isfinite(x + y):
            return (math.atan2(y, x) + add) * mul

        inv_div = 1.0 / (m * self.inv_dim_minus_1)
        xi = int(x * inv_div)
        yi = int(y * inv_div)
        return (float(self.table[yi * self.dim + xi]) + add) * mul

    def atan2_array(self, y, x) -> np.ndarray:
        """Element-wise atan2 over broadcastable arrays (float32 result)."""
        y, x = np.broadcast_arrays(np.asarray(y, dtype=np.float64), np.asarray(x, dtype=np.float64))
        neg_x = x < 0.0
        neg_y = y < 0.0
        add = np.where(neg_x, -PI, 0.0)
        mul = np.where(neg_x == neg_y, 1.0, -1.0)
        ax = np.abs(x)
        ay = np.abs(y)

        m = np.maximum(ax, ay)
        with np.errstate(invalid="ignore", over="ignore"):
            degenerate = (m < ATAN2_DEGENERATE) | ~np.isfinite(ax + ay)
        dim = self.dim
        with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
            inv_div = 1.0 / (np.where(degenerate, 1.0, m) * self.inv_dim_minus_1)
            xi = np.clip((ax * inv_div).astype(np.int64), 0, dim - 1)
            yi = np.clip((ay * inv_div).astype(np.int64), 0, dim - 1)

        base = self.table[yi * dim + xi].astype(np.float64)
        base = np.where(degenerate, np.arctan2(ay, ax), base)
        return ((base + add) * mul).astype(np.float32)
