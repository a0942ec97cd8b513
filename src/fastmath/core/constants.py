"""
fastmath.core.constants
-----------------------
Numeric and table-sizing constants.

Float constants are the single-precision values widened to Python floats, so
PI here is float32(pi) = 3.1415927410125732, not math.pi. Table sizes are
build-time choices: changing a *_BITS value trades accuracy for memory and
changes every index computed from it.
"""

from __future__ import annotations

import math

import numpy as np


def _f32(x: float) -> float:
    return float(np.float32(x))


PI = _f32(math.pi)
PI2 = PI * 2
HALF_PI = PI / 2
E = _f32(math.e)

FLOAT_ROUNDING_ERROR = _f32(1e-6)  # 32 bits

RADIANS_TO_DEGREES = 180.0 / PI
RAD_DEG = RADIANS_TO_DEGREES
DEGREES_TO_RADIANS = PI / 180.0
DEG_RAD = DEGREES_TO_RADIANS

FLOAT_MAX = float(np.finfo(np.float32).max)
FLOAT_TINY = float(np.finfo(np.float32).tiny)

# ============================================================
# Sine table
# ============================================================

SIN_BITS = 14
SIN_MASK = ~(-1 << SIN_BITS)
SIN_COUNT = SIN_MASK + 1

RAD_FULL = PI2
DEG_FULL = 360.0
RAD_TO_INDEX = SIN_COUNT / RAD_FULL
DEG_TO_INDEX = SIN_COUNT / DEG_FULL

# ============================================================
# Atan2 table
# ============================================================

ATAN2_BITS = 7
ATAN2_BITS2 = ATAN2_BITS << 1
ATAN2_MASK = ~(-1 << ATAN2_BITS2)
ATAN2_COUNT = ATAN2_MASK + 1
ATAN2_DIM = int(math.sqrt(ATAN2_COUNT))
INV_ATAN2_DIM_MINUS_1 = 1.0 / (ATAN2_DIM - 1)

# Below this magnitude the normalizing divisor would overflow single precision.
ATAN2_DEGENERATE = FLOAT_TINY

# ============================================================
# Bias rounding
# ============================================================

BIG_ENOUGH_INT = 16 * 1024
BIG_ENOUGH_FLOOR = float(BIG_ENOUGH_INT)
BIG_ENOUGH_CEIL = math.nextafter(BIG_ENOUGH_INT + 1.0, 0.0)  # 16384.999999999996
BIG_ENOUGH_ROUND = BIG_ENOUGH_INT + 0.5
CEIL = 0.9999999

# Bit-count limits accepted when building tables with non-default sizes.
SIN_BITS_RANGE = (2, 24)
ATAN2_BITS_RANGE = (1, 12)
