"""
fastmath.rounding
-----------------
Integer floor/ceil/round by biasing and truncating.

Adding BIG_ENOUGH_INT moves every input in the valid window onto the positive
axis, where truncation toward zero is a floor; subtracting the integer bias
back gives the result. Inputs are narrowed to single precision first and the
bias is added in double precision. For floor and round that sum is exact for
every float32 value in the window. The ceil bias sits 3.6e-12 below the next
integer, which a double can no longer hold once the sum passes about 2**15, so
a whole-number input there overshoots by one; ceil detects that and steps back.

Valid window for floor/ceil/round: [-2**14, FLOAT_MAX - 2**14]. The *_positive
variants skip the bias and are only correct for non-negative input. Outside
these domains the result is a well-defined but wrong integer, never an error.
Every result, scalar or array, is saturated to the signed 32-bit range.
"""

from __future__ import annotations

import numpy as np

from .core.constants import (
    BIG_ENOUGH_CEIL,
    BIG_ENOUGH_FLOOR,
    BIG_ENOUGH_INT,
    BIG_ENOUGH_ROUND,
    CEIL,
)

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def _single(x: float) -> float:
    with np.errstate(over="ignore"):
        return float(np.float32(x))


def _trunc(v: float) -> int:
    """Truncate toward zero into the signed 32-bit range; NaN maps to 0."""
    if v != v:
        return 0
    if v >= INT_MAX:
        return INT_MAX
    if v <= INT_MIN:
        return INT_MIN
    return int(v)


def _saturate(n: int) -> int:
    return INT_MIN if n < INT_MIN else INT_MAX if n > INT_MAX else n


def floor(x: float) -> int:
    return _saturate(_trunc(_single(x) + BIG_ENOUGH_FLOOR) - BIG_ENOUGH_INT)


def floor_positive(x: float) -> int:
    return _trunc(_single(x))


def ceil(x: float) -> int:
    s = _single(x)
    n = _trunc(s + BIG_ENOUGH_CEIL) - BIG_ENOUGH_INT
    # the biased sum rounded up onto the next integer
    if n - 1 >= s:
        n -= 1
    return _saturate(n)


def ceil_positive(x: float) -> int:
    return _trunc(_single(x) + CEIL)


def round(x: float) -> int:
    """Nearest integer, ties toward positive infinity."""
    return _saturate(_trunc(_single(x) + BIG_ENOUGH_ROUND) - BIG_ENOUGH_INT)


def round_positive(x: float) -> int:
    return _trunc(_single(x) + 0.5)


# ============================================================
# Array forms
# ============================================================

def _single_array(x) -> np.ndarray:
    with np.errstate(over="ignore"):
        return np.asarray(x, dtype=np.float32).astype(np.float64)


def _trunc_array(values: np.ndarray) -> np.ndarray:
    v = np.nan_to_num(values, nan=0.0, posinf=INT_MAX, neginf=INT_MIN)
    return np.clip(v, INT_MIN, INT_MAX).astype(np.int64)


def _saturate_array(n: np.ndarray) -> np.ndarray:
    return np.clip(n, INT_MIN, INT_MAX).astype(np.int32)


def floor_array(x) -> np.ndarray:
    s = _single_array(x)
    return _saturate_array(_trunc_array(s + BIG_ENOUGH_FLOOR) - BIG_ENOUGH_INT)


def ceil_array(x) -> np.ndarray:
    s = _single_array(x)
    n = _trunc_array(s + BIG_ENOUGH_CEIL) - BIG_ENOUGH_INT
    with np.errstate(invalid="ignore"):
        n = np.where(n - 1 >= s, n - 1, n)
    return _saturate_array(n)


def round_array(x) -> np.ndarray:
    s = _single_array(x)
    return _saturate_array(_trunc_array(s + BIG_ENOUGH_ROUND) - BIG_ENOUGH_INT)
