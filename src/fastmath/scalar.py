from __future__ import annotations

import math
from typing import TypeVar

from .core.constants import FLOAT_ROUNDING_ERROR, PI, PI2

NumT = TypeVar("NumT", int, float)


def clamp(value: NumT, lo: NumT, hi: NumT) -> NumT:
    """
    Clamp value into [lo, hi]. Works for ints (16-bit shorts included) and
    floats alike; lo <= hi is assumed and not checked.
    """
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def lerp(a: float, b: float, t: float) -> float:
    """a + (b - a) * t; t outside [0, 1] extrapolates."""
    return a + (b - a) * t


def norm(start: float, end: float, value: float) -> float:
    """Inverse of lerp: the t for which lerp(start, end, t) == value."""
    return (value - start) / (end - start)


def map_range(in_start: float, in_end: float, out_start: float, out_end: float, value: float) -> float:
    return out_start + (value - in_start) * (out_end - out_start) / (in_end - in_start)


def lerp_angle(from_radians: float, to_radians: float, t: float) -> float:
    """Interpolate along the shorter arc; result in [0, PI2)."""
    delta = (to_radians - from_radians + PI) % PI2 - PI
    return (from_radians + delta * t) % PI2


def lerp_angle_deg(from_degrees: float, to_degrees: float, t: float) -> float:
    """Interpolate along the shorter arc; result in [0, 360)."""
    delta = (to_degrees - from_degrees + 180.0) % 360.0 - 180.0
    return (from_degrees + delta * t) % 360.0


# ============================================================
# Powers of two (32-bit values)
# ============================================================

def next_power_of_two(value: int) -> int:
    """Smallest power of two >= value, for 0 <= value <= 2**31."""
    if value == 0:
        return 1
    value -= 1
    value |= value >> 1
    value |= value >> 2
    value |= value >> 4
    value |= value >> 8
    value |= value >> 16
    return value + 1


def is_power_of_two(value: int) -> bool:
    return value != 0 and (value & (value - 1)) == 0


# ============================================================
# Tolerant comparison, logarithms
# ============================================================

def is_zero(value: float, tolerance: float = FLOAT_ROUNDING_ERROR) -> bool:
    return abs(value) <= tolerance


def is_equal(a: float, b: float, tolerance: float = FLOAT_ROUNDING_ERROR) -> bool:
    return abs(a - b) <= tolerance


def log(base: float, value: float) -> float:
    return math.log(value) / math.log(base)


def log2(value: float) -> float:
    return log(2, value)
