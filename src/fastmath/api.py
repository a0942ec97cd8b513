from __future__ import annotations

import logging
from typing import Optional

from .core.types import RandomSource
from .rand import PyRandomSource, Randomizer
from .tables.atan2 import Atan2Table
from .tables.sincos import SinCosTable

logger = logging.getLogger(__name__)

# Process-wide tables, built once on first import and read-only afterwards.
SIN_TABLE = SinCosTable()
ATAN2_TABLE = Atan2Table()

_randomizer: Optional[Randomizer] = None

def get_randomizer() -> Randomizer:
    global _randomizer
    if _randomizer is None:
        _randomizer = Randomizer(PyRandomSource())
    return _randomizer

def set_random_source(source: RandomSource) -> None:
    """Swap the source behind the default randomizer (e.g. a seeded one in tests)."""
    get_randomizer().source = source
    logger.debug("default random source set to %s", type(source).__name__)

# ============================================================
# Trigonometry
# ============================================================

def sin(radians: float) -> float:
    return SIN_TABLE.sin(radians)

def cos(radians: float) -> float:
    return SIN_TABLE.cos(radians)

def sin_deg(degrees: float) -> float:
    return SIN_TABLE.sin_deg(degrees)

def cos_deg(degrees: float) -> float:
    return SIN_TABLE.cos_deg(degrees)

def atan2(y: float, x: float) -> float:
    return ATAN2_TABLE.atan2(y, x)

def sin_array(radians):
    return SIN_TABLE.sin_array(radians)

def cos_array(radians):
    return SIN_TABLE.cos_array(radians)

def atan2_array(y, x):
    return ATAN2_TABLE.atan2_array(y, x)

# ============================================================
# Random numbers (default randomizer)
# ============================================================

def random_int(start: int, end: Optional[int] = None) -> int:
    return get_randomizer().random_int(start, end)

def random() -> float:
    return get_randomizer().random()

def random_float(start: float, end: Optional[float] = None) -> float:
    return get_randomizer().random_float(start, end)

def random_sign() -> int:
    return get_randomizer().random_sign()

def random_boolean(chance: Optional[float] = None) -> bool:
    return get_randomizer().random_boolean(chance)

def random_triangular(
    low: Optional[float] = None,
    high: Optional[float] = None,
    mode: Optional[float] = None,
) -> float:
    return get_randomizer().random_triangular(low, high, mode)
