"""fastmath public API.

Lookup-table trigonometry, bias-trick rounding, scalar helpers and random
numbers for per-frame numeric code. Accuracy is traded for speed: see the
module docstrings for each function's error bound and valid input range.
"""

from .api import (
    ATAN2_TABLE,
    SIN_TABLE,
    atan2,
    atan2_array,
    cos,
    cos_array,
    cos_deg,
    get_randomizer,
    random,
    random_boolean,
    random_float,
    random_int,
    random_sign,
    random_triangular,
    set_random_source,
    sin,
    sin_array,
    sin_deg,
)
from .core.constants import (
    DEG_RAD,
    DEGREES_TO_RADIANS,
    E,
    FLOAT_ROUNDING_ERROR,
    PI,
    PI2,
    RAD_DEG,
    RADIANS_TO_DEGREES,
)
from .core.errors import FastMathError, TableConfigError
from .rand import NumpyRandomSource, PyRandomSource, Randomizer
from .rounding import (
    ceil,
    ceil_array,
    ceil_positive,
    floor,
    floor_array,
    floor_positive,
    round,
    round_array,
    round_positive,
)
from .scalar import (
    clamp,
    is_equal,
    is_power_of_two,
    is_zero,
    lerp,
    lerp_angle,
    lerp_angle_deg,
    log,
    log2,
    map_range,
    next_power_of_two,
    norm,
)
from .tables.atan2 import Atan2Table
from .tables.sincos import SinCosTable

__all__ = [
    "PI",
    "PI2",
    "E",
    "FLOAT_ROUNDING_ERROR",
    "RADIANS_TO_DEGREES",
    "RAD_DEG",
    "DEGREES_TO_RADIANS",
    "DEG_RAD",
    "SIN_TABLE",
    "ATAN2_TABLE",
    "SinCosTable",
    "Atan2Table",
    "sin",
    "cos",
    "sin_deg",
    "cos_deg",
    "atan2",
    "sin_array",
    "cos_array",
    "atan2_array",
    "floor",
    "floor_positive",
    "ceil",
    "ceil_positive",
    "round",
    "round_positive",
    "floor_array",
    "ceil_array",
    "round_array",
    "clamp",
    "lerp",
    "norm",
    "map_range",
    "lerp_angle",
    "lerp_angle_deg",
    "next_power_of_two",
    "is_power_of_two",
    "is_zero",
    "is_equal",
    "log",
    "log2",
    "Randomizer",
    "PyRandomSource",
    "NumpyRandomSource",
    "get_randomizer",
    "set_random_source",
    "random_int",
    "random",
    "random_float",
    "random_sign",
    "random_boolean",
    "random_triangular",
    "FastMathError",
    "TableConfigError",
]
