from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Protocol

class RandomSource(Protocol):
    """
    Random-bit source consumed by the Randomizer.

    Implementations own their state; the Randomizer only calls these methods.
    None of the bundled sources is safe for unsynchronized use from several
    threads.
    """
    def next_int(self, bound: Optional[int] = None) -> int:
        """Uniform in [0, bound) when bound is given, else the full signed 32-bit range."""
        ...

    def next_float(self) -> float:
        """Uniform in [0, 1)."""
        ...

    def next_boolean(self) -> bool: ...

@dataclass(frozen=True)
class TableStats:
    """Measured accuracy of one lookup table configuration."""
    kind: Literal["sin", "atan2"]
    bits: int
    entries: int
    nbytes: int
    max_abs_error: float
    mean_abs_error: float
