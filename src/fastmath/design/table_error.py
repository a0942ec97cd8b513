# design/table_error.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import numpy as np

from ..core.constants import ATAN2_BITS, ATAN2_BITS_RANGE, PI, PI2, SIN_BITS, SIN_BITS_RANGE
from ..core.types import TableStats
from ..tables.atan2 import Atan2Table
from ..tables.sincos import SinCosTable


def wrap_pi(d: np.ndarray) -> np.ndarray:
    """Wrap angle differences into [-pi, pi)."""
    return (d + np.pi) % (2.0 * np.pi) - np.pi


def sin_error(table: SinCosTable, num_samples: int = 200_000) -> np.ndarray:
    """Absolute sin error over one turn, sampled on a uniform grid."""
    x = np.linspace(0.0, PI2, num_samples, endpoint=False)
    return np.abs(table.sin_array(x).astype(np.float64) - np.sin(x))


def atan2_error(table: Atan2Table, num_samples: int = 200_000) -> np.ndarray:
    """Absolute atan2 error for unit vectors around the full circle."""
    theta = np.linspace(-PI, PI, num_samples, endpoint=False)
    y, x = np.sin(theta), np.cos(theta)
    approx = table.atan2_array(y, x).astype(np.float64)
    return np.abs(wrap_pi(approx - np.arctan2(y, x)))


def measure_sin(bits: int, num_samples: int = 200_000) -> TableStats:
    table = SinCosTable(bits)
    err = sin_error(table, num_samples)
    return TableStats("sin", bits, table.count, table.nbytes, float(err.max()), float(err.mean()))


def measure_atan2(bits: int, num_samples: int = 200_000) -> TableStats:
    table = Atan2Table(bits)
    err = atan2_error(table, num_samples)
    return TableStats("atan2", bits, table.count, table.nbytes, float(err.max()), float(err.mean()))


def format_stats(rows: List[TableStats]) -> str:
    lines = []
    lines.append(f"{'Table':<6} | {'Bits':>4} | {'Entries':>9} | {'Bytes':>9} | {'Max abs err':>12} | {'Mean abs err':>12}")
    lines.append("-" * 68)
    for s in rows:
        lines.append(
            f"{s.kind:<6} | {s.bits:>4} | {s.entries:>9} | {s.nbytes:>9} | "
            f"{s.max_abs_error:>12.4e} | {s.mean_abs_error:>12.4e}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Measure lookup-table error against exact sin/atan2 for several table sizes.")
    p.add_argument("--sin-bits", type=int, action="append", default=None,
                   help=f"Sin table bits (repeatable, default: {SIN_BITS - 4}, {SIN_BITS - 2}, {SIN_BITS}).")
    p.add_argument("--atan2-bits", type=int, action="append", default=None,
                   help=f"Atan2 table bits per axis (repeatable, default: {ATAN2_BITS - 2}..{ATAN2_BITS + 1}).")
    p.add_argument("--samples", type=int, default=200_000, help="Number of sample angles (default: 200000).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    sin_bits = args.sin_bits or [SIN_BITS - 4, SIN_BITS - 2, SIN_BITS]
    atan2_bits = args.atan2_bits or list(range(ATAN2_BITS - 2, ATAN2_BITS + 2))

    for bits, (lo, hi), name in [(b, SIN_BITS_RANGE, "sin") for b in sin_bits] + \
                                [(b, ATAN2_BITS_RANGE, "atan2") for b in atan2_bits]:
        if not (lo <= bits <= hi):
            print(f"Error: {name} bits must be in [{lo}, {hi}], got {bits}.", file=sys.stderr)
            return 1
    if args.samples < 1:
        print("Error: Number of samples must be at least 1.", file=sys.stderr)
        return 1

    rows = [measure_sin(b, args.samples) for b in sin_bits]
    rows += [measure_atan2(b, args.samples) for b in atan2_bits]

    full_output = format_stats(rows)
    print(full_output)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(full_output + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
