#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from fastmath.core.constants import ATAN2_BITS, PI, PI2, SIN_BITS
from fastmath.design.table_error import wrap_pi
from fastmath.tables.atan2 import Atan2Table
from fastmath.tables.sincos import SinCosTable


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fastmath[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot sin/cos/atan2 lookup-table error over the full circle.")
    p.add_argument("--sin-bits", type=int, default=SIN_BITS)
    p.add_argument("--atan2-bits", type=int, default=ATAN2_BITS)
    p.add_argument("--samples", type=int, default=20_000)
    p.add_argument("--out-png", type=str, default="table_error.png")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    sincos = SinCosTable(args.sin_bits)
    atan = Atan2Table(args.atan2_bits)

    x = np.linspace(0.0, PI2, args.samples, endpoint=False)
    err_sin = sincos.sin_array(x).astype(np.float64) - np.sin(x)
    err_cos = sincos.cos_array(x).astype(np.float64) - np.cos(x)

    theta = np.linspace(-PI, PI, args.samples, endpoint=False)
    approx = atan.atan2_array(np.sin(theta), np.cos(theta)).astype(np.float64)
    err_atan = wrap_pi(approx - theta)

    deg = np.degrees(x)
    fig, axs = plt.subplots(3, 1, figsize=(12, 9), sharex=False)

    axs[0].plot(deg, err_sin, lw=0.5, color="tab:blue")
    axs[0].set_title(f"sin error ({sincos.count} entries)")
    axs[0].set_ylabel("table - exact")
    axs[0].grid(True, alpha=0.3)

    axs[1].plot(deg, err_cos, lw=0.5, color="tab:orange")
    axs[1].set_title("cos error (same table, quarter-turn offset)")
    axs[1].set_ylabel("table - exact")
    axs[1].grid(True, alpha=0.3)

    axs[2].plot(np.degrees(theta), err_atan, lw=0.5, color="tab:green")
    axs[2].set_title(f"atan2 error on the unit circle ({atan.dim}x{atan.dim} grid)")
    axs[2].set_ylabel("radians")
    axs[2].set_xlabel("angle (degrees)")
    axs[2].grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    print(f"max |sin err| = {np.abs(err_sin).max():.4e}")
    print(f"max |cos err| = {np.abs(err_cos).max():.4e}")
    print(f"max |atan2 err| = {np.abs(err_atan).max():.4e}")
    print(f"Plot saved to {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
