#!/usr/bin/env python3
"""
Kolmogorov-Smirnov check of Randomizer.random_triangular against
scipy.stats.triang for one (low, high, mode).
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import numpy as np

from fastmath.rand import NumpyRandomSource, Randomizer


def _need_scipy():
    try:
        import scipy.stats as stats
        return stats
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "fastmath[diagnostics]"') from e


def sample(rnd: Randomizer, low: float, high: float, mode: float, n: int) -> np.ndarray:
    return np.fromiter((rnd.random_triangular(low, high, mode) for _ in range(n)), dtype=np.float64, count=n)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Goodness-of-fit of random_triangular against the triangular distribution.")
    p.add_argument("--low", type=float, default=0.0)
    p.add_argument("--high", type=float, default=10.0)
    p.add_argument("--mode", type=float, default=None, help="Apex (default: midpoint)")
    p.add_argument("-n", type=int, default=20_000, help="Number of samples")
    p.add_argument("--seed", type=int, default=12345)
    args = p.parse_args(argv)

    if not (args.low < args.high):
        print("Error: need low < high.", file=sys.stderr)
        return 1
    mode = (args.low + args.high) * 0.5 if args.mode is None else args.mode
    if not (args.low <= mode <= args.high):
        print("Error: mode must lie in [low, high].", file=sys.stderr)
        return 1

    stats = _need_scipy()
    rnd = Randomizer(NumpyRandomSource(seed=args.seed))
    xs = sample(rnd, args.low, args.high, mode, args.n)

    width = args.high - args.low
    c = (mode - args.low) / width
    res = stats.kstest(xs, stats.triang(c, loc=args.low, scale=width).cdf)

    expected_mean = (args.low + args.high + mode) / 3.0
    print(f"triangular(low={args.low:g}, high={args.high:g}, mode={mode:g}), n={args.n}")
    print(f"  sample range   = [{xs.min():.6f}, {xs.max():.6f}]")
    print(f"  sample mean    = {xs.mean():.6f}  (expected {expected_mean:.6f})")
    print(f"  KS statistic   = {res.statistic:.6f}")
    print(f"  KS p-value     = {res.pvalue:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
