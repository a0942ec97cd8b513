from __future__ import annotations

import argparse
import importlib
import logging
import math
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s"

# name -> (arity, exact reference)
_EXACT = {
    "sin": (1, math.sin),
    "cos": (1, math.cos),
    "sin-deg": (1, lambda d: math.sin(math.radians(d))),
    "cos-deg": (1, lambda d: math.cos(math.radians(d))),
    "atan2": (2, math.atan2),
    "floor": (1, math.floor),
    "ceil": (1, math.ceil),
    "round": (1, lambda x: math.floor(x + 0.5)),
}


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _run_tool(modpath: str, argv: list[str]) -> int:
    """Import a design or diagnostics module and return its main(argv) status."""
    tool = importlib.import_module(modpath)
    return int(tool.main(argv) or 0)


def cmd_eval(argv: list[str]) -> int:
    import fastmath

    p = argparse.ArgumentParser(prog="fastmath eval", description="Evaluate one fast function next to its exact counterpart.")
    p.add_argument("func", choices=sorted(_EXACT))
    p.add_argument("args", type=float, nargs="+", help="atan2 takes Y X; every other function takes one value")
    args = p.parse_args(argv)

    arity, exact_fn = _EXACT[args.func]
    if len(args.args) != arity:
        print(f"Error: {args.func} takes {arity} argument(s), got {len(args.args)}.", file=sys.stderr)
        return 1

    fast_fn = getattr(fastmath, args.func.replace("-", "_"))
    approx = fast_fn(*args.args)
    exact = exact_fn(*args.args)

    print(f"{args.func}({', '.join(f'{a:g}' for a in args.args)})")
    print(f"  fast  = {approx!r}")
    print(f"  exact = {exact!r}")
    print(f"  error = {approx - exact:+.3e}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="fastmath", description="Fast approximate math toolkit CLI.")
    p.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("eval", help="Evaluate a fast function and compare it with the exact one.")

    # design tools
    sub.add_parser("table-error", help="Measure sin/atan2 table error for several table sizes.")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools (optional dependencies)")
    p_diag.add_argument(
        "tool",
        choices=["error-plot", "triangular-fit"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    setup_logging(args.log_level)

    if args.cmd == "eval":
        return cmd_eval(rest)

    if args.cmd == "table-error":
        return _run_tool("fastmath.design.table_error", rest)

    if args.cmd == "diag":
        tool_map = {
            "error-plot": "fastmath.diagnostics.error_plot",
            "triangular-fit": "fastmath.diagnostics.triangular_fit",
        }
        return _run_tool(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
