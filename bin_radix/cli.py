"""
Benchmark the binary radix sort against the baseline comparison sort.

    bin-radix-bench [reps] [size] [--width W ...] [--seed N] [--markdown]
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from bin_radix.harness import run
from bin_radix.report import format_console, render_markdown
from bin_radix.widths import SUPPORTED_WIDTHS

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bin-radix-bench", description=__doc__.strip().splitlines()[0])
    ap.add_argument("reps", nargs="?", type=_non_negative, default=1, help="Repetitions per width")
    ap.add_argument("size", nargs="?", type=_non_negative, default=10, help="Elements per input")
    ap.add_argument(
        "--width",
        action="append",
        type=int,
        choices=SUPPORTED_WIDTHS,
        help="Key width in bits (repeatable, default: all)",
    )
    ap.add_argument("--seed", type=int, default=None, help="Random seed (default: current time)")
    ap.add_argument("--markdown", action="store_true", help="Print a Markdown table instead")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s - %(message)s")

    seed = args.seed if args.seed is not None else time.time_ns()
    widths = args.width or list(SUPPORTED_WIDTHS)
    log.info("seed=%d widths=%s", seed, widths)

    print(f"Reps: {args.reps}")
    print(f"Vector size: {args.size}")

    results = run(args.reps, args.size, widths, seed)
    print(render_markdown(results) if args.markdown else format_console(results))

    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
