"""
poisson-scatter — command line entry point.

Usage:
    python -m poisson_scatter sample --width 500 --height 500 --size 5
    python -m poisson_scatter sample --width 800 --height 600 --size 10 --size 40 --circle --seed 7 --check
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys

from poisson_scatter.config import SAMPLER_DEFAULTS
from poisson_scatter.options import SamplerOptions
from poisson_scatter.runner import poisson_image_sampler
from poisson_scatter.sampler import check_layout, samples_to_dict


log = logging.getLogger("poisson_scatter.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="poisson_scatter",
        description="Scatter non-overlapping items with Poisson-disc sampling",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sample", help="Sample a layout and print it as JSON")
    s.add_argument("--x", type=float, default=0.0, help="Bounds origin x")
    s.add_argument("--y", type=float, default=0.0, help="Bounds origin y")
    s.add_argument("--width", type=float, required=True, help="Bounds width")
    s.add_argument("--height", type=float, required=True, help="Bounds height")
    s.add_argument("--size", type=float, action="append", required=True,
                   help="Item size; repeat for several sizes")
    s.add_argument("--min-dist", type=float, default=None,
                   help=f"Minimum gap between items (default {SAMPLER_DEFAULTS.min_dist})")
    s.add_argument("--max-tries", type=int, default=None,
                   help=f"Candidates per active sample (default {SAMPLER_DEFAULTS.max_tries})")
    s.add_argument("--circle", action="store_true", help="Sizes are circle radii")
    s.add_argument("--seed", type=int, default=None, help="Seed for a reproducible layout")
    s.add_argument("--max-iterations", type=int, default=None,
                   help="Stop after this many seed picks")
    s.add_argument("--check", action="store_true",
                   help="Verify spacing and bounds of the result")
    s.add_argument("--indent", type=int, default=None, help="JSON indent")

    return p


def _run_sample(args: argparse.Namespace) -> int:
    options = SamplerOptions(
        bounds={"x": args.x, "y": args.y, "width": args.width, "height": args.height},
        images=[{"size": size} for size in args.size],
        min_dist=args.min_dist,
        max_tries=args.max_tries,
        is_circle=args.circle,
    )
    rng = random.Random(args.seed).random if args.seed is not None else None
    outcome = poisson_image_sampler(options, rng=rng, max_iterations=args.max_iterations)

    resolved = outcome.options
    bounds = resolved.bounds if resolved is not None else None
    print(json.dumps(samples_to_dict(outcome.result, bounds), indent=args.indent))

    if not outcome.result:
        return 1

    if args.check:
        violations = check_layout(
            outcome.result, resolved.bounds, resolved.min_dist,
            sizes=resolved.sizes, is_circle=resolved.is_circle,
        )
        for v in violations:
            log.error("%s", v)
        if violations:
            return 2
        log.info("Layout check passed")

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd == "sample":
        return _run_sample(args)

    return 2


if __name__ == "__main__":
    sys.exit(main())
