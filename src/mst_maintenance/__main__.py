"""Command line entry point for the MST maintenance library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .graph import reference_graph
from .pipeline import MSTMaintainerConfig
from .runner import maintain_file, maintain_graph


def _optional_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a minimum spanning tree, then remove and reconnect edges while keeping it minimal."
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Graph file (.json, .csv, .xlsx); the built-in 9-vertex graph is used when omitted",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Where to write the resulting tree (.json, .csv or .xlsx)",
    )
    parser.add_argument("--rounds", type=_non_negative_int, default=1, help="Number of remove/reconnect rounds (default: 1)")
    parser.add_argument(
        "--seed",
        type=_optional_int,
        default=_optional_int(os.getenv("MST_SEED")),
        help="Seed for the edge-removal random generator",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = MSTMaintainerConfig(
        rounds=args.rounds,
        seed=args.seed,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    if args.input is None:
        result = maintain_graph(reference_graph(), args.output, config)
    else:
        result = maintain_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
