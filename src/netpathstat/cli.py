"""Command line entry point comparing an edge-list network with a random graph."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from .post.report import ComparisonReport
from .utils.config import AnalysisConfig
from .utils.constant import (
    DEFAULT_EDGELIST,
    DEFAULT_LABEL,
    DEFAULT_NUM_EDGES,
    DEFAULT_NUM_NODES,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netpathstat",
        description=(
            "Average shortest path length of a directed network, "
            "next to a random graph of comparable size."
        ),
    )
    parser.add_argument(
        "edgelist",
        nargs="?",
        type=Path,
        default=Path(DEFAULT_EDGELIST),
        help=f"Edge-list file, one 'source target' pair per line (default: {DEFAULT_EDGELIST})",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_NUM_NODES,
        help=f"Number of nodes of the random graph (default: {DEFAULT_NUM_NODES})",
    )
    parser.add_argument(
        "--edges",
        type=int,
        default=DEFAULT_NUM_EDGES,
        help=f"Number of edge draws of the random graph (default: {DEFAULT_NUM_EDGES})",
    )
    parser.add_argument(
        "--match",
        action="store_true",
        help="Size the random graph after the loaded network (overrides --nodes/--edges)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random graph")
    parser.add_argument(
        "--label",
        default=DEFAULT_LABEL,
        help=f"Name of the network in the report (default: {DEFAULT_LABEL})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress details")
    return parser


def _resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig(
        edgelist_path=args.edgelist,
        label=args.label,
        num_nodes=None if args.match else args.nodes,
        num_edges=None if args.match else args.edges,
        seed=args.seed,
        main_print=args.verbose,
        required_fields=["edgelist_path"],
    )
    return config.validate()


def main(argv: Iterable[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = _resolve_config(args)
        if config.main_print:
            config.describe()
        ComparisonReport(config).run()
    except (OSError, ValueError) as e:
        raise SystemExit(f"netpathstat: error: {e}") from e


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
