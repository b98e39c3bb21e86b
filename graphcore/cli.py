"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphcore.graph import Graph


def main(argv: Sequence[str] | None = None) -> int:
    """Create an empty graph and report success."""
    parser = argparse.ArgumentParser(prog="graphcore", description="Create an empty graph.")
    parser.parse_args(argv)
    graph = Graph()
    print(f"Graph object created ({len(graph.nodes)} nodes, {len(graph.edges)} edges).")
    return 0