# -*- coding: utf-8 -*-
"""
Average shortest path length over a directed, unweighted graph.

This module provides:

- `bfs` – hop distances from one source node (breadth-first search).
- `average_path_length` – mean hop distance over all reachable ordered pairs.
- class `PathLengthAnalyzer` – configured wrapper that also keeps a per-source
  table of the aggregation.

Notes
-----
- Only nodes with outgoing edges are used as sources. A node without outgoing
  edges reaches nothing but itself, so the average is the same as with every
  observed node as a source.
- Unreachable pairs are excluded from the average, self pairs (distance 0) too.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple, Union

import polars as pl

from netpathstat.analysis.graph import Graph
from netpathstat.utils.config import AnalysisConfig
from netpathstat.utils.utils import run_with_spinner, to_engineering_notation

__all__ = ["bfs", "average_path_length", "PathLengthAnalyzer"]


# -----------------------------------------------------------------------------
# Functions
# -----------------------------------------------------------------------------
def bfs(graph: Graph, start: int) -> Dict[int, int]:
    """
    Breadth-first search of hop distances from `start`.

    Parameters
    ----------
    graph : Graph
        Graph to explore (not modified).
    start : int
        Source node. It does not need to have outgoing edges.

    Returns
    -------
    dict of int to int
        Minimum number of hops from `start` to every reachable node, with
        ``{start: 0}``. Unreachable nodes have no entry.
    """
    distances = {start: 0}
    queue = deque([start])

    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            if neighbor not in distances:
                distances[neighbor] = distances[node] + 1
                queue.append(neighbor)

    return distances


def _source_totals(graph: Graph, source: int) -> Tuple[int, int]:
    """Return (sum, count) of the positive distances from `source`."""
    reached = [d for d in bfs(graph, source).values() if d > 0]
    return sum(reached), len(reached)


def average_path_length(graph: Graph) -> float:
    """
    Mean shortest directed path length over all reachable ordered pairs.

    Every node with outgoing edges is used as a BFS source; positive distances
    are summed and counted.

    Returns
    -------
    float
        ``total / count``, or ``0.0`` when no pair is reachable (e.g. empty graph).
    """
    total_distance = 0
    path_count = 0

    for node in graph.nodes():
        total, count = _source_totals(graph, node)
        total_distance += total
        path_count += count

    if path_count == 0:
        return 0.0
    return total_distance / path_count


# -----------------------------------------------------------------------------
# Class: PathLengthAnalyzer
# -----------------------------------------------------------------------------
class PathLengthAnalyzer:
    """
    Average path length computation with console feedback and a per-source table.

    Attributes
    ----------
    config : AnalysisConfig
        Dataclass with validated configuration parameters.
    table : polars.DataFrame or None
        Per-source aggregation, set by `process()`. Columns:

        - 'source': UInt64 (BFS source node)
        - 'reached': UInt64 (number of nodes reached at distance > 0)
        - 'total_distance': UInt64 (sum of the hop distances)
        - 'mean_distance': Float64 (null when nothing is reached)
    average : float or None
        Result of the last `process()` call.
    main_print : bool
        Controls console output, determined by configuration parameters.

    Methods
    -------
    process(graph):
        Runs BFS from every source node and computes the average path length.
    """

    def __init__(self, param: Optional[Union[dict, AnalysisConfig]] = None) -> None:
        """
        Parameters
        ----------
        param : dict or AnalysisConfig, optional
            Configuration parameters. Defaults to an empty ``AnalysisConfig``.
        """
        self.config = AnalysisConfig.from_param(param if param is not None else {})
        self.main_print = self.config.main_print

        self.table: Optional[pl.DataFrame] = None
        self.average: Optional[float] = None


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    def _aggregate(self, graph: Graph) -> pl.DataFrame:
        sources: List[int] = []
        reached: List[int] = []
        totals: List[int] = []
        for node in graph.nodes():
            total, count = _source_totals(graph, node)
            sources.append(node)
            reached.append(count)
            totals.append(total)

        table = pl.DataFrame(
            {"source": sources, "reached": reached, "total_distance": totals},
            schema={"source": pl.UInt64, "reached": pl.UInt64, "total_distance": pl.UInt64},
        )
        return table.with_columns(
            pl.when(pl.col("reached") > 0)
            .then(pl.col("total_distance") / pl.col("reached"))
            .otherwise(None)
            .cast(pl.Float64)
            .alias("mean_distance")
        )


    def process(self, graph: Graph) -> float:
        """
        Compute the average shortest path length of `graph`.

        Parameters
        ----------
        graph : Graph
            Graph to analyze (not modified).

        Returns
        -------
        float
            Average over all reachable ordered pairs, ``0.0`` if there are none.
            Also stored in `self.average`; the per-source details are stored in
            `self.table`.

        Raises
        ------
        TypeError
            If `graph` is not a `Graph`.
        """
        if not isinstance(graph, Graph):
            raise TypeError("Parameter 'graph' must be an instance of the Graph class.")

        self._log(
            f"Running BFS from {to_engineering_notation(len(graph))} source nodes "
            f"({to_engineering_notation(graph.number_of_edges())} edges)."
        )

        if self.main_print:
            table = run_with_spinner("Calculating shortest paths", lambda: self._aggregate(graph))
        else:
            table = self._aggregate(graph)

        path_count = int(table["reached"].sum()) if table.height else 0
        total_distance = int(table["total_distance"].sum()) if table.height else 0
        average = total_distance / path_count if path_count else 0.0

        self.table = table
        self.average = average

        self._log(
            f"Reachable ordered pairs: {to_engineering_notation(path_count)}.\n"
            f"Average path length: {average}"
        )
        return average
