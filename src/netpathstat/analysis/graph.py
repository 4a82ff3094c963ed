# -*- coding: utf-8 -*-
"""
Directed adjacency-list graph.

This module defines the class `Graph`, a light container mapping each node
identifier to the ordered list of its outgoing neighbors. It is the input of the
path-length analysis in `netpathstat.analysis.path_length`.

Conversions are provided to and from a Polars edge-list table (columns
``'from'`` and ``'to'``) and to a NetworkX DiGraph.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Set

import polars as pl
import networkx as nx

from netpathstat.utils.constant import EDGELIST_COLUMNS, EDGELIST_SCHEMA

__all__ = ["Graph"]


# -----------------------------------------------------------------------------
# Class: Graph
# -----------------------------------------------------------------------------
class Graph:
    """
    Directed graph stored as an adjacency list.

    Attributes
    ----------
    adj_list : dict of int to list of int
        Outgoing neighbors of each node, in insertion order. Duplicated edges and
        self-loops are kept as inserted.

    Methods
    -------
    add_edge(source, target):
        Appends `target` to the neighbors of `source`.
    neighbors(node):
        Returns the outgoing neighbors of `node`.
    nodes():
        Returns the nodes with at least one outgoing edge.
    from_edgelist(table):
        Builds a graph from a Polars edge-list table.
    edgelist():
        Returns the edges as a Polars edge-list table.
    to_networkx():
        Returns an equivalent NetworkX DiGraph.

    Notes
    -----
    - A node is a key of `adj_list` only once an outgoing edge has been recorded.
      Nodes that only appear as targets are not keys (see `node_set()` for the
      full set of observed nodes).
    - Node identifiers are non-negative integers; they need not be contiguous.
    """

    def __init__(self) -> None:
        self.adj_list: Dict[int, List[int]] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )

    def __len__(self) -> int:
        return len(self.adj_list)

    def __contains__(self, node: object) -> bool:
        return node in self.adj_list

    def __iter__(self) -> Iterator[int]:
        return iter(self.adj_list)


    def add_edge(self, source: int, target: int) -> None:
        """
        Add the directed edge ``source -> target``.

        The entry for `source` is created if absent. Self-loops and duplicated
        edges are stored as given.
        """
        self.adj_list.setdefault(source, []).append(target)

    def neighbors(self, node: int) -> List[int]:
        """Return the outgoing neighbors of `node` (empty list if it has none)."""
        return self.adj_list.get(node, [])

    def nodes(self) -> List[int]:
        """Return the nodes that have at least one outgoing edge."""
        return list(self.adj_list)

    def node_set(self) -> Set[int]:
        """Return every node observed in the graph, as a source or as a target."""
        observed = set(self.adj_list)
        for targets in self.adj_list.values():
            observed.update(targets)
        return observed

    def number_of_nodes(self) -> int:
        return len(self.node_set())

    def number_of_edges(self) -> int:
        return sum(len(targets) for targets in self.adj_list.values())


    @classmethod
    def from_edgelist(cls, table: pl.DataFrame) -> Graph:
        """
        Build a graph from a Polars edge-list table.

        Parameters
        ----------
        table : pl.DataFrame
            Table with the columns ``'from'`` and ``'to'`` (one row per edge).
            Additional columns are ignored.

        Returns
        -------
        Graph
            A new graph with the edges inserted in row order.

        Raises
        ------
        TypeError
            If `table` is not a Polars DataFrame.
        ValueError
            If `table` is missing the ``'from'`` or ``'to'`` column.
        """
        if not isinstance(table, pl.DataFrame):
            raise TypeError("The edge list must be a Polars DataFrame.")

        missing_columns = [col for col in EDGELIST_COLUMNS if col not in table.columns]
        if missing_columns:
            raise ValueError(f"Missing required columns in edgelist: {', '.join(missing_columns)}")

        graph = cls()
        for source, target in table.select(list(EDGELIST_COLUMNS)).iter_rows():
            graph.add_edge(source, target)
        return graph

    def edgelist(self) -> pl.DataFrame:
        """
        Return the edges as a Polars table with the columns ``'from'`` and ``'to'``.

        Rows follow the adjacency order: sources in insertion order, then each
        source's neighbors in insertion order.
        """
        sources: List[int] = []
        targets: List[int] = []
        for source, neighbors in self.adj_list.items():
            sources.extend([source] * len(neighbors))
            targets.extend(neighbors)
        return pl.DataFrame({"from": sources, "to": targets}, schema=EDGELIST_SCHEMA)

    def to_networkx(self) -> nx.DiGraph:
        """
        Build the equivalent NetworkX DiGraph.

        Notes
        -----
        - Duplicated edges collapse into a single DiGraph edge.
        - Converts the Polars edge list to Pandas for compatibility with NetworkX.
        """
        edgelist_df = self.edgelist().to_pandas()
        return nx.from_pandas_edgelist(
            edgelist_df,
            source="from",
            target="to",
            create_using=nx.DiGraph,
        )
