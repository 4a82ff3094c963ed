# -*- coding: utf-8 -*-
"""
Comparison of an empirical network with a random reference graph.

This module defines the class `ComparisonReport`, which loads the empirical
graph from an edge-list file, generates a random graph of comparable size,
computes the average shortest path length of both and prints them.
"""

from __future__ import annotations

from typing import Optional, Union

import polars as pl

from netpathstat.analysis.graph import Graph
from netpathstat.analysis.path_length import PathLengthAnalyzer
from netpathstat.pre.edgelist import load_graph
from netpathstat.pre.random_graph import NumpyPairSource, PairSource, generate_random_graph
from netpathstat.utils.config import AnalysisConfig
from netpathstat.utils.constant import REPORT_DECIMALS

__all__ = ["ComparisonReport"]


# -----------------------------------------------------------------------------
# Class: ComparisonReport
# -----------------------------------------------------------------------------
class ComparisonReport:
    """
    Average path length of an empirical graph against a random graph.

    Attributes
    ----------
    config : AnalysisConfig
        Dataclass with validated configuration parameters.
    label : str
        Display name of the empirical graph.
    pair_source : PairSource
        Source of the random pairs. Defaults to `NumpyPairSource(config.seed)`.
    empirical : Graph or None
        Graph loaded from `config.edgelist_path`.
    random : Graph or None
        Random reference graph.
    avg_empirical, avg_random : float or None
        Average path lengths, set by `compute()`.
    main_print : bool
        Controls detailed console output.

    Methods
    -------
    load():
        Loads the empirical graph.
    generate():
        Generates the random graph.
    compute():
        Computes both averages (loading and generating first if needed).
    summary():
        Returns the results as a Polars DataFrame.
    print_report():
        Prints both averages with four decimals.
    run():
        Runs every step and prints the report.

    Examples
    --------
    >>> report = ComparisonReport({"edgelist_path": "congress.edgelist", "seed": 1})
    >>> report.run()
    Loading Congress graph...
    Generating random graph...
    Calculating average path lengths...
    Average path length (Congress): ...
    Average path length (Random): ...
    """

    def __init__(
        self,
        param: Union[dict, AnalysisConfig],
        *,
        pair_source: Optional[PairSource] = None,
    ) -> None:
        """
        Parameters
        ----------
        param : dict or AnalysisConfig
            Configuration parameters. Required field: `"edgelist_path"`.
        pair_source : PairSource, optional
            Source of the random pairs, replacing the seeded NumPy default.
        """
        self.config = AnalysisConfig.from_param(param, required_fields=["edgelist_path"])
        self.label = self.config.label
        self.main_print = self.config.main_print
        self.pair_source = pair_source if pair_source is not None else NumpyPairSource(self.config.seed)

        self.empirical: Optional[Graph] = None
        self.random: Optional[Graph] = None
        self.avg_empirical: Optional[float] = None
        self.avg_random: Optional[float] = None


    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)


    def load(self) -> ComparisonReport:
        """
        Load the empirical graph from `config.edgelist_path`.

        Raises
        ------
        FileNotFoundError
            If the edge-list file does not exist.
        ValueError
            If the edge-list file contains an invalid node identifier.
        """
        self.empirical = load_graph(self.config.edgelist_path)
        self._log(
            f"{self.label} graph loaded with {self.empirical.number_of_nodes()} nodes "
            f"and {self.empirical.number_of_edges()} edges."
        )
        return self


    def generate(self) -> ComparisonReport:
        """
        Generate the random reference graph.

        Unset sizes in the configuration are taken from the empirical graph,
        which is loaded first if needed.
        """
        num_nodes, num_edges = self.config.num_nodes, self.config.num_edges
        if num_nodes is None or num_edges is None:
            if self.empirical is None:
                self.load()
            if num_nodes is None:
                num_nodes = self.empirical.number_of_nodes()
            if num_edges is None:
                num_edges = self.empirical.number_of_edges()

        self.random = generate_random_graph(num_nodes, num_edges, pair_source=self.pair_source)
        self._log(
            f"Random graph generated from {num_edges} draws over {num_nodes} nodes: "
            f"{self.random.number_of_edges()} edges kept."
        )
        return self


    def compute(self) -> ComparisonReport:
        """Compute the average path length of both graphs."""
        if self.empirical is None:
            self.load()
        if self.random is None:
            self.generate()

        analyzer = PathLengthAnalyzer(self.config)
        self.avg_empirical = analyzer.process(self.empirical)
        self.avg_random = analyzer.process(self.random)
        return self


    def summary(self) -> pl.DataFrame:
        """
        Return the results as a Polars DataFrame.

        Columns: 'graph' (str), 'nodes' (Int64), 'edges' (Int64),
        'average_path_length' (Float64).

        Raises
        ------
        RuntimeError
            If `compute()` has not been run.
        """
        if self.avg_empirical is None or self.avg_random is None:
            raise RuntimeError("No results available.\nRun 'compute()' first.")

        return pl.DataFrame(
            {
                "graph": [self.label, "Random"],
                "nodes": [self.empirical.number_of_nodes(), self.random.number_of_nodes()],
                "edges": [self.empirical.number_of_edges(), self.random.number_of_edges()],
                "average_path_length": [self.avg_empirical, self.avg_random],
            },
            schema={
                "graph": pl.Utf8,
                "nodes": pl.Int64,
                "edges": pl.Int64,
                "average_path_length": pl.Float64,
            },
        )


    def print_report(self) -> None:
        """
        Print both averages with four decimals.

        Raises
        ------
        RuntimeError
            If `compute()` has not been run.
        """
        for graph, average in self.summary().select("graph", "average_path_length").iter_rows():
            print(f"Average path length ({graph}): {average:.{REPORT_DECIMALS}f}")


    def run(self) -> pl.DataFrame:
        """
        Load, generate, compute and print the report.

        Returns
        -------
        polars.DataFrame
            The `summary()` table.
        """
        print(f"Loading {self.label} graph...")
        self.load()

        print("Generating random graph...")
        self.generate()

        print("Calculating average path lengths...")
        self.compute()

        self.print_report()
        return self.summary()
