# -*- coding: utf-8 -*-
"""
Random directed graph generation.

A random graph is built from `num_edges` independent node pairs drawn
uniformly in ``[0, num_nodes)``. Pairs with ``source == target`` are skipped
(not redrawn), so the realized edge count may be lower than `num_edges`.
Duplicated pairs are kept.

The pairs come from a pluggable `PairSource`:

- `NumpyPairSource` – uniform draws from a NumPy ``Generator`` (default).
- `SequencePairSource` – a fixed, caller-supplied sequence of pairs, for
  reproducible graphs independent of any random number generator.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from netpathstat.analysis.graph import Graph

__all__ = [
    "PairSource",
    "NumpyPairSource",
    "SequencePairSource",
    "generate_random_graph",
]


# -----------------------------------------------------------------------------
# Protocol (expected pair source)
# -----------------------------------------------------------------------------
class PairSource(Protocol):
    """Protocol for objects supplying node pairs to the random graph generator."""

    def draw(self, num_nodes: int, num_edges: int) -> Iterable[Tuple[int, int]]:
        """
        Return `num_edges` (source, target) pairs with values in ``[0, num_nodes)``.
        """
        ...


# -----------------------------------------------------------------------------
# Pair sources
# -----------------------------------------------------------------------------
class NumpyPairSource:
    """
    Uniform pairs drawn with ``numpy.random.default_rng``.

    Parameters
    ----------
    seed : int, optional
        Seed of the generator. ``None`` draws fresh entropy from the OS.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"

    def draw(self, num_nodes: int, num_edges: int) -> List[Tuple[int, int]]:
        pairs = self.rng.integers(0, num_nodes, size=(num_edges, 2))
        return [(int(source), int(target)) for source, target in pairs.tolist()]


class SequencePairSource:
    """
    Replays a fixed sequence of pairs.

    Each `draw()` call consumes pairs from where the previous call stopped.

    Raises
    ------
    ValueError
        From `draw()`, if fewer pairs remain than requested or a pair is out of
        ``[0, num_nodes)``.
    """

    def __init__(self, pairs: Sequence[Tuple[int, int]]) -> None:
        self.pairs = [(int(source), int(target)) for source, target in pairs]
        self.position = 0

    def draw(self, num_nodes: int, num_edges: int) -> List[Tuple[int, int]]:
        end = self.position + num_edges
        if end > len(self.pairs):
            raise ValueError(
                f"Not enough pairs: {num_edges} requested, "
                f"{len(self.pairs) - self.position} remaining."
            )

        drawn = self.pairs[self.position:end]
        for source, target in drawn:
            if not (0 <= source < num_nodes and 0 <= target < num_nodes):
                raise ValueError(f"Pair ({source}, {target}) is out of range [0, {num_nodes}).")

        self.position = end
        return drawn


# -----------------------------------------------------------------------------
# Generator
# -----------------------------------------------------------------------------
def generate_random_graph(
    num_nodes: int,
    num_edges: int,
    *,
    pair_source: Optional[PairSource] = None,
) -> Graph:
    """
    Generate a random directed graph.

    Parameters
    ----------
    num_nodes : int
        Number of candidate nodes, identified by ``0 .. num_nodes - 1``.
    num_edges : int
        Number of pairs drawn. Self-loop pairs are skipped.
    pair_source : PairSource, optional
        Source of the pairs. Defaults to an unseeded `NumpyPairSource`.

    Returns
    -------
    Graph
        Graph with at most `num_edges` edges. Nodes that were never drawn as a
        source or a target do not appear in it.

    Raises
    ------
    ValueError
        If `num_nodes` is lower than 1 while edges are requested, or if
        `num_edges` is negative.
    """
    if num_edges < 0:
        raise ValueError(f"Invalid 'num_edges': {num_edges}. It cannot be negative.")
    if num_edges == 0:
        return Graph()
    if num_nodes < 1:
        raise ValueError(f"Invalid 'num_nodes': {num_nodes}. At least one node is required.")

    pair_source = pair_source if pair_source is not None else NumpyPairSource()

    graph = Graph()
    for source, target in pair_source.draw(num_nodes, num_edges):
        if source != target:
            graph.add_edge(source, target)
    return graph
