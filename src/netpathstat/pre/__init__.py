# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: input preparation.

This subpackage re-exports user-facing helpers so they can be imported directly:

- `read_edgelist`, `load_graph` – read an edge-list file (table or `Graph`)
- `generate_random_graph` – build a random graph of a given size
- classes `NumpyPairSource`, `SequencePairSource` – random or fixed pair sources
"""

from __future__ import annotations

from .edgelist import read_edgelist, load_graph
from .random_graph import PairSource, NumpyPairSource, SequencePairSource, generate_random_graph

__all__ = [
    "read_edgelist",
    "load_graph",
    "PairSource",
    "NumpyPairSource",
    "SequencePairSource",
    "generate_random_graph",
]
