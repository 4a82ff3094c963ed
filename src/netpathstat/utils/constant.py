# -*- coding: utf-8 -*-
"""
Core constants for netpathstat.

This module centralizes:

- the default inputs of the comparison run (``DEFAULT_EDGELIST``).
- the size of the reference random graph (``DEFAULT_NUM_NODES``, ``DEFAULT_NUM_EDGES``).
- the column names of edge-list tables (``EDGELIST_COLUMNS``).

Notes
-----
* The default sizes match the Congress interaction network (475 members,
  13289 recorded interactions) the comparison was first written for.
"""

from __future__ import annotations

from typing import Dict, Tuple

import polars as pl

__all__ = [
    "DEFAULT_EDGELIST",
    "DEFAULT_NUM_NODES",
    "DEFAULT_NUM_EDGES",
    "DEFAULT_LABEL",
    "EDGELIST_COLUMNS",
    "EDGELIST_SCHEMA",
    "REPORT_DECIMALS",
]


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
DEFAULT_EDGELIST: str = "congress.edgelist"
DEFAULT_NUM_NODES: int = 475
DEFAULT_NUM_EDGES: int = 13289
DEFAULT_LABEL: str = "Congress"

# Edge-list tables always carry these two columns, in this order.
EDGELIST_COLUMNS: Tuple[str, str] = ("from", "to")
EDGELIST_SCHEMA: Dict[str, type[pl.DataType]] = {
    "from": pl.UInt64,
    "to": pl.UInt64,
}

REPORT_DECIMALS: int = 4
