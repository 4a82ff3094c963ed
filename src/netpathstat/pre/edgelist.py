# -*- coding: utf-8 -*-
"""
Edge-list file loading.

The expected format is plain text with one directed edge per line::

    <source> <target> [ignored columns ...]

- tokens are separated by any whitespace;
- lines with fewer than two tokens (blank lines included) are skipped;
- additional tokens, such as a weight, are ignored;
- `source` and `target` must be unsigned integers. Any other value aborts the
  loading with a ``ValueError``; there is no partial load.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Union

import polars as pl

from netpathstat.analysis.graph import Graph
from netpathstat.utils.constant import EDGELIST_SCHEMA

__all__ = ["read_edgelist", "load_graph"]

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_MAX_NODE_ID = 2**64 - 1


def _parse_node(token: str, path: Path, line_number: int) -> int:
    if not _UNSIGNED_INT.fullmatch(token):
        raise ValueError(
            f"Invalid node identifier {token!r} on line {line_number} of '{path}'.\n"
            "Source and target must be unsigned integers."
        )
    value = int(token)
    if value > _MAX_NODE_ID:
        raise ValueError(
            f"Node identifier {token!r} on line {line_number} of '{path}' is out of range.\n"
            f"Identifiers must not exceed {_MAX_NODE_ID}."
        )
    return value


def read_edgelist(path: Union[str, Path]) -> pl.DataFrame:
    """
    Read an edge-list file into a Polars table.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the edge-list file.

    Returns
    -------
    polars.DataFrame
        One row per edge, in file order. Columns ``'from'`` and ``'to'`` (UInt64).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the first two tokens of a line are not unsigned integers, or if the
        file is not valid UTF-8 text.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Edge list file not found: {path.resolve()}")

    sources: List[int] = []
    targets: List[int] = []
    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            parts = line.split()
            if len(parts) < 2:
                continue
            sources.append(_parse_node(parts[0], path, line_number))
            targets.append(_parse_node(parts[1], path, line_number))

    return pl.DataFrame({"from": sources, "to": targets}, schema=EDGELIST_SCHEMA)


def load_graph(path: Union[str, Path]) -> Graph:
    """
    Load an edge-list file as a `Graph`.

    See `read_edgelist` for the format and the raised exceptions.
    """
    return Graph.from_edgelist(read_edgelist(path))
