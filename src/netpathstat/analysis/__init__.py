# -*- coding: utf-8 -*-
"""
Analysis subpackage : directed graph container and path-length statistics.

For most users, `average_path_length` is the entry point. The class
`PathLengthAnalyzer` adds console feedback and a per-source result table.
"""

from __future__ import annotations

from .graph import Graph
from .path_length import bfs, average_path_length, PathLengthAnalyzer

__all__ = ["Graph", "bfs", "average_path_length", "PathLengthAnalyzer"]
