# -*- coding: utf-8 -*-
"""
`netpathstat` — average shortest path length of directed networks.

This top-level package exposes three user-facing subpackages:

- `netpathstat.pre`       – edge-list loading and random graph generation
- `netpathstat.analysis`  – graph container and BFS path-length statistics
- `netpathstat.post`      – comparison report
"""

from __future__ import annotations

__all__ = ["pre", "analysis", "post", "__version__"]

__version__ = "1.0.0"
