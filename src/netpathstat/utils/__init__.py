# -*- coding: utf-8 -*-
"""
Internal utilities (constants, config, console helpers).

This subpackage is intentionally not a user-facing API surface.
Import what you need from concrete modules, for example:

    from netpathstat.utils.constant import DEFAULT_NUM_NODES
"""

from __future__ import annotations

from netpathstat.utils.config import AnalysisConfig

# No public re-exports on purpose
__all__: list[str] = ["AnalysisConfig"]
