# -*- coding: utf-8 -*-
"""
Post-processing subpackage: result presentation.

This subpackage re-exports the main user-facing class:

- class `ComparisonReport` – average path length of an empirical graph next to
  a random graph of comparable size, printed to the console.
"""

from __future__ import annotations

from .report import ComparisonReport

__all__ = ["ComparisonReport"]
