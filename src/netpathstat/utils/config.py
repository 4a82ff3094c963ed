# -*- coding: utf-8 -*-
"""
Configuration container for the netpathstat package.

This module defines one dataclass that centralizes user-facing parameters:

- `AnalysisConfig` – Parameters shared by the loading, analysis and report classes.

**Use ``AnalysisConfig.describe()`` to display a clean summary of current settings.**

Notes
-----
* It is intended to be imported and the configuration object injected into the
  corresponding classes/functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from netpathstat.utils.constant import DEFAULT_LABEL

__all__ = ["AnalysisConfig"]


# -----------------------------------------------------------------------------
# AnalysisConfig
# -----------------------------------------------------------------------------
@dataclass
class AnalysisConfig:
    """
    Base configuration class for handling parameters across all netpathstat classes.

    **Use ``AnalysisConfig.describe()`` to display a clean summary of current settings.**

    Notes
    -----
    When initializing ``AnalysisConfig`` **directly** with a dictionary, you must unpack it
    with ``**param`` so that keys map to dataclass fields. In contrast, netpathstat
    classes accept either a ``dict`` or an existing ``AnalysisConfig`` and will handle
    conversion/validation internally.

    Examples
    --------
        # Direct instantiation (unpack required):
        >>> param = {"edgelist_path": "congress.edgelist", "seed": 7}
        >>> config = AnalysisConfig(**param)

        # Within a netpathstat class (no unpack needed, accepts dict or AnalysisConfig):
        >>> report = ComparisonReport({"edgelist_path": "congress.edgelist"})

    Attributes
    ----------
    edgelist_path : Optional[str or pathlib.Path]
        Path to the empirical edge-list file (two whitespace-separated integer
        columns per line; extra columns are ignored).
    label : str
        Name of the empirical graph, used in console output.
    num_nodes : Optional[int]
        Number of nodes of the random reference graph. If ``None``, the number of
        distinct nodes of the empirical graph is used.
    num_edges : Optional[int]
        Number of edge draws for the random reference graph. If ``None``, the number
        of edges of the empirical graph is used. Self-loop draws are skipped, so the
        realized edge count may be lower.
    seed : Optional[int]
        Seed of the default random pair source. ``None`` draws fresh entropy.
    main_print : bool
        Controls whether general execution information should be printed to the
        console. Useful for monitoring progress in scripts or debugging.
    required_fields : List[str]
        List of field names that are required for validation. This is set
        dynamically in the context of each class that uses AnalysisConfig.
    """

    edgelist_path: Optional[Union[str, Path]] = None  # Empirical edge-list file.
    label: str = DEFAULT_LABEL  # Display name of the empirical graph.
    num_nodes: Optional[int] = None  # Random graph size; None matches the empirical graph.
    num_edges: Optional[int] = None  # Random graph edge draws; None matches the empirical graph.
    seed: Optional[int] = None  # Seed for the default random pair source.
    main_print: bool = False  # Toggles general execution information in the console.

    # Custom field validation (e.g., required fields)
    required_fields: List[str] = field(default_factory=list)  # Dynamically set in each class.

    def validate(self) -> AnalysisConfig:
        """
        Validate that all required fields are provided and check value ranges.
        """
        for field_name in self.required_fields:
            if getattr(self, field_name) is None:
                raise ValueError(f"Required parameter '{field_name}' is missing.")

        self._validate_types()
        self._validate_sizes()

        return self

    def _validate_types(self) -> None:
        """
        Explicitly validate types for each field.
        """
        type_map = {
            "edgelist_path": (str, Path, type(None)),
            "label": (str,),
            "num_nodes": (int, type(None)),
            "num_edges": (int, type(None)),
            "seed": (int, type(None)),
            "main_print": (bool,),
        }

        for field_name, expected_types in type_map.items():
            value = getattr(self, field_name)
            if not isinstance(value, expected_types):
                raise TypeError(
                    f"Parameter '{field_name}' must be of type {expected_types}, got {type(value).__name__}."
                )

    def _validate_sizes(self) -> None:
        """
        Validate the random graph sizes.
        """
        if self.num_nodes is not None and self.num_nodes < 1:
            raise ValueError(
                f"Invalid 'num_nodes': {self.num_nodes}\n"
                "The random graph needs at least one node."
            )
        if self.num_edges is not None and self.num_edges < 0:
            raise ValueError(
                f"Invalid 'num_edges': {self.num_edges}\n"
                "The number of edge draws cannot be negative."
            )

    def validate_for_class(self, required_fields: List[str]) -> None:
        """
        Validate that the specified required fields are present in the AnalysisConfig object.

        Parameters
        ----------
        required_fields : list of str
            List of field names that must be validated.

        Raises
        ------
        ValueError
            If any required field is missing.
        """
        missing_fields = [name for name in required_fields if getattr(self, name, None) is None]
        if missing_fields:
            raise ValueError(f"Missing required parameters: {', '.join(missing_fields)}")

    @classmethod
    def from_param(
        cls,
        param: Union[dict, AnalysisConfig],
        *,
        required_fields: Optional[List[str]] = None,
    ) -> AnalysisConfig:
        """
        Build a validated configuration from a dictionary or reuse an existing one.

        Parameters
        ----------
        param : dict or AnalysisConfig
            Configuration parameters or an already built AnalysisConfig.
        required_fields : list of str, optional
            Fields the calling class needs.

        Raises
        ------
        TypeError
            If `param` is neither a dictionary nor an AnalysisConfig.
        """
        required_fields = required_fields or []

        # Case 1: param is a dictionary
        if isinstance(param, dict):
            return cls(**param, required_fields=required_fields).validate()

        # Case 2: param is already an AnalysisConfig
        if isinstance(param, AnalysisConfig):
            param.validate_for_class(required_fields)
            return param

        raise TypeError("Parameter 'param' must be a dictionary or an AnalysisConfig object.")

    def describe(self) -> None:
        """
        Display a summary of the current analysis configuration.
        """
        print("\nAnalysisConfig (analysis settings):")
        print(f" - Edge list                : {self.edgelist_path}")
        print(f" - Label                    : {self.label}")
        print(f" - Random graph nodes       : {self.num_nodes if self.num_nodes is not None else 'match empirical'}")
        print(f" - Random graph edge draws  : {self.num_edges if self.num_edges is not None else 'match empirical'}")
        print(f" - Seed                     : {self.seed}")
        print(f" - Print summary            : {self.main_print}")
