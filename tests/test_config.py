from __future__ import annotations

from pathlib import Path

import pytest

from netpathstat.utils import AnalysisConfig
from netpathstat.utils.utils import run_with_spinner, to_engineering_notation


def test_from_param_accepts_dict_and_validates() -> None:
    config = AnalysisConfig.from_param(
        {"edgelist_path": Path("graph.edgelist"), "num_nodes": 10, "num_edges": 0},
        required_fields=["edgelist_path"],
    )

    assert config.edgelist_path == Path("graph.edgelist")
    assert config.label == "Congress"
    assert config.required_fields == ["edgelist_path"]


def test_from_param_reuses_instance() -> None:
    config = AnalysisConfig(edgelist_path="graph.edgelist")

    assert AnalysisConfig.from_param(config, required_fields=["edgelist_path"]) is config


def test_from_param_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        AnalysisConfig.from_param(["graph.edgelist"])


def test_missing_required_field() -> None:
    with pytest.raises(ValueError, match="edgelist_path"):
        AnalysisConfig.from_param({}, required_fields=["edgelist_path"])

    with pytest.raises(ValueError, match="edgelist_path"):
        AnalysisConfig.from_param(AnalysisConfig(), required_fields=["edgelist_path"])


@pytest.mark.parametrize(
    "param",
    [
        {"num_nodes": "475"},
        {"seed": 1.5},
        {"main_print": 1},
        {"edgelist_path": 3},
    ],
)
def test_wrong_types(param: dict) -> None:
    with pytest.raises(TypeError):
        AnalysisConfig(**param).validate()


@pytest.mark.parametrize("param", [{"num_nodes": 0}, {"num_edges": -5}])
def test_invalid_sizes(param: dict) -> None:
    with pytest.raises(ValueError):
        AnalysisConfig(**param).validate()


def test_describe(capsys) -> None:
    AnalysisConfig(edgelist_path="graph.edgelist", seed=3).describe()

    out = capsys.readouterr().out
    assert "graph.edgelist" in out
    assert "match empirical" in out


def test_to_engineering_notation() -> None:
    assert to_engineering_notation(0) == "0"
    assert to_engineering_notation(475) == "475"
    assert to_engineering_notation(13289) == "13.3k"
    assert to_engineering_notation(2_500_000) == "2.5M"


def test_run_with_spinner_returns_and_propagates() -> None:
    assert run_with_spinner("Working", lambda: 42) == 42

    def fail() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run_with_spinner("Working", fail)
