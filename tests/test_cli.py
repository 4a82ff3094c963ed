from __future__ import annotations

import pytest

from netpathstat.cli import main


def test_cli_prints_report(tmp_path, capsys) -> None:
    path = tmp_path / "network.edgelist"
    path.write_text("0 1 1.0\n1 2 1.0\n", encoding="utf-8")

    main([str(path), "--nodes", "5", "--edges", "12", "--seed", "3", "--label", "Sample"])

    out = capsys.readouterr().out
    assert "Loading Sample graph..." in out
    assert "Average path length (Sample): 1.3333" in out
    assert "Average path length (Random): " in out


def test_cli_match_and_verbose(tmp_path, capsys) -> None:
    path = tmp_path / "network.edgelist"
    path.write_text("0 1\n1 0\n", encoding="utf-8")

    main([str(path), "--match", "--seed", "1", "--verbose"])

    out = capsys.readouterr().out
    assert "AnalysisConfig (analysis settings):" in out
    assert "Average path length (Congress): 1.0000" in out


def test_cli_missing_file_exits(tmp_path) -> None:
    with pytest.raises(SystemExit, match="not found"):
        main([str(tmp_path / "missing.edgelist")])


def test_cli_invalid_edge_exits(tmp_path) -> None:
    path = tmp_path / "network.edgelist"
    path.write_text("0 x\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="line 1"):
        main([str(path)])


def test_cli_invalid_size_exits(tmp_path) -> None:
    path = tmp_path / "network.edgelist"
    path.write_text("0 1\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="num_edges"):
        main([str(path), "--edges", "-1"])
