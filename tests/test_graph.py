from __future__ import annotations

import polars as pl
import pytest

from netpathstat.analysis import Graph


def test_add_edge_preserves_insertion_order() -> None:
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)

    assert graph.neighbors(1) == [2, 3]


def test_add_edge_keeps_duplicates_and_self_loops() -> None:
    graph = Graph()
    graph.add_edge(4, 4)
    graph.add_edge(4, 7)
    graph.add_edge(4, 7)

    assert graph.neighbors(4) == [4, 7, 7]
    assert graph.number_of_edges() == 3


def test_neighbors_of_unknown_or_sink_node_is_empty() -> None:
    graph = Graph()
    graph.add_edge(0, 1)

    assert graph.neighbors(1) == []
    assert graph.neighbors(42) == []


def test_nodes_lists_only_sources() -> None:
    graph = Graph()
    graph.add_edge(10, 20)
    graph.add_edge(30, 10)

    assert sorted(graph.nodes()) == [10, 30]
    assert graph.node_set() == {10, 20, 30}
    assert graph.number_of_nodes() == 3
    assert 10 in graph
    assert 20 not in graph
    assert len(graph) == 2


def test_empty_graph() -> None:
    graph = Graph()

    assert graph.nodes() == []
    assert graph.number_of_nodes() == 0
    assert graph.number_of_edges() == 0
    assert graph.edgelist().height == 0
    assert repr(graph) == "Graph(nodes=0, edges=0)"


def test_edgelist_table_follows_adjacency_order() -> None:
    graph = Graph()
    graph.add_edge(2, 0)
    graph.add_edge(1, 5)
    graph.add_edge(2, 3)

    table = graph.edgelist()

    assert table.columns == ["from", "to"]
    assert table.schema["from"] == pl.UInt64
    assert table.rows() == [(2, 0), (2, 3), (1, 5)]


def test_from_edgelist_round_trip_keeps_neighbors() -> None:
    table = pl.DataFrame({"from": [0, 0, 1], "to": [1, 2, 2], "weight": [0.5, 1.0, 2.0]})

    graph = Graph.from_edgelist(table)

    assert graph.neighbors(0) == [1, 2]
    assert graph.neighbors(1) == [2]
    assert graph.edgelist().rows() == [(0, 1), (0, 2), (1, 2)]


def test_from_edgelist_rejects_invalid_tables() -> None:
    with pytest.raises(TypeError):
        Graph.from_edgelist([(0, 1)])

    with pytest.raises(ValueError, match="to"):
        Graph.from_edgelist(pl.DataFrame({"from": [0]}))


def test_to_networkx_collapses_parallel_edges() -> None:
    graph = Graph()
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)

    digraph = graph.to_networkx()

    assert digraph.is_directed()
    assert digraph.number_of_nodes() == 3
    assert digraph.number_of_edges() == 2
    assert digraph.has_edge(1, 2)
    assert not digraph.has_edge(2, 1)
