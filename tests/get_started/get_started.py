# Getting started: compare an edge-list network with random graphs of the same size.
# Expects a file "inputs/congress.edgelist" with one "source target [weight]" line per edge.

import pathlib

from netpathstat.utils import AnalysisConfig
import netpathstat.pre as pre
from netpathstat.analysis import Graph, PathLengthAnalyzer, average_path_length, bfs
from netpathstat.post import ComparisonReport

data_folder = pathlib.Path("inputs")


# ==========================================================================================
# === Complete configuration ===
# ==========================================================================================

config = AnalysisConfig(**{
    "edgelist_path": data_folder / "congress.edgelist",
    "label": "Congress",
    "num_nodes": 475,
    "num_edges": 13289,
    "seed": 2024,
    "main_print": True,
})
config.validate()
config.describe()


# ==========================================================================================
# === Pre-processing subpackage: input preparation ===
# ==========================================================================================

edges = pre.read_edgelist(config.edgelist_path)
print(edges.head())

congress = Graph.from_edgelist(edges)
print(congress)

random_graph = pre.generate_random_graph(
    config.num_nodes,
    config.num_edges,
    pair_source=pre.NumpyPairSource(config.seed),
)
print(random_graph)


# ==========================================================================================
# === Analysis subpackage: shortest paths ===
# ==========================================================================================

first_source = congress.nodes()[0]
distances = bfs(congress, first_source)
print(f"Node {first_source} reaches {len(distances) - 1} nodes, farthest at {max(distances.values())} hops.")

print(f"Average path length (Congress): {average_path_length(congress):.4f}")

analyzer = PathLengthAnalyzer(config)
analyzer.process(random_graph)
print(analyzer.table.sort("mean_distance", descending=True).head())


# ==========================================================================================
# === Post-processing subpackage: comparison report ===
# ==========================================================================================

summary = ComparisonReport(config).run()
print(summary)
