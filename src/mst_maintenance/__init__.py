"""MST maintenance library initialization."""

from .graph import Edge, Graph, VertexOutOfRangeError, reference_graph
from .kruskal import build_mst, total_weight
from .loader import GraphFormatError, load_graph
from .pipeline import (
    MSTMaintainer,
    MSTMaintainerConfig,
    MSTMaintainerResult,
    MSTMaintainerStats,
    PerturbationStep,
)
from .runner import maintain_file, maintain_graph
from .serialization import save_tree, tree_to_dict, tree_to_json
from .structures import DisjointSet
from .tree import MinimumSpanningTree

__all__ = [
    "DisjointSet",
    "Edge",
    "Graph",
    "GraphFormatError",
    "MSTMaintainer",
    "MSTMaintainerConfig",
    "MSTMaintainerResult",
    "MSTMaintainerStats",
    "MinimumSpanningTree",
    "PerturbationStep",
    "VertexOutOfRangeError",
    "build_mst",
    "load_graph",
    "maintain_file",
    "maintain_graph",
    "reference_graph",
    "save_tree",
    "total_weight",
    "tree_to_dict",
    "tree_to_json",
]
