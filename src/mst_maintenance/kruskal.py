"""Kruskal minimum spanning forest construction."""

from __future__ import annotations

from typing import Iterable, List

from .graph import Edge, Graph
from .structures import DisjointSet


def build_mst(graph: Graph) -> List[Edge]:
    """Return the minimum spanning forest of `graph` in ascending edge order.

    The result has ``V - c`` edges for a graph with ``c`` connected components
    (isolated vertices count as components). The graph is not modified.
    """

    forest = DisjointSet(graph.vertex_count)
    result: List[Edge] = []
    for edge in sorted(graph.edges):
        root_src = forest.find(edge.src)
        root_dest = forest.find(edge.dest)
        if root_src != root_dest:
            result.append(edge)
            forest.union(root_src, root_dest)
    return result


def total_weight(edges: Iterable[Edge]) -> int:
    return sum(edge.weight for edge in edges)
