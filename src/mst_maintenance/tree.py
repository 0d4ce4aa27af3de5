"""Spanning tree state and its remove / split / reconnect operations."""

from __future__ import annotations

import math
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from .graph import Edge, Graph
from .kruskal import build_mst, total_weight
from .structures import DisjointSet

MIDDLE_RANGE = (0.3, 0.7)


class MinimumSpanningTree:
    """Edges of a spanning forest over a subset of a graph's vertices.

    The graph is shared and never modified. Only
    :meth:`remove_edge_in_middle_range` mutates the instance; splitting and
    merging return new trees.
    """

    def __init__(
        self,
        graph: Graph,
        edges: Iterable[Edge],
        vertices: Optional[Iterable[int]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._graph = graph
        self._edges: Dict[Edge, None] = dict.fromkeys(edges)
        if vertices is None:
            derived = set()
            for edge in self._edges:
                derived.update(edge.endpoints())
            vertices = derived
        self._vertices = frozenset(vertices)
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_graph(cls, graph: Graph, rng: Optional[np.random.Generator] = None) -> MinimumSpanningTree:
        return cls(graph, build_mst(graph), rng=rng)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def mst_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def vertices(self) -> FrozenSet[int]:
        return self._vertices

    @property
    def total_weight(self) -> int:
        return total_weight(self._edges)

    def copy(self) -> MinimumSpanningTree:
        return MinimumSpanningTree(self._graph, self._edges, self._vertices, rng=self._rng)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return (
            f"MinimumSpanningTree(edges={len(self._edges)}, "
            f"vertices={len(self._vertices)}, weight={self.total_weight})"
        )

    def remove_edge_in_middle_range(self) -> Optional[Edge]:
        """Remove and return an edge drawn from the middle of the edge order.

        With ``n`` edges the index is drawn uniformly from
        ``[floor(0.3 n), floor(0.7 n)]``; trees with at most two edges always
        lose their first edge. Returns None for an empty tree.
        """

        if not self._edges:
            return None

        ordered = list(self._edges)
        index = middle_range_index(len(ordered), self._rng)
        removed = ordered[index]
        del self._edges[removed]
        return removed

    def split_into_components(self) -> Tuple[MinimumSpanningTree, MinimumSpanningTree]:
        """Partition the graph's vertices along the current edges into two trees.

        Components are ordered by their smallest vertex. When fewer than two
        components exist, two empty trees are returned.
        """

        forest = DisjointSet(self._graph.vertex_count)
        for edge in self._edges:
            forest.union(edge.src, edge.dest)

        components: Dict[int, List[int]] = {}
        for vertex in sorted(self._graph.vertices):
            components.setdefault(forest.find(vertex), []).append(vertex)

        if len(components) < 2:
            return (
                MinimumSpanningTree(self._graph, (), rng=self._rng),
                MinimumSpanningTree(self._graph, (), rng=self._rng),
            )

        first, second = (frozenset(members) for members in list(components.values())[:2])
        first_edges = [e for e in self._edges if e.src in first and e.dest in first]
        second_edges = [e for e in self._edges if e.src in second and e.dest in second]
        return (
            MinimumSpanningTree(self._graph, first_edges, first, rng=self._rng),
            MinimumSpanningTree(self._graph, second_edges, second, rng=self._rng),
        )

    def find_min_edge_between(self, other: MinimumSpanningTree) -> Optional[Edge]:
        """Return the lightest graph edge joining this tree's vertices to `other`'s.

        Ties go to the smaller edge in the weight-then-endpoints order. Returns
        None when the two vertex sets are not adjacent in the graph.
        """

        best: Optional[Edge] = None
        for edge in self._graph.edges:
            if not edge.crosses(self._vertices, other._vertices):
                continue
            if best is None or edge < best:
                best = edge
        return best

    def union_with(
        self, other: MinimumSpanningTree, connecting_edge: Optional[Edge]
    ) -> MinimumSpanningTree:
        edges = list(self._edges)
        edges.extend(other._edges)
        if connecting_edge is not None:
            edges.append(connecting_edge)
        return MinimumSpanningTree(
            self._graph,
            edges,
            self._vertices | other._vertices,
            rng=self._rng,
        )


def middle_range_index(count: int, rng: np.random.Generator) -> int:
    """Draw an index in the 30%-70% band of a sequence of `count` items."""

    if count <= 0:
        raise ValueError("count must be positive")
    if count <= 2:
        return 0
    low, high = MIDDLE_RANGE
    start = math.floor(low * count)
    end = math.floor(high * count)
    if start >= end:
        start, end = 0, count - 1
    index = int(rng.integers(start, end, endpoint=True))
    return min(index, count - 1)
