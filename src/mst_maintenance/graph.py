"""Weighted undirected graph value types."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import AbstractSet, Dict, FrozenSet, Tuple


class VertexOutOfRangeError(ValueError):
    """Raised when an edge refers to a vertex outside ``[0, vertex_count)``."""


@total_ordering
@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge stored with the smaller endpoint first.

    Edges sort by weight, then by endpoints, so sorted sequences are stable
    across runs.
    """

    src: int
    dest: int
    weight: int

    def __post_init__(self) -> None:
        if self.src > self.dest:
            src, dest = self.dest, self.src
            object.__setattr__(self, "src", src)
            object.__setattr__(self, "dest", dest)

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return self.weight, self.src, self.dest

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key < other.sort_key

    def endpoints(self) -> Tuple[int, int]:
        return self.src, self.dest

    def crosses(self, left: AbstractSet[int], right: AbstractSet[int]) -> bool:
        """Return True when one endpoint lies in `left` and the other in `right`."""

        return (self.src in left and self.dest in right) or (
            self.dest in left and self.src in right
        )

    def __str__(self) -> str:
        return f"({self.src}-{self.dest}, w:{self.weight})"


class Graph:
    """Fixed vertex count plus an append-only set of unique edges.

    Insertion order of edges is preserved; adding an edge that is already
    present is a no-op.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self._vertex_count = vertex_count
        self._edges: Dict[Edge, None] = {}

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    def add_edge(self, src: int, dest: int, weight: int) -> Edge:
        for vertex in (src, dest):
            if not 0 <= vertex < self._vertex_count:
                raise VertexOutOfRangeError(
                    f"Vertex {vertex} is out of range [0, {self._vertex_count})"
                )
        edge = Edge(src, dest, weight)
        self._edges.setdefault(edge, None)
        return edge

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def vertices(self) -> FrozenSet[int]:
        """Vertices touched by at least one edge."""

        touched = set()
        for edge in self._edges:
            touched.update(edge.endpoints())
        return frozenset(touched)

    def __contains__(self, edge: object) -> bool:
        return edge in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edges={len(self._edges)})"


_REFERENCE_EDGES = (
    (0, 1, 4),
    (0, 7, 8),
    (1, 2, 8),
    (1, 7, 11),
    (2, 3, 7),
    (2, 8, 2),
    (2, 5, 4),
    (3, 4, 9),
    (3, 5, 14),
    (4, 5, 10),
    (5, 6, 2),
    (6, 7, 1),
    (6, 8, 6),
    (7, 8, 7),
)


def reference_graph() -> Graph:
    """Return the classic 9-vertex, 14-edge demonstration graph."""

    graph = Graph(9)
    for src, dest, weight in _REFERENCE_EDGES:
        graph.add_edge(src, dest, weight)
    return graph
