"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisjointSet:
    """Union-find over the integer ids ``0 .. size - 1``.

    Uses union by rank and full path compression. Ids outside the range are
    the caller's responsibility.
    """

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.rank = [0] * self.size

    def find(self, index: int) -> int:
        root = index
        while self.parent[root] != root:
            root = self.parent[root]
        # second pass: point every visited node straight at the root
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]
        return root

    def union(self, left: int, right: int) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        if self.rank[root_left] < self.rank[root_right]:
            self.parent[root_left] = root_right
        elif self.rank[root_left] > self.rank[root_right]:
            self.parent[root_right] = root_left
        else:
            self.parent[root_right] = root_left
            self.rank[root_left] += 1
