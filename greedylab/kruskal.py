"""Minimum spanning trees with Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Sequence


class DisjointSet:
    """Union-find over the integers 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding x."""
        if not 0 <= x < len(self._parent):
            raise ValueError(f"element {x} is out of range for {len(self._parent)} elements")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            next_x = self._parent[x]
            self._parent[x] = root
            x = next_x
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding x and y; return False if they were already one set."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


class Graph:
    """An undirected weighted graph given as a list of edges."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self._edges: list[tuple[int, int, int]] = []

    def add_edge(self, u: int, v: int, weight: int) -> None:
        for vertex in (u, v):
            if not 0 <= vertex < self.vertex_count:
                raise ValueError(f"vertex {vertex} is out of range for {self.vertex_count} vertices")
        self._edges.append((weight, u, v))

    def kruskal(self) -> list[tuple[int, int, int]]:
        """Return the spanning forest's edges as (u, v, weight), lightest first."""
        components = DisjointSet(self.vertex_count)
        return [
            (u, v, weight)
            for weight, u, v in sorted(self._edges)
            if components.union(u, v)
        ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of the sample graph."""
    graph = Graph(4)
    graph.add_edge(0, 1, 10)
    graph.add_edge(0, 2, 15)
    graph.add_edge(0, 3, 30)
    graph.add_edge(1, 3, 40)
    graph.add_edge(2, 3, 50)

    tree = graph.kruskal()
    for u, v, weight in tree:
        print(f"Edge: {u} - {v} with weight {weight}")
    print(f"Total cost of MST: {sum(weight for _, _, weight in tree)}")
    return 0