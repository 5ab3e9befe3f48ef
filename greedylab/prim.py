"""Minimum spanning trees with Prim's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


class Graph:
    """A weighted graph stored as adjacency lists, undirected by default."""

    def __init__(self, vertex_count: int, undirected: bool = True) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self.undirected = undirected
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is out of range for {self.vertex_count} vertices")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        if self.undirected:
            self._adjacency[v].append((u, weight))

    def prim(self, source: int) -> list[tuple[int, int, int]]:
        """Return the tree grown from source as (parent, vertex, weight), by vertex.

        Raises ValueError if some vertex cannot be reached from source.
        """
        self._check(source)
        key: list[float] = [math.inf] * self.vertex_count
        parent: list[int | None] = [None] * self.vertex_count
        in_tree = [False] * self.vertex_count

        key[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            _, u = heapq.heappop(heap)
            if in_tree[u]:
                continue
            in_tree[u] = True
            for v, weight in self._adjacency[u]:
                if not in_tree[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))

        tree = []
        for vertex, (vertex_parent, weight) in enumerate(zip(parent, key)):
            if vertex == source:
                continue
            if vertex_parent is None:
                raise ValueError(f"vertex {vertex} is not reachable from {source}")
            tree.append((vertex_parent, vertex, int(weight)))
        return tree


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of the sample graph grown from vertex 0."""
    graph = Graph(4)
    graph.add_edge(0, 1, 10)
    graph.add_edge(0, 2, 15)
    graph.add_edge(0, 3, 30)
    graph.add_edge(1, 3, 40)
    graph.add_edge(2, 3, 50)

    tree = graph.prim(0)
    print("Edges in MST:")
    for parent, vertex, weight in tree:
        print(f"{parent} - {vertex} with weight {weight}")
    print(f"Minimum cost is = {sum(weight for _, _, weight in tree)}")
    return 0