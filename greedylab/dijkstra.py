"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge to the target vertex."""

    target: int
    weight: int


def dijkstra(graph: Sequence[Sequence[Edge]], source: int) -> list[float]:
    """Return the distance from source to every vertex; unreachable ones are infinite."""
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is out of range for {len(graph)} vertices")
    distances: list[float] = [math.inf] * len(graph)
    distances[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        if distance > distances[u]:
            continue
        for edge in graph[u]:
            candidate = distances[u] + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                heapq.heappush(heap, (candidate, edge.target))
    return distances


def _sample_graph() -> list[list[Edge]]:
    return [
        [Edge(1, 2), Edge(2, 4)],
        [Edge(2, 1), Edge(3, 7)],
        [Edge(4, 3)],
        [Edge(5, 1)],
        [Edge(3, 2), Edge(5, 5)],
        [],
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print shortest distances from vertex 0 in the sample graph."""
    distances = dijkstra(_sample_graph(), 0)
    print("".join(f"{distance} " for distance in distances))
    return 0