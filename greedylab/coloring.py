"""Graph colouring with at most m colours by backtracking."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from greedylab.traversal import build_adjacency


def is_safe(vertex: int, adjacency: Sequence[Sequence[int]], colors: Sequence[int], color: int) -> bool:
    """Tell whether no neighbour of vertex already has color."""
    return all(colors[neighbor] != color for neighbor in adjacency[vertex])


def color_graph(adjacency: Sequence[Sequence[int]], color_count: int) -> list[int] | None:
    """Colour the vertices with 1..color_count so neighbours differ, or return None."""
    colors = [0] * len(adjacency)

    def assign(vertex: int) -> bool:
        if vertex == len(adjacency):
            return True
        for color in range(1, color_count + 1):
            if is_safe(vertex, adjacency, colors, color):
                colors[vertex] = color
                if assign(vertex + 1):
                    return True
                colors[vertex] = 0
        return False

    return colors if assign(0) else None


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str = "") -> int:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a colour count from standard input and print a colouring."""
    tokens = _tokens(sys.stdin)
    try:
        vertex_count = _read_int(tokens, "Enter the number of vertices:")
        edge_count = _read_int(tokens, "Enter the number of edges:")
        color_count = _read_int(tokens, "Enter the number of colors: ")
        print("Enter edges:")
        edges = [(_read_int(tokens), _read_int(tokens)) for _ in range(edge_count)]
        adjacency = build_adjacency(vertex_count, edges)
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    colors = color_graph(adjacency, color_count)
    if colors is None:
        print(f"No solution exists with {color_count} colors.")
    else:
        print("Graph coloring possible. Color assignment:")
        for vertex, color in enumerate(colors):
            print(f"Vertex {vertex} -> Color {color}")
    return 0