"""Depth-first and breadth-first traversal of undirected graphs."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def build_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build an undirected adjacency list; neighbours keep the order edges were given."""
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range for {vertex_count} vertices")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _check_start(adjacency: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise ValueError(f"start vertex {start} is out of range for {len(adjacency)} vertices")


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from start in depth-first visiting order."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    stack: list[Iterator[int]] = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from start in breadth-first visiting order."""
    _check_start(adjacency, start)
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


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


def _format_order(order: Iterable[int]) -> str:
    return "".join(f"{node} " for node in order)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and run traversals from a menu."""
    tokens = _tokens(sys.stdin)
    try:
        vertex_count = _read_int(tokens, "Enter the number of vertices: ")
        edge_count = _read_int(tokens, "Enter the number of edges: ")
        print(f"Enter {edge_count} edges (as pairs of vertices):")
        edges = [(_read_int(tokens), _read_int(tokens)) for _ in range(edge_count)]
        adjacency = build_adjacency(vertex_count, edges)

        while True:
            print("\n--- Menu ---")
            print("1. DFS Traversal")
            print("2. BFS Traversal")
            print("3. Exit")
            choice = _read_int(tokens, "Enter your choice: ")
            if choice in (1, 2):
                name, traverse = ("DFS", dfs) if choice == 1 else ("BFS", bfs)
                start = _read_int(tokens, f"Enter starting node for {name}: ")
                try:
                    order = traverse(adjacency, start)
                except ValueError as error:
                    print(error)
                    continue
                print(f"{name} Traversal: {_format_order(order)}")
            elif choice == 3:
                print("Exiting program.")
                return 0
            else:
                print("Invalid choice. Please try again.")
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1