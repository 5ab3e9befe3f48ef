"""Classic search, graph and greedy algorithms with small command-line demos."""

__version__ = "0.1.0"

__all__ = [
    "traversal",
    "dijkstra",
    "kruskal",
    "prim",
    "coloring",
    "job_scheduling",
    "selection_sort",
    "puzzle",
    "nqueens",
    "chatbot",
    "employee",
]