# greedylab

A small collection of classic search, graph and greedy algorithms. Each one
is a plain library function and also has a small command-line demo.

| Module | What it does |
| --- | --- |
| `greedylab.traversal` | `dfs` and `bfs` over an undirected adjacency list built by `build_adjacency` |
| `greedylab.dijkstra` | `dijkstra`: shortest distances from one source over `Edge` lists |
| `greedylab.kruskal` | `Graph.kruskal`: minimum spanning forest, using `DisjointSet` |
| `greedylab.prim` | `Graph.prim`: minimum spanning tree grown from a source vertex |
| `greedylab.coloring` | `color_graph`: colour vertices with at most m colours by backtracking |
| `greedylab.job_scheduling` | `max_profit`: greedy job sequencing with deadlines |
| `greedylab.selection_sort` | `selection_sort`: in-place selection sort |
| `greedylab.puzzle` | `a_star_search`: A* on the 8-puzzle with the Manhattan-distance heuristic |
| `greedylab.nqueens` | `solve_n_queens`: one placement of n queens by backtracking |
| `greedylab.chatbot` | `reply`: a keyword-driven shop assistant |
| `greedylab.employee` | `Employee` and `evaluate_performance`: a rule-based score rating |

## Installing

```
pip install .
```

Python 3.10 or later is required; there are no runtime dependencies.

## Using the library

Shortest paths. Unreachable vertices get `math.inf`; a source out of range
raises `ValueError`.

```python
from greedylab.dijkstra import Edge, dijkstra

graph = [
    [Edge(1, 2), Edge(2, 4)],
    [Edge(2, 1), Edge(3, 7)],
    [Edge(4, 3)],
    [Edge(5, 1)],
    [Edge(3, 2), Edge(5, 5)],
    [],
]
print(dijkstra(graph, 0))   # [0, 2, 3, 8, 6, 9]
```

Spanning trees. `kruskal()` returns `(u, v, weight)` tuples, lightest first;
`prim(source)` returns `(parent, vertex, weight)` tuples ordered by vertex and
raises `ValueError` if a vertex cannot be reached.

```python
from greedylab.kruskal import Graph

g = Graph(4)
g.add_edge(0, 1, 10)
g.add_edge(0, 2, 15)
g.add_edge(0, 3, 30)
g.add_edge(1, 3, 40)
g.add_edge(2, 3, 50)
tree = g.kruskal()
print(tree, sum(weight for _, _, weight in tree))
```

Traversals return the visiting order as a list:

```python
from greedylab.traversal import build_adjacency, bfs, dfs

adjacency = build_adjacency(4, [(0, 1), (0, 2), (1, 3)])
print(dfs(adjacency, 0), bfs(adjacency, 0))
```

The rest in brief:

- `color_graph(adjacency, m)` returns a list of colours `1..m`, or `None`.
- `max_profit(jobs)` takes `(deadline, profit)` pairs and returns
  `(total_profit, selected_jobs)`.
- `selection_sort(items)` sorts a mutable sequence in place.
- `a_star_search(PuzzleState(start), PuzzleState(goal))` is a generator that
  yields states in the order they are expanded, ending with the goal if it is
  reached; `manhattan_distance` and `format_puzzle` work on the tiles.
- `solve_n_queens(n)` returns a board of `bool` flags (`board[row][col]`) or
  `None`; `format_board` renders it with `Q` and `.`.
- `reply(message)` returns the chatbot's answer; `contains_keyword` does a
  case-insensitive substring test.
- `Employee(...).average()` averages five scores and
  `evaluate_performance(score)` maps it to `Excellent`, `Good`, `Average` or
  `Needs Improvement`.

## Command-line demos

```
greedylab-traversal    # read a graph, then choose DFS or BFS from a menu
greedylab-dijkstra     # shortest distances on a built-in six-vertex graph
greedylab-kruskal      # Kruskal MST of a built-in four-vertex graph
greedylab-prim         # the same graph, solved with Prim's algorithm
greedylab-coloring     # read a graph and a colour count, print an assignment
greedylab-jobs         # greedy job sequencing on a built-in job list
greedylab-sort         # read numbers and print them sorted
greedylab-puzzle       # read a start and goal 8-puzzle and trace A*
greedylab-nqueens      # read a board size and print one placement
greedylab-chatbot      # talk to the shop assistant; type "exit" to leave
greedylab-employee     # score employees and get an overall evaluation
```

The interactive commands read whitespace-separated input from standard
input, so they can also be fed from a file or a pipe. On malformed or missing
input they print an error to standard error and exit with status 1.

## Limits

- `greedylab-dijkstra`, `greedylab-kruskal`, `greedylab-prim` and
  `greedylab-jobs` only run on their built-in sample data; they take no
  input and no command-line options. Use the library functions for your own
  graphs and job lists.
- The puzzle solver handles only the 3×3 board.
- The chatbot's answers are fixed texts; it keeps no conversation state.

## Running the tests

```
pip install ".[test]"
pytest
```