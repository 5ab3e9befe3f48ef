"""Solving the 8-puzzle with A* search and the Manhattan-distance heuristic."""

from __future__ import annotations

import heapq
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

SIZE = 3

# Blank moves in the order they are tried: left, right, up, down.
_MOVES = ((0, -1), (0, 1), (-1, 0), (1, 0))

Tiles = tuple[tuple[int, ...], ...]


def _normalize(tiles: Iterable[Iterable[int]]) -> Tiles:
    rows = tuple(tuple(int(value) for value in row) for row in tiles)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"puzzle must be {SIZE}x{SIZE}")
    if sorted(value for row in rows for value in row) != list(range(SIZE * SIZE)):
        raise ValueError(f"puzzle must hold each of 0..{SIZE * SIZE - 1} exactly once")
    return rows


def manhattan_distance(tiles: Sequence[Sequence[int]]) -> int:
    """Sum of each tile's distance from its place in the ordered goal, blank excluded."""
    return sum(
        abs(row - (value - 1) // SIZE) + abs(col - (value - 1) % SIZE)
        for row, values in enumerate(tiles)
        for col, value in enumerate(values)
        if value != 0
    )


def format_puzzle(tiles: Sequence[Sequence[int]]) -> str:
    """Render the tiles as rows of space-separated numbers."""
    return "\n".join(" ".join(str(value) for value in row) for row in tiles)


@dataclass(frozen=True)
class PuzzleState:
    """A board position together with the number of moves taken to reach it."""

    tiles: Tiles
    moves: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", _normalize(self.tiles))
        if self.moves < 0:
            raise ValueError(f"moves must not be negative, got {self.moves}")

    @property
    def heuristic(self) -> int:
        return manhattan_distance(self.tiles)

    @property
    def cost(self) -> int:
        """Estimated total cost f = g + h."""
        return self.moves + self.heuristic

    @property
    def blank(self) -> tuple[int, int]:
        return next(
            (row, col)
            for row, values in enumerate(self.tiles)
            for col, value in enumerate(values)
            if value == 0
        )

    def next_states(self) -> list[PuzzleState]:
        """Return the positions one blank move away, in left, right, up, down order."""
        row, col = self.blank
        states = []
        for d_row, d_col in _MOVES:
            new_row, new_col = row + d_row, col + d_col
            if 0 <= new_row < SIZE and 0 <= new_col < SIZE:
                grid = [list(values) for values in self.tiles]
                grid[row][col], grid[new_row][new_col] = grid[new_row][new_col], grid[row][col]
                states.append(PuzzleState(grid, self.moves + 1))
        return states


def a_star_search(initial: PuzzleState, goal: PuzzleState) -> Iterator[PuzzleState]:
    """Yield states in the order A* expands them, ending with goal if it is reached."""
    order = itertools.count()
    heap: list[tuple[int, int, PuzzleState]] = [(initial.cost, next(order), initial)]
    visited: set[Tiles] = set()
    while heap:
        _, _, current = heapq.heappop(heap)
        yield current
        if current.tiles == goal.tiles:
            return
        for state in current.next_states():
            if state.tiles not in visited:
                visited.add(state.tiles)
                heapq.heappush(heap, (state.cost, next(order), state))


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


def _read_state(tokens: Iterator[str], prompt: str) -> PuzzleState:
    print(f"{prompt} (0 represents the empty tile):")
    rows = [
        [_read_int(tokens, f"Enter value at position ({row}, {col}): ") for col in range(SIZE)]
        for row in range(SIZE)
    ]
    return PuzzleState(rows)


def _print_puzzle(tiles: Tiles) -> None:
    print(format_puzzle(tiles))
    print("-----")


def main(argv: Sequence[str] | None = None) -> int:
    """Read a start and a goal position from standard input and trace the search."""
    tokens = _tokens(sys.stdin)
    try:
        initial = _read_state(tokens, "Enter the initial state of the puzzle")
        goal = _read_state(tokens, "Enter the final state of the puzzle")
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print("Initial State:")
    _print_puzzle(initial.tiles)

    for state in a_star_search(initial, goal):
        print("Current State:")
        _print_puzzle(state.tiles)
        print(f"Number of moves: {state.moves}")
        print(f"Heuristic cost: {state.heuristic}")
        print("-------------------")
        if state.tiles == goal.tiles:
            print("Goal State Reached!")
            print(f"Number of moves: {state.moves}")
            print(f"Heuristic cost: {state.heuristic}")
    return 0