"""Placing n non-attacking queens by backtracking, column by column."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def solve_n_queens(n: int) -> list[list[bool]] | None:
    """Return the first board found as board[row][col] flags, or None if there is none.

    Queens go into columns left to right, each in the lowest safe row.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    queen_rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            queen_rows.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(col + 1):
                return True
            queen_rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[False] * n for _ in range(n)]
    for col, row in enumerate(queen_rows):
        board[row][col] = True
    return board


def format_board(board: Sequence[Sequence[bool]]) -> str:
    """Render a board with Q for a queen and . for an empty square."""
    return "\n".join(" ".join("Q" if cell else "." for cell in row) for row in board)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a board size from standard input and print one solution."""
    print("Enter board size : ", end="", flush=True)
    try:
        n = int(sys.stdin.readline())
        board = solve_n_queens(n)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if board is None:
        print("No solution exists.")
    else:
        print("One solution:")
        if board:
            print(format_board(board))
    return 0