"""Backtracking searches: binary strings and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Sequence

QUEEN = "Q"
EMPTY = "."


def binary_strings(size: int) -> list[str]:
    """Return every string of ``size`` binary digits, ``0`` branch first."""
    if size < 0:
        raise ValueError("size must be non-negative")

    results: list[str] = []
    prefix: list[str] = []

    def extend() -> None:
        if len(prefix) == size:
            results.append("".join(prefix))
            return
        for bit in "01":
            prefix.append(bit)
            extend()
            prefix.pop()

    extend()
    return results


def can_place_queen(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Tell whether a queen at (row, col) is safe from queens in the rows above."""
    n = len(board)
    for above in range(row - 1, -1, -1):
        offset = row - above
        for c in (col, col - offset, col + offset):
            if 0 <= c < n and board[above][c] == QUEEN:
                return False
    return True


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each solution is a list of row strings using ``Q`` and ``.``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")

    board = [[EMPTY] * n for _ in range(n)]
    solutions: list[list[str]] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["".join(cells) for cells in board])
            return
        for col in range(n):
            if can_place_queen(board, row, col):
                board[row][col] = QUEEN
                place(row + 1)
                board[row][col] = EMPTY

    place(0)
    return solutions