"""Backtracking searches: paths of a rat through a maze and the N-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

BLOCKED = "X"


def rat_in_maze_paths(maze: Sequence[Sequence[str]]) -> Iterator[list[list[int]]]:
    """Yield every right/down path from the top-left to the bottom-right cell.

    Each path is a grid of 0s and 1s where 1 marks a cell on the path; cells
    holding ``"X"`` are walls.
    """
    if not maze or not maze[0]:
        raise ValueError("the maze must have at least one cell")
    columns = len(maze[0])
    if any(len(row) != columns for row in maze):
        raise ValueError("every row of the maze must have the same length")
    last_row, last_col = len(maze) - 1, columns - 1
    solution = [[0] * columns for _ in maze]

    def walk(i: int, j: int) -> Iterator[list[list[int]]]:
        if i == last_row and j == last_col:
            path = [row[:] for row in solution]
            path[i][j] = 1
            yield path
            return
        if i > last_row or j > last_col or maze[i][j] == BLOCKED:
            return
        solution[i][j] = 1
        yield from walk(i, j + 1)
        yield from walk(i + 1, j)
        solution[i][j] = 0

    return walk(0, 0)


def solve_n_queens(n: int) -> list[list[int]] | None:
    """First placement of ``n`` non-attacking queens, column by column, or None."""
    if n < 0:
        raise ValueError("board size cannot be negative")
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return board if place(0) else None