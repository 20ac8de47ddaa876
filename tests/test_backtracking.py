import math

import pytest

from algokit.backtracking import rat_in_maze_paths, solve_n_queens

SOURCE_MAZE = ["0000", "000X", "000X", "0X00"]


def _assert_valid_path(maze, path):
    rows, cols = len(maze), len(maze[0])
    assert path[0][0] == 1
    assert path[rows - 1][cols - 1] == 1
    cells = [(i, j) for i in range(rows) for j in range(cols) if path[i][j]]
    assert len(cells) == rows + cols - 1
    for i, j in cells[:-1]:
        assert maze[i][j] != "X"
    for (a, b), (c, d) in zip(cells, cells[1:]):
        assert (c - a, d - b) in {(0, 1), (1, 0)}


def test_rat_source_maze_paths_are_valid():
    paths = list(rat_in_maze_paths(SOURCE_MAZE))
    assert paths
    for path in paths:
        _assert_valid_path(SOURCE_MAZE, path)
        assert path[2][2] == 1


def test_rat_paths_are_distinct():
    paths = list(rat_in_maze_paths(SOURCE_MAZE))
    assert len({tuple(map(tuple, p)) for p in paths}) == len(paths)


def test_rat_open_grid_path_count():
    maze = ["000", "000", "000"]
    paths = list(rat_in_maze_paths(maze))
    assert len(paths) == math.comb(4, 2)


def test_rat_blocked_start_or_wall():
    assert list(rat_in_maze_paths(["X0", "00"])) == []
    assert list(rat_in_maze_paths(["0X", "X0"])) == []


def test_rat_single_cell():
    assert list(rat_in_maze_paths(["0"])) == [[[1]]]


def test_rat_rejects_bad_mazes():
    with pytest.raises(ValueError):
        list(rat_in_maze_paths([]))
    with pytest.raises(ValueError):
        list(rat_in_maze_paths(["00", "0"]))


def _assert_valid_queens(board, n):
    assert len(board) == n and all(len(row) == n for row in board)
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c]]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solutions_are_valid(n):
    board = solve_n_queens(n)
    _assert_valid_queens(board, n)


def test_n_queens_four_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_unsolvable(n):
    assert solve_n_queens(n) is None


def test_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)