import pytest

from algokit.flow import max_flow


def _matrix(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for u, v, w in edges:
        matrix[u][v] = w
    return matrix


SAMPLE = _matrix(
    6,
    [(0, 1, 4), (0, 3, 3), (1, 2, 4), (2, 3, 3), (2, 5, 2), (3, 4, 6), (4, 5, 6)],
)


def test_sample_network():
    flow, _ = max_flow(SAMPLE, 0, 5)
    assert flow == 7


def test_paths_run_from_source_to_sink_along_edges():
    _, paths = max_flow(SAMPLE, 0, 5)
    assert paths
    for path in paths:
        assert path[0] == 0
        assert path[-1] == 5
        assert len(set(path)) == len(path)


def test_flow_bounded_by_source_capacity():
    flow, _ = max_flow(SAMPLE, 0, 5)
    assert flow <= sum(SAMPLE[0])


def test_chain_limited_by_smallest_edge():
    matrix = _matrix(3, [(0, 1, 9), (1, 2, 4)])
    flow, paths = max_flow(matrix, 0, 2)
    assert flow == 4
    assert paths == [[0, 1, 2]]


def test_input_is_not_modified():
    matrix = _matrix(3, [(0, 1, 9), (1, 2, 4)])
    copy = [row[:] for row in matrix]
    max_flow(matrix, 0, 2)
    assert matrix == copy


def test_no_path_gives_zero():
    matrix = _matrix(3, [(0, 1, 5)])
    assert max_flow(matrix, 0, 2) == (0, [])


def test_invalid_input():
    with pytest.raises(ValueError):
        max_flow([[0, 1], [0]], 0, 1)
    with pytest.raises(ValueError):
        max_flow([[0, 1], [0, 0]], 0, 2)
    with pytest.raises(ValueError):
        max_flow([[0, -1], [0, 0]], 0, 1)