import copy

import pytest

from algosuite.grids import closed_island, num_enclaves, set_zeroes


def test_set_zeroes_example():
    matrix = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    set_zeroes(matrix)
    assert matrix == [[0, 0, 0, 0], [0, 4, 5, 0], [0, 3, 1, 0]]


def test_set_zeroes_without_zeros_is_unchanged():
    matrix = [[1, 2], [3, 4], [5, 6]]
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    assert matrix == original


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 1, 1], [1, 0, 1], [1, 1, 1]],
        [[5, 0, 7, 8], [1, 2, 3, 4], [9, 9, 0, 9]],
        [[0]],
        [[3, 0, 2]],
    ],
)
def test_set_zeroes_invariant(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for r, row in enumerate(original):
        for c, value in enumerate(row):
            crossed = 0 in row or any(other[c] == 0 for other in original)
            assert matrix[r][c] == (0 if crossed else value)


def test_set_zeroes_empty():
    matrix = []
    set_zeroes(matrix)
    assert matrix == []


def test_num_enclaves_example():
    grid = [[0, 0, 0, 0], [1, 0, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    assert num_enclaves(grid) == 3


def test_num_enclaves_interior_block_all_counted():
    grid = [
        [0, 0, 0, 0, 0],
        [0, 1, 1, 0, 0],
        [0, 1, 0, 1, 0],
        [0, 0, 0, 0, 0],
    ]
    assert num_enclaves(grid) == sum(map(sum, grid))


def test_num_enclaves_connected_to_edge():
    grid = [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
    assert num_enclaves(grid) == 0


def test_num_enclaves_does_not_modify_grid():
    grid = [[0, 0, 0], [0, 1, 0], [1, 0, 0]]
    original = copy.deepcopy(grid)
    num_enclaves(grid)
    assert grid == original


def test_closed_island_example():
    grid = [
        [1, 1, 1, 1, 1, 1, 1, 0],
        [1, 0, 0, 0, 0, 1, 1, 0],
        [1, 0, 1, 0, 1, 1, 1, 0],
        [1, 0, 0, 0, 0, 1, 0, 1],
        [1, 1, 1, 1, 1, 1, 1, 0],
    ]
    assert closed_island(grid) == 2


def test_closed_island_separate_single_cells():
    grid = [[1] * 5 for _ in range(5)]
    for row, col in [(1, 1), (1, 3), (3, 1), (3, 3)]:
        grid[row][col] = 0
    assert closed_island(grid) == sum(row.count(0) for row in grid)


def test_closed_island_touching_edge_is_not_closed():
    grid = [[1, 1, 1], [0, 0, 1], [1, 1, 1]]
    assert closed_island(grid) == 0


def test_closed_island_does_not_modify_grid():
    grid = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    original = copy.deepcopy(grid)
    assert closed_island(grid) == 1
    assert grid == original