"""Algorithms over rectangular grids of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, MutableSequence, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))

Cell = tuple[int, int]


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for row in range(rows):
        yield row, 0
        yield row, cols - 1
    for col in range(cols):
        yield 0, col
        yield rows - 1, col


def _flood(grid: Sequence[Sequence[int]], seen: set[Cell], start: Cell, value: int) -> None:
    """Mark every cell holding ``value`` that is 4-connected to ``start``."""
    rows, cols = len(grid), len(grid[0])
    seen.add(start)
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in _STEPS:
            near = (row + d_row, col + d_col)
            if (
                0 <= near[0] < rows
                and 0 <= near[1] < cols
                and near not in seen
                and grid[near[0]][near[1]] == value
            ):
                seen.add(near)
                queue.append(near)


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {index for index, row in enumerate(matrix) if any(v == 0 for v in row)}
    zero_cols = {col for row in matrix for col, value in enumerate(row) if value == 0}
    for index, row in enumerate(matrix):
        if index in zero_rows:
            row[:] = [0] * len(row)
        else:
            for col in zero_cols:
                row[col] = 0


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Land cells (1) from which the grid's edge cannot be reached over land."""
    if not grid or not grid[0]:
        return 0
    seen: set[Cell] = set()
    for row, col in _border(len(grid), len(grid[0])):
        if grid[row][col] == 1 and (row, col) not in seen:
            _flood(grid, seen, (row, col), 1)
    return sum(
        1
        for row, cells in enumerate(grid)
        for col, value in enumerate(cells)
        if value == 1 and (row, col) not in seen
    )


def closed_island(grid: Sequence[Sequence[int]]) -> int:
    """Islands of land (0) entirely surrounded by water (1)."""
    if not grid or not grid[0]:
        return 0
    seen: set[Cell] = set()
    for row, col in _border(len(grid), len(grid[0])):
        if grid[row][col] == 0 and (row, col) not in seen:
            _flood(grid, seen, (row, col), 0)
    islands = 0
    for row, cells in enumerate(grid):
        for col, value in enumerate(cells):
            if value == 0 and (row, col) not in seen:
                _flood(grid, seen, (row, col), 0)
                islands += 1
    return islands