"""Searching and rotating two-dimensional matrices."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, MutableSequence


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending.

    The walk starts at the top-right corner and moves left or down.
    """
    if not matrix or not matrix[0]:
        return False
    rows, cols = len(matrix), len(matrix[0])
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value > target:
            col -= 1
        elif value < target:
            row += 1
        else:
            return True
    return False


def search_flattened_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Binary search a matrix that is sorted when read row by row."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return False


def rotate_image(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row