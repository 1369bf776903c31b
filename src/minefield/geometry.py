"""
Grid geometry for square boards addressed by a linear index.

Index ``i`` on a board of ``size`` columns sits at row ``i // size``
and column ``i % size``.
"""
from typing import FrozenSet, Tuple


def index_to_position(index: int, size: int) -> Tuple[int, int]:
    """Convert flat index to (row, col) position."""
    return divmod(index, size)


def position_to_index(row: int, col: int, size: int) -> int:
    """Convert (row, col) position to flat index."""
    return row * size + col


def neighbors(index: int, size: int) -> FrozenSet[int]:
    """
    Get valid neighboring cell indices.

    Neighbors never wrap across the left or right edge, so corner cells
    have 3 neighbors, edge cells 5 and interior cells 8.

    Args:
        index: Linear index of the center cell, ``0 <= index < size**2``.
        size: Number of rows (and columns) on the board.

    Returns:
        Frozen set of neighbor indices.
    """
    row, col = divmod(index, size)
    result = set()
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < size and 0 <= new_col < size:
                result.add(new_row * size + new_col)
    return frozenset(result)


def max_neighbor_count(size: int) -> int:
    """Largest neighborhood any cell has on a ``size`` x ``size`` grid."""
    return min(8, size * size - 1)
