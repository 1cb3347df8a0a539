"""
Coordinate and neighbor math for row-major tile grids.

Tiles are stored in a flat sequence; ``index = row * width + col``.
"""
from typing import List, Tuple

Coordinate = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def linear_coords(coord: Coordinate, width: int) -> int:
    """Map a (row, col) pair to its row-major index. Performs no bounds check."""
    row, col = coord
    return row * width + col


def grid_coords(index: int, width: int) -> Coordinate:
    """Map a row-major index back to (row, col)."""
    return divmod(index, width)


def surrounding_indices(index: int, width: int, size: int) -> List[int]:
    """
    Get the indices of the 8-connected neighbors of a tile.

    Tiles on an edge have 5 neighbors and corner tiles have 3 (fewer on
    boards only one tile wide or tall). Neighbors never wrap around to
    the opposite side of the board.

    Args:
        index: Index of the center tile.
        width: Number of columns.
        size: Total number of tiles (width * height).

    Returns:
        Neighbor indices in ascending order.
    """
    height = size // width
    row, col = grid_coords(index, width)
    neighbors = []
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if 0 <= new_row < height and 0 <= new_col < width:
            neighbors.append(new_row * width + new_col)
    return neighbors
