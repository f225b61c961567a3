"""
Neighbour lookup and adjacent-mine counting.

Neighbours are found in two dimensions, so a cell at the right edge of
one row is never adjacent to the left edge of the next.
"""
from typing import List, Tuple

from .grid import Grid

# Column offsets first so the right and left groups are only
# considered when that column exists.
_OFFSETS = (
    (0, -1), (0, 1),
    (1, 0), (1, -1), (1, 1),
    (-1, 0), (-1, -1), (-1, 1),
)


def neighbors(grid: Grid, x: int, y: int) -> List[Tuple[int, int]]:
    """
    Get valid neighbouring coordinates.

    Args:
        grid: Grid the cell belongs to.
        x: Column of the centre cell.
        y: Row of the centre cell.

    Returns:
        Up to 8 ``(x, y)`` tuples, all inside the grid.
    """
    result = []
    for dx, dy in _OFFSETS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny):
            result.append((nx, ny))
    return result


def count_adjacent_mines(grid: Grid, x: int, y: int) -> int:
    """Count mines among the neighbours of ``(x, y)``."""
    return sum(1 for nx, ny in neighbors(grid, x, y) if grid.has_mine(nx, ny))


def adjacent_mine_count(grid: Grid, x: int, y: int) -> int:
    """
    Get the cached adjacent-mine count for a cell, computing it once.

    Returns:
        The count stored on the cell.
    """
    cell = grid.cell(x, y)
    if cell.adjacent_mine_count is None:
        cell.adjacent_mine_count = count_adjacent_mines(grid, x, y)
    return cell.adjacent_mine_count
