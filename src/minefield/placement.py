"""
Mine placement for the minefield engine.
"""
import logging
import random
from typing import Iterable, Optional

from .errors import InvalidConfiguration
from .grid import Grid

logger = logging.getLogger(__name__)


def place_mines(
    grid: Grid, mine_count: int, rng: Optional[random.Random] = None
) -> None:
    """
    Place ``mine_count`` mines at distinct random coordinates.

    Uses rejection sampling: draw ``(x, y)`` uniformly and redraw when
    the cell is already mined.

    Args:
        grid: Freshly initialized grid to populate.
        mine_count: Number of mines to place.
        rng: Random source; the module-level generator if omitted.

    Raises:
        InvalidConfiguration: If the mines would fill the whole grid,
            which would keep the sampler from terminating.
    """
    if mine_count < 1 or mine_count >= len(grid):
        raise InvalidConfiguration(
            f"Cannot place {mine_count} mines on {len(grid)} cells"
        )
    rng = rng or random.Random()

    placed = 0
    draws = 0
    while placed < mine_count:
        x = rng.randrange(grid.size)
        y = rng.randrange(grid.size)
        draws += 1
        cell = grid.cell(x, y)
        if not cell.has_mine:
            cell.has_mine = True
            placed += 1

    logger.debug("Placed %d mines in %d draws", placed, draws)


def place_mines_at(grid: Grid, positions: Iterable[int]) -> None:
    """
    Place mines at explicit linear positions.

    Raises:
        InvalidConfiguration: If a position is out of range or repeated.
            The grid is left unchanged.
    """
    positions = list(positions)
    seen = set()
    for position in positions:
        cell = grid.cell_at(position)
        if cell is None:
            raise InvalidConfiguration(f"Mine position {position} out of range")
        if position in seen or cell.has_mine:
            raise InvalidConfiguration(f"Duplicate mine position {position}")
        seen.add(position)

    for position in positions:
        grid.cell_at(position).has_mine = True
