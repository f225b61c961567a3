"""
numpy views of a game for agents and environments.
"""
import numpy as np

from .cell import Cell
from .engine import GameState

HIDDEN = -1
FLAGGED = -2
DETONATED = 9


def cell_value(cell: Cell) -> int:
    """
    Convert a cell to its observation value.

    Returns:
        -1: Hidden cell
        -2: Flagged cell
        0-8: Revealed cell with adjacent mine count
        9: Detonated mine
    """
    if cell.detonated:
        return DETONATED
    if cell.flagged:
        return FLAGGED
    if not cell.revealed:
        return HIDDEN
    return cell.adjacent_mine_count or 0


def observation(state: GameState) -> np.ndarray:
    """
    Get board state as a numpy array indexed ``[y, x]``.

    Returns:
        int8 array of shape (board_size, board_size).
    """
    values = [cell_value(cell) for cell in state.grid]
    return np.array(values, dtype=np.int8).reshape(
        state.board_size, state.board_size
    )


def action_mask(state: GameState) -> np.ndarray:
    """
    Get mask of cells a player can still reveal.

    Returns:
        Boolean array over linear positions where True = hidden.
    """
    return np.array([cell.is_hidden for cell in state.grid], dtype=bool)
