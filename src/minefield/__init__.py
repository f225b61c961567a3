"""
Minefield engine.

Provides the board engine: grid storage, mine placement, flood-fill
reveal, flagging and win detection, plus numpy and gymnasium adapters.
"""
from .cell import Cell, CellView
from .errors import InvalidConfiguration
from .grid import BoardConfig, Grid
from .engine import (
    FlagOutcome,
    GameState,
    GameStatus,
    RevealOutcome,
    RevealResult,
    cell_view,
    disclose_mines,
    is_won,
    mine_positions,
    new_game,
    new_game_from_config,
    reveal,
    revealed_count,
    toggle_flag,
)
from .observation import action_mask, observation
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellView",
    "InvalidConfiguration",
    "BoardConfig",
    "Grid",
    "FlagOutcome",
    "GameState",
    "GameStatus",
    "RevealOutcome",
    "RevealResult",
    "cell_view",
    "disclose_mines",
    "is_won",
    "mine_positions",
    "new_game",
    "new_game_from_config",
    "reveal",
    "revealed_count",
    "toggle_flag",
    "action_mask",
    "observation",
    "MinesweeperEnv",
]
