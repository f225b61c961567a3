"""
Game engine for the minefield puzzle.

Owns the GameState and implements the four player operations: new game,
reveal (with flood-fill cascade), flag toggling and win detection.
Every operation takes the state explicitly; nothing here is global.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

from .adjacency import adjacent_mine_count, neighbors
from .cell import CellView
from .errors import InvalidConfiguration
from .grid import BoardConfig, Grid, validate_config
from .placement import place_mines, place_mines_at

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """What a reveal call did."""

    SAFE = auto()
    MINE = auto()
    BLOCKED = auto()
    IGNORED = auto()


class FlagOutcome(Enum):
    """What a flag toggle did."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    REJECTED = auto()


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal call.

    Attributes:
        result: Kind of outcome.
        adjacent_mines: Count at the revealed cell, only for SAFE.
        revealed: Positions newly revealed by this call, in reveal order.
        status: Game status after the call.
    """

    result: RevealResult
    adjacent_mines: Optional[int] = None
    revealed: Tuple[int, ...] = ()
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_safe(self) -> bool:
        return self.result == RevealResult.SAFE

    @property
    def is_mine(self) -> bool:
        return self.result == RevealResult.MINE


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    One game in progress.

    The grid is owned exclusively by this state; a new game builds a new
    state rather than resetting this one.
    """

    board_size: int
    mine_count: int
    grid: Grid = field(repr=False)
    status: GameStatus = GameStatus.PLAYING
    disclosed: bool = False

    @property
    def total_cells(self) -> int:
        return self.board_size * self.board_size

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def is_lost(self) -> bool:
        return self.status == GameStatus.LOST

    def reveal(
        self, position: int, is_player_move: bool = True
    ) -> RevealOutcome:
        """Reveal a cell; see the module-level ``reveal``."""
        return reveal(self, position, is_player_move)

    def flag(self, position: int) -> FlagOutcome:
        """Toggle a flag; see ``toggle_flag``."""
        return toggle_flag(self, position)

    @property
    def is_won(self) -> bool:
        """Check if every safe cell is revealed."""
        return is_won(self)

    def cell_view(self, position: int) -> Optional[CellView]:
        """Get the visible state of a cell."""
        return cell_view(self, position)


def new_game(
    board_size: int,
    mine_count: int,
    *,
    rng: Optional[random.Random] = None,
    mine_positions: Optional[Sequence[int]] = None,
) -> GameState:
    """
    Start a new game with freshly placed mines.

    Args:
        board_size: Number of rows and columns.
        mine_count: Number of mines.
        rng: Random source for placement.
        mine_positions: Explicit linear mine positions; must contain
            exactly ``mine_count`` distinct in-range positions.

    Returns:
        A new GameState.

    Raises:
        InvalidConfiguration: If the parameters cannot make a game.
    """
    validate_config(board_size, mine_count)
    grid = Grid(board_size)

    if mine_positions is None:
        place_mines(grid, mine_count, rng)
    else:
        if len(mine_positions) != mine_count:
            raise InvalidConfiguration(
                f"Expected {mine_count} mine positions, "
                f"got {len(mine_positions)}"
            )
        place_mines_at(grid, mine_positions)

    logger.info("New game: %dx%d with %d mines", board_size, board_size, mine_count)
    return GameState(board_size=board_size, mine_count=mine_count, grid=grid)


def new_game_from_config(
    config: BoardConfig,
    *,
    rng: Optional[random.Random] = None,
    mine_positions: Optional[Sequence[int]] = None,
) -> GameState:
    """Start a new game from a BoardConfig."""
    return new_game(
        config.board_size,
        config.num_mines,
        rng=rng,
        mine_positions=mine_positions,
    )


# ============================================================================
# Reveal Engine
# ============================================================================

def reveal(
    state: GameState, position: int, is_player_move: bool = True
) -> RevealOutcome:
    """
    Reveal the cell at ``position`` and cascade through safe neighbours.

    A direct player move onto a mine detonates it and loses the game.
    Cascade steps never reveal or detonate mines; a non-player reveal of
    a safe cell still flood-fills exactly like a player move.

    Args:
        state: Game to act on.
        position: Linear cell index.
        is_player_move: False for engine-internal cascade steps.

    Returns:
        RevealOutcome describing the effect.
    """
    grid = state.grid
    if not grid.contains(position):
        return RevealOutcome(RevealResult.IGNORED, status=state.status)
    if not state.is_playing:
        return RevealOutcome(RevealResult.BLOCKED, status=state.status)

    x, y = grid.coordinates(position)
    cell = grid.cell(x, y)

    if cell.revealed or cell.flagged:
        return RevealOutcome(RevealResult.BLOCKED, status=state.status)

    if cell.has_mine:
        if not is_player_move:
            return RevealOutcome(RevealResult.BLOCKED, status=state.status)
        cell.detonated = True
        state.status = GameStatus.LOST
        logger.info("Mine detonated at (%d, %d); game lost", x, y)
        return RevealOutcome(
            RevealResult.MINE, revealed=(position,), status=state.status
        )

    revealed = _cascade(grid, x, y)
    logger.debug("Reveal at (%d, %d) cleared %d cells", x, y, len(revealed))

    if check_for_win(state):
        state.status = GameStatus.WON
        logger.info("All safe cells cleared; game won")

    return RevealOutcome(
        RevealResult.SAFE,
        adjacent_mines=cell.adjacent_mine_count,
        revealed=tuple(revealed),
        status=state.status,
    )


def _cascade(grid: Grid, x: int, y: int) -> List[int]:
    """
    Flood-fill reveal from ``(x, y)`` using an explicit stack.

    Each cell is revealed at most once. Only zero-count cells push their
    neighbours, so the fill stops at the numbered boundary.

    Returns:
        Linear positions revealed, in order.
    """
    revealed = []
    pending = [(x, y)]

    while pending:
        cx, cy = pending.pop()
        cell = grid.cell(cx, cy)
        if cell.has_mine or not cell.reveal():
            continue
        revealed.append(grid.position(cx, cy))

        if adjacent_mine_count(grid, cx, cy) > 0:
            continue
        for nx, ny in neighbors(grid, cx, cy):
            neighbor = grid.cell(nx, ny)
            if neighbor.is_hidden and not neighbor.has_mine:
                pending.append((nx, ny))

    return revealed


# ============================================================================
# Win Detector
# ============================================================================

def check_for_win(state: GameState) -> bool:
    """Check if every non-mine cell, and nothing else, is revealed."""
    return state.total_cells - state.grid.revealed_count() == state.mine_count


def is_won(state: GameState) -> bool:
    """Query whether the game is won."""
    return check_for_win(state)


# ============================================================================
# Flag Toggler
# ============================================================================

def toggle_flag(state: GameState, position: int) -> FlagOutcome:
    """
    Plant or remove a flag on a hidden cell.

    Returns:
        FLAGGED or UNFLAGGED on success; REJECTED for out-of-range
        positions, revealed cells or finished games.
    """
    cell = state.grid.cell_at(position)
    if cell is None or not state.is_playing:
        return FlagOutcome.REJECTED
    if not cell.toggle_flag():
        return FlagOutcome.REJECTED
    return FlagOutcome.FLAGGED if cell.flagged else FlagOutcome.UNFLAGGED


# ============================================================================
# Queries
# ============================================================================

def cell_view(state: GameState, position: int) -> Optional[CellView]:
    """Get the visible state of a cell, or None if out of range."""
    cell = state.grid.cell_at(position)
    if cell is None:
        return None
    return CellView.of(cell, disclosed=state.disclosed)


def disclose_mines(state: GameState) -> Tuple[int, ...]:
    """
    End-of-game disclosure of every mine.

    Makes ``has_mine`` visible through cell views; does not reveal cells.

    Returns:
        Linear positions of all mines.
    """
    state.disclosed = True
    return state.grid.mine_positions()


def mine_positions(state: GameState) -> Tuple[int, ...]:
    return state.grid.mine_positions()


def revealed_count(state: GameState) -> int:
    return state.grid.revealed_count()
