"""
Grid module for the minefield engine.

Stores the N x N cells in row-major order and converts between
``(x, y)`` coordinates and linear positions (``y * size + x``).
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .cell import Cell
from .errors import InvalidConfiguration


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a square minefield.

    Attributes:
        board_size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    board_size: int = 8
    num_mines: int = 4

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_config(self.board_size, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.board_size * self.board_size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


def validate_config(board_size: int, num_mines: int) -> None:
    """
    Ensure a board size and mine count can make a playable game.

    Raises:
        InvalidConfiguration: If either value is non-positive or the
            mines would fill the whole board.
    """
    if board_size < 1:
        raise InvalidConfiguration("Board size must be positive")
    if num_mines < 1:
        raise InvalidConfiguration("Number of mines must be positive")
    max_mines = board_size * board_size - 1
    if num_mines > max_mines:
        raise InvalidConfiguration(f"Too many mines (max {max_mines})")


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """Fixed-size square store of cells."""

    size: int
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Create an empty grid of hidden, mine-free cells."""
        if self.size < 1:
            raise InvalidConfiguration("Board size must be positive")
        self._cells = [Cell() for _ in range(self.size * self.size)]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    # ========================================================================
    # Coordinate Utilities
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def contains(self, position: int) -> bool:
        """Check if a linear position is within the board."""
        return 0 <= position < len(self._cells)

    def position(self, x: int, y: int) -> int:
        """Convert ``(x, y)`` to a linear position."""
        return y * self.size + x

    def coordinates(self, position: int) -> Tuple[int, int]:
        """Convert a linear position to ``(x, y)``."""
        y, x = divmod(position, self.size)
        return x, y

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[self.position(x, y)]

    def cell_at(self, position: int) -> Optional[Cell]:
        """Get cell at a linear position, or None if out of range."""
        if not self.contains(position):
            return None
        return self._cells[position]

    def has_mine(self, x: int, y: int) -> bool:
        """Check for a mine at coordinates; out-of-bounds is never mined."""
        cell = self.cell(x, y)
        return cell is not None and cell.has_mine

    def mine_positions(self) -> Tuple[int, ...]:
        return tuple(i for i, cell in enumerate(self._cells) if cell.has_mine)

    def revealed_count(self) -> int:
        return sum(1 for cell in self._cells if cell.revealed)
