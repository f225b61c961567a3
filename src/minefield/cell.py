"""
Cell module for the minefield engine.

Represents one grid position with its mine, reveal and flag state,
plus the read-only snapshot handed to presentation code.
"""
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        has_mine: Whether this cell contains a mine. Set at placement.
        revealed: Whether the cell has been cleared. Never reverts.
        flagged: Whether the player has marked this cell.
        detonated: Whether a direct player move hit this mine.
        adjacent_mine_count: Neighbouring mine count, computed on first
            reveal and cached until the game is replaced.
    """

    has_mine: bool = False
    revealed: bool = False
    flagged: bool = False
    detonated: bool = False
    adjacent_mine_count: Optional[int] = None

    def reveal(self) -> bool:
        """
        Mark this cell as revealed.

        Returns:
            True if the cell changed, False if it was already revealed
            or is flagged.
        """
        if self.revealed or self.flagged:
            return False
        self.revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.revealed:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.revealed and not self.flagged


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Externally visible state of a cell.

    ``adjacent_mines`` is only set once the cell is revealed and
    ``has_mine`` only after a detonation or an end-of-game disclosure.
    """

    revealed: bool
    flagged: bool
    adjacent_mines: Optional[int] = None
    has_mine: Optional[bool] = None
    detonated: bool = False

    @classmethod
    def of(cls, cell: Cell, disclosed: bool = False) -> "CellView":
        """Build a view of ``cell``, hiding mine state unless disclosed."""
        show_mine = disclosed or cell.detonated
        return cls(
            revealed=cell.revealed,
            flagged=cell.flagged,
            adjacent_mines=cell.adjacent_mine_count if cell.revealed else None,
            has_mine=cell.has_mine if show_mine else None,
            detonated=cell.detonated,
        )
