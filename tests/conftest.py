"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, Cell, GameState, Grid, new_game


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def default_game(rng: random.Random) -> GameState:
    """Create a default 8x8 game with 4 random mines."""
    return new_game(8, 4, rng=rng)


@pytest.fixture
def corner_mine_game() -> GameState:
    """4x4 game with a single mine at (3, 3)."""
    return new_game(4, 1, mine_positions=[15])


@pytest.fixture
def fixed_game() -> GameState:
    """
    8x8 game with mines at (2, 1), (6, 1), (1, 6) and (5, 5).

    Layout (x across, y down)::

        . . . . . . . .
        . . M . . . M .
        . . . . . . . .
        . . . . . . . .
        . . . . . . . .
        . . . . . M . .
        . M . . . . . .
        . . . . . . . .
    """
    mines = [1 * 8 + 2, 1 * 8 + 6, 6 * 8 + 1, 5 * 8 + 5]
    return new_game(8, 4, mine_positions=mines)


@pytest.fixture
def empty_grid() -> Grid:
    """Create a 5x5 grid with no mines."""
    return Grid(5)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 4)

