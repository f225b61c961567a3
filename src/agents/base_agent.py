"""
Base agent interface for minefield players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for minefield agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Number of rows and columns on the board.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states indexed [y, x].
            valid_actions: Optional mask of valid actions.

        Returns:
            Linear position to reveal (y * board_size + x).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert a linear action to (x, y) coordinates."""
        y, x = divmod(action, self.board_size)
        return x, y

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) coordinates to a linear action."""
        return y * self.board_size + x

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Returns:
            Boolean mask where True = hidden cell.
        """
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new episode."""

    def update(
        self,
        observation: np.ndarray,
        action: int,
        reward: float,
        next_observation: np.ndarray,
        done: bool,
    ) -> None:
        """Update agent with experience (for learning agents)."""
