"""
Gymnasium environment wrapper for the minefield engine.

Provides a standard RL interface for driving the engine with agents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .engine import (
    GameState,
    GameStatus,
    RevealResult,
    new_game_from_config,
    reveal,
    revealed_count,
)
from .grid import BoardConfig
from .observation import DETONATED, FLAGGED, HIDDEN, action_mask, observation


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the minefield puzzle.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = detonated mine

    Actions:
        Discrete action space of size board_size ** 2.
        Action i is a player reveal at linear position i.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a blocked or ignored action
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 8x8 with 4 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.state: GameState = new_game_from_config(self.config)

        size = self.config.board_size
        self.observation_space = spaces.Box(
            low=-2, high=9, shape=(size, size), dtype=np.int8
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine placement.
            options: May carry ``mine_positions`` for a fixed layout.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**32)))
        positions = (options or {}).get("mine_positions")
        self.state = new_game_from_config(
            self.config, rng=rng, mine_positions=positions
        )
        self._steps = 0
        return observation(self.state), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal the cell at ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        outcome = reveal(self.state, int(action))

        if outcome.result in (RevealResult.BLOCKED, RevealResult.IGNORED):
            reward = -0.1
        elif outcome.is_mine:
            reward = -10.0
        elif self.state.status == GameStatus.WON:
            reward = 10.0
        else:
            reward = 1.0

        terminated = not self.state.is_playing
        return observation(self.state), reward, terminated, False, self._get_info()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": revealed_count(self.state),
            "total_safe": self.config.safe_cells,
            "game_state": self.state.status.name,
            "valid_actions": int(action_mask(self.state).sum()),
        }

    def get_action_mask(self) -> np.ndarray:
        """Boolean array where True = valid action."""
        return action_mask(self.state)

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {HIDDEN: ".", FLAGGED: "F", DETONATED: "*", 0: " "}
        lines = []
        for row in observation(self.state):
            lines.append(" ".join(symbols.get(int(v), str(v)) for v in row))
        return "\n".join(lines)
