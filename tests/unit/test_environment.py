"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest

from minefield import BoardConfig, GameStatus, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """4x4 environment with one mine."""
    return MinesweeperEnv(config=BoardConfig(4, 1), render_mode="ansi")


class TestReset:
    """Test environment reset."""

    def test_reset_returns_hidden_observation(self, env: MinesweeperEnv) -> None:
        """Reset observation is all hidden and fits the space."""
        obs, info = env.reset(seed=0)
        assert obs.shape == (4, 4)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["revealed"] == 0
        assert info["total_safe"] == 15
        assert info["game_state"] == "PLAYING"

    def test_seeded_reset_is_reproducible(self, env: MinesweeperEnv) -> None:
        """Same seed gives the same mine layout."""
        env.reset(seed=42)
        first = env.state.grid.mine_positions()
        env.reset(seed=42)
        assert env.state.grid.mine_positions() == first

    def test_reset_replaces_game(self, env: MinesweeperEnv) -> None:
        """Reset builds a fresh GameState."""
        env.reset(seed=1)
        old = env.state
        env.reset(seed=1)
        assert env.state is not old

    def test_reset_with_fixed_layout(self, env: MinesweeperEnv) -> None:
        """Options can fix mine positions."""
        env.reset(options={"mine_positions": [15]})
        assert env.state.grid.mine_positions() == (15,)


class TestStep:
    """Test step rewards and termination."""

    def test_cascade_win_reward(self, env: MinesweeperEnv) -> None:
        """Clearing the board in one move wins."""
        env.reset(options={"mine_positions": [15]})
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "WON"
        assert info["revealed"] == 15

    def test_mine_reward(self, env: MinesweeperEnv) -> None:
        """Hitting a mine ends the episode with a penalty."""
        env.reset(options={"mine_positions": [15]})
        obs, reward, terminated, _, info = env.step(15)
        assert reward == -10.0
        assert terminated is True
        assert obs[3, 3] == 9
        assert env.state.status == GameStatus.LOST

    def test_safe_reveal_reward(self, env: MinesweeperEnv) -> None:
        """A numbered safe reveal earns +1 and continues."""
        env.reset(options={"mine_positions": [15]})
        _, reward, terminated, _, info = env.step(10)
        assert reward == 1.0
        assert terminated is False
        assert info["steps"] == 1

    def test_blocked_reward(self, env: MinesweeperEnv) -> None:
        """Revealing an already revealed cell is penalized."""
        env.reset(options={"mine_positions": [15]})
        env.step(10)
        _, reward, terminated, _, _ = env.step(10)
        assert reward == -0.1
        assert terminated is False

    def test_action_mask_tracks_state(self, env: MinesweeperEnv) -> None:
        """Action mask drops revealed cells."""
        env.reset(options={"mine_positions": [15]})
        env.step(10)
        mask = env.get_action_mask()
        assert not mask[10]
        assert mask.sum() == 15


class TestRender:
    """Test text rendering."""

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI render draws one line per row."""
        env.reset(options={"mine_positions": [15]})
        env.step(10)
        lines = env.render().split("\n")
        assert len(lines) == 4
        assert lines[2] == ". . 1 ."
        assert lines[0] == ". . . ."

    def test_render_detonation(self, env: MinesweeperEnv) -> None:
        """Detonated mine renders as *."""
        env.reset(options={"mine_positions": [15]})
        env.step(15)
        assert env.render().split("\n")[3] == ". . . *"
