"""
Agent evaluation over many games.
"""
import logging
from typing import Dict, Optional

from agents.base_agent import BaseAgent
from minefield.environment import MinesweeperEnv
from minefield.grid import BoardConfig

logger = logging.getLogger(__name__)


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Plays each agent through fresh games and reports aggregate metrics.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Seed for the first episode's mine placement.
        """
        if num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        if max_steps < 1:
            raise ValueError("max_steps must be positive")
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                action = agent.select_action(observation, env.get_action_mask())
                observation, reward, terminated, truncated, info = env.step(
                    action
                )
                total_reward += reward
                total_steps += 1
                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            total_revealed += info["revealed"]

        logger.debug("Evaluated %d episodes, %d wins", self.num_episodes, wins)
        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s", name)
            results[name] = self.evaluate(agent)
        return results
