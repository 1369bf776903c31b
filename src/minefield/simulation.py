"""
Evaluation harness that plays many games with an agent.
"""
from typing import Dict, Optional

from .agents.base_agent import BaseAgent
from .board import GameConfig
from .environment import MinesweeperEnv


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate an agent over a batch of games.

    Every game starts from a fresh machine; wins are detected by the
    environment's explicit win check after each action.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 500,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game configuration for evaluation.
            num_episodes: Number of games to play.
            max_steps: Maximum actions per game before giving up.
            seed: Seed for the first game; later games continue the stream.
        """
        self.config = config or GameConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.config)

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
                observation, reward, terminated, truncated, info = env.step(action)

                total_reward += reward
                total_steps += 1

                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            total_revealed += info["revealed"]

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
