"""
Random agent for the minefield engine.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """Agent that selects valid actions uniformly at random."""

    def __init__(self, size: int = 9, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            size: Number of rows and columns on the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing left to do; the environment treats this as a no-op
            return 0

        return int(self.rng.choice(valid_indices))
