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

    Actions follow the environment layout: indices below
    ``total_cells`` reveal a cell, the rest flag one.
    """

    def __init__(self, size: int) -> None:
        """
        Initialize the agent.

        Args:
            size: Number of rows and columns on the board.
        """
        self.size = size
        self.total_cells = size * size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(action % self.total_cells, self.size)

    def position_to_action(self, row: int, col: int, flag: bool = False) -> int:
        """Convert (row, col) position to flat action index."""
        action = row * self.size + col
        return action + self.total_cells if flag else action

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell observations.

        Returns:
            Boolean mask where True = valid action. Concealed cells
            (value -1) can be revealed or flagged.
        """
        concealed = observation.flatten() == -1
        return np.concatenate([concealed, concealed])

    def reset(self) -> None:
        """Reset agent state for a new game."""
