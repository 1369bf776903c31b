"""
Gymnasium environment wrapper for the minefield engine.

Drives a GameMachine through the standard RL interface so agents can
play whole games.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardSnapshot, GameConfig
from .cell import CellStatus
from .machine import (
    CheckWin,
    Event,
    FlagCell,
    GameMachine,
    GameState,
    RevealCell,
)


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(snapshot: BoardSnapshot, show_mines: bool = False) -> str:
    """
    Render a board snapshot as text.

    Args:
        snapshot: Board to draw.
        show_mines: Draw concealed and flagged mines too (game over view).

    Returns:
        One line per row: "." concealed, "F" flagged, "*" mine,
        " " empty, digits for adjacent counts.
    """
    lines = []
    for row in range(snapshot.size):
        row_str = ""
        for col in range(snapshot.size):
            cell = snapshot[row * snapshot.size + col]
            if cell.is_mine and (show_mines or cell.status == CellStatus.REVEALED):
                row_str += "*"
            elif cell.status == CellStatus.CONCEALED:
                row_str += "."
            elif cell.status == CellStatus.FLAGGED:
                row_str += "F"
            elif cell.adjacent_mine_count == 0:
                row_str += " "
            else:
                row_str += str(cell.adjacent_mine_count)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the minefield engine.

    Observation:
        2D array where:
        - -1 = concealed cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size reveals cell i; any other action flags
        cell i - size * size.

    Rewards:
        - +10 for winning the game
        - -10 for hitting a mine
        - +1 for revealing a safe cell
        - 0 for toggling a flag
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.machine = GameMachine(self.config, rng=self.np_random)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.machine = GameMachine(self.config, rng=self.np_random)
        self._steps = 0

        snapshot = self.machine.snapshot()
        return snapshot.to_observation(), self._get_info(snapshot)

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        before = self.machine.snapshot()
        event = self._action_to_event(int(action))

        state, snapshot = self.machine.dispatch(event)
        if state == GameState.PLAYING:
            state, snapshot = self.machine.dispatch(CheckWin())

        reward = self._calculate_reward(event, state, before, snapshot)
        terminated = self.machine.is_over

        info = self._get_info(snapshot)
        return snapshot.to_observation(), reward, terminated, False, info

    def _action_to_event(self, action: int) -> Event:
        """Convert flat action index to a machine event."""
        total = self.config.total_cells
        if action < total:
            return RevealCell(action)
        return FlagCell(action - total)

    def _calculate_reward(
        self,
        event: Event,
        state: GameState,
        before: BoardSnapshot,
        after: BoardSnapshot,
    ) -> float:
        """Score the outcome of a dispatched event."""
        if state == GameState.WON:
            return 10.0
        if state == GameState.LOST:
            return -10.0
        if after == before:
            return -0.1
        if isinstance(event, RevealCell):
            return 1.0
        return 0.0

    def _get_info(self, snapshot: BoardSnapshot) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = len(snapshot.indices_with_status(CellStatus.REVEALED))
        flagged = len(snapshot.indices_with_status(CellStatus.FLAGGED))

        return {
            "steps": self._steps,
            "revealed": revealed,
            "flagged": flagged,
            "total_safe": self._total_safe_cells,
            "game_state": self.machine.state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_ansi(
            self.machine.snapshot(), show_mines=self.machine.is_over
        )
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the game.

        Returns:
            Boolean array where True = valid action. Flags are only
            offered once the game is under way.
        """
        total = self.config.total_cells
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.machine.is_over:
            return mask

        snapshot = self.machine.snapshot()
        concealed = snapshot.indices_with_status(CellStatus.CONCEALED)
        mask[concealed] = True
        if self.machine.state == GameState.PLAYING:
            mask[[total + i for i in concealed]] = True
        return mask
