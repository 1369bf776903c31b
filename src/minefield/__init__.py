"""
Minefield rules engine.

Provides the grid geometry, deferred mine placement, flood reveal,
win evaluation and the game state machine that ties them together.
"""
from .cell import Cell, CellSnapshot, CellStatus
from .board import Board, BoardSnapshot, GameConfig, BEGINNER, INTERMEDIATE, EXPERT
from .errors import InvalidConfiguration, InvalidIndex, MinefieldError
from .geometry import neighbors
from .placement import MineSchedule, distribute_mines, place_mines
from .reveal import flood_reveal, reveal_cell
from .win import is_won
from .machine import (
    CheckWin,
    FlagCell,
    GameMachine,
    GameState,
    Reset,
    RevealCell,
    new_game,
)
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "Cell",
    "CellSnapshot",
    "CellStatus",
    "Board",
    "BoardSnapshot",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinefieldError",
    "InvalidConfiguration",
    "InvalidIndex",
    "neighbors",
    "MineSchedule",
    "distribute_mines",
    "place_mines",
    "reveal_cell",
    "flood_reveal",
    "is_won",
    "GameState",
    "RevealCell",
    "FlagCell",
    "CheckWin",
    "Reset",
    "GameMachine",
    "new_game",
    "MinesweeperEnv",
    "render_ansi",
]
