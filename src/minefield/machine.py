"""
Game state machine for the minefield engine.

The machine owns the board and is the only thing that mutates it.
Callers send events through ``dispatch`` and get back the new
lifecycle state together with a read-only snapshot of the board.

    Idle --RevealCell--> Playing --RevealCell(mine)--> Lost
                         Playing --CheckWin(won)-----> Won
    Won/Lost --Reset--> Idle
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Optional, Tuple, Type, Union

import numpy as np

from .board import Board, BoardSnapshot, GameConfig
from .errors import InvalidConfiguration
from .placement import MineSchedule, candidate_count, distribute_mines, place_mines
from .reveal import flood_reveal, reveal_cell
from .win import is_won

logger = logging.getLogger(__name__)


# ============================================================================
# States and Events
# ============================================================================

class GameState(Enum):
    """Lifecycle states of a game."""

    IDLE = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class RevealCell:
    """Reveal the cell at ``index``."""

    index: int


@dataclass(frozen=True)
class FlagCell:
    """Toggle the flag on the cell at ``index``."""

    index: int


@dataclass(frozen=True)
class CheckWin:
    """Ask the machine to evaluate the win condition."""


@dataclass(frozen=True)
class Reset:
    """Start over with a fresh board of the same size."""


Event = Union[RevealCell, FlagCell, CheckWin, Reset]


# ============================================================================
# Game Machine
# ============================================================================

class GameMachine:
    """
    Authoritative controller for one game.

    Mines are placed on the first reveal, from the schedule passed at
    construction or else one drawn for the clicked cell, so the first
    reveal is always safe.
    Winning is only detected when a CheckWin event is dispatched.
    """

    def __init__(
        self,
        config: GameConfig,
        schedule: Optional[MineSchedule] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the machine in the idle state.

        Args:
            config: Board size and mine count.
            schedule: Mine ranks to use for the first game instead of a
                random draw at the first reveal.
            rng: Random generator for mine schedules.

        Raises:
            InvalidConfiguration: If the schedule does not match the
                configured mine count.
        """
        if schedule is not None and len(schedule) != config.num_mines:
            raise InvalidConfiguration(
                f"Schedule has {len(schedule)} mines, expected {config.num_mines}"
            )
        self.config = config
        self._rng = rng if rng is not None else np.random.default_rng()
        self._board = Board(config.size)
        self._state = GameState.IDLE
        self._schedule: Optional[MineSchedule] = schedule
        self._dispatching = False

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current lifecycle state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    def snapshot(self) -> BoardSnapshot:
        """Get a read-only view of the board."""
        return self._board.snapshot()

    # ========================================================================
    # Dispatch
    # ========================================================================

    def dispatch(self, event: Event) -> Tuple[GameState, BoardSnapshot]:
        """
        Apply an event and report the resulting state.

        Events without a transition from the current state are ignored.

        Args:
            event: RevealCell, FlagCell, CheckWin or Reset.

        Returns:
            Tuple of (new state, board snapshot).

        Raises:
            InvalidIndex: If a cell event targets a cell off the board.
            RuntimeError: If called while another dispatch is running.
        """
        if self._dispatching:
            raise RuntimeError("dispatch() is not reentrant")

        if isinstance(event, (RevealCell, FlagCell)):
            event = type(event)(self._board.check_index(event.index))

        handler = _TRANSITIONS.get((self._state, type(event)))
        if handler is not None:
            self._dispatching = True
            try:
                previous = self._state
                self._state = handler(self, event)
            finally:
                self._dispatching = False
            if self._state != previous:
                logger.debug(
                    "%s: %s -> %s", event, previous.name, self._state.name
                )

        return self._state, self._board.snapshot()

    # ========================================================================
    # Transitions
    # ========================================================================

    def _start(self, event: RevealCell) -> GameState:
        """Place mines around the first click, then reveal it."""
        schedule, self._schedule = self._schedule, None
        if schedule is None:
            schedule = self._draw_schedule(event.index)
        place_mines(self._board, event.index, schedule)
        reveal_cell(self._board, event.index)
        flood_reveal(self._board, event.index)
        return GameState.PLAYING

    def _reveal(self, event: RevealCell) -> GameState:
        cell = self._board.cell(event.index)
        if cell.is_mine:
            reveal_cell(self._board, event.index)
            return GameState.LOST
        if cell.is_concealed:
            reveal_cell(self._board, event.index)
            flood_reveal(self._board, event.index)
        return GameState.PLAYING

    def _flag(self, event: FlagCell) -> GameState:
        self._board.cell(event.index).toggle_flag()
        return GameState.PLAYING

    def _check_win(self, event: CheckWin) -> GameState:
        return GameState.WON if is_won(self._board) else GameState.PLAYING

    def _reset(self, event: Reset) -> GameState:
        """Discard the board and any pending schedule."""
        self._board.clear()
        self._schedule = None
        return GameState.IDLE

    def _draw_schedule(self, first_click: int) -> MineSchedule:
        """Draw ranks over every cell outside the first click's safe zone."""
        candidates = candidate_count(self.config.size, first_click)
        return distribute_mines(self.config.num_mines, candidates, self._rng)


_Handler = Callable[[GameMachine, Event], GameState]

_TRANSITIONS: Dict[Tuple[GameState, Type], _Handler] = {
    (GameState.IDLE, RevealCell): GameMachine._start,
    (GameState.PLAYING, RevealCell): GameMachine._reveal,
    (GameState.PLAYING, FlagCell): GameMachine._flag,
    (GameState.PLAYING, CheckWin): GameMachine._check_win,
    (GameState.WON, Reset): GameMachine._reset,
    (GameState.LOST, Reset): GameMachine._reset,
}


def new_game(
    size: int,
    mine_count: int,
    *,
    schedule: Optional[MineSchedule] = None,
    seed: Optional[int] = None,
) -> GameMachine:
    """
    Create a game machine for a ``size`` x ``size`` board.

    Raises:
        InvalidConfiguration: If the mine count cannot fit around any
            first click, or the schedule does not match it.
    """
    config = GameConfig(size, mine_count)
    return GameMachine(config, schedule=schedule, rng=np.random.default_rng(seed))
