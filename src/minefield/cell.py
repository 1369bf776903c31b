"""
Cell module for the minefield engine.

Represents individual grid squares with their status
(concealed/revealed/flagged) and content (mine/adjacency count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellStatus(Enum):
    """Possible statuses of a cell."""

    CONCEALED = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass
class Cell:
    """
    A single mutable cell owned by a Board.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mine_count: Count of mines in neighboring cells (0-8).
            Meaningless until mines have been placed.
        status: Concealed, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mine_count: int = 0
    status: CellStatus = CellStatus.CONCEALED

    def reveal(self) -> bool:
        """
        Reveal this cell if it is still concealed.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.status != CellStatus.CONCEALED:
            return False
        self.status = CellStatus.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.status == CellStatus.REVEALED:
            return False
        if self.status == CellStatus.CONCEALED:
            self.status = CellStatus.FLAGGED
        else:
            self.status = CellStatus.CONCEALED
        return True

    @property
    def is_concealed(self) -> bool:
        """Check if cell is concealed."""
        return self.status == CellStatus.CONCEALED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.status == CellStatus.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    def snapshot(self) -> "CellSnapshot":
        """Freeze the current values into a read-only view."""
        return CellSnapshot(self.is_mine, self.adjacent_mine_count, self.status)


@dataclass(frozen=True)
class CellSnapshot:
    """
    Read-only view of a cell handed to callers after each dispatch.

    ``is_mine`` is only meant to be shown once the cell is revealed or
    the game is over.
    """

    is_mine: bool
    adjacent_mine_count: int
    status: CellStatus

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Concealed cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.status == CellStatus.CONCEALED:
            return -1
        if self.status == CellStatus.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mine_count
