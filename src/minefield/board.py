"""
Board module for the minefield engine.

Holds the game configuration, the flat grid of cells owned by a game
machine, and the immutable snapshots handed out to callers.
"""
import operator
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Tuple

import numpy as np

from .cell import Cell, CellSnapshot, CellStatus
from .errors import InvalidConfiguration, InvalidIndex
from .geometry import max_neighbor_count, neighbors


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a square minefield.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place on the first reveal.
    """

    size: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure a mine-free first click is possible from any cell."""
        if self.size < 1:
            raise InvalidConfiguration("Board size must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise InvalidConfiguration(f"Too many mines (max {self.max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    @property
    def max_mines(self) -> int:
        """Most mines that still leave room for the largest safe zone."""
        return self.total_cells - 1 - max_neighbor_count(self.size)


# Preset difficulty levels
BEGINNER = GameConfig(9, 10)
INTERMEDIATE = GameConfig(16, 40)
EXPERT = GameConfig(24, 99)


# ============================================================================
# Snapshots
# ============================================================================

@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only, row-major view of every cell on the board."""

    size: int
    cells: Tuple[CellSnapshot, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> CellSnapshot:
        return self.cells[index]

    def __iter__(self) -> Iterator[CellSnapshot]:
        return iter(self.cells)

    def indices_with_status(self, status: CellStatus) -> List[int]:
        """Get indices of cells currently in ``status``."""
        return [i for i, cell in enumerate(self.cells) if cell.status == status]

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a 2D numpy array.

        Returns:
            Array of shape (size, size) where:
                -1 = concealed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self.cells),
            dtype=np.int8,
            count=len(self.cells),
        )
        return obs.reshape(self.size, self.size)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Flat grid of ``size * size`` cells addressed by linear index.

    Only engine operations mutate a board; callers see snapshots.
    """

    size: int
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the cells after dataclass creation."""
        if self.size < 1:
            raise InvalidConfiguration("Board size must be positive")
        self.clear()

    def clear(self) -> None:
        """Replace every cell with a concealed, mine-free one."""
        self._cells = [Cell() for _ in range(self.size * self.size)]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def check_index(self, index: int) -> int:
        """
        Validate a cell index.

        Args:
            index: Anything usable as an integer index.

        Returns:
            The index as a plain int.

        Raises:
            InvalidIndex: If index is not an integer in ``[0, size**2)``.
        """
        try:
            index = operator.index(index)
        except TypeError:
            raise InvalidIndex(
                f"Cell index must be an integer, got {index!r}"
            ) from None
        if not 0 <= index < len(self._cells):
            raise InvalidIndex(
                f"Cell index {index} out of range for {self.size}x{self.size} board"
            )
        return index

    def cell(self, index: int) -> Cell:
        """Get cell at index."""
        return self._cells[self.check_index(index)]

    def neighbors(self, index: int) -> FrozenSet[int]:
        """Get indices of the cells around ``index``."""
        return neighbors(index, self.size)

    @property
    def mine_count(self) -> int:
        """Number of mines currently on the board."""
        return sum(1 for cell in self._cells if cell.is_mine)

    def count_adjacent_mines(self, index: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor in self.neighbors(index):
            if self._cells[neighbor].is_mine:
                count += 1
        return count

    def recompute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for index, cell in enumerate(self._cells):
            cell.adjacent_mine_count = (
                0 if cell.is_mine else self.count_adjacent_mines(index)
            )

    def snapshot(self) -> BoardSnapshot:
        """Freeze the board into a read-only snapshot."""
        return BoardSnapshot(
            self.size, tuple(cell.snapshot() for cell in self._cells)
        )
