"""
Deferred mine placement.

Mines are described up front by a MineSchedule: the ranks, counted
among cells outside the safe zone, at which a mine lands. The schedule
is realised on the first reveal, once the safe zone around the clicked
cell is known.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .board import Board
from .errors import InvalidConfiguration
from .geometry import max_neighbor_count, neighbors

logger = logging.getLogger(__name__)


# ============================================================================
# Mine Schedule
# ============================================================================

@dataclass(frozen=True)
class MineSchedule:
    """
    Increasing sequence of placement ranks, one per mine.

    Attributes:
        ranks: Non-negative, strictly increasing ranks among the cells
            that are eligible for a mine.
    """

    ranks: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Normalise ranks to a tuple of ints and validate ordering."""
        object.__setattr__(self, "ranks", tuple(int(rank) for rank in self.ranks))
        self._validate()

    def _validate(self) -> None:
        previous = -1
        for rank in self.ranks:
            if rank <= previous:
                raise InvalidConfiguration(
                    f"Mine schedule ranks must be non-negative and strictly "
                    f"increasing: {list(self.ranks)}"
                )
            previous = rank

    def __len__(self) -> int:
        return len(self.ranks)


def candidate_count(size: int, first_click: Optional[int] = None) -> int:
    """
    Number of cells that may hold a mine.

    Args:
        size: Rows and columns of the board.
        first_click: Cell whose safe zone is excluded. If omitted, the
            largest possible safe zone is assumed.

    Returns:
        Cells outside the safe zone around the first click.
    """
    if first_click is None:
        zone = max_neighbor_count(size)
    else:
        zone = len(neighbors(first_click, size))
    return max(0, size * size - 1 - zone)


def distribute_mines(
    num_mines: int,
    candidates: int,
    rng: Optional[np.random.Generator] = None,
) -> MineSchedule:
    """
    Draw a mine schedule by streaming over candidate ranks.

    Each rank gets a mine with probability ``remaining / ranks_left``,
    which yields exactly ``num_mines`` uniformly chosen ranks as long as
    ``num_mines <= candidates``. Otherwise every candidate is used and
    the schedule comes up short.

    Args:
        num_mines: Mines still to place.
        candidates: Number of ranks available.
        rng: Random generator; a fresh one is created if omitted.

    Returns:
        The drawn schedule.
    """
    rng = rng if rng is not None else np.random.default_rng()
    remaining = num_mines
    ranks = []
    for rank in range(candidates):
        if remaining == 0:
            break
        if rng.random() < remaining / (candidates - rank):
            ranks.append(rank)
            remaining -= 1
    if remaining:
        logger.warning(
            "Only %d of %d mines fit in %d candidates",
            len(ranks), num_mines, candidates,
        )
    return MineSchedule(ranks)


# ============================================================================
# Placement
# ============================================================================

def place_mines(board: Board, first_click: int, schedule: MineSchedule) -> int:
    """
    Realise a schedule into mines, keeping the first click's area clear.

    Walks the board in index order with a rank counter that only advances
    on cells outside the safe zone. A mine lands wherever the counter
    matches the next scheduled rank. Adjacency counts are recomputed
    afterwards.

    Args:
        board: Mine-free board to populate.
        first_click: Index of the cell the player revealed first.
        schedule: Ranks to realise; consumed by this call.

    Returns:
        Number of mines placed.
    """
    first_click = board.check_index(first_click)
    safe_zone = board.neighbors(first_click) | {first_click}
    ranks = schedule.ranks
    placed = 0
    counter = 0

    for index, cell in enumerate(board):
        if placed == len(ranks):
            break
        if index in safe_zone:
            continue
        if counter == ranks[placed]:
            cell.is_mine = True
            placed += 1
        counter += 1

    if placed < len(ranks):
        logger.warning(
            "Placed %d of %d scheduled mines around first click %d",
            placed, len(ranks), first_click,
        )
    logger.debug("Placed %d mines, first click %d", placed, first_click)

    board.recompute_adjacency()
    return placed
