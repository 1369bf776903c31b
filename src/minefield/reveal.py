"""
Reveal engine: single-cell reveal and flood reveal of empty regions.
"""
from collections import deque
from typing import List

from .board import Board
from .cell import CellStatus


def reveal_cell(board: Board, index: int) -> None:
    """
    Mark a cell revealed regardless of its current status.

    Legality is the game machine's concern; this also reveals flagged
    cells, which is what happens when a flagged mine is stepped on.
    """
    board.cell(index).status = CellStatus.REVEALED


def flood_reveal(board: Board, origin: int) -> List[int]:
    """
    Reveal the concealed neighbors of an already revealed cell.

    Every concealed safe neighbor of the origin is revealed. Expansion then
    continues only through revealed cells with no adjacent mines, so each
    zero region reached is opened together with its numbered border.
    Flagged and revealed cells are left alone and mines are never revealed.

    Args:
        board: Board with mines placed and adjacency counts computed.
        origin: Index of the revealed cell to expand from.

    Returns:
        Indices newly revealed, in breadth-first order.
    """
    origin = board.check_index(origin)
    revealed = []
    queue = deque()
    start = board.cell(origin)
    if not start.is_mine:
        queue.append(origin)

    while queue:
        index = queue.popleft()
        for neighbor in sorted(board.neighbors(index)):
            cell = board.cell(neighbor)
            if cell.is_mine or not cell.reveal():
                continue
            revealed.append(neighbor)
            if cell.adjacent_mine_count == 0:
                queue.append(neighbor)

    return revealed
