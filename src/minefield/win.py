"""
Win condition for a minefield board.
"""
from .board import Board


def is_won(board: Board) -> bool:
    """
    Check whether every mine is flagged and every other cell revealed.

    Any concealed cell means the game is not won yet.
    """
    for cell in board:
        if cell.is_concealed:
            return False
        if cell.is_mine and not cell.is_flagged:
            return False
        if not cell.is_mine and not cell.is_revealed:
            return False
    return True
