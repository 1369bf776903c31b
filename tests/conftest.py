"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the repo root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minefield import (
    Board,
    Cell,
    GameConfig,
    GameMachine,
    MineSchedule,
    RevealCell,
)


# ============================================================================
# Scenario Constants
# ============================================================================

# With a first click on 0, ranks 0, 8, 16 and 20 put mines on
# cells 2, 12, 20 and 24:
#  0  1  x  3  4
#  5  6  7  8  9
# 10 11  x 13 14
# 15 16 17 18 19
#  x 21 22 23  x
SCENARIO_RANKS = (0, 8, 16, 20)
SCENARIO_MINES = (2, 12, 20, 24)


# ============================================================================
# Machine Fixtures
# ============================================================================

@pytest.fixture
def scenario_machine() -> GameMachine:
    """Create an idle 5x5 machine with the fixed scenario schedule."""
    return GameMachine(GameConfig(5, 4), schedule=MineSchedule(SCENARIO_RANKS))


@pytest.fixture
def playing_machine(scenario_machine: GameMachine) -> GameMachine:
    """Scenario machine after the first reveal on cell 0."""
    scenario_machine.dispatch(RevealCell(0))
    return scenario_machine


@pytest.fixture
def empty_machine() -> GameMachine:
    """Create a 5x5 machine with no mines for cascade testing."""
    return GameMachine(GameConfig(5, 0))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines."""
    return Board(5)


@pytest.fixture
def scenario_board() -> Board:
    """5x5 board with the scenario mines placed and counts computed."""
    board = Board(5)
    for index in SCENARIO_MINES:
        board.cell(index).is_mine = True
    board.recompute_adjacency()
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def concealed_cell() -> Cell:
    """Create a concealed cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
