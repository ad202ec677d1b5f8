"""
Pytest configuration and shared fixtures.
"""
import os
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from minefield import Board, BoardConfig, Cell, EASY


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def easy_board() -> Board:
    """Create an easy difficulty board with a fixed seed."""
    return Board(EASY, random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Revealing (0, 0) opens every cell except the mine.
    """
    return Board(BoardConfig(5, 5), mines=[(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return Board(BoardConfig(5, 5), mines=[(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell
