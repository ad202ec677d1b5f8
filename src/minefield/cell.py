"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
state (hidden/revealed/flagged), content (mine or not) and the
coordinates of their neighbors.
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Tuple


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index on the board.
        column: Column index on the board.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        neighbors: (row, column) positions of adjacent cells.
    """

    row: int = 0
    column: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    neighbors: Tuple[Position, ...] = field(default=(), repr=False)

    @property
    def position(self) -> Position:
        """(row, column) of this cell."""
        return (self.row, self.column)

    def mark_mine(self) -> None:
        """
        Put a mine in this cell.

        Raises:
            RuntimeError: If the cell has already been revealed.
        """
        if self.state == CellState.REVEALED:
            raise RuntimeError("Cannot place a mine on a revealed cell")
        self.is_mine = True

    def add_neighbor(self, position: Position) -> None:
        """Link an adjacent cell, ignoring itself and duplicates."""
        if position == self.position or position in self.neighbors:
            return
        self.neighbors = self.neighbors + (position,)

    def adjacent_mine_count(self) -> int:
        """Number of neighboring mines."""
        return self.adjacent_mines

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer display code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
