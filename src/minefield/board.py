"""
Board module for Minesweeper game.

Implements the game board with neighbor linking, mine placement,
cell revealing and game state management.
"""
import random
from dataclasses import InitVar, dataclass, field, replace
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional

import numpy as np

from .cell import Cell, CellState, Position


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class EndMark(Enum):
    """Final classification of a cell once the game is over."""

    MINE = auto()
    FLAG = auto()
    BLANK = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    The mine count is clamped to [0, width * height - 1] so that at
    least one safe cell always exists.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()
        clamped = min(max(self.num_mines, 0), self.max_mines)
        object.__setattr__(self, "num_mines", clamped)

    def _validate(self) -> None:
        """Ensure board dimensions are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")

    @property
    def columns(self) -> int:
        return self.width

    @property
    def rows(self) -> int:
        return self.height

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def max_mines(self) -> int:
        return self.total_cells - 1


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(30, 16, 99)

PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def get_preset(name: str) -> BoardConfig:
    """
    Look up a difficulty preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return PRESETS[name.lower()]
    except KeyError:
        choices = ", ".join(PRESETS)
        raise ValueError(f"Unknown difficulty {name!r} (choose from {choices})") from None


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of one cell for the presentation layer."""

    row: int
    column: int
    is_revealed: bool
    is_flagged: bool
    is_mine_visible: bool
    adjacent_mines: int
    end_mark: Optional[EndMark] = None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, the neighbor graph, mine placement,
    revealing logic and win/lose conditions. A board is played once:
    restarting means building a new board.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    mines: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _cells_revealed: int = 0
    _flag_count: int = 0
    _end_marks: Optional[List[List[EndMark]]] = field(default=None, repr=False)

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Build the grid, link neighbors and place mines."""
        self._init_grid()
        self._link_neighbors()
        if mines is None:
            self._place_random_mines()
        else:
            self._place_mines_at(mines)
        self._calculate_adjacent_mines()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.width)]
            for row in range(self.config.height)
        ]

    def _link_neighbors(self) -> None:
        """Link every pair of grid-adjacent cells in both directions."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                    neighbor = self._grid[neighbor_row][neighbor_col]
                    cell.add_neighbor(neighbor.position)
                    neighbor.add_neighbor(cell.position)

    def _place_random_mines(self) -> None:
        """Place mines on distinct random cells."""
        indices = self.rng.sample(
            range(self.config.total_cells), self.config.num_mines
        )
        for index in indices:
            row, col = divmod(index, self.config.width)
            self._grid[row][col].mark_mine()

    def _place_mines_at(self, mines: Iterable[Position]) -> None:
        """
        Place mines on the given positions.

        Raises:
            ValueError: If a position is off the board or no safe cell
                would remain.
        """
        positions = set()
        for row, col in mines:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
            positions.add((row, col))
        if len(positions) > self.config.max_mines:
            raise ValueError("At least one cell must be free of mines")

        self.config = replace(self.config, num_mines=len(positions))
        for row, col in positions:
            self._grid[row][col].mark_mine()

    def _calculate_adjacent_mines(self) -> None:
        """Cache adjacent mine counts for all cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                cell.adjacent_mines = sum(
                    1 for neighbor_row, neighbor_col in cell.neighbors
                    if self._grid[neighbor_row][neighbor_col].is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        If the cell has no adjacent mines its neighbors are revealed too,
        spreading through the whole connected zero region. Revealing a
        mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the board changed, False if the move was ignored.
        """
        if not self._can_reveal(row, col):
            return False

        self._flood_reveal(row, col)
        if self.is_playing:
            self._check_win_condition()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].state == CellState.HIDDEN

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal a cell and every cell reachable through zero cells."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue

            if cell.is_mine:
                self._end_game(won=False)
                return

            self._cells_revealed += 1
            if cell.adjacent_mines == 0:
                stack.extend(
                    (neighbor_row, neighbor_col)
                    for neighbor_row, neighbor_col in cell.neighbors
                    if self._grid[neighbor_row][neighbor_col].is_hidden
                )

    def _check_win_condition(self) -> None:
        """Win once every non-mine cell is revealed."""
        safe_cells = self.config.total_cells - self.config.num_mines
        if self._cells_revealed >= safe_cells:
            self._end_game(won=True)

    def _end_game(self, won: bool) -> None:
        """Move to a terminal state and classify every cell."""
        if self._game_state != GameState.PLAYING:
            return
        self._game_state = GameState.WON if won else GameState.LOST
        self._end_marks = [
            [self._end_mark_for(cell) for cell in grid_row]
            for grid_row in self._grid
        ]

    @staticmethod
    def _end_mark_for(cell: Cell) -> EndMark:
        if cell.is_mine:
            return EndMark.MINE
        if cell.is_flagged:
            return EndMark.FLAG
        return EndMark.BLANK

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flag_count += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def outcome(self) -> GameState:
        """Outcome of the game; PLAYING while still undetermined."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_game_over(self) -> bool:
        """Check if the game reached a terminal state."""
        return self._game_state != GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def columns(self) -> int:
        return self.config.width

    @property
    def rows(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        return self._flag_count

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, including a detonated mine."""
        return sum(cell.is_revealed for grid_row in self._grid for cell in grid_row)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Snapshot of the cell at position, or None if invalid."""
        cell = self.get_cell(row, col)
        if cell is None:
            return None
        return CellView(
            row=row,
            column=col,
            is_revealed=cell.is_revealed,
            is_flagged=cell.is_flagged,
            is_mine_visible=cell.is_mine and (cell.is_revealed or self.is_game_over),
            adjacent_mines=cell.adjacent_mine_count(),
            end_mark=self._end_marks[row][col] if self._end_marks else None,
        )

    def cell_views(self) -> List[List[CellView]]:
        """Snapshots of every cell, indexed [row][column]."""
        return [
            [self.cell_view(row, col) for col in range(self.config.width)]
            for row in range(self.config.height)
        ]

    def end_marks(self) -> Optional[List[List[EndMark]]]:
        """Final cell classification, or None while the game is running."""
        if self._end_marks is None:
            return None
        return [list(grid_row) for grid_row in self._end_marks]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, in row-major order."""
        return [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine (every mine once the game is over)
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if self.is_game_over and cell.is_mine:
                    obs[row, col] = 9
                else:
                    obs[row, col] = cell.to_observation()
        return obs


# ============================================================================
# Functional Interface
# ============================================================================

def new_board(
    columns: int,
    rows: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """Create a ready-to-play board."""
    config = BoardConfig(width=columns, height=rows, num_mines=mine_count)
    if rng is None:
        return Board(config)
    return Board(config, rng)


def reveal(board: Board, row: int, column: int) -> bool:
    """Reveal a cell on the board."""
    return board.reveal(row, column)


def toggle_flag(board: Board, row: int, column: int) -> bool:
    """Toggle the flag on a cell of the board."""
    return board.toggle_flag(row, column)
