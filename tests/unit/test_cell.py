"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, neighbor linking
and observation conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_no_neighbors(self) -> None:
        """New cell starts without neighbors."""
        assert Cell().neighbors == ()

    def test_cell_keeps_coordinates(self) -> None:
        """Row and column are stored as given."""
        cell = Cell(3, 7)
        assert cell.row == 3
        assert cell.column == 7
        assert cell.position == (3, 7)


# ============================================================================
# Mine Tests
# ============================================================================

class TestCellMine:
    """Test mine placement on a cell."""

    def test_mark_mine_sets_flag(self, hidden_cell: Cell) -> None:
        """Marking a mine makes the cell a mine."""
        hidden_cell.mark_mine()
        assert hidden_cell.is_mine is True

    def test_mark_mine_on_revealed_cell_raises(self, hidden_cell: Cell) -> None:
        """A revealed cell can no longer receive a mine."""
        hidden_cell.reveal()
        with pytest.raises(RuntimeError):
            hidden_cell.mark_mine()

    def test_adjacent_mine_count_returns_cached_value(self) -> None:
        """Adjacent count reflects the value the board computed."""
        cell = Cell(adjacent_mines=4)
        assert cell.adjacent_mine_count() == 4


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestCellNeighbors:
    """Test neighbor linking."""

    def test_add_neighbor(self) -> None:
        cell = Cell(1, 1)
        cell.add_neighbor((0, 0))
        assert cell.neighbors == ((0, 0),)

    def test_cell_is_never_its_own_neighbor(self) -> None:
        cell = Cell(1, 1)
        cell.add_neighbor((1, 1))
        assert cell.neighbors == ()

    def test_duplicate_neighbor_ignored(self) -> None:
        cell = Cell(1, 1)
        cell.add_neighbor((0, 1))
        cell.add_neighbor((0, 1))
        assert cell.neighbors == ((0, 1),)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        result = hidden_cell.reveal()
        assert result is True

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True

    def test_reveal_is_idempotent(self, hidden_cell: Cell) -> None:
        """Revealing twice leaves the cell revealed and reports no change."""
        hidden_cell.reveal()
        result = hidden_cell.reveal()
        assert result is False
        assert hidden_cell.is_revealed is True

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        result = hidden_cell.reveal()
        assert result is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        result = hidden_cell.toggle_flag()
        assert result is True

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, numbered_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        result = numbered_cell.toggle_flag()
        assert result is False
        assert numbered_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation codes."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
