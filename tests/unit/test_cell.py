"""
Unit tests for Cell and CellView.

Tests status transitions, change tracking, and the confidentiality of
the read-only view.
"""
import pytest
from minesweeper import Cell, CellStatus, CellView, InvalidStateError


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
        assert cell.status == CellStatus.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_concealed is True

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        """New cell should have 0 neighboring mines by default."""
        assert Cell().neighbor_mine_count == 0

    def test_new_cell_starts_dirty(self) -> None:
        """New cells are dirty so the first render draws everything."""
        assert Cell().dirty is True

    def test_increment_neighbor_count(self, hidden_cell: Cell) -> None:
        """Each increment adds one neighboring mine."""
        hidden_cell.increment_neighbor_count()
        hidden_cell.increment_neighbor_count()
        assert hidden_cell.neighbor_mine_count == 2


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_empty_cell_signals_cascade(self, hidden_cell: Cell) -> None:
        """Revealing a cell with no neighboring mines returns True."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_numbered_cell_does_not_cascade(
        self, numbered_cell: Cell
    ) -> None:
        """Revealing a cell next to mines returns False."""
        assert numbered_cell.reveal() is False
        assert numbered_cell.is_revealed is True

    def test_reveal_already_revealed_is_noop(self, hidden_cell: Cell) -> None:
        """Revealing twice returns False and leaves the cell clean."""
        hidden_cell.reveal()
        hidden_cell.clear_dirty()
        assert hidden_cell.reveal() is False
        assert hidden_cell.dirty is False

    def test_reveal_marks_dirty(self, hidden_cell: Cell) -> None:
        """Revealing marks the cell as changed."""
        hidden_cell.clear_dirty()
        hidden_cell.reveal()
        assert hidden_cell.dirty is True

    @pytest.mark.parametrize("flag_cycles", [1, 2])
    def test_marked_cell_can_be_revealed(
        self, hidden_cell: Cell, flag_cycles: int
    ) -> None:
        """Flagged and questioned cells can still be revealed."""
        for _ in range(flag_cycles):
            hidden_cell.cycle_flag()
        hidden_cell.reveal()
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlagCycle:
    """Test the hidden -> flagged -> questioned -> hidden cycle."""

    def test_cycle_order(self, hidden_cell: Cell) -> None:
        """Status cycles through flagged and questioned back to hidden."""
        seen = []
        for _ in range(4):
            hidden_cell.cycle_flag()
            seen.append(hidden_cell.status)
        assert seen == [
            CellStatus.FLAGGED,
            CellStatus.QUESTIONED,
            CellStatus.HIDDEN,
            CellStatus.FLAGGED,
        ]

    def test_cycle_marks_dirty(self, hidden_cell: Cell) -> None:
        """Every transition marks the cell as changed."""
        for _ in range(3):
            hidden_cell.clear_dirty()
            hidden_cell.cycle_flag()
            assert hidden_cell.dirty is True

    def test_cycle_on_revealed_is_noop(self, hidden_cell: Cell) -> None:
        """Revealed cells cannot be marked."""
        hidden_cell.reveal()
        hidden_cell.clear_dirty()
        hidden_cell.cycle_flag()
        assert hidden_cell.is_revealed is True
        assert hidden_cell.dirty is False


# ============================================================================
# Change Tracking Tests
# ============================================================================

class TestDirtyTracking:
    """Test take_dirty and clear_dirty."""

    def test_take_dirty_returns_and_clears(self, hidden_cell: Cell) -> None:
        """take_dirty reports the flag once."""
        assert hidden_cell.take_dirty() is True
        assert hidden_cell.take_dirty() is False

    def test_clear_dirty(self, hidden_cell: Cell) -> None:
        hidden_cell.clear_dirty()
        assert hidden_cell.dirty is False


# ============================================================================
# Cell View Tests
# ============================================================================

class TestCellView:
    """Test the read-only projection handed to the presentation layer."""

    @pytest.mark.parametrize("flag_cycles", [0, 1, 2])
    def test_concealed_view_hides_mine(
        self, mine_cell: Cell, flag_cycles: int
    ) -> None:
        """Concealed views refuse to say whether they hold a mine."""
        for _ in range(flag_cycles):
            mine_cell.cycle_flag()
        view = mine_cell.view()
        with pytest.raises(InvalidStateError):
            view.is_mine
        with pytest.raises(InvalidStateError):
            view.neighbor_count

    def test_concealed_views_are_indistinguishable(
        self, mine_cell: Cell, numbered_cell: Cell
    ) -> None:
        """Hidden mine and hidden number produce equal views."""
        assert mine_cell.view() == numbered_cell.view()
        assert "mine" not in repr(mine_cell.view())

    def test_revealed_view_exposes_contents(self, numbered_cell: Cell) -> None:
        """Revealed views expose mine flag and neighbor count."""
        numbered_cell.reveal()
        view = numbered_cell.view()
        assert view.status == CellStatus.REVEALED
        assert view.is_mine is False
        assert view.neighbor_count == 3

    def test_view_is_a_snapshot(self, hidden_cell: Cell) -> None:
        """Later changes to the cell do not affect an earlier view."""
        view = hidden_cell.view()
        hidden_cell.reveal()
        assert view.status == CellStatus.HIDDEN

    def test_view_is_immutable(self, hidden_cell: Cell) -> None:
        view = hidden_cell.view()
        with pytest.raises(AttributeError):
            view.status = CellStatus.REVEALED


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation values for numeric consumers."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (CellStatus.HIDDEN, -1),
            (CellStatus.FLAGGED, -2),
            (CellStatus.QUESTIONED, -3),
        ],
    )
    def test_concealed_observation(
        self, status: CellStatus, expected: int
    ) -> None:
        """Concealed statuses map to negative codes."""
        assert CellView(status).to_observation() == expected

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_observation_matches_count(self, count: int) -> None:
        """Revealed cell returns its neighbor mine count."""
        cell = Cell(neighbor_mine_count=count)
        cell.reveal()
        assert cell.view().to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9."""
        mine_cell.reveal()
        assert mine_cell.view().to_observation() == 9
