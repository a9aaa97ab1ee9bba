"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their concealment
status (hidden/flagged/questioned/revealed), content (mine/number),
and change tracking.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict

from .errors import InvalidStateError


# ============================================================================
# Constants
# ============================================================================

class CellStatus(Enum):
    """Possible concealment states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    QUESTIONED = auto()
    REVEALED = auto()


# Right-click cycle; REVEALED is absent so it never transitions
FLAG_CYCLE: Dict[CellStatus, CellStatus] = {
    CellStatus.HIDDEN: CellStatus.FLAGGED,
    CellStatus.FLAGGED: CellStatus.QUESTIONED,
    CellStatus.QUESTIONED: CellStatus.HIDDEN,
}

HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
QUESTIONED_OBSERVATION = -3
MINE_OBSERVATION = 9


# ============================================================================
# Read-only Projection
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Immutable snapshot of a cell as seen by the player.

    Mine and neighbor data are withheld until the cell is revealed;
    reading them earlier raises InvalidStateError.
    """

    status: CellStatus
    _is_mine: bool = False
    _neighbor_count: int = 0

    def __repr__(self) -> str:
        if self.is_revealed:
            return (
                f"CellView(status={self.status.name}, "
                f"is_mine={self._is_mine}, "
                f"neighbor_count={self._neighbor_count})"
            )
        return f"CellView(status={self.status.name})"

    @property
    def is_revealed(self) -> bool:
        """Check if the viewed cell is revealed."""
        return self.status == CellStatus.REVEALED

    @property
    def is_mine(self) -> bool:
        """Whether the cell is a mine (revealed cells only)."""
        self._require_revealed()
        return self._is_mine

    @property
    def neighbor_count(self) -> int:
        """Mines adjacent to the cell (revealed cells only)."""
        self._require_revealed()
        return self._neighbor_count

    def _require_revealed(self) -> None:
        if not self.is_revealed:
            raise InvalidStateError(
                f"Cell contents are concealed (status {self.status.name})"
            )

    def to_observation(self) -> int:
        """
        Convert view to an observation value for numeric consumers.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.status == CellStatus.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.status == CellStatus.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.status == CellStatus.QUESTIONED:
            return QUESTIONED_OBSERVATION
        if self._is_mine:
            return MINE_OBSERVATION
        return self._neighbor_count


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Never changes.
        neighbor_mine_count: Count of mines in neighboring cells (0-8).
        status: Current concealment status.
        dirty: Whether the status changed since it was last consumed.
    """

    is_mine: bool = False
    neighbor_mine_count: int = 0
    status: CellStatus = CellStatus.HIDDEN
    dirty: bool = True

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Flagged and questioned cells can be revealed too.

        Returns:
            True if the cell was newly revealed and has no neighboring
            mines, i.e. the caller should cascade to the neighbors.
        """
        if self.status == CellStatus.REVEALED:
            return False
        self.status = CellStatus.REVEALED
        self.dirty = True
        return self.neighbor_mine_count == 0

    def cycle_flag(self) -> None:
        """Advance hidden -> flagged -> questioned -> hidden."""
        next_status = FLAG_CYCLE.get(self.status)
        if next_status is None:
            return
        self.status = next_status
        self.dirty = True

    def increment_neighbor_count(self) -> None:
        """Record one more adjacent mine (grid construction only)."""
        self.neighbor_mine_count += 1

    def take_dirty(self) -> bool:
        """Return the dirty flag and clear it."""
        was_dirty = self.dirty
        self.dirty = False
        return was_dirty

    def clear_dirty(self) -> None:
        self.dirty = False

    def view(self) -> CellView:
        """Snapshot this cell; concealed cells carry no secrets."""
        if self.status != CellStatus.REVEALED:
            return CellView(self.status)
        return CellView(self.status, self.is_mine, self.neighbor_mine_count)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.status == CellStatus.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell is marked with a question."""
        return self.status == CellStatus.QUESTIONED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.status == CellStatus.REVEALED

    @property
    def is_concealed(self) -> bool:
        """Check if cell is anything but revealed."""
        return self.status != CellStatus.REVEALED
