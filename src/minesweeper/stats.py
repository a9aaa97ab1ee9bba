"""
Statistics module for Minesweeper game.

Aggregates cell counts across the grid and collects the locations whose
cells changed since the consumer last asked.
"""
from dataclasses import dataclass
from typing import Dict, List

from .cell import CellStatus
from .grid import Grid
from .location import Location


@dataclass(frozen=True)
class StatsSnapshot:
    """Point-in-time copy of the grid-wide counts."""

    hidden: int
    flagged: int
    questioned: int
    mines: int
    revealed_mines: int

    @property
    def concealed(self) -> int:
        return self.hidden + self.flagged + self.questioned


class GridStats:
    """
    Snapshot of grid-wide counts plus a pending-change accumulator.

    Counts are recomputed from scratch by refresh(); they are stale
    between a grid mutation and the next refresh.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._hidden = 0
        self._flagged = 0
        self._questioned = 0
        self._mines = 0
        self._revealed_mines = 0
        # dict keeps insertion order and doubles as an ordered set
        self._pending: Dict[Location, None] = {}

    def refresh(self) -> None:
        """
        Rescan every cell in row-major order.

        Dirty cells have their location queued for the next drain (once,
        however many times they changed) and their dirty flag cleared.
        """
        hidden = flagged = questioned = mines = revealed_mines = 0

        for location, cell in zip(self._grid.locations(), self._grid.cells()):
            if cell.take_dirty():
                self._pending.setdefault(location, None)

            if cell.is_mine:
                mines += 1
                if cell.is_revealed:
                    revealed_mines += 1

            if cell.status == CellStatus.HIDDEN:
                hidden += 1
            elif cell.status == CellStatus.FLAGGED:
                flagged += 1
            elif cell.status == CellStatus.QUESTIONED:
                questioned += 1

        self._hidden = hidden
        self._flagged = flagged
        self._questioned = questioned
        self._mines = mines
        self._revealed_mines = revealed_mines

    def snapshot(self) -> StatsSnapshot:
        """Copy the counts from the last refresh."""
        return StatsSnapshot(
            hidden=self._hidden,
            flagged=self._flagged,
            questioned=self._questioned,
            mines=self._mines,
            revealed_mines=self._revealed_mines,
        )

    def drain_pending_changes(self) -> List[Location]:
        """
        Return and forget the locations changed since the last drain.

        Returns:
            Distinct locations in the order they were first seen dirty.
        """
        pending = list(self._pending)
        self._pending = {}
        return pending

    @property
    def hidden(self) -> int:
        return self._hidden

    @property
    def flagged(self) -> int:
        return self._flagged

    @property
    def questioned(self) -> int:
        return self._questioned

    @property
    def concealed(self) -> int:
        """Cells not yet revealed, whatever their mark."""
        return self._hidden + self._flagged + self._questioned

    @property
    def mines(self) -> int:
        return self._mines

    @property
    def revealed_mines(self) -> int:
        return self._revealed_mines
