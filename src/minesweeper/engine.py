"""
Engine module for Minesweeper game.

The single entry point a presentation layer talks to: it owns the grid
and its statistics, implements the flood-fill reveal, and decides when
the game is won or lost.
"""
import logging
import random
import threading
import time
from collections import deque
from enum import Enum, auto
from typing import Callable, Deque, List, Optional, Set

import numpy as np

from .cell import CellView
from .errors import InvalidStateError, OutOfBoundsError
from .grid import Grid
from .levels import GameLevel
from .location import Location
from .stats import GridStats, StatsSnapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """How a finished game ended."""

    WON = auto()
    LOST = auto()


# ============================================================================
# Engine Class
# ============================================================================

class Engine:
    """
    Minesweeper game engine.

    Commands (reveal, cycle_flag) and queries are serialized by a single
    re-entrant lock, so a refresh timer on another thread can poll the
    elapsed time and changed cells while the player acts.
    """

    def __init__(
        self,
        grid: Grid,
        level: Optional[GameLevel] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Start a game on an already constructed grid.

        Args:
            grid: The minefield to play on.
            level: Difficulty the grid was built for, if any.
            clock: Monotonic time source in seconds.
        """
        self._grid = grid
        self._level = level
        self._clock = clock
        self._lock = threading.RLock()
        self._stats = GridStats(grid)
        self._stats.refresh()
        self._in_progress = True
        self._won = False
        self._start_time = clock()
        self._elapsed = 0
        logger.info(
            "New game: %dx%d with %d mines",
            grid.width, grid.height, self._stats.mines,
        )

    @classmethod
    def for_level(
        cls,
        level: GameLevel,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Engine":
        """Start a game with a preset difficulty."""
        grid = Grid(level.width, level.height, level.num_mines, rng=rng)
        return cls(grid, level=level, clock=clock)

    # ========================================================================
    # Coordinates (Low-level)
    # ========================================================================

    def _location(self, x: int, y: int) -> Location:
        if not self._grid.is_valid(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside the {self._grid.width}x"
                f"{self._grid.height} minefield"
            )
        return Location(x, y)

    def is_valid_location(self, x: int, y: int) -> bool:
        """Check if (x, y) lies on the minefield."""
        return self._grid.is_valid(x, y)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal the cell at (x, y), cascading through empty areas.

        Raises:
            OutOfBoundsError: If (x, y) is outside the minefield.
            InvalidStateError: If the cell is already revealed or the
                game has ended.
        """
        with self._lock:
            location = self._location(x, y)
            if not self._in_progress:
                raise InvalidStateError("Cannot reveal after the game has ended")
            if self._grid.cell_at(location).is_revealed:
                raise InvalidStateError(
                    f"Cannot reveal {location}: already revealed"
                )

            revealed = self._flood_reveal(location)
            logger.debug("Revealed %s (%d cells)", location, revealed)
            self._stats.refresh()
            self._check_game_over()

    def _flood_reveal(self, start: Location) -> int:
        """
        Reveal start and, through every empty cell, its neighbors.

        Each location is queued at most once per call, so the cyclic
        neighbor graph cannot loop.

        Returns:
            Number of cells newly revealed.
        """
        queue: Deque[Location] = deque([start])
        seen: Set[Location] = {start}
        revealed = 0

        while queue:
            location = queue.popleft()
            cell = self._grid.cell_at(location)
            was_concealed = cell.is_concealed
            cascade = cell.reveal()
            if was_concealed:
                revealed += 1
            if not cascade:
                continue
            for neighbor in self._grid.adjacent_locations(location):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)

        return revealed

    def cycle_flag(self, x: int, y: int) -> None:
        """
        Cycle the mark on (x, y): hidden, flagged, questioned, hidden.

        Revealed cells are left alone. Once the game has ended this is
        ignored.

        Raises:
            OutOfBoundsError: If (x, y) is outside the minefield.
        """
        with self._lock:
            location = self._location(x, y)
            if not self._in_progress:
                logger.debug("Ignoring flag at %s: game over", location)
                return
            cell = self._grid.cell_at(location)
            cell.cycle_flag()
            logger.debug("Cycled %s to %s", location, cell.status.name)
            self._stats.refresh()

    # ========================================================================
    # Win / Loss Detection
    # ========================================================================

    def _check_game_over(self) -> None:
        """
        End the game if it has been won or lost.

        Winning only requires that every concealed cell must be a mine;
        whether the flags are on the right cells does not matter.
        """
        if self._stats.concealed == self._stats.mines:
            self._end_game(won=True)
        elif self._stats.revealed_mines > 0:
            self._end_game(won=False)

    def _end_game(self, won: bool) -> None:
        self._won = won
        self._in_progress = False
        self._reveal_all_mines()
        self._elapsed = self._running_seconds()
        logger.info(
            "Game %s after %d seconds", "won" if won else "lost", self._elapsed
        )

    def _reveal_all_mines(self) -> None:
        for mine in self._grid.mine_locations():
            self._grid.cell_at(mine).reveal()
        self._stats.refresh()

    def _running_seconds(self) -> int:
        return int(self._clock() - self._start_time)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def level(self) -> Optional[GameLevel]:
        return self._level

    @property
    def stats(self) -> StatsSnapshot:
        """Counts as of the last completed command."""
        with self._lock:
            return self._stats.snapshot()

    def cell_view(self, x: int, y: int) -> CellView:
        """
        Get a read-only snapshot of the cell at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the minefield.
        """
        with self._lock:
            return self._grid.cell_at(self._location(x, y)).view()

    def drain_changed_locations(self) -> List[Location]:
        """Locations whose cells changed since the previous call."""
        with self._lock:
            return self._stats.drain_pending_changes()

    def remaining_mines(self) -> int:
        """
        Mines minus flags placed.

        Goes negative when the player places more flags than there are
        mines, like the counter on the classic game.
        """
        with self._lock:
            return self._stats.mines - self._stats.flagged

    def elapsed_seconds(self) -> int:
        """Whole seconds played; stops counting once the game ends."""
        with self._lock:
            if self._in_progress:
                self._elapsed = self._running_seconds()
            return self._elapsed

    def is_in_progress(self) -> bool:
        with self._lock:
            return self._in_progress

    def outcome(self) -> Optional[GameOutcome]:
        """WON or LOST once the game has ended, else None."""
        with self._lock:
            if self._in_progress:
                return None
            return GameOutcome.WON if self._won else GameOutcome.LOST

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array indexed [y, x].

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                -3 = questioned
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        with self._lock:
            obs = np.empty((self.height, self.width), dtype=np.int8)
            for location, cell in zip(self._grid.locations(), self._grid.cells()):
                obs[location.y, location.x] = cell.view().to_observation()
            return obs

    def get_valid_actions(self) -> List[Location]:
        """Locations that can still be revealed."""
        with self._lock:
            return [
                location
                for location, cell in zip(self._grid.locations(), self._grid.cells())
                if cell.is_concealed
            ]

    def render(self) -> str:
        """Render the visible board as rows of ASCII symbols."""
        lines = []
        obs = self.get_observation()
        for row in obs:
            lines.append(" ".join(_SYMBOLS.get(int(val), str(val)) for val in row))
        return "\n".join(lines)


_SYMBOLS = {-1: ".", -2: "F", -3: "?", 0: " ", 9: "*"}


def new_game(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Engine:
    """
    Start a game on a freshly mined grid.

    Raises:
        InvalidArgumentError: If the dimensions or mine count are invalid.
    """
    return Engine(Grid(width, height, mine_count, rng=rng))
