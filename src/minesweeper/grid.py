"""
Grid module for Minesweeper game.

Owns the fixed-size field of cells, places mines at construction, and
derives every cell's neighbor count once placement is final.
"""
import logging
import random
from typing import Iterable, Iterator, List, Optional

from .cell import Cell
from .errors import InvalidArgumentError, OutOfBoundsError
from .levels import validate_dimensions
from .location import Location

logger = logging.getLogger(__name__)


class Grid:
    """
    Rectangular minefield stored as a flat row-major list of cells.

    Once constructed the dimensions and mine layout never change; only
    the status of the contained cells does.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
        mines: Optional[Iterable[Location]] = None,
    ) -> None:
        """
        Create a grid, hiding mines at random unless their locations are given.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines to hide, 0 < mine_count < width * height.
            rng: Random source used for placement. A fresh
                entropy-seeded generator is created when omitted.
            mines: Exact mine locations; replaces random placement and
                must hold mine_count distinct locations.

        Raises:
            InvalidArgumentError: If the dimensions or mine count are
                invalid, or mines disagrees with mine_count.
            OutOfBoundsError: If a given mine lies outside the grid.
        """
        validate_dimensions(width, height, mine_count)
        self._width = width
        self._height = height
        self._cells: List[Optional[Cell]] = [None] * (width * height)
        self._mines: List[Location] = []

        if mines is None:
            self._rng = rng if rng is not None else random.Random()
            self._hide_mines(mine_count)
        else:
            self._rng = rng
            self._lay_mines(list(mines), mine_count)

    @classmethod
    def from_mine_locations(
        cls, width: int, height: int, mines: Iterable[Location]
    ) -> "Grid":
        """
        Create a grid with mines at exactly the given locations.

        Raises:
            InvalidArgumentError: If a location repeats, the count is
                invalid, or the dimensions are invalid.
            OutOfBoundsError: If a mine lies outside the grid.
        """
        mines = list(mines)
        return cls(width, height, len(mines), mines=mines)

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _lay_mines(self, mines: List[Location], mine_count: int) -> None:
        if len(mines) != mine_count:
            raise InvalidArgumentError(
                f"Expected {mine_count} mine locations, got {len(mines)}"
            )
        if len(set(mines)) != len(mines):
            raise InvalidArgumentError("Duplicate mine locations")
        for location in mines:
            self._place(Cell(is_mine=True), location)
        self._finish_layout()

    def _hide_mines(self, mine_count: int) -> None:
        for _ in range(mine_count):
            self._place(Cell(is_mine=True), self._random_free_location())
        self._finish_layout()
        logger.debug(
            "Hid %d mines in %dx%d grid", mine_count, self._width, self._height
        )

    def _random_free_location(self) -> Location:
        """Pick random locations until an unoccupied one turns up."""
        while True:
            location = Location(
                self._rng.randrange(self._width),
                self._rng.randrange(self._height),
            )
            if self._cells[self._index(location)] is None:
                return location

    def _place(self, cell: Cell, location: Location) -> None:
        if not self.is_valid(location.x, location.y):
            raise OutOfBoundsError(f"Location {location} is outside the grid")
        self._cells[self._index(location)] = cell
        if cell.is_mine:
            self._mines.append(location)

    def _finish_layout(self) -> None:
        """Fill the remaining slots and derive the neighbor counts."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                self._cells[index] = Cell()
        for mine in self._mines:
            for neighbor in self.adjacent_locations(mine):
                self.cell_at(neighbor).increment_neighbor_count()

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def _index(self, location: Location) -> int:
        return location.y * self._width + location.x

    def is_valid(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, location: Location) -> Cell:
        """
        Get the cell at a location.

        Raises:
            OutOfBoundsError: If the location is outside the grid.
        """
        if not self.is_valid(location.x, location.y):
            raise OutOfBoundsError(f"Location {location} is outside the grid")
        return self._cells[self._index(location)]

    def adjacent_locations(self, location: Location) -> List[Location]:
        """
        Get the valid neighbors of a location.

        Neighbors are listed in row-major order over the surrounding
        3x3 block, excluding the center and anything off the grid.

        Raises:
            OutOfBoundsError: If the location itself is outside the grid.
        """
        if not self.is_valid(location.x, location.y):
            raise OutOfBoundsError(f"Location {location} is outside the grid")
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = location.x + delta_x
                new_y = location.y + delta_y
                if self.is_valid(new_x, new_y):
                    neighbors.append(Location(new_x, new_y))
        return neighbors

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def mine_count(self) -> int:
        return len(self._mines)

    def mine_locations(self) -> List[Location]:
        """Locations of every mine, in placement order."""
        return list(self._mines)

    def locations(self) -> Iterator[Location]:
        """Iterate over every location in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield Location(x, y)

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)
