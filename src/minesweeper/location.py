"""
Location module for Minesweeper game.

Immutable (x, y) coordinate used to address cells on the grid.
"""
from dataclasses import dataclass
from typing import Iterator

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Location:
    """
    A point in a rectangular grid.

    Attributes:
        x: Column index, zero-based.
        y: Row index, zero-based.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        """Reject negative coordinates."""
        if self.x < 0:
            raise InvalidArgumentError(
                f"Location with negative x-coordinate: {self.x}"
            )
        if self.y < 0:
            raise InvalidArgumentError(
                f"Location with negative y-coordinate: {self.y}"
            )

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
