"""
Exception hierarchy for the Minesweeper engine.

Every engine failure derives from MinesweeperError, and each concrete
error also subclasses the closest builtin so callers can catch either.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(MinesweeperError, ValueError):
    """Malformed construction parameters (coordinates, dimensions, mines)."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Coordinate outside the extent of the grid."""


class InvalidStateError(MinesweeperError, RuntimeError):
    """Operation not valid given the current cell or game state."""
