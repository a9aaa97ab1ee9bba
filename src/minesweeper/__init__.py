"""
Minesweeper game engine.

Provides the grid and cell model, mine placement, flood-fill reveal,
change tracking, and win/loss detection.
"""
from .errors import (
    MinesweeperError,
    InvalidArgumentError,
    OutOfBoundsError,
    InvalidStateError,
)
from .location import Location
from .cell import Cell, CellStatus, CellView
from .grid import Grid
from .stats import GridStats, StatsSnapshot
from .levels import BoardConfig, GameLevel, SUPER_EASY, EASY, MODERATE, HARD
from .engine import Engine, GameOutcome, new_game
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "MinesweeperError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "InvalidStateError",
    "Location",
    "Cell",
    "CellStatus",
    "CellView",
    "Grid",
    "GridStats",
    "StatsSnapshot",
    "BoardConfig",
    "GameLevel",
    "SUPER_EASY",
    "EASY",
    "MODERATE",
    "HARD",
    "Engine",
    "GameOutcome",
    "new_game",
    "MinesweeperEnv",
    "make_vec_env",
]
