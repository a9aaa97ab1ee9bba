"""
Difficulty configuration for Minesweeper.

BoardConfig validates a width/height/mine triple; GameLevel names the
standard presets offered to the player.
"""
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidArgumentError


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

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
        validate_dimensions(self.width, self.height, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


def validate_dimensions(width: int, height: int, num_mines: int) -> None:
    """
    Ensure a board shape is playable.

    Raises:
        InvalidArgumentError: If a dimension is not positive or the mine
            count is outside (0, width * height).
    """
    if width < 1 or height < 1:
        raise InvalidArgumentError(
            f"Board dimensions must be positive, got {width}x{height}"
        )
    if num_mines < 1:
        raise InvalidArgumentError(
            f"Board needs at least one mine, got {num_mines}"
        )
    max_mines = width * height - 1
    if num_mines > max_mines:
        raise InvalidArgumentError(
            f"Too many mines: {num_mines} (max {max_mines})"
        )


# Preset difficulty levels
SUPER_EASY = BoardConfig(9, 9, 4)
EASY = BoardConfig(9, 9, 9)
MODERATE = BoardConfig(16, 16, 40)
HARD = BoardConfig(30, 16, 99)


# ============================================================================
# Game Levels
# ============================================================================

class GameLevel(Enum):
    """Named difficulty levels, numbered from easiest to hardest."""

    SUPER_EASY = ("Super Easy", 0, SUPER_EASY)
    EASY = ("Easy", 1, EASY)
    MODERATE = ("Moderate", 2, MODERATE)
    HARD = ("Hard", 3, HARD)

    def __init__(self, description: str, number: int, config: BoardConfig) -> None:
        self.description = description
        self.number = number
        self.config = config

    def __str__(self) -> str:
        return self.description

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @classmethod
    def from_number(cls, number: int) -> "GameLevel":
        """Look up a level by its number (0 = easiest)."""
        for level in cls:
            if level.number == number:
                return level
        raise InvalidArgumentError(f"Unknown level number: {number}")

    @classmethod
    def from_name(cls, name: str) -> "GameLevel":
        """Look up a level by name, e.g. "hard" or "super-easy"."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgumentError(f"Unknown level name: {name!r}") from None
