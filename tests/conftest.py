"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports, and the repo root for the CLI helpers
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Cell, Engine, Grid, Location


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def seeded_grid() -> Grid:
    """A beginner-sized grid with a fixed random layout."""
    return Grid(9, 9, 10, rng=random.Random(1234))


@pytest.fixture
def corner_mine_grid() -> Grid:
    """9x9 grid with a single mine in the top-left corner."""
    return Grid.from_mine_locations(9, 9, [Location(0, 0)])


@pytest.fixture
def center_mine_grid() -> Grid:
    """3x3 grid with its only mine in the middle."""
    return Grid.from_mine_locations(3, 3, [Location(1, 1)])


@pytest.fixture
def two_mine_grid() -> Grid:
    """
    5x5 grid with mines at (0, 0) and (4, 4).

    Layout (x across, y down):
        * 1 . . .
        1 1 . . .
        . . . . .
        . . . 1 1
        . . . 1 *
    """
    return Grid.from_mine_locations(5, 5, [Location(0, 0), Location(4, 4)])


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def corner_engine(corner_mine_grid: Grid, clock: FakeClock) -> Engine:
    """Engine on the 9x9 single corner mine grid."""
    return Engine(corner_mine_grid, clock=clock)


@pytest.fixture
def center_engine(center_mine_grid: Grid, clock: FakeClock) -> Engine:
    """Engine on the 3x3 grid with the mine in the middle."""
    return Engine(center_mine_grid, clock=clock)


@pytest.fixture
def two_mine_engine(two_mine_grid: Grid, clock: FakeClock) -> Engine:
    """Engine on the 5x5 grid with two opposite corner mines."""
    return Engine(two_mine_grid, clock=clock)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a hidden cell with three adjacent mines."""
    return Cell(neighbor_mine_count=3)
