"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src and the project root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from mines import Board, BoardConfig, Tile


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 mines."""
    return Board.default()


@pytest.fixture
def seeded_board() -> Board:
    """Create a reproducible 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10, seed=1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.new(5, 5, 0)


@pytest.fixture
def corner_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

        .....
        .....
        .....
        ...11
        ...1*
    """
    return Board.with_mines(5, 5, [24])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a column of mines down the middle.

        .2*2.
        .3*3.
        .3*3.
        .3*3.
        .2*2.
    """
    return Board.with_mines(5, 5, [2, 7, 12, 17, 22])


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)


@pytest.fixture
def numbered_tile() -> Tile:
    """Create a revealed tile with adjacent mines."""
    tile = Tile(adjacent_mines=3)
    tile.reveal()
    return tile
