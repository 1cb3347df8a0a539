"""
Board module for Minesweeper.

Implements the board with mine placement, adjacent mine counts,
coordinate mapping and the reveal operation. Game flow (turns, win and
loss detection) is left to the caller.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import AlreadyRevealed, InvalidConfiguration, OutOfBounds
from .flood import flood_reveal
from .geometry import Coordinate, grid_coords, linear_coords, surrounding_indices
from .tile import Tile

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Fixes the mine layout for reproducible boards.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.size - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board.

    Owns a row-major sequence of tiles. Mines are placed and adjacent
    counts computed once at construction; afterwards only the revealed
    and flagged state of tiles changes. Queries hand out copies, never
    the tiles themselves.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    mine_layout: Optional[Sequence[int]] = field(default=None, repr=False)
    _tiles: List[Tile] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the tile grid after dataclass creation."""
        self._init_tiles()
        if self.mine_layout is None:
            self._place_mines()
        else:
            self._place_mine_layout(self.mine_layout)
        self._calculate_adjacent_mines()
        logger.debug(
            "Built %dx%d board with %d mines",
            self.width, self.height, self.num_mines,
        )

    # ========================================================================
    # Constructors
    # ========================================================================

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        mine_count: int,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Create a board with randomly placed mines.

        Raises:
            InvalidConfiguration: If dimensions or mine count are invalid.
        """
        return cls(BoardConfig(width, height, mine_count, seed))

    @classmethod
    def default(cls) -> "Board":
        """Create an 8x8 board with 10 mines."""
        return cls(BoardConfig())

    @classmethod
    def with_mines(cls, width: int, height: int, mines: Iterable[int]) -> "Board":
        """
        Create a board with mines at the given tile indices.

        Raises:
            InvalidConfiguration: If dimensions are invalid, or the layout
                repeats an index or points outside the board.
        """
        layout = tuple(mines)
        return cls(BoardConfig(width, height, len(layout)), mine_layout=layout)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_tiles(self) -> None:
        """Create a grid of empty, hidden tiles."""
        self._tiles = [Tile() for _ in range(self.size)]

    def _place_mines(self) -> None:
        """Place mines uniformly at random without replacement."""
        rng = self.rng
        if rng is None:
            rng = random.Random(self.config.seed)
        for index in rng.sample(range(self.size), self.num_mines):
            self._tiles[index].is_mine = True

    def _place_mine_layout(self, layout: Sequence[int]) -> None:
        """Place mines at fixed indices."""
        if len(set(layout)) != len(layout):
            raise InvalidConfiguration("Mine layout contains duplicate indices")
        if len(layout) != self.num_mines:
            raise InvalidConfiguration(
                f"Mine layout has {len(layout)} mines, expected {self.num_mines}"
            )
        for index in layout:
            if not 0 <= index < self.size:
                raise InvalidConfiguration(
                    f"Mine index {index} is outside the board (size {self.size})"
                )
        for index in layout:
            self._tiles[index].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all tiles."""
        for index, tile in enumerate(self._tiles):
            tile.adjacent_mines = sum(
                1 for neighbor in self.surrounding_tiles(index)
                if self._tiles[neighbor].is_mine
            )

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def linear_coords(self, coord: Coordinate) -> int:
        """Map (row, col) to a tile index. Out-of-range input is not checked."""
        return linear_coords(coord, self.width)

    def grid_coords(self, index: int) -> Coordinate:
        """Map a tile index to (row, col)."""
        return grid_coords(index, self.width)

    def surrounding_tiles(self, index: int) -> List[int]:
        """Indices of the 8-connected neighbors of a tile."""
        return surrounding_indices(index, self.width, self.size)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise OutOfBounds(index, self.size)

    # ========================================================================
    # Board Actions (Mid-level)
    # ========================================================================

    def reveal_tile(self, index: int) -> None:
        """
        Reveal the tile at ``index``, cascading through empty regions.

        Revealing a mine succeeds; deciding that the game is over is up
        to the caller. Flags neither block the reveal nor are cleared by
        it.

        Raises:
            OutOfBounds: If ``index`` is not on the board.
            AlreadyRevealed: If the tile has already been revealed.
        """
        self._check_index(index)
        if self._tiles[index].revealed:
            raise AlreadyRevealed(index)

        revealed = flood_reveal(self._tiles, index, self.surrounding_tiles)
        logger.debug("Revealed tile %d (%d tiles uncovered)", index, len(revealed))

    def reveal_at(self, coord: Coordinate) -> None:
        """
        Reveal the tile at (row, col).

        Raises:
            OutOfBounds: If the coordinate is not on the board.
            AlreadyRevealed: If the tile has already been revealed.
        """
        row, col = coord
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBounds(self.linear_coords(coord), self.size)
        self.reveal_tile(self.linear_coords(coord))

    def toggle_flag(self, index: int) -> bool:
        """
        Toggle the flag on an unrevealed tile.

        Returns:
            The new flag state.

        Raises:
            OutOfBounds: If ``index`` is not on the board.
            AlreadyRevealed: If the tile has already been revealed.
        """
        self._check_index(index)
        tile = self._tiles[index]
        if not tile.toggle_flag():
            raise AlreadyRevealed(index)
        return tile.flagged

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        """Copies of all tiles in row-major order."""
        return tuple(replace(tile) for tile in self._tiles)

    @property
    def revealed_count(self) -> int:
        """Number of revealed tiles."""
        return sum(1 for tile in self._tiles if tile.revealed)

    def tile(self, index: int) -> Tile:
        """Get a copy of the tile at ``index``."""
        self._check_index(index)
        return replace(self._tiles[index])

    def is_revealed(self, index: int) -> bool:
        self._check_index(index)
        return self._tiles[index].revealed

    def is_flagged(self, index: int) -> bool:
        self._check_index(index)
        return self._tiles[index].flagged

    def is_mine(self, index: int) -> bool:
        """Whether the tile is a mine, revealed or not (debug use)."""
        self._check_index(index)
        return self._tiles[index].is_mine

    def adjacent_mine_count(self, index: int) -> int:
        """Mines among the tile's neighbors. Meaningful for non-mine tiles."""
        self._check_index(index)
        return self._tiles[index].adjacent_mines

    def mine_indices(self) -> List[int]:
        """Indices of every mine on the board."""
        return [index for index, tile in enumerate(self._tiles) if tile.is_mine]

    def hidden_indices(self) -> List[int]:
        """Indices of tiles that can still be revealed."""
        return [
            index for index, tile in enumerate(self._tiles) if not tile.revealed
        ]

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self, show_all: bool = False) -> List[str]:
        """
        Render the board as rows of single-character glyphs.

        Args:
            show_all: Show every tile as if revealed (debug view).

        Returns:
            One string per row: ``?`` hidden, ``!`` flagged, ``.`` empty,
            ``1``-``8`` numbered, ``*`` mine.
        """
        glyphs = [tile.glyph(show_all) for tile in self._tiles]
        return [
            "".join(glyphs[start:start + self.width])
            for start in range(0, self.size, self.width)
        ]

    def debug_view(self) -> str:
        """Board contents with every tile shown."""
        return "\n".join(self.render(show_all=True))

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (tile.to_observation() for tile in self._tiles),
            dtype=np.int8,
            count=self.size,
        )
        return obs.reshape(self.height, self.width)

    def __str__(self) -> str:
        return "\n".join(self.render())
