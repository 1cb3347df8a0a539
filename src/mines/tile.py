"""
Tile module for Minesweeper boards.

A tile holds its mine flag, its adjacent mine count and the two pieces
of player-facing state: whether it has been revealed and whether it
carries a flag.
"""
from dataclasses import dataclass


# ============================================================================
# Glyphs
# ============================================================================

HIDDEN_GLYPH = "?"
FLAG_GLYPH = "!"
EMPTY_GLYPH = "."
MINE_GLYPH = "*"


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        is_mine: Whether this tile contains a mine.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
        revealed: Whether the tile has been uncovered. Never reverts.
        flagged: Player marker; has no effect on revealing.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    flagged: bool = False

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if the tile was newly revealed, False if it already was.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this tile.

        Returns:
            True if the flag was toggled, False if the tile is revealed.
        """
        if self.revealed:
            return False
        self.flagged = not self.flagged
        return True

    def glyph(self, show_all: bool = False) -> str:
        """
        Single character used when printing the board.

        Args:
            show_all: Ignore reveal and flag state and show what lies
                underneath (debug view).
        """
        if not show_all and not self.revealed:
            return FLAG_GLYPH if self.flagged else HIDDEN_GLYPH
        if self.is_mine:
            return MINE_GLYPH
        if self.adjacent_mines == 0:
            return EMPTY_GLYPH
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert tile to a numeric observation value.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine
        """
        if not self.revealed:
            return -2 if self.flagged else -1
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def __str__(self) -> str:
        return self.glyph()
