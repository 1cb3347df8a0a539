"""
Error types raised by the Minesweeper board.

Every failure is raised before the board is mutated, so a caught error
always leaves the board exactly as it was before the call.
"""


class BoardError(Exception):
    """Base class for all board errors."""


class InvalidConfiguration(BoardError, ValueError):
    """Board dimensions or mine layout cannot be built."""


class OutOfBounds(BoardError, IndexError):
    """A tile index lies outside the board."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Tile index {index} is out of bounds (size {size})")
        self.index = index
        self.size = size


class AlreadyRevealed(BoardError):
    """The requested tile has already been revealed."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Tile {index} is already revealed")
        self.index = index
