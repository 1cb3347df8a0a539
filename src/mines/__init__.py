"""
Minesweeper board module.

Provides board construction, mine placement, coordinate mapping and
flood revealing. Playing the game is left to the caller.
"""
from .errors import AlreadyRevealed, BoardError, InvalidConfiguration, OutOfBounds
from .tile import Tile
from .board import Board, BoardConfig
from .geometry import grid_coords, linear_coords, surrounding_indices
from .flood import flood_reveal

__all__ = [
    "Tile",
    "Board",
    "BoardConfig",
    "BoardError",
    "InvalidConfiguration",
    "OutOfBounds",
    "AlreadyRevealed",
    "grid_coords",
    "linear_coords",
    "surrounding_indices",
    "flood_reveal",
]
