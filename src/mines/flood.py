"""
Flood-reveal traversal.

Reveals a starting tile and, when it touches no mines, every tile
reachable from it through other mine-free zero tiles. The frontier of
the revealed region is made of numbered tiles.
"""
import logging
from collections import deque
from typing import Callable, Deque, List, Sequence

from .tile import Tile

logger = logging.getLogger(__name__)


def flood_reveal(
    tiles: Sequence[Tile],
    start: int,
    neighbors: Callable[[int], List[int]],
) -> List[int]:
    """
    Reveal ``start`` and cascade through connected zero tiles.

    Uses an explicit work-list so board size is not limited by the
    interpreter's recursion depth. Every tile is revealed at most once
    and only unrevealed tiles are queued, so the walk is linear in the
    number of tiles. Flags are ignored: a flagged tile inside the region
    is revealed and keeps its flag bit.

    Args:
        tiles: Row-major tile sequence, mutated in place.
        start: Index of the tile to reveal. Must be unrevealed.
        neighbors: Returns the 8-connected neighbor indices of an index.

    Returns:
        Indices that were newly revealed, in reveal order.
    """
    revealed: List[int] = []
    if not tiles[start].reveal():
        return revealed
    revealed.append(start)

    pending: Deque[int] = deque([start])
    while pending:
        index = pending.popleft()
        tile = tiles[index]
        if tile.is_mine or tile.adjacent_mines > 0:
            continue
        for neighbor in neighbors(index):
            if tiles[neighbor].reveal():
                revealed.append(neighbor)
                pending.append(neighbor)

    logger.debug("Flood from %d revealed %d tiles", start, len(revealed))
    return revealed
