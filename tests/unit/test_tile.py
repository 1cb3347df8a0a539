"""
Unit tests for Tile class.

Tests tile state management, reveal/flag behavior, glyphs and
observation conversion.
"""
from mines import Tile


# ============================================================================
# Tile Initialization Tests
# ============================================================================

class TestTileInitialization:
    """Test tile creation and default values."""

    def test_default_tile_is_not_mine(self) -> None:
        """New tile should not be a mine by default."""
        assert Tile().is_mine is False

    def test_default_tile_is_hidden_and_unflagged(self) -> None:
        """New tile should be hidden and unflagged."""
        tile = Tile()
        assert tile.revealed is False
        assert tile.flagged is False

    def test_default_tile_has_zero_adjacent_mines(self) -> None:
        """New tile should have 0 adjacent mines by default."""
        assert Tile().adjacent_mines == 0


# ============================================================================
# Tile Reveal Tests
# ============================================================================

class TestTileReveal:
    """Test tile reveal behavior."""

    def test_reveal_hidden_tile_returns_true(self, hidden_tile: Tile) -> None:
        """Revealing a hidden tile should succeed."""
        assert hidden_tile.reveal() is True
        assert hidden_tile.revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_tile: Tile
    ) -> None:
        """Revealing twice should report no change."""
        hidden_tile.reveal()
        assert hidden_tile.reveal() is False
        assert hidden_tile.revealed is True

    def test_reveal_flagged_tile_keeps_flag(self, hidden_tile: Tile) -> None:
        """Flags do not block revealing and are left untouched."""
        hidden_tile.toggle_flag()
        assert hidden_tile.reveal() is True
        assert hidden_tile.flagged is True


# ============================================================================
# Tile Flag Tests
# ============================================================================

class TestTileFlag:
    """Test tile flag behavior."""

    def test_toggle_flag_twice_clears_flag(self, hidden_tile: Tile) -> None:
        """Toggling twice should return the tile to unflagged."""
        assert hidden_tile.toggle_flag() is True
        assert hidden_tile.flagged is True
        assert hidden_tile.toggle_flag() is True
        assert hidden_tile.flagged is False

    def test_cannot_flag_revealed_tile(self, numbered_tile: Tile) -> None:
        """Revealed tiles cannot be flagged."""
        assert numbered_tile.toggle_flag() is False
        assert numbered_tile.flagged is False


# ============================================================================
# Glyph Tests
# ============================================================================

class TestTileGlyph:
    """Test the printed representation of tiles."""

    def test_glyph_progression(self) -> None:
        """Glyph follows reveal state, then mine, then count."""
        tile = Tile()
        assert str(tile) == "?"

        tile.flagged = True
        assert str(tile) == "!"

        tile.flagged = False
        tile.revealed = True
        assert str(tile) == "."

        tile.adjacent_mines = 2
        assert str(tile) == "2"

        tile.is_mine = True
        assert str(tile) == "*"

    def test_show_all_ignores_state(self, mine_tile: Tile) -> None:
        """Debug glyph shows tile contents even when hidden or flagged."""
        mine_tile.toggle_flag()
        assert mine_tile.glyph(show_all=True) == "*"
        assert Tile(adjacent_mines=4).glyph(show_all=True) == "4"
        assert Tile().glyph(show_all=True) == "."


# ============================================================================
# Observation Tests
# ============================================================================

class TestTileObservation:
    """Test numeric observation values."""

    def test_hidden_tile_observation(self, hidden_tile: Tile) -> None:
        assert hidden_tile.to_observation() == -1

    def test_flagged_tile_observation(self, hidden_tile: Tile) -> None:
        hidden_tile.toggle_flag()
        assert hidden_tile.to_observation() == -2

    def test_revealed_tile_shows_count(self, numbered_tile: Tile) -> None:
        assert numbered_tile.to_observation() == 3

    def test_revealed_mine_observation(self, mine_tile: Tile) -> None:
        mine_tile.reveal()
        assert mine_tile.to_observation() == 9
