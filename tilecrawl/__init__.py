"""Tile-based puzzle game: map checking, game state, an XPM sprite reader and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]