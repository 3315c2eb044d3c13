"""Tile sprites and drawing a map into an image."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from tilecrawl.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL
from tilecrawl.image import Image
from tilecrawl.xpm import xpm_file_to_image

TILE_SIZE = 50

SPRITE_FILES = {
    "player": "player.xpm",
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "collectible": "collectible.xpm",
    "exit": "exit.xpm",
}


@dataclass
class Sprites:
    """One image for each kind of tile."""

    player: Image
    wall: Image
    floor: Image
    collectible: Image
    exit: Image

    def for_tile(self, tile: str) -> Image | None:
        """Return the sprite drawn for ``tile``, or None if nothing is drawn."""
        return {
            WALL: self.wall,
            FLOOR: self.floor,
            EXIT: self.exit,
            COLLECTIBLE: self.collectible,
            PLAYER: self.player,
        }.get(tile)


def load_sprites(directory: str | Path) -> Sprites:
    """Load every sprite from the XPM files in ``directory``."""
    base = Path(directory)
    images = {field: xpm_file_to_image(base / name) for field, name in SPRITE_FILES.items()}
    return Sprites(**images)


def render(grid: Sequence[Sequence[str]], sprites: Sprites, tile_size: int = TILE_SIZE) -> Image:
    """Draw every tile of ``grid`` into a new image, one sprite per tile."""
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    canvas = Image(columns * tile_size, rows * tile_size)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            sprite = sprites.for_tile(tile)
            if sprite is not None:
                canvas.blit(sprite, x * tile_size, y * tile_size)
    return canvas