"""Command that loads a map and plays it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from tilecrawl.game import Game, MoveResult
from tilecrawl.gamemap import MapError, load_map
from tilecrawl.image import Image
from tilecrawl.render import TILE_SIZE, Sprites, load_sprites, render
from tilecrawl.xpm import XpmError

SPRITES_DIR = Path("textures")
TITLE = "tilecrawl"


def _to_rgb(image: Image) -> bytes:
    return b"".join(
        (image.get_pixel(x, y) & 0xFFFFFF).to_bytes(3, "big")
        for y in range(image.height)
        for x in range(image.width)
    )


def _draw(pygame, screen, game: Game, sprites: Sprites) -> None:
    canvas = render(game.grid, sprites, TILE_SIZE)
    surface = pygame.image.frombuffer(_to_rgb(canvas), (canvas.width, canvas.height), "RGB").copy()
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _play(game: Game, sprites: Sprites) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.columns * TILE_SIZE, game.rows * TILE_SIZE))
        pygame.display.set_caption(TITLE)
        _draw(pygame, screen, game, sprites)
        while not game.finished:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            result = game.handle_key(pygame.key.name(event.key))
            if result is MoveResult.MOVED:
                print(game.moves)
                _draw(pygame, screen, game, sprites)
            elif result is MoveResult.WON:
                print("You won")
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(f"Error:\n{exc}")
        return 1
    try:
        sprites = load_sprites(SPRITES_DIR)
    except (OSError, XpmError) as exc:
        print(f"Error:\ncannot load sprites: {exc}")
        return 1
    _play(Game(game_map), sprites)
    return 0


if __name__ == "__main__":
    sys.exit(main())