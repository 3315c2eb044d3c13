# tilecrawl

A small tile-based puzzle game. You move a player across a rectangular,
walled map. You collect every coin and then step onto the exit.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
tilecrawl path/to/level.ber
```

The command takes exactly one argument, the map file. With any other number
of arguments it does nothing and exits with status 0.

The game loads its sprites from a directory named `textures` in the current
working directory. The directory must hold five XPM files: `player.xpm`,
`wall.xpm`, `floor.xpm`, `collectible.xpm` and `exit.xpm`. Each tile is drawn
50 pixels square. The window is drawn with pygame.

Move with `W`/`A`/`S`/`D` or the arrow keys. You cannot walk into walls.
`Esc` or closing the window quits. The game prints the move count after each
step. When you reach the exit with every coin collected, it prints `You won`
and ends. If you step on the exit while coins remain, you only pass over it.

If the map or the sprites cannot be loaded, the command prints `Error:`
followed by the reason and exits with status 1.

## Map format

A map is a plain text file with one row per line. A trailing newline at the
end of the file is allowed. The characters are:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | coin         |
| `E`  | exit         |
| `P`  | player start |

A map is accepted only when all of these hold:

- every row has the same length;
- it uses only the characters above;
- it has at least one coin, exactly one exit and exactly one start;
- its border is made of walls;
- every coin and the exit can be reached from the start.

A map that fails any of these checks raises `tilecrawl.gamemap.MapError`.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

- `tilecrawl.gamemap`: `read_map(path)` reads a file into a grid of characters, `verify_map(grid)` checks it and returns a `GameMap`, and `load_map(path)` does both. The separate checks `check_shape`, `check_walls`, `count_points`, `find_player` and `is_solvable` are available too.
- `tilecrawl.game`: `Game(game_map)` holds the state of one game. `Game.move(action)` takes an `Action`. `Game.handle_key(key)` takes an X11 keysym or a key name such as `"w"` or `"left"`. Both return a `MoveResult` (`IGNORED`, `BLOCKED`, `MOVED`, `WON` or `QUIT`). `Game.tile(x, y)`, `Game.moves` and `Game.collectibles` report the current state. `key_to_action(key)` gives the action bound to a key.
- `tilecrawl.image.Image`: a block of packed pixels of 8, 16, 24 or 32 bits per pixel, little or big endian, with rows padded to 32 bits. It has `set_pixel`, `get_pixel`, `row`, `fill` and a clipping `blit`.
- `tilecrawl.xpm`: `xpm_file_to_image(path)` reads an XPM file written in C source form. `xpm_to_image(lines)` and `parse_xpm(lines)` take the XPM strings directly. Colours may be `#RRGGBB`, X11 colour names or `none`. Pixels of colour `none` get the value `0xFF000000`. Malformed data raises `XpmError`.
- `tilecrawl.colors`: `lookup_color(name)` resolves an X11 colour name, ignoring case, and raises `KeyError` for unknown names. `parse_color(name, suffix)` resolves an XPM colour specification.
- `tilecrawl.visual`: `mask_shifts(red_mask, green_mask, blue_mask)` and `convert_color(color, depth, shifts)` turn `0xRRGGBB` colours into pixel values for TrueColor visuals shallower than 24 bits.
- `tilecrawl.render`: `load_sprites(directory)` loads a `Sprites` set, and `render(grid, sprites, tile_size)` draws a grid into a new `Image`.

## What it does not do

The package ships no sprite images and no levels. You must supply the
`textures` directory and a map file yourself. Transparent (`none`) pixels in
sprites are drawn black on screen. There is no on-screen move counter or win
screen; both appear only as text on standard output.