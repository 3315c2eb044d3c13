"""Loading and validating game maps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain
from pathlib import Path
from typing import NamedTuple

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

_TILES = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})

Grid = Sequence[Sequence[str]]


class MapError(ValueError):
    """Raised when a map cannot be read or is not playable."""


class PointCounts(NamedTuple):
    """How many collectibles, exits and starting points a map holds."""

    collectibles: int
    exits: int
    starts: int


@dataclass
class GameMap:
    """A validated map: its tiles, its collectible count and where the player starts."""

    grid: list[list[str]]
    collectibles: int
    player: tuple[int, int]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def copy_grid(self) -> list[list[str]]:
        """Return an independent copy of the tiles."""
        return [row.copy() for row in self.grid]


def read_map(path: str | Path) -> list[list[str]]:
    """Read a map file into rows of tile characters.

    Each line is one row; a final newline does not start a new row.
    """
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError(f"cannot read map {path}: {exc.strerror or exc}") from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not lines:
        raise MapError(f"map {path} is empty")
    return [list(line) for line in lines]


def check_shape(grid: Grid) -> tuple[int, int]:
    """Check that all rows have the same length; return (width, height)."""
    if not grid:
        raise MapError("map is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MapError("Map is not a rectangle")
    return width, len(grid)


def check_walls(grid: Grid) -> None:
    """Check that the outer border of the map is all wall."""
    if not grid or not grid[0]:
        raise MapError("Map not surrounded by walls")
    border = chain(
        grid[0],
        grid[-1],
        (row[0] for row in grid),
        (row[-1] for row in grid),
    )
    if any(tile != WALL for tile in border):
        raise MapError("Map not surrounded by walls")


def count_points(grid: Grid) -> PointCounts:
    """Count collectibles, exits and starts, rejecting unknown tiles."""
    collectibles = exits = starts = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile not in _TILES:
                raise MapError(f"incorrect character {tile!r} at ({x}, {y})")
            if tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exits += 1
            elif tile == PLAYER:
                starts += 1
    return PointCounts(collectibles, exits, starts)


def find_player(grid: Grid) -> tuple[int, int]:
    """Return the (x, y) of the player; the last one found if there are several."""
    found = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                found = (x, y)
    if found is None:
        raise MapError("map has no player")
    return found


def is_solvable(grid: Grid, start: tuple[int, int], coins: int) -> bool:
    """Tell whether every collectible and exactly one exit can be reached from ``start``."""
    seen: set[tuple[int, int]] = set()
    stack = [start]
    found_coins = found_exits = 0
    while stack:
        x, y = stack.pop()
        if (x, y) in seen:
            continue
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        tile = grid[y][x]
        if tile == WALL:
            continue
        seen.add((x, y))
        if tile == COLLECTIBLE:
            found_coins += 1
        elif tile == EXIT:
            found_exits += 1
        stack.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))
    return found_coins == coins and found_exits == 1


def verify_map(grid: Grid) -> GameMap:
    """Validate a grid and return it as a :class:`GameMap`."""
    tiles = [list(row) for row in grid]
    check_shape(tiles)
    counts = count_points(tiles)
    if counts.collectibles == 0 or counts.exits != 1 or counts.starts != 1:
        raise MapError("Wrong number of points or incorrect characters")
    check_walls(tiles)
    player = find_player(tiles)
    if not is_solvable(tiles, player, counts.collectibles):
        raise MapError("No possible exit")
    return GameMap(tiles, counts.collectibles, player)


def load_map(path: str | Path) -> GameMap:
    """Read and validate a map file."""
    return verify_map(read_map(path))