"""Game state and player movement."""

from __future__ import annotations

from enum import Enum

from tilecrawl.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

# X11 keysyms of the keys the game reacts to.
KEY_ESCAPE = 0xFF1B
KEY_LEFT = 0xFF51
KEY_UP = 0xFF52
KEY_RIGHT = 0xFF53
KEY_DOWN = 0xFF54
KEY_W = ord("w")
KEY_A = ord("a")
KEY_S = ord("s")
KEY_D = ord("d")


class Action(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"


class MoveResult(Enum):
    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_DELTAS = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

_KEYSYMS = {
    KEY_ESCAPE: Action.QUIT,
    KEY_W: Action.UP,
    KEY_UP: Action.UP,
    KEY_S: Action.DOWN,
    KEY_DOWN: Action.DOWN,
    KEY_D: Action.RIGHT,
    KEY_RIGHT: Action.RIGHT,
    KEY_A: Action.LEFT,
    KEY_LEFT: Action.LEFT,
}

_KEY_NAMES = {
    "escape": Action.QUIT,
    "w": Action.UP,
    "up": Action.UP,
    "s": Action.DOWN,
    "down": Action.DOWN,
    "d": Action.RIGHT,
    "right": Action.RIGHT,
    "a": Action.LEFT,
    "left": Action.LEFT,
}


def key_to_action(key: int | str) -> Action | None:
    """Map an X11 keysym or a key name to an action, or None if the key does nothing."""
    if isinstance(key, str):
        return _KEY_NAMES.get(key.lower())
    return _KEYSYMS.get(key)


class Game:
    """A game in progress on a copy of a validated map."""

    def __init__(self, game_map: GameMap):
        self.grid = game_map.copy_grid()
        self.collectibles = game_map.collectibles
        self.player = game_map.player
        self.moves = 0
        self.won = False
        self.quit = False
        self._on_exit = False

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def finished(self) -> bool:
        return self.won or self.quit

    def tile(self, x: int, y: int) -> str:
        """Return the tile at (x, y)."""
        if not (0 <= y < self.rows and 0 <= x < self.columns):
            raise IndexError(f"tile ({x}, {y}) outside the map")
        return self.grid[y][x]

    def move(self, action: Action) -> MoveResult:
        """Apply an action and report what happened."""
        if self.finished:
            return MoveResult.IGNORED
        if action is Action.QUIT:
            self.quit = True
            return MoveResult.QUIT
        dx, dy = _DELTAS[action]
        px, py = self.player
        nx, ny = px + dx, py + dy
        target = self.tile(nx, ny)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.grid[py][px] = EXIT if self._on_exit else FLOOR
        self._on_exit = target == EXIT
        self.grid[ny][nx] = PLAYER
        self.player = (nx, ny)
        self.moves += 1
        if target == EXIT and self.collectibles == 0:
            self.won = True
            return MoveResult.WON
        return MoveResult.MOVED

    def handle_key(self, key: int | str) -> MoveResult:
        """Apply the action bound to ``key``."""
        action = key_to_action(key)
        if action is None:
            return MoveResult.IGNORED
        return self.move(action)