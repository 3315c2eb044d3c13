import pytest

from tilecrawl.game import (
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Action,
    Game,
    MoveResult,
    key_to_action,
)
from tilecrawl.gamemap import verify_map


def make_game(*rows):
    return Game(verify_map(rows))


@pytest.mark.parametrize(
    "key, action",
    [
        (0xFF1B, Action.QUIT),
        (KEY_W, Action.UP),
        (KEY_UP, Action.UP),
        (KEY_S, Action.DOWN),
        (KEY_DOWN, Action.DOWN),
        (KEY_A, Action.LEFT),
        (KEY_LEFT, Action.LEFT),
        (KEY_D, Action.RIGHT),
        (KEY_RIGHT, Action.RIGHT),
        ("W", Action.UP),
        ("escape", Action.QUIT),
    ],
)
def test_key_to_action(key, action):
    assert key_to_action(key) is action


def test_key_to_action_unknown():
    assert key_to_action(ord("q")) is None
    assert key_to_action("space") is None


def test_move_onto_floor_and_collectible():
    game = make_game("111111", "1P0CE1", "111111")
    x0, y0 = game.player
    start = game.collectibles
    assert game.move(Action.RIGHT) is MoveResult.MOVED
    assert game.player == (x0 + 1, y0)
    assert game.tile(x0, y0) == "0"
    assert game.tile(x0 + 1, y0) == "P"
    assert game.move(Action.RIGHT) is MoveResult.MOVED
    assert game.collectibles == start - 1


def test_wall_blocks_move():
    game = make_game("11111", "1PCE1", "11111")
    before = game.player
    assert game.move(Action.UP) is MoveResult.BLOCKED
    assert game.player == before
    assert game.moves == 0
    assert game.tile(*before) == "P"


def test_win_after_collecting():
    game = make_game("11111", "1PCE1", "11111")
    assert game.move(Action.RIGHT) is MoveResult.MOVED
    assert game.move(Action.RIGHT) is MoveResult.WON
    assert game.won and game.finished
    assert game.move(Action.LEFT) is MoveResult.IGNORED


def test_exit_tile_restored_after_passing():
    game = make_game("111111", "1PEC01", "111111")
    assert game.move(Action.RIGHT) is MoveResult.MOVED
    exit_pos = game.player
    assert game.tile(*exit_pos) == "P"
    assert game.won is False
    assert game.move(Action.RIGHT) is MoveResult.MOVED
    assert game.tile(*exit_pos) == "E"
    assert game.collectibles == 0
    assert game.move(Action.LEFT) is MoveResult.WON


def test_moves_counted():
    game = make_game("1111111", "1P00CE1", "1111111")
    results = [game.move(Action.RIGHT) for _ in range(2)]
    assert results == [MoveResult.MOVED, MoveResult.MOVED]
    assert game.moves == len(results)


def test_handle_key_unknown_and_escape():
    game = make_game("11111", "1PCE1", "11111")
    assert game.handle_key(ord("q")) is MoveResult.IGNORED
    assert game.handle_key(0xFF1B) is MoveResult.QUIT
    assert game.quit and game.finished


def test_handle_key_moves_player():
    game = make_game("11111", "1PCE1", "11111")
    x0, y0 = game.player
    assert game.handle_key(KEY_D) is MoveResult.MOVED
    assert game.player == (x0 + 1, y0)


def test_game_does_not_change_map():
    game_map = verify_map(["11111", "1PCE1", "11111"])
    before = game_map.copy_grid()
    game = Game(game_map)
    game.move(Action.RIGHT)
    assert game_map.grid == before
    assert game.grid != before


def test_tile_out_of_range():
    game = make_game("11111", "1PCE1", "11111")
    with pytest.raises(IndexError):
        game.tile(-1, 0)
    with pytest.raises(IndexError):
        game.tile(0, game.rows)