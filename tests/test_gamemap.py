import pytest

from tilecrawl.gamemap import (
    GameMap,
    MapError,
    check_shape,
    check_walls,
    count_points,
    find_player,
    is_solvable,
    load_map,
    read_map,
    verify_map,
)

VALID = ["111111", "1PC0E1", "10C001", "111111"]


def write(tmp_path, text):
    path = tmp_path / "level.ber"
    path.write_text(text)
    return path


def test_read_map_splits_lines(tmp_path):
    path = write(tmp_path, "\n".join(VALID) + "\n")
    assert read_map(path) == [list(row) for row in VALID]


def test_read_map_without_final_newline(tmp_path):
    path = write(tmp_path, "\n".join(VALID))
    assert read_map(path) == [list(row) for row in VALID]


def test_read_map_empty_file(tmp_path):
    with pytest.raises(MapError):
        read_map(write(tmp_path, ""))


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.ber")


def test_check_shape_returns_size():
    assert check_shape(VALID) == (len(VALID[0]), len(VALID))


def test_check_shape_rejects_ragged():
    with pytest.raises(MapError, match="rectangle"):
        check_shape(["1111", "111", "1111"])


@pytest.mark.parametrize(
    "grid",
    [
        ["111", "0P1", "111"],
        ["111", "1P0", "111"],
        ["101", "1P1", "111"],
        ["111", "1P1", "110"],
    ],
)
def test_check_walls_rejects_open_border(grid):
    with pytest.raises(MapError, match="walls"):
        check_walls(grid)


def test_count_points():
    assert count_points(VALID) == (2, 1, 1)


def test_count_points_rejects_unknown_tile():
    with pytest.raises(MapError):
        count_points(["1111", "1PX1", "1111"])


def test_find_player_points_at_player():
    x, y = find_player(VALID)
    assert VALID[y][x] == "P"


def test_find_player_missing():
    with pytest.raises(MapError):
        find_player(["111", "101", "111"])


def test_is_solvable_true_for_valid_map():
    start = find_player(VALID)
    assert is_solvable(VALID, start, count_points(VALID).collectibles) is True


def test_is_solvable_false_when_exit_walled_off():
    grid = ["111111", "1PC1E1", "111111"]
    assert is_solvable(grid, find_player(grid), 1) is False


def test_is_solvable_false_when_coin_walled_off():
    grid = ["1111111", "1P0E1C1", "1111111"]
    assert is_solvable(grid, find_player(grid), 1) is False


def test_is_solvable_leaves_grid_unchanged():
    grid = [list(row) for row in VALID]
    before = [row.copy() for row in grid]
    is_solvable(grid, find_player(grid), 2)
    assert grid == before


def test_verify_map_valid():
    game_map = verify_map(VALID)
    x, y = game_map.player
    assert game_map.grid[y][x] == "P"
    assert game_map.collectibles == count_points(VALID).collectibles
    assert (game_map.columns, game_map.rows) == check_shape(VALID)


@pytest.mark.parametrize(
    "grid",
    [
        ["11111", "1P0E1", "11111"],
        ["111111", "1PCEE1", "111111"],
        ["111111", "1PPCE1", "111111"],
        ["11111", "1PCE1", "11110"],
        ["11111", "1PCE1", "1111"],
        ["111111", "1PC1E1", "111111"],
        ["11111", "1PCE1", "1Z111"],
    ],
)
def test_verify_map_rejects(grid):
    with pytest.raises(MapError):
        verify_map(grid)


def test_load_map_round_trip(tmp_path):
    game_map = load_map(write(tmp_path, "\n".join(VALID) + "\n"))
    assert ["".join(row) for row in game_map.grid] == VALID


def test_copy_grid_is_independent():
    game_map = verify_map(VALID)
    copy = game_map.copy_grid()
    copy[1][1] = "0"
    assert copy != game_map.grid
    assert ["".join(row) for row in game_map.grid] == VALID


def test_game_map_dimensions():
    game_map = GameMap([list(row) for row in VALID], 2, (1, 1))
    assert game_map.rows == len(VALID)
    assert game_map.columns == len(VALID[0])