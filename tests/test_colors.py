import pytest

from tilecrawl.colors import COLORS, NONE, lookup_color, parse_color


def test_lookup_known_name():
    assert lookup_color("snow") == 0xFFFAFA


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_none_is_transparent():
    assert lookup_color("none") == NONE
    assert parse_color("None") == -1


def test_parse_hex():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#00ff00") == lookup_color("green")


def test_parse_invalid_hex_is_zero():
    assert parse_color("#zz") == 0


def test_parse_two_word_name():
    assert parse_color("ghost", "white") == lookup_color("ghost white")
    assert parse_color("navy", "blue") == 0x80


def test_parse_unknown_is_zero():
    assert parse_color("nonexistent") == 0
    assert parse_color("no", "such") == 0


def test_parse_without_suffix_matches_lookup():
    for name, value in COLORS.items():
        assert parse_color(name) == value


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_values_fit_rgb():
    assert all(0 <= value <= 0xFFFFFF for name, value in COLORS.items() if name != "none")