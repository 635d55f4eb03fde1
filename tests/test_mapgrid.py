import pytest

from cubmap.config import Config
from cubmap.mapgrid import (
    MapError,
    copy_map,
    flood_fill,
    is_invalid_tile,
    is_map_char,
    is_walkable,
    parse_map,
)

CLOSED = [
    "11111",
    "10001",
    "10N01",
    "11111",
]

OPEN = [
    "11111",
    "10001",
    "10N0 ",
    "11111",
]


def test_copy_map_is_independent():
    grid = copy_map(CLOSED)
    grid[1][1] = "Z"
    assert CLOSED[1][1] == "0"
    assert ["".join(row) for row in copy_map(CLOSED)] == CLOSED


def test_flood_fill_closed_map():
    grid = copy_map(CLOSED)
    assert flood_fill(grid, 2, 2) is True
    for row, original in zip(grid, CLOSED):
        for tile, before in zip(row, original):
            if is_walkable(before):
                assert tile == "x"
            else:
                assert tile == before


def test_flood_fill_detects_gap():
    assert flood_fill(copy_map(OPEN), 2, 2) is False


def test_flood_fill_detects_edge():
    grid = copy_map(["1111", "1N0", "1111"])
    assert flood_fill(grid, 1, 1) is False


def test_flood_fill_short_row_below():
    grid = copy_map(["11111", "10001", "111"])
    assert flood_fill(grid, 3, 1) is False


def test_flood_fill_start_on_wall():
    assert flood_fill(copy_map(OPEN), 0, 0) is True


def test_flood_fill_start_on_space():
    assert flood_fill(copy_map([" 1"]), 0, 0) is False


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
def test_flood_fill_start_out_of_bounds(x, y):
    assert flood_fill(copy_map(CLOSED), x, y) is False


def test_flood_fill_large_area_does_not_recurse():
    width = 400
    rows = ["1" * width] + ["1" + "0" * (width - 2) + "1"] * 300 + ["1" * width]
    assert flood_fill(copy_map(rows), 1, 1) is True


@pytest.mark.parametrize("c", list("01NSEWD \t"))
def test_is_map_char_accepts(c):
    assert is_map_char(c)


@pytest.mark.parametrize("c", list("2Xx\n,"))
def test_is_map_char_rejects(c):
    assert not is_map_char(c)


def test_tile_predicates():
    assert is_invalid_tile(" ") and is_invalid_tile("\0")
    assert not is_invalid_tile("1")
    assert all(is_walkable(c) for c in "0NSEWD")
    assert not any(is_walkable(c) for c in "1 x")


def test_parse_map_valid():
    lines = ["NO a.xpm\n", "\n", "  111\n", "\n", "1N1 \r\n", "111"]
    config = Config()
    rows = parse_map(config, lines, 2)
    assert rows == ["111", "1N1", "111"]
    assert config.map == rows
    assert config.height == len(rows)
    assert config.player_count == 1


def test_parse_map_no_player():
    config = Config()
    with pytest.raises(MapError, match="error, invalid number of players"):
        parse_map(config, ["111\n", "101\n", "111\n"], 0)
    assert config.player_count == 0


def test_parse_map_two_players():
    config = Config()
    with pytest.raises(MapError, match="error, invalid number of players"):
        parse_map(config, ["1111\n", "1NS1\n", "1111\n"], 0)
    assert config.height == 3


def test_parse_map_invalid_character():
    with pytest.raises(MapError, match="error, invalid character"):
        parse_map(Config(), ["111\n", "1N2\n", "111\n"], 0)


def test_parse_map_ignores_text_after_carriage_return():
    config = Config()
    rows = parse_map(config, ["1N1\r?\n"], 0)
    assert config.player_count == 1
    assert rows == ["1N1\r?"]