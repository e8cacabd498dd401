import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummisolver.tiles import Color, Tile, parse_tile, tiles_from_codes


def test_tiles_compare_by_id_only():
    red_five = Tile.regular(1, 5, Color.RED)
    same_id = Tile.regular(1, 9, Color.BLUE)
    twin = Tile.regular(2, 5, Color.RED)

    assert red_five == same_id
    assert hash(red_five) == hash(same_id)
    assert red_five != twin
    assert len({red_five, same_id, twin}) == 2


@pytest.mark.parametrize("value", [0, 14, -3])
def test_regular_tile_rejects_out_of_range_value(value):
    with pytest.raises(ValueError):
        Tile.regular(0, value, Color.RED)


def test_wildcard_has_no_value_or_color():
    joker = Tile.wildcard(7)
    assert joker.is_wildcard
    assert joker.value is None
    assert joker.color is None
    assert joker.code == "J"
    assert joker.value_key() == 0


def test_parse_tile_codes():
    tile = parse_tile("k12", 3)
    assert tile.id == 3
    assert tile.color == Color.BLACK
    assert tile.value == 12
    assert str(tile) == "K12"
    assert parse_tile("J", 4).is_wildcard


@pytest.mark.parametrize("code", ["", "R", "X5", "R14", "Rx", "JJ"])
def test_parse_tile_rejects_bad_codes(code):
    with pytest.raises(ValueError):
        parse_tile(code, 0)


def test_tiles_from_codes_numbers_sequentially():
    tiles = tiles_from_codes(["R1", "J", "Y13"], start_id=10)
    assert [t.id for t in tiles] == [10, 11, 12]


def test_sort_key_orders_colors_then_values_with_wildcards_last():
    tiles = tiles_from_codes(["J", "Y1", "R9", "B2", "R3", "K5"])
    ordered = sorted(tiles, key=Tile.sort_key)
    assert [t.code for t in ordered] == ["R3", "R9", "B2", "K5", "Y1", "J"]
