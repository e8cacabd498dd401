import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummisolver.board import Board
from rummisolver.hand import Hand
from rummisolver.meld import Meld
from rummisolver.tiles import tiles_from_codes


def test_hand_add_remove_and_snapshot():
    red_one, blue_two, joker = tiles_from_codes(["R1", "B2", "J"])
    hand = Hand()
    assert hand.is_empty()

    hand.add(red_one)
    hand.add(blue_two)
    snapshot = hand.snapshot()
    hand.add(joker)

    assert snapshot == (red_one, blue_two)
    assert hand.size() == 3
    assert joker in hand
    assert hand.remove(red_one) is True
    assert hand.remove(red_one) is False
    assert [t.code for t in hand.snapshot()] == ["B2", "J"]
    assert str(hand) == "Hand: B2 J"


def test_hand_copy_shares_tiles_but_not_storage():
    hand = Hand.of(tiles_from_codes(["R1", "R2"]))
    clone = hand.copy()
    clone.remove(clone.snapshot()[0])
    assert hand.size() == 2
    assert clone.size() == 1


def test_board_validity_tracks_every_meld():
    tiles = tiles_from_codes(["R3", "R4", "R5", "B7", "K7", "Y7", "R9", "B1", "K4"])
    board = Board()
    assert board.is_valid()

    board.add(Meld(tiles[0:3]))
    board.add(Meld(tiles[3:6]))
    assert board.is_valid()
    assert board.sets_count() == 2

    broken = Meld(tiles[6:9])
    board.add(broken)
    assert not board.is_valid()
    ok, reason = board.check()
    assert not ok
    assert reason.startswith("invalid meld 3")

    assert board.remove(broken) is True
    assert board.is_valid()


def test_board_removes_by_identity():
    first = Meld()
    second = Meld()
    board = Board([first, second])

    assert board.remove(second) is True
    assert board.snapshot() == (first,)
    assert board.snapshot()[0] is first
    assert board.remove(second) is False


def test_board_copy_is_deep_for_melds():
    meld = Meld(tiles_from_codes(["R3", "R4", "R5"]))
    board = Board([meld])
    clone = board.copy()
    clone.snapshot()[0].pop_at(0)

    assert len(meld) == 3
    assert [t.code for t in board.snapshot()[0].tiles] == ["R3", "R4", "R5"]
    assert str(board) == "Board containing 1 sets:\n1. [R3 R4 R5]"
