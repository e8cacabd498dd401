import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummisolver.cli import main, parse_position, play_turn
from rummisolver.move import MoveKind


def test_parse_position_numbers_tiles_uniquely():
    board, hand = parse_position("R4 R5 R6 | B7 K7 Y7 |", "R1 J")
    ids = [t.id for meld in board.snapshot() for t in meld.tiles] + [t.id for t in hand.snapshot()]

    assert board.sets_count() == 2
    assert ids == list(range(8))
    assert hand.snapshot()[1].is_wildcard


def test_play_turn_stops_after_one_call_unless_full_turn():
    board, hand = parse_position("B7 K7 Y7", "R7 B8 B9")
    moves = play_turn(board, hand)
    assert [m.kind for m in moves] == [MoveKind.APPEND]
    assert hand.size() == 2

    moves = play_turn(board, hand, full_turn=True)
    assert [m.kind for m in moves] == [MoveKind.STEAL]
    assert hand.is_empty()


def test_main_prints_plays_and_final_position(capsys):
    code = main(["--hand", "R1 R2 R3 B7 K7 Y7"])
    out = capsys.readouterr().out

    assert code == 0
    assert "1. play new meld R1 R2 R3" in out
    assert "2. play new meld B7 K7 Y7" in out
    assert "Board containing 2 sets:" in out
    assert "Hand left: (empty)" in out
    assert "Board valid: True" in out


def test_main_reports_when_nothing_moves(capsys):
    code = main(["--hand", "B9", "--board", "R1 R2 R3"])
    out = capsys.readouterr().out

    assert code == 0
    assert "No move available" in out
    assert "Hand left: B9" in out


def test_main_rejects_invalid_starting_board(capsys):
    code = main(["--hand", "R1", "--board", "R1 B2 K3"])
    assert code == 1
    assert "Starting board is not valid" in capsys.readouterr().out


def test_main_rejects_bad_tile_code():
    with pytest.raises(SystemExit) as exc_info:
        main(["--hand", "R1 Z9"])
    assert exc_info.value.code == 2
