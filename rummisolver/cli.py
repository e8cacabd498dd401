from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from .board import Board
from .hand import Hand
from .meld import Meld
from .move import Move
from .solver import Solver
from .tiles import format_tiles, tiles_from_codes

logger = logging.getLogger(__name__)

MELD_SEPARATOR = "|"
FULL_TURN_LIMIT = 100


def parse_position(board_text: str, hand_text: str) -> Tuple[Board, Hand]:
    """Build a board and hand from tile codes, numbering tiles in order of appearance."""
    next_id = 0
    melds: List[Meld] = []
    for chunk in board_text.split(MELD_SEPARATOR):
        codes = chunk.split()
        if not codes:
            continue
        tiles = tiles_from_codes(codes, start_id=next_id)
        next_id += len(tiles)
        melds.append(Meld(tiles))
    hand_tiles = tiles_from_codes(hand_text.split(), start_id=next_id)
    return Board(melds), Hand(hand_tiles)


def play_turn(board: Board, hand: Hand, full_turn: bool = False, solver: Optional[Solver] = None) -> List[Move]:
    solver = solver or Solver()
    moves: List[Move] = []
    for _ in range(FULL_TURN_LIMIT):
        if not solver.make_move(board, hand, moves) or not full_turn:
            break
    return moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find the tiles a Rummikub hand can move onto the board.")
    parser.add_argument("--hand", required=True, help='Hand tile codes, e.g. "R1 R2 R3 B7 J".')
    parser.add_argument("--board", default="", help='Board melds separated by "|", e.g. "R4 R5 R6 | B7 K7 Y7".')
    parser.add_argument("--full-turn", action="store_true", help="Keep moving until no further play is found.")
    parser.add_argument("--verbose", action="store_true", help="Log every play the solver commits.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        board, hand = parse_position(args.board, args.hand)
    except ValueError as exc:
        parser.error(str(exc))

    ok, reason = board.check()
    if not ok:
        print(f"Starting board is not valid: {reason}")
        return 1

    moves = play_turn(board, hand, full_turn=args.full_turn)
    logger.info(f"{len(moves)} plays committed")
    if moves:
        for idx, move in enumerate(moves):
            print(f"{idx + 1}. {move.describe()}")
    else:
        print("No move available")
    print(board)
    print(f"Hand left: {format_tiles(hand.snapshot()) or '(empty)'}")
    print(f"Board valid: {board.is_valid()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
