"""Greedy move finder.

A call to :meth:`Solver.make_move` runs three stages once each, in priority
order, repeating every stage until it stops finding plays:

1. play complete runs and groups straight from the hand;
2. take one tile off a board meld to finish a pair held in the hand,
   splitting a long run in two when the tile sits in its middle;
3. lay off single hand tiles onto the ends of existing melds.

The search never backtracks and only looks at the first candidate that works
in each sub-step, so it can miss plays an exhaustive search would find.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable, Iterator, List, Optional, Sequence

from .board import Board
from .hand import Hand
from .meld import MIN_MELD_SIZE, GroupShape, Meld, MeldShape, RunShape
from .move import Move
from .rules import Ruleset
from .tiles import Tile

logger = logging.getLogger(__name__)

Stage = Callable[[Board, Hand, Optional[List[Move]]], bool]


def _could_pair(first: Tile, second: Tile) -> bool:
    """Cheap pre-check before validating; a wildcard can complete anything, so it always passes."""
    if first.is_wildcard or second.is_wildcard:
        return True
    if first.value == second.value and first.color != second.color:
        return True
    if first.color == second.color:
        return abs(first.value - second.value) in (1, 2)
    return False


class Solver:
    def __init__(self, ruleset: Ruleset | None = None):
        self.ruleset = ruleset or Ruleset()

    def make_move(self, board: Board, hand: Hand, moves: Optional[List[Move]] = None) -> bool:
        """Move as many hand tiles onto the board as the greedy stages allow.

        Args:
            board: Board to restructure in place.
            hand: Hand to draw tiles from; played tiles are removed.
            moves: Optional list that receives a :class:`Move` per committed play.

        Returns:
            True if at least one tile left the hand.
        """
        stages: Sequence[Stage] = (
            self._play_new_meld_from_hand,
            self._steal_for_pair,
            self._append_single_tile,
        )
        progress = False
        for stage in stages:
            if self._repeat(stage, board, hand, moves):
                progress = True
        return progress

    def _repeat(self, stage: Stage, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        succeeded = False
        for _ in range(self.ruleset.max_stage_iterations):
            if not stage(board, hand, moves):
                return succeeded
            succeeded = True
        logger.warning(
            f"{stage.__name__} still finding plays after {self.ruleset.max_stage_iterations} iterations, stopping"
        )
        return succeeded

    # Stage 1

    def _play_new_meld_from_hand(self, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        if self._find_and_play_run(board, hand, moves):
            return True
        return self._find_and_play_group(board, hand, moves)

    def _find_and_play_run(self, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        tiles = sorted(hand.snapshot(), key=Tile.sort_key)
        for i, start in enumerate(tiles):
            if start.is_wildcard:
                continue
            candidate = [start]
            needed = start.value + 1
            for current in tiles[i + 1 :]:
                if current.color != start.color:
                    break
                if current.value == needed:
                    candidate.append(current)
                    needed += 1
            if len(candidate) >= MIN_MELD_SIZE and self._place_new_meld(board, hand, candidate, moves):
                return True
        return False

    def _find_and_play_group(self, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        tiles = sorted(hand.snapshot(), key=Tile.value_key)
        for i, first in enumerate(tiles):
            if first.is_wildcard:
                continue
            candidate = [first]
            for other in tiles[i + 1 :]:
                if other.value == first.value and all(t.color != other.color for t in candidate):
                    candidate.append(other)
            if len(candidate) >= MIN_MELD_SIZE and self._place_new_meld(board, hand, candidate, moves):
                return True
        return False

    def _place_new_meld(self, board: Board, hand: Hand, tiles: List[Tile], moves: Optional[List[Move]]) -> bool:
        meld = Meld(tiles)
        if not meld.is_valid():
            return False
        board.add(meld)
        for tile in tiles:
            hand.remove(tile)
        logger.debug(f"played {meld} from hand")
        if moves is not None:
            moves.append(Move.new_meld(tiles))
        return True

    # Stage 2

    def _steal_for_pair(self, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        for source in board.snapshot():
            shape = source.shape()
            for index in self._steal_indices(source, shape):
                if self._try_steal_at(board, hand, source, shape, index, moves):
                    return True
        return False

    def _steal_indices(self, meld: Meld, shape: Optional[MeldShape]) -> Iterator[int]:
        size = len(meld)
        if isinstance(shape, GroupShape):
            if size >= self.ruleset.steal_min_size:
                yield from range(size)
        elif isinstance(shape, RunShape):
            if size >= self.ruleset.steal_min_size:
                yield 0
                yield size - 1
            if size >= self.ruleset.middle_split_min_size():
                keep = self.ruleset.split_remainder_size
                yield from range(keep, size - keep)

    def _try_steal_at(
        self,
        board: Board,
        hand: Hand,
        source: Meld,
        shape: MeldShape,
        index: int,
        moves: Optional[List[Move]],
    ) -> bool:
        stolen = source.tiles[index]
        if stolen.is_wildcard:
            return False

        for first, second in combinations(hand.snapshot(), 2):
            if not _could_pair(first, second):
                continue
            new_meld = Meld(sorted([stolen, first, second], key=Tile.sort_key))
            if not new_meld.is_valid():
                continue

            split = isinstance(shape, RunShape) and index not in (0, len(source) - 1)
            if split:
                remainders = [Meld(source.tiles[:index]), Meld(source.tiles[index + 1 :])]
            else:
                remainders = [Meld(source.tiles[:index] + source.tiles[index + 1 :])]
            if not all(piece.is_valid() for piece in remainders):
                logger.debug(f"cannot take {stolen} from {source}: what remains would be invalid")
                return False

            if split:
                board.remove(source)
                for piece in remainders:
                    board.add(piece)
                logger.debug(f"split {source} into {remainders[0]} and {remainders[1]}")
            else:
                source.pop_at(index)
            board.add(new_meld)

            hand.remove(first)
            hand.remove(second)
            logger.debug(f"took {stolen} to play {new_meld}")
            if moves is not None:
                moves.append(Move.steal(stolen, (first, second), split))
            return True
        return False

    # Stage 3

    def _append_single_tile(self, board: Board, hand: Hand, moves: Optional[List[Move]]) -> bool:
        for meld in board.snapshot():
            shape = meld.shape()
            if shape is None:
                continue
            for tile in hand.snapshot():
                at_start = _append_position(shape, tile)
                if at_start is None:
                    continue
                extended = [tile] + meld.tiles if at_start else meld.tiles + [tile]
                if not Meld(extended).is_valid():
                    continue
                if at_start:
                    meld.insert(0, tile)
                else:
                    meld.append(tile)
                hand.remove(tile)
                logger.debug(f"added {tile} to {meld}")
                if moves is not None:
                    moves.append(Move.append(tile, at_start))
                return True
        return False


def _append_position(shape: MeldShape, tile: Tile) -> Optional[bool]:
    """Where ``tile`` would go on a meld of ``shape``: False for the end, True for the start."""
    if tile.is_wildcard:
        return None
    if isinstance(shape, GroupShape):
        if tile.color in shape.missing_colors and tile.value == shape.value:
            return False
        return None
    if tile.color != shape.color:
        return None
    if tile.value == shape.next_value:
        return False
    if tile.value == shape.preceding_value:
        return True
    return None


def make_move(board: Board, hand: Hand, moves: Optional[List[Move]] = None) -> bool:
    return Solver().make_move(board, hand, moves)
