from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .tiles import Tile, format_tiles


class MoveKind(str, Enum):
    NEW_MELD = "NEW_MELD"
    STEAL = "STEAL"
    SPLIT_STEAL = "SPLIT_STEAL"
    APPEND = "APPEND"


@dataclass(frozen=True)
class Move:
    kind: MoveKind
    hand_tiles: Tuple[Tile, ...]
    stolen: Optional[Tile] = None
    at_start: bool = False

    @staticmethod
    def new_meld(tiles: Iterable[Tile]) -> "Move":
        return Move(MoveKind.NEW_MELD, tuple(tiles))

    @staticmethod
    def steal(stolen: Tile, pair: Tuple[Tile, Tile], split: bool) -> "Move":
        kind = MoveKind.SPLIT_STEAL if split else MoveKind.STEAL
        return Move(kind, tuple(pair), stolen=stolen)

    @staticmethod
    def append(tile: Tile, at_start: bool = False) -> "Move":
        return Move(MoveKind.APPEND, (tile,), at_start=at_start)

    def describe(self) -> str:
        tiles = format_tiles(self.hand_tiles)
        if self.kind == MoveKind.NEW_MELD:
            return f"play new meld {tiles}"
        if self.kind in (MoveKind.STEAL, MoveKind.SPLIT_STEAL):
            how = "splitting its run" if self.kind == MoveKind.SPLIT_STEAL else "from the board"
            return f"take {self.stolen} {how} and play it with {tiles}"
        where = "start" if self.at_start else "end"
        return f"add {tiles} at the {where} of a meld"
