"""Greedy Rummikub move finder."""

from .board import Board
from .hand import Hand
from .meld import GroupShape, Meld, MeldKind, RunShape, is_group, is_run
from .move import Move, MoveKind
from .rules import Ruleset
from .solver import Solver, make_move
from .tiles import Color, Tile, parse_tile, tiles_from_codes

__all__ = [
    "Board",
    "Color",
    "GroupShape",
    "Hand",
    "Meld",
    "MeldKind",
    "Move",
    "MoveKind",
    "Ruleset",
    "RunShape",
    "Solver",
    "Tile",
    "is_group",
    "is_run",
    "make_move",
    "parse_tile",
    "tiles_from_codes",
]
