from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

MIN_VALUE = 1
MAX_VALUE = 13
WILDCARD_CODE = "J"


class Color(str, Enum):
    RED = "R"
    BLUE = "B"
    BLACK = "K"
    YELLOW = "Y"


ALL_COLORS: Tuple[Color, ...] = tuple(Color)
_COLOR_RANK = {color: rank for rank, color in enumerate(ALL_COLORS)}


@dataclass(frozen=True)
class Tile:
    """A physical tile. Identity is the id alone; value and color ride along."""

    id: int
    value: Optional[int] = field(default=None, compare=False)
    color: Optional[Color] = field(default=None, compare=False)
    is_wildcard: bool = field(default=False, compare=False)

    @classmethod
    def regular(cls, tile_id: int, value: int, color: Color) -> "Tile":
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise ValueError(f"tile value must be within {MIN_VALUE}..{MAX_VALUE}, got {value}")
        return cls(tile_id, value, Color(color))

    @classmethod
    def wildcard(cls, tile_id: int) -> "Tile":
        return cls(tile_id, None, None, True)

    @property
    def code(self) -> str:
        if self.is_wildcard:
            return WILDCARD_CODE
        return f"{self.color.value}{self.value}"

    def sort_key(self) -> Tuple[int, int]:
        if self.is_wildcard:
            return (len(ALL_COLORS), 0)
        return (_COLOR_RANK[self.color], self.value)

    def value_key(self) -> int:
        return 0 if self.is_wildcard else self.value

    def __str__(self) -> str:
        return self.code


def parse_tile(code: str, tile_id: int) -> Tile:
    text = code.strip().upper()
    if text == WILDCARD_CODE:
        return Tile.wildcard(tile_id)
    if len(text) < 2:
        raise ValueError(f"invalid tile code '{code}'")
    try:
        color = Color(text[0])
    except ValueError:
        raise ValueError(f"invalid tile color in '{code}'") from None
    if not text[1:].isdigit():
        raise ValueError(f"invalid tile value in '{code}'")
    return Tile.regular(tile_id, int(text[1:]), color)


def tiles_from_codes(codes: Iterable[str], start_id: int = 0) -> List[Tile]:
    return [parse_tile(code, start_id + offset) for offset, code in enumerate(codes)]


def format_tiles(tiles: Iterable[Tile]) -> str:
    return " ".join(tile.code for tile in tiles)
