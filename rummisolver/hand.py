from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .tiles import Tile, format_tiles


@dataclass
class Hand:
    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.tiles = list(self.tiles)

    @classmethod
    def of(cls, tiles: Iterable[Tile]) -> "Hand":
        return cls(list(tiles))

    def add(self, tile: Tile) -> None:
        self.tiles.append(tile)

    def remove(self, tile: Tile) -> bool:
        try:
            self.tiles.remove(tile)
        except ValueError:
            return False
        return True

    def snapshot(self) -> Tuple[Tile, ...]:
        """Point-in-time copy; scan this while mutating the hand itself."""
        return tuple(self.tiles)

    def size(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def copy(self) -> "Hand":
        return Hand(list(self.tiles))

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, tile: object) -> bool:
        return tile in self.tiles

    def __str__(self) -> str:
        return f"Hand: {format_tiles(self.tiles)}"
