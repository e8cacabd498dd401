from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple, Union

from .tiles import ALL_COLORS, MAX_VALUE, Color, Tile, format_tiles

MIN_MELD_SIZE = 3
MAX_GROUP_SIZE = 4


class MeldKind(str, Enum):
    RUN = "RUN"
    GROUP = "GROUP"
    INVALID = "INVALID"


@dataclass(frozen=True)
class GroupShape:
    value: Optional[int]
    missing_colors: FrozenSet[Color]


@dataclass(frozen=True)
class RunShape:
    color: Color
    logical_start: int
    logical_end: int

    @property
    def next_value(self) -> Optional[int]:
        if self.logical_end + 1 > MAX_VALUE:
            return None
        return self.logical_end + 1

    @property
    def preceding_value(self) -> Optional[int]:
        if self.logical_start <= 1:
            return None
        return self.logical_start - 1


MeldShape = Union[GroupShape, RunShape]


def _group_problem(tiles: Sequence[Tile]) -> Optional[str]:
    if len(tiles) > MAX_GROUP_SIZE:
        return "group too large"
    target_value: Optional[int] = None
    colors_seen = set()
    for tile in tiles:
        if tile.is_wildcard:
            continue
        if target_value is None:
            target_value = tile.value
        elif tile.value != target_value:
            return "group must share value"
        if tile.color in colors_seen:
            return "group colors must be distinct"
        colors_seen.add(tile.color)
    return None


def _run_problem(tiles: Sequence[Tile]) -> Optional[str]:
    wildcards = 0
    numbered: List[Tile] = []
    for tile in tiles:
        if tile.is_wildcard:
            wildcards += 1
        else:
            numbered.append(tile)
    if not numbered:
        return "run needs a numbered tile"
    if len({tile.color for tile in numbered}) != 1:
        return "run must have same color"

    numbered.sort(key=lambda t: t.value)
    expected = numbered[0].value
    for tile in numbered:
        while expected < tile.value:
            if wildcards == 0:
                return "run must be consecutive"
            wildcards -= 1
            expected += 1
        if tile.value != expected:
            return "run must not duplicate value"
        expected += 1
    return None


def is_group(tiles: Sequence[Tile]) -> bool:
    return _group_problem(tiles) is None


def is_run(tiles: Sequence[Tile]) -> bool:
    return _run_problem(tiles) is None


@dataclass(eq=False)
class Meld:
    """An ordered line of tiles on the board.

    Order is meaningful: index 0 and the last index are the edges of a run, and
    single tiles are appended or prepended in place.
    """

    tiles: List[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.tiles = list(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __str__(self) -> str:
        return f"[{format_tiles(self.tiles)}]"

    def size(self) -> int:
        return len(self.tiles)

    def copy(self) -> "Meld":
        return Meld(list(self.tiles))

    def append(self, tile: Tile) -> None:
        self.tiles.append(tile)

    def insert(self, index: int, tile: Tile) -> None:
        if 0 <= index <= len(self.tiles):
            self.tiles.insert(index, tile)

    def remove(self, tile: Tile) -> bool:
        try:
            self.tiles.remove(tile)
        except ValueError:
            return False
        return True

    def pop_at(self, index: int) -> Optional[Tile]:
        if 0 <= index < len(self.tiles):
            return self.tiles.pop(index)
        return None

    def check(self) -> Tuple[bool, str]:
        if len(self.tiles) < MIN_MELD_SIZE:
            return False, "meld too short"
        group_reason = _group_problem(self.tiles)
        if group_reason is None:
            return True, ""
        run_reason = _run_problem(self.tiles)
        if run_reason is None:
            return True, ""
        return False, f"{group_reason}; {run_reason}"

    def is_valid(self) -> bool:
        return self.check()[0]

    def classify(self) -> MeldKind:
        if not self.is_valid():
            return MeldKind.INVALID
        if is_group(self.tiles):
            return MeldKind.GROUP
        return MeldKind.RUN

    def shape(self) -> Optional[MeldShape]:
        kind = self.classify()
        if kind == MeldKind.GROUP:
            numbered = [t for t in self.tiles if not t.is_wildcard]
            value = numbered[0].value if numbered else None
            present = {t.color for t in numbered}
            return GroupShape(value, frozenset(c for c in ALL_COLORS if c not in present))
        if kind == MeldKind.RUN:
            ordered = sorted(self.tiles, key=lambda t: t.value_key())
            lead = 0
            while ordered[lead].is_wildcard:
                lead += 1
            start = ordered[lead].value - lead
            return RunShape(
                color=ordered[lead].color,
                logical_start=start,
                logical_end=start + len(self.tiles) - 1,
            )
        return None

    def missing_group_colors(self) -> FrozenSet[Color]:
        shape = self.shape()
        if isinstance(shape, GroupShape):
            return shape.missing_colors
        return frozenset()

    def run_color(self) -> Optional[Color]:
        if self.classify() != MeldKind.RUN:
            return None
        for tile in self.tiles:
            if not tile.is_wildcard:
                return tile.color
        return None

    def run_next_value(self) -> Optional[int]:
        shape = self.shape()
        return shape.next_value if isinstance(shape, RunShape) else None

    def run_preceding_value(self) -> Optional[int]:
        shape = self.shape()
        return shape.preceding_value if isinstance(shape, RunShape) else None
