from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .meld import Meld


@dataclass
class Board:
    melds: List[Meld] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.melds = list(self.melds)

    def add(self, meld: Meld) -> None:
        self.melds.append(meld)

    def remove(self, meld: Meld) -> bool:
        for idx, existing in enumerate(self.melds):
            if existing is meld:
                del self.melds[idx]
                return True
        return False

    def snapshot(self) -> Tuple[Meld, ...]:
        """Point-in-time copy of the meld list; the melds themselves are shared."""
        return tuple(self.melds)

    def sets_count(self) -> int:
        return len(self.melds)

    def check(self) -> Tuple[bool, str]:
        for idx, meld in enumerate(self.melds):
            ok, reason = meld.check()
            if not ok:
                return False, f"invalid meld {idx + 1} {meld}: {reason}"
        return True, ""

    def is_valid(self) -> bool:
        return self.check()[0]

    def copy(self) -> "Board":
        return Board([meld.copy() for meld in self.melds])

    def __len__(self) -> int:
        return len(self.melds)

    def __str__(self) -> str:
        lines = [f"Board containing {len(self.melds)} sets:"]
        for idx, meld in enumerate(self.melds):
            lines.append(f"{idx + 1}. {meld}")
        return "\n".join(lines)
