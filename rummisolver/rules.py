from dataclasses import dataclass


@dataclass(frozen=True)
class Ruleset:
    steal_min_size: int = 4
    split_remainder_size: int = 3
    max_stage_iterations: int = 1000

    def middle_split_min_size(self) -> int:
        return 2 * self.split_remainder_size + 1
