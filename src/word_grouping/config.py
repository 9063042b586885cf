from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StrategyName(str, Enum):
    """
    Grouping strategy identifiers. All strategies must produce identical output.
    """

    LOOP = "loop"
    FUNCTIONAL = "functional"


@dataclass(frozen=True, slots=True)
class GroupingConfig:
    """
    Word grouping parameters.

    Defaults are explicit constants (no env vars, no randomness).
    """

    strategy: StrategyName = StrategyName.LOOP
    min_group_size: int = 2  # groups with fewer distinct tokens are dropped

    def validate(self) -> None:
        if not isinstance(self.strategy, StrategyName):
            raise ValueError(f"strategy must be a StrategyName, got: {self.strategy!r}")
        if isinstance(self.min_group_size, bool) or not isinstance(self.min_group_size, int):
            raise ValueError("min_group_size must be an integer")
        if self.min_group_size < 1:
            raise ValueError("min_group_size must be >= 1")
