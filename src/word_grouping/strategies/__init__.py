from __future__ import annotations

from ..config import StrategyName
from .base import GroupingStrategy
from .functional import FunctionalStrategy
from .loop import LoopStrategy


def get_strategy(name: StrategyName) -> GroupingStrategy:
    if name == StrategyName.LOOP:
        return LoopStrategy()
    if name == StrategyName.FUNCTIONAL:
        return FunctionalStrategy()
    raise ValueError(f"Unsupported grouping strategy: {name}")


__all__ = ["FunctionalStrategy", "GroupingStrategy", "LoopStrategy", "get_strategy"]
