from __future__ import annotations

from itertools import groupby

from ..config import StrategyName
from ..ordering import group_key, token_sort_key
from .base import GroupingStrategy


class FunctionalStrategy(GroupingStrategy):
    """
    Declarative pipeline: split -> dedupe -> sort by (key, token order) -> groupby key.
    """

    def strategy_id(self) -> str:
        return StrategyName.FUNCTIONAL.value

    def group_tokens(self, text: str) -> dict[str, list[str]]:
        ordered = sorted(set(text.split()), key=lambda t: (group_key(t), token_sort_key(t)))
        return {key: list(members) for key, members in groupby(ordered, key=group_key)}
