from __future__ import annotations

from ..config import StrategyName
from ..ordering import group_key, order_group
from .base import GroupingStrategy


class LoopStrategy(GroupingStrategy):
    """
    Manual index scan: skip whitespace runs, slice each token, bucket it by key.
    """

    def strategy_id(self) -> str:
        return StrategyName.LOOP.value

    def group_tokens(self, text: str) -> dict[str, list[str]]:
        buckets: dict[str, set[str]] = {}

        n = len(text)
        i = 0
        while i < n:
            if text[i].isspace():
                i += 1
                continue

            start = i
            while i < n and not text[i].isspace():
                i += 1

            token = text[start:i]
            key = group_key(token)
            if key not in buckets:
                buckets[key] = set()
            buckets[key].add(token)

        out: dict[str, list[str]] = {}
        for key in sorted(buckets):
            out[key] = order_group(buckets[key])
        return out
