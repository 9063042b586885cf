from __future__ import annotations

from abc import ABC, abstractmethod


class GroupingStrategy(ABC):
    """
    Grouping step abstraction.

    Strategies must:
    - Receive already validated, trimmed text
    - Return EVERY group (singletons included), keys asc, tokens in token order
    - Be stateless and deterministic; size filtering is applied by the caller
    """

    @abstractmethod
    def strategy_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def group_tokens(self, text: str) -> dict[str, list[str]]:
        raise NotImplementedError
