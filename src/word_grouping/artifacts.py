from __future__ import annotations

import json
from typing import Any

from contracts.word_groups import WordGroupingResult


def serialize_word_grouping_result(result: WordGroupingResult) -> str:
    payload: dict[str, Any] = result.to_dict()
    return (
        json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"), indent=2)
        + "\n"
    )


def render_groups_text(groups: dict[str, list[str]]) -> str:
    """
    Bracketed one-line rendering, e.g. `{я=[яяя, я]}`. Keys keep the mapping's order.
    """
    parts = [f"{key}=[{', '.join(tokens)}]" for key, tokens in groups.items()]
    return "{" + ", ".join(parts) + "}"
