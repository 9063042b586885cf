from __future__ import annotations

from typing import Any

from contracts.word_groups import DroppedGroup, WordGroup, WordGroupingResult

from .config import GroupingConfig
from .strategies import get_strategy
from .validation import validate_source


def run_word_grouping(source: str | None, config: GroupingConfig | None = None) -> WordGroupingResult:
    """
    Validate -> group (via the configured strategy) -> drop undersized groups.

    Raises InvalidInputError before any tokenization when `source` is None or blank.
    A result with zero surviving groups is still a successful result.
    """

    cfg = config if config is not None else GroupingConfig()
    cfg.validate()

    text = validate_source(source)
    strategy = get_strategy(cfg.strategy)
    all_groups = strategy.group_tokens(text)

    kept: list[WordGroup] = []
    dropped: list[DroppedGroup] = []
    for key, tokens in all_groups.items():
        if len(tokens) < cfg.min_group_size:
            dropped.append(
                DroppedGroup(key=key, tokens=tokens, reason=f"below_min_group_size:{cfg.min_group_size}")
            )
            continue
        kept.append(WordGroup(key=key, tokens=tokens))

    meta: dict[str, Any] = {
        "version": "word_grouping_v1",
        "grouping_config": {
            "strategy": strategy.strategy_id(),
            "min_group_size": cfg.min_group_size,
        },
        "counts": {
            "tokens_in": len(text.split()),
            "distinct_tokens": sum(len(t) for t in all_groups.values()),
            "groups_total": len(all_groups),
            "groups_kept": len(kept),
            "groups_dropped": len(dropped),
        },
        # Strategies return keys asc, so this is already in deterministic order.
        "dropped_groups": [d.to_dict() for d in dropped],
    }

    return WordGroupingResult(ok=True, errors=[], meta=meta, groups=kept)


def solve(source: str | None, config: GroupingConfig | None = None) -> dict[str, list[str]]:
    return run_word_grouping(source, config).as_mapping()
