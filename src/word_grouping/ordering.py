from __future__ import annotations

from functools import cmp_to_key


def group_key(token: str) -> str:
    # First code point, not a UTF-16 code unit.
    return token[:1]


def token_order(a: str, b: str) -> int:
    # Longer tokens first; equal length => code-point order asc.
    if len(a) != len(b):
        return -1 if len(a) > len(b) else 1
    return -1 if a < b else (1 if a > b else 0)


def token_sort_key(token: str) -> tuple[int, str]:
    """
    Key function equivalent to `token_order`.
    """
    return (-len(token), token)


def order_group(tokens: set[str]) -> list[str]:
    return sorted(tokens, key=cmp_to_key(token_order))
