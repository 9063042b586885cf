"""
Canonical result contracts for word grouping.

Stage code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .word_groups import DroppedGroup, WordGroup, WordGroupingResult

__all__ = [
    "DroppedGroup",
    "WordGroup",
    "WordGroupingResult",
]
