"""
Word grouping: whitespace tokens -> groups keyed by first character.

- singleton groups are dropped
- keys are emitted in ascending order
- tokens within a group: longer first, equal length in code-point order
- duplicate tokens collapse into one group member

No I/O, no hidden state: the same input always yields the same result.
"""

from .config import GroupingConfig, StrategyName
from .module import run_word_grouping, solve
from .validation import InvalidInputError

__all__ = ["GroupingConfig", "InvalidInputError", "StrategyName", "run_word_grouping", "solve"]
