"""
Value contract and display
==========================

- Value: structural equality + hashing + display hook
- to_string_helper: cycle-safe rendering of arbitrary values
"""

from .contract import (
    Value,
    combine_hashes,
    contract_true_equality,
    has_equality,
    has_true_equality,
    hash_of,
    unordered_hash,
    values_equal,
)
from .display import DisplayOptions, has_custom_str, to_string_helper

__all__ = (
    "Value",
    "combine_hashes",
    "contract_true_equality",
    "has_equality",
    "has_true_equality",
    "hash_of",
    "unordered_hash",
    "values_equal",
    "DisplayOptions",
    "has_custom_str",
    "to_string_helper",
)
