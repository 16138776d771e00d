"""
seqkit: container-agnostic algorithms over persistent, lazy collections.

Architecture:
- value: structural equality/hash contract + cycle-safe display
- lazy: memoized Lazy cell and the cons Stream built on it
- collection: capability protocols (Collection, Seq) and reference containers
- algorithms: free functions over the capabilities (sort_on, distinct_by, sliding, ...)

Absence is reported with kungfu's Option (Some / Nothing), never by raising.
"""

# Core types
from ._types import Comparator, Predicate, Selector, Thunk, ToOrderable

# Logging
from ._logging import get_logger, setup_logger

# Value contract
from . import value
from .value import (
    DisplayOptions,
    Value,
    combine_hashes,
    contract_true_equality,
    has_equality,
    has_true_equality,
    hash_of,
    to_string_helper,
    unordered_hash,
    values_equal,
)

# Collections
from . import collection
from .collection import Collection, HashMap, HashSet, Seq, Vector

# Lazy engine
from . import lazy
from .lazy import ConsStream, EmptyStream, Lazy, Stream

# Algorithms
from . import algorithms
from .algorithms import (
    Desc,
    Ordering,
    arrange_by,
    distinct_by,
    max_by,
    max_on,
    min_by,
    min_on,
    pluck,
    plucker,
    reduce,
    remove_all,
    shuffle,
    sliding,
    sort_on,
    sum_on,
    zip_with_index,
)

# Errors
from ._errors import ContractViolationError, LazyCycleError

__all__ = (
    # Types
    "Comparator",
    "Predicate",
    "Selector",
    "Thunk",
    "ToOrderable",
    # Logging
    "get_logger",
    "setup_logger",
    # Value
    "value",
    "DisplayOptions",
    "Value",
    "combine_hashes",
    "contract_true_equality",
    "has_equality",
    "has_true_equality",
    "hash_of",
    "to_string_helper",
    "unordered_hash",
    "values_equal",
    # Collections
    "collection",
    "Collection",
    "Seq",
    "HashMap",
    "HashSet",
    "Vector",
    # Lazy
    "lazy",
    "Lazy",
    "Stream",
    "ConsStream",
    "EmptyStream",
    # Algorithms
    "algorithms",
    "Desc",
    "Ordering",
    "arrange_by",
    "distinct_by",
    "max_by",
    "max_on",
    "min_by",
    "min_on",
    "pluck",
    "plucker",
    "reduce",
    "remove_all",
    "shuffle",
    "sliding",
    "sort_on",
    "sum_on",
    "zip_with_index",
    # Errors
    "ContractViolationError",
    "LazyCycleError",
)
