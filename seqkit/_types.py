"""
Core type definitions for seqkit.

Алиасы, используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for grouping / de-duplication
type Selector[T, K] = Callable[[T], K]

# ToOrderable = selector whose result supports < and > (numbers, strings, ...)
type ToOrderable[T] = Callable[[T], typing.Any]

# Comparator = 3-way comparison, negative / zero / positive
type Comparator[T] = Callable[[T, T], int]

# Thunk = zero-argument producer of a deferred value
type Thunk[T] = Callable[[], T]

__all__ = (
    "Predicate",
    "Selector",
    "ToOrderable",
    "Comparator",
    "Thunk",
)
