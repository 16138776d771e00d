"""
Ordering algorithms
===================

Multi-key stable sort and min/max selection.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .._types import Comparator, ToOrderable
from ..collection.protocols import Collection, Seq
from .folding import reduce


class Ordering(enum.IntEnum):
    """Result of a 3-way comparison."""

    LT = -1
    EQ = 0
    GT = 1


@dataclass(frozen=True, slots=True)
class Desc[T]:
    """Marks a sort key as descending: `sort_on(seq, by_age, Desc(by_name))`."""

    key: ToOrderable[T]


# ============================================================================
# Sorting
# ============================================================================


def _multi_key_comparator[T](keys: Sequence[ToOrderable[T] | Desc[T]]) -> Comparator[T]:
    def compare(x: T, y: T) -> int:
        for key in keys:
            if isinstance(key, Desc):
                a, b = key.key(x), key.key(y)
                if a == b:
                    continue
                return Ordering.GT if a < b else Ordering.LT
            a, b = key(x), key(y)
            if a == b:
                continue
            return Ordering.GT if a > b else Ordering.LT
        return Ordering.EQ

    return compare


def sort_on[T, S: Seq[typing.Any]](seq: S, *keys: ToOrderable[T] | Desc[T]) -> S:
    """
    Stable sort by several keys, applied in order.

    Equal keys fall through to the next selector; when every selector ties,
    the original relative order is kept.

    Example:
        sort_on(people, lambda p: p.city, Desc(lambda p: p.age))
    """
    return seq.sort_by(_multi_key_comparator(keys))


# ============================================================================
# Min / max
# ============================================================================


def min_by[T](collection: Collection[T], compare: Comparator[T]) -> Option[T]:
    """
    Smallest element by comparator; Nothing() when empty.

    The comparator is called candidate-first, compare(candidate, best), and the
    running best is replaced only when that is < 0, so ties keep the
    first-seen element.
    """
    return reduce(collection, lambda best, cur: cur if compare(cur, best) < 0 else best)


def max_by[T](collection: Collection[T], compare: Comparator[T]) -> Option[T]:
    """
    Largest element by comparator; Nothing() when empty.

    Called candidate-first, compare(candidate, best); the best is replaced
    only when that is > 0.
    """
    return reduce(collection, lambda best, cur: cur if compare(cur, best) > 0 else best)


def min_on[T](collection: Collection[T], key_fn: ToOrderable[T]) -> Option[T]:
    """Element with the smallest derived key; ties keep first-seen."""
    iterator = iter(collection)
    for result in iterator:
        best = key_fn(result)
        for item in iterator:
            current = key_fn(item)
            if current < best:
                best, result = current, item
        return Some(result)
    return Nothing()


def max_on[T](collection: Collection[T], key_fn: ToOrderable[T]) -> Option[T]:
    """Element with the largest derived key; ties keep first-seen."""
    iterator = iter(collection)
    for result in iterator:
        best = key_fn(result)
        for item in iterator:
            current = key_fn(item)
            if current > best:
                best, result = current, item
        return Some(result)
    return Nothing()


__all__ = (
    "Ordering",
    "Desc",
    "sort_on",
    "min_by",
    "max_by",
    "min_on",
    "max_on",
)
