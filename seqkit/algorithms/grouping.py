"""
Grouping algorithms
===================

Key-based de-duplication, unique indexing and bulk removal. Each call builds
its own transient hash-backed working set; nothing is shared across calls.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._logging import get_logger
from .._types import Selector
from ..collection.hash_map import HashMap
from ..collection.hash_set import HashSet
from ..collection.protocols import Collection
from ..value.contract import contract_true_equality, hash_of

logger = get_logger(__name__)


def arrange_by[T, K](collection: Collection[T], key_fn: Selector[T, K]) -> Option[HashMap[K, T]]:
    """
    Index elements by key, but only if every key is unique.

    Returns Some(map) when each group has exactly one member, Nothing()
    as soon as any key is shared (no partial map).

    Example:
        arrange_by(Vector.of(alice, bob), lambda u: u.id)   # Some({1 => alice, 2 => bob})
    """
    singles = collection.group_by(key_fn).map_values(lambda group: group.single())
    clashes = singles.filter(lambda _, single: isinstance(single, Nothing))
    if not clashes.is_empty():
        logger.debug("arrange_by: %d non-unique key(s), reporting absence", clashes.length())
        return Nothing()
    return Some(singles.map_values(lambda single: single.unwrap()))


def distinct_by[T, K, C: Collection[typing.Any]](collection: C, key_fn: Selector[T, K]) -> C:
    """
    Keep the first element for each derived key, in iteration order.

    One pass, one set lookup/insert per element. On a Stream the result is
    lazy and the seen-keys set grows as the stream is traversed.
    """
    known: set[K] = set()

    def first_seen(item: T) -> bool:
        key = key_fn(item)
        hash_of(key, context="distinct_by key")
        if key in known:
            return False
        known.add(key)
        return True

    return collection.filter(first_seen)


def remove_all[T, C: Collection[typing.Any]](seq: C, elements: Iterable[T]) -> C:
    """Drop every element present in `elements`. O(n + m) expected."""
    to_remove = HashSet.of_iterable(elements)
    contract_true_equality("remove_all", *to_remove)
    return seq.filter(lambda item: not to_remove.contains(item))


__all__ = ("arrange_by", "distinct_by", "remove_all")
