"""
HashSet
=======

Immutable, insertion-ordered set. Backed by the keys of a private `dict` so
iteration order is the order elements were first added.
"""

from __future__ import annotations

import functools
import itertools
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._types import Predicate, Selector
from ..value.contract import Value, hash_of, unordered_hash
from ..value.display import to_string_helper
from .hash_map import HashMap


class HashSet[T](Value):
    """Persistent set of structural values."""

    __slots__ = ("_items",)

    def __init__(self, items: dict[T, None], /) -> None:
        self._items = items

    @staticmethod
    def empty[V]() -> HashSet[V]:
        return HashSet({})

    @staticmethod
    def of[V](*items: V) -> HashSet[V]:
        return HashSet.of_iterable(items)

    @staticmethod
    def of_iterable[V](items: Iterable[V]) -> HashSet[V]:
        """Build from any iterable. Unhashable elements fail fast."""
        if isinstance(items, HashSet):
            return typing.cast(HashSet[V], items)
        entries: dict[V, None] = {}
        for item in items:
            hash_of(item, context="HashSet element")
            entries[item] = None
        return HashSet(entries)

    # Updates

    def add(self, item: T, /) -> HashSet[T]:
        hash_of(item, context="HashSet.add")
        if item in self._items:
            return self
        entries = dict(self._items)
        entries[item] = None
        return HashSet(entries)

    def remove(self, item: T, /) -> HashSet[T]:
        hash_of(item, context="HashSet.remove")
        if item not in self._items:
            return self
        entries = dict(self._items)
        del entries[item]
        return HashSet(entries)

    def remove_all(self, items: Iterable[T], /) -> HashSet[T]:
        to_remove = HashSet.of_iterable(items)
        return self.filter(lambda item: not to_remove.contains(item))

    # Queries

    def contains(self, item: T, /) -> bool:
        hash_of(item, context="HashSet.contains")
        return item in self._items

    def is_empty(self) -> bool:
        return not self._items

    def length(self) -> int:
        return len(self._items)

    def single(self) -> Option[T]:
        if len(self._items) == 1:
            return Some(next(iter(self._items)))
        return Nothing()

    def any_match(self, predicate: Predicate[T], /) -> bool:
        return any(predicate(item) for item in self._items)

    def all_match(self, predicate: Predicate[T], /) -> bool:
        return all(predicate(item) for item in self._items)

    def is_subset_of(self, other: HashSet[T], /) -> bool:
        return all(other.contains(item) for item in self._items)

    # Transformations

    def filter(self, predicate: Predicate[T], /) -> HashSet[T]:
        return HashSet({item: None for item in self._items if predicate(item)})

    def map[U](self, mapper: Callable[[T], U], /) -> HashSet[U]:
        return HashSet.of_iterable(mapper(item) for item in self._items)

    def fold_left[U](self, zero: U, fn: Callable[[U, T], U], /) -> U:
        return functools.reduce(fn, self._items, zero)

    def group_by[K](self, classifier: Selector[T, K], /) -> HashMap[K, HashSet[T]]:
        groups: dict[K, dict[T, None]] = {}
        for item in self._items:
            key = classifier(item)
            hash_of(key, context="HashSet.group_by")
            groups.setdefault(key, {})[item] = None
        return HashMap.of_iterable((k, HashSet(v)) for k, v in groups.items())

    def take(self, n: int, /) -> HashSet[T]:
        """First `n` elements in iteration order."""
        return HashSet(dict.fromkeys(itertools.islice(self._items, max(n, 0))))

    def drop(self, n: int, /) -> HashSet[T]:
        return HashSet(dict.fromkeys(itertools.islice(self._items, max(n, 0), None)))

    def to_list(self) -> list[T]:
        return list(self._items)

    def to_frozenset(self) -> frozenset[T]:
        return frozenset(self._items)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return self.contains(typing.cast(T, item))

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HashSet):
            return False
        theirs = typing.cast(dict[typing.Any, None], other._items)
        return len(theirs) == len(self._items) and all(item in theirs for item in self._items)

    def hash_code(self) -> int:
        return unordered_hash(hash_of(item) for item in self._items)

    def __str__(self) -> str:
        return "HashSet(" + ", ".join(to_string_helper(item) for item in self._items) + ")"


__all__ = ("HashSet",)
