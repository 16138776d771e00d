"""
HashMap
=======

Immutable, insertion-ordered mapping over a private `dict`. Every update
returns a new map. Keys go through the Value contract, so structural values
(including other HashMaps) work as keys.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator, Mapping

from kungfu import Nothing, Option, Some

from ..value.contract import Value, hash_of, unordered_hash, values_equal
from ..value.display import DisplayOptions, to_string_helper

if typing.TYPE_CHECKING:
    from .vector import Vector

_RAW = DisplayOptions.raw()


class HashMap[K, V](Value):
    """Persistent key/value map. Iteration yields `(key, value)` pairs."""

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[K, V], /) -> None:
        """Wrap a dict the caller no longer mutates. Prefer the constructors."""
        self._entries = entries

    @staticmethod
    def empty[A, B]() -> HashMap[A, B]:
        return HashMap({})

    @staticmethod
    def of_iterable[A, B](pairs: Iterable[tuple[A, B]]) -> HashMap[A, B]:
        """Build from pairs; a later pair overwrites an earlier equal key."""
        entries: dict[A, B] = {}
        for key, value in pairs:
            hash_of(key, context="HashMap key")
            entries[key] = value
        return HashMap(entries)

    @staticmethod
    def of_mapping[A, B](mapping: Mapping[A, B]) -> HashMap[A, B]:
        return HashMap.of_iterable(mapping.items())

    # Updates

    def put(self, key: K, value: V, /) -> HashMap[K, V]:
        """New map with `key` bound to `value` (replacing an equal key's value)."""
        hash_of(key, context="HashMap.put")
        entries = dict(self._entries)
        entries[key] = value
        return HashMap(entries)

    def put_with_merge(self, key: K, value: V, merge: Callable[[V, V], V], /) -> HashMap[K, V]:
        """Like put, but combine with the existing value as merge(old, new)."""
        hash_of(key, context="HashMap.put_with_merge")
        if key in self._entries:
            value = merge(self._entries[key], value)
        return self.put(key, value)

    def remove(self, key: K, /) -> HashMap[K, V]:
        hash_of(key, context="HashMap.remove")
        if key not in self._entries:
            return self
        entries = dict(self._entries)
        del entries[key]
        return HashMap(entries)

    # Queries

    def get(self, key: K, /) -> Option[V]:
        hash_of(key, context="HashMap.get")
        if key in self._entries:
            return Some(self._entries[key])
        return Nothing()

    def contains_key(self, key: K, /) -> bool:
        hash_of(key, context="HashMap.contains_key")
        return key in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def length(self) -> int:
        return len(self._entries)

    def keys(self) -> Vector[K]:
        from .vector import Vector
        return Vector.of_iterable(self._entries.keys())

    def values(self) -> Vector[V]:
        from .vector import Vector
        return Vector.of_iterable(self._entries.values())

    def single(self) -> Option[tuple[K, V]]:
        if len(self._entries) == 1:
            return Some(next(iter(self._entries.items())))
        return Nothing()

    def any_match(self, predicate: Callable[[K, V], bool], /) -> bool:
        return any(predicate(k, v) for k, v in self._entries.items())

    def all_match(self, predicate: Callable[[K, V], bool], /) -> bool:
        return all(predicate(k, v) for k, v in self._entries.items())

    # Transformations

    def map_values[U](self, mapper: Callable[[V], U], /) -> HashMap[K, U]:
        return HashMap({k: mapper(v) for k, v in self._entries.items()})

    def map[A, B](self, mapper: Callable[[K, V], tuple[A, B]], /) -> HashMap[A, B]:
        return HashMap.of_iterable(mapper(k, v) for k, v in self._entries.items())

    def filter(self, predicate: Callable[[K, V], bool], /) -> HashMap[K, V]:
        return HashMap({k: v for k, v in self._entries.items() if predicate(k, v)})

    def fold_left[U](self, zero: U, fn: Callable[[U, tuple[K, V]], U], /) -> U:
        acc = zero
        for entry in self._entries.items():
            acc = fn(acc, entry)
        return acc

    def to_dict(self) -> dict[K, V]:
        return dict(self._entries)

    # Protocol methods

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(typing.cast(K, key))

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HashMap):
            return False
        theirs = typing.cast(dict[typing.Any, typing.Any], other._entries)
        if len(theirs) != len(self._entries):
            return False
        for key, value in self._entries.items():
            if key not in theirs or not values_equal(value, theirs[key]):
                return False
        return True

    def hash_code(self) -> int:
        return unordered_hash(
            hash_of(k) ^ hash_of(v, context="HashMap.hash_code")
            for k, v in self._entries.items()
        )

    def __str__(self) -> str:
        body = ", ".join(
            f"{to_string_helper(k, _RAW)} => {to_string_helper(v, _RAW)}"
            for k, v in self._entries.items()
        )
        return "{" + body + "}"


__all__ = ("HashMap",)
