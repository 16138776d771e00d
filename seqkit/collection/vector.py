"""
Vector
======

Immutable ordered sequence over a private tuple. The eager counterpart of
`Stream`: same `Seq` capability, same algorithm-layer methods.
"""

from __future__ import annotations

import functools
import itertools
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._types import Comparator, Predicate, Selector, ToOrderable
from ..value.contract import Value, combine_hashes, hash_of, values_equal
from ..value.display import to_string_helper
from .hash_map import HashMap

if typing.TYPE_CHECKING:
    import random

    from ..algorithms.ordering import Desc
    from ..lazy.stream import Stream


class Vector[T](Value):
    """Persistent indexed sequence."""

    __slots__ = ("_items",)

    def __init__(self, items: tuple[T, ...], /) -> None:
        self._items = items

    @staticmethod
    def empty[V]() -> Vector[V]:
        return Vector(())

    @staticmethod
    def of[V](*items: V) -> Vector[V]:
        return Vector(items)

    @staticmethod
    def of_iterable[V](items: Iterable[V]) -> Vector[V]:
        """Realise an iterable. Never returns on an infinite one."""
        if isinstance(items, Vector):
            return typing.cast(Vector[V], items)
        return Vector(tuple(items))

    # Queries

    def is_empty(self) -> bool:
        return not self._items

    def length(self) -> int:
        return len(self._items)

    def get(self, index: int, /) -> Option[T]:
        if 0 <= index < len(self._items):
            return Some(self._items[index])
        return Nothing()

    def head(self) -> Option[T]:
        return self.get(0)

    def last(self) -> Option[T]:
        return self.get(len(self._items) - 1)

    def single(self) -> Option[T]:
        if len(self._items) == 1:
            return Some(self._items[0])
        return Nothing()

    def find(self, predicate: Predicate[T], /) -> Option[T]:
        for item in self._items:
            if predicate(item):
                return Some(item)
        return Nothing()

    def contains(self, value: T, /) -> bool:
        return any(values_equal(item, value) for item in self._items)

    def any_match(self, predicate: Predicate[T], /) -> bool:
        return any(predicate(item) for item in self._items)

    def all_match(self, predicate: Predicate[T], /) -> bool:
        return all(predicate(item) for item in self._items)

    # Transformations

    def append(self, value: T, /) -> Vector[T]:
        return Vector((*self._items, value))

    def append_all(self, items: Iterable[T], /) -> Vector[T]:
        return Vector((*self._items, *items))

    def prepend(self, value: T, /) -> Vector[T]:
        return Vector((value, *self._items))

    def reverse(self) -> Vector[T]:
        return Vector(self._items[::-1])

    def filter(self, predicate: Predicate[T], /) -> Vector[T]:
        return Vector(tuple(item for item in self._items if predicate(item)))

    def map[U](self, mapper: Callable[[T], U], /) -> Vector[U]:
        return Vector(tuple(mapper(item) for item in self._items))

    def flat_map[U](self, mapper: Callable[[T], Iterable[U]], /) -> Vector[U]:
        return Vector(tuple(itertools.chain.from_iterable(mapper(item) for item in self._items)))

    def fold_left[U](self, zero: U, fn: Callable[[U, T], U], /) -> U:
        return functools.reduce(fn, self._items, zero)

    def group_by[K](self, classifier: Selector[T, K], /) -> HashMap[K, Vector[T]]:
        groups: dict[K, list[T]] = {}
        for item in self._items:
            key = classifier(item)
            hash_of(key, context="Vector.group_by")
            groups.setdefault(key, []).append(item)
        return HashMap.of_iterable((k, Vector(tuple(v))) for k, v in groups.items())

    def take(self, n: int, /) -> Vector[T]:
        return Vector(self._items[: max(n, 0)])

    def drop(self, n: int, /) -> Vector[T]:
        return Vector(self._items[max(n, 0) :])

    def zip[U](self, other: Iterable[U], /) -> Vector[tuple[T, U]]:
        """Pair positionally; `other` may be infinite, only len(self) items are pulled."""
        return Vector(tuple(zip(self._items, other)))

    def sort_by(self, compare: Comparator[T], /) -> Vector[T]:
        """Stable sort with a 3-way comparator."""
        return Vector(tuple(sorted(self._items, key=functools.cmp_to_key(compare))))

    def to_list(self) -> list[T]:
        return list(self._items)

    def to_stream(self) -> Stream[T]:
        from ..lazy.stream import Stream
        return Stream.of(*self._items)

    # Algorithm layer

    def sort_on(self, *keys: ToOrderable[T] | Desc[T]) -> Vector[T]:
        from ..algorithms.ordering import sort_on
        return sort_on(self, *keys)

    def distinct_by[K](self, key_fn: Selector[T, K], /) -> Vector[T]:
        from ..algorithms.grouping import distinct_by
        return distinct_by(self, key_fn)

    def remove_all(self, elements: Iterable[T], /) -> Vector[T]:
        from ..algorithms.grouping import remove_all
        return remove_all(self, elements)

    def arrange_by[K](self, key_fn: Selector[T, K], /) -> Option[HashMap[K, T]]:
        from ..algorithms.grouping import arrange_by
        return arrange_by(self, key_fn)

    def zip_with_index(self) -> Vector[tuple[T, int]]:
        from ..algorithms.windows import zip_with_index
        return zip_with_index(self)

    def sliding(self, size: int, /) -> Stream[Vector[T]]:
        from ..algorithms.windows import sliding
        return sliding(self, size)

    def shuffle(self, *, rng: random.Random | None = None) -> Vector[T]:
        from ..algorithms.shuffle import shuffle
        return Vector(tuple(shuffle(list(self._items), rng=rng)))

    def pluck(self, key: typing.Any, /) -> Vector[typing.Any]:
        from ..algorithms.projection import pluck
        return pluck(self, key)

    def min_by(self, compare: Comparator[T], /) -> Option[T]:
        from ..algorithms.ordering import min_by
        return min_by(self, compare)

    def max_by(self, compare: Comparator[T], /) -> Option[T]:
        from ..algorithms.ordering import max_by
        return max_by(self, compare)

    def min_on(self, key_fn: ToOrderable[T], /) -> Option[T]:
        from ..algorithms.ordering import min_on
        return min_on(self, key_fn)

    def max_on(self, key_fn: ToOrderable[T], /) -> Option[T]:
        from ..algorithms.ordering import max_on
        return max_on(self, key_fn)

    def sum_on(self, number_fn: Callable[[T], float], /) -> float:
        from ..algorithms.folding import sum_on
        return sum_on(self, number_fn)

    def reduce(self, combine: Callable[[T, T], T], /) -> Option[T]:
        from ..algorithms.folding import reduce
        return reduce(self, combine)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vector):
            return False
        theirs = typing.cast(tuple[typing.Any, ...], other._items)
        return len(theirs) == len(self._items) and all(
            values_equal(a, b) for a, b in zip(self._items, theirs)
        )

    def hash_code(self) -> int:
        return combine_hashes(hash_of(item, context="Vector.hash_code") for item in self._items)

    def __str__(self) -> str:
        return "Vector(" + ", ".join(to_string_helper(item) for item in self._items) + ")"


__all__ = ("Vector",)
