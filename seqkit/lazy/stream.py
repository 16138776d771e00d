"""
Stream
======

Lazily-materialised cons sequence. A stream is either the empty terminal or a
node `(head, Lazy[Stream])`; building a node never forces its tail, so
conceptually infinite streams are fine as long as callers only traverse a
bounded prefix.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._types import Comparator, Predicate, Selector, Thunk, ToOrderable
from ..collection.hash_map import HashMap
from ..value.contract import Value, combine_hashes, hash_of, values_equal
from ..value.display import to_string_helper
from .cell import Lazy

if typing.TYPE_CHECKING:
    import random

    from ..algorithms.ordering import Desc
    from ..collection.vector import Vector


class Stream[T](Value):
    """
    Lazy, possibly infinite, immutable sequence.

    Lazy operations (take, map, filter, zip, ...) force only the nodes their
    output needs. Eager ones (fold_left, length, sort_by, equals, ...) traverse
    the whole stream and never return on an infinite one.
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def empty[V]() -> Stream[V]:
        """The terminal stream."""
        return typing.cast(Stream[V], _EMPTY)

    @staticmethod
    def cons[V](head: V, tail: Thunk[Stream[V]]) -> Stream[V]:
        """Node whose tail is produced on first traversal."""
        return ConsStream(head, Lazy.of(tail))

    @staticmethod
    def of[V](*items: V) -> Stream[V]:
        """Fully realised stream of the given items."""
        result: Stream[V] = Stream.empty()
        for item in reversed(items):
            result = ConsStream(item, Lazy.forced(result))
        return result

    @staticmethod
    def of_iterable[V](items: Iterable[V]) -> Stream[V]:
        """
        Stream over any iterable, pulling each element once, on demand.

        The first element is pulled immediately (to know whether the stream
        is empty); the rest only as the stream is traversed.
        """
        if isinstance(items, Stream):
            return typing.cast(Stream[V], items)
        iterator = iter(items)

        def step() -> Stream[V]:
            try:
                head = next(iterator)
            except StopIteration:
                return Stream.empty()
            return ConsStream(head, Lazy.of(step))

        return step()

    @staticmethod
    def iterate[V](seed: V, next_fn: Callable[[V], V]) -> Stream[V]:
        """Infinite stream seed, next_fn(seed), next_fn(next_fn(seed)), ..."""
        return ConsStream(seed, Lazy.of(lambda: Stream.iterate(next_fn(seed), next_fn)))

    @staticmethod
    def continually[V](producer: Thunk[V]) -> Stream[V]:
        """Infinite stream calling `producer` for each element."""
        return ConsStream(producer(), Lazy.of(lambda: Stream.continually(producer)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not isinstance(self, ConsStream)

    def head(self) -> Option[T]:
        if isinstance(self, ConsStream):
            return Some(self._head)
        return Nothing()

    def tail(self) -> Option[Stream[T]]:
        if isinstance(self, ConsStream):
            return Some(self._tail.get())
        return Nothing()

    def last(self) -> Option[T]:
        result: Option[T] = Nothing()
        for item in self:
            result = Some(item)
        return result

    def single(self) -> Option[T]:
        """The only element, if there is exactly one. Forces at most two nodes."""
        if isinstance(self, ConsStream) and self._tail.get().is_empty():
            return Some(self._head)
        return Nothing()

    def find(self, predicate: Predicate[T], /) -> Option[T]:
        for item in self:
            if predicate(item):
                return Some(item)
        return Nothing()

    def contains(self, value: T, /) -> bool:
        return self.any_match(lambda item: values_equal(item, value))

    def any_match(self, predicate: Predicate[T], /) -> bool:
        return any(predicate(item) for item in self)

    def all_match(self, predicate: Predicate[T], /) -> bool:
        return all(predicate(item) for item in self)

    # ------------------------------------------------------------------
    # Lazy transformations
    # ------------------------------------------------------------------

    def take(self, n: int, /) -> Stream[T]:
        """First `n` elements. Traversing the result forces at most `n` nodes."""
        if n <= 0 or not isinstance(self, ConsStream):
            return Stream.empty()
        if n == 1:
            return ConsStream(self._head, Lazy.forced(Stream.empty()))
        tail = self._tail
        return ConsStream(self._head, Lazy.of(lambda: tail.get().take(n - 1)))

    def drop(self, n: int, /) -> Stream[T]:
        """Skip `n` elements, forcing exactly the skipped prefix."""
        node: Stream[T] = self
        while n > 0 and isinstance(node, ConsStream):
            node = node._tail.get()
            n -= 1
        return node

    def take_while(self, predicate: Predicate[T], /) -> Stream[T]:
        if not isinstance(self, ConsStream) or not predicate(self._head):
            return Stream.empty()
        tail = self._tail
        return ConsStream(self._head, Lazy.of(lambda: tail.get().take_while(predicate)))

    def drop_while(self, predicate: Predicate[T], /) -> Stream[T]:
        node: Stream[T] = self
        while isinstance(node, ConsStream) and predicate(node._head):
            node = node._tail.get()
        return node

    def map[U](self, mapper: Callable[[T], U], /) -> Stream[U]:
        if not isinstance(self, ConsStream):
            return Stream.empty()
        tail = self._tail
        return ConsStream(mapper(self._head), Lazy.of(lambda: tail.get().map(mapper)))

    def flat_map[U](self, mapper: Callable[[T], Iterable[U]], /) -> Stream[U]:
        node: Stream[T] = self
        while isinstance(node, ConsStream):
            inner = Stream.of_iterable(mapper(node._head))
            if isinstance(inner, ConsStream):
                tail = node._tail
                return _concat(inner, Lazy.of(lambda: tail.get().flat_map(mapper)))
            node = node._tail.get()
        return Stream.empty()

    def filter(self, predicate: Predicate[T], /) -> Stream[T]:
        """Keep matching elements. Forces nodes up to the next match only."""
        node: Stream[T] = self
        while isinstance(node, ConsStream):
            if predicate(node._head):
                tail = node._tail
                return ConsStream(node._head, Lazy.of(lambda: tail.get().filter(predicate)))
            node = node._tail.get()
        return Stream.empty()

    def zip[U](self, other: Iterable[U], /) -> Stream[tuple[T, U]]:
        """
        Pair elements positionally, stopping at the shorter input.

        Forcing element i of the result forces element i of each input.
        """
        return _zip(self, Stream.of_iterable(other))

    def prepend(self, value: T, /) -> Stream[T]:
        return ConsStream(value, Lazy.forced(self))

    def append(self, value: T, /) -> Stream[T]:
        return self.append_all((value,))

    def append_all(self, items: Iterable[T], /) -> Stream[T]:
        """Lazy concatenation; `items` is not touched until this stream ends."""
        return _concat(self, Lazy.of(lambda: Stream.of_iterable(items)))

    def cycle(self) -> Stream[T]:
        """Repeat this (finite) stream forever."""
        if self.is_empty():
            return self
        return _concat(self, Lazy.of(self.cycle))

    # ------------------------------------------------------------------
    # Eager operations (finite streams)
    # ------------------------------------------------------------------

    def fold_left[U](self, zero: U, fn: Callable[[U, T], U], /) -> U:
        acc = zero
        for item in self:
            acc = fn(acc, item)
        return acc

    def length(self) -> int:
        return self.fold_left(0, lambda n, _: n + 1)

    def to_list(self) -> list[T]:
        return list(self)

    def to_vector(self) -> Vector[T]:
        from ..collection.vector import Vector
        return Vector.of_iterable(self)

    def reverse(self) -> Stream[T]:
        return Stream.of(*reversed(self.to_list()))

    def group_by[K](self, classifier: Selector[T, K], /) -> HashMap[K, Stream[T]]:
        groups: dict[K, list[T]] = {}
        for item in self:
            key = classifier(item)
            hash_of(key, context="Stream.group_by")
            groups.setdefault(key, []).append(item)
        return HashMap.of_iterable((k, Stream.of(*v)) for k, v in groups.items())

    def sort_by(self, compare: Comparator[T], /) -> Stream[T]:
        """Stable sort with a 3-way comparator."""
        return Stream.of(*sorted(self, key=functools.cmp_to_key(compare)))

    # ------------------------------------------------------------------
    # Algorithm layer
    # ------------------------------------------------------------------

    def sort_on(self, *keys: ToOrderable[T] | Desc[T]) -> Stream[T]:
        from ..algorithms.ordering import sort_on
        return sort_on(self, *keys)

    def distinct_by[K](self, key_fn: Selector[T, K], /) -> Stream[T]:
        from ..algorithms.grouping import distinct_by
        return distinct_by(self, key_fn)

    def remove_all(self, elements: Iterable[T], /) -> Stream[T]:
        from ..algorithms.grouping import remove_all
        return remove_all(self, elements)

    def arrange_by[K](self, key_fn: Selector[T, K], /) -> Option[HashMap[K, T]]:
        from ..algorithms.grouping import arrange_by
        return arrange_by(self, key_fn)

    def zip_with_index(self) -> Stream[tuple[T, int]]:
        from ..algorithms.windows import zip_with_index
        return zip_with_index(self)

    def sliding(self, size: int, /) -> Stream[Stream[T]]:
        from ..algorithms.windows import sliding
        return sliding(self, size)

    def shuffle(self, *, rng: random.Random | None = None) -> Stream[T]:
        from ..algorithms.shuffle import shuffle
        return Stream.of(*shuffle(self.to_list(), rng=rng))

    def pluck(self, key: typing.Any, /) -> Stream[typing.Any]:
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

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        node: Stream[T] = self
        while isinstance(node, ConsStream):
            yield node._head
            node = node._tail.get()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Stream):
            return False
        left: Stream[typing.Any] = self
        right: Stream[typing.Any] = other
        while isinstance(left, ConsStream) and isinstance(right, ConsStream):
            if not values_equal(left._head, right._head):
                return False
            left, right = left._tail.get(), right._tail.get()
        return left.is_empty() and right.is_empty()

    def hash_code(self) -> int:
        return combine_hashes(hash_of(item, context="Stream.hash_code") for item in self)

    def __str__(self) -> str:
        """Realised prefix only; an unforced tail shows as `?`."""
        parts: list[str] = []
        node: Stream[T] = self
        while isinstance(node, ConsStream):
            parts.append(to_string_helper(node._head))
            if not node._tail.is_evaluated():
                parts.append("?")
                break
            node = node._tail.get()
        return f"Stream({', '.join(parts)})"


@typing.final
class EmptyStream(Stream[typing.Any]):
    """Terminal stream. Use `Stream.empty()`."""

    __slots__ = ()


@typing.final
class ConsStream[T](Stream[T]):
    """Stream node: a head and a lazy tail."""

    __slots__ = ("_head", "_tail")

    def __init__(self, head: T, tail: Lazy[Stream[T]]) -> None:
        self._head = head
        self._tail = tail


_EMPTY = EmptyStream()


def _zip[A, B](left: Stream[A], right: Stream[B]) -> Stream[tuple[A, B]]:
    if isinstance(left, ConsStream) and isinstance(right, ConsStream):
        left_tail, right_tail = left._tail, right._tail
        return ConsStream(
            (left._head, right._head),
            Lazy.of(lambda: _zip(left_tail.get(), right_tail.get())),
        )
    return Stream.empty()


def _concat[T](first: Stream[T], rest: Lazy[Stream[T]]) -> Stream[T]:
    if not isinstance(first, ConsStream):
        return rest.get()
    tail = first._tail
    return ConsStream(first._head, Lazy.of(lambda: _concat(tail.get(), rest)))


__all__ = ("Stream", "EmptyStream", "ConsStream")
