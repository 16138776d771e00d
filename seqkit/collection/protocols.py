"""
Capability interface
====================

The only operations the algorithm layer relies on. Any collection providing
them works, whatever its backing structure.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

if typing.TYPE_CHECKING:
    from kungfu import Option

    from .._types import Comparator, Predicate, Selector
    from .hash_map import HashMap


@typing.runtime_checkable
class Collection[T](typing.Protocol):
    """Finite-or-lazy collection: iterate, filter, map, fold, group, slice."""

    def __iter__(self) -> Iterator[T]: ...

    def is_empty(self) -> bool: ...

    def filter(self, predicate: Predicate[T], /) -> typing.Self: ...

    def map[U](self, mapper: Callable[[T], U], /) -> Collection[U]: ...

    def fold_left[U](self, zero: U, fn: Callable[[U, T], U], /) -> U: ...

    def group_by[K](self, classifier: Selector[T, K], /) -> HashMap[K, typing.Self]: ...

    def take(self, n: int, /) -> typing.Self: ...

    def drop(self, n: int, /) -> typing.Self: ...

    def single(self) -> Option[T]:
        """The element if there is exactly one, otherwise Nothing()."""
        ...


@typing.runtime_checkable
class Seq[T](Collection[T], typing.Protocol):
    """Ordered collection: adds positional zip and comparator sorting."""

    def zip[U](self, other: Iterable[U], /) -> Seq[tuple[T, U]]: ...

    def sort_by(self, compare: Comparator[T], /) -> typing.Self: ...


__all__ = ("Collection", "Seq")
