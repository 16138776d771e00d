"""Folding algorithms

Numeric and pairwise reductions over any collection."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Nothing, Option, Some

from ..collection.protocols import Collection


def sum_on[T](collection: Collection[T], number_fn: Callable[[T], float]) -> float:
    """Left fold from 0, adding number_fn(element)."""
    return collection.fold_left(0, lambda so_far, cur: so_far + number_fn(cur))


def reduce[T](collection: Collection[T], combine: Callable[[T, T], T]) -> Option[T]:
    """
    Left fold seeded with the first element.

    Nothing() for an empty collection, never an exception.
    """
    iterator = iter(collection)
    for result in iterator:
        for item in iterator:
            result = combine(result, item)
        return Some(result)
    return Nothing()


__all__ = ("sum_on", "reduce")
