"""Projection

Field extraction from mappings, sequences and plain objects."""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping, Sequence

from ..collection.protocols import Collection


def plucker(key: typing.Any) -> Callable[[typing.Any], typing.Any]:
    """
    Selector returning `key` from each element.

    Mappings are indexed by key, sequences by integer position, anything else
    by attribute name.
    """

    def pick(item: typing.Any) -> typing.Any:
        if isinstance(item, Mapping) or (
            isinstance(key, int) and isinstance(item, Sequence) and not isinstance(item, str)
        ):
            return typing.cast(typing.Any, item)[key]
        return getattr(item, key)

    return pick


def pluck[T](seq: Collection[T], key: typing.Any) -> Collection[typing.Any]:
    """Project `key` out of every element; same family as the input."""
    return seq.map(plucker(key))


__all__ = ("plucker", "pluck")
