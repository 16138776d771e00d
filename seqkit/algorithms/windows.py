"""
Window algorithms
=================

Index zipping and lazy sliding windows. Both are safe on infinite streams as
long as only a bounded prefix of the result is consumed.
"""

from __future__ import annotations

import typing

from ..collection.protocols import Seq
from ..lazy.cell import Lazy
from ..lazy.stream import ConsStream, Stream


def zip_with_index[T](seq: Seq[T]) -> Seq[tuple[T, int]]:
    """Pair each element with its zero-based position."""
    return seq.zip(Stream.iterate(0, lambda i: i + 1))


def sliding[T, S: Seq[typing.Any]](seq: S, size: int) -> Stream[S]:
    """
    Successive non-overlapping windows of `size` elements; the last may be shorter.

    Each window is built only when the consumer advances to it:
        sliding(Vector.of(1, 2, 3, 4, 5), 2)   # [1,2], [3,4], [5]
    """
    if size < 1:
        raise ValueError("sliding window size must be >= 1")
    return _windows(seq, size)


def _windows[S: Seq[typing.Any]](seq: S, size: int) -> Stream[S]:
    # take + drop rather than a split, so no second copy of the rest is held
    if seq.is_empty():
        return Stream.empty()
    return ConsStream(seq.take(size), Lazy.of(lambda: _windows(seq.drop(size), size)))


__all__ = ("zip_with_index", "sliding")
