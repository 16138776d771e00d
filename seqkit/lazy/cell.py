"""Lazy cell

Deferred, memoized value: the producer runs at most once, on first read."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from .._errors import LazyCycleError
from .._logging import get_logger
from .._types import Thunk
from ..value.display import to_string_helper

logger = get_logger(__name__)


class _Pending:
    """Uncomputed state: holds the producer."""

    __slots__ = ("thunk",)

    def __init__(self, thunk: Thunk[typing.Any]) -> None:
        self.thunk = thunk


class _Evaluating:
    """The producer is running; reading now would be a cycle."""

    __slots__ = ()


class _Forced:
    """Computed state: holds the cached result."""

    __slots__ = ("value",)

    def __init__(self, value: typing.Any) -> None:
        self.value = value


_EVALUATING = _Evaluating()

type _State = _Pending | _Evaluating | _Forced


class Lazy[T]:
    """
    Memoized deferred computation.

    Invariants:
    - The producer is invoked at most once per successful evaluation,
      however many consumers share the cell.
    - After the first force, `get()` only returns the cached value.
    - A producer that raises leaves the cell pending; the next read retries.

    Single-threaded: the pending -> forced transition is not guarded by a lock.
    """

    __slots__ = ("_state",)

    def __init__(self, thunk: Thunk[T], /) -> None:
        """Create a Lazy from a zero-argument producer. Does not call it."""
        self._state: _State = _Pending(thunk)

    @staticmethod
    def of[V](thunk: Thunk[V], /) -> Lazy[V]:
        """Build a lazy cell; nothing is evaluated yet."""
        return Lazy(thunk)

    @staticmethod
    def forced[V](value: V, /) -> Lazy[V]:
        """An already-evaluated cell."""
        cell: Lazy[V] = Lazy(_never)
        cell._state = _Forced(value)
        return cell

    def get(self) -> T:
        """Force evaluation (once) and return the cached value."""
        state = self._state
        match state:
            case _Forced():
                return state.value
            case _Evaluating():
                logger.debug("re-entrant force of %r", self)
                raise LazyCycleError()
            case _Pending():
                self._state = _EVALUATING
                try:
                    value = state.thunk()
                except BaseException:
                    self._state = state
                    raise
                self._state = _Forced(value)
                return value
            case _ as unreachable:
                assert_never(unreachable)

    def is_evaluated(self) -> bool:
        """True once the producer has completed."""
        return isinstance(self._state, _Forced)

    def map[U](self, f: Callable[[T], U], /) -> Lazy[U]:
        """New lazy cell applying `f`; forces this one only when it is forced."""
        return Lazy(lambda: f(self.get()))

    def __call__(self) -> T:
        return self.get()

    def __repr__(self) -> str:
        state = self._state
        if isinstance(state, _Forced):
            return f"Lazy({to_string_helper(state.value)})"
        return "Lazy(?)"


def _never() -> typing.NoReturn:
    raise AssertionError("forced Lazy has no producer")


__all__ = ("Lazy",)
