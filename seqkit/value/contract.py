"""
Value contract
==============

What "the same value" means for algorithms that deduplicate, group, or look up
by key. Python's hash-backed builtins consult `__eq__` / `__hash__`, so
`Value` routes both to `equals` / `hash_code`.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Iterable

from .._errors import ContractViolationError
from .._logging import get_logger

logger = get_logger(__name__)

_HASH_MASK = 0xFFFFFFFF

_PRIMITIVES = (str, bytes, int, float, complex, bool)


class Value(abc.ABC):
    """
    Structural value.

    Two instances are equal if they represent the same value, regardless of
    whether they are the same object in memory. Equal values must return the
    same `hash_code()`; unequal values may collide.
    """

    __slots__ = ()

    @abc.abstractmethod
    def equals(self, other: object) -> bool:
        """Structural equality. Returns False for None or incompatible shapes."""

    @abc.abstractmethod
    def hash_code(self) -> int:
        """Deterministic hash of the structural content."""

    @abc.abstractmethod
    def __str__(self) -> str: ...

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    def __repr__(self) -> str:
        return str(self)


# ============================================================================
# Hashing helpers
# ============================================================================


def hash_of(value: object, *, context: str = "hash_of") -> int:
    """Hash any element. None hashes to 0; unhashable values fail fast."""
    if value is None:
        return 0
    try:
        return hash(value)
    except TypeError as exc:
        logger.debug("%s: unhashable %s", context, type(value).__name__)
        raise ContractViolationError(context, value) from exc


def combine_hashes(hashes: Iterable[int]) -> int:
    """Order-sensitive combination (31 * h + x), kept within 32 bits."""
    result = 1
    for h in hashes:
        result = (31 * result + h) & _HASH_MASK
    return result


def unordered_hash(hashes: Iterable[int]) -> int:
    """Order-insensitive combination for sets and maps."""
    return sum(hashes) & _HASH_MASK


# ============================================================================
# Equality helpers
# ============================================================================


def values_equal(a: object, b: object) -> bool:
    """`==` that is safe for None on either side."""
    if a is None or b is None:
        return a is b
    return bool(a == b)


def has_equality(value: object) -> bool:
    """
    Whether `value` compares by content rather than identity.

    True for None, primitives, `Value` instances, tuples/frozensets whose
    members qualify, and objects whose type overrides `__eq__` and keeps a
    usable `__hash__`.
    """
    if value is None or isinstance(value, (*_PRIMITIVES, Value)):
        return True
    if isinstance(value, tuple | frozenset):
        return all(has_equality(v) for v in value)
    cls = type(value)
    return cls.__eq__ is not object.__eq__ and cls.__hash__ is not None


def has_true_equality(items: Iterable[typing.Any]) -> bool:
    """Check the first non-None element; vacuously true when there is none."""
    for item in items:
        if item is not None:
            return has_equality(item)
    return True


def contract_true_equality(context: str, *values: object) -> None:
    """Raise if any value would silently fall back to identity comparison."""
    for value in values:
        if not has_equality(value):
            logger.debug("%s: %s has identity equality only", context, type(value).__name__)
            raise ContractViolationError(context, value)


__all__ = (
    "Value",
    "hash_of",
    "combine_hashes",
    "unordered_hash",
    "values_equal",
    "has_equality",
    "has_true_equality",
    "contract_true_equality",
)
