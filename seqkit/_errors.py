from __future__ import annotations

import typing


class ContractViolationError(Exception):
    """A value lacks the hashing/equality a hash-backed structure needs."""

    context: str
    value: typing.Any

    def __init__(self, context: str, value: typing.Any) -> None:
        self.context = context
        self.value = value
        super().__init__(
            f"{context}: {type(value).__name__} does not support structural "
            "equality and hashing"
        )


class LazyCycleError(Exception):
    """A lazy cell was forced again while its producer was still running."""

    def __init__(self) -> None:
        super().__init__("Lazy value forced re-entrantly by its own producer")


__all__ = ("ContractViolationError", "LazyCycleError")
