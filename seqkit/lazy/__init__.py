"""
Lazy evaluation engine
======================

- Lazy: memoized deferred cell
- Stream: cons sequence with a lazy tail (ConsStream / EmptyStream)
"""

from .cell import Lazy
from .stream import ConsStream, EmptyStream, Stream

__all__ = (
    "Lazy",
    "Stream",
    "ConsStream",
    "EmptyStream",
)
