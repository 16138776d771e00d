"""
Generic algorithm layer
=======================

Free functions over the `Collection` / `Seq` capabilities. Reductions that
need a non-empty input return Nothing() instead of raising.
"""

from .folding import reduce, sum_on
from .grouping import arrange_by, distinct_by, remove_all
from .ordering import Desc, Ordering, max_by, max_on, min_by, min_on, sort_on
from .projection import pluck, plucker
from .shuffle import shuffle
from .windows import sliding, zip_with_index

__all__ = (
    # Ordering
    "Desc",
    "Ordering",
    "sort_on",
    "min_by",
    "max_by",
    "min_on",
    "max_on",
    # Folding
    "reduce",
    "sum_on",
    # Grouping
    "arrange_by",
    "distinct_by",
    "remove_all",
    # Projection
    "pluck",
    "plucker",
    # Windows
    "sliding",
    "zip_with_index",
    # Shuffle
    "shuffle",
)
