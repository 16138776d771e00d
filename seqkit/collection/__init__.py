from .hash_map import HashMap
from .hash_set import HashSet
from .protocols import Collection, Seq
from .vector import Vector

__all__ = (
    # Capabilities
    "Collection",
    "Seq",
    # Containers
    "HashMap",
    "HashSet",
    "Vector",
)
