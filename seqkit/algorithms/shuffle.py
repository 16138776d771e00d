"""Shuffle

In-place Fisher–Yates over a mutable working buffer."""

from __future__ import annotations

import random


def shuffle[T](items: list[T], *, rng: random.Random | None = None) -> list[T]:
    """
    Uniformly permute `items` in place and return it. O(n).

    `rng` defaults to the module-level generator; pass a seeded
    `random.Random` for reproducible orders.
    """
    randrange = rng.randrange if rng is not None else random.randrange
    current = len(items)
    while current != 0:
        picked = randrange(current)
        current -= 1
        items[current], items[picked] = items[picked], items[current]
    return items


__all__ = ("shuffle",)
