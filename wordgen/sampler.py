"""
Sampling without replacement.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def sample(pool: Sequence[T], count: int, rng: random.Random | None = None) -> list[T]:
    """
    Up to `count` distinct items from `pool`, uniform over all size-`count` subsets.
    A pool no larger than `count` comes back whole, in its original order.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    items = list(pool)
    n = len(items)
    if n <= count:
        return items
    rng = rng or random.Random()
    # Partial Fisher-Yates: position i gets a uniform pick from the not-yet-chosen tail
    for i in range(count):
        j = rng.randrange(i, n)
        items[i], items[j] = items[j], items[i]
    return items[:count]
