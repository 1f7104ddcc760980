"""Random integer helpers backed by the OS entropy source."""
from __future__ import annotations

import random

__all__ = ["random_below", "random_between"]

_rng = random.SystemRandom()


def random_below(n: int) -> int:
    """Uniform integer in ``[0, n)``; ``0`` when ``n`` is not positive."""

    if n <= 0:
        return 0
    return _rng.randrange(n)


def random_between(a: int, b: int) -> int:
    """Uniform integer between ``a`` and ``b`` inclusive, in either order."""

    low, high = min(a, b), max(a, b)
    if high == low:
        return low
    return random_below(high - low + 1) + low
