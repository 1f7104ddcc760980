"""Levenshtein distance over sequences and UTF-16 encoded text.

Text is compared one UTF-16 code unit at a time, so a character outside the
Basic Multilingual Plane (an emoji, for example) counts as two units. Results for
non-ASCII input therefore differ from a code-point based distance. Every entry
point below converts ``str`` arguments the same way, so distances stay
comparable across callers.
"""
from __future__ import annotations

from typing import Hashable, List, Sequence, Tuple

from globalkit.distance.grid import Grid

__all__ = ["edit_distance", "levenshtein", "rolling_edit_distance", "utf16_units"]

Units = Sequence[Hashable]


def utf16_units(text: str) -> Tuple[int, ...]:
    """Return the UTF-16 code units of ``text`` (surrogate pairs split in two)."""

    encoded = text.encode("utf-16-le", "surrogatepass")
    return tuple(int.from_bytes(encoded[idx : idx + 2], "little") for idx in range(0, len(encoded), 2))


def _as_units(value: str | Units) -> Units:
    return utf16_units(value) if isinstance(value, str) else value


def edit_distance(a: str | Units, b: str | Units) -> int:
    """Return the minimum number of insertions, deletions and substitutions turning ``a`` into ``b``.

    ``str`` arguments are compared as UTF-16 code units; other sequences are
    compared element by element with ``==``. The full ``(len(a) + 1) x
    (len(b) + 1)`` table is filled: column ``i`` tracks the first ``i`` units of
    ``a`` and row ``j`` the first ``j`` units of ``b``.
    """

    a = _as_units(a)
    b = _as_units(b)
    m = len(a)
    n = len(b)
    dist = Grid(m + 1, n + 1)

    for i in range(1, m + 1):
        dist[i, 0] = i
    for j in range(1, n + 1):
        dist[0, j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dist[i, j] = dist[i - 1, j - 1]
            else:
                dist[i, j] = 1 + min(
                    dist[i - 1, j],  # deletion
                    dist[i, j - 1],  # insertion
                    dist[i - 1, j - 1],  # substitution
                )

    return dist[m, n]


def rolling_edit_distance(a: str | Units, b: str | Units) -> int:
    """Same result as :func:`edit_distance` keeping only two rows of the table."""

    a = _as_units(a)
    b = _as_units(b)
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous: List[int] = list(range(len(b) + 1))
    for i, unit_a in enumerate(a, start=1):
        current = [i]
        for j, unit_b in enumerate(b, start=1):
            if unit_a == unit_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def levenshtein(a: str | Units, b: str | Units) -> int:
    """Edit distance between two strings (or sequences); alias of :func:`edit_distance`."""

    return edit_distance(a, b)
