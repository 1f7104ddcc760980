"""String trimming helpers.

``characters`` is a set of characters given as a string; ``None`` means
whitespace and newlines.
"""
from __future__ import annotations

from typing import Optional

__all__ = ["ltrim", "rtrim", "trim"]


def ltrim(text: str, characters: Optional[str] = None) -> str:
    """Strip leading ``characters`` from ``text``.

    >>> ltrim("   *   Hello    *    ", " *")
    'Hello    *    '
    >>> ltrim(",A,B,C", ",")
    'A,B,C'
    """

    return text.lstrip(characters)


def rtrim(text: str, characters: Optional[str] = None) -> str:
    return text.rstrip(characters)


def trim(text: str, characters: Optional[str] = None) -> str:
    return rtrim(ltrim(text, characters), characters)
