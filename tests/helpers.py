from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

SAMPLE_STRINGS: List[str] = [
    "",
    "a",
    "abc",
    "abd",
    "kitten",
    "sitting",
    "sitten",
    "flaw",
    "lawn",
    "intention",
    "execution",
    "café",
    "cafe",
    "日本語",
    "日本",
    "a😀b",
    "ab",
]


@dataclass
class Bookmark:
    title: str
    page: int
    tags: List[str]


@dataclass
class Shelf:
    name: str
    bookmarks: List[Bookmark]
    featured: Optional[Bookmark] = None
    by_label: Dict[str, Bookmark] = field(default_factory=dict)
