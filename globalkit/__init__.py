"""Edit distance, hash combination and small helper routines."""

from .distance import Grid, GridIndexError, edit_distance, levenshtein, rolling_edit_distance, utf16_units
from .hashing import HashCombiner, combine_hash_values, combine_hashes

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "GridIndexError",
    "HashCombiner",
    "combine_hash_values",
    "combine_hashes",
    "edit_distance",
    "levenshtein",
    "rolling_edit_distance",
    "utf16_units",
]
