"""Edit-distance computation backed by a dense integer grid."""

from .grid import Grid, GridIndexError
from .levenshtein import edit_distance, levenshtein, rolling_edit_distance, utf16_units

__all__ = [
    "Grid",
    "GridIndexError",
    "edit_distance",
    "levenshtein",
    "rolling_edit_distance",
    "utf16_units",
]
