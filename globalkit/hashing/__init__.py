"""Hash-combination helpers."""

from .combine import (
    MAGIC_32,
    MAGIC_64,
    HashCombiner,
    combine_hash_values,
    combine_hashes,
    default_combiner,
)

__all__ = [
    "MAGIC_32",
    "MAGIC_64",
    "HashCombiner",
    "combine_hash_values",
    "combine_hashes",
    "default_combiner",
]
