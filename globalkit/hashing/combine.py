"""Order-sensitive combination of integer hash codes.

The mixer is the golden-ratio scheme popularised by ``boost::hash_combine``:
``seed ^ (value + MAGIC + (seed << 6) + (seed >> 2))`` evaluated on unsigned
machine words. It spreads bits well enough for composite dictionary keys but is
neither collision free nor cryptographically secure.
"""
from __future__ import annotations

from typing import Iterable

from globalkit.config import SUPPORTED_WORD_BITS, get_settings

__all__ = [
    "MAGIC_32",
    "MAGIC_64",
    "HashCombiner",
    "combine_hash_values",
    "combine_hashes",
    "default_combiner",
]

MAGIC_64 = 0x9E3779B97F4A7C15
MAGIC_32 = 0x9E3779B9
_MAGIC_BY_BITS = {64: MAGIC_64, 32: MAGIC_32}


class HashCombiner:
    """Hash mixer bound to one machine word size.

    Inputs are taken as two's complement bit patterns of ``word_bits`` wide words
    and results are handed back as signed words, so ``-1`` and ``2**64 - 1`` mix
    identically on a 64-bit combiner.
    """

    __slots__ = ("word_bits", "magic", "_mask", "_sign_bit")

    def __init__(self, word_bits: int = 64) -> None:
        if word_bits not in SUPPORTED_WORD_BITS:
            raise ValueError(f"word_bits must be one of {SUPPORTED_WORD_BITS}, got {word_bits}")
        self.word_bits = word_bits
        self.magic = _MAGIC_BY_BITS[word_bits]
        self._mask = (1 << word_bits) - 1
        self._sign_bit = 1 << (word_bits - 1)

    def combine(self, initial: int, other: int) -> int:
        """Mix ``other`` into the accumulator ``initial``."""

        mask = self._mask
        lhs = initial & mask
        rhs = other & mask
        mixed = (rhs + self.magic + ((lhs << 6) & mask) + (lhs >> 2)) & mask
        return self._to_signed(lhs ^ mixed)

    def combine_all(self, hashes: Iterable[int]) -> int:
        """Left-fold :meth:`combine` over ``hashes`` starting from ``0``."""

        combined = 0
        for value in hashes:
            combined = self.combine(combined, value)
        return combined

    def _to_signed(self, value: int) -> int:
        return value - (1 << self.word_bits) if value & self._sign_bit else value

    def __repr__(self) -> str:
        return f"HashCombiner(word_bits={self.word_bits})"


default_combiner = HashCombiner(get_settings().word_bits)


def combine_hash_values(initial: int, other: int) -> int:
    """Combine two hash codes with the process-wide combiner."""

    return default_combiner.combine(initial, other)


def combine_hashes(values: Iterable[int]) -> int:
    """Fold ``values`` into one hash code; an empty input yields ``0``."""

    return default_combiner.combine_all(values)
