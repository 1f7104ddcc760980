from __future__ import annotations

import itertools

import pytest

from globalkit.distance import edit_distance, levenshtein, rolling_edit_distance, utf16_units

from tests.helpers import SAMPLE_STRINGS


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("kitten", "sitting", 3),
        ("", "", 0),
        ("abc", "abc", 0),
        ("abc", "abd", 1),
        ("", "abc", 3),
        ("abc", "", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("a", "b", 1),
    ],
)
def test_known_distances(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected


def test_identity_and_empty_properties() -> None:
    for text in SAMPLE_STRINGS:
        units = len(utf16_units(text))
        assert levenshtein(text, text) == 0
        assert levenshtein("", text) == units
        assert levenshtein(text, "") == units


def test_symmetry_and_zero_only_for_equal_inputs() -> None:
    for a, b in itertools.product(SAMPLE_STRINGS, repeat=2):
        d = levenshtein(a, b)
        assert d == levenshtein(b, a)
        assert (d == 0) == (a == b)


def test_triangle_inequality() -> None:
    for a, b, c in itertools.product(SAMPLE_STRINGS[:10], repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_rolling_variant_matches_full_table() -> None:
    for a, b in itertools.product(SAMPLE_STRINGS, repeat=2):
        units_a, units_b = utf16_units(a), utf16_units(b)
        assert rolling_edit_distance(units_a, units_b) == edit_distance(units_a, units_b)


def test_text_is_compared_as_utf16_code_units() -> None:
    assert utf16_units("ab") == (0x61, 0x62)
    assert utf16_units("😀") == (0xD83D, 0xDE00)
    # one astral character is two code units
    assert levenshtein("a😀b", "ab") == 2
    assert levenshtein("café", "cafe") == 1
    assert edit_distance("a😀b", "ab") == 2


def test_generic_sequences_compare_elementwise() -> None:
    assert edit_distance([1, 2, 3], [1, 3]) == 1
    assert edit_distance(("x", "y"), ("y", "x")) == 2
    assert levenshtein(["alpha", "beta"], ["alpha", "gamma", "beta"]) == 1


def test_every_entry_point_uses_the_same_text_units() -> None:
    for a, b in itertools.product(SAMPLE_STRINGS, repeat=2):
        expected = edit_distance(utf16_units(a), utf16_units(b))
        assert edit_distance(a, b) == expected
        assert rolling_edit_distance(a, b) == expected
        assert levenshtein(a, b) == expected
    assert rolling_edit_distance("😀", "") == 2
