import pytest

from fuzzc.distance import (
    UndefinedDistanceError,
    damerau_levenshtein_distance,
    hamming_distance,
    levenshtein_distance,
)


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("", "", 0),
        ("a", "", 1),
        ("", "a", 1),
        ("abc", "abc", 0),
    ],
)
def test_levenshtein_distance(s1, s2, expected):
    assert levenshtein_distance(s1, s2) == expected


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("karolin", "kathrin", 3),
        ("karolin", "kerstin", 3),
        ("1011101", "1001001", 2),
        ("2173896", "2233796", 3),
        ("", "", 0),
        ("a", "a", 0),
        ("a", "b", 1),
    ],
)
def test_hamming_distance(s1, s2, expected):
    assert hamming_distance(s1, s2) == expected


def test_hamming_distance_undefined_for_different_lengths():
    with pytest.raises(UndefinedDistanceError):
        hamming_distance("abc", "a")


def test_undefined_distance_error_is_value_error():
    with pytest.raises(ValueError):
        hamming_distance("a", "abc")


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("ca", "abc", 3),
        ("abc", "ac", 1),
        ("abcdef", "abcfde", 2),
        ("", "", 0),
        ("a", "", 1),
        ("", "a", 1),
        ("abc", "abc", 0),
    ],
)
def test_damerau_levenshtein_distance(s1, s2, expected):
    assert damerau_levenshtein_distance(s1, s2) == expected


def test_damerau_counts_adjacent_transposition_once():
    assert damerau_levenshtein_distance("ab", "ba") == 1
    assert levenshtein_distance("ab", "ba") == 2


@pytest.mark.parametrize(
    "s1, s2",
    [("kitten", "sitting"), ("flaw", "lawn"), ("ca", "abc"), ("abcdef", "abcfde")],
)
def test_distances_are_symmetric(s1, s2):
    assert levenshtein_distance(s1, s2) == levenshtein_distance(s2, s1)
    assert damerau_levenshtein_distance(s1, s2) == damerau_levenshtein_distance(s2, s1)