"""Edit-distance functions between two strings."""

from __future__ import annotations

__all__ = [
    "UndefinedDistanceError",
    "levenshtein_distance",
    "damerau_levenshtein_distance",
    "hamming_distance",
]


class UndefinedDistanceError(ValueError):
    """Raised when a distance is not defined for the given pair of strings."""


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the minimum number of insertions, deletions and substitutions
    needed to turn ``s1`` into ``s2``."""
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            cost = int(c1 != c2)
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            )
        previous = current
    return previous[-1]


def damerau_levenshtein_distance(s1: str, s2: str) -> int:
    """Return the edit distance of ``s1`` and ``s2`` where a transposition of
    two adjacent characters also counts as a single edit."""
    before_previous: list[int] = []
    previous = list(range(len(s2) + 1))
    previous_c1 = ""
    for i, c1 in enumerate(s1, 1):
        current = [i]
        previous_c2 = ""
        for j, c2 in enumerate(s2, 1):
            cost = int(c1 != c2)
            value = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            if i > 1 and j > 1 and c1 == previous_c2 and previous_c1 == c2:
                value = min(value, before_previous[j - 2] + cost)
            current.append(value)
            previous_c2 = c2
        before_previous, previous = previous, current
        previous_c1 = c1
    return previous[-1]


def hamming_distance(s1: str, s2: str) -> int:
    """Return the number of positions at which two equal-length strings differ.

    Raises :class:`UndefinedDistanceError` when the lengths differ.
    """
    if len(s1) != len(s2):
        raise UndefinedDistanceError(
            "Hamming distance is only defined for strings of equal length"
        )
    return sum(c1 != c2 for c1, c2 in zip(s1, s2))