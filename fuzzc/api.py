"""Similarity scoring, best-match search and longest common subsequence."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from fuzzc.distance import UndefinedDistanceError

__all__ = [
    "Match",
    "calculate_similarity",
    "top_match",
    "matches_in_threshold",
    "longest_common_subsequence",
]

DistanceFunc = Callable[[str, str], int]


@dataclass(frozen=True)
class Match:
    """A candidate string together with its similarity to the query."""

    data: str
    similarity: float


def calculate_similarity(s1: str, s2: str, distance_func: DistanceFunc) -> float:
    """Return a similarity between 0.0 (completely different) and 1.0 (identical).

    Errors from ``distance_func`` (such as :class:`UndefinedDistanceError`)
    propagate. Two empty strings give NaN.
    """
    distance = distance_func(s1, s2)
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return math.nan
    return 1.0 - distance / max_len


def _similarities(
    s1: str, candidates: Iterable[str], distance_func: DistanceFunc
) -> Iterable[tuple[str, float]]:
    """Yield each candidate with its similarity, skipping undefined ones."""
    for candidate in candidates:
        try:
            yield candidate, calculate_similarity(s1, candidate, distance_func)
        except UndefinedDistanceError:
            continue


def top_match(
    s1: str, candidates: Iterable[str], distance_func: DistanceFunc
) -> str | None:
    """Return the first candidate with the highest positive similarity, or None."""
    best: str | None = None
    best_similarity = 0.0
    for candidate, similarity in _similarities(s1, candidates, distance_func):
        if similarity > best_similarity:
            best_similarity = similarity
            best = candidate
    return best


def matches_in_threshold(
    s1: str,
    candidates: Iterable[str],
    threshold: float,
    distance_func: DistanceFunc,
) -> list[Match]:
    """Return every candidate whose similarity is strictly above ``threshold``.

    ``threshold`` must lie in [0.0, 1.0]. Candidates keep their input order.
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be between 0.0 and 1.0, got {threshold}")
    if candidates is None:
        raise TypeError("candidates must be an iterable of strings")
    return [
        Match(candidate, similarity)
        for candidate, similarity in _similarities(s1, candidates, distance_func)
        if similarity > threshold
    ]


def longest_common_subsequence(s1: str, s2: str) -> str:
    """Return a longest common subsequence of ``s1`` and ``s2``."""
    table = [[0] * (len(s2) + 1)]
    for c1 in s1:
        previous = table[-1]
        row = [0]
        for j, c2 in enumerate(s2, 1):
            if c1 == c2:
                row.append(previous[j - 1] + 1)
            else:
                row.append(max(previous[j], row[j - 1]))
        table.append(row)

    chars: list[str] = []
    i, j = len(s1), len(s2)
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))