# fuzzc

Fuzzy string matching with no dependencies.

`fuzzc` has three edit distances and a similarity score that works with any of them. It also has helpers that pick the best match, or every good match, from a list of candidates, and a longest common subsequence function.

## Installation

```
pip install fuzzc
```

## Distances

The distance functions are in `fuzzc.distance`.

```python
from fuzzc.distance import (
    levenshtein_distance,
    damerau_levenshtein_distance,
    hamming_distance,
    UndefinedDistanceError,
)

levenshtein_distance("kitten", "sitting")          # 3
damerau_levenshtein_distance("abcdef", "abcfde")   # 2 (an adjacent transposition counts as one edit)
hamming_distance("karolin", "kathrin")             # 3
```

The Hamming distance is defined only for strings of equal length. For strings of different lengths, `hamming_distance` raises `UndefinedDistanceError`, which is a subclass of `ValueError`.

## Similarity and matching

The similarity and matching functions are in `fuzzc.api`.

```python
from fuzzc.api import (
    Match,
    calculate_similarity,
    top_match,
    matches_in_threshold,
    longest_common_subsequence,
)
from fuzzc.distance import levenshtein_distance

calculate_similarity("kitten", "sitting", levenshtein_distance)
# 1 - distance / length of the longer string, here about 0.571

top_match("kitten", ["sitting", "flitting", "biting", "kitchen"], levenshtein_distance)
# 'kitchen'

for match in matches_in_threshold(
    "kitten", ["sitting", "flitting", "biting", "kitchen"], 0.5, levenshtein_distance
):
    print(match.data, match.similarity)

longest_common_subsequence("AGGTAB", "GXTXAYB")    # 'GTAB'
```

Any callable that takes two strings and returns an integer distance can be used as the distance function.

- `calculate_similarity` returns `1 - distance / max(len(s1), len(s2))`. The result is `1.0` for identical non-empty strings. If both strings are empty, it returns NaN. Errors raised by the distance function are not caught, so an `UndefinedDistanceError` from `hamming_distance` reaches the caller.
- `top_match` returns the candidate with the highest similarity. When candidates tie, the first one wins. It skips candidates whose distance is undefined. It returns `None` if no candidate has a similarity above zero.
- `matches_in_threshold` returns a list with one `Match` for each candidate whose similarity is strictly above `threshold`, in input order. A `Match` is a frozen dataclass with the fields `data` and `similarity`.
  - The list is empty if no candidate qualifies.
  - Candidates whose distance is undefined are skipped.
  - A `threshold` outside `[0.0, 1.0]` raises `ValueError`.
  - Passing `None` as the candidates raises `TypeError`.
- `longest_common_subsequence` returns one longest common subsequence of the two strings. If they share no characters, it returns an empty string.

## What it does not do

`fuzzc` is a library only. It has no command-line tool, and it does not index or store candidate lists. Every call compares the query against each candidate in turn.

## Running the tests

```
pip install -e .[test]
pytest
```