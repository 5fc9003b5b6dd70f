"""Fuzzy string matching: edit distances in ``fuzzc.distance``; similarity, best-match search and LCS in ``fuzzc.api``."""

__version__ = "0.1.0"