"""
Suffix extraction with per-word caching.

Rule chains probe the same word endings over and over while testing
successive rules, so each working word gets its own small cache keyed by
(length from end, characters to keep).
"""
from __future__ import annotations


def last(word: str, length: int, stop_after: int | None = None) -> str:
    """
    Return `stop_after` characters starting `length` characters from the end.

    `stop_after` defaults to `length` (plain "last N letters"). When `length`
    exceeds the word length the whole word is returned.
    """
    if stop_after is None:
        stop_after = length
    start = len(word) - length
    if start < 0:
        return word
    return word[start : start + stop_after]


class LastCache:
    """Cache of `last()` results for exactly one working word."""

    def __init__(self):
        self._cache: dict[tuple[int, int], str] = {}

    def get(self, length: int, stop_after: int) -> str | None:
        """Cached value, or None on a miss."""
        return self._cache.get((length, stop_after))

    def push(self, value: str, length: int, stop_after: int) -> None:
        self._cache[(length, stop_after)] = value

    def clear(self) -> None:
        self._cache.clear()

    def size(self) -> int:
        return len(self._cache)
