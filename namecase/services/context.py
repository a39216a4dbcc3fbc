"""
Working-word state for declining a single token.

A fresh `DeclensionContext` is created for every word the engine declines
and handed to each rule of the selected chain. It owns the suffix cache for
that word and the helpers rules use to test endings and build case forms.
"""
from __future__ import annotations

from collections.abc import Sequence

from namecase.utils.last_cache import LastCache, last


class DeclensionContext:
    """Per-word state: the lowercase word, the case count and the suffix cache."""

    def __init__(self, word: str, case_count: int):
        self.word = word
        self.case_count = case_count
        self.rule = 0
        self.forms: list[str] = []
        self._cache = LastCache()

    # ---------- suffix helpers ----------
    def last(self, length: int, stop_after: int | None = None) -> str:
        """Cached `last()` on the working word."""
        if stop_after is None:
            stop_after = length
        result = self._cache.get(length, stop_after)
        if result is None:
            result = last(self.word, length, stop_after)
            self._cache.push(result, length, stop_after)
        return result

    @staticmethod
    def in_letters(needle: str, letters: str | Sequence[str]) -> bool:
        """
        Membership test used by rule conditions.

        With a string haystack `needle` must be a substring of it; with a
        sequence it must equal one of the items. An empty needle never matches.
        """
        if not needle:
            return False
        if isinstance(letters, str):
            return needle in letters
        return needle in tuple(letters)

    @staticmethod
    def in_names(needle: str, names: str | Sequence[str]) -> bool:
        """Exact match against one name or any of several names."""
        if isinstance(names, str):
            return needle == names
        return needle in tuple(names)

    # ---------- form builders ----------
    def word_forms(self, stem: str, endings: Sequence[str], replace_last: int = 0) -> list[str]:
        """
        Build all case forms from `stem`.

        Case 0 is always the working word itself. Every other case is the stem
        without its last `replace_last` characters plus that case's ending.
        """
        if len(endings) != self.case_count - 1:
            raise ValueError(
                f"expected {self.case_count - 1} endings for '{self.word}', got {len(endings)}",
            )
        if len(stem) >= replace_last:
            stem = stem[: len(stem) - replace_last]
        else:
            stem = ""

        self.forms = [self.word] + [stem + ending for ending in endings]
        return self.forms

    def same_forms(self) -> list[str]:
        """Every case equal to the working word."""
        self.forms = [self.word] * self.case_count
        return self.forms
