"""
Ordered collection of name words.
"""
from __future__ import annotations

from collections.abc import Iterator

from namecase.types.enums import NamePart
from namecase.types.word import Word


class WordArray:
    """Words in declaration order (or left-to-right order of a split full name)."""

    def __init__(self):
        self._words: list[Word] = []

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def add_word(self, word: Word) -> None:
        self._words.append(word)

    def get_word(self, index: int) -> Word:
        return self._words[index]

    def get_by_name_part(self, name_part: NamePart) -> Word:
        """
        First word with the given role.

        Returns an empty `Word("")` when no such part was supplied; its forms
        are empty, which callers treat as "part missing".
        """
        for word in self._words:
            if word.name_part == name_part:
                return word
        return Word("")
