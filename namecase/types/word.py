"""
Word and letter-case mask types.

A `Word` is one token of a full name. All rule logic runs on its lowercase
copy; the `CaseMask` captured from the raw input puts the original styling
(all caps, capitalized, internal capitals) back onto every declined form.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from namecase.types.enums import Gender, NamePart
from namecase.types.results import GenderScore


@dataclass(frozen=True)
class CaseMask:
    """Per-letter uppercase flags of the raw word plus a whole-word flag."""

    letters: tuple[bool, ...]
    is_upper_case: bool

    @classmethod
    def from_word(cls, word: str) -> CaseMask:
        return cls(letters=tuple(ch.isupper() for ch in word), is_upper_case=word.isupper())

    def apply(self, forms: Sequence[str]) -> list[str]:
        """Return `forms` restyled with the recorded casing."""
        if self.is_upper_case:
            return [form.upper() for form in forms]

        mask_length = len(self.letters)
        restored = []
        for form in forms:
            restored.append(
                "".join(
                    ch.upper() if i < mask_length and self.letters[i] else ch
                    for i, ch in enumerate(form)
                ),
            )
        return restored


class Word:
    """A single name token with its role, gender and declined forms."""

    def __init__(self, word: str, name_part: NamePart | None = None, gender: Gender | None = None):
        self._mask = CaseMask.from_word(word)
        self._name = word.lower()
        self.name_part = name_part
        self._gender = gender
        self._gender_explicit = gender is not None
        self.gender_score = GenderScore()
        self.rule = 0
        self._name_cases: list[str] = []

    def __repr__(self) -> str:
        part = self.name_part.value if self.name_part else None
        gender = self._gender.value if self._gender else None
        return f"Word({self._name!r}, part={part}, gender={gender}, rule={self.rule})"

    @property
    def name(self) -> str:
        """Lowercase working copy of the word."""
        return self._name

    @property
    def mask(self) -> CaseMask:
        return self._mask

    @property
    def name_cases(self) -> list[str]:
        return self._name_cases

    @name_cases.setter
    def name_cases(self, forms: Sequence[str]) -> None:
        self._name_cases = self._mask.apply(forms)

    @property
    def gender(self) -> Gender | None:
        return self._gender

    @property
    def gender_explicit(self) -> bool:
        """True when a caller fixed the gender instead of the heuristics."""
        return self._gender_explicit

    def set_gender(self, gender: Gender | None, explicit: bool = False) -> None:
        self._gender = gender
        self._gender_explicit = explicit and gender is not None

    def is_gender_solved(self) -> bool:
        return self._gender is not None

    def get_name_case(self, case: int) -> str:
        """Form for one case; empty string when the word has not been declined."""
        if not self._name_cases:
            return ""
        return self._name_cases[case]

    def reset(self) -> None:
        """Forget everything computed from the current input, keeping caller choices."""
        self._name_cases = []
        self.rule = 0
        self.gender_score = GenderScore()
        if not self._gender_explicit:
            self._gender = None
