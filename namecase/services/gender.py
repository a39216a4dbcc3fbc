"""
Gender resolution service for name declension.

Gender is a property of the whole name, not of each word: an explicit choice
anywhere is applied to every word, otherwise the per-word heuristic scores
are summed and one decision is made for the full set.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from namecase.services.rules import LanguageRules
from namecase.types import Gender, GenderScore, NamePart, Word

logger = logging.getLogger(__name__)


class GenderResolutionService:
    """Service for resolving one gender across all words of a name."""

    def __init__(self, rules: LanguageRules):
        self._rules = rules

    def score_word(self, word: Word) -> GenderScore:
        """Heuristic score for one word according to its role."""
        if word.name_part == NamePart.GIVEN:
            return self._rules.gender_by_given_name(word.name)
        if word.name_part == NamePart.FAMILY:
            return self._rules.gender_by_family_name(word.name)
        if word.name_part == NamePart.PATRONYMIC:
            return self._rules.gender_by_patronymic(word.name)
        return GenderScore()

    def resolve(self, words: Iterable[Word], explicit_gender: Gender | None = None) -> Gender:
        """Assign the resolved gender to every word and return it."""
        words = list(words)

        if explicit_gender is None:
            explicit_gender = next((w.gender for w in words if w.gender_explicit), None)

        if explicit_gender is not None:
            for word in words:
                word.set_gender(explicit_gender, explicit=True)
            return explicit_gender

        total = GenderScore()
        for word in words:
            if word.name_part is None:
                continue
            word.gender_score = self.score_word(word)
            total = total + word.gender_score

        gender = total.dominant()
        logger.debug(f"Resolved gender {gender.value} from score man={total.man} woman={total.woman}")

        for word in words:
            word.set_gender(gender)
        return gender
