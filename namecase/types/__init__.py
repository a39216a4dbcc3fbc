"""
Types package for name declension.

This package contains enums, configuration, result types and the word
containers used throughout the declension engine.
"""

from namecase.types.config import NameCaseConfig
from namecase.types.enums import Gender, NamePart
from namecase.types.results import UNHANDLED_RULE, GenderScore, RuleMatch
from namecase.types.word import CaseMask, Word
from namecase.types.word_array import WordArray

__all__ = [
    "UNHANDLED_RULE",
    "CaseMask",
    "Gender",
    "GenderScore",
    "NameCaseConfig",
    "NamePart",
    "RuleMatch",
    "Word",
    "WordArray",
]
