"""
Result types for name declension.

This module contains the immutable values produced while declining a name:
gender scores accumulated by heuristics and the outcome of a rule chain.
"""
from __future__ import annotations

from dataclasses import dataclass

from namecase.types.enums import Gender

# Rule id recorded when no rule of a chain matched and the word was left as is
UNHANDLED_RULE = -1


@dataclass(frozen=True)
class GenderScore:
    """Masculine/feminine likelihood weights - combined by pairwise addition."""

    man: float = 0.0
    woman: float = 0.0

    def __post_init__(self):
        if self.man < 0 or self.woman < 0:
            raise ValueError("gender score weights must be non-negative")

    def __add__(self, other: GenderScore) -> GenderScore:
        if not isinstance(other, GenderScore):
            return NotImplemented
        return GenderScore(self.man + other.man, self.woman + other.woman)

    def dominant(self) -> Gender:
        """Masculine only when strictly more likely; equal weights resolve to feminine."""
        if self.man > self.woman:
            return Gender.MAN
        return Gender.WOMAN


@dataclass(frozen=True)
class RuleMatch:
    """Forms produced by the first matching rule of a chain."""

    rule: int
    forms: tuple[str, ...]

    @classmethod
    def unhandled(cls, word: str, case_count: int) -> RuleMatch:
        return cls(rule=UNHANDLED_RULE, forms=(word,) * case_count)

    @property
    def handled(self) -> bool:
        return self.rule != UNHANDLED_RULE
