"""
Personal Name Declension Module

This module declines personal names (given name, family name, patronymic) of
Slavic languages into every grammatical case, inferring the grammatical gender
of the name when the caller does not supply it.

## Overview

The core functionality is provided by the `NameCaseEngine` class, which runs
a short pipeline the first time a declined form is requested:

1. **Name Part Identification**: Words added without a role are labeled as
   given name, family name or patronymic by the language rules
2. **Gender Resolution**: One gender for the whole name, either the explicit
   choice of the caller or the sum of per-word heuristic scores
3. **Rule Chain Dispatch**: Each word is declined by the ordered rule chain
   for its (gender, name part) pair; the first matching rule wins
4. **Case Restoration**: The letter casing of the input word is re-applied to
   every generated form

Results are cached until new input arrives, so repeated queries never re-run
resolution or dispatch.

## Architecture

- **NameCaseEngine**: Orchestration, latches and the public API
- **LanguageRules**: Capability set a language implements (rule chains,
  gender heuristics, name part detection)
- **GenderResolutionService**: Holistic gender decision over all words
- **DeclensionContext**: Per-word working state with the suffix cache
- **Word / WordArray / CaseMask**: Tokens, their collection and casing

## Usage Examples

```python
from namecase import NameCaseEngine
from namecase.languages import RussianCase
from namecase.types import Gender

engine = NameCaseEngine()

# Full name in one string
engine.decline("Иванов Иван Иванович")
# ['Иванов Иван Иванович', 'Иванова Ивана Ивановича', 'Иванову Ивану Ивановичу',
#  'Иванова Ивана Ивановича', 'Ивановым Иваном Ивановичем', 'Иванове Иване Ивановиче']

engine.decline_case("Петрова Анна Сергеевна", RussianCase.DATIVE)
# 'Петровой Анне Сергеевне'

# Individual parts
engine.full_reset().set_given_name("Лев").set_family_name("Толстой")
engine.get_given_name_case(RussianCase.GENITIVE)  # 'Льва'
engine.get_family_name_cases()                    # ['Толстой', 'Толстого', ...]
engine.get_patronymic_cases()                     # [] - never supplied

# Forcing the gender
engine.decline("Саша Мельник", gender=Gender.WOMAN)
```

## Error Handling

Nothing in normal operation raises:
- A word no rule matches keeps its nominative form in every case and records
  rule `UNHANDLED_RULE` (-1)
- Asking for a part that was never supplied returns an empty list/string
- Blank setter input is ignored

## Thread Safety

An engine holds per-call state and must not be shared between threads. Use one
engine per thread.
"""

from __future__ import annotations

import logging

from namecase import __version__
from namecase.languages import get_language_rules
from namecase.services import (
    DeclensionContext,
    GenderResolutionService,
    LanguageRules,
    run_chain,
)
from namecase.types import (
    UNHANDLED_RULE,
    Gender,
    NameCaseConfig,
    NamePart,
    RuleMatch,
    Word,
    WordArray,
)

logger = logging.getLogger(__name__)

# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME DECLENSION ENGINE
# ════════════════════════════════════════════════════════════════════════════════


class NameCaseEngine:
    """Main name declension engine."""

    version = __version__

    def __init__(self, config: NameCaseConfig | None = None, rules: LanguageRules | None = None):
        self._config = config or NameCaseConfig.create_default()
        self._rules = rules or get_language_rules(self._config.language)
        self._gender_service = GenderResolutionService(self._rules)
        self._chains = self._rules.rule_chains()

        self._words = WordArray()
        self._explicit_gender: Gender | None = None
        # ready: roles and gender resolved; finished: every word declined
        self._ready = False
        self._finished = False

    # ---------- state ----------
    @property
    def case_count(self) -> int:
        return self._rules.case_count

    @property
    def language_version(self) -> str:
        return self._rules.language_build

    @property
    def words(self) -> WordArray:
        return self._words

    def _not_ready(self) -> None:
        self._ready = False
        self._finished = False
        for word in self._words:
            word.reset()

    def full_reset(self) -> NameCaseEngine:
        """Drop all words and any explicit gender."""
        self._words = WordArray()
        self._explicit_gender = None
        self._not_ready()
        return self

    # ---------- input ----------
    def _add_name_part(self, name: str, name_part: NamePart | None) -> NameCaseEngine:
        if name and name.strip():
            word = Word(name.strip(), name_part=name_part)
            if self._explicit_gender is not None:
                word.set_gender(self._explicit_gender, explicit=True)
            self._words.add_word(word)
            self._not_ready()
        return self

    def set_given_name(self, name: str) -> NameCaseEngine:
        return self._add_name_part(name, NamePart.GIVEN)

    def set_family_name(self, name: str) -> NameCaseEngine:
        return self._add_name_part(name, NamePart.FAMILY)

    def set_patronymic(self, name: str) -> NameCaseEngine:
        return self._add_name_part(name, NamePart.PATRONYMIC)

    def set_full_name(self, family_name: str, given_name: str, patronymic: str) -> NameCaseEngine:
        """Add all three parts; blank ones are skipped."""
        self.set_given_name(given_name)
        self.set_family_name(family_name)
        self.set_patronymic(patronymic)
        return self

    def set_gender(self, gender: Gender) -> NameCaseEngine:
        """Force one gender for every word, current and future."""
        self._explicit_gender = gender
        for word in self._words:
            word.set_gender(gender, explicit=True)
        self._not_ready()
        return self

    def _split_full_name(self, full_name: str) -> None:
        self._words = WordArray()
        for fragment in full_name.split():
            self._words.add_word(Word(fragment))

    # ---------- pipeline ----------
    def _identify_name_part(self, word: Word) -> None:
        if word.name_part is None:
            word.name_part = self._rules.detect_name_part(word.name)

    def _prepare_everything(self) -> None:
        if self._ready:
            return
        for word in self._words:
            self._identify_name_part(word)
        self._gender_service.resolve(self._words, self._explicit_gender)
        self._ready = True

    def _decline_word(self, word: Word) -> None:
        """Run the rule chain for the word's (gender, name part) pair."""
        context = DeclensionContext(word.name, self.case_count)
        match: RuleMatch | None = None

        if word.gender is not None and word.name_part is not None:
            chain = self._chains.get((word.gender, word.name_part))
            if chain is not None:
                match = run_chain(chain, context)

        if match is None:
            match = RuleMatch.unhandled(context.word, self.case_count)
            self._log_unhandled(word)
        else:
            logger.debug(f"Declined '{word.name}' ({word.name_part.value}) with rule {match.rule}")

        word.name_cases = match.forms
        word.rule = match.rule

    def _log_unhandled(self, word: Word) -> None:
        part = word.name_part.value if word.name_part else "unknown part"
        gender = word.gender.value if word.gender else "unknown gender"
        message = f"No rule matched '{word.name}' ({part}, {gender}); keeping nominative in every case"
        if self._config.warn_on_unhandled:
            logger.warning(message)
        else:
            logger.debug(message)

    def _all_word_cases(self) -> None:
        if self._finished:
            return
        self._prepare_everything()
        for word in self._words:
            self._decline_word(word)
        self._finished = True

    # ---------- output ----------
    def gender_auto_detect(self) -> Gender | None:
        """Resolved gender of the name, None when no words were supplied."""
        self._prepare_everything()
        if len(self._words) > 0:
            return self._words.get_word(0).gender
        return None

    def get_name_part_cases(self, name_part: NamePart) -> list[str]:
        self._all_word_cases()
        return list(self._words.get_by_name_part(name_part).name_cases)

    def get_name_part_case(self, name_part: NamePart, case: int) -> str:
        self._all_word_cases()
        word = self._words.get_by_name_part(name_part)
        if word.name_cases:
            self._check_case(case)
        return word.get_name_case(case)

    def get_given_name_cases(self) -> list[str]:
        return self.get_name_part_cases(NamePart.GIVEN)

    def get_given_name_case(self, case: int) -> str:
        return self.get_name_part_case(NamePart.GIVEN, case)

    def get_family_name_cases(self) -> list[str]:
        return self.get_name_part_cases(NamePart.FAMILY)

    def get_family_name_case(self, case: int) -> str:
        return self.get_name_part_case(NamePart.FAMILY, case)

    def get_patronymic_cases(self) -> list[str]:
        return self.get_name_part_cases(NamePart.PATRONYMIC)

    def get_patronymic_case(self, case: int) -> str:
        return self.get_name_part_case(NamePart.PATRONYMIC, case)

    def _check_case(self, case: int) -> None:
        if not 0 <= case < self.case_count:
            raise IndexError(f"case {case} out of range for {self.case_count} cases")

    def _connected_case(self, case: int) -> str:
        return self._config.separator.join(word.get_name_case(case) for word in self._words).rstrip()

    def _connected_cases(self) -> list[str]:
        return [self._connected_case(case) for case in range(self.case_count)]

    def decline(self, full_name: str, gender: Gender | None = None) -> list[str]:
        """
        Main API method: decline a space-separated full name.

        Words keep their input order; each returned string joins the forms of
        one case with single spaces. Roles are detected per word and the
        gender is inferred unless `gender` is given.
        """
        self.full_reset()
        self._split_full_name(full_name)
        if gender is not None:
            self.set_gender(gender)
        self._all_word_cases()
        return self._connected_cases()

    def decline_case(self, full_name: str, case: int, gender: Gender | None = None) -> str:
        self._check_case(case)
        return self.decline(full_name, gender)[case]
