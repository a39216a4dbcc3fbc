"""
Russian rule set.

Six cases (nominative, genitive, dative, accusative, instrumental,
prepositional). Each (gender, name part) pair has an explicitly ordered rule
chain; rule numbers are recorded on the declined word so a result can be
traced back to the rule that produced it.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from namecase.languages.russian_data import (
    CONSONANTS,
    FAMILY_NAME_SUFFIXES,
    GENITIVE_I_LETTERS,
    HUSHING_LETTERS,
    INDECLINABLE_FAMILY_SUFFIXES,
    INDECLINABLE_PATRONYMIC_SUFFIXES,
    MAN_ADJECTIVE_SUFFIXES,
    MAN_FAMILY_GENDER_SUFFIXES,
    MAN_GIVEN_IRREGULAR,
    MAN_GIVEN_NAMES,
    MAN_PATRONYMIC_SUFFIXES,
    MAN_POSSESSIVE_SUFFIXES,
    PATRONYMIC_DETECTION_SUFFIXES,
    STEM_HUSHING_LETTERS,
    STRESSED_PATRONYMICS,
    STRESSED_YA_NAMES,
    UNISEX_GIVEN_NAMES,
    VELAR_HUSHING_LETTERS,
    WOMAN_FAMILY_GENDER_SUFFIXES,
    WOMAN_GIVEN_IRREGULAR,
    WOMAN_GIVEN_NAMES,
    WOMAN_PATRONYMIC_SUFFIXES,
    WOMAN_POSSESSIVE_SUFFIXES,
)
from namecase.services.context import DeclensionContext
from namecase.services.rules import RuleChain
from namecase.types import Gender, GenderScore, NamePart


class RussianCase(IntEnum):
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    PREPOSITIONAL = 5


class RussianRules:
    """Rule chains and heuristics for Russian names."""

    code = "ru"
    language_build = "ru-0.4.1"
    case_count = len(RussianCase)

    def __init__(self):
        self._chains = MappingProxyType(
            {
                (Gender.MAN, NamePart.GIVEN): RuleChain.of(
                    (1, self._man_given_irregular),
                    (2, self._a_ending),
                    (3, self._man_given_ya_ending),
                    (4, self._ii_ending),
                    (5, self._soft_ending),
                    (6, self._consonant_ending),
                ),
                (Gender.WOMAN, NamePart.GIVEN): RuleChain.of(
                    (1, self._woman_given_irregular),
                    (2, self._iya_ending),
                    (3, self._a_ending),
                    (4, self._ya_ending),
                    (5, self._woman_soft_sign_ending),
                ),
                (Gender.MAN, NamePart.FAMILY): RuleChain.of(
                    (1, self._man_possessive_family),
                    (2, self._man_adjective_family),
                    (3, self._indeclinable_family),
                    (4, self._iya_ending),
                    (5, self._a_ending),
                    (6, self._ya_ending),
                    (7, self._soft_ending),
                    (8, self._consonant_ending),
                ),
                (Gender.WOMAN, NamePart.FAMILY): RuleChain.of(
                    (1, self._woman_possessive_family),
                    (2, self._woman_adjective_family),
                    (3, self._woman_indeclinable_family),
                    (4, self._iya_ending),
                    (5, self._a_ending),
                    (6, self._ya_ending),
                ),
                (Gender.MAN, NamePart.PATRONYMIC): RuleChain.of(
                    (1, self._man_patronymic),
                    (2, self._indeclinable_patronymic),
                ),
                (Gender.WOMAN, NamePart.PATRONYMIC): RuleChain.of(
                    (1, self._woman_patronymic),
                    (2, self._indeclinable_patronymic),
                ),
            },
        )

    def rule_chains(self) -> Mapping[tuple[Gender, NamePart], RuleChain]:
        return self._chains

    # ---------- shared endings ----------
    @staticmethod
    def _a_ending(ctx: DeclensionContext) -> list[str] | None:
        """-а nouns: Никита, Анна, Ольга, Маша, Глинка."""
        if ctx.last(1) != "а":
            return None
        before = ctx.last(2, 1)
        genitive = "и" if ctx.in_letters(before, GENITIVE_I_LETTERS) else "ы"
        instrumental = "ей" if ctx.in_letters(before, HUSHING_LETTERS) else "ой"
        return ctx.word_forms(ctx.word, [genitive, "е", "у", instrumental, "е"], 1)

    @staticmethod
    def _iya_ending(ctx: DeclensionContext) -> list[str] | None:
        # Мария, Берия
        if ctx.last(2) != "ия":
            return None
        return ctx.word_forms(ctx.word, ["и", "и", "ю", "ей", "и"], 1)

    @staticmethod
    def _ya_ending(ctx: DeclensionContext) -> list[str] | None:
        if ctx.last(1) != "я":
            return None
        if ctx.last(2) == "ия":
            return ctx.word_forms(ctx.word, ["и", "и", "ю", "ей", "и"], 1)
        return ctx.word_forms(ctx.word, ["и", "е", "ю", "ей", "е"], 1)

    @staticmethod
    def _ii_ending(ctx: DeclensionContext) -> list[str] | None:
        # Дмитрий, Юрий
        if ctx.last(2) != "ий":
            return None
        return ctx.word_forms(ctx.word, ["я", "ю", "я", "ем", "и"], 1)

    @staticmethod
    def _soft_ending(ctx: DeclensionContext) -> list[str] | None:
        """-й and -ь masculine nouns: Сергей, Игорь, Гоголь."""
        if not ctx.in_letters(ctx.last(1), "йь"):
            return None
        return ctx.word_forms(ctx.word, ["я", "ю", "я", "ем", "е"], 1)

    @staticmethod
    def _consonant_ending(ctx: DeclensionContext) -> list[str] | None:
        last_letter = ctx.last(1)
        if not ctx.in_letters(last_letter, CONSONANTS) or last_letter == "й":
            return None
        instrumental = "ем" if ctx.in_letters(last_letter, STEM_HUSHING_LETTERS) else "ом"
        return ctx.word_forms(ctx.word, ["а", "у", "а", instrumental, "е"])

    # ---------- given names ----------
    @staticmethod
    def _man_given_irregular(ctx: DeclensionContext) -> list[str] | None:
        stem = MAN_GIVEN_IRREGULAR.get(ctx.word)
        if stem is None:
            return None
        return ctx.word_forms(stem, ["а", "у", "а", "ом", "е"])

    @staticmethod
    def _man_given_ya_ending(ctx: DeclensionContext) -> list[str] | None:
        if ctx.last(1) != "я":
            return None
        if ctx.last(2) == "ия":
            return ctx.word_forms(ctx.word, ["и", "и", "ю", "ей", "и"], 1)
        instrumental = "ёй" if ctx.in_names(ctx.word, STRESSED_YA_NAMES) else "ей"
        return ctx.word_forms(ctx.word, ["и", "е", "ю", instrumental, "е"], 1)

    @staticmethod
    def _woman_given_irregular(ctx: DeclensionContext) -> list[str] | None:
        forms = WOMAN_GIVEN_IRREGULAR.get(ctx.word)
        if forms is None:
            return None
        return ctx.word_forms("", forms)

    @staticmethod
    def _woman_soft_sign_ending(ctx: DeclensionContext) -> list[str] | None:
        # Нинель, Рахиль
        if ctx.last(1) != "ь":
            return None
        return ctx.word_forms(ctx.word, ["и", "и", "ь", "ью", "и"], 1)

    # ---------- family names ----------
    @staticmethod
    def _man_possessive_family(ctx: DeclensionContext) -> list[str] | None:
        # Иванов, Пушкин
        if not ctx.in_letters(ctx.last(2), MAN_POSSESSIVE_SUFFIXES):
            return None
        return ctx.word_forms(ctx.word, ["а", "у", "а", "ым", "е"])

    @staticmethod
    def _man_adjective_family(ctx: DeclensionContext) -> list[str] | None:
        """Толстой, Достоевский, Белый, Горький."""
        ending = ctx.last(2)
        if len(ctx.word) < 4 or not ctx.in_letters(ending, MAN_ADJECTIVE_SUFFIXES):
            return None
        before = ctx.last(3, 1)
        if ctx.in_letters(before, VELAR_HUSHING_LETTERS):
            return ctx.word_forms(ctx.word, ["ого", "ому", "ого", "им", "ом"], 2)
        if ending == "ий":
            return ctx.word_forms(ctx.word, ["его", "ему", "его", "им", "ем"], 2)
        return ctx.word_forms(ctx.word, ["ого", "ому", "ого", "ым", "ом"], 2)

    @staticmethod
    def _indeclinable_family(ctx: DeclensionContext) -> list[str] | None:
        # Черных, Шевченко, Живаго
        if not ctx.word.endswith(INDECLINABLE_FAMILY_SUFFIXES):
            return None
        return ctx.same_forms()

    @staticmethod
    def _woman_possessive_family(ctx: DeclensionContext) -> list[str] | None:
        # Иванова, Пушкина
        if not ctx.in_letters(ctx.last(3), WOMAN_POSSESSIVE_SUFFIXES):
            return None
        return ctx.word_forms(ctx.word, ["ой", "ой", "у", "ой", "ой"], 1)

    @staticmethod
    def _woman_adjective_family(ctx: DeclensionContext) -> list[str] | None:
        ending = ctx.last(2)
        if len(ctx.word) < 4:
            return None
        if ending == "яя":
            return ctx.word_forms(ctx.word, ["ей", "ей", "юю", "ей", "ей"], 2)
        if ending != "ая":
            return None
        oblique = "ей" if ctx.in_letters(ctx.last(3, 1), "жшчщ") else "ой"
        return ctx.word_forms(ctx.word, [oblique, oblique, "ую", oblique, oblique], 2)

    @staticmethod
    def _woman_indeclinable_family(ctx: DeclensionContext) -> list[str] | None:
        """Masculine-type family names of women keep one form: Мельник, Гоголь, Черных."""
        if ctx.in_letters(ctx.last(1), CONSONANTS + "ь") or ctx.word.endswith(INDECLINABLE_FAMILY_SUFFIXES):
            return ctx.same_forms()
        return None

    # ---------- patronymics ----------
    @staticmethod
    def _man_patronymic(ctx: DeclensionContext) -> list[str] | None:
        # Иванович, Ильич
        if not ctx.in_letters(ctx.last(2), ("ич", "ыч")):
            return None
        instrumental = "ом" if ctx.in_names(ctx.word, STRESSED_PATRONYMICS) else "ем"
        return ctx.word_forms(ctx.word, ["а", "у", "а", instrumental, "е"])

    @staticmethod
    def _woman_patronymic(ctx: DeclensionContext) -> list[str] | None:
        # Ивановна, Ильинична
        if ctx.last(2) != "на":
            return None
        return ctx.word_forms(ctx.word, ["ы", "е", "у", "ой", "е"], 1)

    @staticmethod
    def _indeclinable_patronymic(ctx: DeclensionContext) -> list[str] | None:
        # Алиевич оглы, Мамедовна кызы
        if not ctx.word.endswith(INDECLINABLE_PATRONYMIC_SUFFIXES):
            return None
        return ctx.same_forms()

    # ---------- gender heuristics ----------
    def gender_by_given_name(self, name: str) -> GenderScore:
        if name in MAN_GIVEN_NAMES:
            return GenderScore(man=1.0)
        if name in WOMAN_GIVEN_NAMES:
            return GenderScore(woman=1.0)
        if name in UNISEX_GIVEN_NAMES:
            return GenderScore(man=0.5, woman=0.5)

        last_letter = name[-1:]
        if last_letter in ("а", "я"):
            return GenderScore(woman=0.5)
        if last_letter and last_letter in CONSONANTS:
            return GenderScore(man=0.5)
        if last_letter == "ь":
            return GenderScore(man=0.3)
        return GenderScore()

    def gender_by_family_name(self, name: str) -> GenderScore:
        if name.endswith(WOMAN_FAMILY_GENDER_SUFFIXES):
            return GenderScore(woman=0.4)
        if name.endswith(MAN_FAMILY_GENDER_SUFFIXES):
            return GenderScore(man=0.4)
        return GenderScore()

    def gender_by_patronymic(self, name: str) -> GenderScore:
        if name.endswith(MAN_PATRONYMIC_SUFFIXES):
            return GenderScore(man=10.0)
        if name.endswith(WOMAN_PATRONYMIC_SUFFIXES):
            return GenderScore(woman=10.0)
        return GenderScore()

    # ---------- name part detection ----------
    def detect_name_part(self, name: str) -> NamePart:
        """
        Guess the role of an unlabeled word.

        Known given names win, then patronymic suffixes, then family-name
        suffixes. Unknown words ending in -а/-я read as given names; anything
        else is treated as a family name.
        """
        if name in MAN_GIVEN_NAMES or name in WOMAN_GIVEN_NAMES or name in UNISEX_GIVEN_NAMES:
            return NamePart.GIVEN
        if name.endswith(PATRONYMIC_DETECTION_SUFFIXES):
            return NamePart.PATRONYMIC
        if name.endswith(FAMILY_NAME_SUFFIXES):
            return NamePart.FAMILY
        if name.endswith(("а", "я")):
            return NamePart.GIVEN
        return NamePart.FAMILY
