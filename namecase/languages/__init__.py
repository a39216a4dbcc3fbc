"""
Language rule sets.

Each language module provides a class implementing
`namecase.services.rules.LanguageRules`; this package maps language codes to
those classes.
"""
from __future__ import annotations

from functools import cache

from namecase.languages.russian import RussianCase, RussianRules

_LANGUAGES = {
    RussianRules.code: RussianRules,
}

SUPPORTED_LANGUAGES = tuple(_LANGUAGES)


@cache  # rule sets are stateless, one instance per code is enough
def get_language_rules(code: str):
    """Return the rule set for a language code."""
    try:
        rules_cls = _LANGUAGES[code.lower()]
    except KeyError:
        available = ", ".join(SUPPORTED_LANGUAGES)
        raise ValueError(f"unsupported language '{code}'. Available languages: {available}") from None
    return rules_cls()


__all__ = [
    "SUPPORTED_LANGUAGES",
    "RussianCase",
    "RussianRules",
    "get_language_rules",
]
