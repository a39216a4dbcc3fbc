"""
Enumerations shared by the engine and language rule sets.
"""
from __future__ import annotations

from enum import Enum


class Gender(Enum):
    """Grammatical gender of a whole name."""

    MAN = "man"
    WOMAN = "woman"


class NamePart(Enum):
    """Role of a single word inside a full name."""

    GIVEN = "given"
    FAMILY = "family"
    PATRONYMIC = "patronymic"
