"""
Configuration for name declension.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NameCaseConfig:
    """Immutable engine configuration."""

    language: str = "ru"
    # Log words that fell through every rule at WARNING instead of DEBUG
    warn_on_unhandled: bool = False
    separator: str = " "

    @classmethod
    def create_default(cls) -> NameCaseConfig:
        return cls()
