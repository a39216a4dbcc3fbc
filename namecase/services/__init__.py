"""
Services package for name declension.

This package contains the service classes used by the declension engine,
organized by domain responsibility.
"""

from namecase.services.context import DeclensionContext
from namecase.services.gender import GenderResolutionService
from namecase.services.rules import LanguageRules, Rule, RuleChain, run_chain

__all__ = [
    # Rule machinery
    "DeclensionContext",
    "LanguageRules",
    "Rule",
    "RuleChain",
    "run_chain",
    # Services
    "GenderResolutionService",
]
