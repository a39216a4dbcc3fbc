"""
Rule chains and the language rule-set protocol.

A language plugs into the engine by implementing `LanguageRules`: six ordered
rule chains keyed by (gender, name part), three gender-scoring heuristics and
a name-part detector. A chain is tried rule by rule; the first rule whose
condition matches produces the forms and the chain stops.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from namecase.services.context import DeclensionContext
from namecase.types import Gender, GenderScore, NamePart, RuleMatch

RuleFunction = Callable[[DeclensionContext], "list[str] | None"]


@dataclass(frozen=True)
class Rule:
    """One numbered sub-rule: returns the case forms when it applies, else None."""

    rule_id: int
    apply: RuleFunction


@dataclass(frozen=True)
class RuleChain:
    """Explicitly ordered rules - first match wins."""

    rules: tuple[Rule, ...]

    @classmethod
    def of(cls, *rules: tuple[int, RuleFunction]) -> RuleChain:
        return cls(tuple(Rule(rule_id, apply) for rule_id, apply in rules))

    @property
    def rule_ids(self) -> tuple[int, ...]:
        return tuple(rule.rule_id for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)


def run_chain(chain: RuleChain, context: DeclensionContext) -> RuleMatch | None:
    """Apply the first matching rule, recording its id on the context."""
    for rule in chain.rules:
        forms = rule.apply(context)
        if forms is not None:
            context.rule = rule.rule_id
            context.forms = list(forms)
            return RuleMatch(rule=rule.rule_id, forms=tuple(forms))
    return None


@runtime_checkable
class LanguageRules(Protocol):
    """Capabilities a language rule set provides to the engine."""

    code: str
    language_build: str
    case_count: int

    def rule_chains(self) -> Mapping[tuple[Gender, NamePart], RuleChain]: ...

    def gender_by_given_name(self, name: str) -> GenderScore: ...

    def gender_by_family_name(self, name: str) -> GenderScore: ...

    def gender_by_patronymic(self, name: str) -> GenderScore: ...

    def detect_name_part(self, name: str) -> NamePart: ...
