"""
Shared fixtures for the declension test suites.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namecase
sys.path.insert(0, str(Path(__file__).parent.parent))

from namecase import NameCaseEngine
from namecase.services import DeclensionContext, RuleChain
from namecase.types import Gender, GenderScore, NamePart


class StubRules:
    """
    Minimal rule set with predictable output.

    Every word not ending in "x" declines to word + case number; words ending
    in "x" match no rule. Scores and detected parts are set per instance.
    """

    code = "stub"
    language_build = "stub-1"
    case_count = 4

    def __init__(
        self,
        given_score=None,
        family_score=None,
        patronymic_score=None,
        detected_part=NamePart.GIVEN,
        missing_chains=(),
    ):
        self.given_score = given_score or GenderScore()
        self.family_score = family_score or GenderScore()
        self.patronymic_score = patronymic_score or GenderScore()
        self.detected_part = detected_part
        self.rule_calls = 0
        self.score_calls = 0
        self.detect_calls = 0
        chain = RuleChain.of((7, self._numbered), (8, self._never))
        self._chains = {
            (gender, part): chain
            for gender in Gender
            for part in NamePart
            if (gender, part) not in missing_chains
        }

    def _numbered(self, ctx: DeclensionContext):
        self.rule_calls += 1
        if ctx.last(1) == "x":
            return None
        return ctx.word_forms(ctx.word, [str(case) for case in range(1, ctx.case_count)])

    def _never(self, ctx: DeclensionContext):
        return None

    def rule_chains(self):
        return self._chains

    def gender_by_given_name(self, name):
        self.score_calls += 1
        return self.given_score

    def gender_by_family_name(self, name):
        self.score_calls += 1
        return self.family_score

    def gender_by_patronymic(self, name):
        self.score_calls += 1
        return self.patronymic_score

    def detect_name_part(self, name):
        self.detect_calls += 1
        return self.detected_part


@pytest.fixture
def engine():
    return NameCaseEngine()


@pytest.fixture
def stub_rules():
    return StubRules()


@pytest.fixture
def stub_engine(stub_rules):
    return NameCaseEngine(rules=stub_rules)


@pytest.fixture
def make_stub_engine():
    def _make(**kwargs):
        rules = StubRules(**kwargs)
        return NameCaseEngine(rules=rules), rules

    return _make
