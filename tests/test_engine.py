"""
Declension engine contract tests.

These run against a stub rule set so they pin down orchestration only:
latches, dispatch, fallback, phrase assembly and gender propagation.
"""

import logging

import pytest

from namecase import NameCaseEngine
from namecase.types import UNHANDLED_RULE, Gender, GenderScore, NameCaseConfig, NamePart


def test_nominative_equals_input(stub_engine):
    stub_engine.set_given_name("Anna")
    assert stub_engine.get_given_name_cases()[0] == "Anna"
    assert stub_engine.get_given_name_case(0) == "Anna"


def test_forms_follow_input_casing(stub_engine):
    stub_engine.set_given_name("ANNA").set_family_name("Smith")
    assert stub_engine.get_given_name_cases() == ["ANNA", "ANNA1", "ANNA2", "ANNA3"]
    assert stub_engine.get_family_name_cases() == ["Smith", "Smith1", "Smith2", "Smith3"]


def test_repeated_queries_do_not_recompute(stub_engine, stub_rules):
    stub_engine.set_given_name("Anna")
    first = stub_engine.get_given_name_cases()
    rule = stub_engine.words[0].rule
    calls = (stub_rules.rule_calls, stub_rules.score_calls)

    second = stub_engine.get_given_name_cases()

    assert first == second
    assert stub_engine.words[0].rule == rule == 7
    assert (stub_rules.rule_calls, stub_rules.score_calls) == calls


def test_returned_lists_are_copies(stub_engine):
    stub_engine.set_given_name("Anna")
    stub_engine.get_given_name_cases().append("junk")
    assert len(stub_engine.get_given_name_cases()) == 4


def test_new_input_invalidates_results(stub_engine, stub_rules):
    stub_engine.set_given_name("Anna")
    stub_engine.get_given_name_cases()
    calls = stub_rules.rule_calls

    stub_engine.set_family_name("Smith")
    assert stub_engine.get_family_name_case(2) == "Smith2"
    assert stub_rules.rule_calls > calls


def test_unmatched_word_keeps_nominative(stub_engine):
    stub_engine.set_given_name("Max")
    assert stub_engine.get_given_name_cases() == ["Max"] * 4
    assert stub_engine.words[0].rule == UNHANDLED_RULE


def test_missing_chain_falls_back(make_stub_engine):
    engine, _ = make_stub_engine(missing_chains=((Gender.WOMAN, NamePart.GIVEN),))
    engine.set_given_name("Anna").set_gender(Gender.WOMAN)
    assert engine.get_given_name_cases() == ["Anna"] * 4
    assert engine.words[0].rule == UNHANDLED_RULE


def test_unhandled_word_warning_is_opt_in(make_stub_engine, caplog):
    engine, _ = make_stub_engine()
    with caplog.at_level(logging.WARNING, logger="namecase"):
        engine.decline("Max")
    assert not caplog.records

    warn_engine = NameCaseEngine(config=NameCaseConfig(warn_on_unhandled=True), rules=engine._rules)
    with caplog.at_level(logging.WARNING, logger="namecase"):
        warn_engine.decline("Max")
    assert "No rule matched 'max'" in caplog.text


def test_missing_part_is_empty(stub_engine):
    stub_engine.set_given_name("Anna")
    assert stub_engine.get_patronymic_cases() == []
    assert stub_engine.get_patronymic_case(2) == ""


def test_blank_input_is_ignored(stub_engine):
    stub_engine.set_given_name("").set_family_name("   ").set_patronymic("\t")
    assert len(stub_engine.words) == 0
    assert stub_engine.get_given_name_cases() == []


def test_set_full_name_adds_parts_in_declaration_order(stub_engine):
    stub_engine.set_full_name("Smith", "Anna", "")
    assert [w.name for w in stub_engine.words] == ["anna", "smith"]
    assert [w.name_part for w in stub_engine.words] == [NamePart.GIVEN, NamePart.FAMILY]


def test_phrase_joins_each_case_with_single_spaces(stub_engine):
    result = stub_engine.decline("A B C")
    assert result[2] == "A2 B2 C2"
    assert result[0] == "A B C"
    assert len(result) == 4


def test_phrase_drops_empty_fragments(stub_engine):
    assert stub_engine.decline("  A    B  ")[1] == "A1 B1"
    assert len(stub_engine.words) == 2


def test_phrase_with_no_words(stub_engine):
    assert stub_engine.decline("   ") == ["", "", "", ""]
    assert stub_engine.gender_auto_detect() is None


def test_phrase_detects_roles_once(make_stub_engine):
    engine, rules = make_stub_engine(detected_part=NamePart.FAMILY)
    engine.decline("A B")
    assert rules.detect_calls == 2
    assert all(w.name_part == NamePart.FAMILY for w in engine.words)

    engine.get_family_name_cases()
    engine.gender_auto_detect()
    assert rules.detect_calls == 2


def test_phrase_resets_previous_input(stub_engine):
    stub_engine.set_given_name("Anna").set_gender(Gender.MAN)
    stub_engine.decline("B")
    assert [w.name for w in stub_engine.words] == ["b"]
    assert stub_engine.gender_auto_detect() == Gender.WOMAN


def test_decline_case(stub_engine):
    assert stub_engine.decline_case("A B", 3) == "A3 B3"
    with pytest.raises(IndexError):
        stub_engine.decline_case("A B", 4)


def test_case_out_of_range(stub_engine):
    stub_engine.set_given_name("Anna")
    with pytest.raises(IndexError):
        stub_engine.get_given_name_case(9)


def test_holistic_gender_for_every_word(make_stub_engine):
    engine, _ = make_stub_engine(given_score=GenderScore(man=3.0), family_score=GenderScore(woman=2.0))
    engine.set_given_name("a").set_family_name("b")
    assert engine.gender_auto_detect() == Gender.MAN
    assert [w.gender for w in engine.words] == [Gender.MAN, Gender.MAN]


def test_explicit_gender_overrides_scores(make_stub_engine):
    engine, rules = make_stub_engine(given_score=GenderScore(man=3.0))
    engine.set_given_name("a").set_family_name("b").set_gender(Gender.WOMAN)
    assert engine.gender_auto_detect() == Gender.WOMAN
    assert all(w.gender == Gender.WOMAN for w in engine.words)
    assert rules.score_calls == 0


def test_gender_set_before_words_applies_to_later_words(make_stub_engine):
    engine, _ = make_stub_engine(given_score=GenderScore(man=3.0))
    engine.set_gender(Gender.WOMAN).set_given_name("a")
    assert engine.gender_auto_detect() == Gender.WOMAN


def test_set_gender_clears_cached_results(make_stub_engine):
    engine, _ = make_stub_engine(missing_chains=((Gender.WOMAN, NamePart.GIVEN),))
    engine.set_given_name("Anna").set_gender(Gender.MAN)
    assert engine.get_given_name_case(1) == "Anna1"

    engine.set_gender(Gender.WOMAN)
    assert engine.get_given_name_case(1) == "Anna"


def test_phrase_gender_argument(make_stub_engine):
    engine, _ = make_stub_engine(given_score=GenderScore(woman=3.0))
    engine.decline("A B", gender=Gender.MAN)
    assert all(w.gender == Gender.MAN for w in engine.words)


def test_full_reset_forgets_words_and_gender(make_stub_engine):
    engine, _ = make_stub_engine(given_score=GenderScore(man=1.0))
    engine.set_given_name("a").set_gender(Gender.WOMAN)
    engine.full_reset().set_given_name("b")
    assert len(engine.words) == 1
    assert engine.gender_auto_detect() == Gender.MAN


def test_engine_metadata(stub_engine):
    assert stub_engine.case_count == 4
    assert stub_engine.language_version == "stub-1"
    assert stub_engine.version


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError, match="unsupported language 'xx'"):
        NameCaseEngine(config=NameCaseConfig(language="xx"))


def test_custom_rules_drive_every_entry_point(stub_engine):
    assert stub_engine.decline("Anna Smith") == ["Anna Smith", "Anna1 Smith1", "Anna2 Smith2", "Anna3 Smith3"]
    assert stub_engine.decline_case("Anna Smith", 3) == "Anna3 Smith3"
    stub_engine.full_reset().set_given_name("Anna")
    assert stub_engine.get_given_name_cases() == ["Anna", "Anna1", "Anna2", "Anna3"]
