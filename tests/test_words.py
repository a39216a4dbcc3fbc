"""
Word, WordArray and CaseMask tests.
"""

from namecase.types import CaseMask, Gender, GenderScore, NamePart, Word, WordArray


def test_mask_records_each_letter():
    mask = CaseMask.from_word("МакДональд")
    assert mask.letters == (True, False, False, True, False, False, False, False, False, False)
    assert not mask.is_upper_case


def test_mask_detects_all_caps():
    assert CaseMask.from_word("ИВАНОВ").is_upper_case
    assert not CaseMask.from_word("Иванов").is_upper_case
    assert not CaseMask.from_word("").is_upper_case


def test_all_caps_mask_uppercases_every_form():
    mask = CaseMask.from_word("ИВАН")
    assert mask.apply(["иван", "ивана", "иваном"]) == ["ИВАН", "ИВАНА", "ИВАНОМ"]


def test_capitalized_mask_only_touches_first_letter():
    mask = CaseMask.from_word("Анна")
    assert mask.apply(["анна", "анной", "а"]) == ["Анна", "Анной", "А"]


def test_positions_beyond_mask_stay_lowercase():
    mask = CaseMask.from_word("аБ")
    assert mask.apply(["абвгд"]) == ["аБвгд"]


def test_word_keeps_lowercase_working_copy():
    word = Word("ИвАн", name_part=NamePart.GIVEN)
    assert word.name == "иван"
    assert word.name_part == NamePart.GIVEN
    assert word.gender is None
    assert not word.is_gender_solved()


def test_word_restores_case_when_forms_are_set():
    word = Word("МакДональд")
    word.name_cases = ["макдональд", "макдональда"]
    assert word.name_cases == ["МакДональд", "МакДональда"]
    assert word.get_name_case(1) == "МакДональда"


def test_undeclined_word_returns_empty_case():
    assert Word("Иван").get_name_case(3) == ""


def test_reset_keeps_explicit_gender_only():
    explicit = Word("Иван")
    explicit.set_gender(Gender.MAN, explicit=True)
    inferred = Word("Анна")
    inferred.set_gender(Gender.WOMAN)

    for word in (explicit, inferred):
        word.name_cases = ["x"]
        word.rule = 5
        word.gender_score = GenderScore(man=1.0)
        word.reset()
        assert word.name_cases == []
        assert word.rule == 0
        assert word.gender_score == GenderScore()

    assert explicit.gender == Gender.MAN
    assert explicit.gender_explicit
    assert inferred.gender is None


def test_word_array_keeps_insertion_order():
    words = WordArray()
    for text in ("Иванов", "Иван", "Иванович"):
        words.add_word(Word(text))

    assert len(words) == 3
    assert [w.name for w in words] == ["иванов", "иван", "иванович"]
    assert words.get_word(1).name == "иван"
    assert words[2].name == "иванович"


def test_lookup_by_name_part_returns_first_match():
    words = WordArray()
    words.add_word(Word("Иван", name_part=NamePart.GIVEN))
    words.add_word(Word("Пётр", name_part=NamePart.GIVEN))

    assert words.get_by_name_part(NamePart.GIVEN).name == "иван"


def test_missing_name_part_returns_empty_word():
    words = WordArray()
    words.add_word(Word("Иван", name_part=NamePart.GIVEN))

    missing = words.get_by_name_part(NamePart.PATRONYMIC)
    assert missing.name == ""
    assert missing.name_cases == []
