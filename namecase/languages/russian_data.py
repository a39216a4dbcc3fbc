"""
Lexicon and suffix tables for the Russian rule set.

All entries are lowercase. Suffix tuples are checked with `str.endswith`,
so longer suffixes that share an ending with a shorter one are listed first.
"""

VOWELS = "аеёиоуыэюя"
CONSONANTS = "бвгджзйклмнпрстфхцчшщ"

# After these letters the genitive of -а nouns takes -и instead of -ы
GENITIVE_I_LETTERS = "гкхжшчщ"
# After these letters unstressed -ой/-ом become -ей/-ем
HUSHING_LETTERS = "жшчщц"
# Consonant stems take -ем after these; -ц stems take stressed -ом (Кузнецом)
STEM_HUSHING_LETTERS = "жшчщ"
# Adjectival endings after these letters take -им instead of -ым
VELAR_HUSHING_LETTERS = "гкхжшчщ"

# ════════════════════════════════════════════════════════════════════════════════
# GIVEN NAMES
# ════════════════════════════════════════════════════════════════════════════════

MAN_GIVEN_NAMES = frozenset(
    {
        "александр", "алексей", "анатолий", "андрей", "антон", "аркадий", "арсений", "артём",
        "артем", "богдан", "борис", "вадим", "валентин", "валерий", "василий", "виктор",
        "виталий", "владимир", "владислав", "всеволод", "вячеслав", "геннадий", "георгий",
        "глеб", "григорий", "давид", "даниил", "денис", "дмитрий", "евгений", "егор",
        "захар", "иван", "игорь", "илья", "кирилл", "константин", "кузьма", "лев",
        "леонид", "лука", "макар", "максим", "марк", "матвей", "михаил", "никита",
        "николай", "олег", "павел", "пётр", "петр", "роман", "савва", "семён", "семен",
        "сергей", "станислав", "степан", "тимофей", "тимур", "фёдор", "федор", "фома",
        "филипп", "юрий", "ярослав",
    },
)

WOMAN_GIVEN_NAMES = frozenset(
    {
        "алёна", "алена", "алина", "алиса", "алла", "анастасия", "ангелина", "анна",
        "антонина", "валентина", "валерия", "вера", "вероника", "виктория", "галина",
        "дарья", "диана", "ева", "евгения", "екатерина", "елена", "елизавета", "жанна",
        "зинаида", "зоя", "инна", "ирина", "карина", "кира", "кристина", "ксения",
        "лариса", "лидия", "любовь", "людмила", "маргарита", "марина", "мария", "милана",
        "надежда", "наталья", "наталия", "нина", "нинель", "оксана", "олеся", "ольга",
        "полина", "раиса", "регина", "рахиль", "светлана", "софия", "софья", "тамара",
        "татьяна", "ульяна", "юлия", "яна",
    },
)

# Diminutives used for both genders carry no gender evidence
UNISEX_GIVEN_NAMES = frozenset({"саша", "женя", "валя", "шура", "сима", "слава"})

# Given names whose oblique stem differs from the nominative
MAN_GIVEN_IRREGULAR = {
    "лев": "льв",
    "павел": "павл",
    "пётр": "петр",
}

WOMAN_GIVEN_IRREGULAR = {
    "любовь": ("любви", "любви", "любовь", "любовью", "любви"),
}

# Masculine names ending in -ья with a stressed instrumental (Ильёй)
STRESSED_YA_NAMES = frozenset({"илья"})

# ════════════════════════════════════════════════════════════════════════════════
# FAMILY NAMES
# ════════════════════════════════════════════════════════════════════════════════

MAN_POSSESSIVE_SUFFIXES = ("ов", "ев", "ёв", "ин", "ын")
WOMAN_POSSESSIVE_SUFFIXES = ("ова", "ева", "ёва", "ина", "ына")

MAN_ADJECTIVE_SUFFIXES = ("ий", "ый", "ой")
WOMAN_ADJECTIVE_SUFFIXES = ("ая", "яя")

# Family names that keep one form in every case
INDECLINABLE_FAMILY_SUFFIXES = ("швили", "дзе", "их", "ых", "ко", "аго", "яго", "ово", "ого")

MAN_FAMILY_GENDER_SUFFIXES = ("ский", "цкий", "ов", "ев", "ёв", "ин", "ын", "ой", "ый", "ий")
WOMAN_FAMILY_GENDER_SUFFIXES = ("ская", "цкая", "ова", "ева", "ёва", "ина", "ына", "ая", "яя")

FAMILY_NAME_SUFFIXES = (
    WOMAN_FAMILY_GENDER_SUFFIXES
    + MAN_FAMILY_GENDER_SUFFIXES
    + INDECLINABLE_FAMILY_SUFFIXES
    + ("енко", "ук", "юк", "чук", "ян", "ец")
)

# ════════════════════════════════════════════════════════════════════════════════
# PATRONYMICS
# ════════════════════════════════════════════════════════════════════════════════

MAN_PATRONYMIC_SUFFIXES = ("ович", "евич", "ич", "ыч", "оглы", "улы")
WOMAN_PATRONYMIC_SUFFIXES = ("овна", "евна", "ична", "инична", "на", "кызы", "гызы")

# Suffixes specific enough to tag a bare word as a patronymic
PATRONYMIC_DETECTION_SUFFIXES = (
    "ович", "евич", "ьич", "овна", "евна", "ична", "оглы", "улы", "кызы", "гызы",
)

# Turkic patronymic particles do not decline
INDECLINABLE_PATRONYMIC_SUFFIXES = ("оглы", "улы", "кызы", "гызы")

# Patronymics with stressed ending take -ом in the instrumental
STRESSED_PATRONYMICS = frozenset({"ильич", "кузьмич", "лукич", "фомич"})
