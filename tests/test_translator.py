# tests/test_translator.py
"""End-to-end tests for the English -> BSL gloss translator."""

import pytest

from signbsl.database import SignDictionary
from signbsl.translator import (
    BSLTranslator,
    GlossResult,
    QuestionType,
    TranslationResult,
    get_translation_stats,
    quick_translate,
    translate,
)
from signbsl.translator.gloss_resolver import GlossResolver


# === Example sentences ===

@pytest.mark.parametrize("sentence, gloss_string", [
    ("Do you want a cup of coffee?", "CUP COFFEE YOU WANT"),
    ("What is your name?", "YOUR NAME WHAT"),
    ("I am learning sign language", "SIGN LANGUAGE I LEARN"),
    ("Where do you live?", "YOU LIVE WHERE"),
    ("Yesterday I went to the shop", "YESTERDAY SHOP I GO"),
    ("My friend is deaf", "MY FRIEND DEAF"),
])
def test_example_sentences(translator, sentence, gloss_string):
    assert translator.translate(sentence).gloss_string == gloss_string


def test_yes_no_question(translator):
    result = translator.translate("Do you want a cup of coffee?")

    assert result.question_type == QuestionType.YES_NO
    assert result.is_question
    assert result.glosses.index("YOU") < result.glosses.index("WANT")
    assert result.glosses.index("COFFEE") < result.glosses.index("YOU")


def test_wh_word_last(translator):
    result = translator.translate("What is your name?")

    assert result.question_type == QuestionType.WH
    assert result.glosses[-1] == "WHAT"
    assert "WHAT" not in result.glosses[:-1]


def test_time_word_first(translator):
    result = translator.translate("Yesterday I went to the shop")

    assert result.question_type == QuestionType.NONE
    assert not result.is_question
    assert result.glosses[0] == "YESTERDAY"


def test_negative_contraction(translator):
    assert translator.translate("I don't like tea").glosses == ["NOT", "TEA", "I", "LIKE"]


# === Gloss results ===

def test_original_word_is_kept(translator):
    result = translator.translate("Yesterday I went to the shop")
    by_gloss = {g.gloss: g for g in result.gloss_sequence}

    assert by_gloss["GO"].original_word == "went"
    assert by_gloss["SHOP"].original_word == "shop"


def test_alias_resolves_to_dictionary_gloss(translator):
    result = translator.translate("My mum went home")
    mother = result.gloss_sequence[1]

    assert result.glosses == ["MY", "MOTHER", "HOME", "GO"]
    assert mother.gloss == "MOTHER"
    assert mother.original_word == "mum"
    assert not mother.is_unknown


def test_duplicate_glosses_keep_their_own_words(translator):
    result = translator.translate("I saw you see me")

    assert result.glosses == ["I", "YOU", "ME", "SEE", "SEE"]
    assert [g.original_word for g in result.gloss_sequence][-2:] == ["saw", "see"]


def test_unknown_word(translator):
    result = translator.translate("I like zorblax")
    zorblax = result.gloss_sequence[0]

    assert zorblax.gloss == "ZORBLAX"
    assert zorblax.is_unknown
    assert zorblax.sign_entry is None
    assert zorblax.search_url == "https://www.signbsl.com/sign/zorblax"


def test_unknown_gloss_is_uppercased_lemma(translator):
    result = translator.translate("The blorfs jumped")
    assert result.glosses == ["BLORF", "JUMP"]
    assert all(g.is_unknown for g in result.gloss_sequence)


def test_known_word_has_entry(translator):
    coffee = translator.translate("coffee").gloss_sequence[0]

    assert not coffee.is_unknown
    assert coffee.sign_entry.gloss == "COFFEE"
    assert coffee.sign_entry.category == "Food & Drink"


def test_every_gloss_uppercase_and_nonempty(translator):
    result = translator.translate("Where did the children put Grandma's bags, yesterday?")

    assert result.glosses
    for gloss in result.glosses:
        assert gloss
        assert gloss == gloss.upper()


def test_variant_gloss_match(small_dictionary):
    resolver = GlossResolver(small_dictionary)

    assert resolver.word_to_gloss("coffee") == "COFFEE"
    assert resolver.word_to_gloss("espresso") == "COFFEE"
    assert resolver.word_to_gloss("name_1") == "NAME"
    assert resolver.word_to_gloss("tea") is None
    assert resolver.word_to_gloss("") is None


# === Empty input ===

@pytest.mark.parametrize("sentence", ["", "   ", "...", "the a an"])
def test_empty_translation(translator, sentence):
    result = translator.translate(sentence)

    assert result.gloss_sequence == ()
    assert result.gloss_string == ""
    assert result.question_type == QuestionType.NONE


def test_empty_stats(translator):
    stats = get_translation_stats(translator.translate(""))
    assert stats == {
        "total_glosses": 0,
        "known_glosses": 0,
        "unknown_glosses": 0,
        "coverage_percent": 100,
    }


# === Invariants ===

@pytest.mark.parametrize("sentence", [
    "Do you want a cup of coffee?",
    "I like zorblax",
    "Tomorrow we will meet at the hospital",
    "",
])
def test_gloss_string_matches_sequence(translator, sentence):
    result = translator.translate(sentence)
    assert result.gloss_string == " ".join(g.gloss for g in result.gloss_sequence)


def test_translation_is_deterministic(translator):
    sentence = "Where do you live?"
    assert translator.translate(sentence) == translator.translate(sentence)


def test_result_is_immutable(translator):
    result = translator.translate("Hello")
    with pytest.raises(AttributeError):
        result.gloss_string = "CHANGED"


# === Stats ===

def test_stats_counts(translator):
    stats = get_translation_stats(translator.translate("I like zorblax"))

    assert stats["total_glosses"] == 3
    assert stats["known_glosses"] == 2
    assert stats["unknown_glosses"] == 1
    assert stats["coverage_percent"] == 67


def _result_with_unknowns(unknown, total=8):
    sequence = tuple(
        GlossResult(gloss=f"G{i}", original_word=f"g{i}", is_unknown=i < unknown, search_url="")
        for i in range(total)
    )
    return TranslationResult(
        original_sentence="",
        gloss_sequence=sequence,
        gloss_string=" ".join(g.gloss for g in sequence),
        question_type=QuestionType.NONE,
        is_question=False,
        explanation="",
    )


def test_coverage_rounds_half_up():
    # 7 of 8 known = 87.5%
    assert get_translation_stats(_result_with_unknowns(1))["coverage_percent"] == 88


def test_coverage_never_increases_with_unknowns():
    coverages = [get_translation_stats(_result_with_unknowns(k))["coverage_percent"] for k in range(9)]

    assert coverages[0] == 100
    assert coverages[-1] == 0
    assert coverages == sorted(coverages, reverse=True)


# === Serialization ===

def test_to_dict_shape(translator):
    data = translator.translate("Do you want coffee?").to_dict()

    assert data["originalSentence"] == "Do you want coffee?"
    assert data["glossString"] == "COFFEE YOU WANT"
    assert data["questionType"] == "yes-no"
    assert data["isQuestion"] is True
    assert data["explanation"]
    assert set(data["glossSequence"][0]) == {"gloss", "originalWord", "isUnknown", "searchUrl", "signEntry"}
    assert data["glossSequence"][0]["signEntry"]["gloss"] == "COFFEE"


def test_to_dict_unknown_has_null_entry(translator):
    data = translator.translate("zorblax").to_dict()
    assert data["glossSequence"][0]["signEntry"] is None
    assert data["glossSequence"][0]["isUnknown"] is True


# === Grammar notes ===

def test_grammar_notes(translator):
    notes = translator.translate("What is your name?").notes

    assert "Articles/auxiliaries dropped: is" in notes
    assert "Question word moved to end: WHAT" in notes


def test_grammar_notes_time_and_unknown(translator):
    notes = translator.translate("Yesterday I ate zorblax").notes

    assert "Time markers moved to sentence start: YESTERDAY" in notes
    assert "No dictionary sign for: ZORBLAX" in notes


# === Dictionary failures ===

class ExplodingDictionary:
    def lookup(self, gloss):
        raise RuntimeError("dictionary offline")

    def search_url_for(self, word):
        return f"https://example.test/{word}"

    def glosses_by_category(self):
        return {}


def test_failing_dictionary_means_unknown():
    translator = BSLTranslator(ExplodingDictionary())
    result = translator.translate("I want coffee")

    assert result.glosses == ["COFFEE", "I", "WANT"]
    assert all(g.is_unknown for g in result.gloss_sequence)
    assert result.gloss_sequence[0].search_url == "https://example.test/coffee"


# === Convenience API ===

def test_translate_batch(translator):
    results = translator.translate_batch(["Hello", "What is your name?"])
    assert [r.gloss_string for r in results] == ["HELLO", "YOUR NAME WHAT"]


def test_get_available_signs(translator):
    signs = translator.get_available_signs()

    assert "COFFEE" in signs
    assert signs == sorted(signs)


def test_module_level_translate():
    assert translate("Where do you live?").gloss_string == "YOU LIVE WHERE"
    assert quick_translate("Do you want a cup of coffee?") == "CUP COFFEE YOU WANT"


def test_translator_with_small_dictionary(small_dictionary):
    result = BSLTranslator(small_dictionary).translate("Do you want an espresso?")

    assert result.glosses == ["COFFEE", "YOU", "WANT"]
    assert get_translation_stats(result)["coverage_percent"] == 100
    assert isinstance(small_dictionary, SignDictionary)
