from oral_reading.alignment.similarity import WordSimilarity
from oral_reading.lexicon import DEFAULT_TABLES, cmudict
from oral_reading.lexicon.cmudict import find_cmudict_homophones, strip_stress
from oral_reading.models import WordStatus
from oral_reading.pipeline import assess_reading

FAKE_CMUDICT = {
    "knight": [["N", "AY1", "T"]],
    "night": [["N", "AY1", "T"]],
    "read": [["R", "IY1", "D"], ["R", "EH1", "D"]],
    "reed": [["R", "IY1", "D"]],
    "red": [["R", "EH1", "D"]],
    "cat": [["K", "AE1", "T"]],
}


def test_strip_stress():
    assert strip_stress(["N", "AY1", "T"]) == ("N", "AY", "T")


def test_find_homophones_in_vocabulary():
    groups = find_cmudict_homophones(["Knight", "night.", "read", "reed", "red", "cat", "zzz"], FAKE_CMUDICT)
    assert groups == [("knight", "night"), ("read", "red"), ("read", "reed")]


def test_words_without_partner_ignored():
    assert find_cmudict_homophones(["cat", "night"], FAKE_CMUDICT) == []


def test_loaded_dictionary_used_when_not_given(monkeypatch):
    monkeypatch.setattr(cmudict, "_CMUDICT_CACHE", FAKE_CMUDICT)
    assert find_cmudict_homophones(["knight", "night"]) == [("knight", "night")]


# Entries as listed in the CMU Pronouncing Dictionary
WEAK_FORM_CMUDICT = {
    "cats": [["K", "AE1", "T", "S"]],
    "here": [["HH", "IY1", "R"]],
    "are": [["AA1", "R"], ["ER0"]],
    "or": [["AO1", "R"], ["ER0"]],
    "for": [["F", "AO1", "R"], ["F", "ER0"], ["F", "R", "ER0"]],
    "fur": [["F", "ER1"]],
    "a": [["AH0"], ["EY1"]],
    "uh": [["AH1"]],
    "we'll": [["W", "IY1", "L"]],
    "wheel": [["W", "IY1", "L"], ["HH", "W", "IY1", "L"]],
}


def test_has_stressed_vowel():
    assert cmudict.has_stressed_vowel(["F", "AO1", "R"])
    assert cmudict.has_stressed_vowel(["K", "AA2", "T"])
    assert not cmudict.has_stressed_vowel(["F", "ER0"])


def test_weak_forms_do_not_make_homophones():
    groups = find_cmudict_homophones(["are", "or", "for", "fur", "a", "uh"], WEAK_FORM_CMUDICT)
    assert groups == []


def test_members_stored_in_matching_form():
    groups = find_cmudict_homophones(["We'll", "wheel"], WEAK_FORM_CMUDICT)
    assert groups == [("we will", "wheel")]


def test_contraction_homophone_matches_after_normalization():
    tables = DEFAULT_TABLES.extended(find_cmudict_homophones(["we'll", "wheel"], WEAK_FORM_CMUDICT))
    assert WordSimilarity(tables).similarity("we'll", "wheel") == 0.95


def test_weak_form_misread_not_scored_correct(monkeypatch):
    monkeypatch.setattr(cmudict, "_CMUDICT_CACHE", WEAK_FORM_CMUDICT)
    spoken = [
        {"word": "cats", "startTime": 0.0, "endTime": 0.4},
        {"word": "or", "startTime": 0.4, "endTime": 0.6},
        {"word": "here", "startTime": 0.6, "endTime": 1.0},
    ]
    words = assess_reading(["Cats", "are", "here"], spoken, use_cmudict=True).result.words
    assert (words[1].expected, words[1].spoken) == ("are", "or")
    assert words[1].status is WordStatus.SUBSTITUTED
