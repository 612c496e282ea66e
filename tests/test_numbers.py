import pytest

from oral_reading.lexicon.numbers import (
    are_number_equivalents,
    is_number_like,
    number_to_words,
    parse_number,
)


@pytest.mark.parametrize(
    "text, value",
    [
        ("15", 15),
        ("fifteen", 15),
        ("Fifteen.", 15),
        ("zero", 0),
        ("1st", 1),
        ("22nd", 22),
        ("first", 1),
        ("twentieth", 20),
        ("twenty-one", 21),
        ("twenty first", 21),
        ("one hundred and twenty three", 123),
        ("two thousand and five", 2005),
        ("three million", 3_000_000),
        ("1,000", 1000),
        ("one hundredth", 100),
        ("two thousandth", 2000),
        ("one hundred and first", 101),
    ],
)
def test_parse_number(text, value):
    assert parse_number(text) == value


@pytest.mark.parametrize("text", ["", "hello", "and", "th", "cat"])
def test_parse_number_rejects_words(text):
    assert parse_number(text) is None
    assert not is_number_like(text)


def test_number_to_words():
    assert number_to_words(0) == "zero"
    assert number_to_words(7) == "seven"
    assert number_to_words(42) == "forty two"
    assert number_to_words(123) == "one hundred twenty three"
    assert number_to_words(2005) == "two thousand five"
    assert number_to_words(3_000_000) == "three million"
    assert number_to_words(-1) is None


def test_number_to_words_parses_back():
    for n in (1, 19, 80, 101, 999, 12_345, 700_000_001):
        assert parse_number(number_to_words(n)) == n


def test_are_number_equivalents():
    assert are_number_equivalents("2nd", "second")
    assert are_number_equivalents("twelve", "12")
    assert not are_number_equivalents("twelve", "13")
    assert not are_number_equivalents("hello", "world")


def test_ordinal_scale_multiplies():
    assert are_number_equivalents("two thousandth", "2000th")
    assert not are_number_equivalents("one hundredth", "101")
