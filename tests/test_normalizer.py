from oral_reading.alignment.normalizer import (
    ends_with_natural_pause,
    is_filler_word,
    normalize_ocr_confusions,
    normalize_word,
    shares_prefix,
)


def test_normalize_word():
    assert normalize_word("Hello!") == "hello"
    assert normalize_word("  The, ") == "the"
    assert normalize_word("don't") == "do not"
    assert normalize_word("they're") == "they are"
    assert normalize_word("cat's") == "cat"
    assert normalize_word("I'm") == "i am"
    assert normalize_word("...") == ""


def test_only_trailing_contraction_expanded():
    assert normalize_word("'twas") == "'twas"


def test_normalize_ocr_confusions():
    assert normalize_ocr_confusions("rnodern") == normalize_ocr_confusions("modern")
    assert normalize_ocr_confusions("c1ear") == normalize_ocr_confusions("dear")
    assert normalize_ocr_confusions("5ee") == "see"


def test_is_filler_word():
    assert is_filler_word("um")
    assert is_filler_word("Um,")
    assert is_filler_word("like")
    assert not is_filler_word("cat")
    assert not is_filler_word("")


def test_ends_with_natural_pause():
    for text in ("cat.", "cat,", "cat;", "cat:", "cat!", "cat?", "cat-", "cat—", "cat–"):
        assert ends_with_natural_pause(text)
    assert not ends_with_natural_pause("cat")
    assert not ends_with_natural_pause("cat'")
    assert not ends_with_natural_pause('cat"')


def test_shares_prefix():
    assert shares_prefix("the", "then")
    assert shares_prefix("th", "three")
    assert not shares_prefix("cat", "dog")
    assert not shares_prefix("", "dog")


def test_ocr_canonical_form():
    assert normalize_ocr_confusions("rnodern") == "modem"
