import pickle

import pytest
from wordle_solver.engine import Word, WordError, InvalidLength, NonAscii, InvalidCharacters


def test_word_normalizes_case():
    w = Word("CrAnE")
    assert w.text == "crane"
    assert str(w) == "crane"
    assert w.chars == b"crane"


@pytest.mark.parametrize("text,exc", [
    ("", InvalidLength),
    ("cran", InvalidLength),
    ("cranes", InvalidLength),
    ("cafés", InvalidLength),
    ("abcé", NonAscii),
    ("cr4ne", InvalidCharacters),
    ("cr-ne", InvalidCharacters),
    ("cr ne", InvalidCharacters),
])
def test_word_rejects_invalid_text(text, exc):
    with pytest.raises(exc):
        Word(text)


def test_word_errors_are_value_errors():
    with pytest.raises(ValueError):
        Word("toolong")
    assert issubclass(InvalidLength, WordError)
    assert issubclass(NonAscii, WordError)
    assert issubclass(InvalidCharacters, WordError)


def test_invalid_length_reports_length():
    with pytest.raises(InvalidLength) as e:
        Word("abc")
    assert e.value.length == 3


def test_length_is_checked_before_characters():
    # wrong length AND bad characters -> length wins
    with pytest.raises(InvalidLength):
        Word("ab1")


def test_letter_queries():
    w = Word("speed")
    assert w.char_at(0) == "s"
    assert w.char_at(4) == "d"
    assert w.has_letter("e")
    assert not w.has_letter("z")
    assert w.positions_of("e") == (2, 3)
    assert w.positions_of("z") == ()
    assert w.char_counts() == {"s": 1, "p": 1, "e": 2, "d": 1}


def test_char_at_out_of_range():
    with pytest.raises(IndexError):
        Word("crane").char_at(5)


def test_char_counts_is_a_fresh_copy():
    w = Word("speed")
    counts = w.char_counts()
    counts["e"] -= 2
    assert w.char_counts()["e"] == 2


def test_equality_and_hash_by_text():
    assert Word("crane") == Word("CRANE")
    assert Word("crane") != Word("crate")
    assert len({Word("crane"), Word("crane"), Word("crate")}) == 2


def test_word_pickles():
    w = Word("salet")
    assert pickle.loads(pickle.dumps(w)) == w


def test_length_is_counted_in_utf8_bytes():
    with pytest.raises(InvalidLength) as e:
        Word("cafés")
    assert e.value.length == 6
