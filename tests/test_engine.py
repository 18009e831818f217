import pytest
from wordle_solver.engine import Pattern, Word, score, filter_candidates, validate_guess, parse_guess


def _words(*texts):
    return [Word(t) for t in texts]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("speed","erase","Y-YY-"),
    ("robot","floor","YY-G-"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_accepts_words_and_mixed_case():
    assert score(Word("crane"), Word("crane")) == "GGGGG"
    assert score("RAISE", " crane ") == "YY--G"


def test_filter_candidates_history():
    words = _words("crane","raise","stare","trace","cared","racer","scoop")
    history = [(Word("raise"), Pattern.from_str("YY--G"))]
    cand = filter_candidates(words, history)
    assert cand == _words("crane", "trace")


def test_filter_candidates_empty_history_keeps_everything_in_order():
    words = _words("stare", "crane", "raise")
    assert filter_candidates(words, []) == words


def test_filter_candidates_is_idempotent():
    words = _words("crane","slate","irate","crate","grate")
    history = [(Word("crane"), Pattern.calculate(Word("crane"), Word("irate")))]
    once = filter_candidates(words, history)
    assert filter_candidates(once, history) == once


def test_validate_guess():
    allowed = _words("crane","raise","stare")
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", allowed) is False


def test_parse_guess_returns_word_or_none():
    allowed = frozenset(_words("crane", "raise"))
    assert parse_guess(" Raise ", allowed) == Word("raise")
    assert parse_guess("cafés", allowed) is None
    assert parse_guess(None, allowed) is None
