import itertools

import pytest
from wordle_solver.engine import Pattern, PatternParseError, PATTERN_SPACE, Word


@pytest.mark.parametrize("guess,answer,value", [
    ("speed", "erase", 37),   # S yellow, P gray, E yellow, E yellow, D gray
    ("robot", "floor", 58),   # R yellow, O yellow, B gray, O green, T gray
    ("crane", "slate", 180),  # A and E green
    ("crane", "crane", 242),
])
def test_calculate_values(guess, answer, value):
    assert Pattern.calculate(Word(guess), Word(answer)) == value


WORDS = ["crane", "speed", "erase", "robot", "floor", "level", "belle", "zzzzz", "abbey"]


@pytest.mark.parametrize("text", WORDS)
def test_self_match_is_perfect(text):
    p = Pattern.calculate(Word(text), Word(text))
    assert p == Pattern.PERFECT
    assert p.is_perfect()
    assert p.count_greens() == 5


@pytest.mark.parametrize("guess,answer", list(itertools.permutations(WORDS, 2)))
def test_green_plus_yellow_never_exceeds_five(guess, answer):
    p = Pattern.calculate(Word(guess), Word(answer))
    assert 0 <= p < PATTERN_SPACE
    assert p.count_greens() + p.count_yellows() <= 5
    assert not p.is_perfect()


def test_counts_come_from_the_value_alone():
    p = Pattern(58)
    assert p.digits() == [1, 1, 0, 2, 0]
    assert p.count_greens() == 1
    assert p.count_yellows() == 2


@pytest.mark.parametrize("text,value", [
    ("GYG--", 23),
    ("gyg__", 23),
    ("🟩🟨🟩⬜⬜", 23),
    ("-----", 0),
    ("GGGGG", 242),
])
def test_from_str(text, value):
    assert Pattern.from_str(text) == value


@pytest.mark.parametrize("text", ["", "GYG-", "GYG---", "GYGXG", "gyg.."])
def test_from_str_rejects_malformed(text):
    with pytest.raises(PatternParseError):
        Pattern.from_str(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        Pattern.from_str("nope")


def test_string_forms():
    p = Pattern(23)
    assert p.to_str() == "GYG--"
    assert p.to_emoji() == "🟩🟨🟩⬜⬜"
    assert Pattern.from_str(p.to_str()) == p
    assert p.value == 23


@pytest.mark.parametrize("value", [-1, 243, 1000])
def test_out_of_range_values_rejected(value):
    with pytest.raises(ValueError):
        Pattern(value)
