import logging
from pathlib import Path

import pytest
from wordle_solver.datasets import (
    MODE_ALL,
    MODE_ANSWERS,
    clear_cache,
    load_pools,
    load_words,
    read_lines,
    words_from_iterable,
    write_words,
)
from wordle_solver.engine import Word


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def lists(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    custom = tmp_path / "custom.txt"
    ans.write_text("crane\nslate\n", encoding="utf-8")
    allw.write_text("crane\nslate\nsalet\ntenth\n", encoding="utf-8")
    custom.write_text("tenth\n", encoding="utf-8")
    return ans, allw, custom


def test_words_from_iterable_skips_bad_entries(caplog):
    with caplog.at_level(logging.INFO, logger="wordle_solver.datasets.wordlists"):
        words = words_from_iterable(["crane", "", "  ", "cranes", "SLATE", "cr4ne"], source="t")
    assert words == (Word("crane"), Word("slate"))
    assert "skipped 2 invalid" in caplog.text


def test_read_lines_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_write_then_load(tmp_path: Path):
    p = write_words([Word("crane"), Word("slate")], tmp_path / "sub" / "w.txt")
    assert read_lines(p) == ["crane", "slate"]
    assert load_words(p) == (Word("crane"), Word("slate"))


def test_load_pools_modes(lists):
    ans, allw, custom = lists
    guesses, answers = load_pools(ans, allw, MODE_ALL)
    assert answers == (Word("crane"), Word("slate"))
    assert len(guesses) == 4

    guesses, answers = load_pools(ans, allw, MODE_ANSWERS)
    assert guesses == answers

    guesses, _ = load_pools(ans, allw, str(custom))
    assert guesses == (Word("tenth"),)


def test_load_pools_is_cached(lists):
    ans, allw, _ = lists
    first = load_pools(ans, allw)
    ans.write_text("tenth\n", encoding="utf-8")
    assert load_pools(ans, allw)[1] is first[1]
    clear_cache()
    assert load_pools(ans, allw)[1] == (Word("tenth"),)
