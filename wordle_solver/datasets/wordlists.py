"""
Word-list loading.

Lists are plain UTF-8 text, one word per line. Loading never aborts on a bad
line: blank lines and lines that do not parse as a Word are skipped (logged at
DEBUG, summarized at INFO), so a slightly dirty list still yields a usable
pool.

Pools are returned as tuples and cached for the lifetime of the process
(load_pools is lru_cached), so every caller shares the same immutable Words.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Tuple

from wordle_solver.engine import Word, WordError

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ANSWERS = DATA_DIR / "answers.txt"
DEFAULT_ALLOWED = DATA_DIR / "allowed.txt"

# --wordlist modes
MODE_ALL = "all"          # guess with the allowed list, answers as candidates
MODE_ANSWERS = "answers"  # guess only with answer words


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_words(words: Iterable[Word], p: Path | str) -> str:
    """Write one word per line (trailing newline). Returns the path written."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{w.text}\n" for w in words), encoding="utf-8")
    return str(p)


def words_from_iterable(items: Iterable[str], *, source: str = "<memory>") -> Tuple[Word, ...]:
    """Parse strings into Words, skipping blanks and invalid entries."""
    out: List[Word] = []
    skipped = 0
    for lineno, raw in enumerate(items, 1):
        text = raw.strip()
        if not text:
            continue
        try:
            out.append(Word(text))
        except WordError as e:
            skipped += 1
            log.debug("%s:%d: skipping %r (%s)", source, lineno, text, e)
    if skipped:
        log.info("%s: skipped %d invalid line(s)", source, skipped)
    return tuple(out)


def load_words(path: Path | str) -> Tuple[Word, ...]:
    """Load a word list file into Words (invalid lines skipped)."""
    return words_from_iterable(read_lines(path), source=str(path))


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Tuple[Word, ...]:
    words = load_words(path)
    log.info("loaded %d words from %s", len(words), path)
    return words


def load_pools(
        answers_path: Path | str = DEFAULT_ANSWERS,
        allowed_path: Path | str = DEFAULT_ALLOWED,
        mode: str = MODE_ALL,
) -> Tuple[Tuple[Word, ...], Tuple[Word, ...]]:
    """
    Return (guess_pool, answer_pool) for a --wordlist mode.

      "all"     : guess pool = allowed list, answers = answer list
      "answers" : guess pool = answers = answer list
      <path>    : guess pool = words in that file, answers = answer list
    """
    answers = _load_cached(str(answers_path))
    if mode == MODE_ALL:
        guesses = _load_cached(str(allowed_path))
    elif mode == MODE_ANSWERS:
        guesses = answers
    else:
        guesses = _load_cached(str(mode))
    return guesses, answers


def clear_cache() -> None:
    """Forget cached pools (tests rewrite files under the same path)."""
    _load_cached.cache_clear()
