"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it parses as a Word (5 ASCII letters, case-insensitive)
  - it exists in the provided `allowed` pool

Used by the interactive CLI when the player reports a word other than the
suggested one.
"""

from typing import Iterable, Optional

from .word import Word, WordError


def parse_guess(text: str, allowed: Iterable[Word]) -> Optional[Word]:
    """
    Return the pool's Word for `text`, or None if it is malformed or not allowed.

    Notes:
      - `allowed` may be a large tuple; a set is built per call. If you're
        calling this in a tight loop, pass a set/frozenset of Words instead.
    """
    if not isinstance(text, str):
        return None

    try:
        word = Word(text.strip())
    except WordError:
        return None

    allowed_set = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return word if word in allowed_set else None


def validate_guess(text: str, allowed: Iterable[Word]) -> bool:
    """Return True if `text` is a well-formed word present in `allowed`."""
    return parse_guess(text, allowed) is not None
