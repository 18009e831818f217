"""
Candidate filtering given game history.

Given:
  - a pool of words (normally the answer pool)
  - a history of (guess, pattern) pairs

Return:
  - the words that are consistent with ALL feedback seen so far.

A candidate c survives iff, for every (guess, observed) in history,
Pattern.calculate(guess, c) == observed. Filtering is idempotent, preserves
pool order, and can only shrink the set as history grows.
"""

from typing import Iterable, List, Sequence, Tuple

from .scoring import Pattern
from .word import Word

# History is a caller-owned sequence of (guess, pattern) tuples, oldest first.
History = Sequence[Tuple[Word, Pattern]]


def is_consistent(candidate: Word, history: History) -> bool:
    """True if `candidate` would have produced every recorded pattern."""
    for guess, observed in history:
        if Pattern.calculate(guess, candidate) != observed:
            return False
    return True


def filter_candidates(words: Iterable[Word], history: History) -> List[Word]:
    """
    Keep only words that would produce exactly the recorded patterns for every
    (guess, pattern) in `history`.

    Args:
      words   : iterable of Words (often the answer pool)
      history : sequence of (guess, pattern) seen so far

    Returns:
      List[Word] of consistent candidates (order preserved as in `words`).
    """
    if not history:
        return list(words)
    return [w for w in words if is_consistent(w, history)]
