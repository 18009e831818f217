"""
The solving engine.

A Solver owns three immutable things: a strategy, the guess pool and the
answer pool. Everything game-specific (the (guess, pattern) history) is owned
by the caller and passed in per query, so one Solver can serve any number of
games or hypothetical histories at once.

Turn logic:
  - no history         -> first_guess(): the fixed opening word if it is a
                          legal guess, else the strategy on the full answer pool
  - 0 candidates left  -> None (the history contradicts itself)
  - 1 candidate left   -> that candidate, no scoring needed
  - otherwise          -> strategy.select_guess(guess_pool, candidates)
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from wordle_solver.engine import History, Word, filter_candidates
from .base import Strategy

log = logging.getLogger(__name__)

# Known-optimal opener for the standard answer list (3.421 average guesses).
DEFAULT_OPENING = "salet"


class Solver:
    def __init__(self, strategy: Strategy, guess_pool: Iterable[Word],
                 answer_pool: Iterable[Word], *, opening: str | None = DEFAULT_OPENING):
        self.strategy = strategy
        self.guess_pool = tuple(guess_pool)
        self.answer_pool = tuple(answer_pool)
        self.opening = opening

        self._opening_word: Optional[Word] = None
        if opening:
            self._opening_word = next(
                (w for w in self.guess_pool if w.text == opening), None)

    @property
    def opening_word(self) -> Optional[Word]:
        """The fixed opener, or None when turn one is left to the strategy."""
        return self._opening_word

    def first_guess(self) -> Optional[Word]:
        """Opening word if available, otherwise the strategy's pick on turn one."""
        if self._opening_word is not None:
            log.debug("first guess: fixed opening %s", self._opening_word)
            return self._opening_word
        return self.strategy.select_guess(self.guess_pool, self.answer_pool)

    def next_guess(self, history: History) -> Optional[Word]:
        """Best next guess for `history`, or None if no candidate remains."""
        if not history:
            return self.first_guess()

        candidates = self.get_candidates(history)
        log.debug("turn %d: %d candidates", len(history) + 1, len(candidates))

        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]
        return self.strategy.select_guess(self.guess_pool, candidates)

    def get_candidates(self, history: History) -> List[Word]:
        """Answer-pool words consistent with every (guess, pattern) in history."""
        return filter_candidates(self.answer_pool, history)

    def count_candidates(self, history: History) -> int:
        return len(self.get_candidates(history))

    def close(self) -> None:
        """Release the strategy's worker pool."""
        self.strategy.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self) -> str:
        return (f"Solver({self.strategy!r}, guesses={len(self.guess_pool)}, "
                f"answers={len(self.answer_pool)})")
