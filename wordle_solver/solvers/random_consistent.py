"""
Random Consistent strategy (endgame).

Strategy:
  - Choose uniformly at random among the CURRENT candidates that are also
    legal guesses (present in the guess pool).
  - If no candidate is in the guess pool, fall back deterministically to the
    first word of the pool, so the pick is always a legal guess.

Notes:
  - Reproducible across runs with the same seed (via Strategy.rng).
  - Only sensible with one or two candidates left: at that point any live
    candidate is as good as the best splitting guess.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from wordle_solver.engine import Word
from .base import Strategy, register


def select_random_candidate(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        rng: random.Random,
) -> Optional[Word]:
    if not guess_pool:
        return None

    pool_set = set(guess_pool)
    playable = [c for c in candidates if c in pool_set]
    if playable:
        return playable[rng.randrange(len(playable))]

    # Deterministic fallback
    return guess_pool[0]


@register
class RandomConsistentStrategy(Strategy):
    id = "random"
    name = "Random Consistent"
    version = "1.1.0"

    def select_guess(self, guess_pool, candidates):
        """Pick a playable candidate uniformly at random (seeded RNG)."""
        return select_random_candidate(guess_pool, candidates, self.rng)
