"""
Entropy Strategy (expected information gain).

Idea:
  - For each guess g in the guess pool, partition the CURRENT candidates by
    feedback pattern.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - the earliest guess in pool order wins (strict `>` while scanning).

Near-optimal early in the game, when the candidate set is large and average
information gain dominates.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional, Sequence, Tuple

from wordle_solver.engine import Word, calculate_entropy
from .base import Strategy, evaluate_pool, register


def select_best_entropy(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Tuple[Word, float]]:
    """Return (guess, entropy_bits) maximizing entropy, or None for an empty pool."""
    scores = evaluate_pool(calculate_entropy, guess_pool, candidates,
                           workers=workers, executor=executor)

    best: Optional[Word] = None
    best_H = 0.0
    for g, H in zip(guess_pool, scores):
        if best is None or H > best_H:
            best, best_H = g, H
    if best is None:
        return None
    return best, best_H


@register
class EntropyStrategy(Strategy):
    id = "entropy"
    aliases = ("pure-entropy",)
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    def select_guess(self, guess_pool, candidates):
        """Pick the guess with maximum expected information gain."""
        result = select_best_entropy(guess_pool, candidates,
                                     workers=self.workers, executor=self.executor)
        return result[0] if result else None
