"""
Minimax Strategy (worst-case remaining candidates).

Idea:
  For guess g, bucket the CURRENT candidates by pattern; the adversary picks
  the biggest bucket. Choose g minimizing that worst case.
Tie-break:
  - the earliest guess in pool order wins.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional, Sequence, Tuple

from wordle_solver.engine import Word, calculate_max_remaining
from .base import Strategy, evaluate_pool, register


def select_best_minimax(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Tuple[Word, int]]:
    """Return (guess, worst_case) minimizing the worst case, or None for an empty pool."""
    worst = evaluate_pool(calculate_max_remaining, guess_pool, candidates,
                          workers=workers, executor=executor)

    best: Optional[Word] = None
    best_worst = 0
    for g, w in zip(guess_pool, worst):
        if best is None or w < best_worst:
            best, best_worst = g, w
    if best is None:
        return None
    return best, best_worst


@register
class MinimaxStrategy(Strategy):
    id = "minimax"
    name = "Minimax (worst-case bucket)"
    version = "1.0.0"

    def select_guess(self, guess_pool, candidates):
        result = select_best_minimax(guess_pool, candidates,
                                     workers=self.workers, executor=self.executor)
        return result[0] if result else None
