"""
Hybrid strategy: entropy while the space is large, minimax near the end.

  |candidates| >  minimax_threshold -> select_best_entropy
  |candidates| <= minimax_threshold -> select_best_minimax
"""

from __future__ import annotations

from .base import Strategy, register
from .entropy import select_best_entropy
from .minimax import select_best_minimax


@register
class HybridStrategy(Strategy):
    id = "hybrid"
    name = "Hybrid (entropy, then minimax)"
    version = "1.0.0"

    DEFAULT_MINIMAX_THRESHOLD = 5

    def __init__(self, minimax_threshold: int = DEFAULT_MINIMAX_THRESHOLD, **kwargs):
        super().__init__(**kwargs)
        if minimax_threshold < 0:
            raise ValueError(f"minimax_threshold must be >= 0; got {minimax_threshold}")
        self.minimax_threshold = int(minimax_threshold)

    def select_guess(self, guess_pool, candidates):
        if len(candidates) <= self.minimax_threshold:
            result = select_best_minimax(guess_pool, candidates,
                                         workers=self.workers, executor=self.executor)
        else:
            result = select_best_entropy(guess_pool, candidates,
                                         workers=self.workers, executor=self.executor)
        return result[0] if result else None
