"""
Adaptive strategy: pick the selection rule by how many candidates remain.

Thresholds cascade with strict `>` comparisons:

    n > pure_entropy_threshold      -> PURE_ENTROPY     (default 101+)
    n > entropy_minimax_threshold   -> ENTROPY_MINIMAX  (default 22-100)
    n > hybrid_threshold            -> HYBRID           (default 10-21)
    n > minimax_first_threshold     -> MINIMAX_FIRST    (default 3-9)
    otherwise                       -> RANDOM           (default 1-2)

Pure entropy is near-optimal while the space is large; worst-case guarantees
matter more as it shrinks; with one or two candidates left any of them will do.
"""

from __future__ import annotations

import enum
import logging

from .base import Strategy, register
from .entropy import select_best_entropy
from .random_consistent import select_random_candidate
from .selection import (
    select_minimax_first,
    select_with_expected_tiebreaker,
    select_with_hybrid_scoring,
)

log = logging.getLogger(__name__)


class AdaptiveTier(enum.Enum):
    PURE_ENTROPY = "pure-entropy"
    ENTROPY_MINIMAX = "entropy-minimax"
    HYBRID = "hybrid"
    MINIMAX_FIRST = "minimax-first"
    RANDOM = "random"


@register
class AdaptiveStrategy(Strategy):
    id = "adaptive"
    name = "Adaptive (tiered entropy/minimax)"
    version = "1.0.0"

    DEFAULT_THRESHOLDS = (100, 21, 9, 2)
    DEFAULT_EPSILON = 0.1

    def __init__(
            self,
            pure_entropy_threshold: int = DEFAULT_THRESHOLDS[0],
            entropy_minimax_threshold: int = DEFAULT_THRESHOLDS[1],
            hybrid_threshold: int = DEFAULT_THRESHOLDS[2],
            minimax_first_threshold: int = DEFAULT_THRESHOLDS[3],
            minimax_epsilon: float = DEFAULT_EPSILON,
            **kwargs,
    ):
        super().__init__(**kwargs)
        thresholds = (pure_entropy_threshold, entropy_minimax_threshold,
                      hybrid_threshold, minimax_first_threshold)
        if any(t < 0 for t in thresholds):
            raise ValueError(f"tier thresholds must be >= 0; got {thresholds}")
        self.pure_entropy_threshold = int(pure_entropy_threshold)
        self.entropy_minimax_threshold = int(entropy_minimax_threshold)
        self.hybrid_threshold = int(hybrid_threshold)
        self.minimax_first_threshold = int(minimax_first_threshold)
        self.minimax_epsilon = float(minimax_epsilon)

    def get_tier(self, num_candidates: int) -> AdaptiveTier:
        if num_candidates > self.pure_entropy_threshold:
            return AdaptiveTier.PURE_ENTROPY
        if num_candidates > self.entropy_minimax_threshold:
            return AdaptiveTier.ENTROPY_MINIMAX
        if num_candidates > self.hybrid_threshold:
            return AdaptiveTier.HYBRID
        if num_candidates > self.minimax_first_threshold:
            return AdaptiveTier.MINIMAX_FIRST
        return AdaptiveTier.RANDOM

    def select_guess(self, guess_pool, candidates):
        tier = self.get_tier(len(candidates))
        log.debug("adaptive: %d candidates -> %s", len(candidates), tier.value)

        if tier is AdaptiveTier.PURE_ENTROPY:
            result = select_best_entropy(guess_pool, candidates,
                                         workers=self.workers, executor=self.executor)
            return result[0] if result else None
        if tier is AdaptiveTier.ENTROPY_MINIMAX:
            return select_with_expected_tiebreaker(guess_pool, candidates,
                                                   workers=self.workers, executor=self.executor)
        if tier is AdaptiveTier.HYBRID:
            return select_with_hybrid_scoring(guess_pool, candidates,
                                              workers=self.workers, executor=self.executor)
        if tier is AdaptiveTier.MINIMAX_FIRST:
            return select_minimax_first(guess_pool, candidates, self.minimax_epsilon,
                                        workers=self.workers, executor=self.executor)
        return select_random_candidate(guess_pool, candidates, self.rng)

    def __repr__(self) -> str:
        return (f"AdaptiveStrategy({self.pure_entropy_threshold}, "
                f"{self.entropy_minimax_threshold}, {self.hybrid_threshold}, "
                f"{self.minimax_first_threshold}, epsilon={self.minimax_epsilon})")
