"""
Composite selection rules used by the adaptive strategy.

Each rule scores the whole guess pool with calculate_metrics (entropy,
expected remaining, worst case) and reduces with an explicit total order.
Whenever two guesses compare equal under a rule, the one earlier in the guess
pool wins, so results never depend on worker scheduling.

  expected_tiebreaker : max entropy, then min expected remaining, then min worst case
  hybrid_scoring      : max int(100*H) - 10*worst, then min expected remaining
  minimax_first       : min worst case, then candidate-within-epsilon, then max entropy
  candidate_preference: entropy within epsilon of max, candidates first, then min worst case
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import List, Optional, Sequence, Tuple

from wordle_solver.engine import GuessMetrics, Word, calculate_metrics
from .base import evaluate_pool

Scored = Tuple[Word, GuessMetrics]

ENTROPY_WEIGHT = 100
WORST_CASE_WEIGHT = 10


def _score_pool(guess_pool: Sequence[Word], candidates: Sequence[Word],
                workers: int | None, executor: Executor | None) -> List[Scored]:
    metrics = evaluate_pool(calculate_metrics, guess_pool, candidates,
                            workers=workers, executor=executor)
    return list(zip(guess_pool, metrics))


def hybrid_score(m: GuessMetrics) -> int:
    """Entropy (x100, truncated) minus a worst-case penalty (x10)."""
    return int(m.entropy * ENTROPY_WEIGHT) - m.max_partition * WORST_CASE_WEIGHT


def select_with_expected_tiebreaker(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Word]:
    """Lexicographic: entropy (max), expected remaining (min), worst case (min)."""
    best: Optional[Word] = None
    best_key = None
    for g, m in _score_pool(guess_pool, candidates, workers, executor):
        key = (m.entropy, -m.expected_remaining, -m.max_partition)
        if best is None or key > best_key:
            best, best_key = g, key
    return best


def select_with_hybrid_scoring(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Word]:
    """
    Maximize hybrid_score(); smaller expected remaining breaks ties.
    """
    best: Optional[Word] = None
    best_key = None
    for g, m in _score_pool(guess_pool, candidates, workers, executor):
        key = (hybrid_score(m), -m.expected_remaining)
        if best is None or key > best_key:
            best, best_key = g, key
    return best


def _max_entropy(scored: Sequence[Tuple]) -> Optional[Tuple]:
    """First entry with the highest entropy (entry[1] is a GuessMetrics)."""
    best = None
    for entry in scored:
        if best is None or entry[1].entropy > best[1].entropy:
            best = entry
    return best


def select_minimax_first(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        epsilon: float,
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Word]:
    """
    Minimax first, entropy second, with a preference for live candidates.

    1) Keep only the guesses tied at the minimum worst case.
    2) Among those, if some remaining candidate has entropy strictly within
       `epsilon` bits of the tied set's best, play the highest-entropy such
       candidate (it might simply be the answer).
    3) Otherwise play the highest-entropy tied guess.
    """
    scored = _score_pool(guess_pool, candidates, workers, executor)
    if not scored:
        return None

    min_worst = min(m.max_partition for _, m in scored)
    tied = [(g, m) for g, m in scored if m.max_partition == min_worst]
    max_entropy = max(m.entropy for _, m in tied)

    live = set(candidates)
    preferred = _max_entropy([
        (g, m) for g, m in tied
        if g in live and (max_entropy - m.entropy) < epsilon
    ])
    if preferred is not None:
        return preferred[0]

    return _max_entropy(tied)[0]


def select_with_candidate_preference(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        epsilon: float,
        *,
        workers: int | None = None,
        executor: Executor | None = None,
) -> Optional[Word]:
    """
    Entropy first, with an epsilon-greedy preference for live candidates.

    Among guesses whose entropy is strictly within `epsilon` of the maximum,
    return the remaining candidate with the smallest worst case; if no
    candidate qualifies, the smallest worst case among all of them.
    """
    scored = _score_pool(guess_pool, candidates, workers, executor)
    if not scored:
        return None

    max_entropy = max(m.entropy for _, m in scored)
    top = [(g, m) for g, m in scored
           if m.entropy == max_entropy or (max_entropy - m.entropy) < epsilon]
    live = set(candidates)

    def min_worst(entries):
        best = None
        for g, m in entries:
            if best is None or m.max_partition < best[1].max_partition:
                best = (g, m)
        return best

    preferred = min_worst([(g, m) for g, m in top if g in live])
    if preferred is not None:
        return preferred[0]
    return min_worst(top)[0]
