"""
Partition metrics for a guess against a candidate set.

Every metric starts from the same step: bucket the candidates by the Pattern
each would produce against the guess. With only 243 possible patterns the
buckets are a dense numpy count vector (np.bincount), not a dict.

From the bucket sizes {c_i} over n candidates:
  - entropy            H = sum_i (c_i/n) * log2(n/c_i)      (bits, >= 0)
  - expected remaining E = sum_i (c_i/n) * c_i = sum c_i^2 / n
  - worst case         W = max_i c_i                        (minimax metric)

Bounds: 0 <= H <= log2(#non-empty buckets) <= log2(n), and
ceil(n / 243) <= W <= n.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .scoring import Pattern, PATTERN_SPACE
from .word import Word


@dataclass(frozen=True)
class GuessMetrics:
    """Scores for one guess against one candidate set."""
    entropy: float              # expected information gain (bits)
    expected_remaining: float   # expected candidates left after feedback
    max_partition: int          # worst-case candidates left


EMPTY_METRICS = GuessMetrics(entropy=0.0, expected_remaining=0.0, max_partition=0)


def group_by_pattern(guess: Word, candidates: Sequence[Word]) -> np.ndarray:
    """Length-243 vector: how many candidates produce each pattern."""
    codes = np.fromiter(
        (Pattern.calculate(guess, c) for c in candidates),
        dtype=np.int64,
        count=len(candidates),
    )
    return np.bincount(codes, minlength=PATTERN_SPACE)


def shannon_entropy(counts) -> float:
    """
    H = -sum p*log2(p) over the non-empty groups of `counts`.

    Returns 0.0 for an empty distribution or a single certain outcome.
    """
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if total <= 0:
        return 0.0
    # Sorted: equal bucket multisets must give bit-identical entropies
    nz = np.sort(counts[counts > 0])
    p = nz / total
    # p * log2(1/p) keeps a certain outcome at +0.0 rather than -0.0
    return float(np.sum(p * np.log2(1.0 / p)))


def calculate_entropy(guess: Word, candidates: Sequence[Word]) -> float:
    """Expected information gain (bits) of `guess`; 0.0 for no candidates."""
    if not candidates:
        return 0.0
    return shannon_entropy(group_by_pattern(guess, candidates))


def calculate_max_remaining(guess: Word, candidates: Sequence[Word]) -> int:
    """Worst-case number of candidates left after `guess`; 0 for none."""
    if not candidates:
        return 0
    return int(group_by_pattern(guess, candidates).max())


def calculate_metrics(guess: Word, candidates: Sequence[Word]) -> GuessMetrics:
    """Entropy, expected remaining and worst case from a single grouping pass."""
    if not candidates:
        return EMPTY_METRICS

    counts = group_by_pattern(guess, candidates)
    total = float(len(candidates))
    nz = counts[counts > 0].astype(np.float64)

    return GuessMetrics(
        entropy=shannon_entropy(nz),
        expected_remaining=float(np.sum(nz * nz) / total),
        max_partition=int(nz.max()),
    )
