import logging

import pytest
from wordle_solver.engine import Word
from wordle_solver.solvers import AdaptiveStrategy, AdaptiveTier, create_strategy


def _words(*texts):
    return [Word(t) for t in texts]


@pytest.mark.parametrize("n,tier", [
    (2000, AdaptiveTier.PURE_ENTROPY),
    (101, AdaptiveTier.PURE_ENTROPY),
    (100, AdaptiveTier.ENTROPY_MINIMAX),
    (22, AdaptiveTier.ENTROPY_MINIMAX),
    (21, AdaptiveTier.HYBRID),
    (10, AdaptiveTier.HYBRID),
    (9, AdaptiveTier.MINIMAX_FIRST),
    (3, AdaptiveTier.MINIMAX_FIRST),
    (2, AdaptiveTier.RANDOM),
    (1, AdaptiveTier.RANDOM),
    (0, AdaptiveTier.RANDOM),
])
def test_default_tier_boundaries(n, tier):
    assert AdaptiveStrategy().get_tier(n) is tier


@pytest.mark.parametrize("n,tier", [
    (51, AdaptiveTier.PURE_ENTROPY),
    (50, AdaptiveTier.ENTROPY_MINIMAX),
    (21, AdaptiveTier.ENTROPY_MINIMAX),
    (20, AdaptiveTier.HYBRID),
    (11, AdaptiveTier.HYBRID),
    (10, AdaptiveTier.MINIMAX_FIRST),
    (6, AdaptiveTier.MINIMAX_FIRST),
    (5, AdaptiveTier.RANDOM),
])
def test_custom_tier_boundaries(n, tier):
    s = AdaptiveStrategy(50, 20, 10, 5)
    assert s.get_tier(n) is tier


def test_negative_threshold_rejected():
    with pytest.raises(ValueError):
        AdaptiveStrategy(pure_entropy_threshold=-1)


def test_minimax_first_tier_picks_splitting_guess():
    # 3 candidates -> minimax-first; only tenth has worst case 1
    s = AdaptiveStrategy()
    pool = _words("crane", "crate", "crave", "tenth")
    assert s.select_guess(pool, _words("crane", "crate", "crave")) == Word("tenth")


def test_random_tier_plays_a_candidate():
    s = AdaptiveStrategy(seed=3)
    pool = _words("tenth", "crane", "crate")
    cands = _words("crane", "crate")
    for _ in range(10):
        assert s.select_guess(pool, cands) in cands


def test_tier_is_logged(caplog):
    s = AdaptiveStrategy()
    with caplog.at_level(logging.DEBUG, logger="wordle_solver.solvers.adaptive"):
        s.select_guess(_words("crane", "tenth"), _words("crane"))
    assert "random" in caplog.text


def test_unknown_strategy_falls_back_to_adaptive(caplog):
    with caplog.at_level(logging.WARNING):
        s = create_strategy("no-such-strategy")
    assert isinstance(s, AdaptiveStrategy)
    assert "no-such-strategy" in caplog.text


def test_create_strategy_passes_thresholds():
    s = create_strategy("adaptive", pure_entropy_threshold=50, minimax_epsilon=0.5)
    assert s.pure_entropy_threshold == 50
    assert s.minimax_epsilon == 0.5
