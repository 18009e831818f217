import math

import pytest
from wordle_solver.engine import Word
from wordle_solver.solvers import (
    EntropyStrategy,
    MinimaxStrategy,
    create_strategy,
    select_best_entropy,
    select_best_minimax,
)


def _words(*texts):
    return [Word(t) for t in texts]


CANDIDATES = _words("crane", "crate", "crave")


def test_entropy_prefers_a_guess_that_splits_everything():
    pool = _words("crane", "crate", "crave", "tenth")
    best, h = select_best_entropy(pool, CANDIDATES)
    assert best == Word("tenth")
    assert h == pytest.approx(math.log2(3))


def test_entropy_tie_goes_to_earliest_in_pool():
    # all three have the same {1, 2} partition
    best, _ = select_best_entropy(_words("crate", "crane", "crave"), CANDIDATES)
    assert best == Word("crate")


def test_entropy_empty_pool():
    assert select_best_entropy([], CANDIDATES) is None
    assert EntropyStrategy().select_guess([], CANDIDATES) is None


def test_minimax_prefers_smallest_worst_case():
    pool = _words("crane", "crate", "crave", "tenth")
    assert select_best_minimax(pool, CANDIDATES) == (Word("tenth"), 1)


def test_minimax_tie_goes_to_earliest_in_pool():
    best, worst = select_best_minimax(_words("crave", "crane", "crate"), CANDIDATES)
    assert (best, worst) == (Word("crave"), 2)


def test_minimax_empty_pool():
    assert select_best_minimax([], CANDIDATES) is None
    assert MinimaxStrategy().select_guess([], CANDIDATES) is None


@pytest.mark.parametrize("sid,cls", [
    ("entropy", EntropyStrategy),
    ("pure-entropy", EntropyStrategy),
    ("minimax", MinimaxStrategy),
])
def test_strategies_by_name(sid, cls):
    assert isinstance(create_strategy(sid), cls)


@pytest.mark.parametrize("threshold,expected", [
    (2, "entropy"),   # 3 candidates > 2
    (3, "minimax"),   # 3 candidates <= 3
    (5, "minimax"),
])
def test_hybrid_switches_to_minimax_at_threshold(monkeypatch, threshold, expected):
    from wordle_solver.solvers import hybrid

    monkeypatch.setattr(hybrid, "select_best_entropy",
                        lambda pool, cands, workers=None, executor=None: (Word("entro"), 1.0))
    monkeypatch.setattr(hybrid, "select_best_minimax",
                        lambda pool, cands, workers=None, executor=None: (Word("minim"), 1))
    strategy = create_strategy("hybrid", minimax_threshold=threshold)
    picked = strategy.select_guess(_words("crane", "tenth"), CANDIDATES)
    assert picked == Word("entro" if expected == "entropy" else "minim")


def test_hybrid_rejects_negative_threshold():
    with pytest.raises(ValueError):
        create_strategy("hybrid", minimax_threshold=-1)
