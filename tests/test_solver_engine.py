import pytest
from wordle_solver.engine import Pattern, Word
from wordle_solver.solvers import (
    DEFAULT_OPENING,
    EntropyStrategy,
    MinimaxStrategy,
    Solver,
    create_strategy,
)


def _words(*texts):
    return [Word(t) for t in texts]


FIVE = _words("crane", "slate", "irate", "crate", "grate")


def test_default_opening_is_salet():
    assert DEFAULT_OPENING == "salet"


def test_first_guess_uses_opening_when_in_pool():
    pool = FIVE + [Word("salet")]
    solver = Solver(EntropyStrategy(), pool, FIVE)
    assert solver.first_guess() == Word("salet")
    assert solver.next_guess([]) == Word("salet")
    assert solver.opening_word == Word("salet")


def test_first_guess_falls_back_to_strategy():
    solver = Solver(MinimaxStrategy(), FIVE, FIVE)
    assert solver.opening_word is None
    expected = MinimaxStrategy().select_guess(FIVE, FIVE)
    assert solver.first_guess() == expected


def test_opening_disabled():
    pool = FIVE + [Word("salet")]
    solver = Solver(EntropyStrategy(), pool, FIVE, opening=None)
    assert solver.first_guess() == EntropyStrategy().select_guess(pool, FIVE)


def test_crane_against_irate():
    solver = Solver(create_strategy("adaptive"), FIVE, FIVE)
    observed = Pattern.calculate(Word("crane"), Word("irate"))
    assert observed.to_str() == "-GG-G"

    history = [(Word("crane"), observed)]
    candidates = solver.get_candidates(history)
    assert Word("irate") in candidates
    # exactly the words that would have produced the same feedback survive
    assert candidates == [w for w in FIVE if Pattern.calculate(Word("crane"), w) == observed]
    assert candidates == _words("irate", "grate")
    assert solver.count_candidates(history) == 2


def test_next_guess_single_candidate_is_returned_directly():
    solver = Solver(EntropyStrategy(), FIVE, FIVE)
    history = [(Word("crane"), Pattern.calculate(Word("crane"), Word("slate")))]
    assert solver.get_candidates(history) == [Word("slate")]
    assert solver.next_guess(history) == Word("slate")


def test_contradictory_history_gives_none():
    solver = Solver(EntropyStrategy(), FIVE, FIVE)
    history = [(Word("zzzzz"), Pattern.PERFECT)]
    assert solver.count_candidates(history) == 0
    assert solver.next_guess(history) is None


def test_next_guess_is_a_pool_word():
    solver = Solver(create_strategy("adaptive", seed=1), FIVE, FIVE)
    history = [(Word("crane"), Pattern.from_str("-GG-G"))]
    assert solver.next_guess(history) in FIVE


@pytest.mark.parametrize("answer", [w.text for w in FIVE])
def test_candidate_counts_never_grow(answer):
    solver = Solver(create_strategy("entropy"), FIVE, FIVE)
    target = Word(answer)
    history = []
    before = solver.count_candidates(history)
    for _ in range(6):
        guess = solver.next_guess(history)
        pattern = Pattern.calculate(guess, target)
        history.append((guess, pattern))
        after = solver.count_candidates(history)
        assert after <= before
        assert target in solver.get_candidates(history)
        before = after
        if pattern.is_perfect():
            break
    assert history[-1][1].is_perfect()


def test_solver_keeps_pools_immutable():
    pool = list(FIVE)
    solver = Solver(EntropyStrategy(), pool, pool)
    pool.append(Word("tenth"))
    assert len(solver.guess_pool) == 5
    assert isinstance(solver.answer_pool, tuple)
