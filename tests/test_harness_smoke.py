import pytest
from wordle_solver.engine import Pattern, Word, WordError
from wordle_solver.solvers import Solver, create_strategy
from wordle_solver.harness import (
    NoCandidatesError,
    analyze_word,
    run_benchmark,
    run_test_all,
    solve_word,
)
from wordle_solver.harness.core import _assert_wordle_turns


def _words(*texts):
    return [Word(t) for t in texts]


ANSWERS = _words("crane", "raise", "stare", "trace", "cared", "adieu", "alone")
ALLOWED = ANSWERS + _words("slate", "salet", "roate")


def _solver(sid="entropy", **kwargs):
    return Solver(create_strategy(sid, **kwargs), ALLOWED, ANSWERS)


def test_solve_word_smoke():
    r = solve_word(_solver(), "crane")
    assert r.success is True
    assert r.target == "crane"
    assert r.guesses[0].word == "salet"
    assert r.guesses[-1].pattern == Pattern.PERFECT
    assert 1 <= r.num_guesses <= 6


def test_solve_word_records_steps():
    r = solve_word(_solver("adaptive", seed=7), "trace")
    for step in r.guesses:
        assert step.candidates_after <= step.candidates_before
        if step.candidates_before > 1:
            assert step.entropy is not None
            assert step.expected_remaining == pytest.approx(
                step.candidates_before / 2 ** step.entropy)
        else:
            assert step.entropy is None and step.expected_remaining is None


def test_solve_word_respects_max_turns():
    r = solve_word(_solver(), "alone", max_turns=1)
    assert r.num_guesses == 1
    assert r.success is False  # turn one is always salet


def test_solve_word_target_outside_answers():
    with pytest.raises(NoCandidatesError):
        solve_word(_solver(), "zzzzz")


def test_solve_word_invalid_target():
    with pytest.raises(WordError):
        solve_word(_solver(), "toolong")


@pytest.mark.parametrize("turns", [0, 7, 10])
def test_turn_guard(turns):
    with pytest.raises(ValueError):
        _assert_wordle_turns(turns)
    with pytest.raises(ValueError):
        solve_word(_solver(), "crane", max_turns=turns)


def test_benchmark_totals():
    result = run_benchmark(_solver(), ANSWERS)
    assert result.total_words == len(ANSWERS)
    assert sum(result.distribution.values()) == len(ANSWERS)
    assert result.total_guesses == sum(n * c for n, c in result.distribution.items())
    assert 1 <= result.min_guesses <= result.average_guesses <= result.max_guesses <= 6


def test_benchmark_forced_first():
    result = run_benchmark(_solver(), ANSWERS[:3], forced_first="roate")
    assert result.total_words == 3
    assert result.min_guesses >= 1


def test_benchmark_empty():
    result = run_benchmark(_solver(), [])
    assert (result.total_words, result.total_guesses, result.average_guesses) == (0, 0, 0.0)
    assert result.distribution == {}


def test_test_all_statistics():
    stats = run_test_all(_solver("adaptive"), ANSWERS, seed=11)
    assert stats.total_words == len(ANSWERS)
    assert stats.solved + stats.failed == stats.total_words
    assert stats.solved == len(ANSWERS)
    assert sum(stats.guess_distribution.values()) == stats.solved
    assert stats.first_guess_used == {"salet": len(ANSWERS)}
    assert stats.best_word is not None
    assert all(n >= 5 for _, n in stats.worst_words)
    assert [r.word for r in stats.results] == [w.text for w in ANSWERS]


def test_test_all_limit_and_forced_first():
    stats = run_test_all(_solver(), ANSWERS, limit=3, forced_first=Word("crane"))
    assert stats.total_words == 3
    assert stats.first_guess_used == {"crane": 3}
    assert stats.results[0].num_guesses == 1


def test_test_all_is_reproducible_with_seed():
    a = run_test_all(_solver("random"), ANSWERS, seed=3)
    b = run_test_all(_solver("random"), ANSWERS, seed=3)
    assert [r.guesses for r in a.results] == [r.guesses for r in b.results]


def test_test_all_plain_progress(capsys):
    run_test_all(_solver(), ANSWERS[:2], progress="plain")
    assert "[2/2]" in capsys.readouterr().err


def test_test_all_bad_progress_mode():
    with pytest.raises(ValueError):
        run_test_all(_solver(), ANSWERS, progress="loud")


def test_analyze_word():
    r = analyze_word("crane", ALLOWED, ANSWERS)
    assert r.word == "crane"
    assert r.total_candidates == len(ANSWERS)
    assert r.entropy > 0.0
    assert r.expected_reduction == pytest.approx(2 ** r.entropy)
    assert r.expected_remaining == pytest.approx(len(ANSWERS) / r.expected_reduction)


def test_analyze_word_not_in_pool():
    with pytest.raises(ValueError):
        analyze_word("zzzzz", ALLOWED, ANSWERS)
