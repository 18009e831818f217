"""
Experiment harness core primitives.

- solve_word:    play one game against a known target and record every step.
- run_benchmark: play many games, keep only aggregate numbers (fast path).
- run_test_all:  play every answer (or a prefix), keep per-word results and
                 summary statistics, with a live progress indicator.
- analyze_word:  information content of a single guess against a pool.
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from wordle_solver.engine import Pattern, Word, calculate_entropy

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

PROGRESS_MODES = ("auto", "bar", "plain", "off")


class NoCandidatesError(RuntimeError):
    """The solver ran out of candidates before finding the target."""


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with more than 6 turns."""
    if not 1 <= max_turns <= WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be in 1..{WORDLE_MAX_TURNS}; got {max_turns}")


def _as_word(word: Union[str, Word]) -> Word:
    return word if isinstance(word, Word) else Word(word)


# -----------------------------
# solve
# -----------------------------

@dataclass
class GuessStep:
    word: str
    pattern: Pattern
    candidates_before: int
    candidates_after: int
    entropy: Optional[float] = None             # only when >1 candidate remained
    expected_remaining: Optional[float] = None  # candidates_before / 2**entropy


@dataclass
class SolveResult:
    target: str
    success: bool
    guesses: List[GuessStep] = field(default_factory=list)

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)


def solve_word(solver, target: Union[str, Word], *, max_turns: int = WORDLE_MAX_TURNS) -> SolveResult:
    """
    Play one game against `target` and record every step.

    Raises:
        WordError:          target is not a valid word
        NoCandidatesError:  the solver had nothing left to guess (typically the
                            target is not in the solver's answer pool)
    """
    _assert_wordle_turns(max_turns)
    target_word = _as_word(target)

    history: List[Tuple[Word, Pattern]] = []
    steps: List[GuessStep] = []

    for _ in range(max_turns):
        before = solver.count_candidates(history)
        guess = solver.next_guess(history)
        if guess is None:
            raise NoCandidatesError(
                f"no candidates remaining for {target_word} after {len(history)} guess(es)")

        entropy = expected = None
        if before > 1:
            entropy = calculate_entropy(guess, solver.get_candidates(history))
            expected = before / 2.0 ** entropy

        pattern = Pattern.calculate(guess, target_word)
        history.append((guess, pattern))
        steps.append(GuessStep(
            word=guess.text,
            pattern=pattern,
            candidates_before=before,
            candidates_after=solver.count_candidates(history),
            entropy=entropy,
            expected_remaining=expected,
        ))

        if pattern.is_perfect():
            return SolveResult(target=target_word.text, success=True, guesses=steps)

    return SolveResult(target=target_word.text, success=False, guesses=steps)


def _play(solver, target: Word, forced_first: Optional[Word]) -> Tuple[List[Word], List[Pattern]]:
    """
    Play up to 6 turns. Returns the guesses made and their patterns; the game
    was won iff the last pattern is perfect.
    """
    history: List[Tuple[Word, Pattern]] = []
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        if turn == 1 and forced_first is not None:
            guess = forced_first
        else:
            guess = solver.next_guess(history)
            if guess is None:
                log.warning("%s: no candidates remaining after %d guess(es)", target, len(history))
                break
        pattern = Pattern.calculate(guess, target)
        history.append((guess, pattern))
        if pattern.is_perfect():
            break
    return [g for g, _ in history], [p for _, p in history]


# -----------------------------
# benchmark
# -----------------------------

@dataclass
class BenchmarkResult:
    total_words: int
    total_guesses: int
    average_guesses: float
    min_guesses: int
    max_guesses: int
    distribution: Dict[int, int]
    duration: float            # seconds
    words_per_second: float


def run_benchmark(solver, targets: Sequence[Word], forced_first: Union[str, Word, None] = None) -> BenchmarkResult:
    """
    Play every target and aggregate guess counts.

    A lost game counts with the number of guesses actually made (6 when the
    budget ran out). An empty target list yields an all-zero result.
    """
    forced = _as_word(forced_first) if forced_first is not None else None
    distribution: Counter = Counter()
    t0 = time.perf_counter()

    for target in targets:
        guesses, _ = _play(solver, _as_word(target), forced)
        distribution[len(guesses)] += 1

    duration = time.perf_counter() - t0
    total_words = len(targets)
    total_guesses = sum(n * c for n, c in distribution.items())

    return BenchmarkResult(
        total_words=total_words,
        total_guesses=total_guesses,
        average_guesses=total_guesses / total_words if total_words else 0.0,
        min_guesses=min(distribution) if distribution else 0,
        max_guesses=max(distribution) if distribution else 0,
        distribution=dict(sorted(distribution.items())),
        duration=duration,
        words_per_second=total_words / duration if duration > 0 else 0.0,
    )


# -----------------------------
# test-all
# -----------------------------

@dataclass
class WordTestResult:
    word: str
    guesses: List[str]
    patterns: List[Pattern]
    success: bool
    time_ms: float

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)


@dataclass
class TestAllStatistics:
    total_words: int
    solved: int
    failed: int
    guess_distribution: Dict[int, int]   # solved games only
    total_time: float                    # seconds
    average_guesses: float               # over solved games
    min_guesses: int
    max_guesses: int
    best_word: Optional[Tuple[str, int]]
    worst_words: List[Tuple[str, int]]   # up to 10 solved words needing 5+ guesses
    first_guess_used: Dict[str, int]
    results: List[WordTestResult] = field(default_factory=list)

    __test__ = False  # keep pytest from collecting this as a test class


def _progress_mode(mode: str) -> str:
    if mode not in PROGRESS_MODES:
        raise ValueError(f"progress must be one of {PROGRESS_MODES}; got {mode!r}")
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def run_test_all(
        solver,
        answers: Sequence[Word],
        *,
        limit: int | None = None,
        forced_first: Union[str, Word, None] = None,
        seed: int | None = None,
        progress: str = "off",
        desc: str = "Testing",
) -> TestAllStatistics:
    """
    Play every answer (or the first `limit`) and collect statistics.

    If `seed` is given the strategy is reseeded per game (seed + index) so a
    single word can be replayed in isolation with the same random choices.

    progress:
      "bar"   : tqdm bar on stderr with a running average
      "plain" : one carriage-return status line on stderr, at most once a second
      "off"   : silent
      "auto"  : bar on a TTY, plain otherwise
    """
    mode = _progress_mode(progress)
    forced = _as_word(forced_first) if forced_first is not None else None
    cases = list(answers if limit is None else answers[:limit])
    total = len(cases)

    results: List[WordTestResult] = []
    first_guess_used: Counter = Counter()

    bar = tqdm(total=total, ncols=80, desc=desc, unit="word") if mode == "bar" else None
    start = time.time()
    last_print = 0.0

    for idx, answer in enumerate(cases, 1):
        if seed is not None:
            solver.strategy.reset(seed + idx)

        t0 = time.perf_counter_ns()
        guesses, patterns = _play(solver, answer, forced)
        elapsed_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

        success = bool(patterns) and patterns[-1].is_perfect()
        if guesses:
            first_guess_used[guesses[0].text] += 1
        results.append(WordTestResult(
            word=answer.text,
            guesses=[g.text for g in guesses],
            patterns=patterns,
            success=success,
            time_ms=elapsed_ms,
        ))

        if bar is not None:
            bar.update(1)
            if idx % 10 == 0:
                avg = sum(r.num_guesses for r in results) / len(results)
                bar.set_postfix_str(f"avg {avg:.2f}")
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if bar is not None:
        bar.close()
    elif mode == "plain" and total:
        sys.stderr.write("\n")
        sys.stderr.flush()

    total_time = time.time() - start
    return _summarize(results, first_guess_used, total_time)


def _summarize(results: List[WordTestResult], first_guess_used: Counter,
               total_time: float) -> TestAllStatistics:
    solved = [r for r in results if r.success]
    counts = [r.num_guesses for r in solved]

    best_word = None
    for r in solved:
        if best_word is None or r.num_guesses < best_word[1]:
            best_word = (r.word, r.num_guesses)

    # Stable sort keeps answer order among equal guess counts
    worst = sorted(((r.word, r.num_guesses) for r in solved if r.num_guesses >= 5),
                   key=lambda x: x[1], reverse=True)[:10]

    return TestAllStatistics(
        total_words=len(results),
        solved=len(solved),
        failed=len(results) - len(solved),
        guess_distribution=dict(sorted(Counter(counts).items())),
        total_time=total_time,
        average_guesses=sum(counts) / len(counts) if counts else 0.0,
        min_guesses=min(counts) if counts else 0,
        max_guesses=max(counts) if counts else 0,
        best_word=best_word,
        worst_words=worst,
        first_guess_used=dict(first_guess_used.most_common()),
        results=results,
    )


# -----------------------------
# analyze
# -----------------------------

@dataclass
class AnalysisResult:
    word: str
    entropy: float
    expected_reduction: float   # 2**entropy
    expected_remaining: float   # total_candidates / expected_reduction
    total_candidates: int


def analyze_word(word: Union[str, Word], guess_pool: Sequence[Word],
                 candidates: Sequence[Word]) -> AnalysisResult:
    """
    Entropy of `word` against `candidates`.

    Raises:
        WordError:  `word` is not a valid word
        ValueError: `word` is not in `guess_pool`
    """
    w = _as_word(word)
    if w not in set(guess_pool):
        raise ValueError(f"word {w.text!r} not in word list")

    entropy = calculate_entropy(w, candidates)
    reduction = 2.0 ** entropy
    total = len(candidates)
    return AnalysisResult(
        word=w.text,
        entropy=entropy,
        expected_reduction=reduction,
        expected_remaining=total / reduction,
        total_candidates=total,
    )
