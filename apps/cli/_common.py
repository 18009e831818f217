# apps/cli/_common.py
"""
Shared argparse flags and setup for the CLI scripts.

Every script takes the same word-list and strategy flags, so they live here:
  add_wordlist_args / add_strategy_args -> argparse groups
  setup_logging                         -> -v / -vv to INFO / DEBUG
  guess_list_path                       -> the list --wordlist draws guesses from
  load_pools_or_exit                    -> (guess_pool, answer_pool) or SystemExit
  build_solver                          -> Solver wired from the parsed args
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Tuple

from wordle_solver.datasets import (
    DEFAULT_ALLOWED,
    DEFAULT_ANSWERS,
    MODE_ALL,
    MODE_ANSWERS,
    load_pools,
)
from wordle_solver.engine import Word, WordError
from wordle_solver.harness import TestAllStatistics, WORDLE_MAX_TURNS
from wordle_solver.solvers import (
    DEFAULT_OPENING,
    DEFAULT_STRATEGY,
    REGISTRY,
    AdaptiveStrategy,
    HybridStrategy,
    Solver,
    create_strategy,
    get_strategy_ids,
)

log = logging.getLogger(__name__)


def add_wordlist_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS),
                    help="path to answers list (ground-truth pool)")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED),
                    help="path to allowed guesses (should be a superset of answers)")
    ap.add_argument("--wordlist", default=MODE_ALL,
                    help=f"guess pool: '{MODE_ALL}' (allowed list), '{MODE_ANSWERS}' "
                         f"(answers only) or a path to a custom list")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for INFO logging, -vv for DEBUG")


def add_strategy_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("strategy")
    g.add_argument("--strategy", default=DEFAULT_STRATEGY,
                   help=f"strategy id (one of: {', '.join(get_strategy_ids())})")
    g.add_argument("--first-word", default=DEFAULT_OPENING,
                   help="fixed opening word; 'none' lets the strategy choose turn one")
    g.add_argument("--workers", type=int, default=None,
                   help="processes for scoring large guess pools (default: in-process)")
    g.add_argument("--seed", type=int, default=None,
                   help="RNG seed for the random endgame choice")

    d = AdaptiveStrategy.DEFAULT_THRESHOLDS
    g.add_argument("--pure-entropy-threshold", type=int, default=d[0])
    g.add_argument("--entropy-minimax-threshold", type=int, default=d[1])
    g.add_argument("--hybrid-threshold", type=int, default=d[2])
    g.add_argument("--minimax-first-threshold", type=int, default=d[3])
    g.add_argument("--epsilon", type=float, default=AdaptiveStrategy.DEFAULT_EPSILON,
                   help="minimax-first entropy tolerance (bits)")
    g.add_argument("--minimax-threshold", type=int, default=HybridStrategy.DEFAULT_MINIMAX_THRESHOLD,
                   help="hybrid strategy: switch to minimax at or below this many candidates")


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def guess_list_path(args) -> str:
    """Path of the list the guess pool comes from under --wordlist."""
    if args.wordlist == MODE_ALL:
        return args.allowed
    if args.wordlist == MODE_ANSWERS:
        return args.answers
    return args.wordlist


def load_pools_or_exit(args) -> Tuple[Tuple[Word, ...], Tuple[Word, ...]]:
    try:
        guesses, answers = load_pools(args.answers, args.allowed, args.wordlist)
    except FileNotFoundError as e:
        raise SystemExit(f"Word list not found: {e}")
    if not guesses:
        raise SystemExit("Guess pool is empty; check --allowed / --wordlist.")
    if not answers:
        raise SystemExit("Answer pool is empty; check --answers.")
    return guesses, answers


def strategy_kwargs(args) -> Dict:
    """Constructor kwargs for the strategy `args.strategy` resolves to."""
    kwargs: Dict = {"workers": args.workers, "seed": args.seed}
    cls = REGISTRY.get(args.strategy, REGISTRY[DEFAULT_STRATEGY])
    if issubclass(cls, AdaptiveStrategy):
        kwargs.update(
            pure_entropy_threshold=args.pure_entropy_threshold,
            entropy_minimax_threshold=args.entropy_minimax_threshold,
            hybrid_threshold=args.hybrid_threshold,
            minimax_first_threshold=args.minimax_first_threshold,
            minimax_epsilon=args.epsilon,
        )
    elif issubclass(cls, HybridStrategy):
        kwargs["minimax_threshold"] = args.minimax_threshold
    return kwargs


def build_solver(args, guesses, answers) -> Solver:
    try:
        strategy = create_strategy(args.strategy, **strategy_kwargs(args))
    except ValueError as e:
        raise SystemExit(f"Bad strategy settings: {e}")
    opening = None if args.first_word.lower() == "none" else args.first_word.lower()
    solver = Solver(strategy, guesses, answers, opening=opening)
    if opening and solver.opening_word is None:
        log.warning("opening %r is not in the guess pool; the strategy will choose turn one",
                    opening)
    return solver


def parse_word_or_exit(text: str) -> Word:
    try:
        return Word(text)
    except WordError as e:
        raise SystemExit(f"Invalid word {text!r}: {e}")


def print_test_all(stats: TestAllStatistics) -> None:
    """Console report for a test-all run."""
    total = max(1, stats.total_words)
    print("=" * 60)
    print(" Test Results")
    print("=" * 60)
    print(f"  Total words tested:  {stats.total_words}")
    print(f"  Successfully solved: {stats.solved} ({100.0 * stats.solved / total:.1f}%)")
    if stats.failed:
        print(f"  Failed to solve:     {stats.failed} ({100.0 * stats.failed / total:.1f}%)")
    print(f"  Average guesses:     {stats.average_guesses:.3f}")
    print(f"  Total time:          {stats.total_time:.2f}s")
    print(f"  Time per word:       {1000.0 * stats.total_time / total:.1f}ms")

    print("\n  Guess distribution")
    print_distribution(stats.guess_distribution, stats.solved)

    if stats.best_word:
        print(f"\n  Best:  {stats.best_word[0]} ({stats.best_word[1]})")
    if stats.worst_words:
        print("  Hardest: " + ", ".join(f"{w} ({n})" for w, n in stats.worst_words))
    if stats.first_guess_used:
        print("  First guesses: " + ", ".join(
            f"{w} x{n}" for w, n in list(stats.first_guess_used.items())[:5]))


def print_distribution(distribution: Dict[int, int], denominator: int, width: int = 40) -> None:
    peak = max(distribution.values(), default=0)
    for n in range(1, WORDLE_MAX_TURNS + 1):
        count = distribution.get(n, 0)
        pct = 100.0 * count / denominator if denominator else 0.0
        bar_len = (count * width // peak) if peak else 0
        if count and not bar_len:
            bar_len = 1
        print(f"  {n}: {'#' * bar_len:<{width}} {count:5d} ({pct:5.1f}%)")
