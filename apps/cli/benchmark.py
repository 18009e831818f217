# apps/cli/benchmark.py
"""
Quick performance check: play a random sample of answers and report the
guess distribution and throughput (no per-word output, no files).

    python -m apps.cli.benchmark -n 200 --seed 7
"""

from __future__ import annotations

import argparse
import random

from wordle_solver.harness import run_benchmark

from apps.cli._common import (
    add_strategy_args,
    add_wordlist_args,
    build_solver,
    load_pools_or_exit,
    parse_word_or_exit,
    print_distribution,
    setup_logging,
)


def main():
    ap = argparse.ArgumentParser(description="wordle-solver: benchmark a strategy")
    ap.add_argument("-n", "--count", type=int, default=100,
                    help="number of answers to sample (deterministic by --seed)")
    ap.add_argument("--force-first", help="play this word on turn one regardless of strategy")
    add_wordlist_args(ap)
    add_strategy_args(ap)
    args = ap.parse_args()
    setup_logging(args.verbose)

    guesses, answers = load_pools_or_exit(args)
    forced = parse_word_or_exit(args.force_first) if args.force_first else None
    solver = build_solver(args, guesses, answers)

    rng = random.Random(args.seed)
    if 0 < args.count < len(answers):
        targets = rng.sample(list(answers), args.count)
    else:
        targets = list(answers)

    print(f"Benchmarking {solver.strategy!r} on {len(targets)} words...")
    with solver:
        result = run_benchmark(solver, targets, forced_first=forced)

    print(f"  Average guesses: {result.average_guesses:.3f}")
    print(f"  Min / max:       {result.min_guesses} / {result.max_guesses}")
    print(f"  Duration:        {result.duration:.2f}s ({result.words_per_second:.1f} words/s)")
    print_distribution(result.distribution, result.total_words)


if __name__ == "__main__":
    main()
