# apps/cli/run.py
"""
CLI entry point for testing a strategy on every answer.

This script:
  1) Validates the answer list and the guess list in use (counts + SHA, answers ⊆ guesses).
  2) Loads the pools and builds a Solver for the requested strategy.
  3) Plays every answer (or the first --limit) with a live progress indicator,
     prints the statistics and writes:
       - CSV:  per-word results + guess/pattern history columns
       - JSON: manifest with config, wordlist hashes, git commit, summary
"""

from __future__ import annotations

import argparse
from pathlib import Path

from wordle_solver.datasets import validate_wordlists, pretty_summary
from wordle_solver.harness import run_test_all, PROGRESS_MODES
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

from apps.cli._common import (
    add_strategy_args,
    add_wordlist_args,
    build_solver,
    guess_list_path,
    load_pools_or_exit,
    parse_word_or_exit,
    print_test_all,
    setup_logging,
)


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-solver: test a strategy on every answer")
    add_wordlist_args(ap)
    add_strategy_args(ap)
    ap.add_argument("--limit", type=int, help="test only the first N answers")
    ap.add_argument("--force-first", help="play this word on turn one regardless of strategy")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-write", action="store_true", help="print statistics only")
    ap.add_argument(
        "--progress",
        choices=PROGRESS_MODES,
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()
    setup_logging(args.verbose)

    # 1) Validate wordlists and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_wordlists(args.answers, guess_list_path(args))
    print(pretty_summary(rep))

    # 2) Load pools (cached, invalid lines skipped)
    guesses, answers = load_pools_or_exit(args)
    forced = parse_word_or_exit(args.force_first) if args.force_first else None

    # 3) Build the solver
    solver = build_solver(args, guesses, answers)
    print(f"Strategy: {solver.strategy!r} | guesses={len(guesses)} answers={len(answers)}")

    # 4) Play
    with solver:
        stats = run_test_all(solver, answers, limit=args.limit, forced_first=forced,
                             seed=args.seed, progress=args.progress, desc=args.strategy)
    print_test_all(stats)

    if args.no_write:
        return

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(stats.results, str(csv_path), strategy_id=solver.strategy.id)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": stats.total_words,
        "strategy_id": solver.strategy.id,
        "summary": {
            "solved": stats.solved,
            "failed": stats.failed,
            "average_guesses": stats.average_guesses,
            "distribution": stats.guess_distribution,
            "first_guess_used": stats.first_guess_used,
        },
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
