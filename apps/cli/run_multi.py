# apps/cli/run_multi.py
"""
Run multiple strategies in one shot on the same answers, with progress.

Writes per-strategy outputs to: <outdir>/<strategy_id>/run_<timestamp>.csv + _manifest.json
and prints a one-line comparison per strategy at the end.
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Tuple

from wordle_solver.datasets import validate_wordlists, pretty_summary
from wordle_solver.harness import run_test_all, PROGRESS_MODES
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_solver.solvers import REGISTRY, get_strategy_ids

from apps.cli._common import (
    add_strategy_args,
    add_wordlist_args,
    build_solver,
    guess_list_path,
    load_pools_or_exit,
    setup_logging,
)


def _canonical_ids() -> List[str]:
    """Registered ids without aliases (one entry per strategy class)."""
    return sorted({cls.id for cls in REGISTRY.values()})


def _run_one(args, strategy_id: str, guesses, answers, *, outdir: Path, rep) -> Tuple[str, float, int]:
    args.strategy = strategy_id
    solver = build_solver(args, guesses, answers)
    if args.progress != "off":
        print(f"\n=== Running {strategy_id} on {min(len(answers), args.limit or len(answers))} words ===")

    with solver:
        stats = run_test_all(solver, answers, limit=args.limit, seed=args.seed,
                             progress=args.progress, desc=strategy_id)

    # write outputs under <outdir>/<strategy_id>/
    run_id = timestamp_id()
    sdir = outdir / strategy_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(stats.results, str(csv_path), strategy_id=solver.strategy.id)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {**vars(args), "strategy": strategy_id},
        "wordlists": rep,
        "num_cases": stats.total_words,
        "strategy_id": solver.strategy.id,
        "summary": {
            "solved": stats.solved,
            "failed": stats.failed,
            "average_guesses": stats.average_guesses,
            "distribution": stats.guess_distribution,
        },
    }
    write_manifest(manifest, str(manifest_path))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return strategy_id, stats.average_guesses, stats.failed


def main():
    registered = get_strategy_ids()
    ap = argparse.ArgumentParser(description="wordle-solver: run many strategies at once")
    ap.add_argument("--strategies", nargs="+", required=True,
                    help=f"list of strategy ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="strategy ids to skip (only if --strategies ALL)")
    add_wordlist_args(ap)
    add_strategy_args(ap)
    ap.add_argument("--limit", type=int)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=PROGRESS_MODES, default="auto")
    args = ap.parse_args()
    setup_logging(args.verbose)

    # 1) validate once
    rep = validate_wordlists(args.answers, guess_list_path(args))
    print(pretty_summary(rep))

    # 2) load pools once
    guesses, answers = load_pools_or_exit(args)

    # 3) expand strategies
    if len(args.strategies) == 1 and args.strategies[0].lower() == "all":
        todo = [s for s in _canonical_ids() if s not in set(args.exclude)]
    else:
        todo = args.strategies
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown strategy ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) run each strategy sequentially on the shared answers
    summary = [_run_one(args, sid, guesses, answers, outdir=outdir, rep=rep) for sid in todo]

    print("\nstrategy            avg     failed")
    for sid, avg, failed in sorted(summary, key=lambda x: (x[2], x[1])):
        print(f"{sid:<18} {avg:6.3f}  {failed:6d}")


if __name__ == "__main__":
    main()
