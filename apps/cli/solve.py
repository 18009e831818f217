# apps/cli/solve.py
"""
Solve one known target word and print the path the solver takes.

    python -m apps.cli.solve crane
    python -m apps.cli.solve crane --strategy minimax --show-steps
"""

from __future__ import annotations

import argparse

from wordle_solver.harness import NoCandidatesError, solve_word

from apps.cli._common import (
    add_strategy_args,
    add_wordlist_args,
    build_solver,
    load_pools_or_exit,
    parse_word_or_exit,
    setup_logging,
)


def main():
    ap = argparse.ArgumentParser(description="wordle-solver: solve a specific word")
    ap.add_argument("word", help="target word")
    ap.add_argument("--show-steps", action="store_true",
                    help="print candidate counts and entropy for every guess")
    add_wordlist_args(ap)
    add_strategy_args(ap)
    args = ap.parse_args()
    setup_logging(args.verbose)

    target = parse_word_or_exit(args.word)
    guesses, answers = load_pools_or_exit(args)
    solver = build_solver(args, guesses, answers)

    try:
        with solver:
            result = solve_word(solver, target)
    except NoCandidatesError as e:
        raise SystemExit(f"Could not solve {target}: {e} (is it in the answer list?)")

    print(f"Solving: {target.text.upper()}")
    for i, step in enumerate(result.guesses, 1):
        line = f"  {i}. {step.word.upper()}  {step.pattern.to_emoji()}"
        if args.show_steps:
            line += f"  {step.candidates_before} -> {step.candidates_after}"
            if step.entropy is not None:
                line += f"  ({step.entropy:.2f} bits, ~{step.expected_remaining:.1f} expected)"
        print(line)

    if result.success:
        print(f"Solved in {result.num_guesses}/6")
    else:
        print("Failed to solve in 6 guesses")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
