# apps/cli/analyze.py
"""
Show how much information a single guess carries against the answer pool.

    python -m apps.cli.analyze salet
"""

from __future__ import annotations

import argparse

from wordle_solver.engine import calculate_max_remaining
from wordle_solver.harness import analyze_word

from apps.cli._common import add_wordlist_args, load_pools_or_exit, parse_word_or_exit, setup_logging


def main():
    ap = argparse.ArgumentParser(description="wordle-solver: analyze a guess")
    ap.add_argument("word", help="word to analyze (must be in the guess pool)")
    add_wordlist_args(ap)
    args = ap.parse_args()
    setup_logging(args.verbose)

    word = parse_word_or_exit(args.word)
    guesses, answers = load_pools_or_exit(args)

    try:
        result = analyze_word(word, guesses, answers)
    except ValueError as e:
        raise SystemExit(str(e))

    print(f"Analysis: {result.word.upper()}")
    print(f"  Entropy:             {result.entropy:.3f} bits")
    print(f"  Expected reduction:  {result.expected_reduction:.1f}x")
    print(f"  Expected remaining:  {result.expected_remaining:.1f} / {result.total_candidates}")
    print(f"  Worst case:          {calculate_max_remaining(word, answers)}")


if __name__ == "__main__":
    main()
