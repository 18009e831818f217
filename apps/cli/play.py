# apps/cli/play.py
"""
Interactive assistant for a live game.

Each turn prints the suggested guess; type the feedback you got back:
  G/Y/- letters ("GY--G"), "_" for gray, or emoji squares.

Commands:
  use WORD  you played WORD instead of the suggestion (must be in the guess list)
  undo      drop the last recorded turn
  win       mark the game solved and start a new one
  new       start a new game
  quit      exit (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
from typing import FrozenSet, List, Optional, Tuple

from wordle_solver.engine import Pattern, PatternParseError, Word, parse_guess
from wordle_solver.harness import WORDLE_MAX_TURNS
from wordle_solver.solvers import Solver

from apps.cli._common import (
    add_strategy_args,
    add_wordlist_args,
    build_solver,
    load_pools_or_exit,
    setup_logging,
)

SHOW_CANDIDATES = 10


def _prompt(text: str) -> Optional[str]:
    try:
        return input(text)
    except EOFError:
        return None


def _show_candidates(candidates: List[Word]) -> None:
    if len(candidates) <= SHOW_CANDIDATES:
        print("  candidates: " + " ".join(w.text for w in candidates))


def _play(solver: Solver, allowed: FrozenSet[Word]) -> None:
    history: List[Tuple[Word, Pattern]] = []
    played: Optional[Word] = None

    while True:
        turn = len(history) + 1
        candidates = solver.get_candidates(history)
        suggestion = solver.next_guess(history)

        if suggestion is None:
            print("No words match that feedback. 'undo' the last turn or start 'new'.")
        elif played is None:
            print(f"\nTurn {turn}: try {suggestion.text.upper()}  ({len(candidates)} candidates)")
            _show_candidates(candidates)
        else:
            print(f"\nTurn {turn}: playing {played.text.upper()}")

        line = _prompt("> ")
        if line is None:
            print()
            return
        line = line.strip()
        cmd = line.lower()

        if cmd in ("quit", "exit", "q"):
            return
        if cmd in ("new", "win"):
            if cmd == "win":
                print(f"Solved in {turn}.")
            history, played = [], None
            continue
        if cmd == "undo":
            if played is not None:
                played = None
            elif history:
                history.pop()
            else:
                print("Nothing to undo.")
            continue
        if cmd.startswith("use "):
            word = parse_guess(line[4:], allowed)
            if word is None:
                print(f"Not an allowed guess: {line[4:].strip()}")
            else:
                played = word
            continue
        if not line:
            continue

        try:
            pattern = Pattern.from_str(line)
        except PatternParseError:
            print("Expected 5 feedback symbols (G/Y/-, emoji), or a command.")
            continue

        word = played or suggestion
        if word is None:
            print("No guess to score; 'use WORD' first.")
            continue
        history.append((word, pattern))
        played = None

        if pattern.is_perfect():
            print(f"Solved in {len(history)}!")
            history = []
        elif len(history) >= WORDLE_MAX_TURNS:
            print(f"Out of turns. {solver.count_candidates(history)} candidate(s) were left.")
            history = []


def main():
    ap = argparse.ArgumentParser(description="wordle-solver: interactive assistant")
    add_wordlist_args(ap)
    add_strategy_args(ap)
    args = ap.parse_args()
    setup_logging(args.verbose)

    guesses, answers = load_pools_or_exit(args)
    allowed = frozenset(guesses)
    print(__doc__)
    with build_solver(args, guesses, answers) as solver:
        _play(solver, allowed)


if __name__ == "__main__":
    main()
