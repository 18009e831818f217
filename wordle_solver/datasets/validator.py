"""
Word-list validator.

What this module does:
- Validate a pair of word lists: the answer pool (legal targets) and the
  allowed list (legal guesses).
- Enforce the Word format (exactly 5 ASCII letters a-z, one per line) and
  break invalid lines down by reason (length, non-ASCII, other characters,
  blank).
- Detect duplicates; compute SHA-256 of the raw files.
- Check that answers ⊆ allowed.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Loaders skip bad lines instead of failing; this report is how you find out
that they did.

Typical use:
    from wordle_solver.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/answers.txt", "data/allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Set, Tuple
import hashlib

from wordle_solver.engine import Word, WordError, InvalidLength, NonAscii


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    invalid_reasons: Dict[str, int] = field(default_factory=dict)


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, allowed) pair."""
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _reason(err: WordError) -> str:
    if isinstance(err, InvalidLength):
        return "length"
    if isinstance(err, NonAscii):
        return "non_ascii"
    return "characters"


def _load_and_check(path: Path) -> Tuple[List[str], Counter]:
    """
    Load words from a text file and validate each line as a Word.

    Lines must already be lowercase: "CRANE" is a valid Word but is counted
    here as a formatting problem ("case").

    Returns:
      (valid_words, invalid_reason_counts)
    """
    valid: List[str] = []
    reasons: Counter = Counter()

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                reasons["blank"] += 1
                continue
            try:
                word = Word(w)
            except WordError as e:
                reasons[_reason(e)] += 1
                continue
            if word.text != w:
                reasons["case"] += 1
                continue
            valid.append(word.text)

    return valid, reasons


def _file_report(path: Path, words: List[str], reasons: Counter) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=sum(reasons.values()),
        invalid_reasons=dict(sorted(reasons.items())),
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str | Path, allowed_path: str | Path) -> Dict:
    """
    Validate the answer/allowed word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, invalid-line breakdown, duplicate flags
          - answers ⊆ allowed check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    all_p = Path(allowed_path)

    # Early return if either file is missing
    if not ans_p.exists() or not all_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not all_p.exists():
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            answers=FileReport(str(ans_p), ans_p.exists(), 0, "", 0, 0),
            allowed=FileReport(str(all_p), all_p.exists(), 0, "", 0, 0),
            answers_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    answers, ans_reasons = _load_and_check(ans_p)
    allowed, all_reasons = _load_and_check(all_p)
    ans_report = _file_report(ans_p, answers, ans_reasons)
    all_report = _file_report(all_p, allowed, all_reasons)

    answers_set: Set[str] = set(answers)
    allowed_set: Set[str] = set(allowed)

    subset_ok = answers_set.issubset(allowed_set)
    if not subset_ok:
        # Surface a few examples to debug quickly (sorted for stable output)
        missing = sorted(answers_set - allowed_set)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    for label, rep in (("answers", ans_report), ("allowed", all_report)):
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            detail = ", ".join(f"{k}={v}" for k, v in rep.invalid_reasons.items())
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s) ({detail})")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    passed = (
            subset_ok
            and ans_report.invalid_lines == 0
            and all_report.invalid_lines == 0
            and ans_report.count > 0
            and all_report.count > 0
    )

    rep = ValidationReport(
        answers=ans_report,
        allowed=all_report,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    subset = report["answers_subset_allowed"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆allowed={subset} | {status}"
    )
