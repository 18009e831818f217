from .core import (
    PROGRESS_MODES,
    WORDLE_MAX_TURNS,
    AnalysisResult,
    BenchmarkResult,
    GuessStep,
    NoCandidatesError,
    SolveResult,
    TestAllStatistics,
    WordTestResult,
    analyze_word,
    run_benchmark,
    run_test_all,
    solve_word,
)
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = [
    "PROGRESS_MODES", "WORDLE_MAX_TURNS", "AnalysisResult", "BenchmarkResult", "GuessStep",
    "NoCandidatesError", "SolveResult", "TestAllStatistics", "WordTestResult",
    "analyze_word", "run_benchmark", "run_test_all", "solve_word",
    "write_csv", "write_manifest", "timestamp_id", "git_commit_or_unknown",
]
