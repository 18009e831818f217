from .word import Word, WordError, InvalidLength, NonAscii, InvalidCharacters
from .scoring import Pattern, PatternParseError, PATTERN_SPACE, score
from .constraints import History, filter_candidates, is_consistent
from .validation import parse_guess, validate_guess
from .metrics import (
    GuessMetrics,
    calculate_entropy,
    calculate_max_remaining,
    calculate_metrics,
    group_by_pattern,
    shannon_entropy,
)

__all__ = [
    "Word", "WordError", "InvalidLength", "NonAscii", "InvalidCharacters",
    "Pattern", "PatternParseError", "PATTERN_SPACE", "score",
    "History", "filter_candidates", "is_consistent",
    "parse_guess", "validate_guess",
    "GuessMetrics", "calculate_entropy", "calculate_max_remaining",
    "calculate_metrics", "group_by_pattern", "shannon_entropy",
]
