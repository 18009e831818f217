from .validator import validate_wordlists, pretty_summary
from .wordlists import (
    DEFAULT_ALLOWED,
    DEFAULT_ANSWERS,
    MODE_ALL,
    MODE_ANSWERS,
    clear_cache,
    load_pools,
    load_words,
    read_lines,
    words_from_iterable,
    write_words,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "DEFAULT_ALLOWED", "DEFAULT_ANSWERS", "MODE_ALL", "MODE_ANSWERS",
    "clear_cache", "load_pools", "load_words", "read_lines",
    "words_from_iterable", "write_words",
]
