"""
Five-letter word tokens.

A Word is built once from raw input (case-normalized and validated) and never
mutated afterwards. The guess pool and the answer pool may hold separate Word
objects for the same text; equality and hashing go by text, so they behave as
the same word everywhere (sets, dict keys, membership tests).

Validation order matters for the error reported:
  1) UTF-8 length must be 5 bytes    -> InvalidLength(byte length)
  2) every byte must be ASCII        -> NonAscii
  3) every character must be a-z     -> InvalidCharacters
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Tuple

WORD_LENGTH = 5
_LOWERCASE = frozenset("abcdefghijklmnopqrstuvwxyz")


class WordError(ValueError):
    """Base class for all word validation failures."""


class InvalidLength(WordError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Word must be exactly {WORD_LENGTH} bytes, got {length}")


class NonAscii(WordError):
    def __init__(self):
        super().__init__("Word must contain only ASCII letters")


class InvalidCharacters(WordError):
    def __init__(self):
        super().__init__("Word contains invalid characters")


class Word:
    __slots__ = ("_text", "_chars", "_positions")

    def __init__(self, text: str):
        text = str(text).lower()

        length = len(text.encode("utf-8", "surrogatepass"))
        if length != WORD_LENGTH:
            raise InvalidLength(length)
        if not text.isascii():
            raise NonAscii()
        if not all(ch in _LOWERCASE for ch in text):
            raise InvalidCharacters()

        positions: Dict[str, List[int]] = {}
        for i, ch in enumerate(text):
            positions.setdefault(ch, []).append(i)

        self._text = text
        self._chars = text.encode("ascii")
        self._positions: Dict[str, Tuple[int, ...]] = {
            ch: tuple(idx) for ch, idx in positions.items()
        }

    @property
    def text(self) -> str:
        return self._text

    @property
    def chars(self) -> bytes:
        """The word as 5 ASCII bytes."""
        return self._chars

    def char_at(self, position: int) -> str:
        """Letter at `position` (0-4). Anything else is a caller bug."""
        if not 0 <= position < WORD_LENGTH:
            raise IndexError(f"position must be in 0..{WORD_LENGTH - 1}, got {position}")
        return self._text[position]

    def has_letter(self, letter: str) -> bool:
        return letter in self._positions

    def positions_of(self, letter: str) -> Tuple[int, ...]:
        """Zero-based positions of `letter`, in order; empty if absent."""
        return self._positions.get(letter, ())

    def char_counts(self) -> Counter:
        """Fresh letter -> occurrence count mapping (callers may consume it)."""
        return Counter({ch: len(idx) for ch, idx in self._positions.items()})

    def __eq__(self, other) -> bool:
        if isinstance(other, Word):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __reduce__(self):
        # rebuild through __init__ so worker processes get validated Words
        return (Word, (self._text,))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Word({self._text!r})"
