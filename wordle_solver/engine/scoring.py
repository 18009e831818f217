"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - green  = correct letter in the correct position        (digit 2, 'G', 🟩)
  - yellow = correct letter in the wrong position          (digit 1, 'Y', 🟨)
  - gray   = letter absent, or present fewer times than guessed (digit 0, '-', ⬜)

A Pattern packs the five digits into one base-3 integer, leftmost letter in
the least-significant digit:
    value = d0 + d1*3 + d2*9 + d3*27 + d4*81        (0 <= value <= 242)
so there are exactly 243 patterns and 242 (all green) means solved.

Algorithm (two-pass, canonical for Wordle):
  1) Green pass: mark exact matches and consume one unit of that letter from a
     copy of the answer's letter counts.
  2) Yellow pass: for every non-green position, mark yellow only if the letter
     still has remaining availability, consuming one unit.
Running greens first is what keeps duplicate letters from being over-credited
(e.g. "speed" vs "erase" gives exactly three yellows).
"""

from __future__ import annotations

from typing import Union

from .word import Word, WORD_LENGTH

GRAY, YELLOW, GREEN = 0, 1, 2
PATTERN_SPACE = 3 ** WORD_LENGTH  # 243

_SYMBOLS = {
    "G": GREEN, "g": GREEN, "🟩": GREEN,
    "Y": YELLOW, "y": YELLOW, "🟨": YELLOW,
    "-": GRAY, "_": GRAY, "⬜": GRAY,
}
_EMOJI = {GREEN: "🟩", YELLOW: "🟨", GRAY: "⬜"}
_LETTERS = {GREEN: "G", YELLOW: "Y", GRAY: "-"}


class PatternParseError(ValueError):
    """Feedback text that is not exactly five G/Y/- (or emoji) symbols."""


class Pattern(int):
    """Immutable feedback value in 0..242. Usable anywhere an int is."""

    PERFECT: "Pattern"

    def __new__(cls, value: int = 0):
        value = int(value)
        if not 0 <= value < PATTERN_SPACE:
            raise ValueError(f"Pattern value must be < {PATTERN_SPACE}, got {value}")
        return super().__new__(cls, value)

    @classmethod
    def calculate(cls, guess: Word, answer: Word) -> "Pattern":
        """
        Feedback for `guess` when `answer` is the hidden word.

        Examples:
          crane vs slate -> 180  (gray, gray, green, gray, green)
          speed vs erase -> 37   (yellow, gray, yellow, yellow, gray)
        """
        g = guess.text
        a = answer.text
        digits = [GRAY] * WORD_LENGTH
        available = answer.char_counts()

        # Pass 1: greens
        for i in range(WORD_LENGTH):
            if g[i] == a[i]:
                digits[i] = GREEN
                if available[g[i]] > 0:
                    available[g[i]] -= 1

        # Pass 2: yellows, capped by what the greens left over
        for i in range(WORD_LENGTH):
            if digits[i] == GRAY and available[g[i]] > 0:
                digits[i] = YELLOW
                available[g[i]] -= 1

        value = 0
        multiplier = 1
        for d in digits:
            value += d * multiplier
            multiplier *= 3
        return cls(value)

    @classmethod
    def from_str(cls, text: str) -> "Pattern":
        """
        Parse feedback like "GY-GY", "gy_gy" or "🟩🟨⬜🟩🟨".

        Raises PatternParseError unless the text is exactly five valid symbols.
        """
        symbols = list(text)
        if len(symbols) != WORD_LENGTH:
            raise PatternParseError(f"Invalid pattern string: {text!r}")

        value = 0
        multiplier = 1
        for ch in symbols:
            digit = _SYMBOLS.get(ch)
            if digit is None:
                raise PatternParseError(f"Invalid pattern string: {text!r}")
            value += digit * multiplier
            multiplier *= 3
        return cls(value)

    def digits(self):
        """Per-position digits, leftmost letter first."""
        val = int(self)
        out = []
        for _ in range(WORD_LENGTH):
            out.append(val % 3)
            val //= 3
        return out

    @property
    def value(self) -> int:
        return int(self)

    def is_perfect(self) -> bool:
        return int(self) == PATTERN_SPACE - 1

    def count_greens(self) -> int:
        count = 0
        val = int(self)
        for _ in range(WORD_LENGTH):
            if val % 3 == GREEN:
                count += 1
            val //= 3
        return count

    def count_yellows(self) -> int:
        count = 0
        val = int(self)
        for _ in range(WORD_LENGTH):
            if val % 3 == YELLOW:
                count += 1
            val //= 3
        return count

    def to_emoji(self) -> str:
        return "".join(_EMOJI[d] for d in self.digits())

    def to_str(self) -> str:
        return "".join(_LETTERS[d] for d in self.digits())

    def __repr__(self) -> str:
        return f"Pattern({int(self)}, {self.to_str()!r})"


Pattern.PERFECT = Pattern(PATTERN_SPACE - 1)


def score(guess: Union[str, Word], answer: Union[str, Word]) -> str:
    """
    Compute the G/Y/- feedback string for `guess` against `answer`.

    Accepts raw strings (normalized and validated as Words) or Words.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    if not isinstance(guess, Word):
        guess = Word(guess.strip())
    if not isinstance(answer, Word):
        answer = Word(answer.strip())
    return Pattern.calculate(guess, answer).to_str()
