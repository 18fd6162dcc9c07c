"""
Wordle-style feedback for a single (guess, candidate) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position   (CORRECT = 2)
  - 'Y'  : yellow = correct letter in the wrong position     (PRESENT = 1)
  - '-'  : gray   = letter not present (or present fewer times than guessed)
                                                            (ABSENT  = 0)

A Pattern packs the five outcomes into one base-3 number in [0, 243):
    value = sum(outcome[i] * 3**i)
Position 0 is the least significant digit; all-green is 242.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the candidate.
  2) Second pass, left to right, marks yellows only while the guessed letter
     still has remaining count, consuming one instance each time.

The rule is asymmetric on purpose: guess letters are checked against the
candidate's counts, so calculate(a, b) and calculate(b, a) usually differ.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Tuple, Union

import numpy as np

from .word import ALPHABET_SIZE, WORD_LENGTH, Word

PATTERN_COUNT = 3 ** WORD_LENGTH  # 243
ALL_CORRECT = PATTERN_COUNT - 1   # 242

_SYMBOLS = "-YG"
_A = ord("a")
_POWERS = tuple(3 ** i for i in range(WORD_LENGTH))


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class Pattern:
    """Immutable feedback code; compare and hash by value."""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        value = int(value)
        if not 0 <= value < PATTERN_COUNT:
            raise ValueError(f"Pattern value must be in [0, {PATTERN_COUNT}), got {value}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Pattern is immutable")

    @classmethod
    def calculate(cls, guess: Word, candidate: Word) -> "Pattern":
        """Feedback the candidate (as answer) gives to the guess."""
        g = guess.chars
        c = candidate.chars
        outcome = [Feedback.ABSENT] * WORD_LENGTH

        # Pass 1: greens, and leftover letter counts from the candidate
        remaining = [0] * ALPHABET_SIZE
        for i in range(WORD_LENGTH):
            if g[i] == c[i]:
                outcome[i] = Feedback.CORRECT
            else:
                remaining[c[i] - _A] += 1

        # Pass 2: yellows capped by the true multiplicity in the candidate
        for i in range(WORD_LENGTH):
            if outcome[i] == Feedback.CORRECT:
                continue
            k = g[i] - _A
            if remaining[k] > 0:
                outcome[i] = Feedback.PRESENT
                remaining[k] -= 1

        return cls.from_feedback(outcome)

    @classmethod
    def from_feedback(cls, outcome: Iterable[int]) -> "Pattern":
        outcome = tuple(outcome)
        if len(outcome) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} outcomes, got {len(outcome)}")
        return cls(sum(int(o) * p for o, p in zip(outcome, _POWERS)))

    @classmethod
    def parse(cls, text: str) -> "Pattern":
        """Parse the 'G' / 'Y' / '-' string form, e.g. "GY--G"."""
        try:
            return cls.from_feedback(_SYMBOLS.index(ch) for ch in text.strip().upper())
        except ValueError as e:
            raise ValueError(f"Invalid pattern string: {text!r}") from e

    @property
    def value(self) -> int:
        return self._value

    def feedback(self) -> Tuple[Feedback, ...]:
        out = []
        v = self._value
        for _ in range(WORD_LENGTH):
            v, digit = divmod(v, 3)
            out.append(Feedback(digit))
        return tuple(out)

    def is_win(self) -> bool:
        return self._value == ALL_CORRECT

    def __eq__(self, other) -> bool:
        if isinstance(other, Pattern):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return "".join(_SYMBOLS[o] for o in self.feedback())

    def __repr__(self) -> str:
        return f"Pattern({self._value}, {str(self)!r})"

    def __reduce__(self):
        return (Pattern, (self._value,))


def score(guess: Union[str, Word], answer: Union[str, Word]) -> str:
    """
    Compute Wordle feedback for `guess` against `answer` as a G/Y/- string.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    g = guess if isinstance(guess, Word) else Word(guess.strip())
    a = answer if isinstance(answer, Word) else Word(answer.strip())
    return str(Pattern.calculate(g, a))


def letter_counts(candidate_codes: np.ndarray) -> np.ndarray:
    """(26, n) int8 table: counts[k, j] = occurrences of letter k in candidate j."""
    cands = np.asarray(candidate_codes)
    n = cands.shape[0]
    counts = np.zeros((ALPHABET_SIZE, n), dtype=np.int8)
    cols = np.arange(n)
    for j in range(WORD_LENGTH):
        counts[cands[:, j], cols] += 1
    return counts


def pattern_matrix(guess_codes, candidate_codes: np.ndarray, counts: np.ndarray | None = None) -> np.ndarray:
    """
    Vectorized Pattern.calculate for a block of guesses against many candidates.

    Args:
      guess_codes     : (g, 5) letter indexes (0..25), or a single 5-tuple
      candidate_codes : (n, 5) letter indexes
      counts          : letter_counts(candidate_codes), if already built

    Returns:
      (g, n) uint8 array of pattern values, same packing as Pattern.

    Same two-pass rule, restated per guess position i: a non-green letter is
    yellow while the candidate still has unmatched copies of it, i.e.

        count(letter in candidate)
          - earlier copies of the letter in the guess
          - later copies of the letter that are green      > 0
    """
    guesses = np.asarray(guess_codes).reshape(-1, WORD_LENGTH)
    cands = np.asarray(candidate_codes)
    out = np.zeros((guesses.shape[0], cands.shape[0]), dtype=np.uint8)
    if out.size == 0:
        return out
    if counts is None:
        counts = letter_counts(cands)

    greens = [guesses[:, i, None] == cands[None, :, i] for i in range(WORD_LENGTH)]

    for i in range(WORD_LENGTH):
        letter = guesses[:, i]
        avail = counts[letter]  # (g, n) copies of this guess letter per candidate

        # Guesses repeating this letter later: those greens are already spoken for
        for k in range(i + 1, WORD_LENGTH):
            rows = np.nonzero(letter == guesses[:, k])[0]
            if rows.size:
                avail[rows] -= greens[k][rows]

        before = np.zeros(guesses.shape[0], dtype=np.int8)
        for j in range(i):
            before += letter == guesses[:, j]

        yellow = ~greens[i] & (avail > before[:, None])
        out += greens[i] * np.uint8(2 * _POWERS[i])
        out += yellow * np.uint8(_POWERS[i])

    return out


def pattern_codes(guess_codes, candidate_codes: np.ndarray) -> np.ndarray:
    """
    Pattern values of one guess against many candidates.

    Returns:
      (n,) int64 array, same packing as Pattern.
    """
    cands = np.asarray(candidate_codes)
    if cands.shape[0] == 0:
        return np.zeros(0, dtype=np.int64)
    return pattern_matrix(guess_codes, cands)[0].astype(np.int64)
