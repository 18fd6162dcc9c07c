"""
Five-letter word value type.

Every word that reaches the engine goes through `Word(...)`: files, embedded
tables and user input all funnel through this one validation gate.

Rules (checked in this order, after lowercasing):
  - exactly 5 bytes long (UTF-8)      -> otherwise InvalidLength
  - ASCII only                        -> otherwise NonAscii
  - letters a–z only                  -> otherwise InvalidCharacters

Case is never an error: "CRANE" and "crane" are the same Word.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

WORD_LENGTH = 5
ALPHABET_SIZE = 26
_A = ord("a")


def _letter_byte(letter: str) -> int:
    """Byte of a single a-z letter (any case); ValueError for anything else."""
    low = letter.lower() if isinstance(letter, str) else ""
    if len(low) != 1 or not "a" <= low <= "z":
        raise ValueError(f"Expected a single letter a-z, got {letter!r}")
    return ord(low)


class WordError(ValueError):
    """Base class for all word construction failures."""


class InvalidLength(WordError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Word must be exactly {WORD_LENGTH} letters, got {length}")


class NonAscii(WordError):
    def __init__(self):
        super().__init__("Word must contain only ASCII letters")


class InvalidCharacters(WordError):
    def __init__(self):
        super().__init__("Word contains invalid characters")


class Word:
    """
    Immutable 5-letter word stored as raw bytes.

    Equality and hashing are by byte content, so Words can be used in sets
    and as dict keys.

    Examples:
      Word("CRANE").text        -> "crane"
      Word("speed").positions_of("e") -> [2, 3]
    """

    __slots__ = ("_chars",)

    def __init__(self, text: str):
        text = str(text).lower()
        raw = text.encode("utf-8")

        if len(raw) != WORD_LENGTH:
            raise InvalidLength(len(raw))
        if not raw.isascii():
            raise NonAscii()
        if not all(_A <= b <= _A + ALPHABET_SIZE - 1 for b in raw):
            raise InvalidCharacters()

        object.__setattr__(self, "_chars", raw)

    def __setattr__(self, name, value):
        raise AttributeError("Word is immutable")

    @classmethod
    def parse_many(cls, texts: Iterable[str]) -> List["Word"]:
        """Strict bulk constructor: raises on the first invalid entry."""
        return [cls(t) for t in texts]

    # ---- views ----
    @property
    def text(self) -> str:
        return self._chars.decode("ascii")

    @property
    def chars(self) -> bytes:
        return self._chars

    @property
    def codes(self) -> Tuple[int, ...]:
        """Letter indexes (a=0 … z=25), one per position."""
        return tuple(b - _A for b in self._chars)

    def char_at(self, position: int) -> str:
        if not 0 <= position < WORD_LENGTH:
            raise IndexError(f"position {position} out of range 0..{WORD_LENGTH - 1}")
        return chr(self._chars[position])

    def has_letter(self, letter: str) -> bool:
        return _letter_byte(letter) in self._chars

    def positions_of(self, letter: str) -> List[int]:
        b = _letter_byte(letter)
        return [i for i, c in enumerate(self._chars) if c == b]

    def char_counts(self) -> List[int]:
        """26-slot occurrence table: counts[0] is 'a', counts[25] is 'z'."""
        counts = [0] * ALPHABET_SIZE
        for b in self._chars:
            counts[b - _A] += 1
        return counts

    # ---- value semantics ----
    def __eq__(self, other) -> bool:
        if isinstance(other, Word):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)

    def __lt__(self, other: "Word") -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._chars < other._chars

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Word({self.text!r})"

    def __reduce__(self):
        # __slots__ + blocked __setattr__: rebuild through the constructor when pickled
        return (Word, (self.text,))
