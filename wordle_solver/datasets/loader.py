"""
Word-list loading.

Every source (file, embedded table) goes through Word(...). Blank lines and
entries that fail validation are skipped silently: a word list with a stray
header or a six-letter typo still loads. Use Word.parse_many when a bad entry
should be an error instead.

Files are UTF-8, one entry per line; a leading byte-order mark is ignored.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordle_solver.engine import Word, WordError


def read_lines(path: Path | str) -> List[str]:
    """Lines of a word-list file without line endings. FileNotFoundError if missing."""
    with Path(path).open("r", encoding="utf-8-sig") as f:
        return [ln.rstrip("\r\n") for ln in f]


def write_lines(words: Iterable[object], path: Path | str) -> str:
    """Write one entry per line (Words or strings); returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(f"{w}\n")
    return str(p)


def words_from_slice(texts: Iterable[str]) -> List[Word]:
    """Convert in-memory strings to Words, keeping order and skipping invalid entries."""
    out: List[Word] = []
    for t in texts:
        t = t.strip()
        if not t:
            continue
        try:
            out.append(Word(t))
        except WordError:
            continue
    return out


def load_from_file(path: Path | str) -> List[Word]:
    """Load one word per line. Raises FileNotFoundError if the path doesn't exist."""
    return words_from_slice(read_lines(path))
