"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the answers list)
  - a history of (guess, pattern) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

This belongs to the game loop, not to the strategies: strategies only ever
see the candidate list the loop hands them.
"""

from typing import Iterable, List, Tuple

from wordle_solver.engine import Pattern, Word

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[Word, Pattern]]


def filter_candidates(words: Iterable[Word], history: History) -> List[Word]:
    """
    Keep only words that would produce exactly the recorded pattern for every
    (guess, pattern) in `history`. Order is preserved as in `words`.
    """
    history = list(history)
    out: List[Word] = []
    for w in words:
        # A candidate survives only if it reproduces every past pattern
        if all(Pattern.calculate(g, w) == patt for g, patt in history):
            out.append(w)
    return out
