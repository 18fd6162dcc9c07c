"""
Random Consistent strategy.

Strategy:
  - Choose uniformly at random among CURRENT candidates that are also legal
    guesses (present in the guess pool).
  - If no candidate is in the pool, fall back to the pool entry of the FIRST
    candidate; that too can be missing, in which case there is no pick (None).

Notes:
  - Deterministic across runs with the same seed (via BaseStrategy.rng).
  - Baseline for the pipeline, and the endgame move once one or two
    candidates remain (any other guess cannot win this turn).
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from wordle_solver.engine import Word
from .base import BaseStrategy, register


def pick_random_candidate(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        rng: random.Random,
) -> Optional[Word]:
    pool_index = {}
    for g in guess_pool:
        pool_index.setdefault(g, g)

    playable = [c for c in candidates if c in pool_index]
    if playable:
        return pool_index[playable[rng.randrange(len(playable))]]

    # Fallback: first candidate, if the pool has it
    if candidates:
        return pool_index.get(candidates[0])
    return None


@register
class RandomStrategy(BaseStrategy):
    id = "random"
    name = "Random Consistent"
    version = "1.1.0"

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        return pick_random_candidate(guess_pool, candidates, self.rng)
