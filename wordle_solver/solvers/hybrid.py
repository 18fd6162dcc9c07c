"""
Fixed-threshold Hybrid.

Idea:
  Entropy while the candidate set is large; once |candidates| <= threshold,
  switch to minimax to tighten the worst case near the end.

A single switch point; `adaptive` is the multi-tier refinement of this idea.
"""

from __future__ import annotations
from typing import Optional, Sequence

from wordle_solver.engine import Word
from .base import BaseStrategy, register
from . import entropy, minimax


@register
class HybridStrategy(BaseStrategy):
    id = "hybrid"
    name = "Hybrid (Entropy -> Minimax)"
    version = "1.0.0"

    # Switch to minimax when candidates <= this
    DEFAULT_MINIMAX_THRESHOLD = 5

    def __init__(self, *, minimax_threshold: int = DEFAULT_MINIMAX_THRESHOLD, **kw):
        super().__init__(**kw)
        if minimax_threshold < 0:
            raise ValueError(f"minimax_threshold must be >= 0; got {minimax_threshold}")
        self.minimax_threshold = int(minimax_threshold)

    def stage(self, num_candidates: int) -> str:
        return "minimax" if num_candidates <= self.minimax_threshold else "entropy"

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        if len(candidates) <= self.minimax_threshold:
            best = minimax.select_best_guess(guess_pool, candidates, **self.scoring())
        else:
            best = entropy.select_best_guess(guess_pool, candidates, **self.scoring())
        return best[0] if best else None
