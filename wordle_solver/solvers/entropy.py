"""
Entropy Solver (expected information gain).

Idea:
  - For each guess g in the pool, partition CURRENT candidates by feedback pattern.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - a guess that is still a candidate beats one that is not (it can win now),
    then the first in pool order (no RNG), so reruns are reproducible.

Early game this is the workhorse: with hundreds of candidates left, maximizing
average information beats worrying about the worst case.
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple

from wordle_solver.engine import Word, score_pool
from .base import BaseStrategy, candidate_membership, register


def select_best_guess(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor=None,
) -> Optional[Tuple[Word, float]]:
    """Return (guess, entropy_bits) with the highest entropy, or None for an empty pool."""
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    is_cand = candidate_membership(guess_pool, candidates)

    best_i = 0
    best_key = (metrics[0].entropy, is_cand[0])
    for i, m in enumerate(metrics):
        k = (m.entropy, is_cand[i])
        if k > best_key:
            best_i, best_key = i, k
    return guess_pool[best_i], metrics[best_i].entropy


@register
class EntropyStrategy(BaseStrategy):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.1.0"

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        best = select_best_guess(guess_pool, candidates, **self.scoring())
        return best[0] if best else None
