"""
Minimax Solver (smallest worst case).

Idea:
  For guess g, the worst feedback we could see leaves max_i c_i candidates
  (the largest bucket). Pick the g that minimizes that number.

Ignores how the other buckets are spread, so it is a poor opener but a safe
closer when only a handful of candidates remain. Equal worst cases go to a
guess that is itself a candidate, then to pool order.
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
) -> Optional[Tuple[Word, int]]:
    """Return (guess, max_partition) with the smallest max_partition, or None for an empty pool."""
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    is_cand = candidate_membership(guess_pool, candidates)

    best_i = 0
    best_key = (-metrics[0].max_partition, is_cand[0])
    for i, m in enumerate(metrics):
        k = (-m.max_partition, is_cand[i])
        if k > best_key:
            best_i, best_key = i, k
    return guess_pool[best_i], metrics[best_i].max_partition


@register
class MinimaxStrategy(BaseStrategy):
    id = "minimax"
    name = "Minimax (Worst-Case Partition)"
    version = "1.1.0"

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        best = select_best_guess(guess_pool, candidates, **self.scoring())
        return best[0] if best else None
