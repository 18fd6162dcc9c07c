"""
Candidate-preferring selectors for the endgame.

Late in the game a guess that is itself a remaining candidate can win on the
spot, while a purely discriminating word never can. Both selectors below lean
toward candidates, but only while the candidate is still a strong option
(its entropy is within `epsilon` bits of the best, strict `<`).

The two differ in which metric gates first, and they can disagree:

  select_minimax_first
      1) keep guesses with the global minimum max_partition
      2) among those, a candidate with max_H - H < epsilon wins (highest H first)
      3) otherwise the highest-entropy guess of step 1

  select_with_candidate_preference  (entropy first)
      1) keep guesses with max_H - H < epsilon
      2) among those, the candidate with the smallest max_partition wins
      3) otherwise the smallest max_partition of step 1

Remaining ties go to a candidate, then to the earliest guess in pool order.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from wordle_solver.engine import Word, score_pool
from .base import candidate_membership


def _first_best(indexes: List[int], key) -> int:
    best = indexes[0]
    best_k = key(best)
    for i in indexes[1:]:
        k = key(i)
        if k > best_k:
            best, best_k = i, k
    return best


def select_minimax_first(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        epsilon: float,
        *,
        workers: int | None = None,
        executor=None,
) -> Optional[Word]:
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    is_cand = candidate_membership(guess_pool, candidates)

    min_worst = min(m.max_partition for m in metrics)
    tied = [i for i, m in enumerate(metrics) if m.max_partition == min_worst]
    max_H = max(metrics[i].entropy for i in tied)

    strong_cands = [i for i in tied if is_cand[i] and (max_H - metrics[i].entropy) < epsilon]
    pool = strong_cands or tied
    return guess_pool[_first_best(pool, lambda i: (metrics[i].entropy, is_cand[i]))]


def select_with_candidate_preference(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        epsilon: float,
        *,
        workers: int | None = None,
        executor=None,
) -> Optional[Word]:
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    is_cand = candidate_membership(guess_pool, candidates)

    max_H = max(m.entropy for m in metrics)
    top = [i for i, m in enumerate(metrics) if (max_H - m.entropy) < epsilon]
    if not top:
        # epsilon <= 0 admits nothing; the best-entropy guesses still stand
        top = [i for i, m in enumerate(metrics) if m.entropy == max_H]

    top_cands = [i for i in top if is_cand[i]]
    pool = top_cands or top
    return guess_pool[_first_best(pool, lambda i: -metrics[i].max_partition)]
