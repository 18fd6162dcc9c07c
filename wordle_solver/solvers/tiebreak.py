"""
Entropy with secondary metrics.

Two rankers built on the same per-guess metrics:

  select_with_expected_tiebreaker
      entropy (desc) -> expected_remaining (asc) -> max_partition (asc).
      Pure entropy with sensible tie-breaks; mid-game (tens of candidates)
      many guesses share the top entropy and the tie-breaks decide.

  select_with_hybrid_scoring
      score = trunc(entropy * entropy_weight) - trunc(max_partition * minimax_penalty)
      rank by score (desc), then expected_remaining (asc).
      Default weights 100 / 10 trade average case against worst case 10:1.

Both finish with "is a candidate" before falling back to pool order: with a
single candidate left every guess scores alike, and only the candidate wins.

Hybrid score precision: each weighted term is truncated toward zero before
the subtraction. The default thresholds were tuned against exactly that
rounding, so it is kept. The terms are Python ints, so nothing saturates
however large the pool.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence

from wordle_solver.engine import GuessMetrics, Word, score_pool
from .base import candidate_membership

DEFAULT_ENTROPY_WEIGHT = 100.0
DEFAULT_MINIMAX_PENALTY = 10.0


def hybrid_score(m: GuessMetrics, entropy_weight: float, minimax_penalty: float) -> int:
    return int(m.entropy * entropy_weight) - int(m.max_partition * minimax_penalty)


def _rank(guess_pool: Sequence[Word], candidates: Sequence[Word],
          metrics: List[GuessMetrics], key: Callable[[GuessMetrics], tuple]) -> Word:
    is_cand = candidate_membership(guess_pool, candidates)
    best_i, best_key = 0, key(metrics[0]) + (is_cand[0],)
    for i, m in enumerate(metrics):
        k = key(m) + (is_cand[i],)
        if k > best_key:
            best_i, best_key = i, k
    return guess_pool[best_i]


def select_with_expected_tiebreaker(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: int | None = None,
        executor=None,
) -> Optional[Word]:
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    return _rank(guess_pool, candidates, metrics,
                 lambda m: (m.entropy, -m.expected_remaining, -m.max_partition))


def select_with_hybrid_scoring(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        entropy_weight: float = DEFAULT_ENTROPY_WEIGHT,
        minimax_penalty: float = DEFAULT_MINIMAX_PENALTY,
        *,
        workers: int | None = None,
        executor=None,
) -> Optional[Word]:
    if not guess_pool:
        return None

    metrics = score_pool(guess_pool, candidates, workers=workers, executor=executor)
    return _rank(guess_pool, candidates, metrics,
                 lambda m: (hybrid_score(m, entropy_weight, minimax_penalty), -m.expected_remaining))
