"""
Adaptive (tiered) strategy.

Idea:
  No single ranking rule is best at every stage. Pick the rule from the
  number of remaining candidates, with cascading strict `>` checks:

    count > pure_entropy_threshold      -> PURE_ENTROPY     (entropy only)
    count > entropy_minimax_threshold   -> ENTROPY_MINIMAX  (entropy, expected, minimax)
    count > hybrid_threshold            -> HYBRID           (weighted entropy - minimax)
    count > minimax_first_threshold     -> MINIMAX_FIRST    (minimax, candidate preference)
    otherwise                           -> RANDOM           (guess a candidate)

  With the default configuration (80, 21, 15, 2):
    81+ candidates   PURE_ENTROPY
    22–80            ENTROPY_MINIMAX
    16–21            HYBRID (100 / 10)
    3–15             MINIMAX_FIRST (epsilon 0.2)
    1–2              RANDOM

The defaults are an empirically tuned configuration (simulated over the full
answer list), not derived constants; pass an AdaptiveConfig to try others.
The tier is a pure function of (config, candidate count); nothing carries
over between turns.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from wordle_solver.engine import Word
from .base import BaseStrategy, register
from . import entropy
from .preference import select_minimax_first
from .tiebreak import (
    DEFAULT_ENTROPY_WEIGHT,
    DEFAULT_MINIMAX_PENALTY,
    select_with_expected_tiebreaker,
    select_with_hybrid_scoring,
)


@dataclass(frozen=True)
class AdaptiveConfig:
    """Tier thresholds and tier parameters. Immutable; build variants with replace()."""
    pure_entropy_threshold: int = 80       # 81+ candidates
    entropy_minimax_threshold: int = 21    # 22–80
    hybrid_threshold: int = 15             # 16–21
    minimax_first_threshold: int = 2       # 3–15 (1–2 go random)
    minimax_epsilon: float = 0.2           # candidate preference window (bits)
    hybrid_entropy_weight: float = DEFAULT_ENTROPY_WEIGHT
    hybrid_minimax_penalty: float = DEFAULT_MINIMAX_PENALTY

    def replace(self, **overrides) -> "AdaptiveConfig":
        """Copy with some fields changed; None values are ignored (handy for CLI flags)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def validate(self) -> "AdaptiveConfig":
        thresholds = (
            self.pure_entropy_threshold,
            self.entropy_minimax_threshold,
            self.hybrid_threshold,
            self.minimax_first_threshold,
        )
        if any(t < 0 for t in thresholds):
            raise ValueError(f"Tier thresholds must be >= 0; got {thresholds}")
        if list(thresholds) != sorted(thresholds, reverse=True):
            raise ValueError(f"Tier thresholds must be non-increasing; got {thresholds}")
        return self


class AdaptiveTier(Enum):
    PURE_ENTROPY = "pure_entropy"
    ENTROPY_MINIMAX = "entropy_minimax"
    HYBRID = "hybrid"
    MINIMAX_FIRST = "minimax_first"
    RANDOM = "random"


def get_tier(config: AdaptiveConfig, num_candidates: int) -> AdaptiveTier:
    if num_candidates > config.pure_entropy_threshold:
        return AdaptiveTier.PURE_ENTROPY
    if num_candidates > config.entropy_minimax_threshold:
        return AdaptiveTier.ENTROPY_MINIMAX
    if num_candidates > config.hybrid_threshold:
        return AdaptiveTier.HYBRID
    if num_candidates > config.minimax_first_threshold:
        return AdaptiveTier.MINIMAX_FIRST
    return AdaptiveTier.RANDOM


@register
class AdaptiveStrategy(BaseStrategy):
    id = "adaptive"
    name = "Adaptive (Tiered)"
    version = "1.2.0"

    def __init__(self, *, config: AdaptiveConfig | None = None, **kw):
        super().__init__(**kw)
        self.config = (config or AdaptiveConfig()).validate()

    def get_tier(self, num_candidates: int) -> AdaptiveTier:
        return get_tier(self.config, num_candidates)

    def stage(self, num_candidates: int) -> str:
        return self.get_tier(num_candidates).value

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        cfg = self.config
        tier = self.get_tier(len(candidates))

        if tier is AdaptiveTier.PURE_ENTROPY:
            best = entropy.select_best_guess(guess_pool, candidates, **self.scoring())
            return best[0] if best else None

        if tier is AdaptiveTier.ENTROPY_MINIMAX:
            return select_with_expected_tiebreaker(guess_pool, candidates, **self.scoring())

        if tier is AdaptiveTier.HYBRID:
            return select_with_hybrid_scoring(
                guess_pool, candidates,
                cfg.hybrid_entropy_weight, cfg.hybrid_minimax_penalty,
                **self.scoring(),
            )

        if tier is AdaptiveTier.MINIMAX_FIRST:
            return select_minimax_first(guess_pool, candidates, cfg.minimax_epsilon, **self.scoring())

        # RANDOM: with one or two left, only a candidate can win this turn
        if not candidates:
            return guess_pool[0] if guess_pool else None
        cand_set = set(candidates)
        playable = [g for g in guess_pool if g in cand_set]
        if not playable:
            return None
        return playable[self.rng.randrange(len(playable))]
