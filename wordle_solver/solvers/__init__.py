from __future__ import annotations
from enum import Enum
from typing import List

from .base import BaseStrategy, REGISTRY, register

from . import adaptive  # noqa: F401
from . import entropy  # noqa: F401
from . import minimax  # noqa: F401
from . import hybrid  # noqa: F401
from . import random_consistent  # noqa: F401

from .adaptive import AdaptiveConfig, AdaptiveStrategy, AdaptiveTier
from .entropy import EntropyStrategy
from .minimax import MinimaxStrategy
from .hybrid import HybridStrategy
from .random_consistent import RandomStrategy
from .tiebreak import select_with_expected_tiebreaker, select_with_hybrid_scoring
from .preference import select_minimax_first, select_with_candidate_preference


class StrategyKind(Enum):
    """The closed set of strategies; value is the registry id."""
    ADAPTIVE = "adaptive"
    ENTROPY = "entropy"
    MINIMAX = "minimax"
    HYBRID = "hybrid"
    RANDOM = "random"

    @classmethod
    def from_name(cls, name: str | None) -> "StrategyKind":
        """Map a config string to a kind; anything unrecognized is ADAPTIVE."""
        key = (name or "").strip().lower()
        return _ALIASES.get(key, cls.ADAPTIVE)


_ALIASES = {
    "adaptive": StrategyKind.ADAPTIVE,
    "entropy": StrategyKind.ENTROPY,
    "pure-entropy": StrategyKind.ENTROPY,
    "minimax": StrategyKind.MINIMAX,
    "hybrid": StrategyKind.HYBRID,
    "random": StrategyKind.RANDOM,
}


def create_strategy(
        name: str | None = None,
        *,
        config: AdaptiveConfig | None = None,
        seed: int | None = None,
        workers: int | None = None,
) -> BaseStrategy:
    """
    Factory: instantiate a strategy by name. Never fails on unknown names;
    they get the adaptive strategy. `config` only applies to adaptive.
    """
    kind = StrategyKind.from_name(name)
    cls = REGISTRY[kind.value]
    if kind is StrategyKind.ADAPTIVE:
        return cls(config=config, seed=seed, workers=workers)
    return cls(seed=seed, workers=workers)


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseStrategy", "REGISTRY", "register",
    "StrategyKind", "create_strategy", "get_strategy_ids",
    "AdaptiveConfig", "AdaptiveStrategy", "AdaptiveTier",
    "EntropyStrategy", "MinimaxStrategy", "HybridStrategy", "RandomStrategy",
    "select_with_expected_tiebreaker", "select_with_hybrid_scoring",
    "select_minimax_first", "select_with_candidate_preference",
]
