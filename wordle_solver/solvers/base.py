from __future__ import annotations
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence, Type

from wordle_solver.engine import Word, resolve_workers

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


def candidate_membership(guess_pool: Sequence[Word], candidates: Sequence[Word]) -> List[bool]:
    """For each pool word, is it also a remaining candidate?"""
    cand_set = set(candidates)
    return [g in cand_set for g in guess_pool]


# ---- Base class that strategies inherit ----
class BaseStrategy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, *, seed: int | None = None, workers: int | None = None):
        self.rng = random.Random(seed)
        self.workers = workers
        self._executor: ProcessPoolExecutor | None = None

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def scoring(self) -> dict:
        """Keyword arguments for score_pool; one process pool lives as long as the strategy."""
        n = resolve_workers(self.workers)
        if n > 1 and self._executor is None:
            self._executor = ProcessPoolExecutor(max_workers=n)
        return {"workers": n, "executor": self._executor}

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown()
            self._executor = None

    def stage(self, num_candidates: int) -> str:
        """Label of the rule this strategy applies at the given candidate count (for reports)."""
        return self.id

    def select_guess(self, guess_pool: Sequence[Word], candidates: Sequence[Word]) -> Optional[Word]:
        """Best guess from `guess_pool` given `candidates`; None when the pool is empty."""
        raise NotImplementedError("Override in subclass")

    def next_guess(self, state: dict) -> Optional[Word]:
        """Harness adapter: read the pool and candidates out of a turn state."""
        return self.select_guess(state["allowed"], state["candidates"])
