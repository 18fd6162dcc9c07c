import random

import pytest
from wordle_solver.engine import Word
from wordle_solver.solvers import (
    BaseStrategy, REGISTRY, register, StrategyKind, create_strategy, get_strategy_ids,
    AdaptiveConfig, HybridStrategy,
)
from wordle_solver.solvers.random_consistent import pick_random_candidate


def W(*texts):
    return [Word(t) for t in texts]


@pytest.mark.parametrize("name,kind", [
    ("adaptive", StrategyKind.ADAPTIVE),
    ("Entropy", StrategyKind.ENTROPY),
    ("pure-entropy", StrategyKind.ENTROPY),
    (" minimax ", StrategyKind.MINIMAX),
    ("HYBRID", StrategyKind.HYBRID),
    ("random", StrategyKind.RANDOM),
    ("letter_freq", StrategyKind.ADAPTIVE),
    ("", StrategyKind.ADAPTIVE),
    (None, StrategyKind.ADAPTIVE),
])
def test_strategy_kind_from_name(name, kind):
    assert StrategyKind.from_name(name) is kind


def test_registry_ids():
    assert get_strategy_ids() == ["adaptive", "entropy", "hybrid", "minimax", "random"]


def test_create_strategy_unknown_falls_back_to_adaptive():
    assert create_strategy("does-not-exist").id == "adaptive"
    assert create_strategy().id == "adaptive"


def test_create_strategy_passes_config_to_adaptive():
    cfg = AdaptiveConfig(minimax_epsilon=0.5)
    s = create_strategy("adaptive", config=cfg, workers=2)
    assert s.config == cfg
    assert s.workers == 2
    assert create_strategy("entropy", config=cfg).id == "entropy"


def test_register_rejects_duplicates_and_missing_ids():
    before = dict(REGISTRY)

    class Dup(BaseStrategy):
        id = "entropy"

    class NoId(BaseStrategy):
        id = ""

    with pytest.raises(ValueError):
        register(Dup)
    with pytest.raises(ValueError):
        register(NoId)
    assert REGISTRY == before


@pytest.mark.parametrize("sid", ["adaptive", "entropy", "minimax", "hybrid", "random"])
def test_every_strategy_handles_empty_pool(sid):
    s = create_strategy(sid, seed=0)
    assert s.select_guess([], W("crane", "slate")) is None


@pytest.mark.parametrize("sid", ["adaptive", "entropy", "minimax", "hybrid", "random"])
def test_next_guess_reads_turn_state(sid):
    s = create_strategy(sid, seed=0)
    state = {"turn": 1, "history": [], "candidates": W("irate"), "allowed": W("crane", "irate")}
    guess = s.next_guess(state)
    assert guess in state["allowed"]


def test_hybrid_threshold_switch():
    pool = W("crane", "slate", "zzzzz")
    cands = W("irate", "crate", "grate")
    assert HybridStrategy().select_guess(pool, cands) == Word("crane")
    with pytest.raises(ValueError):
        HybridStrategy(minimax_threshold=-1)


def test_random_pick_is_seeded():
    pool = W("crane", "slate", "irate", "crate", "grate")
    cands = W("slate", "irate", "crate", "grate")
    a = [pick_random_candidate(pool, cands, random.Random(5)) for _ in range(3)]
    b = [pick_random_candidate(pool, cands, random.Random(5)) for _ in range(3)]
    assert a == b
    assert all(g in cands for g in a)


def test_random_pick_fallbacks():
    rng = random.Random(0)
    # no candidate is a legal guess, and neither is the first candidate
    assert pick_random_candidate(W("crane"), W("irate"), rng) is None
    assert pick_random_candidate(W("crane"), [], rng) is None


def test_random_strategy_reset_reproduces_picks():
    pool = W("crane", "slate", "irate", "crate", "grate")
    s = create_strategy("random")
    s.reset(seed=11)
    first = [s.select_guess(pool, pool) for _ in range(5)]
    s.reset(seed=11)
    assert [s.select_guess(pool, pool) for _ in range(5)] == first


@pytest.mark.parametrize("sid", ["adaptive", "entropy", "minimax", "hybrid", "random"])
def test_sole_candidate_is_played_by_every_strategy(sid):
    s = create_strategy(sid, seed=0)
    assert s.select_guess(W("crane", "slate", "irate"), W("irate")) == Word("irate")


def test_stage_labels():
    assert create_strategy("adaptive").stage(100) == "pure_entropy"
    assert create_strategy("adaptive").stage(2) == "random"
    assert HybridStrategy().stage(5) == "minimax"
    assert HybridStrategy().stage(6) == "entropy"
    assert create_strategy("entropy").stage(3) == "entropy"


def test_strategy_reuses_one_process_pool():
    s = create_strategy("entropy", workers=2)
    try:
        first = s.scoring()["executor"]
        assert first is not None and s.scoring()["executor"] is first
        pool = W("crane", "slate", "irate", "crate", "grate", "zzzzz")
        # crane and irate both split 2/1; irate is a candidate
        assert s.select_guess(pool, W("irate", "crate", "grate")) == Word("irate")
    finally:
        s.close()
    assert create_strategy("entropy").scoring() == {"workers": 1, "executor": None}
