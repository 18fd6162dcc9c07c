import pytest
from wordle_solver.engine import Word, GuessMetrics, score_pool
from wordle_solver.solvers import entropy, minimax
from wordle_solver.solvers.tiebreak import (
    hybrid_score,
    select_with_expected_tiebreaker,
    select_with_hybrid_scoring,
)
from wordle_solver.solvers.preference import select_minimax_first, select_with_candidate_preference


def W(*texts):
    return [Word(t) for t in texts]


# Splitter/candidate setup for the endgame selectors:
#   splitter "aqzqq" (not a candidate) splits the candidates 2/1/1/1
#   cand     "zzzzz" (a candidate)     splits them 2/2/1
# Both have max_partition 2; the splitter has the higher entropy.
SPLITTER, CAND = Word("aqzqq"), Word("zzzzz")
ENDGAME_POOL = [SPLITTER, CAND]
ENDGAME_CANDS = W("zzzzz", "zaaaa", "zbbbb", "azaaa", "bzbbb")


def _entropy_deficit():
    split_m, cand_m = score_pool(ENDGAME_POOL, ENDGAME_CANDS)
    assert split_m.max_partition == cand_m.max_partition == 2
    assert split_m.entropy > cand_m.entropy
    return split_m.entropy - cand_m.entropy


# --- single-metric selectors ---

def test_entropy_and_minimax_on_empty_pool():
    cands = W("irate", "crate")
    assert entropy.select_best_guess([], cands) is None
    assert minimax.select_best_guess([], cands) is None
    assert select_with_expected_tiebreaker([], cands) is None
    assert select_with_hybrid_scoring([], cands) is None
    assert select_minimax_first([], cands, 0.2) is None
    assert select_with_candidate_preference([], cands, 0.2) is None


def test_entropy_picks_most_informative():
    guess, h = entropy.select_best_guess(W("zzzzz", "crane"), W("irate", "crate", "grate"))
    assert guess == Word("crane")
    assert h > 0.0


def test_minimax_picks_smallest_worst_case():
    guess, worst = minimax.select_best_guess(W("zzzzz", "crane"), W("irate", "crate", "grate"))
    assert guess == Word("crane")
    assert worst == 2


def test_ties_go_to_first_in_pool_order():
    # neither guess shares a letter with any candidate
    pool = W("qqqqq", "jjjjj")
    cands = W("irate", "crate")
    assert entropy.select_best_guess(pool, cands)[0] == Word("qqqqq")
    assert minimax.select_best_guess(pool, cands)[0] == Word("qqqqq")
    assert select_with_expected_tiebreaker(pool, cands) == Word("qqqqq")
    assert select_with_hybrid_scoring(pool, cands) == Word("qqqqq")


# --- entropy with secondary metrics ---

def test_expected_tiebreaker_prefers_entropy():
    assert select_with_expected_tiebreaker(W("zzzzz", "crane"), W("irate", "crate", "grate")) == Word("crane")


def test_hybrid_never_picks_uninformative_word():
    pool = W("crane", "slate", "zzzzz")
    cands = W("irate", "crate", "grate")
    assert select_with_hybrid_scoring(pool, cands, 100.0, 10.0) != Word("zzzzz")


def test_hybrid_score_truncates_each_term():
    assert hybrid_score(GuessMetrics(1.585, 1.0, 1), 100.0, 10.0) == 158 - 10
    assert hybrid_score(GuessMetrics(0.009, 1.0, 1), 100.0, 10.0) == -10
    assert hybrid_score(GuessMetrics(1.0, 1.0, 3), 100.0, 2.55) == 100 - 7

    # 150.99 and 150.01 truncate to the same score
    a = GuessMetrics(1.5099, 2.0, 2)
    b = GuessMetrics(1.5001, 1.5, 2)
    assert hybrid_score(a, 100.0, 10.0) == hybrid_score(b, 100.0, 10.0) == 130


def test_hybrid_score_does_not_saturate():
    m = GuessMetrics(1.0, 1.0, 10 ** 12)
    assert hybrid_score(m, 100.0, 10.0) == 100 - 10 ** 13


# --- candidate preference ---

def test_minimax_first_prefers_close_candidate():
    deficit = _entropy_deficit()
    assert select_minimax_first(ENDGAME_POOL, ENDGAME_CANDS, deficit + 1e-6) == CAND


def test_minimax_first_epsilon_is_strict():
    deficit = _entropy_deficit()
    assert select_minimax_first(ENDGAME_POOL, ENDGAME_CANDS, deficit) == SPLITTER
    assert select_minimax_first(ENDGAME_POOL, ENDGAME_CANDS, 0.2) == SPLITTER


def test_minimax_first_does_not_depend_on_pool_order_for_excluded_candidate():
    deficit = _entropy_deficit()
    assert select_minimax_first([CAND, SPLITTER], ENDGAME_CANDS, deficit) == SPLITTER


def test_minimax_first_gates_on_worst_case_before_entropy():
    # zzzzz splits these 1/3, bcdqq separates all four
    cands = W("zzzzz", "zbbbb", "zcccc", "zdddd")
    pool = [CAND, Word("bcdqq")]
    assert select_minimax_first(pool, cands, 10.0) == Word("bcdqq")


def test_candidate_preference_within_window():
    deficit = _entropy_deficit()
    assert select_with_candidate_preference(ENDGAME_POOL, ENDGAME_CANDS, deficit + 0.1) == CAND
    assert select_with_candidate_preference(ENDGAME_POOL, ENDGAME_CANDS, deficit) == SPLITTER


def test_candidate_preference_zero_epsilon_keeps_best_entropy():
    assert select_with_candidate_preference(ENDGAME_POOL, ENDGAME_CANDS, 0.0) == SPLITTER
    assert select_with_candidate_preference(ENDGAME_POOL, ENDGAME_CANDS, -1.0) == SPLITTER


def test_candidate_preference_picks_candidate_with_wide_window():
    pool = W("crane", "slate")
    cands = W("slate")
    assert select_with_candidate_preference(pool, cands, 10.0) == Word("slate")


@pytest.mark.parametrize("workers", [None, 1, 2])
def test_selection_independent_of_workers(workers):
    pool = W("crane", "slate", "irate", "crate", "grate", "zzzzz")
    cands = W("irate", "crate", "grate", "trace")
    assert select_with_hybrid_scoring(pool, cands, workers=workers) == \
        select_with_hybrid_scoring(pool, cands)


def test_rankers_prefer_sole_candidate_on_full_tie():
    pool = W("crane", "slate", "irate")
    cands = W("irate")
    assert entropy.select_best_guess(pool, cands)[0] == Word("irate")
    assert minimax.select_best_guess(pool, cands)[0] == Word("irate")
    assert select_with_expected_tiebreaker(pool, cands) == Word("irate")
    assert select_with_hybrid_scoring(pool, cands) == Word("irate")
    assert select_minimax_first(pool, cands, 0.0) == Word("irate")
