"""
Experiment harness core primitives.

- run_case:  run a single puzzle (one hidden answer) with a given strategy.
- run_batch: run many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The harness owns the game state: it keeps the history, filters candidates
after each turn and hands the strategy a fresh (pool, candidates) pair.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence, Tuple

from wordle_solver.engine import Pattern, Word
from .constraints import filter_candidates

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a turn budget other than 6."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        strategy,
        answer: Word,
        *,
        allowed: Sequence[Word],
        answers: Sequence[Word],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the strategy wins or the turn budget is exhausted.

    Args:
        strategy:   a BaseStrategy (anything with reset(seed=) and next_guess(state))
        answer:     the hidden word for this case
        allowed:    all words permitted as guesses (ideally a superset of answers)
        answers:    the official answer pool (candidate universe)
        max_turns:  must be 6 (Wordle rule; enforced)
        seed:       RNG seed to make random picks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)] as strings), answer (str),
            turns (per guess: guess, pattern, candidates left before it, stage)
    """
    _assert_wordle_turns(max_turns)
    strategy.reset(seed=seed)

    allowed = list(allowed)
    candidates: List[Word] = list(answers)
    history: List[Tuple[Word, Pattern]] = []
    turns: List[Dict] = []

    t0 = time.perf_counter()
    success = False
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": allowed,
        }
        guess = strategy.next_guess(state)
        if guess is None:
            # Nothing pickable from this pool: count as a loss
            break

        patt = Pattern.calculate(guess, answer)
        history.append((guess, patt))
        turns.append({
            "guess": guess.text,
            "pattern": str(patt),
            "candidates": len(candidates),
            "stage": strategy.stage(len(candidates)),
        })
        if patt.is_win():
            success = True
            break

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(candidates, [(guess, patt)])

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success,
        "guesses": len(history) if success else WORDLE_MAX_TURNS,
        "time_ms": dt,
        "history": [(g.text, str(p)) for g, p in history],
        "turns": turns,
        "answer": answer.text,
    }


def run_batch(
        strategy,
        answers: Sequence[Word],
        *,
        allowed: Sequence[Word],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
        progress=None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases. `progress` optionally wraps
    the case iterable (e.g. tqdm).
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    cases = progress(pool) if progress else pool
    out: List[Dict] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            strategy, ans, allowed=allowed, answers=answers,
            max_turns=WORDLE_MAX_TURNS, seed=case_seed,
        )
        r["strategy_id"] = strategy.id
        out.append(r)
    return out
