"""
Guess metrics over a candidate set.

For a guess g, partition the CURRENT candidates by the feedback pattern each
would produce. From the bucket sizes {c_i} (n = sum c_i):

    entropy            H = -sum (c_i/n) * log2(c_i/n)        (bits, higher is better)
    expected_remaining E = sum (c_i/n) * c_i                 (lower is better)
    max_partition      M = max c_i                           (worst case, lower is better)

Buckets live in a dense 243-slot histogram indexed by pattern value
(np.bincount), never a dict, since the outcome space is small and fixed.
All three metrics come from the same histogram.

Whole pools are scored in blocks of guesses: one (block, n) pattern matrix,
then a single bincount over `pattern + 243 * row` gives every row's
histogram at once.
"""

from __future__ import annotations

import os
from concurrent.futures import Executor, ProcessPoolExecutor
from dataclasses import dataclass
from typing import ClassVar, List, Mapping, Optional, Sequence, Union

import numpy as np

from .scoring import PATTERN_COUNT, Pattern, letter_counts, pattern_matrix
from .word import WORD_LENGTH, Word

# Pattern cells per block (block_rows * n); bounds the working set to a few MB
BLOCK_CELLS = 1 << 22


@dataclass(frozen=True)
class GuessMetrics:
    entropy: float
    expected_remaining: float
    max_partition: int

    ZERO: ClassVar["GuessMetrics"]


GuessMetrics.ZERO = GuessMetrics(0.0, 0.0, 0)


def encode_words(words: Sequence[Word]) -> np.ndarray:
    """(n, 5) uint8 array of letter indexes; the engine's batch input format."""
    if not words:
        return np.zeros((0, WORD_LENGTH), dtype=np.uint8)
    raw = b"".join(w.chars for w in words)
    return (np.frombuffer(raw, dtype=np.uint8).reshape(-1, WORD_LENGTH) - ord("a")).astype(np.uint8)


def _as_codes(candidates) -> np.ndarray:
    if isinstance(candidates, np.ndarray):
        return candidates
    return encode_words(list(candidates))


def pattern_histograms(guess_codes: np.ndarray, candidate_codes: np.ndarray) -> np.ndarray:
    """(g, 243) int64 histograms, one row per guess."""
    guesses = np.asarray(guess_codes).reshape(-1, WORD_LENGTH)
    g, n = guesses.shape[0], candidate_codes.shape[0]
    hists = np.zeros((g, PATTERN_COUNT), dtype=np.int64)
    if g == 0 or n == 0:
        return hists

    counts = letter_counts(candidate_codes)
    step = max(1, BLOCK_CELLS // n)
    for start in range(0, g, step):
        block = guesses[start:start + step]
        rows = block.shape[0]
        patt = pattern_matrix(block, candidate_codes, counts).astype(np.intp)
        patt += (np.arange(rows, dtype=np.intp) * PATTERN_COUNT)[:, None]
        flat = np.bincount(patt.ravel(), minlength=rows * PATTERN_COUNT)
        hists[start:start + rows] = flat.reshape(rows, PATTERN_COUNT)
    return hists


def pattern_histogram(guess: Word, candidates: Sequence[Word]) -> np.ndarray:
    """Dense 243-slot count array: hist[p] = #candidates giving pattern value p."""
    return pattern_histograms(np.asarray(guess.codes), _as_codes(candidates))[0]


def _metrics_rows(hists: np.ndarray, total: int) -> List[GuessMetrics]:
    if total == 0:
        return [GuessMetrics.ZERO] * hists.shape[0]
    p = hists / total
    with np.errstate(divide="ignore"):
        logs = np.where(hists > 0, np.log2(p), 0.0)
    entropy = -(p * logs).sum(axis=1)
    expected = (p * hists).sum(axis=1)
    worst = hists.max(axis=1)
    return [
        GuessMetrics(entropy=float(h), expected_remaining=float(e), max_partition=int(m))
        for h, e, m in zip(entropy, expected, worst)
    ]


def calculate_entropy(guess: Word, candidates: Sequence[Word]) -> float:
    """Shannon entropy (bits) of the guess's feedback distribution; 0.0 if no candidates."""
    return calculate_metrics(guess, candidates).entropy


def calculate_metrics(guess: Word, candidates: Sequence[Word]) -> GuessMetrics:
    """Entropy, expected remaining and max partition from one histogram pass."""
    codes = _as_codes(candidates)
    n = codes.shape[0]
    if n == 0:
        return GuessMetrics.ZERO
    return _metrics_rows(pattern_histograms(np.asarray(guess.codes), codes), n)[0]


def shannon_entropy(pattern_counts: Mapping[Union[Pattern, int], int]) -> float:
    """
    Entropy from a sparse {pattern: count} mapping (for callers that already
    aggregated). Zero-count entries are skipped.
    """
    counts = np.array([c for c in pattern_counts.values() if c > 0], dtype=np.float64)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts / total
    return float(-(p * np.log2(p)).sum())


# ---- whole-pool evaluation ----

def resolve_workers(workers: Optional[int]) -> int:
    """None/1 -> serial; <= 0 -> one per CPU."""
    if workers is not None and workers <= 0:
        return os.cpu_count() or 1
    return workers or 1


def _score_chunk(guess_codes: np.ndarray, candidate_codes: np.ndarray) -> List[GuessMetrics]:
    return _metrics_rows(pattern_histograms(guess_codes, candidate_codes), candidate_codes.shape[0])


def score_pool(
        guess_pool: Sequence[Word],
        candidates: Sequence[Word],
        *,
        workers: Optional[int] = None,
        executor: Optional[Executor] = None,
) -> List[GuessMetrics]:
    """
    Metrics for every guess in `guess_pool`, in pool order.

    Candidates are encoded once. With workers > 1 the pool is cut into
    contiguous chunks scored in separate processes; results are re-joined in
    input order, so output never depends on how the work was split. Pass a
    long-lived `executor` to avoid starting processes on every call.
    """
    guess_codes = encode_words(list(guess_pool))
    cand_codes = encode_words(list(candidates))
    if cand_codes.shape[0] == 0:
        return [GuessMetrics.ZERO] * guess_codes.shape[0]

    workers = resolve_workers(workers)
    if workers == 1 or guess_codes.shape[0] < 2 * workers:
        return _score_chunk(guess_codes, cand_codes)

    chunks = np.array_split(guess_codes, workers)
    if executor is None:
        with ProcessPoolExecutor(max_workers=workers) as own:
            return _join(own, chunks, cand_codes)
    return _join(executor, chunks, cand_codes)


def _join(executor: Executor, chunks, cand_codes: np.ndarray) -> List[GuessMetrics]:
    out: List[GuessMetrics] = []
    for part in executor.map(_score_chunk, chunks, [cand_codes] * len(chunks)):
        out.extend(part)
    return out
