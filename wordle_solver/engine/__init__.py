from .word import Word, WordError, InvalidLength, NonAscii, InvalidCharacters, WORD_LENGTH
from .scoring import (
    Pattern, Feedback, score, pattern_codes, pattern_matrix, letter_counts, PATTERN_COUNT, ALL_CORRECT,
)
from .metrics import (
    GuessMetrics,
    calculate_entropy,
    calculate_metrics,
    shannon_entropy,
    pattern_histogram,
    pattern_histograms,
    encode_words,
    resolve_workers,
    score_pool,
)

__all__ = [
    "Word", "WordError", "InvalidLength", "NonAscii", "InvalidCharacters", "WORD_LENGTH",
    "Pattern", "Feedback", "score", "pattern_codes", "pattern_matrix", "letter_counts",
    "PATTERN_COUNT", "ALL_CORRECT",
    "GuessMetrics", "calculate_entropy", "calculate_metrics", "shannon_entropy",
    "pattern_histogram", "pattern_histograms", "encode_words", "resolve_workers", "score_pool",
]
