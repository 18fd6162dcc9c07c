from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .constraints import filter_candidates
from .io import write_csv, write_manifest, summarize

__all__ = ["run_case", "run_batch", "WORDLE_MAX_TURNS", "filter_candidates",
           "write_csv", "write_manifest", "summarize"]
