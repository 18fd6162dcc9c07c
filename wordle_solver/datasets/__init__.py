from .validator import validate_wordlists, pretty_summary
from .loader import load_from_file, words_from_slice, read_lines, write_lines

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines",
    "load_from_file", "words_from_slice",
]
