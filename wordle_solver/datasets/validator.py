"""
Dataset validator for wordle_solver.

What this module does:
- Validate a pair of word lists: answers (ground-truth pool) and allowed (guess universe).
- Run every non-blank line through Word(...) and tally rejects by error kind
  (InvalidLength / NonAscii / InvalidCharacters).
- Detect duplicates; compute SHA-256 of the raw files.
- Check that answers ⊆ allowed.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_solver.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/answers.txt", "data/allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_solver.engine import Word, WordError, WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # non-blank lines rejected by Word(...)
    blank_lines: int = 0
    rejects: Dict[str, int] = field(default_factory=dict)  # error kind -> count


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, allowed) pair."""
    N: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[Word], int, Dict[str, int]]:
    """
    Load words from a text file through the Word gate.

    Returns:
      (valid_words, blank_count, rejects_by_kind)
    """
    valid: List[Word] = []
    blank = 0
    rejects: Dict[str, int] = {}

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            try:
                valid.append(Word(w))
            except WordError as e:
                kind = type(e).__name__
                rejects[kind] = rejects.get(kind, 0) + 1

    return valid, blank, rejects


def _file_report(p: Path, words: List[Word], blank: int, rejects: Dict[str, int]) -> FileReport:
    return FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=sum(rejects.values()),
        blank_lines=blank,
        rejects=rejects,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed word lists.

    Returns a JSON-serializable dictionary (see ValidationReport schema) with
    counts, SHA-256, invalid/duplicate diagnostics, the answers ⊆ allowed
    check, a strict `passed` flag and a list of `issues`.
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    all_p = Path(allowed_path)

    ans_exists = ans_p.exists()
    all_exists = all_p.exists()

    # Early return if either file is missing
    if not ans_exists or not all_exists:
        if not ans_exists:
            issues.append(f"answers file not found: {answers_path}")
        if not all_exists:
            issues.append(f"allowed file not found: {allowed_path}")
        rep = ValidationReport(
            N=WORD_LENGTH,
            answers=FileReport(answers_path, ans_exists, 0, "", 0, 0),
            allowed=FileReport(allowed_path, all_exists, 0, "", 0, 0),
            answers_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    answers, ans_blank, ans_rejects = _load_and_check(ans_p)
    allowed, all_blank, all_rejects = _load_and_check(all_p)

    ans_report = _file_report(ans_p, answers, ans_blank, ans_rejects)
    all_report = _file_report(all_p, allowed, all_blank, all_rejects)

    answers_set = set(answers)
    allowed_set = set(allowed)

    subset_ok = answers_set.issubset(allowed_set)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = sorted(w.text for w in answers_set - allowed_set)[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")
    if all_report.count == 0:
        issues.append("allowed file contains 0 valid words")

    for label, rep_ in (("answers", ans_report), ("allowed", all_report)):
        if rep_.invalid_lines:
            kinds = ", ".join(f"{k}={v}" for k, v in sorted(rep_.rejects.items()))
            issues.append(f"{label} has {rep_.invalid_lines} invalid line(s) ({kinds})")
        if rep_.count != rep_.unique_count:
            issues.append(f"{label} contains duplicate lines")

    # Strict pass criteria: non-empty + no invalids + subset ok
    passed = (
            subset_ok
            and ans_report.invalid_lines == 0
            and all_report.invalid_lines == 0
            and ans_report.count > 0
            and all_report.count > 0
    )

    rep = ValidationReport(
        N=WORD_LENGTH,
        answers=ans_report,
        allowed=all_report,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
