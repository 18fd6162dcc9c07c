"""
Run outputs: one CSV row per game, a JSON manifest per run.

The CSV carries, for every turn, what the strategy played and why:

    guess_i  the word played on turn i
    patt_i   its feedback ('G' / 'Y' / '-'), prefixed with an apostrophe so
             spreadsheets keep strings like "-GYY-" as text
    left_i   candidates remaining when the guess was chosen
    stage_i  the rule that chose it (adaptive tier, hybrid phase, strategy id)
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List

BASE_COLUMNS = ["strategy", "answer", "success", "guesses", "time_ms"]
TURN_FIELDS = ("guess", "patt", "left", "stage")


def csv_columns(max_turns: int) -> List[str]:
    return BASE_COLUMNS + [f"{f}_{t}" for t in range(1, max_turns + 1) for f in TURN_FIELDS]


def _turn_cells(turn: Dict) -> Dict[str, object]:
    return {
        "guess": turn["guess"],
        "patt": "'" + turn["pattern"],
        "left": turn["candidates"],
        "stage": turn["stage"],
    }


def result_row(result: Dict, max_turns: int) -> Dict[str, object]:
    """Flatten one run_case result; turns past the end of the game stay blank."""
    row: Dict[str, object] = dict.fromkeys(csv_columns(max_turns), "")
    row.update(
        strategy=result.get("strategy_id", "?"),
        answer=result["answer"],
        success=result["success"],
        guesses=result["guesses"],
        time_ms=round(float(result["time_ms"]), 3),
    )
    for t, turn in enumerate(result.get("turns", [])[:max_turns], start=1):
        for field, value in _turn_cells(turn).items():
            row[f"{field}_{t}"] = value
    return row


def write_csv(results: Iterable[Dict], path: str, max_turns: int) -> str:
    """Write one row per game (see module docstring); returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=csv_columns(max_turns))
        w.writeheader()
        w.writerows(result_row(r, max_turns) for r in results)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Batch statistics for the manifest and console:
    win rate, mean guesses over wins, the guess-count histogram, and how
    many guesses each stage chose across all games.
    """
    n = len(results)
    wins = [r["guesses"] for r in results if r["success"]]
    stages = Counter(t["stage"] for r in results for t in r.get("turns", []))
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": len(wins) / n if n else 0.0,
        "mean_guesses": sum(wins) / len(wins) if wins else 0.0,
        "distribution": dict(sorted(Counter(wins).items())),
        "stage_usage": dict(stages.most_common()),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump run metadata (config, word-list report, summary) as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return f"{dt.datetime.now(dt.timezone.utc):%Y%m%dT%H%M%SZ}"


def git_commit_or_unknown() -> str:
    """Short HEAD hash, or 'unknown' outside a git checkout."""
    try:
        done = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return done.stdout.strip() or "unknown"
