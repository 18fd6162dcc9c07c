# apps/cli/run.py
"""
CLI entry point for running wordle_solver simulations.

This script:
  1) Validates the wordlists (prints counts + SHA, ensures answers ⊆ allowed).
  2) Loads the lists and instantiates the requested strategy.
  3) Runs a batch of games with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, wordlist hashes, summary, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_solver.datasets import validate_wordlists, pretty_summary, load_from_file
from wordle_solver.harness import run_case, summarize, WORDLE_MAX_TURNS
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_solver.solvers import AdaptiveConfig, create_strategy, get_strategy_ids


def build_parser() -> argparse.ArgumentParser:
    strategy_choices = ", ".join(get_strategy_ids())

    ap = argparse.ArgumentParser(description="wordle_solver: run strategy simulations")
    ap.add_argument("--strategy", default="adaptive",
                    help=f"strategy name (one of: {strategy_choices}; unknown names run adaptive)")
    ap.add_argument("--answers", default="data/answers.txt",
                    help="path to answers list (ground-truth pool)")
    ap.add_argument("--allowed", default="data/allowed.txt",
                    help="path to allowed guesses (should be a superset of answers)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, default=None,
                    help="processes per guess evaluation (0 = all CPUs; default serial)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )

    tiers = ap.add_argument_group("adaptive tiers (defaults are the tuned configuration)")
    tiers.add_argument("--pure-entropy-threshold", type=int)
    tiers.add_argument("--entropy-minimax-threshold", type=int)
    tiers.add_argument("--hybrid-threshold", type=int)
    tiers.add_argument("--minimax-first-threshold", type=int)
    tiers.add_argument("--minimax-epsilon", type=float)
    tiers.add_argument("--hybrid-entropy-weight", type=float)
    tiers.add_argument("--hybrid-minimax-penalty", type=float)
    return ap


def config_from_args(args: argparse.Namespace) -> AdaptiveConfig:
    return AdaptiveConfig().replace(
        pure_entropy_threshold=args.pure_entropy_threshold,
        entropy_minimax_threshold=args.entropy_minimax_threshold,
        hybrid_threshold=args.hybrid_threshold,
        minimax_first_threshold=args.minimax_first_threshold,
        minimax_epsilon=args.minimax_epsilon,
        hybrid_entropy_weight=args.hybrid_entropy_weight,
        hybrid_minimax_penalty=args.hybrid_minimax_penalty,
    )


def main(argv=None):
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)

    # 1) Validate wordlists and print a one-liner summary (counts, SHAs, subset check)
    rep = validate_wordlists(args.answers, args.allowed)
    print(pretty_summary(rep))

    # 2) Load lists into memory (invalid lines skipped)
    answers = load_from_file(args.answers)
    allowed = load_from_file(args.allowed)

    # 3) Instantiate strategy by name (unknown names fall back to adaptive)
    try:
        config = config_from_args(args).validate()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    strategy = create_strategy(args.strategy, config=config, workers=args.workers)

    # 4) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)

    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc=strategy.id, unit="game") if mode == "bar" else cases

    # 6) Run batch with live progress
    try:
        for idx, ans in enumerate(iterator, 1):
            # Derive a per-game seed so runs are reproducible and independent
            per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
            r = run_case(strategy, ans, allowed=allowed, answers=answers,
                         max_turns=WORDLE_MAX_TURNS, seed=per_seed)
            r["strategy_id"] = strategy.id
            results.append(r)

            if mode == "plain":
                now = time.time()
                if (now - last_print >= 1.0) or (idx == total):
                    elapsed = now - start
                    rate = (idx / elapsed) if elapsed > 0 else 0.0
                    remaining = (total - idx) / rate if rate > 0 else 0.0
                    pct = 100.0 * idx / max(1, total)
                    sys.stderr.write(
                        f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                    )
                    sys.stderr.flush()
                    last_print = now
    finally:
        strategy.close()

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 7) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "adaptive_config": vars(config) if strategy.id == "adaptive" else None,
        "wordlists": rep,
        "num_cases": len(results),
        "strategy_id": strategy.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"{strategy.id}: won {summary['wins']}/{summary['games']} "
          f"| mean guesses {summary['mean_guesses']:.4f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
