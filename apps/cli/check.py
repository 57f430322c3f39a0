# apps/cli/check.py
"""
Batch-check a list of words against one WordScramble game.

This script:
  1) Validates the word lists (prints counts + SHA, checks pool ⊆ dictionary).
  2) Loads the pool and builds the requested spell-check oracle.
  3) Starts one game (random root from the pool, or --root) and submits every
     line of --words in order, with a progress indicator, then writes:
       - CSV:  one row per submission (outcome + alert text)
       - JSON: manifest with config, word-list report, git commit, totals
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import (
    default_dictionary_path,
    default_pool_path,
    load_pool,
    read_words,
    pretty_summary,
    validate_wordlists,
)
from wordscramble.engine import WordValidationEngine, DEFAULT_LANGUAGE
from wordscramble.harness.core import result_row
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.oracles import get_oracle_ids, load_oracle


def main():
    """
    Parse CLI args, validate word lists, run the submissions with progress, and write outputs.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="WordScramble — batch-check words against a root word")
    ap.add_argument("--words", required=True, help="file of submissions, one per line")
    ap.add_argument("--root", help="fixed root word (default: random pick from --pool)")
    ap.add_argument("--pool", default=str(default_pool_path()),
                    help="path to root-word pool (one word per line)")
    ap.add_argument("--dictionary", default=str(default_dictionary_path()),
                    help="path to dictionary used to decide if a word is real")
    ap.add_argument("--oracle", default="wordlist",
                    help=f"spell-check oracle id (one of: {oracle_choices})")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for root-word choice")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.pool, args.dictionary)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load lists and start the game; anything missing, unreadable or empty is fatal
    try:
        pool = [args.root] if args.root is not None else load_pool(args.pool)
        oracle = load_oracle(args.oracle, args.dictionary, language=DEFAULT_LANGUAGE)
        # Blank submissions are kept: they exercise the empty-input rejection.
        submissions = read_words(args.words, skip_blanks=False)
        engine = WordValidationEngine(oracle, seed=args.seed)
        root = engine.start_game(pool)
    except ValueError as e:  # ConfigurationError or unknown oracle id
        sys.exit(f"wordscramble: {e}")

    print(f"Root word: {root}")

    total = len(submissions)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    rows = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(submissions, ncols=80, desc="Checking", unit="word") if mode == "bar" else submissions

    for idx, raw in enumerate(iterator, 1):
        rows.append(result_row(raw, engine.submit(raw), root))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"check_{run_id}.csv"
    manifest_path = outdir / f"check_{run_id}_manifest.json"

    write_csv(rows, str(csv_path), root=root)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "root": root,
        "num_submissions": total,
        "accepted": sum(1 for r in rows if r["accepted"]),
        "score": engine.score,
        "used_words": engine.used_words,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Accepted {manifest['accepted']}/{total} | score {engine.score}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
