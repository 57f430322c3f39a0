"""
I/O utilities for batch checks.

Responsibilities:
- write_csv:     one row per submission (raw input, normalised word, outcome, alert text).
- write_manifest:dump a JSON manifest with config, word-list report and totals.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["root", "raw", "word", "accepted", "reason", "title", "message"]


def write_csv(rows: List[Dict], path: str, root: str) -> str:
    """
    Serialize a session's per-submission rows to CSV.

    Schema (columns):
      root, raw, word, accepted, reason, title, message

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow({"root": root, **{k: r.get(k, "") for k in FIELDS[1:]}})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (pool, dictionary, oracle, seed, words, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - root, num_submissions, accepted, score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
