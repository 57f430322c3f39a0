"""
Word-list validator for WordScramble.

What this module does:
- Validate a pair of word lists: start.txt (root-word pool) and dictionary.txt
  (the words the spell-check oracle knows).
- Enforce formatting rules (lowercase, a–z only, one per line).
- Count blank, invalid and duplicate lines; compute SHA-256 of the raw files.
- Check that every root word is itself in the dictionary.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("wordscramble/datasets/data/start.txt",
                             "wordscramble/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import ConfigurationError, read_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    blank_lines: int     # empty/whitespace-only lines
    invalid_lines: int   # non-blank lines that aren't a clean lowercase word


@dataclass
class ValidationReport:
    """Top-level validation result for the (pool, dictionary) pair."""
    pool: FileReport
    dictionary: FileReport
    pool_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one word per line
      - must be lowercase a–z after trimming
      - blank lines are tallied separately (harmless, but a root word can never be blank)

    Returns:
      (valid_words, blank_count, invalid_count)

    Raises ConfigurationError if the file is missing, unreadable or not UTF-8.
    """
    valid: List[str] = []
    blank = 0
    invalid = 0

    for w in read_words(path, skip_blanks=False):
        if not w:
            blank += 1
        elif w.lower() == w and w.isalpha() and w.isascii():
            valid.append(w)
        else:
            invalid += 1

    return valid, blank, invalid


def _file_report(path: Path, words: List[str], blank: int, invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        blank_lines=blank,
        invalid_lines=invalid,
    )


def _failed_report(path: Path) -> FileReport:
    return FileReport(str(path), path.exists(), 0, "", 0, 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(pool_path: str, dictionary_path: str) -> Dict:
    """
    Validate the root-word pool and the dictionary.

    Never raises for bad files: a missing, unreadable or non-UTF-8 list is
    reported in `issues` with passed=False.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, blank/invalid/duplicate diagnostics
          - pool ⊆ dictionary check
          - `passed` boolean (strict: non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    pool_p = Path(pool_path)
    dict_p = Path(dictionary_path)

    loaded = {}
    for label, p in (("pool", pool_p), ("dictionary", dict_p)):
        try:
            loaded[label] = _load_and_check(p)
        except ConfigurationError as e:
            issues.append(f"{label}: {e}")

    # Early return if either file can't be used
    if len(loaded) < 2:
        rep = ValidationReport(
            pool=(_file_report(pool_p, *loaded["pool"]) if "pool" in loaded
                  else _failed_report(pool_p)),
            dictionary=(_file_report(dict_p, *loaded["dictionary"]) if "dictionary" in loaded
                        else _failed_report(dict_p)),
            pool_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    pool, pool_blank, pool_invalid = loaded["pool"]
    words, dict_blank, dict_invalid = loaded["dictionary"]

    pool_report = _file_report(pool_p, pool, pool_blank, pool_invalid)
    dict_report = _file_report(dict_p, words, dict_blank, dict_invalid)

    pool_set = set(pool)
    subset_ok = pool_set.issubset(set(words))
    if not subset_ok:
        # A few examples are enough to debug
        missing = sorted(pool_set - set(words))[:5]
        issues.append(f"pool not subset of dictionary (e.g., {missing})")

    if pool_report.count == 0:
        issues.append("pool file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if pool_invalid:
        issues.append(f"pool has {pool_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if pool_blank:
        issues.append(f"pool has {pool_blank} blank line(s)")

    if pool_report.count != pool_report.unique_count:
        issues.append("pool contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    # Blanks and duplicates are reported but don't fail the check.
    passed = (
            subset_ok
            and pool_invalid == 0
            and dict_invalid == 0
            and pool_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        pool=pool_report,
        dictionary=dict_report,
        pool_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        pool=24 (uniq=24, sha=abc123...) | dictionary=612 (uniq=612, sha=def456...) | pool⊆dictionary=True | OK
    """
    a = report["pool"]
    b = report["dictionary"]
    subset = report["pool_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"pool={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| pool⊆dictionary={subset} | {status}"
    )
