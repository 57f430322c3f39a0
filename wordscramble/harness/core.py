"""
Session harness primitives.

- run_session: start one game and push a scripted list of submissions through it.
- result_row:  flatten a ValidationResult into a CSV/JSON-friendly dict.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence

from wordscramble.engine import WordValidationEngine, ValidationResult, alert_for


def result_row(raw: str, result: ValidationResult, root_word: str) -> Dict:
    """One submission as a flat dict (title/message empty when accepted)."""
    title, message = alert_for(result, root_word) or ("", "")
    return {
        "raw": raw,
        "word": result.word,
        "accepted": result.accepted,
        "reason": result.reason or "",
        "title": title,
        "message": message,
    }


def run_session(
        engine: WordValidationEngine,
        submissions: Iterable[str],
        *,
        pool: Sequence[str] | None = None,
        root: str | None = None,
) -> Dict:
    """
    Play one game with a fixed list of inputs.

    Args:
        engine:       the engine to drive (its state is reset)
        submissions:  raw input strings, submitted in order
        pool:         root-word pool to pick from
        root:         fixed root word; takes precedence over `pool`

    Returns:
        dict with keys:
            root (str), results (list[dict]), accepted (int), score (int),
            used_words (list[str]), time_ms (float)
    """
    if root is not None:
        engine.start_game([root])
    else:
        engine.start_game(pool or [])

    rows: List[Dict] = []
    t0 = time.perf_counter()
    for raw in submissions:
        res = engine.submit(raw)
        rows.append(result_row(raw, res, engine.root_word))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "root": engine.root_word,
        "results": rows,
        "accepted": sum(1 for r in rows if r["accepted"]),
        "score": engine.score,
        "used_words": engine.used_words,
        "time_ms": dt,
    }
