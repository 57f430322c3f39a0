"""
Word-list files: one word per line, UTF-8, newline-separated.

read_words is the single place that turns a file into words, so every caller
(pool, dictionary, batch submissions, validator, tooling) gets the same rules:
  - entries are trimmed of surrounding whitespace (CR/LF included)
  - blank entries are dropped unless skip_blanks=False
  - a missing, unreadable or non-UTF-8 file raises ConfigurationError
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


class ConfigurationError(ValueError):
    """A word list (pool or dictionary) is missing, unreadable or unusable."""


def read_words(p: Path | str, *, skip_blanks: bool = True) -> List[str]:
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"word list not found: {p}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"word list is not UTF-8: {p} ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ConfigurationError(f"word list unreadable: {p} ({e.strerror or e})") from e

    words = [ln.strip() for ln in text.split("\n")]
    # A trailing newline ends the last line; it doesn't start a blank one.
    if words and not words[-1] and text.endswith("\n"):
        words.pop()
    return [w for w in words if w] if skip_blanks else words


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write trimmed, non-blank words one per line with a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{w.strip()}\n" for w in words if w.strip()), encoding="utf-8")
    return str(p)
