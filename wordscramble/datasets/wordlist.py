"""
Word-list provider: the pool of root words a game can start from.

The pool is a UTF-8 text resource, one word per line, shipped with the
package as data/start.txt. A missing, unreadable or empty pool is a
configuration problem and is reported up front as ConfigurationError rather
than papered over with a default word.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .io import ConfigurationError, read_words

DATA_DIR = Path(__file__).resolve().parent / "data"
POOL_FILENAME = "start.txt"
DICTIONARY_FILENAME = "dictionary.txt"


def default_pool_path() -> Path:
    return DATA_DIR / POOL_FILENAME


def default_dictionary_path() -> Path:
    return DATA_DIR / DICTIONARY_FILENAME


def load_pool(path: Path | str | None = None, *, skip_blanks: bool = True) -> List[str]:
    """
    Load the root-word pool (defaults to the bundled start.txt).

    Raises ConfigurationError when the pool is missing, unreadable or holds no words.
    """
    p = Path(path) if path is not None else default_pool_path()
    words = read_words(p, skip_blanks=skip_blanks)
    if not any(words):
        raise ConfigurationError(f"word list contains no words: {p}")
    return words
