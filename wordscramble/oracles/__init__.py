from __future__ import annotations
from pathlib import Path
from typing import Iterable, List
from .base import BaseOracle, REGISTRY, register

from . import wordlist  # noqa: F401
from . import trie  # noqa: F401

from wordscramble.datasets.io import read_words


def create_oracle(oracle_id: str, words: Iterable[str] = (), *, language: str = "en") -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id, preloaded with `words`.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(words, language=language)


def load_oracle(oracle_id: str, path: Path | str, *, language: str = "en") -> BaseOracle:
    """
    Build an oracle from a dictionary file (one word per line).
    Raises ConfigurationError if the file is missing or unreadable.
    """
    return create_oracle(oracle_id, read_words(path), language=language)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
