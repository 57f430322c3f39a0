"""
Word-list oracle.

Strategy:
  - Keep every dictionary word in a set (lower-cased).
  - A word is known iff it is in the set.

Notes:
  - This is the default oracle for the CLIs; the bundled dictionary.txt is
    small enough that a set is all we need.
"""

from __future__ import annotations

from typing import Iterable, Set
from .base import BaseOracle, register


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Word List"

    def load(self, words: Iterable[str]) -> None:
        self.words: Set[str] = set(words)

    def contains(self, word: str) -> bool:
        return word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)
