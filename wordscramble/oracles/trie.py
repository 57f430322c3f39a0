"""
Trie oracle.

Strategy:
  - Store the dictionary as a character trie of nested dicts.
  - A word is known iff walking its letters ends on a node marked terminal.

Notes:
  - Also answers prefix queries, which a hint feature or an interactive UI
    can use to tell the player early that nothing starts with what they typed.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional
from .base import BaseOracle, register

# Key that marks "a word ends here"; can't collide with a single letter.
_END = "$end"


@register
class TrieOracle(BaseOracle):
    id = "trie"
    name = "Trie"

    def load(self, words: Iterable[str]) -> None:
        self.root: Dict = {}
        self.size = 0
        for w in words:
            node = self.root
            for ch in w:
                node = node.setdefault(ch, {})
            if _END not in node:
                node[_END] = True
                self.size += 1

    def _walk(self, s: str) -> Optional[Dict]:
        node = self.root
        for ch in s.lower():
            node = node.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and _END in node

    def has_prefix(self, prefix: str) -> bool:
        """True if some dictionary word starts with `prefix`."""
        return self._walk(prefix) is not None

    def __len__(self) -> int:
        return self.size
