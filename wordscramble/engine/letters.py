"""
Letter bookkeeping for spellability.

A candidate is spellable from a root word when its letters, counted with
multiplicity, fit inside the root word's letters:

    can_spell("silk", "silkworm")      -> True
    can_spell("silks", "silkworm")     -> False   (root has a single 's')
    can_spell("worm", "silkworm")      -> True

Comparison is case-insensitive; both sides are lower-cased first.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict


def normalize(raw: str) -> str:
    """Lower-case and trim surrounding whitespace (spaces, tabs, newlines)."""
    return raw.lower().strip()


def can_spell(word: str, root: str) -> bool:
    """
    Return True if every letter of `word` can be taken from `root`.

    Walks `word` left to right and removes one matching occurrence from a
    working copy of the root's letters; the first letter with no remaining
    match fails the check.
    """
    available = list(root.lower())
    for ch in word.lower():
        try:
            available.remove(ch)
        except ValueError:
            return False
    return True


def missing_letters(word: str, root: str) -> Dict[str, int]:
    """
    Letters `word` needs beyond what `root` offers, with the shortfall count.

    Empty dict <=> can_spell(word, root).
    """
    need = Counter(word.lower())
    have = Counter(root.lower())
    return {ch: n - have[ch] for ch, n in need.items() if n > have[ch]}
