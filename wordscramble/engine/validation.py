"""
Word validation engine for one game of WordScramble.

This module answers the question: "Does this submission count?"
A submission is accepted iff, after normalisation:
  - it is non-empty
  - it hasn't been accepted earlier in this game         (is_original)
  - it can be spelled from the root word's letters       (is_possible)
  - the spell-check oracle knows it                      (is_real)

Checks run in that order and the first failure wins, so a word that is both
unspellable and made-up is reported as unspellable.

The engine holds no UI state: clearing the input box, animating the list or
showing an alert is the caller's business once it has the result.
"""

from __future__ import annotations

import random
from typing import List, Sequence, Set

from wordscramble.datasets.io import ConfigurationError
from .letters import can_spell, normalize
from .results import (
    ALREADY_USED,
    EMPTY,
    NOT_REAL,
    NOT_SPELLABLE,
    ValidationResult,
)

# Root word used when a pool is empty and the caller opted out of strict mode.
DEFAULT_ROOT_WORD = "silkworm"

# Language code handed to the spell-check oracle.
DEFAULT_LANGUAGE = "en"


class WordValidationEngine:
    """
    One game session: a root word plus the words accepted so far.

    Not shared between sessions; give each concurrent game its own engine.
    """

    def __init__(self, oracle, *, language: str = DEFAULT_LANGUAGE, seed: int | None = None):
        self.oracle = oracle
        self.language = language
        self.rng = random.Random(seed)
        self.root_word: str = ""
        # Most-recent-first for display; _seen mirrors it for O(1) membership.
        self._used: List[str] = []
        self._seen: Set[str] = set()

    # ---- game lifecycle ----

    def start_game(self, pool: Sequence[str], *, strict: bool = True) -> str:
        """
        Pick a new root word uniformly at random from `pool` and clear the used words.

        Blank entries are never picked. With an empty (or all-blank) pool this
        raises ConfigurationError, unless strict=False, in which case the game
        falls back to DEFAULT_ROOT_WORD.
        """
        words = [w.strip() for w in pool if w.strip()]
        if words:
            root = words[self.rng.randrange(len(words))]
        elif strict:
            raise ConfigurationError("word pool is empty; cannot choose a root word")
        else:
            root = DEFAULT_ROOT_WORD

        self.root_word = root
        self._used = []
        self._seen = set()
        return root

    @property
    def used_words(self) -> List[str]:
        """Accepted words, most recent first (copy)."""
        return list(self._used)

    @property
    def score(self) -> int:
        """Total letters across accepted words."""
        return sum(len(w) for w in self._used)

    # ---- the three checks ----

    def is_original(self, word: str) -> bool:
        return word not in self._seen

    def is_possible(self, word: str) -> bool:
        return can_spell(word, self.root_word)

    def is_real(self, word: str) -> bool:
        return self.oracle.is_real(word, self.language)

    # ---- submission ----

    def submit(self, raw: str) -> ValidationResult:
        """
        Validate one raw input string and record it if accepted.

        Rejections are returned, never raised, and leave the game untouched.
        Raises RuntimeError if no game has been started.
        """
        if not self.root_word:
            raise RuntimeError("start_game() must be called before submit()")

        word = normalize(raw)
        if not word:
            return ValidationResult.reject(word, EMPTY)
        if not self.is_original(word):
            return ValidationResult.reject(word, ALREADY_USED)
        if not self.is_possible(word):
            return ValidationResult.reject(word, NOT_SPELLABLE)
        if not self.is_real(word):
            return ValidationResult.reject(word, NOT_REAL)

        self._used.insert(0, word)
        self._seen.add(word)
        return ValidationResult.accept(word)
