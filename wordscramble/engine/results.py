"""
Outcome of a single submission and its user-facing alert text.

A submission is either accepted or rejected for exactly one reason. Reasons
are plain strings so they drop straight into CSV rows and JSON manifests:

  - 'empty'          : nothing left after normalisation
  - 'already_used'   : accepted earlier in this game
  - 'not_spellable'  : needs letters the root word doesn't have (or not enough of them)
  - 'not_real'       : the spell-check oracle doesn't recognise it
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

RejectReason = Literal["empty", "already_used", "not_spellable", "not_real"]

EMPTY: RejectReason = "empty"
ALREADY_USED: RejectReason = "already_used"
NOT_SPELLABLE: RejectReason = "not_spellable"
NOT_REAL: RejectReason = "not_real"

# Order in which submit() runs its checks.
REASONS: Tuple[RejectReason, ...] = (EMPTY, ALREADY_USED, NOT_SPELLABLE, NOT_REAL)


@dataclass(frozen=True)
class ValidationResult:
    word: str                            # normalised candidate
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, word: str) -> "ValidationResult":
        return cls(word=word)

    @classmethod
    def reject(cls, word: str, reason: RejectReason) -> "ValidationResult":
        if reason not in REASONS:
            raise ValueError(f"Unknown reject reason: {reason!r}. Available: {list(REASONS)}")
        return cls(word=word, reason=reason)


def alert_for(result: ValidationResult, root_word: str) -> Optional[Tuple[str, str]]:
    """
    Map a result to the (title, message) pair shown to the player.

    Accepted results have no alert and return None.
    """
    if result.accepted:
        return None
    if result.reason == EMPTY:
        return "Word is empty", "Type a word before submitting."
    if result.reason == ALREADY_USED:
        return "Word used already", "Be more original!"
    if result.reason == NOT_SPELLABLE:
        return "Word not possible", f"You can't spell that word from '{root_word}'!"
    if result.reason == NOT_REAL:
        return "Word not recognized", "You can't just make them up, you know!"
    raise ValueError(f"No alert for reject reason: {result.reason!r}")
