from __future__ import annotations
import re
from typing import Dict, Iterable, Optional, Tuple, Type

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}

# A "word" inside checked text: a run of letters (apostrophes allowed inside).
_TOKEN = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that spell-check oracles inherit ----
class BaseOracle:
    """
    Spell-check capability for a single language.

    Subclasses only need `load` and `contains`; range scanning and the
    is_real() shortcut are shared.
    """
    id = "base"
    name = "Base"

    def __init__(self, words: Iterable[str] = (), *, language: str = "en"):
        self.language = language
        self.load(w.strip().lower() for w in words if w.strip())

    def load(self, words: Iterable[str]) -> None:
        raise NotImplementedError("Override in subclass")

    def contains(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def misspelled_range(self, text: str, language: str) -> Optional[Tuple[int, int]]:
        """
        Return (start, length) of the first unknown word in `text`, or None if
        every word is known.

        Raises ValueError if `language` isn't the oracle's language.
        """
        if language != self.language:
            raise ValueError(f"{self.id} oracle checks {self.language!r}, not {language!r}")
        for m in _TOKEN.finditer(text):
            if not self.contains(m.group().lower()):
                return m.start(), len(m.group())
        return None

    def is_real(self, word: str, language: str) -> bool:
        """True iff no part of `word` is reported as misspelled."""
        return self.misspelled_range(word, language) is None
