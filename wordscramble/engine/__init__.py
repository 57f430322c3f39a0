from .letters import can_spell, missing_letters, normalize
from .results import ValidationResult, alert_for
from .validation import WordValidationEngine, DEFAULT_ROOT_WORD, DEFAULT_LANGUAGE

__all__ = [
    "can_spell",
    "missing_letters",
    "normalize",
    "ValidationResult",
    "alert_for",
    "WordValidationEngine",
    "DEFAULT_ROOT_WORD",
    "DEFAULT_LANGUAGE",
]
