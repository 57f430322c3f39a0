from collections import Counter

import pytest
from wordscramble.datasets import ConfigurationError
from wordscramble.engine import (
    WordValidationEngine,
    ValidationResult,
    alert_for,
    can_spell,
    missing_letters,
    normalize,
)
from wordscramble.oracles import create_oracle

WORDS = ["silk", "worm", "worms", "milk", "slim", "silkworm", "silkworms", "xyzzy", "owl", "cat"]


def _engine(root="silkworm", words=WORDS):
    eng = WordValidationEngine(create_oracle("wordlist", words), seed=1)
    eng.start_game([root])
    return eng


# --- spellability (multiset subset) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("worm", "silkworm", True),
    ("silkworm", "silkworm", True),
    ("silks", "silkworm", False),   # one 's' in root
    ("mill", "silkworm", False),    # one 'l' in root
    ("zzzz", "silkworm", False),
    ("SILK", "silkworm", True),     # case-insensitive
    ("silk", "SilkWorm", True),
    ("", "silkworm", True),
    ("letter", "letter", True),
    ("settle", "letter", False),    # root has no 's'
])
def test_can_spell(word, root, expected):
    assert can_spell(word, root) is expected


@pytest.mark.parametrize("word,root", [
    ("silk", "silkworm"),
    ("silks", "silkworm"),
    ("banana", "bandana"),
    ("bandana", "banana"),
    ("tattle", "letter"),
    ("eel", "letter"),
])
def test_can_spell_matches_letter_counts(word, root):
    need, have = Counter(word), Counter(root)
    assert can_spell(word, root) == all(need[ch] <= have[ch] for ch in need)
    assert (missing_letters(word, root) == {}) == can_spell(word, root)


def test_missing_letters_reports_shortfall():
    assert missing_letters("silkworms", "silkworm") == {"s": 1}
    assert missing_letters("zzzz", "silkworm") == {"z": 4}


def test_normalize():
    assert normalize(" Cat \n") == "cat"
    assert normalize("\t\n ") == ""


# --- submit: the silkworm walkthrough ---
def test_submit_silkworm_scenario():
    eng = _engine()
    assert eng.submit("silk") == ValidationResult.accept("silk")
    assert eng.submit("SILK").reason == "already_used"
    assert eng.submit("silkworms").reason == "not_spellable"
    assert eng.submit("zzzz").reason == "not_spellable"
    # spellability is checked before realness
    assert eng.submit("xyzzy").reason == "not_spellable"
    assert eng.used_words == ["silk"]


def test_submit_not_real():
    eng = _engine()
    res = eng.submit("mirk")  # spellable, not in dictionary
    assert res.accepted is False
    assert res.reason == "not_real"
    assert eng.used_words == []


@pytest.mark.parametrize("raw", ["", "   ", "\n", " \t\n "])
def test_submit_empty_always_rejected(raw):
    eng = _engine()
    eng.submit("silk")
    res = eng.submit(raw)
    assert res.reason == "empty"
    assert res.word == ""
    assert eng.used_words == ["silk"]


def test_submit_normalises_case_and_whitespace():
    eng = _engine(root="act", words=["cat"])
    assert eng.submit(" Cat \n").accepted
    assert eng.submit("cat").reason == "already_used"
    assert eng.submit("CAT").reason == "already_used"


@pytest.mark.parametrize("raw,reason", [
    ("zzzz", "not_spellable"),
    ("mirk", "not_real"),
    ("", "empty"),
])
def test_rejections_are_stable(raw, reason):
    eng = _engine()
    assert eng.submit(raw).reason == reason
    assert eng.submit(raw).reason == reason


def test_used_words_most_recent_first_and_score():
    eng = _engine()
    for w in ["silk", "worm", "milk"]:
        assert eng.submit(w).accepted
    assert eng.used_words == ["milk", "worm", "silk"]
    assert eng.score == 12


def test_root_word_itself_is_accepted():
    # Not special-cased: the root word counts if it is a real word.
    eng = _engine()
    assert eng.submit("silkworm").accepted
    assert eng.submit("Silkworm").reason == "already_used"


def test_submit_before_start_game_raises():
    eng = WordValidationEngine(create_oracle("wordlist", WORDS))
    with pytest.raises(RuntimeError):
        eng.submit("silk")


# --- start_game ---
def test_start_game_resets_used_words():
    eng = _engine()
    assert eng.submit("silk").accepted
    eng.start_game(["silkworm"])
    assert eng.used_words == []
    assert eng.submit("silk").accepted


def test_start_game_picks_trimmed_non_blank_member():
    pool = ["", "  ", " silkworm\n", "dinosaur ", "\t"]
    eng = WordValidationEngine(create_oracle("wordlist", WORDS), seed=7)
    for _ in range(20):
        root = eng.start_game(pool)
        assert root in {"silkworm", "dinosaur"}


def test_start_game_is_reproducible_with_seed():
    pool = ["silkworm", "dinosaur", "elephant", "hospital", "computer"]
    a = WordValidationEngine(create_oracle("wordlist", WORDS), seed=42)
    b = WordValidationEngine(create_oracle("wordlist", WORDS), seed=42)
    assert [a.start_game(pool) for _ in range(5)] == [b.start_game(pool) for _ in range(5)]


@pytest.mark.parametrize("pool", [[], [""], ["  ", "\n"]])
def test_start_game_empty_pool_is_fatal(pool):
    eng = WordValidationEngine(create_oracle("wordlist", WORDS))
    with pytest.raises(ConfigurationError):
        eng.start_game(pool)


def test_start_game_empty_pool_fallback_when_not_strict():
    eng = WordValidationEngine(create_oracle("wordlist", WORDS))
    assert eng.start_game([], strict=False) == "silkworm"
    assert eng.submit("silk").accepted


# --- results / alerts ---
def test_alert_for_each_reason():
    assert alert_for(ValidationResult.accept("silk"), "silkworm") is None
    assert alert_for(ValidationResult.reject("silk", "already_used"), "silkworm")[0] == "Word used already"
    title, message = alert_for(ValidationResult.reject("zzzz", "not_spellable"), "silkworm")
    assert title == "Word not possible"
    assert "'silkworm'" in message
    assert alert_for(ValidationResult.reject("mirk", "not_real"), "silkworm")[0] == "Word not recognized"
    assert alert_for(ValidationResult.reject("", "empty"), "silkworm")[0] == "Word is empty"


def test_reject_unknown_reason():
    with pytest.raises(ValueError):
        ValidationResult.reject("silk", "too_short")


def test_alert_for_unmapped_reason_raises():
    # Built directly, bypassing reject()'s reason check.
    with pytest.raises(ValueError):
        alert_for(ValidationResult("silk", "too_short"), "silkworm")
