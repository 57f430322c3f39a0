import pytest
from wordscramble.datasets import ConfigurationError
from wordscramble.oracles import create_oracle, get_oracle_ids, load_oracle
from wordscramble.oracles.base import BaseOracle, register

WORDS = ["silk", "Worm", "silkworm", " owl \n", "", "don't"]


@pytest.mark.parametrize("oracle_id", ["wordlist", "trie"])
def test_is_real(oracle_id):
    o = create_oracle(oracle_id, WORDS)
    assert o.is_real("silk", "en") is True
    assert o.is_real("SILK", "en") is True
    assert o.is_real("worm", "en") is True     # stored lower-cased
    assert o.is_real("owl", "en") is True      # stored trimmed
    assert o.is_real("sil", "en") is False     # prefix only
    assert o.is_real("silks", "en") is False
    assert len(o) == 5


@pytest.mark.parametrize("oracle_id", ["wordlist", "trie"])
def test_misspelled_range(oracle_id):
    o = create_oracle(oracle_id, WORDS)
    assert o.misspelled_range("silk worm", "en") is None
    assert o.misspelled_range("silk wrom owl", "en") == (5, 4)
    assert o.misspelled_range("don't", "en") is None


@pytest.mark.parametrize("oracle_id", ["wordlist", "trie"])
def test_wrong_language_raises(oracle_id):
    o = create_oracle(oracle_id, WORDS)
    with pytest.raises(ValueError):
        o.is_real("silk", "fr")


def test_trie_has_prefix():
    o = create_oracle("trie", WORDS)
    assert o.has_prefix("silkw")
    assert o.has_prefix("")
    assert not o.has_prefix("silkx")


def test_registry():
    assert get_oracle_ids() == ["trie", "wordlist"]
    with pytest.raises(ValueError):
        create_oracle("aspell")


def test_register_rejects_bad_ids():
    class Nameless(BaseOracle):
        id = ""

    class Duplicate(BaseOracle):
        id = "wordlist"

    with pytest.raises(ValueError):
        register(Nameless)
    with pytest.raises(ValueError):
        register(Duplicate)


def test_load_oracle_from_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text("silk\nworm\n\n", encoding="utf-8")
    o = load_oracle("trie", p)
    assert o.is_real("worm", "en")
    with pytest.raises(ConfigurationError):
        load_oracle("wordlist", tmp_path / "missing.txt")
