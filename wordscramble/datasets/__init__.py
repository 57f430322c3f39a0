from .validator import validate_wordlists, pretty_summary
from .io import ConfigurationError, read_words, write_words
from .wordlist import default_dictionary_path, default_pool_path, load_pool

__all__ = [
    "validate_wordlists",
    "pretty_summary",
    "ConfigurationError",
    "read_words",
    "write_words",
    "default_dictionary_path",
    "default_pool_path",
    "load_pool",
]
