import pytest

from cipher_tools import auto_break
from cipher_tools.wordlist import WordList

LONG_PLAINTEXT = (
    "Cryptography is the study of secure communication in the presence "
    "of adversaries. Long before computers existed people invented ciphers "
    "to hide meaning from unauthorized readers. Some methods relied on simple "
    "substitution while others used transposition or periodic keys."
)


@pytest.fixture
def long_plaintext():
    return LONG_PLAINTEXT


@pytest.fixture
def small_word_list():
    return WordList(["the", "cat", "sat", "on", "mat", "quick", "brown", "fox"])


@pytest.fixture
def fresh_lexicon(monkeypatch):
    """Forget the shared English validator for the duration of a test."""
    monkeypatch.setattr(auto_break, "_english_validator", None)
