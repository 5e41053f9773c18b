"""
auto_break.py — automatic Caesar key recovery
---------------------------------------------
Tries every key in order and stops at the first candidate the chosen
validator accepts. Also owns the process-wide English word-list validator,
which is expensive enough to build that it is only ever built once.
"""

import logging
import threading

from cipher_tools.caesar import (
    ALPHA_LEN,
    PlaintextInvalidError,
    check_ascii,
    unshift,
)
from cipher_tools.frequency_analyser import ENGLISH_FREQ_TABLE
from cipher_tools.validation import DEFAULT_THRESHOLD, CribValidator, WordListValidator
from cipher_tools.wordlist import load_word_list

logger = logging.getLogger(__name__)

_english_validator = None
_init_lock = threading.Lock()
# held across set-threshold + search so callers can't interleave
_english_lock = threading.Lock()


# ===============================
#  SEARCH
# ===============================
def auto_decrypt_caesar(text: str, frequency_table, validator):
    """
    Return (key, plaintext) for the first key in 0..25 whose decryption
    the validator accepts. `key` is 0-indexed, so key + 1 keys were tried.

    `frequency_table` is accepted so both automatic modes share one call
    shape; the search itself never prunes with it.

    Raises NonAsciiError for non-ASCII input and PlaintextInvalidError
    once all 26 keys have been rejected.
    """
    check_ascii(text)
    for key in range(ALPHA_LEN):
        candidate = unshift(text, key)
        if validator.validate(candidate):
            logger.debug("%r accepted key %d after %d tries", validator, key, key + 1)
            return key, candidate

    logger.debug("%r rejected all %d keys", validator, ALPHA_LEN)
    raise PlaintextInvalidError("no key produced a valid plaintext")


# ===============================
#  SHARED ENGLISH VALIDATOR
# ===============================
def initialize_lexicon(path=None, threshold=DEFAULT_THRESHOLD):
    """
    Build the English word-list validator. Call this at startup; only the
    first call does any work, later ones return the existing validator.
    """
    global _english_validator
    if _english_validator is not None:
        return _english_validator

    with _init_lock:
        if _english_validator is None:
            word_list = load_word_list(path)
            _english_validator = WordListValidator(word_list, threshold)
            logger.info("English validator ready (%d words)", len(word_list))
    return _english_validator


def get_english_validator():
    # lazily initialise if nobody called initialize_lexicon()
    if _english_validator is None:
        return initialize_lexicon()
    return _english_validator


# ===============================
#  DRIVERS
# ===============================
def decrypt_auto_crib(text: str, crib: str, frequency_table=ENGLISH_FREQ_TABLE):
    """Decrypt given a crib, a piece of text expected in the plaintext."""
    return auto_decrypt_caesar(text, frequency_table, CribValidator(crib))


def decrypt_auto_english(text: str, threshold: float, frequency_table=ENGLISH_FREQ_TABLE):
    """Decrypt by trying keys until at least `threshold` of the words are English."""
    validator = get_english_validator()
    with _english_lock:
        validator.threshold = threshold
        return auto_decrypt_caesar(text, frequency_table, validator)
