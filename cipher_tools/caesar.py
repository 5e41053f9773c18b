import logging

from cipher_tools.frequency_analyser import ENGLISH_FREQ_TABLE, rank_shifts

logger = logging.getLogger(__name__)

ALPHA_LEN = 26


class CaesarError(Exception):
    """Base class for errors returned by the Caesar engine."""


class NonAsciiError(CaesarError, ValueError):
    """The input text contained a character outside 7-bit ASCII."""


class PlaintextInvalidError(CaesarError):
    """No candidate key produced text the validator accepted."""


def normalize_key(key: int) -> int:
    return key % ALPHA_LEN


def check_ascii(text: str) -> None:
    if not text.isascii():
        raise NonAsciiError("input contains non-ASCII characters")


def shift(text: str, key: int) -> str:
    """
    Shift every letter of `text` forward by `key` places, preserving case.
    Anything that isn't an ASCII letter is passed through untouched.
    Raises NonAsciiError before doing any work if `text` isn't pure ASCII.
    """
    check_ascii(text)
    key = normalize_key(key)
    if key == 0:
        return text

    result = []
    for ch in text:
        if ch.isalpha():
            base = 'A' if ch.isupper() else 'a'
            result.append(chr((ord(ch) - ord(base) + key) % ALPHA_LEN + ord(base)))
        else:
            result.append(ch)
    return ''.join(result)


def unshift(text: str, key: int) -> str:
    return shift(text, -key)


# encoder-style names used by the web layer
caesar_encode = shift
caesar_decode = unshift


def caesar_break(text: str, table=ENGLISH_FREQ_TABLE):
    """
    Best guess without a validator: rank all 26 keys by chi-squared
    distance to `table` and return (key, plaintext) for the closest.
    """
    check_ascii(text)
    ranking = rank_shifts(text, table)
    best_key, best_score = ranking[0]
    logger.debug("caesar_break picked key %d (chi2=%.2f)", best_key, best_score)
    return best_key, unshift(text, best_key)
