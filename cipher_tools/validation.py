"""
Validators decide whether a decryption candidate looks like plaintext.

Every validator answers `validate(text) -> bool`; `score(text)` gives the
confidence behind that answer where the validator has one.
"""

import math
import re
from abc import ABC, abstractmethod

from cipher_tools.wordlist import WordList

WORD_RE = re.compile(r"[A-Za-z]+")

DEFAULT_THRESHOLD = 0.7


class Validator(ABC):

    @abstractmethod
    def validate(self, text: str) -> bool:
        ...

    def score(self, text: str) -> float:
        return 1.0 if self.validate(text) else 0.0


class CribValidator(Validator):
    """Accepts a candidate iff it contains the known plaintext (case-sensitive)."""

    def __init__(self, crib: str):
        self.crib = crib

    def validate(self, text: str) -> bool:
        return self.crib in text

    def __repr__(self):
        return f"CribValidator({self.crib!r})"


def clamp_threshold(value) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError("threshold must be a number between 0 and 1")
    return min(1.0, max(0.0, value))


class WordListValidator(Validator):
    """
    Accepts a candidate when at least `threshold` of its words are in the
    word list. Text without any words is always rejected.
    """

    def __init__(self, word_list: WordList, threshold: float = DEFAULT_THRESHOLD):
        self.word_list = word_list
        self._threshold = clamp_threshold(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    @threshold.setter
    def threshold(self, value):
        # out-of-range values are clamped into [0, 1]
        self._threshold = clamp_threshold(value)

    def set_threshold(self, value) -> None:
        self.threshold = value

    def score(self, text: str) -> float:
        words = WORD_RE.findall(text)
        if not words:
            return 0.0
        found = sum(1 for w in words if self.word_list.contains(w))
        return found / len(words)

    def validate(self, text: str) -> bool:
        if not WORD_RE.search(text):
            return False
        return self.score(text) >= self._threshold

    def __repr__(self):
        return f"WordListValidator({self.word_list!r}, threshold={self._threshold})"
