import logging
import os

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_WORDLIST_PATH = os.path.join(BASE_DIR, "data", "english_words.txt")


class WordList:
    """An immutable set of lowercase words with case-insensitive lookup."""

    def __init__(self, words):
        self._words = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )

    @classmethod
    def from_text(cls, text: str) -> "WordList":
        """One word per line; blank lines and `#` comments are skipped."""
        return cls(
            line for line in text.splitlines()
            if not line.lstrip().startswith("#")
        )

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def __contains__(self, word):
        return isinstance(word, str) and self.contains(word)

    def __len__(self):
        return len(self._words)

    def __repr__(self):
        return f"WordList({len(self._words)} words)"


def load_word_list(path=None) -> WordList:
    path = path or DEFAULT_WORDLIST_PATH
    with open(path, encoding="utf-8") as fh:
        word_list = WordList.from_text(fh.read())
    logger.info("Loaded %d words from %s", len(word_list), path)
    return word_list
