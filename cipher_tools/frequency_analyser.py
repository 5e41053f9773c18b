import json
import math
import string
from collections import Counter
from types import MappingProxyType

LETTERS = string.ascii_lowercase

normal_distribution = {
    "a": 0.08167, "b": 0.01492, "c": 0.02782, "d": 0.04253,
    "e": 0.12702, "f": 0.02228, "g": 0.02015, "h": 0.06094,
    "i": 0.06966, "j": 0.00153, "k": 0.00772, "l": 0.04025,
    "m": 0.02406, "n": 0.06749, "o": 0.07507, "p": 0.01929,
    "q": 0.00095, "r": 0.05987, "s": 0.06327, "t": 0.09056,
    "u": 0.02758, "v": 0.00978, "w": 0.02360, "x": 0.00150,
    "y": 0.01974, "z": 0.00074
}

# shared read-only by every search
ENGLISH_FREQ_TABLE = MappingProxyType(normal_distribution)

SUM_TOLERANCE = 0.05


def load_frequency_table(path):
    """
    Load a letter -> frequency table from a JSON object file.

    The file must hold all 26 lowercase letters with non-negative numbers
    summing to roughly 1.0. Returns a read-only mapping.
    """
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: frequency table must be a JSON object")

    table = {}
    for letter, value in raw.items():
        letter = str(letter).lower()
        if letter not in LETTERS or len(letter) != 1:
            raise ValueError(f"{path}: unexpected key {letter!r}")
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"{path}: bad frequency for {letter!r}: {value!r}")
        table[letter] = float(value)

    missing = set(LETTERS) - set(table)
    if missing:
        raise ValueError(f"{path}: missing letters {''.join(sorted(missing))}")

    total = sum(table.values())
    if abs(total - 1.0) > SUM_TOLERANCE:
        raise ValueError(f"{path}: frequencies sum to {total:.3f}, expected ~1.0")

    return MappingProxyType({l: table[l] for l in LETTERS})


def letter_counts(text):
    """Counts of a..z in `text`, case-folded, as a 26-item list."""
    freq = Counter(ch for ch in text.lower() if ch in LETTERS)
    return [freq.get(l, 0) for l in LETTERS]


def _chi_squared_counts(obs, table):
    total = sum(obs)
    if total == 0:
        return math.inf
    chi2 = 0.0
    for o, l in zip(obs, LETTERS):
        e = table[l] * total
        if e > 0:
            chi2 += ((o - e) ** 2) / e
    return chi2


def chi_squared(text, table=ENGLISH_FREQ_TABLE):
    # Lower chi2 => closer to the reference distribution.
    return _chi_squared_counts(letter_counts(text), table)


def rank_shifts(text, table=ENGLISH_FREQ_TABLE):
    """
    Score every decryption key 0..25 against `table`.

    Decrypting with key k maps ciphertext letter i+k back to plaintext
    letter i, so the candidate's counts are just the ciphertext counts
    rotated. Returns [(key, chi2), ...] best first, ties to the lower key.
    """
    obs = letter_counts(text)
    scores = []
    for key in range(len(LETTERS)):
        rotated = obs[key:] + obs[:key]
        scores.append((key, _chi_squared_counts(rotated, table)))
    scores.sort(key=lambda x: (x[1], x[0]))
    return scores
