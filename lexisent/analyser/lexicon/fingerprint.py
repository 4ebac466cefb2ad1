"""Word normalization and fingerprinting for lexicon keys."""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

_HASH_MULTIPLIER = 31
_INT32_MASK = 0xFFFFFFFF


def normalize_word(word: str) -> str:
    """Strip every non-alphanumeric character and lowercase the rest."""
    return _NON_ALPHANUMERIC.sub("", word).lower()


def fingerprint(word: str) -> int:
    """
    Deterministic 32-bit polynomial hash of an already-normalized word.

    h = s[0]*31^(n-1) + s[1]*31^(n-2) + ... + s[n-1], wrapped to a signed
    32-bit integer. Stable across processes, unlike the built-in hash().
    Distinct words may collide; their lexicon scores are then conflated.

    Args:
        word: Normalized word

    Returns:
        Signed 32-bit integer fingerprint
    """
    h = 0
    for char in word:
        h = (h * _HASH_MULTIPLIER + ord(char)) & _INT32_MASK
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def word_fingerprint(word: str) -> int:
    """Normalize then fingerprint a raw token."""
    return fingerprint(normalize_word(word))
