"""
Lexicon loading for sentiment scoring.

Parses `word,score` lexicon files and merges them into one combined
fingerprint -> score table.
"""

from .fingerprint import fingerprint, normalize_word, word_fingerprint
from .lexicon_parser import parse_lexicon_file, parse_lexicon_line
from .lexicon_loader import (
    LexiconAccumulator,
    load_lexicons,
    resolve_lexicon_files
)

__all__ = [
    'fingerprint',
    'normalize_word',
    'word_fingerprint',
    'parse_lexicon_file',
    'parse_lexicon_line',
    'LexiconAccumulator',
    'load_lexicons',
    'resolve_lexicon_files'
]
