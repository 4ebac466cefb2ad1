"""
Lexicon file parser.

Parses one `word,score` lexicon file into a fingerprint -> score table.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union
import bittensor as bt

from lexisent.analyser.utils.error_handling import ParseError
from .fingerprint import fingerprint, normalize_word


def parse_lexicon_line(
    line: str,
    file_path: Union[str, Path],
    line_number: int
) -> Optional[Tuple[int, float]]:
    """
    Parse a single lexicon line.

    Args:
        line: Raw line without its terminator
        file_path: File the line came from (for error reporting)
        line_number: 1-based line number (for error reporting)

    Returns:
        (fingerprint, score) tuple, or None if the line is not a word,score
            pair or the word has no letters or digits

    Raises:
        ParseError: If the score field is not a floating-point literal
    """
    fields = line.split(",")
    # Trailing empty fields do not count: "good,1.0," is a pair, "word," is not
    while fields and fields[-1] == "":
        fields.pop()
    if len(fields) != 2:
        return None

    word = normalize_word(fields[0].strip())
    if not word:
        return None
    key = fingerprint(word)

    try:
        score = float(fields[1].strip())
    except ValueError:
        raise ParseError(file_path, line_number, line) from None

    return key, score


def parse_lexicon_file(file_path: Union[str, Path]) -> Dict[int, float]:
    """
    Parse a lexicon file into a fingerprint -> score table.

    Lines that do not split into exactly two comma-separated fields are
    skipped. A repeated word overwrites the earlier score (last line wins).

    Args:
        file_path: Path to the lexicon file

    Returns:
        Dict mapping word fingerprint to score for this file alone

    Raises:
        ParseError: On the first line whose score cannot be parsed
        OSError: If the file cannot be opened
    """
    lexicon: Dict[int, float] = {}
    skipped = 0

    with open(file_path, 'r', encoding='utf-8') as f:
        for line_number, raw_line in enumerate(f, 1):
            entry = parse_lexicon_line(raw_line.rstrip('\r\n'), file_path, line_number)
            if entry is None:
                skipped += 1
                continue
            key, score = entry
            lexicon[key] = score

    bt.logging.debug(
        f"Parsed {len(lexicon)} lexicon entries from {file_path}"
        + (f" ({skipped} malformed lines skipped)" if skipped else "")
    )

    return lexicon
