"""
Lexicon-based sentiment calculator.

Sums lexicon scores for every whitespace-separated token in a tweet,
rounds the sum half-up to one decimal place and classifies the result.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping
import bittensor as bt

from lexisent.analyser.lexicon.fingerprint import fingerprint, normalize_word
from lexisent.analyser.utils.config import SCORE_DECIMAL_PLACES
from .models import LABEL_STYLES, ScoredResult, SentimentLabel

_TOKEN_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")


def round_half_up(value: float, places: int = SCORE_DECIMAL_PLACES) -> float:
    """
    Round to a fixed number of decimal places, ties away from zero.

    The value goes through its shortest repr so that 0.05 rounds to 0.1
    rather than following its binary expansion down to 0.0.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    rounded = float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    # -0.0 prints as "-0.0"; report it as plain zero
    return rounded + 0.0


class SentimentCalculator:
    """Scores tweets against a combined lexicon."""

    def __init__(self, lexicon: Mapping[int, float]):
        """
        Initialize calculator with a combined lexicon.

        Args:
            lexicon: Map of word fingerprint -> sentiment score
        """
        self.lexicon = lexicon

        bt.logging.debug(f"SentimentCalculator initialized: {len(lexicon)} lexicon entries")

    def raw_score(self, text: str) -> float:
        """
        Unrounded sum of lexicon scores; unknown words count as 0.0.

        Tokens are separated by ASCII whitespace only, so a non-breaking
        space stays inside its token. Tokens with no letters or digits
        (dashes, ellipses, emoji) are not looked up.
        """
        score = 0.0
        for token in _TOKEN_SEPARATOR.split(text):
            word = normalize_word(token)
            if word:
                score += self.lexicon.get(fingerprint(word), 0.0)
        return score

    def calculate_score(self, text: str) -> float:
        """Sentiment score rounded half-up to SCORE_DECIMAL_PLACES."""
        return round_half_up(self.raw_score(text))

    def score_tweet(self, index: int, text: str) -> ScoredResult:
        """
        Score a single tweet.

        Args:
            index: Position of the tweet in the submitted sequence
            text: Tweet text

        Returns:
            ScoredResult with rounded score, label and rendering style
        """
        score = self.calculate_score(text)
        label = SentimentLabel.from_score(score)

        return ScoredResult(
            index=index,
            text=text,
            score=score,
            label=label,
            style=LABEL_STYLES[label]
        )
