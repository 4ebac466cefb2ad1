"""Data models for tweet scoring."""

from dataclasses import dataclass
from enum import Enum

from lexisent.analyser.utils.config import RESULT_SEPARATOR


class SentimentLabel(str, Enum):
    """Sentiment classification of a scored tweet."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @classmethod
    def from_score(cls, score: float) -> 'SentimentLabel':
        """Classify a (rounded) score: > 0 positive, < 0 negative, else neutral."""
        if score > 0:
            return cls.POSITIVE
        if score < 0:
            return cls.NEGATIVE
        return cls.NEUTRAL


# Rich styles used when rendering results to the console
LABEL_STYLES = {
    SentimentLabel.POSITIVE: "bold green",
    SentimentLabel.NEGATIVE: "bold red",
    SentimentLabel.NEUTRAL: "bold yellow",
}


class BatchState(Enum):
    """Lifecycle of one scoring batch."""
    IDLE = "idle"
    DISPATCHING = "dispatching"
    AWAITING_COMPLETION = "awaiting_completion"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ScoredResult:
    """Sentiment result for a single tweet."""
    index: int
    text: str
    score: float
    label: SentimentLabel
    style: str

    @property
    def formatted(self) -> str:
        """Output block for this tweet."""
        return (
            f"Tweet: {self.text}\n"
            f"Sentiment: {self.label.value} {self.score}\n"
            f"{RESULT_SEPARATOR}"
        )
