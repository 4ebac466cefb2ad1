"""
Tweet scoring module for lexicon-based sentiment analysis.

Reads tweets from files, scores each one concurrently against a combined
lexicon and returns the results in input order.
"""

from .models import BatchState, ScoredResult, SentimentLabel
from .sentiment_calculator import SentimentCalculator, round_half_up
from .record_reader import read_records
from .tweet_scorer import TweetScorer, score_records

__all__ = [
    'BatchState',
    'ScoredResult',
    'SentimentLabel',
    'SentimentCalculator',
    'round_half_up',
    'read_records',
    'TweetScorer',
    'score_records'
]
