"""Sentiment scoring."""

from .cache import SentimentCache
from .config import LexiconConfig, SentimentConfig
from .lexicon import LexiconSentimentScorer
from .types import SentimentLabel, SentimentResult

__all__ = [
    "LexiconConfig",
    "LexiconSentimentScorer",
    "SentimentCache",
    "SentimentConfig",
    "SentimentLabel",
    "SentimentResult",
]
