"""Analytics aggregation and sentiment scoring for social posts."""

from .analytics import AnalyticsRecord, MetricsAggregator, Platform
from .config import RootConfig
from .inference import InferenceClient, ServiceUnavailable
from .sentiment import LexiconSentimentScorer, SentimentResult

__all__ = [
    "AnalyticsRecord",
    "InferenceClient",
    "LexiconSentimentScorer",
    "MetricsAggregator",
    "Platform",
    "RootConfig",
    "SentimentResult",
    "ServiceUnavailable",
]
