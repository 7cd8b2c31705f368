"""Analytics aggregation."""

from .aggregator import MetricsAggregator
from .config import AnalyticsConfig
from .io import overview_to_table, read_records, records_from_table
from .types import (
    AnalyticsOverview,
    AnalyticsRecord,
    AnalyticsTrend,
    BrandVoicePerformance,
    BrandVoiceProfile,
    Platform,
    PlatformSummary,
)

__all__ = [
    "AnalyticsConfig",
    "AnalyticsOverview",
    "AnalyticsRecord",
    "AnalyticsTrend",
    "BrandVoicePerformance",
    "BrandVoiceProfile",
    "MetricsAggregator",
    "Platform",
    "PlatformSummary",
    "overview_to_table",
    "read_records",
    "records_from_table",
]
