"""Root configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field, model_validator

from social_insights.analytics.config import AnalyticsConfig
from social_insights.common.config import BaseConfig, LoggingConfig
from social_insights.inference.config import InferenceConfig
from social_insights.sentiment.config import SentimentConfig


class RootConfig(BaseConfig):
    """Root configuration."""

    analytics: AnalyticsConfig = Field(
        default_factory=AnalyticsConfig,
        description="Analytics aggregation configuration",
    )
    sentiment: SentimentConfig = Field(
        default_factory=SentimentConfig,
        description="Sentiment scoring configuration",
    )
    inference: InferenceConfig | None = Field(
        default=None,
        description="Model-backed sentiment configuration",
    )
    logging: LoggingConfig | None = Field(
        default=None,
        description="Logging configuration",
    )

    @model_validator(mode="after")
    def setup_logging(self) -> RootConfig:
        """Apply logging configuration once validated."""
        if self.logging:
            self.logging.apply()
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> RootConfig:
        """Load configuration from a YAML file."""
        with open(path) as f:
            return cls.model_validate(yaml.safe_load(f) or {})
