"""Analytics configuration."""

from __future__ import annotations

from pydantic import Field, field_validator

from social_insights.analytics.types import Platform
from social_insights.common.config import BaseConfig


class AnalyticsConfig(BaseConfig):
    """Analytics aggregation configuration."""

    platforms: list[Platform] = Field(
        default_factory=lambda: list(Platform),
        description="Known platforms, reported even when they have no records",
        min_length=1,
    )
    top_posts_limit: int = Field(
        default=10,
        description="Default number of top posts to return",
        ge=1,
        le=1000,
    )

    @field_validator("platforms")
    @classmethod
    def dedupe_platforms(cls, v: list[Platform]) -> list[Platform]:
        return list(dict.fromkeys(v))
