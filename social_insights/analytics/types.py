"""Analytics record and summary types."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Platform(str, Enum):
    """Supported social platforms."""

    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    THREADS = "threads"


class AnalyticsRecord(BaseModel):
    """One measurement row for a published post.

    Numeric fields are passed through as reported; `engagement_rate` is
    supplied by the producer and never derived here.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    post_id: str = Field(..., description="Identifier of the measured post")
    platform: str = Field(..., description="Platform the post was published on")
    reach: int = Field(..., description="Unique accounts reached")
    impressions: int = Field(..., description="Total impressions")
    likes: int = Field(..., description="Like count")
    comments: int = Field(..., description="Comment count")
    shares: int = Field(..., description="Share count")
    clicks: int = Field(..., description="Click count")
    engagement_rate: float = Field(..., description="Engagement rate in percent")
    sentiment_score: float | None = Field(
        default=None,
        description="Sentiment score of the post, if scored",
    )
    recorded_at: dt.datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("recorded_at", "recordedAt", "created_at", "createdAt"),
        description="When the measurement was taken",
    )
    content: str | None = Field(
        default=None,
        description="Text of the measured post",
    )

    @field_validator("platform")
    @classmethod
    def normalize_platform(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def engagement(self) -> int:
        """Likes, comments and shares."""
        return self.likes + self.comments + self.shares


class PlatformSummary(BaseModel):
    """Aggregated metrics for one platform."""

    model_config = ConfigDict(frozen=True)

    reach: int = 0
    posts: int = 0
    engagement: int = 0

    def __add__(self, other: PlatformSummary) -> PlatformSummary:
        if not isinstance(other, PlatformSummary):
            return NotImplemented
        return PlatformSummary(
            reach=self.reach + other.reach,
            posts=self.posts + other.posts,
            engagement=self.engagement + other.engagement,
        )


class AnalyticsOverview(BaseModel):
    """Per-platform summaries plus their element-wise total."""

    model_config = ConfigDict(frozen=True)

    platforms: dict[str, PlatformSummary] = Field(default_factory=dict)
    total: PlatformSummary = Field(default_factory=PlatformSummary)

    def __getitem__(self, platform: str | Platform) -> PlatformSummary:
        key = platform.value if isinstance(platform, Platform) else platform
        if key == "total":
            return self.total
        return self.platforms[key]

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Flatten into `{platform: summary, ..., "total": summary}`."""
        result = {name: summary.model_dump() for name, summary in self.platforms.items()}
        result["total"] = self.total.model_dump()
        return result


class AnalyticsTrend(BaseModel):
    """Daily roll-up of one platform's records."""

    model_config = ConfigDict(frozen=True)

    platform: str
    date: dt.date
    total_reach: int
    total_engagement: int
    total_posts: int
    avg_engagement_rate: float


class BrandVoiceProfile(BaseModel):
    """Tone and style a brand writes its posts in."""

    model_config = ConfigDict(frozen=True)

    id: str
    tone: str = ""
    style: str = ""

    def matches(self, content: str | None) -> bool:
        """Whether the post text mentions the profile's tone or style."""
        if not content:
            return False
        text = content.lower()
        return any(term and term.lower() in text for term in (self.tone, self.style))


class BrandVoicePerformance(BaseModel):
    """Performance of the posts written in one brand voice."""

    model_config = ConfigDict(frozen=True)

    voice_profile_id: str
    tone: str
    style: str
    post_count: int
    engagement_rate: float
    sentiment_score: float
