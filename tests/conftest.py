"""Pytest configuration."""

import sys

import path

sys.path.append(str(path.Path(__file__).parent.parent))

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from openai.types.chat import ChatCompletion, ChatCompletionMessage  # noqa: E402

from social_insights.analytics import (  # noqa: E402
    AnalyticsConfig,
    AnalyticsRecord,
    MetricsAggregator,
)
from social_insights.inference import InferenceClient, InferenceConfig  # noqa: E402
from social_insights.sentiment import LexiconSentimentScorer, SentimentConfig  # noqa: E402


def make_record(
    platform: str = "facebook",
    reach: int = 0,
    likes: int = 0,
    comments: int = 0,
    shares: int = 0,
    engagement_rate: float = 0.0,
    post_id: str = "post",
    recorded_at: datetime | None = None,
    sentiment_score: float | None = None,
    content: str | None = None,
) -> AnalyticsRecord:
    """Build a record with zeroed defaults for unused counters."""
    return AnalyticsRecord(
        post_id=post_id,
        platform=platform,
        reach=reach,
        impressions=reach,
        likes=likes,
        comments=comments,
        shares=shares,
        clicks=0,
        engagement_rate=engagement_rate,
        recorded_at=recorded_at,
        sentiment_score=sentiment_score,
        content=content,
    )


def make_completion(content: str | None) -> ChatCompletion:
    """Create a mock chat completion."""
    return ChatCompletion(
        id="test-id",
        model="gpt-4o-mini",
        object="chat.completion",
        created=1234567890,
        choices=[
            {
                "finish_reason": "stop",
                "index": 0,
                "message": ChatCompletionMessage(role="assistant", content=content),
            }
        ],
        usage={"total_tokens": 50, "prompt_tokens": 30, "completion_tokens": 20},
    )


@pytest.fixture
def record():
    """Record factory."""
    return make_record


@pytest.fixture
def aggregator() -> MetricsAggregator:
    return MetricsAggregator(AnalyticsConfig())


@pytest.fixture
def scorer() -> LexiconSentimentScorer:
    return LexiconSentimentScorer(SentimentConfig())


@pytest.fixture
def inference_config() -> InferenceConfig:
    """Create a test inference config."""
    return InferenceConfig(
        api_key="test-key",
        api_base="https://test.example.com/v1",
        engine="gpt-4o-mini",
    )


@pytest.fixture
async def inference_client(inference_config):
    """Inference client, closed after the test."""
    client = InferenceClient(inference_config)
    yield client
    await client.__aexit__(None, None, None)
