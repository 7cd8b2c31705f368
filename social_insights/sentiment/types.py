from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SentimentLabel(str, Enum):
    """Coarse sentiment classes."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SentimentResult(BaseModel):
    """Sentiment analysis result."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    sentiment: SentimentLabel = Field(
        ...,
        description="Sentiment class",
    )
    score: float = Field(
        ...,
        description="Sentiment score",
        ge=-1.0,
        le=1.0,
    )
    confidence: float = Field(
        ...,
        description="Analysis confidence",
        ge=0.0,
        le=1.0,
    )

    @classmethod
    def neutral(cls) -> SentimentResult:
        return cls(sentiment=SentimentLabel.NEUTRAL, score=0.0, confidence=0.0)

    @staticmethod
    def get_prompt() -> str:
        return (
            "You are a social media expert tasked with analyzing the sentiment of social media posts. "
            "Analyze the sentiment of the following text and respond with a JSON object "
            'containing the keys "sentiment", "score" and "confidence". '
            'The sentiment must be one of "positive", "negative" or "neutral". '
            "The sentiment score ranges from -1 to 1, where -1 indicates a very negative sentiment, "
            "0 indicates neutral sentiment, and 1 indicates a very positive sentiment. "
            "The confidence ranges from 0 to 1, where 0 indicates no confidence, and 1 indicates very high confidence. "
            "Optional tone and style hints describe the brand voice the text was written in."
        )
