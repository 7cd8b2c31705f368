"""Sentiment configuration."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from social_insights.common.config import BaseConfig

POSITIVE_WORDS = (
    "love", "great", "amazing", "awesome", "excellent", "fantastic", "wonderful",
    "perfect", "best", "good", "nice", "helpful", "useful", "brilliant", "outstanding",
    "impressive", "incredible", "superb", "terrific", "fabulous", "marvelous",
    "thank", "thanks", "appreciate", "grateful", "happy", "excited", "thrilled",
    "satisfied", "pleased", "delighted", "joy", "beautiful", "stunning",
)  # fmt: skip

NEGATIVE_WORDS = (
    "hate", "terrible", "awful", "horrible", "bad", "worst", "disappointing",
    "frustrated", "angry", "upset", "sad", "disappointed", "annoyed", "irritated",
    "disgusting", "ridiculous", "stupid", "useless", "waste", "problem", "issue",
    "broken", "failed", "wrong", "error", "mistake", "poor", "cheap", "expensive",
    "difficult", "hard", "complicated", "confusing", "disagree", "dislike",
)  # fmt: skip

NEUTRAL_WORDS = (
    "okay", "fine", "alright", "maybe", "perhaps", "possibly", "might", "could",
    "would", "should", "think", "believe", "feel", "seem", "appear", "look",
    "sound", "taste", "smell", "touch", "see", "hear", "know", "understand",
)  # fmt: skip


class LexiconConfig(BaseConfig):
    """Word lists for lexicon based scoring."""

    positive_words: frozenset[str] = Field(
        default=frozenset(POSITIVE_WORDS),
        description="Words counted as positive",
    )
    negative_words: frozenset[str] = Field(
        default=frozenset(NEGATIVE_WORDS),
        description="Words counted as negative",
    )
    neutral_words: frozenset[str] = Field(
        default=frozenset(NEUTRAL_WORDS),
        description="Words counted as neutral",
    )

    @field_validator("positive_words", "negative_words", "neutral_words", mode="after")
    @classmethod
    def lowercase(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(word.strip().lower() for word in v if word.strip())

    @model_validator(mode="after")
    def check_disjoint(self) -> LexiconConfig:
        overlap = (
            (self.positive_words & self.negative_words)
            | (self.positive_words & self.neutral_words)
            | (self.negative_words & self.neutral_words)
        )
        if overlap:
            raise ValueError(f"Lexicons must be disjoint, shared words: {sorted(overlap)}")
        return self


class SentimentConfig(BaseConfig):
    """Sentiment scorer configuration."""

    lexicon: LexiconConfig = Field(
        default_factory=LexiconConfig,
        description="Lexicon word lists",
    )
    timeout: float = Field(
        default=5.0,
        description="Model request timeout in seconds",
        gt=0,
        le=60,
    )
    cache_size: int = Field(
        default=1024,
        description="Cached model results, 0 disables caching",
        ge=0,
    )
    workers: int = Field(
        default=10,
        description="Maximum concurrent model requests",
        ge=1,
        le=50,
    )
