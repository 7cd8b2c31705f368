"""Lexicon based sentiment scoring."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from social_insights.common.component import ComponentFactory
from social_insights.common.utils import round_half_away
from social_insights.inference.types import ServiceUnavailable
from social_insights.sentiment.cache import SentimentCache
from social_insights.sentiment.config import SentimentConfig
from social_insights.sentiment.types import SentimentLabel, SentimentResult

if TYPE_CHECKING:
    from social_insights.inference.client import InferenceClient

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^a-zA-Z0-9_]")


class LexiconSentimentScorer(ComponentFactory[SentimentConfig]):
    """Classifies text by counting words from fixed positive, negative and
    neutral word lists.

    A token is a whitespace separated chunk of the lowercased text with every
    character outside ``[a-zA-Z0-9_]`` removed. Each class rate is its match
    count over the total number of tokens. A class wins only when its rate is
    strictly greater than both others, so any tie yields neutral. Score and
    confidence are rounded to two decimals, halves away from zero.

    An ``InferenceClient`` may be injected to classify with a language model;
    see :meth:`analyze_with_model`.
    """

    _config_type = SentimentConfig

    def __init__(
        self,
        config: SentimentConfig,
        client: InferenceClient | None = None,
        cache: SentimentCache | None = None,
    ) -> None:
        super().__init__(config)
        self.client = client
        if cache is None and client is not None and config.cache_size:
            cache = SentimentCache(config.cache_size)
        self.cache = cache
        self._semaphore = asyncio.Semaphore(config.workers)

        lexicon = config.lexicon
        self.positive_words = lexicon.positive_words
        self.negative_words = lexicon.negative_words
        self.neutral_words = lexicon.neutral_words

    @staticmethod
    def tokenize(text: str) -> list[str]:
        return [_NON_WORD.sub("", token) for token in text.lower().split()]

    def analyze(self, text: str) -> SentimentResult:
        """Score text against the lexicons."""
        tokens = self.tokenize(text)
        total = len(tokens)
        if not total:
            return SentimentResult.neutral()

        positive = sum(token in self.positive_words for token in tokens) / total
        negative = sum(token in self.negative_words for token in tokens) / total
        neutral = sum(token in self.neutral_words for token in tokens) / total

        if positive > negative and positive > neutral:
            sentiment, score, confidence = SentimentLabel.POSITIVE, positive, positive
        elif negative > positive and negative > neutral:
            sentiment, score, confidence = SentimentLabel.NEGATIVE, -negative, negative
        else:
            sentiment, score, confidence = SentimentLabel.NEUTRAL, 0.0, neutral

        return SentimentResult(
            sentiment=sentiment,
            score=round_half_away(score),
            confidence=round_half_away(confidence),
        )

    async def analyze_with_model(
        self, text: str, tone: str | None = None, style: str | None = None
    ) -> SentimentResult:
        """Classify with the injected model, falling back to :meth:`analyze`.

        At most `workers` requests run at once, each bounded by the configured
        timeout. Service failures and timeouts are logged and never raised.
        """
        if self.client is None:
            return self.analyze(text)

        if self.cache is not None and (cached := self.cache.get(text)) is not None:
            return cached

        try:
            async with self._semaphore:
                result = await asyncio.wait_for(
                    self.client.classify(text, tone=tone, style=style),
                    timeout=self.config.timeout,
                )
        except ServiceUnavailable as e:
            logger.warning(f"Sentiment model unavailable, using lexicon: {e}")
            return self.analyze(text)
        except asyncio.TimeoutError:
            logger.warning(
                f"Sentiment model timed out after {self.config.timeout}s, using lexicon"
            )
            return self.analyze(text)

        if self.cache is not None:
            self.cache.put(text, result)
        return result

    async def analyze_batch(self, texts: Iterable[str]) -> list[SentimentResult]:
        """Classify texts concurrently, preserving order."""
        texts = list(texts)
        logger.info(f"Analyzing sentiment of {len(texts)} texts")
        return list(await asyncio.gather(*(self.analyze_with_model(text) for text in texts)))
