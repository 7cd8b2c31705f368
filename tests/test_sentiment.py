"""Test lexicon sentiment scoring."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from social_insights.inference import ServiceUnavailable
from social_insights.sentiment import (
    LexiconConfig,
    LexiconSentimentScorer,
    SentimentCache,
    SentimentConfig,
    SentimentLabel,
    SentimentResult,
)

MODEL_RESULT = SentimentResult(sentiment=SentimentLabel.POSITIVE, score=0.9, confidence=0.95)


def test_empty_text_is_neutral(scorer):
    result = scorer.analyze("")

    assert result == SentimentResult(sentiment="neutral", score=0, confidence=0)


def test_whitespace_only_is_neutral(scorer):
    assert scorer.analyze("   \n\t ") == SentimentResult.neutral()


def test_positive_text(scorer):
    result = scorer.analyze("I love this, it is amazing and wonderful")

    assert result.sentiment is SentimentLabel.POSITIVE
    assert result.score > 0
    # 3 of 8 tokens
    assert result.score == 0.38
    assert result.confidence == 0.38


def test_negative_text(scorer):
    result = scorer.analyze("This is terrible and awful, I hate it")

    assert result.sentiment is SentimentLabel.NEGATIVE
    assert result.score < 0
    assert result.score == -0.38
    assert result.confidence == 0.38


def test_neutral_words(scorer):
    result = scorer.analyze("okay fine maybe")

    assert result.sentiment is SentimentLabel.NEUTRAL
    assert result.score == 0
    assert result.confidence == 1.0


def test_tie_falls_to_neutral(scorer):
    """Equal positive and negative counts are neutral."""
    result = scorer.analyze("good bad")

    assert result == SentimentResult(sentiment="neutral", score=0, confidence=0)


def test_positive_tied_with_neutral(scorer):
    result = scorer.analyze("good maybe")

    assert result.sentiment is SentimentLabel.NEUTRAL
    assert result.score == 0
    assert result.confidence == 0.5


def test_unmatched_tokens_dilute_score(scorer):
    result = scorer.analyze("great product, shipped quickly")

    assert result.sentiment is SentimentLabel.POSITIVE
    assert result.score == 0.25


def test_punctuation_and_case_stripped(scorer):
    result = scorer.analyze("GREAT!!! ...")

    # "..." is a token that matches nothing
    assert result.sentiment is SentimentLabel.POSITIVE
    assert result.score == 0.5


@pytest.mark.parametrize(
    ("text", "score"),
    [
        ("good a b c d e f g", 0.13),
        ("bad a b c d e f g", -0.13),
        ("bad awful good", -0.67),
    ],
)
def test_rounding_half_away_from_zero(scorer, text, score):
    assert scorer.analyze(text).score == score


def test_tokenize(scorer):
    assert scorer.tokenize("Don't STOP, me_now!") == ["dont", "stop", "me_now"]


def test_custom_lexicon():
    config = SentimentConfig(
        lexicon=LexiconConfig(
            positive_words={"Ship"},
            negative_words={"bug"},
            neutral_words={"meh"},
        )
    )
    scorer = LexiconSentimentScorer(config)

    assert scorer.analyze("ship ship bug").sentiment is SentimentLabel.POSITIVE
    assert scorer.analyze("love it").sentiment is SentimentLabel.NEUTRAL


def test_overlapping_lexicons_rejected():
    with pytest.raises(ValidationError, match="disjoint"):
        LexiconConfig(positive_words={"fine"}, negative_words={"bad"}, neutral_words={"fine"})


def test_default_lexicons_disjoint():
    lexicon = LexiconConfig()

    assert not lexicon.positive_words & lexicon.negative_words
    assert not lexicon.positive_words & lexicon.neutral_words
    assert not lexicon.negative_words & lexicon.neutral_words


def _mock_client(**kwargs) -> MagicMock:
    client = MagicMock()
    client.classify = AsyncMock(**kwargs)
    return client


@pytest.mark.asyncio
async def test_analyze_with_model_without_client(scorer):
    text = "I love this"

    assert await scorer.analyze_with_model(text) == scorer.analyze(text)


@pytest.mark.asyncio
async def test_analyze_with_model_uses_client():
    client = _mock_client(return_value=MODEL_RESULT)
    scorer = LexiconSentimentScorer.from_config({}, client=client)

    result = await scorer.analyze_with_model("a fine day", tone="casual")

    assert result == MODEL_RESULT
    client.classify.assert_awaited_once_with("a fine day", tone="casual", style=None)


@pytest.mark.asyncio
async def test_analyze_with_model_falls_back_on_service_error():
    client = _mock_client(side_effect=ServiceUnavailable("down"))
    scorer = LexiconSentimentScorer(SentimentConfig(), client=client)
    text = "This is terrible"

    result = await scorer.analyze_with_model(text)

    assert result == scorer.analyze(text)
    assert result.sentiment is SentimentLabel.NEGATIVE
    assert len(scorer.cache) == 0


@pytest.mark.asyncio
async def test_analyze_with_model_falls_back_on_timeout():
    async def slow_classify(text, tone=None, style=None):
        await asyncio.sleep(5)
        return MODEL_RESULT

    client = MagicMock()
    client.classify = slow_classify
    scorer = LexiconSentimentScorer(SentimentConfig(timeout=0.05), client=client)

    result = await scorer.analyze_with_model("okay fine")

    assert result == scorer.analyze("okay fine")


@pytest.mark.asyncio
async def test_analyze_with_model_caches_results():
    client = _mock_client(return_value=MODEL_RESULT)
    cache = SentimentCache(max_size=4)
    scorer = LexiconSentimentScorer(SentimentConfig(), client=client, cache=cache)

    first = await scorer.analyze_with_model("hello")
    second = await scorer.analyze_with_model("hello")

    assert first == second == MODEL_RESULT
    assert client.classify.await_count == 1
    assert "hello" in cache


@pytest.mark.asyncio
async def test_analyze_with_model_cache_disabled():
    client = _mock_client(return_value=MODEL_RESULT)
    scorer = LexiconSentimentScorer(SentimentConfig(cache_size=0), client=client)

    await scorer.analyze_with_model("hello")
    await scorer.analyze_with_model("hello")

    assert scorer.cache is None
    assert client.classify.await_count == 2


@pytest.mark.asyncio
async def test_analyze_batch_preserves_order():
    async def classify(text, tone=None, style=None):
        if text == "broken":
            raise ServiceUnavailable("malformed")
        return MODEL_RESULT

    client = MagicMock()
    client.classify = classify
    scorer = LexiconSentimentScorer(SentimentConfig(), client=client)

    results = await scorer.analyze_batch(["first", "broken", "last"])

    assert results[0] == MODEL_RESULT
    assert results[1] == scorer.analyze("broken")
    assert results[2] == MODEL_RESULT


@pytest.mark.asyncio
async def test_analyze_batch_limits_concurrent_requests():
    """Test no more than `workers` model requests are in flight at once."""
    in_flight = 0
    peak = 0

    async def classify(text, tone=None, style=None):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return MODEL_RESULT

    client = MagicMock()
    client.classify = classify
    scorer = LexiconSentimentScorer(SentimentConfig(workers=3, cache_size=0), client=client)

    results = await scorer.analyze_batch([f"post {i}" for i in range(50)])

    assert results == [MODEL_RESULT] * 50
    assert 0 < peak <= 3


def test_workers_must_be_positive():
    with pytest.raises(ValidationError):
        SentimentConfig(workers=0)


def test_cache_evicts_oldest():
    cache = SentimentCache(max_size=2)
    cache.put("a", MODEL_RESULT)
    cache.put("b", MODEL_RESULT)
    cache.put("c", MODEL_RESULT)

    assert len(cache) == 2
    assert cache.get("a") is None
    assert cache.get("c") == MODEL_RESULT

    cache.clear()
    assert len(cache) == 0


def test_cache_rejects_invalid_size():
    with pytest.raises(ValueError):
        SentimentCache(max_size=0)
