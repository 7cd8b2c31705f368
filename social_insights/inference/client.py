"""OpenAI-compatible client for model-backed sentiment classification."""

from __future__ import annotations

import json
import logging

from openai import AsyncAzureOpenAI, AsyncOpenAI, OpenAIError
from openai.types.chat import ChatCompletion
from pydantic import ValidationError

from social_insights.common.component import ComponentFactory
from social_insights.inference.config import InferenceConfig
from social_insights.inference.types import Provider, ServiceUnavailable
from social_insights.sentiment.types import SentimentLabel, SentimentResult

logger = logging.getLogger(__name__)

_LABEL_SCORES = {
    SentimentLabel.POSITIVE: 1.0,
    SentimentLabel.NEGATIVE: -1.0,
    SentimentLabel.NEUTRAL: 0.0,
}


class InferenceClient(ComponentFactory[InferenceConfig]):
    """Classifies text with a chat completion model."""

    _config_type = InferenceConfig

    def __init__(self, config: InferenceConfig) -> None:
        """Initialize client."""
        super().__init__(config)
        self._client: AsyncOpenAI | None = None

        logger.debug(f"Inference client initialized for {config.provider.value}/{config.engine}")

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy load client."""
        if self._client is None:
            if self.config.provider is Provider.AZURE:
                self._client = AsyncAzureOpenAI(
                    azure_endpoint=self.config.api_base,
                    azure_deployment=self.config.deployment,
                    api_version=self.config.version,
                    api_key=self.config.api_key,
                    max_retries=0,
                )
            else:
                self._client = AsyncOpenAI(
                    api_key=self.config.api_key,
                    base_url=self.config.api_base,
                    max_retries=0,
                )
        return self._client

    @staticmethod
    def parse(content: str | None) -> SentimentResult:
        """Map a completion to a sentiment result.

        Accepts a JSON object with the result fields or a bare label.
        """
        if not content or not content.strip():
            raise ServiceUnavailable("Empty completion content")

        text = content.strip()
        try:
            label = SentimentLabel(text.strip("\"'. ").lower())
        except ValueError:
            pass
        else:
            return SentimentResult(sentiment=label, score=_LABEL_SCORES[label], confidence=1.0)

        try:
            return SentimentResult.model_validate(json.loads(text))
        except json.JSONDecodeError as e:
            raise ServiceUnavailable(f"Invalid JSON response: {text}") from e
        except ValidationError as e:
            raise ServiceUnavailable(f"Response does not match SentimentResult: {text}") from e

    async def classify(
        self, text: str, tone: str | None = None, style: str | None = None
    ) -> SentimentResult:
        """Classify a single text."""
        payload = {"text": text, "tone": tone, "style": style}
        messages = [
            {"role": "system", "content": SentimentResult.get_prompt()},
            {
                "role": "user",
                "content": json.dumps(
                    {k: v for k, v in payload.items() if v is not None}, ensure_ascii=True
                ),
            },
        ]
        logger.debug(f"Processing messages: {json.dumps(messages, indent=2)}")

        try:
            completion: ChatCompletion = await self.client.chat.completions.create(
                messages=messages,
                model=self.config.engine,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                n=1,
            )
        except OpenAIError as e:
            raise ServiceUnavailable(f"Model request failed: {e}") from e

        if not completion.choices:
            raise ServiceUnavailable("No completion choices returned")

        content = completion.choices[0].message.content
        logger.debug(f"Completion content: {content}")
        return self.parse(content)

    async def close(self) -> None:
        """Close client."""
        if self._client:
            try:
                await self._client.close()
            except Exception as e:
                logger.error(f"Error closing client: {e}")
            finally:
                self._client = None

    async def __aenter__(self) -> InferenceClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, cleanup resources."""
        await self.close()
