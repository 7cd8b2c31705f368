"""Inference configuration."""

from __future__ import annotations

import os

from pydantic import Field, model_validator

from social_insights.common.config import BaseConfig
from social_insights.inference.types import Provider


class InferenceConfig(BaseConfig):
    """Inference configuration."""

    # basic
    provider: Provider = Field(
        default=Provider.OPENAI,
        description="Inference provider",
    )
    version: str = Field(
        default="2024-08-01-preview",
        description="API version, azure only",
    )
    deployment: str = Field(
        default="gpt-4o-mini",
        description="API deployment, azure only",
    )
    engine: str = Field(
        default="gpt-4o-mini",
        description="Model name",
    )

    # creds
    api_key: str = Field(
        default=...,
        description="API key",
    )
    api_base: str = Field(
        default=...,
        description="API base URL",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_credentials(cls, values: dict) -> dict:
        values = dict(values or {})
        api_key = values.get("api_key") or os.getenv("OPENAI_API_KEY")
        api_base = values.get("api_base") or os.getenv("OPENAI_API_BASE")

        if not api_key:
            raise ValueError("OPENAI_API_KEY must be set")
        if not api_base:
            raise ValueError("OPENAI_API_BASE must be set")

        values["api_key"] = api_key
        values["api_base"] = api_base
        return values

    # inference
    temperature: float = Field(
        default=0.0,
        description="Sampling temperature",
        ge=0.0,
        le=1.0,
    )
    max_tokens: int | None = Field(
        default=100,
        description="Maximum number of tokens to generate",
        ge=1,
        le=16384,
    )
