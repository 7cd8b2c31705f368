"""Inference types."""

from __future__ import annotations

from enum import Enum


class Provider(str, Enum):
    """Supported inference providers."""

    AZURE = "azure"
    OPENAI = "openai"


class ServiceUnavailable(Exception):
    """The external model service failed, timed out or answered malformed."""
