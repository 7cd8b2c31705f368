"""Model-backed inference."""

from .client import InferenceClient
from .config import InferenceConfig
from .types import Provider, ServiceUnavailable

__all__ = ["InferenceClient", "InferenceConfig", "Provider", "ServiceUnavailable"]
